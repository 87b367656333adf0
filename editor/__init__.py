"""
editor — operacje edycyjne wysokiego poziomu na dokumencie TMS.

Moduły:
  plu      — find_plu, update_plu_field, add_plu, delete_plu,
             next_available_plu_id, search_plu
  keyboard — get_key_mapping, assign_plu_to_key, clear_key, layer_grid,
             assigned_key_count
  summary  — summarize(doc) -> DocumentSummary
"""

from .plu import (
    find_plu,
    find_plu_row,
    update_plu_field,
    add_plu,
    delete_plu,
    next_available_plu_id,
    search_plu,
)
from .keyboard import (
    find_key_row,
    get_key_mapping,
    assign_plu_to_key,
    clear_key,
    layer_grid,
    assigned_key_count,
)
from .summary import DocumentSummary, SectionSummary, summarize

__all__ = [
    "find_plu",
    "find_plu_row",
    "update_plu_field",
    "add_plu",
    "delete_plu",
    "next_available_plu_id",
    "search_plu",
    "find_key_row",
    "get_key_mapping",
    "assign_plu_to_key",
    "clear_key",
    "layer_grid",
    "assigned_key_count",
    "DocumentSummary",
    "SectionSummary",
    "summarize",
]
