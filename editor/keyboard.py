"""
editor/keyboard.py — mapowanie klawiszy wagi na PLU (sekcja SCP).

Klawiatura ma 3 warstwy (0-2) po 40 klawiszy fizycznych; indeksy 41-48
to sloty bez klawisza. Wiersze SCP są adresowane parą (warstwa, klawisz),
nie pozycją w sekcji.
"""

from __future__ import annotations

import logging

from data_model.documents import Document, Row
from data_model.errors import RecordReferenceError
from data_model.field_map import SCP, ScpField
from data_model.records import ScpEntry
from tms_parser.extract import extract_scp
from tms_writer.mutations import update_field
from validator import validate_key

from .plu import find_plu

logger = logging.getLogger(__name__)


def find_key_row(doc: Document, layer: int, key_index: int) -> tuple[int, Row]:
    section = doc.require_section(SCP)
    layer_s, key_s = str(layer), str(key_index)
    for i, row in enumerate(section.rows):
        if row.get(ScpField.LAYER) == layer_s and row.get(ScpField.KEY_INDEX) == key_s:
            return i, row
    raise RecordReferenceError(f"Brak wpisu SCP dla warstwy {layer}, klawisza {key_index}.")


def get_key_mapping(doc: Document, layer: int, key_index: int) -> ScpEntry | None:
    for entry in extract_scp(doc):
        if entry.layer == layer and entry.key_index == key_index:
            return entry
    return None


def assign_plu_to_key(doc: Document, layer: int, key_index: int, plu_id: int) -> ScpEntry:
    """Przypisuje PLU do klawisza; plu_id=0 czyści przypisanie."""
    validate_key(layer, key_index, plu_id).raise_if_invalid()
    if plu_id != 0 and find_plu(doc, plu_id) is None:
        raise RecordReferenceError(f"Brak PLU o identyfikatorze {plu_id}.")

    index, row = find_key_row(doc, layer, key_index)
    update_field(row, ScpField.PLU_ID, str(plu_id))
    logger.info("SCP L%d/K%d ← PLU %d", layer, key_index, plu_id)
    return ScpEntry(row_index=index, layer=layer, key_index=key_index, plu_id=plu_id)


def clear_key(doc: Document, layer: int, key_index: int) -> ScpEntry:
    return assign_plu_to_key(doc, layer, key_index, 0)


def layer_grid(doc: Document, layer: int) -> dict[int, ScpEntry]:
    """Wpisy jednej warstwy, kluczowane indeksem klawisza."""
    return {e.key_index: e for e in extract_scp(doc) if e.layer == layer}


def assigned_key_count(doc: Document) -> int:
    """Liczba klawiszy fizycznej siatki (wszystkie warstwy) z przypisanym PLU."""
    return sum(1 for e in extract_scp(doc) if e.is_assigned and e.is_grid_key)
