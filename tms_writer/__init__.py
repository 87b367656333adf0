"""
tms_writer — mutacje dokumentu TMS, serializacja i weryfikacja round-trip.

Interfejs publiczny:
    serialize(doc) -> bytes
    update_field, mutate_field, append_row, remove_row, create_plu_row
    verify_round_trip(original, output) -> RoundTripResult
    diff_lines(original, output) -> list[LineDiff]

Typowe użycie:
    doc = parse(data)
    mutate_field(doc, "PLU", 0, PluField.PRICE, "750,0")
    out = serialize(doc)
    assert not verify_round_trip(data, out).match
"""

from .writer import serialize
from .mutations import (
    update_field,
    mutate_field,
    append_row,
    remove_row,
    create_plu_row,
)
from .verify import (
    RoundTripResult,
    LineDiff,
    verify_round_trip,
    diff_lines,
    hex_context,
)

__all__ = [
    "serialize",
    "update_field",
    "mutate_field",
    "append_row",
    "remove_row",
    "create_plu_row",
    "RoundTripResult",
    "LineDiff",
    "verify_round_trip",
    "diff_lines",
    "hex_context",
]
