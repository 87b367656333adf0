"""
editor/plu.py — operacje na PLU adresowane identyfikatorem.

Każda funkcja przyjmuje jawny uchwyt Document (brak globalnego „bieżącego
dokumentu”). Wartości są walidowane przed zapisem — przy błędzie dokument
pozostaje bez zmian.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from data_model.documents import Document, Row
from data_model.errors import RecordReferenceError
from data_model.field_map import PLU, PluField
from data_model.records import NewPluParams, PluRecord
from tms_parser.extract import extract_plu, plu_record
from tms_writer.mutations import append_row, create_plu_row, remove_row, update_field
from validator import normalize_value, validate_new_plu, validate_plu_field

logger = logging.getLogger(__name__)

_EDITABLE_INDEX: dict[str, PluField] = {
    "name":       PluField.NAME,
    "price":      PluField.PRICE,
    "unit_type":  PluField.UNIT_TYPE,
    "department": PluField.DEPARTMENT,
}


# ---------------------------------------------------------------------------
# Wyszukiwanie
# ---------------------------------------------------------------------------

def find_plu_row(doc: Document, plu_id: int) -> tuple[int, Row]:
    """(indeks, wiersz) PLU o danym id; RecordReferenceError gdy brak."""
    section = doc.require_section(PLU)
    key = str(plu_id)
    for i, row in enumerate(section.rows):
        if row.get(PluField.ID) == key:
            return i, row
    raise RecordReferenceError(f"Brak PLU o identyfikatorze {plu_id}.")


def find_plu(doc: Document, plu_id: int) -> PluRecord | None:
    try:
        index, row = find_plu_row(doc, plu_id)
    except RecordReferenceError:
        return None
    return plu_record(row, index)


def next_available_plu_id(doc: Document) -> int:
    """Najmniejszy dodatni identyfikator, którego nie używa żadne PLU."""
    used = {p.id for p in extract_plu(doc)}
    plu_id = 1
    while plu_id in used:
        plu_id += 1
    return plu_id


def search_plu(records: Iterable[PluRecord], query: str) -> list[PluRecord]:
    """Filtr po nazwie, id i krótkim kodzie (bez rozróżniania wielkości liter)."""
    q = query.strip().lower()
    if not q:
        return list(records)
    return [
        p for p in records
        if q in p.name.lower()
        or q in str(p.id)
        or q in (p.short_code or "").lower()
    ]


# ---------------------------------------------------------------------------
# Edycja
# ---------------------------------------------------------------------------

def update_plu_field(doc: Document, plu_id: int, field: str, value: str | int) -> PluRecord:
    """Zmienia name / price / unit_type / department jednego PLU."""
    validate_plu_field(field, value).raise_if_invalid()
    index, row = find_plu_row(doc, plu_id)
    update_field(row, _EDITABLE_INDEX[field], normalize_value(field, value))
    logger.info("PLU %s: %s ← %r", plu_id, field, value)
    return plu_record(row, index)


def add_plu(doc: Document, params: NewPluParams) -> PluRecord:
    """Dopisuje nowe PLU (format LONG) na koniec sekcji PLU."""
    doc.require_section(PLU)
    existing = (p.id for p in extract_plu(doc))
    validate_new_plu(params, existing).raise_if_invalid()

    params = NewPluParams(
        id=int(params.id),
        name=params.name,
        price=normalize_value("price", params.price),
        unit_type=int(params.unit_type),
        department=int(params.department),
    )
    row = create_plu_row(params)
    index = append_row(doc, PLU, row)
    logger.info("PLU %s: dodano (%s)", params.id, params.name)
    return plu_record(row, index)


def delete_plu(doc: Document, plu_id: int) -> PluRecord:
    """Usuwa PLU; zwraca widok usuniętego rekordu."""
    index, row = find_plu_row(doc, plu_id)
    removed = plu_record(row, index)
    remove_row(doc, PLU, index)
    logger.info("PLU %s: usunięto (wiersz %d)", plu_id, index)
    return removed
