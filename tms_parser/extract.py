"""
tms_parser/extract.py — typowane widoki rekordów z sekcji dokumentu.

Funkcje są czyste i bezstanowe. Brak sekcji → pusta lista. Kolumna poza
zakresem wiersza, pusta lub nieliczbowa → wartość domyślna kolumny
(w pliku współistnieją wiersze PLU o 69 i o 16 polach).

Publiczne API:
  extract_plu(doc) -> list[PluRecord]
  extract_scp(doc) -> list[ScpEntry]
  extract_dpt(doc) -> list[DptRecord]
  extract_cls(doc) -> list[ClsRecord]
"""

from __future__ import annotations

import re

from data_model.documents import Document, Row
from data_model.field_map import (
    CLS,
    DEFAULT_PRICE,
    DEFAULT_UNIT_TYPE,
    DPT,
    PLU,
    SCP,
    ClsField,
    DptField,
    PluField,
    ScpField,
)
from data_model.records import ClsRecord, DptRecord, PluForm, PluRecord, ScpEntry

# Wiodąca liczba całkowita, np. "12" w " 12abc"
_INT_RE = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


# ---------------------------------------------------------------------------
# Funkcje pomocnicze
# ---------------------------------------------------------------------------

def _int_field(row: Row, index: int, default: int = 0) -> int:
    """Wiodąca liczba z kolumny; 0, brak lub śmieci → `default`."""
    m = _INT_RE.match(row.get(index))
    if not m:
        return default
    return int(m.group(1)) or default


def _str_field(row: Row, index: int, default: str = "") -> str:
    return row.get(index) or default


def plu_form(row: Row) -> PluForm:
    return PluForm.LONG if row.field_count > PluField.SHORT_CODE else PluForm.SHORT


# ---------------------------------------------------------------------------
# Ekstraktory
# ---------------------------------------------------------------------------

def plu_record(row: Row, row_index: int) -> PluRecord:
    form = plu_form(row)
    return PluRecord(
        row_index=row_index,
        id=_int_field(row, PluField.ID),
        unit_type=_int_field(row, PluField.UNIT_TYPE, DEFAULT_UNIT_TYPE),
        price=_str_field(row, PluField.PRICE, DEFAULT_PRICE),
        price2=_str_field(row, PluField.PRICE_2, DEFAULT_PRICE),
        price3=_str_field(row, PluField.PRICE_3, DEFAULT_PRICE),
        department=_int_field(row, PluField.DEPARTMENT),
        name=_str_field(row, PluField.NAME),
        short_code=row.get(PluField.SHORT_CODE) if form is PluForm.LONG else None,
        field_count=row.field_count,
        form=form,
    )


def extract_plu(doc: Document) -> list[PluRecord]:
    section = doc.section(PLU)
    if section is None:
        return []
    return [plu_record(row, i) for i, row in enumerate(section.rows)]


def extract_scp(doc: Document) -> list[ScpEntry]:
    section = doc.section(SCP)
    if section is None:
        return []
    return [
        ScpEntry(
            row_index=i,
            layer=_int_field(row, ScpField.LAYER),
            key_index=_int_field(row, ScpField.KEY_INDEX),
            plu_id=_int_field(row, ScpField.PLU_ID),
        )
        for i, row in enumerate(section.rows)
    ]


def extract_dpt(doc: Document) -> list[DptRecord]:
    section = doc.section(DPT)
    if section is None:
        return []
    return [
        DptRecord(
            row_index=i,
            id=_int_field(row, DptField.ID),
            name=_str_field(row, DptField.NAME),
        )
        for i, row in enumerate(section.rows)
    ]


def extract_cls(doc: Document) -> list[ClsRecord]:
    section = doc.section(CLS)
    if section is None:
        return []
    return [
        ClsRecord(
            row_index=i,
            id=_int_field(row, ClsField.ID),
            name=_str_field(row, ClsField.NAME),
            dept_id=_int_field(row, ClsField.DEPT_ID),
        )
        for i, row in enumerate(section.rows)
    ]
