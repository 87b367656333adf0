"""
tms_writer/mutations.py — edycja pól i wierszy dokumentu w miejscu.

Zasady:
  - update_field() nadpisuje jedno pole (zdekodowane + surowe) i oznacza
    wiersz jako dirty; nigdy nie zmienia liczby pól.
  - Wiersz dirty jest zapisywany przez złączenie CAŁEJ listy surowych pól,
    więc każde pole musi zawsze trzymać poprawne bajty.
  - append_row() / remove_row() zmieniają wyłącznie listę wierszy wskazanej
    sekcji; luki i zawartość końcowa pozostają nietknięte.
  - Walidacja wartości odbywa się PRZED mutacją.

Publiczne API:
  update_field(row, field_index, value)
  mutate_field(doc, section_name, row_index, field_index, value)
  append_row(doc, section_name, row) -> int
  remove_row(doc, section_name, row_index) -> Row
  create_plu_row(params) -> Row
"""

from __future__ import annotations

import logging

from data_model.documents import Document, RawLine, Row
from data_model.errors import RecordReferenceError
from data_model.field_map import PLU_TEMPLATE_TAIL
from data_model.records import NewPluParams
from tms_parser.lines import join_with_tab
from validator import validate_field_value

logger = logging.getLogger(__name__)


def update_field(row: Row, field_index: int, value: str) -> None:
    if not 0 <= field_index < row.field_count:
        raise RecordReferenceError(
            f"Pole {field_index} poza wierszem ({row.field_count} pól)."
        )
    validate_field_value(value, field=f"#{field_index}").raise_if_invalid()

    row.raw_fields[field_index] = value.encode("utf-8")
    row.fields[field_index] = value
    row.dirty = True


def mutate_field(
    doc: Document,
    section_name: str,
    row_index: int,
    field_index: int,
    value: str,
) -> None:
    row = doc.require_section(section_name).row(row_index)
    update_field(row, field_index, value)
    logger.info(
        "%s[%d] pole %d ← %r", section_name, row_index, field_index, value
    )


def append_row(doc: Document, section_name: str, row: Row) -> int:
    """Dopisuje wiersz na koniec sekcji; zwraca jego indeks."""
    section = doc.require_section(section_name)
    section.rows.append(row)
    logger.info("%s: dopisano wiersz %d", section_name, len(section.rows) - 1)
    return len(section.rows) - 1


def remove_row(doc: Document, section_name: str, row_index: int) -> Row:
    section = doc.require_section(section_name)
    section.row(row_index)
    row = section.rows.pop(row_index)
    logger.info("%s: usunięto wiersz %d", section_name, row_index)
    return row


def create_plu_row(params: NewPluParams) -> Row:
    """
    Nowy wiersz PLU w formacie LONG (69 pól).

    Wiersz nie ma oryginalnych bajtów, więc od razu jest dirty — zapis
    buduje go z listy pól.
    """
    fields = [
        "PLU",
        str(int(params.id)),
        "0",
        "",
        str(int(params.unit_type)),
        params.price,
        "0,0",
        "0,0",
        "0", "0", "0", "0", "0", "0",
        str(int(params.department)),
        params.name,
        *PLU_TEMPLATE_TAIL,
    ]
    raw_fields = [f.encode("utf-8") for f in fields]
    return Row(
        raw_line=RawLine.from_bytes(join_with_tab(raw_fields)),
        fields=fields,
        raw_fields=raw_fields,
        dirty=True,
    )
