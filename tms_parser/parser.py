"""
tms_parser/parser.py — parsowanie bajtów pliku TMS do modelu Document.

Architektura:
  bytes → detect_line_ending() → split_lines() → RawLine[]
  → linia 1 = nagłówek
  → _SectionScanner (automat stanów) → sekcje, luki, zawartość końcowa
  → Document

Stany skanera:
  SCANNING_GAP — między sekcjami; linie niebędące znacznikami trafiają do luki
  IN_SECTION   — wewnątrz sekcji; każda linia poza `END<TAB>name` to wiersz
  IN_TRAILING  — po `END<TAB>ECS`; wszystko dalej dopisywane dosłownie

Kluczowe funkcje publiczne:
  parse(data) -> Document
  parse_row(line) -> Row
"""

from __future__ import annotations

import logging
from enum import StrEnum

from data_model.documents import Document, RawLine, Row, Section
from data_model.errors import FormatError
from tms_parser.lines import decode, detect_line_ending, split_lines, split_on_tab
from tms_parser.section_patterns import (
    MarkerKind,
    is_section_end,
    match_marker,
    synthetic_end_line,
)

logger = logging.getLogger(__name__)


class ScanState(StrEnum):
    SCANNING_GAP = "scanning_gap"
    IN_SECTION   = "in_section"
    IN_TRAILING  = "in_trailing"


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def parse(data: bytes) -> Document:
    """
    Parsuje bufor pliku TMS i zwraca edytowalny Document.

    Jedyny błąd: FormatError dla pustego bufora. Wszystko, czego parser nie
    rozumie, jest zachowywane jako luka lub zawartość końcowa.
    """
    data = bytes(data)
    line_ending = detect_line_ending(data)
    lines = split_lines(data, line_ending)
    if not lines:
        raise FormatError("Pusty plik — brak linii nagłówka.")

    scanner = _SectionScanner()
    for line in lines[1:]:
        scanner.feed(line)
    scanner.finish()

    doc = Document(
        raw_bytes=data,
        line_ending=line_ending,
        header_line=lines[0],
        sections=scanner.sections,
        gaps=scanner.gaps,
        trailing=scanner.trailing,
    )
    logger.debug(
        "Sparsowano %d bajtów (%s): %d sekcji, %d linii końcowych",
        len(data), line_ending.name, len(doc.sections), len(doc.trailing),
    )
    return doc


def parse_row(line: RawLine) -> Row:
    raw_fields = split_on_tab(line.raw)
    return Row(
        raw_line=line,
        fields=[decode(f) for f in raw_fields],
        raw_fields=raw_fields,
    )


# ---------------------------------------------------------------------------
# Automat stanów
# ---------------------------------------------------------------------------

class _SectionScanner:
    __slots__ = ("state", "sections", "gaps", "trailing", "_gap", "_open", "_open_rows")

    def __init__(self) -> None:
        self.state = ScanState.SCANNING_GAP
        self.sections: list[Section] = []
        self.gaps: dict[int, list[RawLine]] = {}
        self.trailing: list[RawLine] = []
        self._gap: list[RawLine] = []
        self._open: tuple[str, RawLine] | None = None
        self._open_rows: list[Row] = []

    def feed(self, line: RawLine) -> None:
        match self.state:
            case ScanState.IN_TRAILING:
                self.trailing.append(line)
            case ScanState.IN_SECTION:
                self._feed_in_section(line)
            case _:
                self._feed_gap(line)

    def finish(self) -> None:
        if self.state is ScanState.IN_SECTION:
            name, _ = self._open
            logger.warning(
                "Sekcja %s bez znacznika końca — dopisano syntetyczny END", name
            )
            self._close(RawLine.from_bytes(synthetic_end_line(name)), recovered=True)
        if self._gap:
            # plik bez END ECS — luka ląduje w zawartości końcowej
            self.trailing.extend(self._gap)
            self._gap = []

    def _feed_gap(self, line: RawLine) -> None:
        marker = match_marker(line.text)
        if marker is None or marker.kind is MarkerKind.SECTION_END:
            self._gap.append(line)
            return

        if marker.kind is MarkerKind.SECTION_START:
            if self._gap:
                self.gaps[len(self.sections)] = self._gap
                self._gap = []
            self._open = (marker.name, line)
            self._open_rows = []
            self.state = ScanState.IN_SECTION
            return

        # FILE_END
        self.trailing.extend(self._gap)
        self._gap = []
        self.trailing.append(line)
        self.state = ScanState.IN_TRAILING

    def _feed_in_section(self, line: RawLine) -> None:
        name, _ = self._open
        if is_section_end(line.text, name):
            self._close(line, recovered=False)
            self.state = ScanState.SCANNING_GAP
        else:
            self._open_rows.append(parse_row(line))

    def _close(self, end_line: RawLine, recovered: bool) -> None:
        name, start_line = self._open
        self.sections.append(Section(
            name=name,
            start_line=start_line,
            end_line=end_line,
            rows=self._open_rows,
            recovered=recovered,
        ))
        logger.debug("Sekcja %s: %d wierszy", name, len(self._open_rows))
        self._open = None
        self._open_rows = []
