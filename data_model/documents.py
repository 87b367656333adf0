"""
data_model/documents.py — model dokumentu TMS (bezstratny).

Hierarchia:
  Document → Section[] → Row[] → RawLine

RawLine przechowuje oryginalne bajty linii (bez terminatora). Row trzyma
dodatkowo listę pól po podziale na tabulatorach — w dwóch równoległych
wersjach: zdekodowanej (do odczytu) i surowej (do zapisu). Dopóki wiersz
nie jest `dirty`, autorytatywne są bajty RawLine; po edycji — surowe pola.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from .errors import RecordReferenceError


# ---------------------------------------------------------------------------
# Konwencja końca linii
# ---------------------------------------------------------------------------

class LineEnding(StrEnum):
    """Jedna konwencja końca linii dla całego dokumentu."""
    CRLF = "\r\n"
    LF   = "\n"

    @property
    def terminator(self) -> bytes:
        return self.value.encode("ascii")


# ---------------------------------------------------------------------------
# RawLine
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RawLine:
    """
    Jedna linia logiczna pliku.

    - raw:  oryginalne bajty linii BEZ terminatora
    - text: dekodowanie UTF-8 z zamianą błędnych sekwencji (tylko do odczytu)
    """
    raw: bytes
    text: str

    @classmethod
    def from_bytes(cls, raw: bytes) -> RawLine:
        return cls(raw=raw, text=raw.decode("utf-8", errors="replace"))


# ---------------------------------------------------------------------------
# Row
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Row:
    """
    Jeden rekord sekcji.

    - raw_line:   linia źródłowa (nieaktualna, gdy dirty=True)
    - fields:     pola zdekodowane
    - raw_fields: surowe bajty pól; zawsze tej samej długości co `fields`
    - dirty:      czy wiersz był edytowany od czasu parsowania
    """
    raw_line: RawLine
    fields: list[str]
    raw_fields: list[bytes]
    dirty: bool = False

    def __post_init__(self) -> None:
        if len(self.fields) != len(self.raw_fields):
            raise ValueError(
                f"Niezgodna liczba pól: {len(self.fields)} != {len(self.raw_fields)}"
            )

    @property
    def field_count(self) -> int:
        return len(self.raw_fields)

    def get(self, index: int, default: str = "") -> str:
        """Pole zdekodowane lub `default`, gdy kolumna nie istnieje."""
        if 0 <= index < len(self.fields):
            return self.fields[index]
        return default

    def to_bytes(self) -> bytes:
        """Bajty wiersza do zapisu: oryginał dla czystego, złączone pola dla edytowanego."""
        if self.dirty:
            return b"\t".join(self.raw_fields)
        return self.raw_line.raw


# ---------------------------------------------------------------------------
# Section
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Section:
    """
    Nazwana grupa wierszy między `XD1<TAB>name` a `END<TAB>name`.

    recovered=True oznacza, że w źródle zabrakło znacznika końca i
    `end_line` został dopisany syntetycznie przez parser.
    """
    name: str
    start_line: RawLine
    end_line: RawLine
    rows: list[Row] = field(default_factory=list)
    recovered: bool = False

    def row(self, index: int) -> Row:
        if not 0 <= index < len(self.rows):
            raise RecordReferenceError(
                f"Sekcja {self.name} nie ma wiersza {index} (wierszy: {len(self.rows)})."
            )
        return self.rows[index]


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Document:
    """
    Korzeń modelu — jeden na parsowanie, edytowany w miejscu.

    - raw_bytes:   oryginalny bufor (tylko jako odniesienie)
    - line_ending: wykryta konwencja końca linii
    - header_line: pierwsza linia pliku (ECS / wersja / kodowanie)
    - sections:    sekcje w kolejności wystąpienia w pliku
    - gaps:        linie luźne/puste przed sekcją o danym numerze porządkowym
    - trailing:    wszystko za ostatnią sekcją, łącznie z `END<TAB>ECS`
    """
    raw_bytes: bytes
    line_ending: LineEnding
    header_line: RawLine
    sections: list[Section] = field(default_factory=list)
    gaps: dict[int, list[RawLine]] = field(default_factory=dict)
    trailing: list[RawLine] = field(default_factory=list)

    @property
    def section_names(self) -> list[str]:
        return [s.name for s in self.sections]

    @property
    def is_dirty(self) -> bool:
        return any(r.dirty for s in self.sections for r in s.rows)

    @property
    def recovered_sections(self) -> list[str]:
        return [s.name for s in self.sections if s.recovered]

    def section(self, name: str) -> Section | None:
        """Pierwsza sekcja o danej nazwie albo None."""
        for s in self.sections:
            if s.name == name:
                return s
        return None

    def require_section(self, name: str) -> Section:
        s = self.section(name)
        if s is None:
            raise RecordReferenceError(f"Brak sekcji {name} w dokumencie.")
        return s
