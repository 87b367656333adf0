"""
tms_parser/section_patterns.py — wzorce linii-znaczników pliku TMS.

Każdy MarkerPattern zawiera:
  - regex: skompilowany wzorzec (dopasowanie na początku linii)
  - kind:  rodzaj znacznika
  - extract_name: funkcja wyciągająca nazwę sekcji z Match

Wzorce są testowane w kolejności; pierwszy pasujący wygrywa. Znacznik końca
pliku (`END<TAB>ECS`) stoi przed ogólnym znacznikiem końca sekcji.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable


class MarkerKind(StrEnum):
    SECTION_START = "section_start"   # XD1<TAB>name<TAB>...
    FILE_END      = "file_end"        # END<TAB>ECS...
    SECTION_END   = "section_end"     # END<TAB>name<TAB>...


@dataclass(frozen=True, slots=True)
class MarkerPattern:
    regex: re.Pattern[str]
    kind: MarkerKind
    extract_name: Callable[[re.Match[str]], str]


@dataclass(frozen=True, slots=True)
class Marker:
    kind: MarkerKind
    name: str


FILE_END_NAME = "ECS"

SECTION_END_PATTERN = MarkerPattern(
    regex=re.compile(r"^END\t([^\t]*)"),
    kind=MarkerKind.SECTION_END,
    extract_name=lambda m: m.group(1),
)

PATTERNS: list[MarkerPattern] = [
    MarkerPattern(
        regex=re.compile(r"^XD1\t([^\t]*)"),
        kind=MarkerKind.SECTION_START,
        extract_name=lambda m: m.group(1),
    ),
    MarkerPattern(
        regex=re.compile(r"^END\tECS"),
        kind=MarkerKind.FILE_END,
        extract_name=lambda m: FILE_END_NAME,
    ),
    SECTION_END_PATTERN,
]


def match_marker(text: str) -> Marker | None:
    """Rozpoznaje linię-znacznik; None dla zwykłej linii."""
    for pattern in PATTERNS:
        m = pattern.regex.match(text)
        if m:
            return Marker(kind=pattern.kind, name=pattern.extract_name(m))
    return None


def is_section_end(text: str, name: str) -> bool:
    """Czy linia zamyka sekcję `name` (drugie pole równe nazwie sekcji)."""
    m = SECTION_END_PATTERN.regex.match(text)
    return m is not None and m.group(1) == name


def synthetic_end_line(name: str) -> bytes:
    """Znacznik końca dopisywany, gdy w pliku go zabrakło."""
    return f"END\t{name}\t".encode("utf-8")
