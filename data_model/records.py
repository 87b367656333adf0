"""
data_model/records.py — typowane widoki rekordów (tylko do odczytu).

Widoki są wyliczane na żądanie z wierszy sekcji (tms_parser.extract) i nie
są nigdzie przechowywane. Po każdej mutacji sekcji trzeba je wyliczyć
ponownie — usunięcie wiersza przesuwa `row_index` kolejnych rekordów.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

from .field_map import GRID_KEY_COUNT


class UnitType(IntEnum):
    WEIGHT = 1
    COUNT  = 2


class PluForm(StrEnum):
    """Wariant fizyczny wiersza PLU."""
    LONG  = "long"    # ~69 pól, z krótkim kodem
    SHORT = "short"   # ~16 pól, format starszy


@dataclass(frozen=True, slots=True)
class PluRecord:
    row_index: int       # indeks w Section.rows sekcji PLU
    id: int
    unit_type: int
    price: str           # tekst "<całość>,<ułamek>", np. "600,0"
    price2: str
    price3: str
    department: int
    name: str
    short_code: str | None   # None dla PluForm.SHORT
    field_count: int
    form: PluForm

    @property
    def has_short_code(self) -> bool:
        return self.form is PluForm.LONG


@dataclass(frozen=True, slots=True)
class ScpEntry:
    row_index: int
    layer: int
    key_index: int
    plu_id: int

    @property
    def is_grid_key(self) -> bool:
        """Klawisz fizycznej siatki (1-40); 41-48 to sloty bez klawisza."""
        return 1 <= self.key_index <= GRID_KEY_COUNT

    @property
    def is_assigned(self) -> bool:
        return self.plu_id != 0


@dataclass(frozen=True, slots=True)
class DptRecord:
    row_index: int
    id: int
    name: str


@dataclass(frozen=True, slots=True)
class ClsRecord:
    row_index: int
    id: int
    name: str
    dept_id: int


@dataclass(slots=True)
class NewPluParams:
    """Dane wejściowe dla nowego wiersza PLU."""
    id: int
    name: str
    price: str
    unit_type: int = UnitType.WEIGHT
    department: int = 0
