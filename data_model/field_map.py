"""
data_model/field_map.py — stałe mapy kolumn dla sekcji TMS.

Format nie jest samoopisujący się: znaczenie pola wynika wyłącznie z jego
pozycji w wierszu. Poniższe indeksy są 0-based (pole 0 to rodzaj rekordu,
np. "PLU").

Szerokości wierszy PLU:
  LONG  — 69 pól (bieżący format, z krótkim kodem w kolumnie 64)
  SHORT — ok. 16 pól (starszy format, kończy się na nazwie)
"""

from __future__ import annotations

from enum import IntEnum

# ---------------------------------------------------------------------------
# Nazwy sekcji
# ---------------------------------------------------------------------------

DPT = "DPT"
CLS = "CLS"
PLU = "PLU"
SCP = "SCP"

# Typowa kolejność sekcji w pliku wagi — tylko informacyjnie, parser
# zachowuje kolejność odkrytą w pliku.
CANONICAL_SECTION_ORDER: tuple[str, ...] = (
    "DPT", "CLS", "PLU", "UNT", "BAR",
    "LAB", "SAL", "REP", "SCP", "TMS",
    "TMT", "INF", "TIM",
)


# ---------------------------------------------------------------------------
# PLU
# ---------------------------------------------------------------------------

class PluField(IntEnum):
    KIND       = 0
    ID         = 1
    UNKNOWN_2  = 2
    UNKNOWN_3  = 3
    UNIT_TYPE  = 4    # 1 = waga, 2 = sztuki
    PRICE      = 5    # cena główna, np. "600,0"
    PRICE_2    = 6
    PRICE_3    = 7
    DEPARTMENT = 14
    NAME       = 15
    SHORT_CODE = 64   # tylko format LONG


PLU_LONG_FIELD_COUNT = 69

DEFAULT_PRICE = "0,0"
DEFAULT_UNIT_TYPE = 1

# Kolumny 16..68 nowego wiersza PLU (format LONG). Ostatnie puste pole
# odpowiada końcowemu tabulatorowi w liniach zapisanych przez wagę.
PLU_TEMPLATE_TAIL: tuple[str, ...] = (
    "", "", "", "", "", "", "",                 # 16-22
    "0", "0", "0", "0", "0", "0",               # 23-28
    "0", "0", "0", "0", "0", "0",               # 29-34
    "0",                                        # 35
    "0,0", "0,0", "0", "0",                     # 36-39
    "0,0", "0,0", "0,0", "0", "0",              # 40-44
    "0,0", "0,0", "0,0", "0", "0",              # 45-49
    "127,0", "0,0", "0,0", "0", "0",            # 50-54
    "127,0", "0,0", "0,0", "0", "0",            # 55-59
    "127", "0", "0", "0", "0",                  # 60-64
    "127", "0", "0",                            # 65-67
    "",                                         # 68
)


# ---------------------------------------------------------------------------
# SCP — przypisanie klawiszy do PLU
# ---------------------------------------------------------------------------

class ScpField(IntEnum):
    KIND      = 0
    LAYER     = 1   # 0, 1, 2
    KEY_INDEX = 2   # 1-40 siatka, 41-48 pola dodatkowe
    PLU_ID    = 3   # 0 = klawisz nieprzypisany


LAYER_COUNT = 3
GRID_KEY_COUNT = 40
MAX_KEY_INDEX = 48


# ---------------------------------------------------------------------------
# DPT / CLS
# ---------------------------------------------------------------------------

class DptField(IntEnum):
    KIND = 0
    ID   = 1
    NAME = 2


class ClsField(IntEnum):
    KIND    = 0
    ID      = 1
    NAME    = 2
    DEPT_ID = 3
