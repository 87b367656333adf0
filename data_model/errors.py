"""
data_model/errors.py — hierarchia wyjątków silnika TMS.

  TmsError
   ├── FormatError           pusty bufor — jedyny błąd krytyczny parsowania
   ├── RecordReferenceError  brak rekordu / sekcji / pary warstwa-klawisz / indeksu
   └── InvalidValueError     wartość od wywołującego łamie ograniczenie formatu

Nieznane sekcje, różna szerokość wierszy i brakujące kolumny NIE są błędami.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from validator.types import ValidationReport


class TmsError(Exception):
    """Klasa bazowa wszystkich błędów silnika."""


class FormatError(TmsError):
    """Bufora nie da się potraktować jako dokumentu TMS (pusty plik)."""


class RecordReferenceError(TmsError, LookupError):
    """Operacja wskazuje na nieistniejący rekord, sekcję lub indeks."""


class InvalidValueError(TmsError, ValueError):
    """
    Wartość podana przez wywołującego nie przeszła walidacji.

    Rzucany PRZED mutacją — dokument pozostaje bez zmian.
    `report` zawiera listę błędów walidatora.
    """

    def __init__(self, report: ValidationReport) -> None:
        self.report = report
        messages = "; ".join(e.message for e in report.errors) or "niepoprawna wartość"
        super().__init__(messages)
