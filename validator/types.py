"""
validator/types.py — kody błędów i struktury raportu walidacji.

ValidationError — pojedynczy błąd z kodem, nazwą pola, komunikatem
    i odrzuconą wartością.
ValidationReport — wynik walidacji: is_valid, errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from data_model.errors import InvalidValueError


class ErrorCode(StrEnum):
    """Stałe kody błędów walidatora wartości."""

    # Kształt pola (dotyczy każdej zapisywanej wartości)
    DELIMITER_IN_VALUE = "E_DELIMITER_IN_VALUE"

    # PLU
    PRICE_FORMAT       = "E_PRICE_FORMAT"
    PLU_ID_INVALID     = "E_PLU_ID_INVALID"
    PLU_ID_DUPLICATE   = "E_PLU_ID_DUPLICATE"
    NAME_EMPTY         = "E_NAME_EMPTY"
    UNIT_TYPE_INVALID  = "E_UNIT_TYPE_INVALID"
    DEPARTMENT_INVALID = "E_DEPARTMENT_INVALID"
    FIELD_NOT_EDITABLE = "E_FIELD_NOT_EDITABLE"

    # SCP
    LAYER_OUT_OF_RANGE = "E_LAYER_OUT_OF_RANGE"
    KEY_OUT_OF_RANGE   = "E_KEY_OUT_OF_RANGE"


@dataclass(slots=True)
class ValidationError:
    """
    Pojedynczy błąd walidacji.

    - code:    stały identyfikator klasy błędu (ErrorCode)
    - field:   nazwa pola, np. "price"
    - message: czytelny opis błędu
    - value:   odrzucona wartość (jako tekst)
    """

    code: ErrorCode
    field: str
    message: str
    value: str | None = None


@dataclass(slots=True)
class ValidationReport:
    """
    Wynik walidacji zestawu wartości.

    - is_valid: True gdy brak błędów
    - errors:   lista błędów (ValidationError)
    """

    is_valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @classmethod
    def from_errors(cls, errors: list[ValidationError]) -> ValidationReport:
        return cls(is_valid=not errors, errors=errors)

    def raise_if_invalid(self) -> None:
        if not self.is_valid:
            raise InvalidValueError(self)
