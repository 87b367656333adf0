"""
validator/value_validator.py — walidacja wartości podawanych przez wywołującego.

Sprawdzany jest wyłącznie KSZTAŁT wartości w formacie TMS, bez semantyki
domeny (np. istnienie działu nie jest weryfikowane).

Etapy (dla każdego pola):
  A — kształt pola  (brak TAB / CR / LF — inaczej zmieni się liczba pól/linii)
  B — format pola   (cena "<liczba>,<liczba>", id > 0, typ jednostki 1|2, ...)

Publiczne API:
  validate_field_value(value)                 -> ValidationReport
  validate_plu_field(field, value)            -> ValidationReport
  validate_new_plu(params, existing_ids)      -> ValidationReport
  validate_key(layer, key_index, plu_id)      -> ValidationReport
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from data_model.field_map import LAYER_COUNT, MAX_KEY_INDEX
from data_model.records import NewPluParams, UnitType

from .normalizer import normalize_value
from .types import ErrorCode, ValidationError, ValidationReport

# Cena w zapisie z przecinkiem dziesiętnym: "600,0", "12,50"
_PRICE_RE = re.compile(r"^\d+,\d+$", re.ASCII)
_DIGITS_RE = re.compile(r"^\d+$", re.ASCII)

# Znaki, które rozbiłyby pole lub linię
_FORBIDDEN = ("\t", "\r", "\n")

EDITABLE_PLU_FIELDS = ("name", "price", "unit_type", "department")


# ---------------------------------------------------------------------------
# Etap A — kształt pola
# ---------------------------------------------------------------------------

def _check_shape(field: str, value: str, errors: list[ValidationError]) -> bool:
    if any(ch in value for ch in _FORBIDDEN):
        errors.append(ValidationError(
            code=ErrorCode.DELIMITER_IN_VALUE,
            field=field,
            message=f"Pole {field} nie może zawierać tabulatora ani końca linii.",
            value=value,
        ))
        return False
    return True


# ---------------------------------------------------------------------------
# Etap B — format pól
# ---------------------------------------------------------------------------

def _check_price(value: str, errors: list[ValidationError], field: str = "price") -> None:
    if not _PRICE_RE.match(value):
        errors.append(ValidationError(
            code=ErrorCode.PRICE_FORMAT,
            field=field,
            message=f"Cena '{value}' musi mieć postać <liczba>,<liczba>, np. 600,0.",
            value=value,
        ))


def _check_plu_id(value: str, errors: list[ValidationError]) -> None:
    if not _DIGITS_RE.match(value) or int(value) <= 0:
        errors.append(ValidationError(
            code=ErrorCode.PLU_ID_INVALID,
            field="id",
            message=f"Identyfikator PLU '{value}' musi być dodatnią liczbą całkowitą.",
            value=value,
        ))


def _check_name(value: str, errors: list[ValidationError]) -> None:
    if not value.strip():
        errors.append(ValidationError(
            code=ErrorCode.NAME_EMPTY,
            field="name",
            message="Nazwa PLU nie może być pusta.",
            value=value,
        ))


def _check_unit_type(value: str, errors: list[ValidationError]) -> None:
    allowed = {str(int(u)) for u in UnitType}
    if value not in allowed:
        errors.append(ValidationError(
            code=ErrorCode.UNIT_TYPE_INVALID,
            field="unit_type",
            message=f"Typ jednostki '{value}' musi być jednym z: {', '.join(sorted(allowed))}.",
            value=value,
        ))


def _check_department(value: str, errors: list[ValidationError]) -> None:
    if not _DIGITS_RE.match(value):
        errors.append(ValidationError(
            code=ErrorCode.DEPARTMENT_INVALID,
            field="department",
            message=f"Kod działu '{value}' musi być nieujemną liczbą całkowitą.",
            value=value,
        ))


_PLU_FIELD_CHECKS = {
    "name":       _check_name,
    "price":      _check_price,
    "unit_type":  _check_unit_type,
    "department": _check_department,
}


# ---------------------------------------------------------------------------
# Publiczny interfejs
# ---------------------------------------------------------------------------

def validate_field_value(value: str, field: str = "value") -> ValidationReport:
    """Sam kształt pola — dla dowolnej wartości zapisywanej do wiersza."""
    errors: list[ValidationError] = []
    _check_shape(field, value, errors)
    return ValidationReport.from_errors(errors)


def validate_plu_field(field: str, value: str | int) -> ValidationReport:
    """Walidacja jednego edytowalnego pola PLU (name/price/unit_type/department)."""
    errors: list[ValidationError] = []
    check = _PLU_FIELD_CHECKS.get(field)
    if check is None:
        errors.append(ValidationError(
            code=ErrorCode.FIELD_NOT_EDITABLE,
            field=field,
            message=(
                f"Pole '{field}' nie jest edytowalne; "
                f"dozwolone: {', '.join(EDITABLE_PLU_FIELDS)}."
            ),
        ))
        return ValidationReport.from_errors(errors)

    text = normalize_value(field, value)
    if _check_shape(field, text, errors):
        check(text, errors)
    return ValidationReport.from_errors(errors)


def validate_new_plu(
    params: NewPluParams,
    existing_ids: Iterable[int] = (),
) -> ValidationReport:
    """Komplet pól nowego PLU + unikalność identyfikatora."""
    errors: list[ValidationError] = []

    plu_id = normalize_value("id", params.id)
    _check_plu_id(plu_id, errors)

    values = {
        "name":       params.name,
        "price":      normalize_value("price", params.price),
        "unit_type":  normalize_value("unit_type", params.unit_type),
        "department": normalize_value("department", params.department),
    }
    for field, text in values.items():
        if _check_shape(field, text, errors):
            _PLU_FIELD_CHECKS[field](text, errors)

    if not errors and int(plu_id) in set(existing_ids):
        errors.append(ValidationError(
            code=ErrorCode.PLU_ID_DUPLICATE,
            field="id",
            message=f"PLU o identyfikatorze {plu_id} już istnieje.",
            value=plu_id,
        ))

    return ValidationReport.from_errors(errors)


def validate_key(layer: int, key_index: int, plu_id: int = 0) -> ValidationReport:
    """Zakres warstwy (0-2), klawisza (1-48) i nieujemny identyfikator PLU."""
    errors: list[ValidationError] = []
    if not 0 <= layer < LAYER_COUNT:
        errors.append(ValidationError(
            code=ErrorCode.LAYER_OUT_OF_RANGE,
            field="layer",
            message=f"Warstwa {layer} poza zakresem 0-{LAYER_COUNT - 1}.",
            value=str(layer),
        ))
    if not 1 <= key_index <= MAX_KEY_INDEX:
        errors.append(ValidationError(
            code=ErrorCode.KEY_OUT_OF_RANGE,
            field="key_index",
            message=f"Klawisz {key_index} poza zakresem 1-{MAX_KEY_INDEX}.",
            value=str(key_index),
        ))
    if plu_id < 0:
        errors.append(ValidationError(
            code=ErrorCode.PLU_ID_INVALID,
            field="plu_id",
            message=f"Identyfikator PLU {plu_id} nie może być ujemny.",
            value=str(plu_id),
        ))
    return ValidationReport.from_errors(errors)
