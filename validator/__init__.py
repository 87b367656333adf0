"""
validator — walidacja kształtu wartości zapisywanych do dokumentu TMS.

Interfejs publiczny:
    validate_field_value, validate_plu_field, validate_new_plu, validate_key
    ValidationReport, ValidationError, ErrorCode — typy raportu

Typowe użycie:
    from validator import validate_plu_field

    report = validate_plu_field("price", "750,0")
    if not report.is_valid:
        for e in report.errors:
            print(e.code, e.field, e.message)
"""

from .types import ErrorCode, ValidationError, ValidationReport
from .normalizer import normalize_value
from .value_validator import (
    EDITABLE_PLU_FIELDS,
    validate_field_value,
    validate_plu_field,
    validate_new_plu,
    validate_key,
)

__all__ = [
    "ErrorCode",
    "ValidationError",
    "ValidationReport",
    "normalize_value",
    "EDITABLE_PLU_FIELDS",
    "validate_field_value",
    "validate_plu_field",
    "validate_new_plu",
    "validate_key",
]
