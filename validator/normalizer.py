"""
validator/normalizer.py — normalizacja wartości przed walidacją.

normalize_value():
  - liczby całkowite → tekst dziesiętny
  - pola liczbowe (cena, id, dział, typ jednostki) → strip()
  - nazwa pozostaje bez zmian (spacje wiodące/końcowe są treścią pola)
"""

from __future__ import annotations

NUMERIC_FIELDS = frozenset({"id", "price", "unit_type", "department", "plu_id"})


def normalize_value(field: str, value: str | int) -> str:
    """Zwraca tekstową postać wartości do zapisania w polu."""
    if isinstance(value, bool):
        raise TypeError(f"Pole {field}: wartość logiczna nie jest dozwolona")
    if isinstance(value, int):
        return str(int(value))
    if field in NUMERIC_FIELDS:
        return value.strip()
    return value
