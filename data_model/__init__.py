"""
data_model — struktury danych dokumentu TMS.

Użycie:
  from data_model import Document, Section, Row, RawLine, PluRecord, ...

Moduły:
  documents — LineEnding, RawLine, Row, Section, Document
  records   — UnitType, PluForm, PluRecord, ScpEntry, DptRecord, ClsRecord,
              NewPluParams
  field_map — PluField, ScpField, DptField, ClsField, szablon wiersza PLU
  errors    — TmsError, FormatError, RecordReferenceError, InvalidValueError
"""

from .documents import (
    LineEnding,
    RawLine,
    Row,
    Section,
    Document,
)
from .records import (
    UnitType,
    PluForm,
    PluRecord,
    ScpEntry,
    DptRecord,
    ClsRecord,
    NewPluParams,
)
from .field_map import (
    PluField,
    ScpField,
    DptField,
    ClsField,
    CANONICAL_SECTION_ORDER,
)
from .errors import (
    TmsError,
    FormatError,
    RecordReferenceError,
    InvalidValueError,
)

__all__ = [
    # documents
    "LineEnding",
    "RawLine",
    "Row",
    "Section",
    "Document",
    # records
    "UnitType",
    "PluForm",
    "PluRecord",
    "ScpEntry",
    "DptRecord",
    "ClsRecord",
    "NewPluParams",
    # field_map
    "PluField",
    "ScpField",
    "DptField",
    "ClsField",
    "CANONICAL_SECTION_ORDER",
    # errors
    "TmsError",
    "FormatError",
    "RecordReferenceError",
    "InvalidValueError",
]
