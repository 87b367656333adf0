"""
editor/summary.py — zestawienie dokumentu do wyświetlenia (komenda `info`).
"""

from __future__ import annotations

from dataclasses import dataclass

from data_model.documents import Document
from tms_parser.extract import extract_dpt, extract_plu

from .keyboard import assigned_key_count


@dataclass(frozen=True, slots=True)
class SectionSummary:
    name: str
    rows: int
    recovered: bool
    gap_lines: int   # linie luki tuż przed sekcją


@dataclass(frozen=True, slots=True)
class DocumentSummary:
    header: str
    line_ending: str
    size: int
    sections: list[SectionSummary]
    plu_count: int
    dpt_count: int
    assigned_keys: int
    trailing_lines: int
    dirty: bool

    @property
    def recovered_sections(self) -> list[str]:
        return [s.name for s in self.sections if s.recovered]


def summarize(doc: Document) -> DocumentSummary:
    return DocumentSummary(
        header=doc.header_line.text,
        line_ending=doc.line_ending.name,
        size=len(doc.raw_bytes),
        sections=[
            SectionSummary(
                name=s.name,
                rows=len(s.rows),
                recovered=s.recovered,
                gap_lines=len(doc.gaps.get(i, ())),
            )
            for i, s in enumerate(doc.sections)
        ],
        plu_count=len(extract_plu(doc)),
        dpt_count=len(extract_dpt(doc)),
        assigned_keys=assigned_key_count(doc),
        trailing_lines=len(doc.trailing),
        dirty=doc.is_dirty,
    )
