"""
tms_writer/writer.py — serializacja Document → bajty.

Kolejność zapisu:
  nagłówek
  dla każdej sekcji (w kolejności z pliku):
    linie luki przed sekcją, znacznik XD1, wiersze, znacznik END
  zawartość końcowa (luka przed END ECS, END ECS, reszta)

Każda linia kończy się dokładnie jednym terminatorem wykrytym przy
parsowaniu. Czyste wiersze są zapisywane z oryginalnych bajtów, edytowane
— ze złączonych surowych pól. Serializacja nie zmienia dokumentu.
"""

from __future__ import annotations

from collections.abc import Iterator

from data_model.documents import Document


def _iter_lines(doc: Document) -> Iterator[bytes]:
    yield doc.header_line.raw

    for ordinal, section in enumerate(doc.sections):
        for gap_line in doc.gaps.get(ordinal, ()):
            yield gap_line.raw
        yield section.start_line.raw
        for row in section.rows:
            yield row.to_bytes()
        yield section.end_line.raw

    for line in doc.trailing:
        yield line.raw


def serialize(doc: Document) -> bytes:
    terminator = doc.line_ending.terminator
    chunks: list[bytes] = []
    for line in _iter_lines(doc):
        chunks.append(line)
        chunks.append(terminator)
    return b"".join(chunks)
