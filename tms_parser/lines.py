"""
tms_parser/lines.py — podział bajtów na linie i pól na tabulatorach.

Wszystko działa na bajtach, nie na tekście: oryginalne sekwencje muszą
przetrwać zapis bez zmian (w tym niepoprawny UTF-8 i końcowe tabulatory).

Ograniczenie: jedna konwencja końca linii na plik. W trybie CRLF samotne
LF zostaje wewnątrz bajtów linii; w trybie LF znak CR przed LF zostaje
ostatnim bajtem linii.
"""

from __future__ import annotations

from data_model.documents import LineEnding, RawLine

TAB = b"\t"
CR  = 0x0D
LF  = 0x0A


def decode(raw: bytes) -> str:
    """Dekodowanie UTF-8 „best effort” — tylko do wyświetlania i porównań."""
    return raw.decode("utf-8", errors="replace")


def detect_line_ending(data: bytes) -> LineEnding:
    """
    Konwencja wg pierwszego bajtu LF w buforze.

    CRLF gdy bezpośrednio poprzedza go CR, w przeciwnym razie LF.
    Bufor bez LF → CRLF (format wagi).
    """
    i = data.find(LF)
    if i == -1:
        return LineEnding.CRLF
    if i > 0 and data[i - 1] == CR:
        return LineEnding.CRLF
    return LineEnding.LF


def split_lines(data: bytes, ending: LineEnding) -> list[RawLine]:
    """
    Dzieli bufor ściśle na zadanym terminatorze.

    Końcowa linia bez terminatora jest zachowana; bufor kończący się
    dokładnie terminatorem NIE tworzy dodatkowej pustej linii.
    """
    parts = data.split(ending.terminator)
    if parts and parts[-1] == b"":
        parts.pop()
    return [RawLine.from_bytes(p) for p in parts]


def split_on_tab(raw: bytes) -> list[bytes]:
    """N tabulatorów → N+1 pól, łącznie z pustymi (kolejne i końcowe tabulatory)."""
    return raw.split(TAB)


def join_with_tab(raw_fields: list[bytes]) -> bytes:
    """Odwrotność split_on_tab."""
    return TAB.join(raw_fields)
