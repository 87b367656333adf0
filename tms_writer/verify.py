"""
tms_writer/verify.py — porównanie bajtów oryginału i wyniku zapisu.

verify_round_trip(original, output) -> RoundTripResult
  Porównuje bajt po bajcie do długości krótszego bufora. Pierwsza różnica
  → jej offset; brak różnic przy różnych długościach → offset = długość
  krótszego; zgodność tylko gdy długości i bajty są równe (offset = -1).

diff_lines(original, output) -> list[LineDiff]
  Numery linii (1-based), które różnią się bajtami lub istnieją tylko po
  jednej stronie. Podział wg konwencji końca linii wykrytej w oryginale.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest

from tms_parser.lines import detect_line_ending, split_lines


@dataclass(frozen=True, slots=True)
class RoundTripResult:
    match: bool
    first_diff_at: int      # -1 gdy zgodne
    original_length: int
    output_length: int

    @property
    def length_mismatch(self) -> bool:
        return self.original_length != self.output_length


@dataclass(frozen=True, slots=True)
class LineDiff:
    line_no: int
    original: bytes | None   # None — linia tylko w wyniku
    output: bytes | None     # None — linia tylko w oryginale


def verify_round_trip(original: bytes, output: bytes) -> RoundTripResult:
    shorter = min(len(original), len(output))
    first_diff = -1
    for i in range(shorter):
        if original[i] != output[i]:
            first_diff = i
            break

    if first_diff == -1 and len(original) != len(output):
        first_diff = shorter

    return RoundTripResult(
        match=first_diff == -1,
        first_diff_at=first_diff,
        original_length=len(original),
        output_length=len(output),
    )


def diff_lines(original: bytes, output: bytes) -> list[LineDiff]:
    ending = detect_line_ending(original)
    a = split_lines(original, ending)
    b = split_lines(output, ending)

    diffs: list[LineDiff] = []
    for n, (la, lb) in enumerate(zip_longest(a, b), start=1):
        raw_a = la.raw if la is not None else None
        raw_b = lb.raw if lb is not None else None
        if raw_a != raw_b:
            diffs.append(LineDiff(line_no=n, original=raw_a, output=raw_b))
    return diffs


def hex_context(data: bytes, offset: int, width: int = 20) -> str:
    """Bajty wokół `offset` w zapisie szesnastkowym (do diagnostyki)."""
    chunk = data[max(0, offset - width):offset + width]
    return " ".join(f"{b:02x}" for b in chunk)
