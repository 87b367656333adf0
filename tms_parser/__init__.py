"""
tms_parser — parsowanie plików TMS do modelu Document i ekstrakcja widoków.

Interfejs publiczny:
    parse(data) -> Document
    extract_plu / extract_scp / extract_dpt / extract_cls

Typowe użycie:
    from tms_parser import parse, extract_plu

    doc  = parse(Path("A_000.TMS").read_bytes())
    plus = extract_plu(doc)
"""

from .lines import detect_line_ending, split_lines, split_on_tab, join_with_tab
from .parser import parse, parse_row, ScanState
from .extract import extract_plu, extract_scp, extract_dpt, extract_cls, plu_form

__all__ = [
    "detect_line_ending",
    "split_lines",
    "split_on_tab",
    "join_with_tab",
    "parse",
    "parse_row",
    "ScanState",
    "extract_plu",
    "extract_scp",
    "extract_dpt",
    "extract_cls",
    "plu_form",
]
