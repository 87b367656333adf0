"""
tmsedit — narzędzie CLI do plików konfiguracyjnych TMS wagi sklepowej.

Użycie:
  tmsedit <komenda> [opcje]

Komendy:
  info      Podsumowanie pliku: nagłówek, sekcje, liczniki.
  plu       Listuje PLU (z wyszukiwaniem i filtrem działu).
  keys      Wyświetla siatkę klawiszy warstwy z przypisanymi PLU.
  depts     Listuje działy (DPT) z klasami (CLS).
  plu-set   Zmienia nazwę, cenę, typ jednostki lub dział PLU.
  plu-add   Dodaje nowe PLU.
  plu-del   Usuwa PLU.
  assign    Przypisuje PLU do klawisza lub czyści klawisz.
  verify    Sprawdza round-trip pliku lub porównuje dwa pliki bajt w bajt.

Zapis zmienia wyłącznie edytowane linie — reszta pliku zostaje
zachowana bajt w bajt.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby nazwy PLU
# (np. pismo syngaleskie) i polskie znaki były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from tmsedit import __version__
from tmsedit._config import get_settings
from tmsedit.commands import info as cmd_info
from tmsedit.commands import plu as cmd_plu
from tmsedit.commands import keys as cmd_keys
from tmsedit.commands import depts as cmd_depts
from tmsedit.commands import plu_set as cmd_plu_set
from tmsedit.commands import plu_add as cmd_plu_add
from tmsedit.commands import plu_del as cmd_plu_del
from tmsedit.commands import assign as cmd_assign
from tmsedit.commands import verify as cmd_verify


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tmsedit",
        description="tmsedit — edycja plików TMS wagi sklepowej bez utraty bajtów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"tmsedit {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Więcej logów (-v = INFO, -vv = DEBUG); domyślnie TMS_LOG_LEVEL.",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_info.add_parser(subparsers)
    cmd_plu.add_parser(subparsers)
    cmd_keys.add_parser(subparsers)
    cmd_depts.add_parser(subparsers)
    cmd_plu_set.add_parser(subparsers)
    cmd_plu_add.add_parser(subparsers)
    cmd_plu_del.add_parser(subparsers)
    cmd_assign.add_parser(subparsers)
    cmd_verify.add_parser(subparsers)

    return parser


def configure_logging(verbose: int) -> None:
    match verbose:
        case 0:
            level = get_settings().log_level
        case 1:
            level = "INFO"
        case _:
            level = "DEBUG"

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
