"""Komenda: tmsedit assign — przypisanie PLU do klawisza (lub wyczyszczenie)."""

from __future__ import annotations

import argparse

from rich.console import Console

from data_model.errors import TmsError
from editor import assign_plu_to_key, clear_key
from tmsedit._files import add_io_arguments, add_out_argument, fail, load_document, save_document

console = Console()


def run(args: argparse.Namespace) -> None:
    if args.clear == (args.plu_id is not None):
        console.print("[red]Podaj dokładnie jedno: ID PLU albo --clear.[/red]")
        raise SystemExit(1)

    path, doc = load_document(args.tms_file)

    try:
        if args.clear:
            entry = clear_key(doc, args.layer, args.key)
        else:
            entry = assign_plu_to_key(doc, args.layer, args.key, args.plu_id)
    except TmsError as e:
        fail(e)

    target = f"PLU [bold cyan]{entry.plu_id}[/bold cyan]" if entry.is_assigned else "[dim]pusty[/dim]"
    console.print(f"Klawisz L{entry.layer}/K{entry.key_index} → {target}")
    save_document(doc, path, args.out)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "assign",
        help="Przypisuje PLU do klawisza wagi lub czyści klawisz.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Zmienia wpis SCP dla pary (warstwa, klawisz). Warstwy 0-2, klawisze
1-40 (siatka) oraz 41-48 (sloty dodatkowe). PLU musi istnieć.
ID podaje się bezpośrednio po ścieżce pliku.

Przykłady:
  tmsedit assign A_000.TMS 9002 --layer 0 --key 1
  tmsedit assign A_000.TMS --layer 1 --key 5 --clear
        """,
    )
    add_io_arguments(p)
    p.add_argument("plu_id", type=int, nargs="?", metavar="ID", default=None, help="Identyfikator PLU.")
    p.add_argument("--layer", "-l", type=int, required=True, help="Warstwa 0-2.")
    p.add_argument("--key", "-k", type=int, required=True, help="Indeks klawisza 1-48.")
    p.add_argument("--clear", action="store_true", help="Wyczyść przypisanie (PLU 0).")
    add_out_argument(p)
    p.set_defaults(func=run)
