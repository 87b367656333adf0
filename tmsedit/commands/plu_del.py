"""Komenda: tmsedit plu-del — usunięcie PLU z pliku."""

from __future__ import annotations

import argparse

from rich.console import Console

from data_model.errors import TmsError
from editor import delete_plu
from tms_parser import extract_scp
from tmsedit._files import add_io_arguments, add_out_argument, fail, load_document, save_document

console = Console()


def run(args: argparse.Namespace) -> None:
    path, doc = load_document(args.tms_file)

    try:
        removed = delete_plu(doc, args.plu_id)
    except TmsError as e:
        fail(e)

    console.print(f"[green]Usunięto PLU [bold]{removed.id}[/bold]: {removed.name}[/green]")

    # Przypisania klawiszy nie są czyszczone automatycznie
    keys = [e for e in extract_scp(doc) if e.plu_id == removed.id]
    for e in keys:
        console.print(
            f"[yellow]Uwaga:[/yellow] klawisz L{e.layer}/K{e.key_index} nadal wskazuje PLU {removed.id} "
            f"(tmsedit assign --clear)."
        )

    save_document(doc, path, args.out)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "plu-del",
        help="Usuwa PLU o podanym identyfikatorze.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Usuwa wiersz PLU. Przypisania klawiszy (SCP) wskazujące usunięte PLU
są tylko raportowane — wyczyść je komendą `assign --clear`.

Przykłady:
  tmsedit plu-del A_000.TMS 9120
        """,
    )
    add_io_arguments(p)
    p.add_argument("plu_id", type=int, metavar="ID", help="Identyfikator PLU.")
    add_out_argument(p)
    p.set_defaults(func=run)
