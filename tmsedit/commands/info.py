"""Komenda: tmsedit info — podsumowanie pliku TMS (nagłówek, sekcje, liczniki)."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box

from editor import summarize
from tmsedit._files import add_io_arguments, load_document

console = Console()


def run(args: argparse.Namespace) -> None:
    path, doc = load_document(args.tms_file)
    s = summarize(doc)

    console.print(f"Plik: [bold]{path}[/bold]  ({s.size} bajtów, końce linii: [cyan]{s.line_ending}[/cyan])")
    console.print(f"Nagłówek: [cyan]{s.header.replace(chr(9), ' | ')}[/cyan]")

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("#",       justify="right", no_wrap=True, style="dim")
    table.add_column("SEKCJA",  no_wrap=True, style="bold cyan")
    table.add_column("WIERSZE", justify="right", no_wrap=True)
    table.add_column("LUKA",    justify="right", no_wrap=True, style="dim")
    table.add_column("STATUS",  no_wrap=True)

    for i, sec in enumerate(s.sections):
        status = "[yellow]odtworzony END[/yellow]" if sec.recovered else "ok"
        table.add_row(str(i), sec.name, str(sec.rows), str(sec.gap_lines or "-"), status)

    console.print()
    console.print(table)
    console.print(
        f"  PLU: [bold]{s.plu_count}[/bold]  "
        f"działy: [bold]{s.dpt_count}[/bold]  "
        f"przypisane klawisze: [bold]{s.assigned_keys}[/bold]  "
        f"linie końcowe: {s.trailing_lines}\n"
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "info",
        help="Podsumowanie pliku TMS: nagłówek, sekcje, liczniki.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyświetla nagłówek, konwencję końca linii i listę sekcji w kolejności
z pliku wraz z liczbą wierszy i liczbą luźnych linii przed sekcją.

Przykłady:
  tmsedit info A_000.TMS
        """,
    )
    add_io_arguments(p)
    p.set_defaults(func=run)
