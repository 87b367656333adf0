"""Komenda: tmsedit plu — listowanie i wyszukiwanie PLU."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from data_model.records import PluForm, UnitType
from editor import search_plu
from tms_parser import extract_plu
from tmsedit._files import add_io_arguments, load_document

console = Console(width=160)

UNIT_LABEL: dict[int, str] = {
    UnitType.WEIGHT: "kg",
    UnitType.COUNT:  "szt",
}


def run(args: argparse.Namespace) -> None:
    _, doc = load_document(args.tms_file)
    records = extract_plu(doc)
    if args.search:
        records = search_plu(records, args.search)
    if args.dept is not None:
        records = [p for p in records if p.department == args.dept]

    if not records:
        console.print("[yellow]Brak PLU spełniających kryteria.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("ID",     justify="right", style="bold cyan", no_wrap=True)
    table.add_column("NAZWA",  no_wrap=False, max_width=40)
    table.add_column("CENA",   justify="right", no_wrap=True)
    table.add_column("JEDN.",  no_wrap=True)
    table.add_column("DZIAŁ",  justify="right", no_wrap=True)
    table.add_column("KOD",    no_wrap=True, style="dim")
    table.add_column("FORMAT", no_wrap=True)

    for p in records:
        form_txt = Text(p.form.value, style="green" if p.form is PluForm.LONG else "yellow")
        table.add_row(
            str(p.id),
            p.name,
            p.price,
            UNIT_LABEL.get(p.unit_type, str(p.unit_type)),
            str(p.department),
            p.short_code or "-",
            form_txt,
        )

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(records)} PLU[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "plu",
        help="Listuje PLU z pliku TMS.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje rekordy PLU (id, nazwa, cena, jednostka, dział, krótki kod).

Kolumna FORMAT:
  long  – wiersz 69-polowy (z krótkim kodem)
  short – starszy wiersz ~16-polowy (bez krótkiego kodu)

Przykłady:
  tmsedit plu A_000.TMS
  tmsedit plu A_000.TMS --search marchew
  tmsedit plu A_000.TMS --dept 9
        """,
    )
    add_io_arguments(p)
    p.add_argument(
        "--search", "-s",
        metavar="TEKST",
        help="Szukaj w nazwie, id lub krótkim kodzie.",
    )
    p.add_argument(
        "--dept", "-d",
        type=int,
        metavar="KOD",
        default=None,
        help="Tylko PLU z danego działu.",
    )
    p.set_defaults(func=run)
