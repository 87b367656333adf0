"""Komenda: tmsedit depts — listowanie działów (DPT) i klas (CLS)."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box

from tms_parser import extract_cls, extract_dpt
from tmsedit._files import add_io_arguments, load_document

console = Console(width=120)


def run(args: argparse.Namespace) -> None:
    _, doc = load_document(args.tms_file)
    depts = extract_dpt(doc)
    classes = extract_cls(doc)

    if not depts and not classes:
        console.print("[yellow]Brak sekcji DPT i CLS.[/yellow]")
        return

    dept_names = {d.id: d.name for d in depts}

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("KOD",   justify="right", style="bold cyan", no_wrap=True)
    table.add_column("NAZWA", no_wrap=False, max_width=40)
    table.add_column("KLASY", no_wrap=False, max_width=60)

    for d in depts:
        cls_txt = ", ".join(f"{c.id} {c.name}" for c in classes if c.dept_id == d.id)
        table.add_row(str(d.id), d.name, cls_txt or "-")

    orphans = [c for c in classes if c.dept_id not in dept_names]
    for c in orphans:
        table.add_row("?", f"[dim](dział {c.dept_id})[/dim]", f"{c.id} {c.name}")

    console.print()
    console.print(table)
    console.print(f"  [dim]{len(depts)} działów, {len(classes)} klas[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "depts",
        help="Listuje działy (DPT) z przypisanymi klasami (CLS).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Listuje działy z sekcji DPT; dla każdego działu klasy z sekcji CLS.
Klasy wskazujące nieistniejący dział są pokazane na końcu z kodem "?".

Przykłady:
  tmsedit depts A_000.TMS
        """,
    )
    add_io_arguments(p)
    p.set_defaults(func=run)
