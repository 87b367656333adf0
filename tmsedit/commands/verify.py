"""Komenda: tmsedit verify — kontrola round-trip lub porównanie dwóch plików."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box

from data_model.errors import TmsError
from tms_parser import parse
from tms_writer import RoundTripResult, diff_lines, hex_context, serialize, verify_round_trip
from tmsedit._files import fail

console = Console(width=160)

_MAX_DIFF_ROWS = 20


def _read(path_arg: str) -> bytes:
    path = Path(path_arg)
    if not path.is_file():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)
    return path.read_bytes()


def _show_mismatch(original: bytes, output: bytes, result: RoundTripResult) -> None:
    pos = result.first_diff_at
    console.print(f"[red]Różnica[/red] od bajtu [bold]{pos}[/bold]")
    console.print(f"  oryginał: [dim]{hex_context(original, pos)}[/dim]")
    console.print(f"  wynik:    [dim]{hex_context(output, pos)}[/dim]")
    console.print(f"  długości: {result.original_length} / {result.output_length}")

    diffs = diff_lines(original, output)
    if not diffs:
        return

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("LINIA", justify="right", style="bold cyan", no_wrap=True)
    table.add_column("ORYGINAŁ", no_wrap=False, max_width=60)
    table.add_column("WYNIK", no_wrap=False, max_width=60)
    for d in diffs[:_MAX_DIFF_ROWS]:
        table.add_row(
            str(d.line_no),
            "—" if d.original is None else repr(d.original)[2:-1],
            "—" if d.output is None else repr(d.output)[2:-1],
        )
    console.print(table)
    if len(diffs) > _MAX_DIFF_ROWS:
        console.print(f"  [dim]… i {len(diffs) - _MAX_DIFF_ROWS} kolejnych linii[/dim]")


def run(args: argparse.Namespace) -> None:
    original = _read(args.tms_file)

    if args.other:
        output = _read(args.other)
        label = f"{args.tms_file} ↔ {args.other}"
    else:
        try:
            output = serialize(parse(original))
        except TmsError as e:
            fail(e)
        label = f"{args.tms_file} (parse → serialize)"

    result = verify_round_trip(original, output)
    if result.match:
        console.print(f"[green]Zgodne bajt w bajt:[/green] {label}  ({result.original_length} bajtów)")
        return

    console.print(f"[red]NIEZGODNE:[/red] {label}")
    _show_mismatch(original, output, result)
    raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "verify",
        help="Sprawdza round-trip pliku lub porównuje dwa pliki bajt w bajt.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Bez drugiego pliku: parsuje i ponownie zapisuje plik w pamięci, po czym
porównuje wynik z oryginałem. Z drugim plikiem: porównuje oba pliki.
Przy niezgodności pokazuje pierwszy różny bajt i różniące się linie.
Kod wyjścia 1 oznacza niezgodność.

Przykłady:
  tmsedit verify A_000.TMS
  tmsedit verify A_000.TMS nowy.TMS
        """,
    )
    p.add_argument("tms_file", metavar="PLIK.TMS", help="Plik oryginalny.")
    p.add_argument("other", metavar="INNY.TMS", nargs="?", default=None, help="Plik do porównania.")
    p.set_defaults(func=run)
