"""Komenda: tmsedit keys — siatka klawiszy jednej warstwy z przypisanymi PLU."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.table import Table
from rich import box

from data_model.field_map import GRID_KEY_COUNT, LAYER_COUNT, MAX_KEY_INDEX
from editor import layer_grid
from tms_parser import extract_plu
from tmsedit._files import add_io_arguments, load_document

console = Console(width=200)

# Siatka fizyczna: 4 rzędy po 10 klawiszy
_COLUMNS = 10

LAYER_NAMES: dict[int, str] = {
    0: "L1 główna",
    1: "L2 czerwona",
    2: "L3 niebieska",
}


def _cell(key_index: int, grid: dict, names: dict[int, str]) -> str:
    entry = grid.get(key_index)
    if entry is None:
        return f"[dim]{key_index}: —[/dim]"
    if not entry.is_assigned:
        return f"[dim]{key_index}: pusty[/dim]"
    name = names.get(entry.plu_id, "?")
    return f"[bold]{key_index}[/bold]: {entry.plu_id}\n[cyan]{name[:14]}[/cyan]"


def run(args: argparse.Namespace) -> None:
    _, doc = load_document(args.tms_file)
    grid = layer_grid(doc, args.layer)
    if not grid:
        console.print(f"[yellow]Brak wpisów SCP dla warstwy {args.layer}.[/yellow]")
        return

    names = {p.id: p.name for p in extract_plu(doc)}

    table = Table(
        box=box.SQUARE,
        show_header=False,
        expand=False,
        title=f"Warstwa {args.layer} — {LAYER_NAMES.get(args.layer, '')}",
    )
    for _ in range(_COLUMNS):
        table.add_column(no_wrap=True, min_width=12)

    keys = list(range(1, GRID_KEY_COUNT + 1))
    for start in range(0, len(keys), _COLUMNS):
        table.add_row(*[_cell(k, grid, names) for k in keys[start:start + _COLUMNS]])

    console.print()
    console.print(table)

    extra = [grid[k] for k in range(GRID_KEY_COUNT + 1, MAX_KEY_INDEX + 1) if k in grid]
    if extra:
        used = sum(1 for e in extra if e.is_assigned)
        console.print(f"  [dim]Sloty {GRID_KEY_COUNT + 1}-{MAX_KEY_INDEX}: {len(extra)} wpisów, przypisanych {used}[/dim]")
    assigned = sum(1 for e in grid.values() if e.is_grid_key and e.is_assigned)
    console.print(f"  [dim]Przypisane klawisze siatki: {assigned}/{GRID_KEY_COUNT}[/dim]\n")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "keys",
        help="Wyświetla siatkę klawiszy warstwy z przypisanymi PLU.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wyświetla 40 klawiszy fizycznych wybranej warstwy (0-2) z przypisanymi
identyfikatorami i nazwami PLU oraz podsumowanie slotów 41-48.

Przykłady:
  tmsedit keys A_000.TMS
  tmsedit keys A_000.TMS --layer 2
        """,
    )
    add_io_arguments(p)
    p.add_argument(
        "--layer", "-l",
        type=int,
        choices=range(LAYER_COUNT),
        default=0,
        help="Warstwa klawiatury (domyślnie: 0).",
    )
    p.set_defaults(func=run)
