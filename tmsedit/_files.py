"""Wczytywanie i zapis plików TMS dla komend CLI (jedyne miejsce z I/O)."""

from __future__ import annotations

import argparse
import logging
import shutil
from pathlib import Path

from rich.console import Console

from data_model.documents import Document
from data_model.errors import InvalidValueError, RecordReferenceError, TmsError
from tms_parser import parse
from tms_writer import diff_lines, serialize

from tmsedit._config import get_settings

console = Console()
logger = logging.getLogger(__name__)


def load_document(path_arg: str) -> tuple[Path, Document]:
    path = Path(path_arg)
    if not path.is_file():
        console.print(f"[red]Plik nie istnieje:[/red] {path}")
        raise SystemExit(1)

    try:
        doc = parse(path.read_bytes())
    except TmsError as e:
        console.print(f"[red]Błąd parsowania:[/red] {e}")
        raise SystemExit(1)

    for name in doc.recovered_sections:
        console.print(
            f"[yellow]Uwaga:[/yellow] sekcja [bold]{name}[/bold] nie miała znacznika END "
            f"— dopisano go przy zapisie."
        )
    return path, doc


def save_document(doc: Document, source: Path, out: str | None) -> Path:
    """
    Zapisuje dokument do `out` albo nadpisuje `source` (z kopią .bak).

    Zapisany wynik jest sprawdzany ponownym parsowaniem i zapisem;
    raportowana jest liczba zmienionych linii.
    """
    target = Path(out) if out else source
    data = serialize(doc)

    if target.resolve() == source.resolve() and get_settings().backup:
        backup = source.with_name(source.name + ".bak")
        shutil.copy2(source, backup)
        console.print(f"[dim]Kopia zapasowa: {backup}[/dim]")

    target.write_bytes(data)
    if serialize(parse(data)) != data:
        console.print("[yellow]Uwaga:[/yellow] zapisany plik nie przechodzi round-trip.")

    changed = diff_lines(doc.raw_bytes, data)
    logger.info("Zapisano %s (%d bajtów, %d zmienionych linii)", target, len(data), len(changed))
    console.print(
        f"[green]Zapisano:[/green] {target}  "
        f"[dim]({len(data)} bajtów, zmienione linie: {len(changed)})[/dim]"
    )
    return target


def fail(e: TmsError) -> None:
    """Wypisuje błąd silnika (z listą błędów walidacji) i kończy z kodem 1."""
    if isinstance(e, InvalidValueError):
        console.print("[red]Niepoprawna wartość:[/red]")
        for err in e.report.errors:
            console.print(f"  [red]{err.code}[/red] {err.field}: {err.message}")
    elif isinstance(e, RecordReferenceError):
        console.print(f"[red]Nie znaleziono:[/red] {e}")
    else:
        console.print(f"[red]Błąd:[/red] {e}")
    raise SystemExit(1)


def add_io_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "tms_file",
        metavar="PLIK.TMS",
        help="Ścieżka do pliku TMS.",
    )


def add_out_argument(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--out", "-o",
        metavar="PLIK",
        default=None,
        help="Zapisz wynik do innego pliku (domyślnie: nadpisz wejście, z kopią .bak).",
    )
