"""Komenda: tmsedit plu-set — zmiana pól istniejącego PLU."""

from __future__ import annotations

import argparse

from rich.console import Console

from data_model.errors import TmsError
from editor import update_plu_field
from validator import validate_plu_field
from tmsedit._files import add_io_arguments, add_out_argument, fail, load_document, save_document

console = Console()

# atrybut argparse → nazwa pola edytowalnego
_FIELDS: dict[str, str] = {
    "name":      "name",
    "price":     "price",
    "unit_type": "unit_type",
    "dept":      "department",
}


def run(args: argparse.Namespace) -> None:
    changes = {
        field: getattr(args, attr)
        for attr, field in _FIELDS.items()
        if getattr(args, attr) is not None
    }
    if not changes:
        console.print("[yellow]Nic do zmiany — podaj co najmniej jedną z opcji --name/--price/--unit/--dept.[/yellow]")
        raise SystemExit(1)

    path, doc = load_document(args.tms_file)

    try:
        for field, value in changes.items():
            validate_plu_field(field, value).raise_if_invalid()
        for field, value in changes.items():
            record = update_plu_field(doc, args.plu_id, field, value)
    except TmsError as e:
        fail(e)

    console.print(
        f"PLU [bold cyan]{record.id}[/bold cyan]: {record.name}  "
        f"cena={record.price}  jedn.={record.unit_type}  dział={record.department}"
    )
    save_document(doc, path, args.out)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "plu-set",
        help="Zmienia nazwę, cenę, typ jednostki lub dział PLU.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Zmienia wybrane pola jednego PLU. Pozostałe linie pliku zostają
zapisane bajt w bajt bez zmian.

Cena w formacie wagi: <liczba>,<liczba>, np. 750,0.

Przykłady:
  tmsedit plu-set A_000.TMS 9001 --price 750,0
  tmsedit plu-set A_000.TMS 9001 --name "Marchew" --dept 9 --out nowy.TMS
        """,
    )
    add_io_arguments(p)
    p.add_argument("plu_id", type=int, metavar="ID", help="Identyfikator PLU.")
    p.add_argument("--name", metavar="NAZWA", default=None, help="Nowa nazwa.")
    p.add_argument("--price", metavar="CENA", default=None, help="Nowa cena, np. 750,0.")
    p.add_argument(
        "--unit", dest="unit_type",
        type=int, choices=[1, 2], default=None,
        help="Typ jednostki: 1 = waga, 2 = sztuki.",
    )
    p.add_argument("--dept", type=int, metavar="KOD", default=None, help="Kod działu.")
    add_out_argument(p)
    p.set_defaults(func=run)
