"""Komenda: tmsedit plu-add — dodanie nowego PLU na koniec sekcji PLU."""

from __future__ import annotations

import argparse

from rich.console import Console

from data_model.errors import TmsError
from data_model.records import NewPluParams
from editor import add_plu, next_available_plu_id
from tmsedit._config import get_settings
from tmsedit._files import add_io_arguments, add_out_argument, fail, load_document, save_document

console = Console()


def run(args: argparse.Namespace) -> None:
    settings = get_settings()
    path, doc = load_document(args.tms_file)

    plu_id = args.id if args.id is not None else next_available_plu_id(doc)
    params = NewPluParams(
        id=plu_id,
        name=args.name,
        price=args.price,
        unit_type=args.unit_type if args.unit_type is not None else settings.default_unit_type,
        department=args.dept if args.dept is not None else settings.default_department,
    )

    try:
        record = add_plu(doc, params)
    except TmsError as e:
        fail(e)

    console.print(
        f"Dodano PLU [bold cyan]{record.id}[/bold cyan]: {record.name}  "
        f"cena={record.price}  dział={record.department}  (wiersz {record.row_index})"
    )
    save_document(doc, path, args.out)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "plu-add",
        help="Dodaje nowe PLU (wiersz 69-polowy z wartościami domyślnymi).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dodaje nowe PLU na koniec sekcji PLU. Bez --id używany jest najmniejszy
wolny identyfikator. Dział i typ jednostki domyślnie z konfiguracji
(TMS_DEFAULT_DEPARTMENT, TMS_DEFAULT_UNIT_TYPE).

Przykłady:
  tmsedit plu-add A_000.TMS --name "Pomidor" --price 280,0
  tmsedit plu-add A_000.TMS --id 9200 --name "Chleb" --price 5,5 --unit 2 --dept 3
        """,
    )
    add_io_arguments(p)
    p.add_argument("--id", type=int, metavar="ID", default=None, help="Identyfikator PLU.")
    p.add_argument("--name", metavar="NAZWA", required=True, help="Nazwa PLU.")
    p.add_argument("--price", metavar="CENA", required=True, help="Cena, np. 280,0.")
    p.add_argument(
        "--unit", dest="unit_type",
        type=int, choices=[1, 2], default=None,
        help="Typ jednostki: 1 = waga, 2 = sztuki.",
    )
    p.add_argument("--dept", type=int, metavar="KOD", default=None, help="Kod działu.")
    add_out_argument(p)
    p.set_defaults(func=run)
