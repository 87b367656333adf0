"""Komendy tmsedit — każdy moduł udostępnia add_parser(subparsers) i run(args)."""
