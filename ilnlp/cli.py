"""
ilnlp — narzędzie CLI do syntezy zadań ILASP z przykładów wejście/wyjście.

Użycie:
  ilnlp <komenda> [opcje]

Komendy:
  convert    Generuje program ILASP z pliku zadania (opcjonalnie uruchamia ILASP).
  check      Sprawdza zgodność przykładów zadania.
  universe   Wyświetla wszechświat literałów zadania.

Konfiguracja (zmienne środowiskowe):
  ILNLP_ILASP        plik wykonywalny ILASP       (domyślnie: ILASP)
  ILNLP_ILASP_ARGS   dodatkowe argumenty ILASP    (np. "--version=4 -na")
  ILNLP_TEMPLATE     domyślny szablon programu
"""

from __future__ import annotations

import argparse
import sys

# Windows: konsola bywa w cp1252, a teksty pomocy zawierają polskie znaki.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from ilnlp.commands import check as cmd_check
from ilnlp.commands import convert as cmd_convert
from ilnlp.commands import universe as cmd_universe


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ilnlp",
        description="ilnlp — synteza zadań ILASP z przykładów wejście/wyjście.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="ilnlp 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_convert.add_parser(subparsers)
    cmd_check.add_parser(subparsers)
    cmd_universe.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
