"""Komenda: ilnlp check — sprawdzenie zgodności przykładów zadania."""

from __future__ import annotations

import argparse

from rich.console import Console

from data_model import IncompatibleError, IlnlpError
from ilnlp._task import read_task, report

console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    from validator import check_compatibility

    task = read_task(args.input, console)
    n = len(task.examples)
    console.print(f"Wczytano zadanie: {len(task.background)} reguł tła, {n} przykładów")

    try:
        check_compatibility(task)
    except IncompatibleError as e:
        console.print(
            f"[red]NIEZGODNE[/red] — warunek [bold]({e.condition})[/bold], "
            f"przykłady [cyan]{e.first + 1}[/cyan] i [cyan]{e.second + 1}[/cyan]"
        )
        raise SystemExit(1)
    except IlnlpError as e:
        report(console, e)
        raise SystemExit(1)
    except KeyboardInterrupt:
        console.print("[yellow]Przerwano (Ctrl-C).[/yellow]")
        raise SystemExit(130)

    pairs = n * (n - 1) // 2
    console.print(f"[green]Zgodne[/green] — sprawdzono {pairs} par przykładów")


def add_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "check",
        help="Sprawdza zgodność przykładów (warunki i–iii) bez syntezy.",
        description=(
            "Parsuje zadanie i sprawdza każdą parę przykładów względem warunków\n"
            "zgodności. Kod wyjścia 1 przy pierwszej niezgodnej parze."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "input", nargs="?", default=None, metavar="INPUT",
        help="Plik zadania (domyślnie: stdin).",
    )
    p.set_defaults(func=run)
