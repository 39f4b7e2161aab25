"""Komenda: ilnlp universe — wszechświat literałów zadania."""

from __future__ import annotations

import argparse
from collections import defaultdict

from rich import box
from rich.console import Console
from rich.table import Table

from data_model import IlnlpError
from ilnlp._task import read_task, report

console = Console(stderr=True)


def run(args: argparse.Namespace) -> None:
    from induction import compute_universe, universe_stats

    task = read_task(args.input, console)
    try:
        universe = compute_universe(task)
    except IlnlpError as e:
        report(console, e)
        raise SystemExit(1)
    except KeyboardInterrupt:
        console.print("[yellow]Przerwano (Ctrl-C).[/yellow]")
        raise SystemExit(130)

    size, unique_predicates = universe_stats(universe, task.registry)
    if not size:
        console.print("[yellow]Wszechświat jest pusty.[/yellow]")
        return

    by_predicate: dict[str, list[str]] = defaultdict(list)
    for literal in task.registry.get_literals(universe):
        by_predicate[literal.predicate].append(str(literal))

    table = Table(box=box.SIMPLE_HEAD, header_style="bold white", show_header=True)
    table.add_column("PREDYKAT", style="bold cyan", no_wrap=True)
    table.add_column("LITERAŁY")
    for predicate in sorted(by_predicate):
        table.add_row(predicate, "  ".join(by_predicate[predicate]))
    console.print(table)
    console.print(f"  [dim]{size} literałów w {unique_predicates} predykatach[/dim]")


def add_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "universe",
        help="Wyświetla wszechświat literałów wyprowadzalnych z tła.",
    )
    p.add_argument(
        "input", nargs="?", default=None, metavar="INPUT",
        help="Plik zadania (domyślnie: stdin).",
    )
    p.set_defaults(func=run)
