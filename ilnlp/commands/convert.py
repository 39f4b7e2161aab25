"""Komenda: ilnlp convert — synteza programu ILASP z pliku zadania."""

from __future__ import annotations

import argparse
import os
import pathlib
import sys
import tempfile

from rich.console import Console
from rich.markup import escape

from data_model import IlnlpError
from ilnlp._config import get_settings
from ilnlp._task import read_task, report
from ilnlp.stat import Stat

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _template_text(path: pathlib.Path | None) -> str | None:
    from induction import load_template

    if path is None:
        return None
    try:
        return load_template(path)
    except FileNotFoundError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)


def _write_program(program: str, path: pathlib.Path) -> None:
    try:
        path.write_text(program, encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Błąd zapisu programu:[/red] {escape(str(e))}")
        raise SystemExit(1)


def _temp_program(program: str) -> pathlib.Path:
    fd, name = tempfile.mkstemp(prefix="ilnlp-", suffix=".las")
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(program)
    return pathlib.Path(name)


def _show_stats(stat: Stat) -> None:
    stat.finish()
    console.print(stat.render_table())


# ---------------------------------------------------------------------------
# Główna logika
# ---------------------------------------------------------------------------

def _convert(args: argparse.Namespace, stat: Stat) -> None:
    from induction import build_induction_task, render
    from ilnlp.ilasp import check_args, run_ilasp

    settings = get_settings()
    template_path = pathlib.Path(args.template) if args.template else settings.template
    template = _template_text(template_path)

    console.print("[dim]Parsowanie...[/dim]")
    task = read_task(args.input, console)
    stat.parse()

    console.print("[dim]Konwersja...[/dim]")
    try:
        il_task = build_induction_task(task, stat)
        program = render(il_task, template)
    except IlnlpError as e:
        report(console, e)
        raise SystemExit(1)
    stat.convert()
    console.print(
        f"Przykłady: [green]{len(il_task.pos_examples)} pozytywnych[/green], "
        f"[red]{len(il_task.neg_examples)} negatywnych[/red]"
    )

    output = pathlib.Path(args.output) if args.output else None
    temp_path: pathlib.Path | None = None
    if output is not None:
        _write_program(program, output)
        console.print(f"Zapisano program: [bold]{output}[/bold]")
    elif args.run:
        temp_path = _temp_program(program)
    else:
        sys.stdout.write(program)
        sys.stdout.flush()
    stat.output()

    if not args.run:
        return

    ilasp_args = args.ilasp_arg if args.ilasp_arg is not None else settings.ilasp_args
    for warning in check_args(ilasp_args):
        console.print(f"[yellow]Ostrzeżenie:[/yellow] {escape(warning)}")

    binary = args.ilasp or settings.ilasp
    console.print(f"[dim]Uruchamianie ILASP ({binary})...[/dim]")
    try:
        result = run_ilasp(
            binary,
            ilasp_args,
            output if output is not None else temp_path,
            stat,
            pathlib.Path(args.ilasp_out) if args.ilasp_out else None,
        )
    except IlnlpError as e:
        report(console, e)
        stderr = getattr(e, "stderr", "")
        if stderr:
            console.print(stderr, markup=False, highlight=False)
        raise SystemExit(1)
    finally:
        if temp_path is not None:
            temp_path.unlink(missing_ok=True)

    stat.solve(stat.ilasp_cpu_time or 0.0)
    sys.stdout.write(result)
    sys.stdout.flush()


def run(args: argparse.Namespace) -> None:
    stat = Stat()
    try:
        _convert(args, stat)
    except KeyboardInterrupt:
        _show_stats(stat)
        console.print("[yellow]Przerwano (Ctrl-C).[/yellow]")
        raise SystemExit(130)
    if args.stats:
        _show_stats(stat)


# ---------------------------------------------------------------------------
# Rejestracja parsera
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "convert",
        help="Generuje program ILASP z pliku zadania (opcjonalnie uruchamia ILASP).",
        description=(
            "Parsuje zadanie (tło + przykłady I:/O:), sprawdza zgodność przykładów,\n"
            "syntetyzuje przykłady ILASP i renderuje program wg szablonu.\n\n"
            "Bez -o program trafia na stdout; z --run bez -o do pliku tymczasowego.\n\n"
            "Przykłady:\n"
            "  ilnlp convert task.txt -o task.las\n"
            "  ilnlp convert task.txt --run --ilasp-arg=--version=4 --stats\n"
            "  cat task.txt | ilnlp convert"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "input", nargs="?", default=None, metavar="INPUT",
        help="Plik zadania (domyślnie: stdin).",
    )
    p.add_argument(
        "-o", "--output", default=None, metavar="OUT",
        help="Plik wyjściowy programu ILASP.",
    )
    p.add_argument(
        "--template", default=None, metavar="T",
        help="Własny szablon jinja2 (domyślnie: ILNLP_TEMPLATE lub wbudowany).",
    )
    p.add_argument(
        "-r", "--run", action="store_true",
        help="Uruchom ILASP na wygenerowanym programie.",
    )
    p.add_argument(
        "--ilasp", default=None, metavar="BIN",
        help="Plik wykonywalny ILASP (domyślnie: ILNLP_ILASP lub 'ILASP').",
    )
    p.add_argument(
        "--ilasp-arg", action="append", default=None, metavar="ARG",
        help="Argument ILASP (powtarzalny); flagi z myślnikiem podawaj jako --ilasp-arg=--version=4.",
    )
    p.add_argument(
        "--ilasp-out", default=None, metavar="PATH",
        help="Zapisz stdout ILASP do pliku.",
    )
    p.add_argument(
        "--stats", action="store_true",
        help="Wypisz statystyki przebiegu.",
    )
    p.set_defaults(func=run)
