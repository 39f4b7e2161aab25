"""Wspólne dla komend: wczytanie zadania z pliku lub stdin z raportem błędów."""

from __future__ import annotations

import pathlib

from rich.console import Console
from rich.markup import escape

from data_model import IlnlpError, ParseError, Task


def report(console: Console, error: IlnlpError) -> None:
    console.print(f"[red]Błąd[/red] [dim]({error.code})[/dim]: {escape(error.message)}")


def read_task(path: str | None, console: Console) -> Task:
    """Parsuje zadanie; przy błędzie wypisuje komunikat i kończy proces kodem 1."""
    from solver import load_task

    source = pathlib.Path(path) if path else None
    if source is not None and not source.exists():
        console.print(f"[red]Brak pliku zadania:[/red] {source}")
        raise SystemExit(1)

    try:
        return load_task(source)
    except ParseError as e:
        report(console, e)
        raise SystemExit(1)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Błąd odczytu zadania:[/red] {escape(str(e))}")
        raise SystemExit(1)
