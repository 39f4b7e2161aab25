"""
ilnlp/ilasp.py — uruchamianie ILASP na wygenerowanym programie.

Argumenty przekazywane są do ILASP bez zmian; znane flagi są jedynie
sprawdzane i nieznane zgłaszane jako ostrzeżenia (nie błędy).
Czas CPU ILASP odczytywany jest z linii "Total" na stderr; gdy jej brak,
przyjmowany jest czas zegarowy przebiegu.
"""

from __future__ import annotations

import pathlib
import re
import subprocess
import time
from typing import Sequence

from data_model import IlaspError

from .stat import Stat, peak_memory

KNOWN_ARGS = frozenset({
    "-na", "-ml=2", "--ml=2", "-v", "--quiet",
    "--version=1", "--version=2", "--version=2i", "--version=3", "--version=4",
})

_TOTAL_RE = re.compile(r":\s*([0-9]+(?:\.[0-9]+)?)\s*s\s*$")


def check_args(args: Sequence[str]) -> list[str]:
    """Zwraca ostrzeżenia dla nieznanych flag i braku wersji ILASP."""
    warnings: list[str] = []
    has_version = False
    for arg in args:
        if arg.startswith("--version=") or arg == "-v":
            has_version = True
        if arg not in KNOWN_ARGS and not arg.startswith(("-ml=", "--ml=")):
            warnings.append(f"Argument ILASP '{arg}' może być nieprawidłowy (sprawdź ILASP --help).")
    if not has_version:
        warnings.append("Nie podano wersji ILASP; ILASP wymaga --version=[1|2|2i|3|4].")
    return warnings


def parse_total_time(stderr: str) -> float | None:
    """Pierwsza linia zawierająca 'Total', np. 'Total                    : 0.12s' → 0.12."""
    for line in stderr.splitlines():
        if "Total" in line:
            m = _TOTAL_RE.search(line)
            return float(m.group(1)) if m else None
    return None


def run_ilasp(
    binary:       str,
    args:         Sequence[str],
    program_path: pathlib.Path,
    stat:         Stat,
    out_path:     pathlib.Path | None = None,
) -> str:
    """
    Uruchamia ILASP i zwraca jego stdout.

    Zapisuje w stat czas CPU ILASP i szczytową pamięć procesu potomnego.
    Gdy podano out_path, stdout jest tam również zapisywany.

    Raises:
        IlaspError gdy nie da się uruchomić ILASP lub kończy się błędem.
    """
    cmd = [binary, *(a.strip() for a in args), str(program_path)]
    start = time.perf_counter()
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, check=False)
    except OSError as exc:
        raise IlaspError(f"Nie można uruchomić ILASP ({binary}): {exc}") from exc
    elapsed = time.perf_counter() - start

    cpu_time = parse_total_time(proc.stderr)
    stat.record_ilasp_cpu_time(cpu_time if cpu_time is not None else elapsed)
    memory = peak_memory(children=True)
    if memory is not None:
        stat.record_ilasp_memory(memory)

    if proc.returncode != 0:
        raise IlaspError(
            f"ILASP zakończył się kodem {proc.returncode}",
            returncode=proc.returncode,
            stderr=proc.stderr,
        )

    if out_path is not None:
        out_path.write_text(proc.stdout, encoding="utf-8")
    return proc.stdout
