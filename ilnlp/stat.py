"""
ilnlp/stat.py — statystyki przebiegu (czasy faz, pamięć, wszechświat).

Stat jest przekazywany przez referencję przez kolejne fazy i aktualizowany
w punktach kontrolnych:

  stat.parse()     po wczytaniu zadania
  stat.convert()   po syntezie zadania indukcji
  stat.output()    po zapisaniu programu ILASP
  stat.solve(t)    po przebiegu ILASP (t: czas CPU ILASP)
  stat.finish()    suma czasów faz

Czasy faz mierzone od poprzedniego punktu kontrolnego (CPU procesu + zegar).
"""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field

from rich import box
from rich.table import Table

NOT_AVAILABLE = "n/a"


@dataclass(frozen=True, slots=True)
class TimeRecord:
    cpu:  float
    wall: float


def _now() -> tuple[float, float]:
    return time.process_time(), time.perf_counter()


def human_bytes(size: float) -> str:
    """1536 → '1.5 KiB'."""
    for unit in ("B", "KiB", "MiB", "GiB"):
        if size < 1024 or unit == "GiB":
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GiB"


def peak_memory(children: bool = False) -> int | None:
    """
    Szczytowe zużycie pamięci (bajty) procesu lub zakończonych procesów potomnych.

    None na platformach bez getrusage (Windows).
    """
    if sys.platform == "win32":
        return None
    import resource

    who = resource.RUSAGE_CHILDREN if children else resource.RUSAGE_SELF
    maxrss = resource.getrusage(who).ru_maxrss
    # Linux: KiB, macOS: bajty
    return maxrss if sys.platform == "darwin" else maxrss * 1024


@dataclass(slots=True)
class Stat:
    parse_time:        TimeRecord | None = None
    convert_time:      TimeRecord | None = None
    output_time:       TimeRecord | None = None
    solve_time:        TimeRecord | None = None
    total_time:        TimeRecord | None = None
    ilasp_cpu_time:    float | None = None
    ilasp_memory:      int | None = None
    universe_size:     int | None = None
    unique_predicates: int | None = None
    _last: tuple[float, float] = field(default_factory=_now, repr=False)

    # ------------------------------------------------------------------
    # Punkty kontrolne
    # ------------------------------------------------------------------

    def _elapsed(self) -> TimeRecord:
        cpu, wall = _now()
        record = TimeRecord(cpu - self._last[0], wall - self._last[1])
        self._last = (cpu, wall)
        return record

    def parse(self) -> None:
        self.parse_time = self._elapsed()

    def convert(self) -> None:
        self.convert_time = self._elapsed()

    def output(self) -> None:
        self.output_time = self._elapsed()

    def solve(self, cpu_seconds: float) -> None:
        self.solve_time = TimeRecord(cpu_seconds, 0.0)
        self._last = _now()

    def finish(self) -> None:
        phases = (self.parse_time, self.convert_time, self.solve_time, self.output_time)
        total = sum(p.cpu for p in phases if p is not None)
        self.total_time = TimeRecord(total, 0.0)

    def record_ilasp_cpu_time(self, cpu_seconds: float) -> None:
        self.ilasp_cpu_time = cpu_seconds

    def record_ilasp_memory(self, memory: int) -> None:
        self.ilasp_memory = memory

    def record_universe_stats(self, size: int, unique_predicates: int) -> None:
        self.universe_size = size
        self.unique_predicates = unique_predicates

    # ------------------------------------------------------------------
    # Wyświetlanie
    # ------------------------------------------------------------------

    def rows(self) -> list[tuple[str, str]]:
        """Pary (etykieta, wartość); brakujące wartości jako 'n/a'."""
        def _time(record: TimeRecord | None) -> str:
            return f"{record.cpu:.3f}s" if record is not None else NOT_AVAILABLE

        memory = peak_memory()
        return [
            ("Parsowanie",         _time(self.parse_time)),
            ("Konwersja",          _time(self.convert_time)),
            ("Rozwiązywanie",      _time(self.solve_time)),
            ("Zapis",              _time(self.output_time)),
            ("Razem",              _time(self.total_time)),
            ("Pamięć",             human_bytes(memory) if memory is not None else NOT_AVAILABLE),
            ("ILASP CPU",          f"{self.ilasp_cpu_time:.3f}s" if self.ilasp_cpu_time is not None else NOT_AVAILABLE),
            ("ILASP pamięć",       human_bytes(self.ilasp_memory) if self.ilasp_memory is not None else NOT_AVAILABLE),
            ("Wszechświat",        f"{self.universe_size} literałów" if self.universe_size is not None else NOT_AVAILABLE),
            ("Różne predykaty",    str(self.unique_predicates) if self.unique_predicates is not None else NOT_AVAILABLE),
        ]

    def render_table(self) -> Table:
        table = Table(title="Statystyki", box=box.SIMPLE_HEAD, header_style="bold white")
        table.add_column("MIARA", style="bold cyan", no_wrap=True)
        table.add_column("WARTOŚĆ", justify="right")
        for label, value in self.rows():
            table.add_row(label, value)
        return table
