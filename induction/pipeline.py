"""
induction/pipeline.py — pełny przebieg: wszechświat → zgodność → synteza.

Przebiegi są sekwencyjne; pierwszy błąd (solver, niezgodność) przerywa
całość dla danego zadania.
"""

from __future__ import annotations

from typing import Protocol

from data_model import Task
from validator import check_compatibility

from .synthesizer import synthesize
from .types import InductionTask
from .universe import compute_universe, universe_stats


class UniverseStatsRecorder(Protocol):
    def record_universe_stats(self, size: int, unique_predicates: int) -> None: ...


def build_induction_task(
    task: Task,
    stat: UniverseStatsRecorder | None = None,
) -> InductionTask:
    """
    Liczy wszechświat, sprawdza zgodność przykładów i syntetyzuje zadanie.

    Args:
        task: sparsowane zadanie
        stat: opcjonalny odbiorca statystyk wszechświata (rozmiar, predykaty)

    Raises:
        IncompatibleError, NoModelError, SolverError
    """
    universe = compute_universe(task)
    if stat is not None:
        stat.record_universe_stats(*universe_stats(universe, task.registry))
    check_compatibility(task)
    return synthesize(task, universe)
