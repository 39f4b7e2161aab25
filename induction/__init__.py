"""
induction — synteza zadania ILASP z przykładów wejście/wyjście.

Publiczne API:
  build_induction_task(task, stat)          → InductionTask (pełny przebieg)
  compute_universe(task)                    → LitSet
  universe_stats(universe, registry)        → (rozmiar, liczba predykatów)
  synthesize(task, universe)                → InductionTask
  compute_example(example, universe, builder, registry)
  subsets_of_size(items, k)                 → iterator krotek
  render(induction_task, template)          → str (program ILASP)
  load_template(path)                       → str
  ILExample, SearchSpace, InductionTask, InductionTaskBuilder, Renderable
"""

from .types import (
    ILExample,
    InductionTask,
    InductionTaskBuilder,
    Renderable,
    SearchSpace,
)
from .subsets import subsets_of_size
from .universe import compute_universe, universe_stats
from .synthesizer import compute_example, synthesize
from .render import TEMPLATE_PATH, load_template, render
from .pipeline import UniverseStatsRecorder, build_induction_task

__all__ = [
    "ILExample",
    "InductionTask",
    "InductionTaskBuilder",
    "Renderable",
    "SearchSpace",
    "subsets_of_size",
    "compute_universe",
    "universe_stats",
    "compute_example",
    "synthesize",
    "TEMPLATE_PATH",
    "load_template",
    "render",
    "UniverseStatsRecorder",
    "build_induction_task",
]
