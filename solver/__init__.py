"""
solver — wywołania clingo i wczytywanie zadań dla ilnlp.

Publiczne API:
  ground_literals(rules, facts_a, facts_b, registry)   → list[Literal]
  compute_models(rules, facts, registry, limit)         → list[LitSet]
  build_program(rules, fact_sets, registry)             → str
  parse_task(text)                                      → Task
  load_task(path | None)                                → Task
"""

from .engine import (
    build_program,
    compute_models,
    ground_literals,
    literal_from_symbol,
)
from .loader import load_task, parse_task

__all__ = [
    "build_program",
    "compute_models",
    "ground_literals",
    "literal_from_symbol",
    "load_task",
    "parse_task",
]
