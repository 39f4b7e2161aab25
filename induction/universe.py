"""
induction/universe.py — wszechświat literałów zadania.

Wszechświat to suma faktów wyprowadzalnych z tła w scenariuszach
(wejście przykładu ∪ jedno z jego wyjść), po jednym groundingu na parę
(przykład, wyjście). Względem niego liczone są zbiory excl przykładów.
"""

from __future__ import annotations

from data_model import Lit, LitSet, LiteralRegistry, SortedSet, Task
from solver.engine import ground_literals


def compute_universe(task: Task) -> LitSet:
    """
    Grounding tła dla każdej pary (przykład, wyjście); wynik zapisany w rejestrze.

    Raises:
        SolverError przy błędzie clingo.
    """
    universe: list[Lit] = []
    for example in task.examples:
        for output in example.outputs:
            for literal in ground_literals(task.background, example.input, output, task.registry):
                universe.append(task.create_literal(literal))
    return SortedSet(universe)


def universe_stats(universe: LitSet, registry: LiteralRegistry) -> tuple[int, int]:
    """Zwraca (liczba literałów, liczba różnych predykatów) wszechświata."""
    literals = registry.get_literals(universe)
    return len(literals), len({literal.predicate for literal in literals})
