"""
validator/compatibility.py — sprawdzanie zgodności par przykładów.

check_compatibility(task) sprawdza każdą nieuporządkowaną parę (e1, e2)
(w kolejności indeksów) i przerywa na pierwszym naruszeniu.

Dla każdego wyjścia s1 przykładu e1, które nie jest wyjściem e2, i dla
którego e2.input ⊆ s1:
  (i)   istnieje wyjście s2 przykładu e2 z e1.input ⊆ s2, a s1 i s2 są
        w relacji zawierania przy różnej liczności     → IncompatibleOneError
  (ii)  model najmniejszy reguł definitywnych tła z faktami e2.input
        zawiera e1.input                                → IncompatibleTwoError
  (iii) któryś zbiór odpowiedzi reguł definitywnych z faktami e2.input
        zawiera e1.input (wyliczane są wszystkie)      → IncompatibleThreeError
"""

from __future__ import annotations

from data_model import (
    Example,
    IncompatibleOneError,
    IncompatibleThreeError,
    IncompatibleTwoError,
    LitSet,
    Task,
)
from solver.engine import compute_models

# limit=0: wszystkie zbiory odpowiedzi
ALL_MODELS = 0


def _distinct_outputs(first: Example, second: Example) -> list[LitSet]:
    """Wyjścia first, które nie są wyjściami second (bez powtórzeń, w kolejności)."""
    return [s for s in dict.fromkeys(first.outputs) if s not in second.outputs]


def _violates_condition_one(e1: Example, e2: Example, s1: LitSet) -> bool:
    for s2 in e2.outputs:
        if not e1.input.is_subset(s2):
            continue
        if (s1.is_subset(s2) or s2.is_subset(s1)) and len(s1) != len(s2):
            return True
    return False


def check_pair(task: Task, first: int, second: int) -> None:
    """
    Sprawdza parę przykładów o indeksach first < second.

    Raises:
        IncompatibleOneError / IncompatibleTwoError / IncompatibleThreeError
        NoModelError, SolverError z zapytań do clingo
    """
    e1 = task.examples[first]
    e2 = task.examples[second]
    definite = task.definite_rules()

    for s1 in _distinct_outputs(e1, e2):
        if not e2.input.is_subset(s1):
            continue

        if _violates_condition_one(e1, e2, s1):
            raise IncompatibleOneError(first, second)

        least_model = compute_models(definite, e2.input, task.registry, 1)[0]
        if e1.input.is_subset(least_model):
            raise IncompatibleTwoError(first, second)

        answer_sets = compute_models(definite, e2.input, task.registry, ALL_MODELS)
        if any(e1.input.is_subset(m) for m in answer_sets):
            raise IncompatibleThreeError(first, second)


def check_compatibility(task: Task) -> None:
    """Sprawdza wszystkie pary przykładów; przy mniej niż dwóch nic nie robi."""
    if len(task.examples) < 2:
        return
    for first in range(len(task.examples)):
        for second in range(first + 1, len(task.examples)):
            check_pair(task, first, second)
