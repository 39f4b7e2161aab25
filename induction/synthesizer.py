"""
induction/synthesizer.py — synteza przykładów uczących dla ILASP.

Dla każdego przykładu (wejście I, wyjścia O, wszechświat U):

  O puste      → jeden przykład negatywny: incl = {}, excl = {}, ctx = I
  każde s ∈ O  → przykład pozytywny:       incl = s,  excl = U − s, ctx = I
  l ∈ U − ⋃O   → przykład negatywny:       incl = {l}, excl = {},   ctx = I
  modele pozorne → przykłady negatywne z minimalizacji (_spurious_models)

Przestrzeń poszukiwań: ⋃O − I → head i general_body; I → positive_body.
"""

from __future__ import annotations

from collections.abc import Iterable

from data_model import Example, Lit, LitSet, Literal, LiteralRegistry, SortedSet, Task

from .subsets import subsets_of_size
from .types import InductionTask, InductionTaskBuilder


def _resolve(registry: LiteralRegistry, lits: Iterable[Lit]) -> list[Literal]:
    # identyfikatory spoza rejestru to błąd programu: InvalidLiteralError
    return [registry.get_literal(lit) for lit in lits]


def _spurious_candidates(example: Example, literals: LitSet) -> list[LitSet]:
    """
    Niepuste, niepełne podzbiory ⋃O − I, które nie są ani podzbiorem, ani
    nadzbiorem żadnego s − I (s ∈ O). Kolejność: rosnąca liczność.
    """
    less_out = [output.difference(example.input) for output in example.outputs]
    elements = list(literals.difference(example.input))

    candidates: list[LitSet] = []
    for size in range(1, len(elements)):
        for combination in subsets_of_size(elements, size):
            subset = SortedSet(combination)
            if any(o.is_subset(subset) or o.is_superset(subset) for o in less_out):
                continue
            candidates.append(subset)
    return candidates


def _spurious_models(
    example:  Example,
    universe: LitSet,
    literals: LitSet,
    builder:  InductionTaskBuilder,
    registry: LiteralRegistry,
) -> None:
    """
    Przykłady negatywne wykluczające modele pozorne.

    Bierzemy najmniejszego kandydata a, odcinamy wszystkie jego nadzbiory
    (bez nadzbiorów grupą jest samo a) i dla nadzbiorów o maksymalnej
    liczności b emitujemy: incl = a ∪ I, excl = U − (I ∪ b), ctx = I.
    Pozostałe nadzbiory a są pokryte przez te przykłady.
    """
    ctx = _resolve(registry, example.input)
    candidates = _spurious_candidates(example, literals)

    while candidates:
        a = candidates.pop(0)
        supersets = [b for b in candidates if a.is_subset(b)]
        candidates = [b for b in candidates if not a.is_subset(b)]
        if not supersets:
            supersets = [a]

        incl = _resolve(registry, a.union(example.input))
        last_len = 0
        for b in reversed(supersets):
            if len(b) < last_len:
                break
            last_len = len(b)
            excl = universe.difference(example.input.union(b))
            builder.push_neg_example(incl, _resolve(registry, excl), ctx)


def compute_example(
    example:  Example,
    universe: LitSet,
    builder:  InductionTaskBuilder,
    registry: LiteralRegistry,
) -> None:
    """
    Dopisuje do buildera przykłady i słowniki wynikające z jednego przykładu.

    Raises:
        InvalidLiteralError gdy któryś identyfikator nie pochodzi z registry.
    """
    literals = SortedSet(lit for output in example.outputs for lit in output)
    ctx = _resolve(registry, example.input)

    if not example.outputs:
        builder.push_neg_example([], [], ctx)
    else:
        for output in example.outputs:
            builder.push_pos_example(
                _resolve(registry, output),
                _resolve(registry, universe.difference(output)),
                ctx,
            )
        for lit in universe.difference(literals):
            builder.push_neg_example([registry.get_literal(lit)], [], ctx)
        _spurious_models(example, universe, literals, builder, registry)

    for literal in _resolve(registry, literals.difference(example.input)):
        builder.push_head(literal)
        builder.push_general_body(literal)
    for literal in ctx:
        builder.push_positive_body(literal)


def synthesize(task: Task, universe: LitSet) -> InductionTask:
    """Buduje zadanie indukcji: tło zadania + przykłady ze wszystkich przykładów."""
    builder = InductionTaskBuilder()
    for rule in task.background:
        builder.push_background(rule)
    for example in task.examples:
        compute_example(example, universe, builder, task.registry)
    return builder.build()
