"""
induction/types.py — zadanie indukcji przekazywane do szablonu ILASP.

ILExample       — (incl, excl, ctx): co teoria musi / nie może wyprowadzić
                  w kontekście ctx
SearchSpace     — słowniki kandydatów: positive_body, general_body, head
InductionTask   — przykłady pozytywne, negatywne, przestrzeń, tło
InductionTaskBuilder — zbiera elementy; build() sortuje i deduplikuje

Zadanie jest parametryzowane tylko wartościami renderowalnymi (Renderable):
szablon dostaje wyłącznie ich postać tekstową.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol

from data_model import Literal


class Renderable(Protocol):
    """Wartość z trwałą postacią tekstową (literał, reguła)."""

    def __str__(self) -> str: ...


def _strings(items: Iterable[Renderable]) -> list[str]:
    return [str(item) for item in items]


# ---------------------------------------------------------------------------
# ILExample
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, order=True)
class ILExample:
    """
    Przykład uczący z kontekstem.

    - incl: literały, które teoria z kontekstem musi wyprowadzić
    - excl: literały, których nie może wyprowadzić
    - ctx:  fakty wejściowe ustalające scenariusz
    """
    incl: tuple[Literal, ...]
    excl: tuple[Literal, ...]
    ctx:  tuple[Literal, ...]

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "incl": _strings(self.incl),
            "excl": _strings(self.excl),
            "ctx":  _strings(self.ctx),
        }


# ---------------------------------------------------------------------------
# SearchSpace
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SearchSpace:
    """Słowniki kandydatów na elementy reguł (posortowane, bez powtórzeń)."""
    positive_body: tuple[Literal, ...] = ()
    general_body:  tuple[Literal, ...] = ()
    head:          tuple[Literal, ...] = ()

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "positive_body": _strings(self.positive_body),
            "general_body":  _strings(self.general_body),
            "head":          _strings(self.head),
        }


# ---------------------------------------------------------------------------
# InductionTask
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InductionTask:
    pos_examples: tuple[ILExample, ...]
    neg_examples: tuple[ILExample, ...]
    search_space: SearchSpace
    background:   tuple[Renderable, ...]

    def to_context(self) -> dict[str, Any]:
        """Dane dla szablonu: wszystkie elementy w postaci tekstowej."""
        return {
            "pos_examples": [e.to_dict() for e in self.pos_examples],
            "neg_examples": [e.to_dict() for e in self.neg_examples],
            "search_space": self.search_space.to_dict(),
            "background":   _strings(self.background),
        }


def _normalized[T](items: Iterable[T]) -> tuple[T, ...]:
    return tuple(sorted(set(items)))


@dataclass(slots=True)
class InductionTaskBuilder:
    """
    Zbiera przykłady, słowniki i tło; build() tworzy niezmienne zadanie.

    Przykłady i słowniki są sortowane i deduplikowane dopiero w build(),
    tło zachowuje kolejność z wejścia.
    """
    pos_examples:  list[ILExample]  = field(default_factory=list)
    neg_examples:  list[ILExample]  = field(default_factory=list)
    positive_body: list[Literal]    = field(default_factory=list)
    general_body:  list[Literal]    = field(default_factory=list)
    head:          list[Literal]    = field(default_factory=list)
    background:    list[Renderable] = field(default_factory=list)

    def push_pos_example(
        self,
        incl: Iterable[Literal],
        excl: Iterable[Literal],
        ctx:  Iterable[Literal],
    ) -> None:
        self.pos_examples.append(ILExample(tuple(incl), tuple(excl), tuple(ctx)))

    def push_neg_example(
        self,
        incl: Iterable[Literal],
        excl: Iterable[Literal],
        ctx:  Iterable[Literal],
    ) -> None:
        self.neg_examples.append(ILExample(tuple(incl), tuple(excl), tuple(ctx)))

    def push_background(self, rule: Renderable) -> None:
        self.background.append(rule)

    def push_positive_body(self, literal: Literal) -> None:
        self.positive_body.append(literal)

    def push_general_body(self, literal: Literal) -> None:
        self.general_body.append(literal)

    def push_head(self, literal: Literal) -> None:
        self.head.append(literal)

    def build(self) -> InductionTask:
        return InductionTask(
            pos_examples=_normalized(self.pos_examples),
            neg_examples=_normalized(self.neg_examples),
            search_space=SearchSpace(
                positive_body=_normalized(self.positive_body),
                general_body=_normalized(self.general_body),
                head=_normalized(self.head),
            ),
            background=tuple(self.background),
        )
