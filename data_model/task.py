"""
Zadanie wejściowe: reguły tła, przykłady wejście/wyjście, rejestr literałów.

Task jest wypełniany przez parser (push_background / push_example), a potem
tylko czytany przez przebiegi universe / zgodność / synteza.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .common import Lit, LitSet, Literal
from .registry import LiteralRegistry
from .rules import Rule
from .sorted_set import SortedSet


@dataclass(slots=True)
class Example:
    """
    Przykład: obserwowane fakty wejściowe i akceptowane zbiory odpowiedzi.

    - input:   fakty wejściowe (kontekst)
    - outputs: akceptowane zbiory odpowiedzi (świadkowie); pusta lista oznacza,
               że dla tego wejścia nie może powstać nic ponad kontekst
    """
    input: LitSet
    outputs: list[LitSet] = field(default_factory=list)


@dataclass(slots=True)
class Task:
    """Zadanie: rejestr literałów, reguły tła i przykłady."""
    registry: LiteralRegistry = field(default_factory=LiteralRegistry)
    background: list[Rule] = field(default_factory=list)
    examples: list[Example] = field(default_factory=list)

    def create_literal(self, literal: Literal) -> Lit:
        return self.registry.create_literal(literal)

    def get_literal(self, lit: Lit) -> Literal:
        return self.registry.get_literal(lit)

    def literal_set(self, literals: Iterable[Literal]) -> LitSet:
        """Interning wielu literałów naraz."""
        return SortedSet(self.registry.create_literal(literal) for literal in literals)

    def push_background(self, rule: Rule) -> None:
        self.background.append(rule)

    def push_example(self, example: Example) -> None:
        self.examples.append(example)

    def definite_rules(self) -> list[Rule]:
        """Reguły tła bez negacji w ciele."""
        return [rule for rule in self.background if rule.is_definite]
