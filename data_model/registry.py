"""
data_model/registry.py — rejestr (interning) literałów.

LiteralRegistry przydziela literałom małe identyfikatory całkowite:
  _literals: lista, id - 1 → Literal
  _ids:      słownik Literal → id

Identyfikatory są przydzielane rosnąco od 1 przy pierwszym wystąpieniu;
równe strukturalnie literały dostają ten sam identyfikator. Rejestr żyje
tyle co jedno zadanie (Task) i ma jednego właściciela, a przydział nie jest
idempotentny przy współbieżnym pierwszym wstawieniu tego samego literału.
"""

from __future__ import annotations

from collections.abc import Iterable

from .common import Lit, Literal
from .errors import InvalidLiteralError


class LiteralRegistry:
    """
    Dwukierunkowe odwzorowanie Literal ↔ Lit.

    Użycie::

        registry = LiteralRegistry()
        lit = registry.create_literal(Literal("p", ("a",)))
        registry.get_literal(lit)   # Literal("p", ("a",))
    """

    def __init__(self) -> None:
        self._literals: list[Literal] = []
        self._ids: dict[Literal, Lit] = {}

    def create_literal(self, literal: Literal) -> Lit:
        """Zwraca istniejący identyfikator literału albo przydziela kolejny."""
        lit = self._ids.get(literal)
        if lit is None:
            self._literals.append(literal)
            lit = len(self._literals)
            self._ids[literal] = lit
        return lit

    def get_literal(self, lit: Lit) -> Literal:
        """
        Zwraca literał o danym identyfikatorze.

        Raises:
            InvalidLiteralError gdy identyfikator nie został przydzielony.
        """
        if lit < 1 or lit > len(self._literals):
            raise InvalidLiteralError(lit)
        return self._literals[lit - 1]

    def get_literals(self, lits: Iterable[Lit]) -> list[Literal]:
        """Rozwiązuje wiele identyfikatorów; identyfikatory spoza zakresu są pomijane."""
        count = len(self._literals)
        return [self._literals[lit - 1] for lit in lits if 0 < lit <= count]

    def lookup(self, literal: Literal) -> Lit | None:
        """Identyfikator literału bez przydzielania nowego (None gdy nieznany)."""
        return self._ids.get(literal)

    def __contains__(self, literal: object) -> bool:
        return literal in self._ids

    def __len__(self) -> int:
        return len(self._literals)
