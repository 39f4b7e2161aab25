"""
Wspólne typy pierwotne: literał, identyfikator literału, atom ciała reguły,
porównanie.

Postać tekstowa wszystkich typów jest składnią clingo/ILASP; tak są
przekazywane do solvera i do szablonu zadania.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .sorted_set import SortedSet

# ---------------------------------------------------------------------------
# Aliasy typów
# ---------------------------------------------------------------------------

# Identyfikator literału w rejestrze: 1, 2, 3, ... (0 jest nieprawidłowe)
type Lit = int

# Posortowany zbiór identyfikatorów literałów
type LitSet = SortedSet[Lit]


# ---------------------------------------------------------------------------
# Literal
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, order=True)
class Literal:
    """
    Literał ugruntowany lub z wzorcem: predicate(args...).

    - predicate: nazwa predykatu, np. "edge"
    - args:      argumenty jako napisy (stałe, zmienne, liczby), np. ("a", "X")

    Porządek i równość strukturalne: najpierw predicate, potem args.
    """
    predicate: str
    args: tuple[str, ...] = ()

    def __str__(self) -> str:
        if not self.args:
            return self.predicate
        return f"{self.predicate}({', '.join(self.args)})"


# ---------------------------------------------------------------------------
# Ciało reguły
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Atom:
    """Literał w ciele reguły, opcjonalnie zanegowany (NAF: not p(X))."""
    literal: Literal
    negated: bool = False

    def __str__(self) -> str:
        prefix = "not " if self.negated else ""
        return f"{prefix}{self.literal}"


class ComparisonOp(StrEnum):
    NOT_EQUAL = "!="
    GREATER   = ">"
    LESS      = "<"


@dataclass(frozen=True, slots=True)
class Comparison:
    """Porównanie dwóch operandów (zmiennych lub liczb): X != Y, X > 3 ..."""
    op: ComparisonOp
    left: str
    right: str

    def __str__(self) -> str:
        return f"{self.left} {self.op} {self.right}"


type BodyLiteral = Atom | Comparison
