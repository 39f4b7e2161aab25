"""
Struktury danych dla reguł tła (background).

Reguła:      head :- body[0], ..., body[n].
Fakt:        head.
Ograniczenie: :- body[0], ..., body[n].
"""

from __future__ import annotations

from dataclasses import dataclass

from .common import Atom, BodyLiteral, Literal


@dataclass(frozen=True, slots=True)
class Rule:
    """
    Reguła programu ASP.

    - head: literał w głowie; None dla ograniczenia (constraint)
    - body: atomy (pozytywne lub NAF) i porównania, w kolejności z wejścia
    """
    head: Literal | None
    body: tuple[BodyLiteral, ...] = ()

    @property
    def is_fact(self) -> bool:
        """True gdy ciało jest puste, a głowa obecna."""
        return self.head is not None and not self.body

    @property
    def is_definite(self) -> bool:
        """True gdy żaden atom ciała nie jest zanegowany (porównania się nie liczą)."""
        return not self.negated_body_atoms

    @property
    def negated_body_atoms(self) -> list[Atom]:
        """Atomy w ciele z negated=True (NAF)."""
        return [b for b in self.body if isinstance(b, Atom) and b.negated]

    def __str__(self) -> str:
        head = str(self.head) if self.head is not None else ""
        if not self.body:
            return f"{head}."
        body = ", ".join(str(b) for b in self.body)
        if not head:
            return f":- {body}."
        return f"{head} :- {body}."
