"""
solver/engine.py — wywołania zewnętrznego solvera ASP (clingo).

Dwie operacje:
  ground_literals(rules, facts_a, facts_b, registry) -> list[Literal]
      grounding reguł z dwoma zbiorami faktów; zwraca wszystkie atomy,
      które grounder ustalił jako fakty
  compute_models(rules, facts, registry, limit)      -> list[LitSet]
      grounding + wyliczanie co najwyżej `limit` modeli stabilnych
      (limit=0: wszystkie); atomy pokazywane trafiają do rejestru

Solver jest czarną skrzynką: program budujemy jako tekst (postać tekstowa
Rule / Literal to składnia clingo). Błędy clingo (RuntimeError) są
zamieniane na SolverError razem z komunikatami zebranymi przez logger.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from clingo.control import Control
from clingo.core import MessageCode
from clingo.symbol import Symbol

from data_model import (
    LitSet,
    Literal,
    LiteralRegistry,
    NoModelError,
    Rule,
    SolverError,
    SortedSet,
)

# Limit komunikatów przekazywanych przez clingo do loggera
MESSAGE_LIMIT = 20


# ---------------------------------------------------------------------------
# Budowa programu
# ---------------------------------------------------------------------------

def build_program(
    rules:     Iterable[Rule],
    fact_sets: Sequence[LitSet],
    registry:  LiteralRegistry,
) -> str:
    """
    Składa tekst programu: reguły (po jednej w linii), potem fakty.

    Raises:
        InvalidLiteralError gdy fakt ma identyfikator spoza rejestru.
    """
    lines = [str(rule) for rule in rules]
    for facts in fact_sets:
        for lit in facts:
            lines.append(f"{registry.get_literal(lit)}.")
    return "\n".join(lines) + "\n"


def literal_from_symbol(symbol: Symbol) -> Literal:
    """Symbol clingo → Literal (argumenty w postaci tekstowej clingo)."""
    return Literal(symbol.name, tuple(str(arg) for arg in symbol.arguments))


class _Session:
    """Control clingo z loggerem zbierającym komunikaty do SolverError."""

    def __init__(self, arguments: list[str]) -> None:
        self.messages: list[str] = []
        self.control = Control(
            arguments,
            logger=self._log,
            message_limit=MESSAGE_LIMIT,
        )

    def _log(self, code: MessageCode, message: str) -> None:
        self.messages.append(message.strip())

    def error(self, exc: RuntimeError) -> SolverError:
        return SolverError(str(exc), list(self.messages))

    def ground(self, program: str) -> None:
        try:
            self.control.add("base", [], program)
            self.control.ground([("base", [])])
        except RuntimeError as exc:
            raise self.error(exc) from exc


# ---------------------------------------------------------------------------
# Grounding
# ---------------------------------------------------------------------------

def ground_literals(
    rules:    Iterable[Rule],
    facts_a:  LitSet,
    facts_b:  LitSet,
    registry: LiteralRegistry,
) -> list[Literal]:
    """
    Ugruntowuje reguły z oboma zbiorami faktów w jednym scenariuszu.

    Args:
        rules:    reguły tła
        facts_a:  pierwszy zbiór faktów (wejście przykładu)
        facts_b:  drugi zbiór faktów (jedno z wyjść przykładu)
        registry: rejestr, w którym są zapisane literały faktów

    Returns:
        Wszystkie atomy, które grounder wyprowadził jako fakty.
    """
    session = _Session([])
    session.ground(build_program(rules, (facts_a, facts_b), registry))
    return [
        literal_from_symbol(atom.symbol)
        for atom in session.control.symbolic_atoms
        if atom.is_fact
    ]


# ---------------------------------------------------------------------------
# Modele stabilne
# ---------------------------------------------------------------------------

def compute_models(
    rules:    Iterable[Rule],
    facts:    LitSet,
    registry: LiteralRegistry,
    limit:    int,
) -> list[LitSet]:
    """
    Wylicza modele stabilne programu rules + facts.

    Args:
        rules:    reguły programu
        facts:    fakty dołączane do programu
        registry: rejestr; atomy modeli są w nim zapisywane (interning)
        limit:    maksymalna liczba modeli; 0 oznacza wszystkie

    Returns:
        Lista modeli (atomy pokazywane, jako LitSet), w kolejności solvera.

    Raises:
        NoModelError gdy solver nie zwrócił żadnego modelu.
        SolverError  przy błędzie clingo.
    """
    session = _Session([f"--models={limit}"])
    session.ground(build_program(rules, (facts,), registry))

    models: list[LitSet] = []
    try:
        with session.control.solve(yield_=True) as handle:
            for model in handle:
                models.append(SortedSet(
                    registry.create_literal(literal_from_symbol(symbol))
                    for symbol in model.symbols(shown=True)
                ))
    except RuntimeError as exc:
        raise session.error(exc) from exc

    if not models:
        raise NoModelError()
    return models
