"""
data_model — struktury danych ilnlp.

Użycie:
  from data_model import Literal, Rule, Example, Task, SortedSet, ...

Moduły:
  sorted_set — SortedSet (algebra zbiorów przez scalanie posortowanych list)
  common     — Lit, LitSet, Literal, Atom, Comparison, ComparisonOp, BodyLiteral
  rules      — Rule
  registry   — LiteralRegistry
  task       — Example, Task
  errors     — ErrorCode, IlnlpError i wyjątki pochodne
"""

from .sorted_set import SortedSet
from .common import (
    Lit,
    LitSet,
    Literal,
    Atom,
    Comparison,
    ComparisonOp,
    BodyLiteral,
)
from .rules import Rule
from .registry import LiteralRegistry
from .task import Example, Task
from .errors import (
    ErrorCode,
    IlnlpError,
    InvalidLiteralError,
    NoModelError,
    SolverError,
    IncompatibleError,
    IncompatibleOneError,
    IncompatibleTwoError,
    IncompatibleThreeError,
    ParseError,
    RenderError,
    IlaspError,
)

__all__ = [
    # sorted_set
    "SortedSet",
    # common
    "Lit",
    "LitSet",
    "Literal",
    "Atom",
    "Comparison",
    "ComparisonOp",
    "BodyLiteral",
    # rules
    "Rule",
    # registry
    "LiteralRegistry",
    # task
    "Example",
    "Task",
    # errors
    "ErrorCode",
    "IlnlpError",
    "InvalidLiteralError",
    "NoModelError",
    "SolverError",
    "IncompatibleError",
    "IncompatibleOneError",
    "IncompatibleTwoError",
    "IncompatibleThreeError",
    "ParseError",
    "RenderError",
    "IlaspError",
]
