"""
solver/loader.py — wczytywanie zadania z pliku tekstowego.

Publiczne API:
  parse_task(text)  -> Task
  load_task(path)   -> Task   (path=None → stdin)

Format pliku::

    % komentarz do końca linii
    edge(a, b).
    path(X, Y) :- edge(X, Y).
    path(X, Z) :- edge(X, Y), path(Y, Z), X != Z.
    :- path(X, X).

    I: edge(a, b) edge(b, c)
    O: {path(a, b) path(b, c) path(a, c)}

    I: p
    O: {p q} {p r}

Najpierw reguły tła, potem przykłady. Przykład to "I:" z faktami wejściowymi
(oddzielonymi białymi znakami) i "O:" z akceptowanymi zbiorami odpowiedzi
w nawiasach klamrowych; puste "O:" oznacza brak akceptowanych wyjść.
"""

from __future__ import annotations

import pathlib
import re
import sys
from dataclasses import dataclass

from data_model import (
    Atom,
    BodyLiteral,
    Comparison,
    ComparisonOp,
    Example,
    Literal,
    ParseError,
    Rule,
    SortedSet,
    Task,
)

# ---------------------------------------------------------------------------
# Tokenizacja
# ---------------------------------------------------------------------------

_TOKEN_RE = re.compile(
    r"""
      (?P<ws>\s+)
    | (?P<comment>%[^\n\r]*)
    | (?P<section>[IO]:(?!-))
    | (?P<implies>:-)
    | (?P<op>!=|>|<)
    | (?P<punct>[(),.{}])
    | (?P<int>\d+)
    | (?P<var>_*[A-Z][A-Za-z0-9_']*)
    | (?P<const>_*[a-z][A-Za-z0-9_']*)
    | (?P<anon>_)
    """,
    re.VERBOSE,
)

# Długość fragmentu nieparsowalnej treści w komunikacie błędu
EXCERPT_LEN = 20


@dataclass(frozen=True, slots=True)
class _Token:
    kind:   str
    text:   str
    offset: int


def _location(text: str, offset: int) -> tuple[int, int]:
    """Offset → (linia, kolumna), obie 1-based."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column


def _error(text: str, offset: int) -> ParseError:
    line, column = _location(text, offset)
    fragment = text[offset:]
    if len(fragment) > EXCERPT_LEN:
        fragment = fragment[:EXCERPT_LEN] + "..."
    return ParseError(
        f"Nieparsowalna treść w linii {line}, kolumna {column}: '{fragment}'",
        line,
        column,
    )


def _tokenize(text: str) -> list[_Token]:
    tokens: list[_Token] = []
    pos = 0
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None:
            raise _error(text, pos)
        kind = m.lastgroup
        if kind not in ("ws", "comment"):
            tokens.append(_Token(kind, m.group(), pos))
        pos = m.end()
    return tokens


# ---------------------------------------------------------------------------
# Parser (zejście rekurencyjne)
# ---------------------------------------------------------------------------

class _Parser:
    def __init__(self, text: str) -> None:
        self._text   = text
        self._tokens = _tokenize(text)
        self._pos    = 0
        self.task    = Task()

    # ------------------------------------------------------------------

    def _peek(self, ahead: int = 0) -> _Token | None:
        i = self._pos + ahead
        return self._tokens[i] if i < len(self._tokens) else None

    def _fail(self) -> ParseError:
        tok = self._peek()
        return _error(self._text, tok.offset if tok else len(self._text))

    def _at(self, kind: str, text: str | None = None) -> bool:
        tok = self._peek()
        return tok is not None and tok.kind == kind and (text is None or tok.text == text)

    def _expect(self, kind: str, text: str | None = None) -> _Token:
        if not self._at(kind, text):
            raise self._fail()
        tok = self._tokens[self._pos]
        self._pos += 1
        return tok

    # ------------------------------------------------------------------
    # Termy i literały ciała
    # ------------------------------------------------------------------

    def _term(self) -> Literal:
        predicate = self._expect("const").text
        args: list[str] = []
        if self._at("punct", "("):
            self._pos += 1
            if not self._at("punct", ")"):
                args.append(self._arg())
                while self._at("punct", ","):
                    self._pos += 1
                    args.append(self._arg())
            self._expect("punct", ")")
        return Literal(predicate, tuple(args))

    def _arg(self) -> str:
        tok = self._peek()
        if tok is None or tok.kind not in ("const", "var", "int", "anon"):
            raise self._fail()
        self._pos += 1
        return tok.text

    def _operand(self) -> str:
        tok = self._peek()
        if tok is None or tok.kind not in ("var", "int"):
            raise self._fail()
        self._pos += 1
        return tok.text

    def _body_literal(self) -> BodyLiteral:
        tok = self._peek()
        if tok is None:
            raise self._fail()
        if tok.kind in ("var", "int"):
            left = self._operand()
            op = ComparisonOp(self._expect("op").text)
            return Comparison(op, left, self._operand())
        nxt = self._peek(1)
        if tok.kind == "const" and tok.text == "not" and nxt is not None and nxt.kind == "const":
            self._pos += 1
            return Atom(self._term(), negated=True)
        return Atom(self._term())

    # ------------------------------------------------------------------
    # Reguły tła
    # ------------------------------------------------------------------

    def _rule(self) -> Rule:
        head = self._term() if self._at("const") else None
        if not self._at("implies"):
            if head is None:
                raise self._fail()
            self._expect("punct", ".")
            return Rule(head)
        self._pos += 1
        body = [self._body_literal()]
        while self._at("punct", ","):
            self._pos += 1
            body.append(self._body_literal())
        self._expect("punct", ".")
        return Rule(head, tuple(body))

    # ------------------------------------------------------------------
    # Przykłady
    # ------------------------------------------------------------------

    def _example(self) -> Example:
        self._expect("section", "I:")
        facts: list[Literal] = []
        while self._at("const"):
            facts.append(self._term())
        self._expect("section", "O:")
        outputs = []
        while self._at("punct", "{"):
            self._pos += 1
            answer_set: list[Literal] = []
            while self._at("const"):
                answer_set.append(self._term())
            self._expect("punct", "}")
            outputs.append(self.task.literal_set(answer_set))
        return Example(input=self.task.literal_set(facts), outputs=outputs)

    # ------------------------------------------------------------------

    def parse(self) -> Task:
        while self._at("const") or self._at("implies"):
            self.task.push_background(self._rule())
        while self._at("section", "I:"):
            self.task.push_example(self._example())
        if self._peek() is not None:
            raise self._fail()
        return self.task


# ---------------------------------------------------------------------------
# API publiczne
# ---------------------------------------------------------------------------

def parse_task(text: str) -> Task:
    """
    Parsuje treść pliku zadania.

    Raises:
        ParseError z linią i kolumną pierwszej nieparsowalnej treści.
    """
    return _Parser(text).parse()


def load_task(path: pathlib.Path | None) -> Task:
    """Wczytuje zadanie z pliku (UTF-8) albo ze standardowego wejścia."""
    if path is None:
        return parse_task(sys.stdin.read())
    return parse_task(path.read_text(encoding="utf-8"))
