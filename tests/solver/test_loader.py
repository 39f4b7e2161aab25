"""Testy parsera pliku zadania."""

import pytest

from data_model import Atom, Comparison, ComparisonOp, ErrorCode, Literal, ParseError, Rule
from solver import load_task, parse_task


SAMPLE = """\
% graf
edge(a, b).
path(X, Y) :- edge(X, Y).
path(X, Z) :- edge(X, Y), path(Y, Z), X != Z.
:- path(X, X).

I: edge(a, b) edge(b, c)
O: {path(a, b) path(b, c) path(a, c)}

I: p
O: {p q} {p r}

I: s
O:
"""


def _resolve(task, lits):
    return [str(task.get_literal(lit)) for lit in lits]


class TestBackground:
    def test_rules_in_order(self):
        task = parse_task(SAMPLE)
        assert [str(r) for r in task.background] == [
            "edge(a, b).",
            "path(X, Y) :- edge(X, Y).",
            "path(X, Z) :- edge(X, Y), path(Y, Z), X != Z.",
            ":- path(X, X).",
        ]

    def test_negation_and_comparisons(self):
        task = parse_task("p(X) :- q(X), not r(X), X > 3, X < Y.\n")
        (rule,) = task.background
        assert rule.body == (
            Atom(Literal("q", ("X",))),
            Atom(Literal("r", ("X",)), negated=True),
            Comparison(ComparisonOp.GREATER, "X", "3"),
            Comparison(ComparisonOp.LESS, "X", "Y"),
        )

    def test_not_alone_is_a_predicate(self):
        (rule,) = parse_task("p :- not.\n").background
        assert rule == Rule(Literal("p"), (Atom(Literal("not")),))

    def test_anonymous_and_numeric_arguments(self):
        (rule,) = parse_task("p(_, 1).\n").background
        assert rule.head == Literal("p", ("_", "1"))


class TestExamples:
    def test_examples(self):
        task = parse_task(SAMPLE)
        assert len(task.examples) == 3
        first, second, third = task.examples
        assert _resolve(task, first.input) == ["edge(a, b)", "edge(b, c)"]
        assert len(first.outputs) == 1
        assert sorted(_resolve(task, first.outputs[0])) == ["path(a, b)", "path(a, c)", "path(b, c)"]
        assert [sorted(_resolve(task, o)) for o in second.outputs] == [["p", "q"], ["p", "r"]]
        assert third.outputs == []

    def test_shared_literals_share_ids(self):
        task = parse_task(SAMPLE)
        _, second, _ = task.examples
        p = task.registry.lookup(Literal("p"))
        assert p in second.input
        assert all(p in o for o in second.outputs)

    def test_empty_input(self):
        task = parse_task("I:\nO: {a}\n")
        (example,) = task.examples
        assert example.input.is_empty()
        assert _resolve(task, example.outputs[0]) == ["a"]

    def test_empty_text(self):
        task = parse_task("")
        assert task.background == []
        assert task.examples == []

    def test_comment_between_examples(self):
        task = parse_task("I: a\nO: {a} % pierwszy\n% drugi\nI: b\nO:\n")
        assert len(task.examples) == 2


class TestErrors:
    def test_reports_line_and_column(self):
        with pytest.raises(ParseError) as exc:
            parse_task("p.\nq :- r\n")
        assert exc.value.code == ErrorCode.PARSE
        assert (exc.value.line, exc.value.column) == (3, 1)

    def test_unknown_character(self):
        with pytest.raises(ParseError) as exc:
            parse_task("p.\n  q # r.\n")
        assert (exc.value.line, exc.value.column) == (2, 5)
        assert "'# r.\n'" in exc.value.message

    def test_long_fragment_is_truncated(self):
        with pytest.raises(ParseError) as exc:
            parse_task("#" + "x" * 40)
        assert "..." in exc.value.message

    def test_rule_after_examples_is_rejected(self):
        with pytest.raises(ParseError):
            parse_task("I: a\nO: {a}\np.\n")

    def test_unclosed_output(self):
        with pytest.raises(ParseError):
            parse_task("I: a\nO: {a\n")

    def test_missing_output_section(self):
        with pytest.raises(ParseError):
            parse_task("I: a\n")


class TestLoadTask:
    def test_from_file(self, tmp_path):
        path = tmp_path / "task.txt"
        path.write_text(SAMPLE, encoding="utf-8")
        assert len(load_task(path).examples) == 3

    def test_from_stdin(self, monkeypatch):
        import io
        monkeypatch.setattr("sys.stdin", io.StringIO("a.\nI:\nO: {a}\n"))
        task = load_task(None)
        assert len(task.background) == 1
        assert len(task.examples) == 1
