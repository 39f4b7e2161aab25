"""
Testy sprawdzania zgodności par przykładów.

Warunki (i) i (ii) działają na prawdziwym solverze. Warunek (iii) nie
może zadziałać dla samych reguł definitywnych po przejściu (ii), więc
tam wyliczanie modeli jest podstawione.
"""

import pytest

from data_model import (
    ErrorCode,
    IncompatibleError,
    IncompatibleOneError,
    IncompatibleThreeError,
    IncompatibleTwoError,
    Literal,
    SortedSet,
)
from solver import parse_task
from validator import check_compatibility, check_pair


class TestCompatible:
    def test_disjoint_inputs_skip_solver(self, monkeypatch):
        def _boom(*args, **kwargs):
            raise AssertionError("solver should not be called")

        monkeypatch.setattr("validator.compatibility.compute_models", _boom)
        task = parse_task("I: a\nO: {a}\nI: b\nO: {b}\n")
        check_compatibility(task)

    def test_passes_all_conditions(self):
        task = parse_task("I: a\nO: {a b}\nI: b\nO: {b}\n")
        check_compatibility(task)

    def test_single_example_is_noop(self):
        check_compatibility(parse_task("I: a\nO: {a} {b}\n"))

    def test_no_examples_is_noop(self):
        check_compatibility(parse_task("p.\n"))

    def test_shared_output_is_not_checked(self, monkeypatch):
        def _boom(*args, **kwargs):
            raise AssertionError("solver should not be called")

        monkeypatch.setattr("validator.compatibility.compute_models", _boom)
        task = parse_task("I: a\nO: {a b}\nI: a\nO: {a b}\n")
        check_compatibility(task)


class TestConditionOne:
    def test_strict_containment_of_outputs(self):
        task = parse_task("I: a\nO: {a b}\nI: a\nO: {a}\n")
        with pytest.raises(IncompatibleOneError) as exc:
            check_compatibility(task)
        assert exc.value.code == ErrorCode.INCOMPATIBLE_I
        assert exc.value.condition == "i"
        assert (exc.value.first, exc.value.second) == (0, 1)
        assert "1 i 2" in exc.value.message

    def test_is_an_incompatible_error(self):
        task = parse_task("I: a\nO: {a b}\nI: a\nO: {a}\n")
        with pytest.raises(IncompatibleError):
            check_pair(task, 0, 1)


class TestConditionTwo:
    def test_least_model_covers_first_input(self):
        task = parse_task("a :- b.\nI: a\nO: {a b}\nI: b\nO: {b c}\n")
        with pytest.raises(IncompatibleTwoError) as exc:
            check_compatibility(task)
        assert exc.value.code == ErrorCode.INCOMPATIBLE_II
        assert (exc.value.first, exc.value.second) == (0, 1)

    def test_non_definite_rules_are_ignored(self):
        task = parse_task("a :- b, not c.\nI: a\nO: {a b}\nI: b\nO: {b}\n")
        check_compatibility(task)


class TestConditionThree:
    def test_some_answer_set_covers_first_input(self, monkeypatch):
        task = parse_task("I: a\nO: {a b}\nI:\nO:\n")
        a = task.registry.lookup(Literal("a"))

        def _models(rules, facts, registry, limit):
            if limit == 1:
                return [SortedSet()]
            return [SortedSet(), SortedSet([a])]

        monkeypatch.setattr("validator.compatibility.compute_models", _models)
        with pytest.raises(IncompatibleThreeError) as exc:
            check_compatibility(task)
        assert exc.value.code == ErrorCode.INCOMPATIBLE_III
        assert exc.value.condition == "iii"

    def test_enumerates_all_answer_sets(self, monkeypatch):
        task = parse_task("I: a\nO: {a b}\nI:\nO:\n")
        limits = []

        def _models(rules, facts, registry, limit):
            limits.append(limit)
            return [SortedSet()]

        monkeypatch.setattr("validator.compatibility.compute_models", _models)
        check_compatibility(task)
        assert limits == [1, 0]


class TestOrdering:
    def test_first_violating_pair_wins(self):
        task = parse_task(
            "I: x\nO: {x}\n"
            "I: a\nO: {a b}\n"
            "I: a\nO: {a}\n"
        )
        with pytest.raises(IncompatibleOneError) as exc:
            check_compatibility(task)
        assert (exc.value.first, exc.value.second) == (1, 2)
