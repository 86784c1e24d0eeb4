"""
Tests for the diet summary computation.

The summary is a pure function over an ordered list of meals, so these tests
use plain mock meals and never touch the database.
"""

import pytest

from test_fixtures import make_meal
from services.diet_summary import DietSummary, summarize


def _meals(pattern: str):
    """Build meals from a pattern like 'iio' (i = in diet, o = out), named by position."""
    return [make_meal(name=f"M{i}", in_diet=(c == "i")) for i, c in enumerate(pattern)]


def _names(summary: DietSummary):
    return [m.name for m in summary.best_sequence_in_diet]


def test_empty_input():
    assert summarize([]) == DietSummary(
        amount=0, amount_in_diet=0, amount_not_in_diet=0, best_sequence_in_diet=[]
    )


@pytest.mark.parametrize(
    "pattern",
    ["i", "o", "io", "oi", "iioii", "oiiioiio", "oooo", "iiiiii", "ioioioi"],
)
def test_counts_add_up(pattern):
    meals = _meals(pattern)
    summary = summarize(meals)

    assert summary.amount == len(meals)
    assert summary.amount_in_diet == pattern.count("i")
    assert summary.amount == summary.amount_in_diet + summary.amount_not_in_diet
    assert len(summary.best_sequence_in_diet) <= summary.amount_in_diet
    assert all(m.in_diet for m in summary.best_sequence_in_diet)


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("oiiioiio", ["M1", "M2", "M3"]),
        ("ioiiiio", ["M2", "M3", "M4", "M5"]),
        ("oooi", ["M3"]),
        ("iooo", ["M0"]),
    ],
)
def test_best_run_is_contiguous(pattern, expected):
    meals = _meals(pattern)
    summary = summarize(meals)

    assert _names(summary) == expected
    start = meals.index(summary.best_sequence_in_diet[0])
    assert meals[start : start + len(expected)] == summary.best_sequence_in_diet


def test_tie_keeps_leftmost_run():
    # [A(in), B(in), C(out), D(in), E(in)]: both runs have length 2
    summary = summarize(_meals("iioii"))

    assert _names(summary) == ["M0", "M1"]


def test_run_keeps_extending():
    summary = summarize(_meals("iii"))

    assert _names(summary) == ["M0", "M1", "M2"]


def test_all_out_of_diet():
    summary = summarize(_meals("oo"))

    assert summary.best_sequence_in_diet == []
    assert summary.amount_in_diet == 0
    assert summary.amount_not_in_diet == 2


def test_single_in_diet_meal():
    meals = _meals("i")
    summary = summarize(meals)

    assert summary.best_sequence_in_diet == meals
    assert summary.best_sequence_in_diet[0] is meals[0]


def test_later_longer_run_replaces_earlier():
    summary = summarize(_meals("iioiii"))

    assert _names(summary) == ["M3", "M4", "M5"]


def test_idempotent_and_does_not_mutate_input():
    meals = _meals("oiioiiio")
    snapshot = list(meals)

    first = summarize(meals)
    second = summarize(meals)

    assert first == second
    assert meals == snapshot
    assert first.best_sequence_in_diet is not second.best_sequence_in_diet


def test_order_is_taken_as_given():
    meals = _meals("iioii")
    reordered = [meals[3], meals[4], meals[2], meals[0], meals[1]]

    assert _names(summarize(reordered)) == ["M3", "M4"]
