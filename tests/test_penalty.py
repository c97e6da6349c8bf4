import math

import pytest

from short_tracker.logic.penalty import (
    compute_short_penalty,
    compute_unrecorded_penalty,
    normalize_amount,
    split_daily_penalty,
)


@pytest.mark.parametrize("amount, expected", [
    (0, 0),
    (25, 0),
    (50, 0),
    (50.01, 50),
    (100, 50),
    (100.01, 75),
    (150, 75),
    (150.01, 100),
    (200, 100),
    (200.01, 200.01),
    (1000, 1000),
])
def test_unrecorded_penalty_tiers(amount, expected):
    assert compute_unrecorded_penalty(amount) == pytest.approx(expected)


@pytest.mark.parametrize("bad", [-1, -500, float("nan"), float("inf"), float("-inf"), None, "abc", [], True])
def test_unrecorded_penalty_invalid_input_is_zero(bad):
    assert compute_unrecorded_penalty(bad) == 0


def test_unrecorded_penalty_accepts_numeric_strings():
    assert compute_unrecorded_penalty("120") == 75


@pytest.mark.parametrize("amount, expected", [
    (0, 0),
    (-5, 0),
    (30, 80),
    (200, 250),
    (0.5, 50.5),
])
def test_short_penalty(amount, expected):
    assert compute_short_penalty(amount) == pytest.approx(expected)


def test_short_penalty_non_finite_is_zero():
    assert compute_short_penalty(float("nan")) == 0
    assert compute_short_penalty(float("inf")) == 0


def test_normalize_amount():
    assert normalize_amount("12.5") == 12.5
    assert normalize_amount(-3) == 0.0
    assert normalize_amount(float("nan")) == 0.0
    assert normalize_amount(object()) == 0.0


class TestSplitDailyPenalty:
    def test_example_split(self):
        split = split_daily_penalty(60, 0, 3)
        assert split.unrecorded_penalty == 50
        assert split.short_penalty == 0
        assert split.total_penalty == 50
        assert split.per_person_share == pytest.approx(16.6667, abs=1e-4)

    def test_no_attendees_gives_zero_share(self):
        split = split_daily_penalty(500, 0, 0)
        assert split.total_penalty == 500
        assert split.per_person_share == 0
        assert math.isfinite(split.per_person_share)

    def test_zero_penalty_gives_zero_share(self):
        split = split_daily_penalty(30, 0, 4)
        assert split.total_penalty == 0
        assert split.per_person_share == 0

    def test_both_amounts_sum(self):
        split = split_daily_penalty(120, 30, 2)
        assert split.unrecorded_penalty == 75
        assert split.short_penalty == 80
        assert split.total_penalty == 155
        assert split.per_person_share == 77.5

    def test_no_rounding(self):
        split = split_daily_penalty(0, 50, 3)
        assert split.per_person_share == 100 / 3

    def test_negative_attendee_count(self):
        assert split_daily_penalty(120, 0, -2).per_person_share == 0
