"""Tests for cycle length derivation, filtering and statistics."""

from datetime import date, timedelta

import pytest

from cyclewatch.errors import InsufficientCycleDataError
from cyclewatch.stats import (
    calculate_cycle_stats,
    compute_cycle_lengths,
    filter_cycle_lengths,
)

SCENARIO_A = [date(2024, 1, 1), date(2024, 1, 29), date(2024, 2, 26)]

HISTORY = [
    date(2023, 1, 3),
    date(2023, 1, 30),
    date(2023, 2, 1),
    date(2023, 3, 2),
    date(2023, 5, 20),
    date(2023, 6, 20),
    date(2023, 6, 20),
    date(2023, 7, 15),
]


def test_scenario_a_statistics() -> None:
    """Test three starts four weeks apart."""
    stats = calculate_cycle_stats(SCENARIO_A)

    assert stats.cycle_lengths == [28, 28]
    assert stats.average == pytest.approx(28.0)
    assert f"{stats.average:.2f}" == "28.00"
    assert stats.minimum == 28
    assert stats.maximum == 28
    assert stats.discarded == 0


def test_scenario_b_gap_below_tolerance_raises() -> None:
    with pytest.raises(InsufficientCycleDataError) as exc_info:
        calculate_cycle_stats([date(2024, 1, 1), date(2024, 1, 3)])

    assert exc_info.value.discarded == 1
    assert "Insufficient valid cycle data" in str(exc_info.value)


def test_gap_count_is_length_minus_one() -> None:
    assert len(compute_cycle_lengths(HISTORY)) == len(HISTORY) - 1


@pytest.mark.parametrize("dates", [[], [date(2024, 1, 1)]])
def test_fewer_than_two_dates_give_no_gaps(dates) -> None:
    assert compute_cycle_lengths(dates) == []


def test_gaps_cross_month_and_year_boundaries() -> None:
    dates = [date(2023, 12, 15), date(2024, 1, 12), date(2024, 3, 1)]

    assert compute_cycle_lengths(dates) == [28, 49]


def test_duplicate_dates_produce_zero_gap() -> None:
    assert compute_cycle_lengths([date(2024, 1, 1), date(2024, 1, 1)]) == [0]


def test_gaps_invariant_under_translation() -> None:
    shifted = [d + timedelta(days=173) for d in HISTORY]

    assert compute_cycle_lengths(shifted) == compute_cycle_lengths(HISTORY)


def test_filter_bounds_are_inclusive() -> None:
    assert filter_cycle_lengths([14, 15, 28, 35, 36], tolerance=15) == [15, 28, 35]


def test_filter_is_monotonic_in_tolerance() -> None:
    lengths = compute_cycle_lengths(HISTORY)
    previous = set(filter_cycle_lengths(lengths, tolerance=0))

    for tolerance in range(1, 40):
        kept = set(filter_cycle_lengths(lengths, tolerance=tolerance))
        assert kept <= previous
        previous = kept


def test_each_gap_is_filtered_independently() -> None:
    """An outlier does not shift the baseline of the following gap."""
    stats = calculate_cycle_stats(HISTORY)

    # raw gaps: 27, 2, 29, 79, 31, 0, 25
    assert stats.cycle_lengths == [27, 29, 31, 25]
    assert stats.discarded == 3
    assert stats.average == pytest.approx(28.0)
    assert stats.minimum == 25
    assert stats.maximum == 31


def test_custom_tolerance_keeps_short_gaps() -> None:
    stats = calculate_cycle_stats([date(2024, 1, 1), date(2024, 1, 3)], tolerance=0)

    assert stats.cycle_lengths == [2]


def test_average_is_not_rounded() -> None:
    dates = [date(2024, 1, 1), date(2024, 1, 29), date(2024, 2, 26), date(2024, 3, 26)]

    stats = calculate_cycle_stats(dates)

    assert stats.cycle_lengths == [28, 28, 29]
    assert stats.average == pytest.approx(85 / 3)


def test_min_le_average_le_max() -> None:
    stats = calculate_cycle_stats(HISTORY, tolerance=20)

    assert stats.minimum <= stats.average <= stats.maximum


def test_average_is_float_and_bounds_are_int() -> None:
    stats = calculate_cycle_stats(SCENARIO_A)

    assert isinstance(stats.average, float)
    assert isinstance(stats.minimum, int)
    assert isinstance(stats.maximum, int)
