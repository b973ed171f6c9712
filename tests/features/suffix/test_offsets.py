"""Tests for start offset computation."""

from __future__ import annotations

import pytest

from tailr.features.suffix.domain import (
    PLUS_ZERO,
    CountUnit,
    TakeNum,
    Totals,
    compute_start,
)

TOTALS = [0, 1, 2, 5, 100]


@pytest.mark.parametrize("total", TOTALS)
def test_take_zero_never_emits(total: int) -> None:
    assert compute_start(TakeNum(0), total) is None


def test_plus_zero_starts_at_beginning_unless_empty() -> None:
    assert compute_start(PLUS_ZERO, 0) is None
    for total in TOTALS[1:]:
        assert compute_start(PLUS_ZERO, total) == 0


@pytest.mark.parametrize("num", [-1, -5, 1, 5])
def test_empty_source_never_emits(num: int) -> None:
    assert compute_start(TakeNum(num), 0) is None


def test_negative_counts_clamp_to_zero() -> None:
    """Asking for at least as many trailing units as exist emits everything."""

    for total in TOTALS[1:]:
        for k in range(total, total + 3):
            assert compute_start(TakeNum(-k), total) == 0


def test_negative_counts_subtract_from_total() -> None:
    for total in TOTALS[1:]:
        for k in range(1, total):
            assert compute_start(TakeNum(-k), total) == total - k


def test_positive_counts_are_one_indexed() -> None:
    for total in TOTALS[1:]:
        for k in range(1, total + 1):
            assert compute_start(TakeNum(k), total) == k - 1
        assert compute_start(TakeNum(total + 1), total) is None


def test_positive_count_equal_to_total_starts_at_last_unit() -> None:
    assert compute_start(TakeNum(5), 5) == 4


def test_negative_magnitude_equal_to_total_yields_zero() -> None:
    assert compute_start(TakeNum(-5), 5) == 0


def test_totals_select_by_unit() -> None:
    totals = Totals(lines=3, bytes=42)

    assert totals.for_unit(CountUnit.LINES) == 3
    assert totals.for_unit(CountUnit.BYTES) == 42


def test_totals_reject_negative_values() -> None:
    with pytest.raises(ValueError):
        _ = Totals(lines=-1, bytes=0)
