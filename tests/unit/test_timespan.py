from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from tradesim.core.exceptions import InvalidArgumentError
from tradesim.core.timespan import TimeSpan


def test_zero_span() -> None:
    assert TimeSpan.ZERO.is_zero
    assert TimeSpan().is_zero
    assert not TimeSpan(days=1).is_zero
    assert str(TimeSpan.ZERO) == "0"


def test_fixed_span_added_to_instant() -> None:
    t = datetime(2024, 1, 1, tzinfo=UTC)
    assert t + TimeSpan(days=2, hours=3) == datetime(2024, 1, 3, 3, tzinfo=UTC)
    assert t - TimeSpan(hours=1) == datetime(2023, 12, 31, 23, tzinfo=UTC)


def test_month_end_is_clamped() -> None:
    t = datetime(2024, 1, 31, tzinfo=UTC)
    assert t + TimeSpan(months=1) == datetime(2024, 2, 29, tzinfo=UTC)
    assert t + TimeSpan(years=1, months=1) == datetime(2025, 2, 28, tzinfo=UTC)


def test_multiples_do_not_drift() -> None:
    t = datetime(2024, 1, 31, tzinfo=UTC)
    month = TimeSpan(months=1)
    # Stepping one month at a time clamps at February and stays there.
    stepped = t + month
    stepped = stepped + month
    assert stepped == datetime(2024, 3, 29, tzinfo=UTC)
    # A multiple is computed from the origin.
    assert t + month * 2 == datetime(2024, 3, 31, tzinfo=UTC)
    assert t + 2 * month == datetime(2024, 3, 31, tzinfo=UTC)


def test_calendar_part_applied_before_fixed_part() -> None:
    t = datetime(2024, 1, 31, tzinfo=UTC)
    assert t + TimeSpan(months=1, days=1) == datetime(2024, 3, 1, tzinfo=UTC)


def test_span_arithmetic() -> None:
    assert TimeSpan(days=30) + TimeSpan(days=5) == TimeSpan(days=35)
    assert -TimeSpan(months=2) == TimeSpan(months=-2)
    assert TimeSpan(days=3).is_positive
    assert not TimeSpan.ZERO.is_positive
    assert not TimeSpan(days=1, hours=-1).is_positive
    assert TimeSpan(days=1, hours=-1).is_negative


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("30d", TimeSpan(days=30)),
        ("1y6M", TimeSpan(years=1, months=6)),
        ("2w", TimeSpan(days=14)),
        ("4h30m", TimeSpan(hours=4, minutes=30)),
        ("10s", TimeSpan(seconds=10)),
        ("250us", TimeSpan(microseconds=250)),
        ("0", TimeSpan.ZERO),
    ],
)
def test_parse(text: str, expected: TimeSpan) -> None:
    assert TimeSpan.parse(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "10", "5x", "3d junk", "d3"])
def test_parse_rejects_garbage(text: str) -> None:
    with pytest.raises(InvalidArgumentError):
        TimeSpan.parse(text)


def test_str_round_trips_through_parse() -> None:
    span = TimeSpan(years=1, months=2, days=3, hours=4)
    assert str(span) == "1y2M3d4h"
    assert TimeSpan.parse(str(span)) == span


def test_from_timedelta() -> None:
    span = TimeSpan.from_timedelta(timedelta(days=1, hours=2))
    assert datetime(2024, 1, 1, tzinfo=UTC) + span == datetime(2024, 1, 2, 2, tzinfo=UTC)


def test_out_of_range_addition_is_invalid_argument() -> None:
    with pytest.raises(InvalidArgumentError):
        datetime.max.replace(tzinfo=UTC) + TimeSpan(days=1)
    with pytest.raises(InvalidArgumentError):
        datetime(9999, 12, 1, tzinfo=UTC) + TimeSpan(months=1)
