"""Unit tests for frame tags and month bound pairs."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from monthbounds.contracts import Frame, MonthBounds, frame_of


@pytest.mark.parametrize(
    ("value", "frame"),
    [
        (datetime(2024, 1, 1), Frame.NAIVE),
        (datetime(2024, 1, 1, tzinfo=UTC), Frame.UTC),
        (datetime(2024, 1, 1, tzinfo=timezone.utc), Frame.UTC),
        (datetime(2024, 1, 1, tzinfo=ZoneInfo("UTC")), Frame.UTC),
        (datetime(2024, 1, 1, tzinfo=ZoneInfo("Europe/London")), Frame.LOCAL),
        (datetime(2024, 1, 1, tzinfo=timezone(timedelta(hours=5, minutes=30))), Frame.LOCAL),
    ],
)
def test_frame_of(value: datetime, frame: Frame) -> None:
    """Frame tags distinguish naive, UTC and local values."""
    assert frame_of(value) is frame


def test_month_bounds_rejects_mixed_frames() -> None:
    """A naive start cannot pair with an absolute end."""
    with pytest.raises(ValueError, match="frame"):
        MonthBounds(start=datetime(2024, 1, 1), end=datetime(2024, 1, 31, tzinfo=UTC))


def test_month_bounds_rejects_reversed_pair() -> None:
    """End must not precede start."""
    with pytest.raises(ValueError, match="precede"):
        MonthBounds(start=datetime(2024, 2, 1), end=datetime(2024, 1, 31))


def test_month_bounds_contains_is_inclusive_and_serializes() -> None:
    """Both ends are inside the month; to_dict emits ISO strings."""
    bounds = MonthBounds(
        start=datetime(2024, 1, 1, tzinfo=UTC),
        end=datetime(2024, 1, 31, 23, 59, 59, 999999, tzinfo=UTC),
    )

    assert bounds.contains(bounds.start)
    assert bounds.contains(bounds.end)
    assert not bounds.contains(datetime(2024, 2, 1, tzinfo=UTC))
    assert bounds.to_dict() == {
        "start": "2024-01-01T00:00:00+00:00",
        "end": "2024-01-31T23:59:59.999999+00:00",
    }


def test_next_start_is_one_tick_past_end() -> None:
    """next_start steps a single microsecond past the inclusive end."""
    bounds = MonthBounds(
        start=datetime(2024, 2, 1),
        end=datetime(2024, 2, 29, 23, 59, 59, 999999),
    )
    assert bounds.next_start == datetime(2024, 3, 1)


def test_next_start_past_last_representable_month_overflows() -> None:
    """December 9999 has no following instant."""
    bounds = MonthBounds(start=datetime(9999, 12, 1), end=datetime.max)
    with pytest.raises(OverflowError):
        bounds.next_start
