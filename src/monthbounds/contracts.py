"""Core value contracts for month boundary arithmetic."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import StrEnum

TICK = timedelta(microseconds=1)
"""Smallest step representable by ``datetime``."""


class Frame(StrEnum):
    """Frame of reference carried by a datetime value."""

    NAIVE = "naive"
    UTC = "utc"
    LOCAL = "local"


def frame_of(dt: datetime) -> Frame:
    """Return the frame tag of a datetime without converting it."""
    if dt.tzinfo is None or dt.utcoffset() is None:
        return Frame.NAIVE
    if dt.utcoffset() == timedelta(0) and dt.tzname() == "UTC":
        return Frame.UTC
    return Frame.LOCAL


@dataclass(frozen=True, slots=True)
class MonthBounds:
    """Inclusive [start, end] pair for one calendar month."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        """Reject pairs that mix frames or run backwards."""
        if frame_of(self.start) is not frame_of(self.end):
            raise ValueError("start and end must share the same frame.")
        if self.end < self.start:
            raise ValueError("end must not precede start.")

    @property
    def next_start(self) -> datetime:
        """Return the first instant after the month, one tick past ``end``."""
        return self.end + TICK

    def contains(self, dt: datetime) -> bool:
        """Return True when ``dt`` falls inside the month, both ends inclusive."""
        return self.start <= dt <= self.end

    def to_dict(self) -> dict[str, str]:
        """Serialize bounds as ISO-8601 strings."""
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}
