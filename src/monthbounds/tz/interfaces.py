"""Timezone projection capability consumed by the month adapter."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from monthbounds.tz.registry import TimezoneLike


class TimezoneProjection(Protocol):
    """Interface for moving instants between absolute time and a zone's civil time."""

    def to_local(self, instant: datetime, tz: TimezoneLike) -> datetime:
        """Return the naive wall-clock time of ``instant`` as observed in ``tz``."""

    def to_absolute(self, civil: datetime, tz: TimezoneLike) -> datetime:
        """Return the aware UTC instant for naive wall-clock ``civil`` in ``tz``."""
