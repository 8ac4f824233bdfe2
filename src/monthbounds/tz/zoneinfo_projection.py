"""Default timezone projection built on ``zoneinfo``."""

from __future__ import annotations

from datetime import UTC, datetime

from monthbounds.tz.interfaces import TimezoneProjection
from monthbounds.tz.registry import TimezoneLike, resolve_timezone


class ZoneInfoProjection(TimezoneProjection):
    """Project instants through IANA (or Windows-mapped) zone rules.

    Local times that repeat at a fall-back transition resolve to their first
    occurrence. Local times skipped at a spring-forward transition are read
    with the offset in force before the gap, which lands after the gap.
    Both follow PEP 495 with ``fold=0``.
    """

    def to_local(self, instant: datetime, tz: TimezoneLike) -> datetime:
        """Return naive civil time for ``instant``; naive input is read as UTC."""
        zone = resolve_timezone(tz)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=UTC)
        return instant.astimezone(zone).replace(tzinfo=None, fold=0)

    def to_absolute(self, civil: datetime, tz: TimezoneLike) -> datetime:
        """Return aware UTC for naive ``civil`` time observed in ``tz``."""
        if civil.tzinfo is not None:
            raise ValueError("civil time must be naive")
        zone = resolve_timezone(tz)
        return civil.replace(tzinfo=zone, fold=0).astimezone(UTC)


DEFAULT_PROJECTION = ZoneInfoProjection()
