"""Month boundaries observed in a named timezone, returned in UTC.

Each operation projects the instant into the zone's civil time, applies the
matching naive month operation, and projects the civil result back. DST
ambiguity is settled by the projection, never here, so a boundary may sit at
a different UTC hour in summer and winter.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from monthbounds.contracts import MonthBounds
from monthbounds.time import months
from monthbounds.tz.interfaces import TimezoneProjection
from monthbounds.tz.registry import TimezoneLike
from monthbounds.tz.zoneinfo_projection import DEFAULT_PROJECTION

logger = logging.getLogger(__name__)


def _project(
    op: Callable[[datetime], datetime],
    instant: datetime,
    tz: TimezoneLike,
    projection: TimezoneProjection | None,
) -> datetime:
    proj = projection or DEFAULT_PROJECTION
    civil = proj.to_local(instant, tz)
    result = proj.to_absolute(op(civil), tz)
    logger.debug("%s in %s: %s -> civil %s -> %s", op.__name__, tz, instant, civil, result)
    return result


def start_of_tz_month(
    instant: datetime, tz: TimezoneLike, projection: TimezoneProjection | None = None
) -> datetime:
    """Return the UTC instant at which ``instant``'s month starts in ``tz``."""
    return _project(months.start_of_month, instant, tz, projection)


def end_of_tz_month(
    instant: datetime, tz: TimezoneLike, projection: TimezoneProjection | None = None
) -> datetime:
    """Return the UTC instant of the last tick of ``instant``'s month in ``tz``."""
    return _project(months.end_of_month, instant, tz, projection)


def start_of_next_tz_month(
    instant: datetime, tz: TimezoneLike, projection: TimezoneProjection | None = None
) -> datetime:
    """Return the UTC start of the following month in ``tz``."""
    return _project(months.start_of_next_month, instant, tz, projection)


def start_of_previous_tz_month(
    instant: datetime, tz: TimezoneLike, projection: TimezoneProjection | None = None
) -> datetime:
    """Return the UTC start of the preceding month in ``tz``."""
    return _project(months.start_of_previous_month, instant, tz, projection)


def end_of_next_tz_month(
    instant: datetime, tz: TimezoneLike, projection: TimezoneProjection | None = None
) -> datetime:
    """Return the UTC last tick of the following month in ``tz``."""
    return _project(months.end_of_next_month, instant, tz, projection)


def end_of_previous_tz_month(
    instant: datetime, tz: TimezoneLike, projection: TimezoneProjection | None = None
) -> datetime:
    """Return the UTC last tick of the preceding month in ``tz``."""
    return _project(months.end_of_previous_month, instant, tz, projection)


def tz_month_bounds(
    instant: datetime, tz: TimezoneLike, projection: TimezoneProjection | None = None
) -> MonthBounds:
    """Return the UTC start/end pair of ``instant``'s month as observed in ``tz``."""
    return MonthBounds(
        start=start_of_tz_month(instant, tz, projection),
        end=end_of_tz_month(instant, tz, projection),
    )
