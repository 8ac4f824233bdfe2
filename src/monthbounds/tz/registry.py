"""Timezone identifier resolution with Windows-id support and caching."""

from __future__ import annotations

import logging
from datetime import tzinfo
from zoneinfo import ZoneInfo

from monthbounds.config import default_timezone_name, tz_cache_size
from monthbounds.tz.cache import LRUCache
from monthbounds.tz.windows import windows_to_iana

logger = logging.getLogger(__name__)

TimezoneLike = tzinfo | str | None

_cache: LRUCache[str, tzinfo] | None = None


def _zone_cache() -> LRUCache[str, tzinfo]:
    global _cache
    if _cache is None:
        _cache = LRUCache(tz_cache_size())
    return _cache


def clear_timezone_cache() -> None:
    """Forget cached zones and re-read the cache size on next use."""
    global _cache
    _cache = None


def _load_zone(name: str) -> tzinfo:
    iana = windows_to_iana(name)
    if iana is not None:
        logger.debug("mapped windows timezone %r to %r", name, iana)
        return ZoneInfo(iana)
    return ZoneInfo(name)


def resolve_timezone(tz: TimezoneLike = None) -> tzinfo:
    """Return a tzinfo for a tzinfo, an IANA or Windows identifier, or None.

    ``None`` selects ``MONTHBOUNDS_DEFAULT_TIMEZONE``. Unknown identifiers raise
    ``zoneinfo.ZoneInfoNotFoundError`` unchanged.
    """
    if isinstance(tz, tzinfo):
        return tz
    if tz is None:
        tz = default_timezone_name()
    if not isinstance(tz, str):
        raise TypeError(f"tz must be a tzinfo, a timezone name or None, got {type(tz).__name__}")

    name = tz.strip()
    if not name:
        raise ValueError("timezone name must not be empty")
    zone = _zone_cache().get(name, lambda: _load_zone(name))
    logger.debug("resolved timezone %r", name)
    return zone
