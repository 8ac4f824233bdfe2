"""Environment-driven settings for monthbounds."""

from __future__ import annotations

import os
from dataclasses import dataclass

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime settings resolved from the process environment."""

    default_timezone: str = "UTC"
    tz_cache_size: int = 64
    log_level: str = "WARNING"
    log_json: bool = False


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive")
    return value


def default_timezone_name() -> str:
    """Return the zone used when callers pass no timezone."""
    raw = os.getenv("MONTHBOUNDS_DEFAULT_TIMEZONE", "UTC").strip()
    return raw or "UTC"


def tz_cache_size() -> int:
    """Return the capacity of the timezone resolution cache."""
    return _read_int("MONTHBOUNDS_TZ_CACHE_SIZE", 64)


def load_settings() -> Settings:
    """Read every MONTHBOUNDS_* variable into a Settings value."""
    log_level = os.getenv("MONTHBOUNDS_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"MONTHBOUNDS_LOG_LEVEL must be one of: {', '.join(sorted(_LOG_LEVELS))}")

    return Settings(
        default_timezone=default_timezone_name(),
        tz_cache_size=tz_cache_size(),
        log_level=log_level,
        log_json=os.getenv("MONTHBOUNDS_LOG_JSON", "0").strip().lower() in _TRUTHY,
    )
