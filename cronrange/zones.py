"""Default zone provider backed by the IANA database (zoneinfo + tzdata)."""

from __future__ import annotations

import functools
import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from core.models.ranges import CalendarComponents

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"


class ZoneInfoProvider:
    """Projects instants onto IANA zones.

    Zone names match case-insensitively: "america/toronto" resolves to
    America/Toronto. ZoneInfo keeps its own per-key cache, so lookups after
    the first are cheap.

    Usage:
        zones = ZoneInfoProvider()
        zones.has_zone("America/Toronto")            # True
        zones.components_of(now, "America/Toronto")  # CalendarComponents(...)
    """

    def has_zone(self, name: str) -> bool:
        try:
            _resolve(name)
        except (ZoneInfoNotFoundError, ValueError, TypeError, OSError):
            logger.debug("Unknown timezone %r", name)
            return False
        return True

    def components_of(self, instant: datetime, zone: str) -> CalendarComponents:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)

        local = instant.astimezone(_resolve(zone))
        return CalendarComponents(
            minute=local.minute,
            hour=local.hour,
            day_of_month=local.day,
            month=local.month,
            day_of_week=local.isoweekday() % 7,  # 0=Sun, 6=Sat
        )


@functools.lru_cache(maxsize=1)
def _canonical_names() -> dict[str, str]:
    return {name.lower(): name for name in available_timezones()}


def _resolve(name: str) -> ZoneInfo:
    """Exact key first, then the canonical spelling of a differently cased key."""
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        canonical = _canonical_names().get(name.lower())
        if canonical is None or canonical == name:
            raise
        logger.debug("Resolved timezone %r as %r", name, canonical)
        return ZoneInfo(canonical)
