"""Shared test fixtures for the cronrange test suite."""

from __future__ import annotations

from datetime import datetime

import pytest

from core.models.ranges import CalendarComponents


# ---------------------------------------------------------------------------
# Fake zone provider
# ---------------------------------------------------------------------------

class FakeZoneProvider:
    """Zone provider with a fixed set of zones and fixed whole-hour offsets.

    Only the hour is shifted; the day fields are taken from the UTC instant.
    Tests that need calendar rollover use the real ZoneInfoProvider.
    """

    def __init__(self, offsets: dict[str, int] | None = None) -> None:
        self.offsets = offsets if offsets is not None else {"UTC": 0, "Test/Plus2": 2}
        self.calls: list[tuple[datetime, str]] = []

    def has_zone(self, name: str) -> bool:
        return name in self.offsets

    def components_of(self, instant: datetime, zone: str) -> CalendarComponents:
        self.calls.append((instant, zone))
        return CalendarComponents(
            minute=instant.minute,
            hour=(instant.hour + self.offsets[zone]) % 24,
            day_of_month=instant.day,
            month=instant.month,
            day_of_week=instant.isoweekday() % 7,
        )


@pytest.fixture
def fake_zones() -> FakeZoneProvider:
    return FakeZoneProvider()
