"""TimeContext -- decides which instant a check is made against.

In live mode, current_time is always real 'now'.
In fixed mode, current_time is a pinned instant (CLI --at, tests).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field


class TimeContext(BaseModel):
    """The instant an allowed-range check runs against."""

    current_time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    mode: Literal["live", "fixed"] = "live"

    @classmethod
    def now(cls) -> TimeContext:
        """Create a live TimeContext with real current time."""
        return cls(
            current_time=datetime.now(timezone.utc),
            mode="live",
        )

    @classmethod
    def at(cls, dt: datetime) -> TimeContext:
        """Create a fixed TimeContext at a specific instant. Naive means UTC."""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return cls(
            current_time=dt,
            mode="fixed",
        )

    @classmethod
    def parse(cls, value: str) -> TimeContext:
        """Create a fixed TimeContext from an ISO 8601 string.

        A trailing 'Z' is accepted as UTC.
        """
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        return cls.at(datetime.fromisoformat(text))

    @property
    def is_fixed(self) -> bool:
        return self.mode == "fixed"
