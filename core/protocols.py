"""Core protocols -- the extension points the evaluator depends on.

The core imports these protocols. Implementations live outside it
(cronrange.zones ships the default one; tests supply fakes).

Protocols use Python's structural subtyping (typing.Protocol):
if your class has the right methods, it implements the protocol.
No inheritance required.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from core.models.ranges import CalendarComponents


# ---------------------------------------------------------------------------
# ZoneProvider -- project an instant onto a zone's calendar
# ---------------------------------------------------------------------------

@runtime_checkable
class ZoneProvider(Protocol):
    """Resolves zone names and turns instants into calendar components.

    Default implementation: ZoneInfoProvider (IANA database via zoneinfo).
    All offset and DST arithmetic belongs here; the matcher only ever sees
    the five resulting integers.
    """

    def has_zone(self, name: str) -> bool:
        """Return True if the zone name can be resolved."""
        ...

    def components_of(self, instant: datetime, zone: str) -> CalendarComponents:
        """Return minute, hour, day of month, month and day of week of
        ``instant`` as observed in ``zone``.
        """
        ...
