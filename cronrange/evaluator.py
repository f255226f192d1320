"""AllowedRange -- admit/deny an instant against an expression in a timezone.

Parsing and timezone resolution happen once, in the constructor. After that
the object is read-only and is_date_allowed() is a pure function of its
argument, so one instance can be shared freely across threads.
"""

from __future__ import annotations

import logging
from datetime import datetime

from core.errors import InvalidTimezone
from core.models.ranges import CalendarComponents, Expression, FieldDomain, FieldSpec
from core.protocols import ZoneProvider
from cronrange.matcher import matches
from cronrange.parser import parse_expression
from cronrange.zones import DEFAULT_TIMEZONE, ZoneInfoProvider

logger = logging.getLogger(__name__)


class AllowedRange:
    """Gate built from a five-field expression.

    Usage:
        business_hours = AllowedRange("* 9-17 * * 1-5", "America/Toronto")
        if business_hours.is_date_allowed(datetime.now(timezone.utc)):
            ...

    Raises (from the constructor only):
        MalformedExpression, InvalidRangePair, NonIntegerBound,
        OutOfDomainRange: the expression is invalid.
        InvalidTimezone: the zone name is unknown to ``zones``.
    """

    __slots__ = ("_expression", "_timezone", "_strict", "_zones")

    def __init__(
        self,
        expression: str,
        timezone: str = DEFAULT_TIMEZONE,
        *,
        strict: bool = False,
        zones: ZoneProvider | None = None,
    ) -> None:
        parsed = parse_expression(expression, strict=strict)

        if zones is None:
            zones = ZoneInfoProvider()
        if not isinstance(timezone, str) or not zones.has_zone(timezone):
            raise InvalidTimezone(timezone)

        self._expression = parsed
        self._timezone = timezone
        self._strict = strict
        self._zones = zones
        logger.debug("AllowedRange %s in %s (strict=%s)", parsed, timezone, strict)

    # -- read-only views --

    @property
    def expression(self) -> Expression:
        return self._expression

    @property
    def timezone(self) -> str:
        return self._timezone

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def minute(self) -> FieldSpec:
        return self._expression.minute

    @property
    def hour(self) -> FieldSpec:
        return self._expression.hour

    @property
    def day_of_month(self) -> FieldSpec:
        return self._expression.day_of_month

    @property
    def month(self) -> FieldSpec:
        return self._expression.month

    @property
    def day_of_week(self) -> FieldSpec:
        return self._expression.day_of_week

    # -- evaluation --

    def is_date_allowed(self, date: datetime) -> bool:
        """True if every field admits ``date`` as seen in the configured zone.

        Naive datetimes are taken to be UTC. Anything other than a datetime
        (a bare date included) raises TypeError.
        """
        components = self._components(date)
        return all(
            matches(value, spec)
            for value, spec in zip(components.as_tuple(), self._expression.specs())
        )

    def explain(self, date: datetime) -> list[tuple[FieldDomain, int, bool]]:
        """Per-field (domain, observed value, verdict) for ``date``."""
        components = self._components(date)
        return [
            (domain, value, matches(value, spec))
            for (domain, spec), value in zip(self._expression.pairs(), components.as_tuple())
        ]

    def _components(self, date: datetime) -> CalendarComponents:
        if not isinstance(date, datetime):
            raise TypeError(f"Expected a datetime, got {type(date).__name__}")
        return self._zones.components_of(date, self._timezone)

    def __str__(self) -> str:
        return str(self._expression)

    def __repr__(self) -> str:
        return f"AllowedRange({str(self._expression)!r}, timezone={self._timezone!r})"
