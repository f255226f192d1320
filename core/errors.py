"""Error taxonomy -- every failure is raised at construction time.

Evaluation never raises. Each error carries the pieces of input that caused
it as attributes so callers can branch on kind instead of message text.
"""

from __future__ import annotations


class CronRangeError(ValueError):
    """Base class for all construction-time failures."""


class ExpressionError(CronRangeError):
    """The expression string could not be parsed."""

    def __init__(self, message: str, expression: str | None = None):
        super().__init__(message)
        self.expression = expression


class MalformedExpression(ExpressionError):
    """Wrong number of whitespace-delimited fields."""

    def __init__(self, expression: object, expected: int, found: int | None = None):
        self.expected = expected
        self.found = found
        super().__init__(
            f"Invalid expression {expression!r}. "
            f"There should be exactly {expected} whitespace-delimited fields"
            + (f", found {found}." if found is not None else "."),
            expression=expression if isinstance(expression, str) else None,
        )


class InvalidRangePair(ExpressionError):
    """A comma-separated piece does not split into one or two dash parts."""

    def __init__(self, field: str | None, part: str, pair: str):
        self.field = field
        self.part = part
        self.pair = pair
        super().__init__(f"{_where(field, part)} has invalid pair {pair!r}.")


class NonIntegerBound(ExpressionError):
    """A range bound is not a plain decimal integer."""

    def __init__(self, field: str | None, part: str, pair: str, side: str, bound: str):
        self.field = field
        self.part = part
        self.pair = pair
        self.side = side
        self.bound = bound
        super().__init__(f"{_where(field, part)} has non-integer {side} range {bound!r}.")


class OutOfDomainRange(ExpressionError):
    """Strict mode: a bound lies outside the field's legal values."""

    def __init__(self, field: str, part: str, low: int, high: int, value: int):
        self.field = field
        self.part = part
        self.low = low
        self.high = high
        self.value = value
        super().__init__(
            f"{_where(field, part)} has value {value} outside {field} bounds {low}-{high}."
        )


class InvalidTimezone(CronRangeError):
    """The zone name is not known to the zone provider."""

    def __init__(self, timezone: object):
        self.timezone = timezone
        super().__init__(f"Invalid timezone string {timezone!r}.")


def _where(field: str | None, part: str) -> str:
    if field is None:
        return f"Part {part!r}"
    return f"Field {field} ({part!r})"
