"""Cron-like allowed-range expressions: parse once, then admit or deny instants."""

from core.errors import (
    CronRangeError,
    ExpressionError,
    InvalidRangePair,
    InvalidTimezone,
    MalformedExpression,
    NonIntegerBound,
    OutOfDomainRange,
)
from cronrange.evaluator import AllowedRange
from cronrange.matcher import is_within_range, matches
from cronrange.parser import parse_expression, parse_part
from cronrange.zones import DEFAULT_TIMEZONE, ZoneInfoProvider

__all__ = [
    "AllowedRange",
    "parse_expression",
    "parse_part",
    "matches",
    "is_within_range",
    "ZoneInfoProvider",
    "DEFAULT_TIMEZONE",
    "CronRangeError",
    "ExpressionError",
    "MalformedExpression",
    "InvalidRangePair",
    "NonIntegerBound",
    "OutOfDomainRange",
    "InvalidTimezone",
]
