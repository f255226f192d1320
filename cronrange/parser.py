"""Allowed-range expression parser.

Supports 5 fields: minute hour day_of_month month day_of_week

Each field is ``*``, a single value, an inclusive range ``a-b``, or a
comma-separated list of those. A range with ``a > b`` wraps around.
Steps (``*/5``) and named shorthands (``@daily``) are not supported.

Examples:
    "* 9-17 * * 1-5"      -> weekdays, 9am through 5:59pm
    "* * * 9-6 *"         -> September through June
    "0-29 * * * *"        -> first half of every hour
    "* 22-6 * * 5,6,0"    -> nights from Friday to Sunday
"""

from __future__ import annotations

import logging
import re

from core.errors import InvalidRangePair, MalformedExpression, NonIntegerBound, OutOfDomainRange
from core.models.ranges import FIELDS, Expression, FieldDomain, FieldSpec, Range, RangeSet, Unconstrained

logger = logging.getLogger(__name__)

WILDCARD = "*"

_INTEGER_RE = re.compile(r"[0-9]+")


def parse_expression(expression: str, strict: bool = False) -> Expression:
    """Parse a five-field expression.

    Args:
        expression: whitespace-delimited fields (minute hour dom month dow)
        strict: also reject bounds outside each field's legal values

    Returns:
        The parsed, immutable Expression.

    Raises:
        MalformedExpression: the string does not hold exactly 5 fields.
        InvalidRangePair, NonIntegerBound, OutOfDomainRange: a field is invalid.
    """
    if not isinstance(expression, str):
        raise MalformedExpression(expression, expected=len(FIELDS))

    parts = expression.split()
    if len(parts) != len(FIELDS):
        raise MalformedExpression(expression, expected=len(FIELDS), found=len(parts))

    specs = {
        domain.name: parse_part(part, domain, strict=strict)
        for domain, part in zip(FIELDS, parts)
    }
    parsed = Expression(**specs)
    logger.debug("Parsed %r as %s", expression, parsed)
    return parsed


def parse_part(part: str, domain: FieldDomain | None = None, strict: bool = False) -> FieldSpec:
    """Parse one field into Unconstrained or a RangeSet.

    A list holding ``*`` anywhere is Unconstrained; the other entries are
    discarded unchecked (``*,11-12`` is the same as ``*``).
    """
    if part == WILDCARD:
        return Unconstrained()

    pair_strs = part.split(",")
    if any(pair_str == WILDCARD for pair_str in pair_strs):
        return Unconstrained()

    field = domain.name if domain is not None else None
    ranges = []
    for pair_str in pair_strs:
        r = _parse_pair(field, part, pair_str)
        if strict and domain is not None:
            _check_domain(domain, part, r)
        ranges.append(r)

    return RangeSet(ranges=tuple(ranges))


def _parse_pair(field: str | None, part: str, pair_str: str) -> Range:
    pair = pair_str.split("-")
    if len(pair) not in (1, 2):
        raise InvalidRangePair(field, part, pair_str)

    start = _parse_bound(field, part, pair_str, "start", pair[0])
    end = start if len(pair) == 1 else _parse_bound(field, part, pair_str, "end", pair[1])
    return Range(start=start, end=end)


def _parse_bound(field: str | None, part: str, pair_str: str, side: str, raw: str) -> int:
    if not _INTEGER_RE.fullmatch(raw):
        raise NonIntegerBound(field, part, pair_str, side, raw)
    return int(raw)


def _check_domain(domain: FieldDomain, part: str, r: Range) -> None:
    for value in (r.start, r.end):
        if not domain.low <= value <= domain.high:
            raise OutOfDomainRange(domain.name, part, domain.low, domain.high, value)
