"""Range-matching engine -- decides whether a value falls in a parsed field."""

from __future__ import annotations

from core.models.ranges import FieldSpec, RangeSet


def is_within_range(value: int, start: int, end: int) -> bool:
    """Inclusive membership; ``start > end`` wraps around.

    Wraparound is decided by comparing against start and end alone, not
    modulo the field's domain: (9, 6) holds 9..max and min..6.
    """
    if start == end:
        return value == start

    if start < end:
        return start <= value <= end

    return value >= start or value <= end


def matches(value: int, spec: FieldSpec) -> bool:
    """True if ``value`` lies in any range of ``spec``. Unconstrained holds everything."""
    if not isinstance(spec, RangeSet):
        return True

    return any(is_within_range(value, r.start, r.end) for r in spec.ranges)
