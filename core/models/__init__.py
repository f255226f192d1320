"""Pydantic data models shared across all components."""

from core.models.ranges import (
    DAY_OF_MONTH,
    DAY_OF_WEEK,
    FIELDS,
    HOUR,
    MINUTE,
    MONTH,
    CalendarComponents,
    Expression,
    FieldDomain,
    FieldSpec,
    Range,
    RangeSet,
    Unconstrained,
)

__all__ = [
    "Range",
    "RangeSet",
    "Unconstrained",
    "FieldSpec",
    "FieldDomain",
    "Expression",
    "CalendarComponents",
    "FIELDS",
    "MINUTE",
    "HOUR",
    "DAY_OF_MONTH",
    "MONTH",
    "DAY_OF_WEEK",
]
