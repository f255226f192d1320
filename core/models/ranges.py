"""Range models -- the parsed, immutable form of an allowed-range expression.

A field is either Unconstrained (``*``) or a RangeSet of inclusive ranges.
A range whose start exceeds its end wraps around: ``9-6`` in the month field
covers September through June.
"""

from __future__ import annotations

from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Range(BaseModel):
    """Inclusive bound pair. ``start > end`` is a wraparound range."""

    model_config = ConfigDict(frozen=True)

    start: int
    end: int

    @property
    def is_singleton(self) -> bool:
        return self.start == self.end

    @property
    def wraps(self) -> bool:
        return self.start > self.end

    def __str__(self) -> str:
        if self.is_singleton:
            return str(self.start)
        return f"{self.start}-{self.end}"


class Unconstrained(BaseModel):
    """Field accepts any value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["any"] = "any"

    def __str__(self) -> str:
        return "*"


class RangeSet(BaseModel):
    """Union of one or more ranges. Order is kept but carries no meaning."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["ranges"] = "ranges"
    ranges: tuple[Range, ...] = Field(min_length=1)

    def __str__(self) -> str:
        return ",".join(str(r) for r in self.ranges)


FieldSpec = Annotated[Union[Unconstrained, RangeSet], Field(discriminator="kind")]


class FieldDomain(BaseModel):
    """Legal values of one positional field.

    Only strict validation and display read these bounds; matching never does.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    low: int
    high: int


MINUTE = FieldDomain(name="minute", label="minute", low=0, high=59)
HOUR = FieldDomain(name="hour", label="hour", low=0, high=23)
DAY_OF_MONTH = FieldDomain(name="day_of_month", label="day of the month", low=1, high=31)
MONTH = FieldDomain(name="month", label="month", low=1, high=12)
DAY_OF_WEEK = FieldDomain(name="day_of_week", label="day of the week", low=0, high=6)

# Positional order of the five expression fields
FIELDS: tuple[FieldDomain, FieldDomain, FieldDomain, FieldDomain, FieldDomain] = (
    MINUTE,
    HOUR,
    DAY_OF_MONTH,
    MONTH,
    DAY_OF_WEEK,
)


class Expression(BaseModel):
    """Five parsed fields, bound by position to FIELDS."""

    model_config = ConfigDict(frozen=True)

    minute: FieldSpec
    hour: FieldSpec
    day_of_month: FieldSpec
    month: FieldSpec
    day_of_week: FieldSpec

    def specs(self) -> tuple[FieldSpec, FieldSpec, FieldSpec, FieldSpec, FieldSpec]:
        return (self.minute, self.hour, self.day_of_month, self.month, self.day_of_week)

    def pairs(self) -> Iterator[tuple[FieldDomain, FieldSpec]]:
        """Yield (domain, spec) in positional order."""
        return zip(FIELDS, self.specs())

    def __str__(self) -> str:
        return " ".join(str(spec) for spec in self.specs())


class CalendarComponents(BaseModel):
    """The five calendar integers of an instant, already in the target zone.

    day_of_week is 0 for Sunday through 6 for Saturday; month is 1-indexed.
    """

    model_config = ConfigDict(frozen=True)

    minute: int
    hour: int
    day_of_month: int
    month: int
    day_of_week: int

    def as_tuple(self) -> tuple[int, int, int, int, int]:
        return (self.minute, self.hour, self.day_of_month, self.month, self.day_of_week)
