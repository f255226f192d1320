"""Unit tests for AllowedRange."""

from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, timedelta, timezone

import pytest

from core.errors import InvalidTimezone, MalformedExpression, NonIntegerBound, OutOfDomainRange
from core.models.ranges import Range, RangeSet, Unconstrained
from cronrange.evaluator import AllowedRange


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestConstruction:
    """Parsing and timezone resolution in the constructor."""

    def test_defaults_to_utc(self):
        ar = AllowedRange("* * * * *")
        assert ar.timezone == "UTC"
        assert ar.strict is False

    def test_exposes_parsed_fields(self):
        ar = AllowedRange("* 9-17 * 9-6,8 1-5")
        assert ar.minute == Unconstrained()
        assert ar.hour == RangeSet(ranges=(Range(start=9, end=17),))
        assert ar.day_of_month == Unconstrained()
        assert ar.month == RangeSet(ranges=(Range(start=9, end=6), Range(start=8, end=8)))
        assert ar.day_of_week == RangeSet(ranges=(Range(start=1, end=5),))

    @pytest.mark.parametrize("name", ["Not/AZone", "", "../etc/passwd", "America"])
    def test_invalid_timezone(self, name):
        with pytest.raises(InvalidTimezone) as exc_info:
            AllowedRange("* * * * *", name)
        assert exc_info.value.timezone == name

    def test_non_string_timezone(self):
        with pytest.raises(InvalidTimezone):
            AllowedRange("* * * * *", None)  # type: ignore[arg-type]

    def test_expression_errors_come_first(self):
        with pytest.raises(MalformedExpression):
            AllowedRange("* * * *", "Not/AZone")

    def test_invalid_field(self):
        with pytest.raises(NonIntegerBound):
            AllowedRange("* * a-5 * *")

    def test_strict(self):
        with pytest.raises(OutOfDomainRange):
            AllowedRange("* 25 * * *", strict=True)
        assert AllowedRange("* 25 * * *").hour == RangeSet(ranges=(Range(start=25, end=25),))

    def test_no_attribute_assignment(self):
        ar = AllowedRange("* * * * *")
        with pytest.raises(AttributeError):
            ar.hour = Unconstrained()  # type: ignore[misc]
        with pytest.raises(AttributeError):
            ar.extra = 1  # type: ignore[attr-defined]

    def test_str_and_repr(self):
        ar = AllowedRange("  *  9-17 * * 1-5 ", "America/Toronto")
        assert str(ar) == "* 9-17 * * 1-5"
        assert repr(ar) == "AllowedRange('* 9-17 * * 1-5', timezone='America/Toronto')"


class TestBusinessHoursUtc:
    """'* 9-17 * 9-6,8 1-5' evaluated at UTC."""

    @pytest.fixture
    def ar(self):
        return AllowedRange("* 9-17 * 9-6,8 1-5")

    def test_monday_december_nine_am(self, ar):
        assert ar.is_date_allowed(utc(1995, 12, 18, 9, 0, 0)) is True

    def test_friday_august_five_pm(self, ar):
        assert ar.is_date_allowed(utc(1995, 8, 18, 17, 0, 0)) is True

    def test_sunday_denied(self, ar):
        assert ar.is_date_allowed(utc(1995, 12, 17, 9, 24, 0)) is False

    def test_july_denied(self, ar):
        assert ar.is_date_allowed(utc(1995, 7, 18, 8, 24, 0)) is False

    def test_hour_17_is_inclusive_to_the_last_minute(self, ar):
        assert ar.is_date_allowed(utc(1995, 12, 18, 17, 59, 59)) is True
        assert ar.is_date_allowed(utc(1995, 12, 18, 18, 0, 0)) is False

    def test_naive_datetime_is_utc(self, ar):
        assert ar.is_date_allowed(datetime(1995, 12, 18, 9, 0, 0)) is True

    def test_other_offsets_are_converted(self, ar):
        plus_ten = timezone(timedelta(hours=10))
        # 19:00+10:00 is 09:00 UTC
        assert ar.is_date_allowed(datetime(1995, 12, 18, 19, 0, tzinfo=plus_ten)) is True

    def test_idempotent(self, ar):
        date = utc(1995, 12, 18, 9, 0, 0)
        assert [ar.is_date_allowed(date) for _ in range(3)] == [True, True, True]


class TestTimezones:
    """Zone projection through the default provider."""

    @pytest.fixture
    def toronto(self):
        return AllowedRange("* 9-17 * * 1-5", "America/Toronto")

    def test_after_hours_local(self, toronto):
        # 22:00Z is 18:00 EDT
        assert toronto.is_date_allowed(utc(2019, 10, 23, 22, 0, 0)) is False

    def test_nine_am_local(self, toronto):
        # 13:00Z is 09:00 EDT
        assert toronto.is_date_allowed(utc(2019, 10, 23, 13, 0, 0)) is True

    def test_follows_dst_change(self, toronto):
        # Monday after DST ends, 14:00Z is 09:00 EST and 13:30Z is 08:30
        assert toronto.is_date_allowed(utc(2019, 11, 4, 14, 0, 0)) is True
        assert toronto.is_date_allowed(utc(2019, 11, 4, 13, 30, 0)) is False

    def test_day_of_week_is_local(self):
        friday_local = AllowedRange("* * * * 5", "America/Toronto")
        friday_utc = AllowedRange("* * * * 5")
        # Saturday 02:00Z is Friday 22:00 in Toronto
        instant = utc(2019, 10, 26, 2, 0, 0)
        assert friday_local.is_date_allowed(instant) is True
        assert friday_utc.is_date_allowed(instant) is False

    def test_month_rolls_over_locally(self):
        december = AllowedRange("* * 31 12 *", "Asia/Tokyo")
        # Dec 31 15:00Z is Jan 1 00:00 in Tokyo
        assert december.is_date_allowed(utc(2020, 12, 31, 14, 59, 0)) is True
        assert december.is_date_allowed(utc(2020, 12, 31, 15, 0, 0)) is False


class TestInjectedZones:
    """A custom zone provider replaces the IANA database."""

    def test_uses_provider(self, fake_zones):
        ar = AllowedRange("* 11 * * *", "Test/Plus2", zones=fake_zones)
        assert ar.is_date_allowed(utc(2020, 1, 1, 9, 0)) is True
        assert fake_zones.calls == [(utc(2020, 1, 1, 9, 0), "Test/Plus2")]

    def test_provider_decides_validity(self, fake_zones):
        with pytest.raises(InvalidTimezone):
            AllowedRange("* * * * *", "America/Toronto", zones=fake_zones)


class TestExplain:
    """Per-field verdicts."""

    def test_reports_each_field(self):
        ar = AllowedRange("* 9-17 * 9-6,8 1-5")
        report = ar.explain(utc(1995, 12, 17, 9, 24, 0))
        assert [(d.name, v, ok) for d, v, ok in report] == [
            ("minute", 24, True),
            ("hour", 9, True),
            ("day_of_month", 17, True),
            ("month", 12, True),
            ("day_of_week", 0, False),
        ]


class TestConcurrentUse:
    """One instance shared across threads."""

    def test_parallel_evaluation(self):
        ar = AllowedRange("* 9-17 * * 1-5")
        dates = [utc(2019, 10, 21 + d, h, 0) for d in range(7) for h in range(24)]
        expected = [ar.is_date_allowed(d) for d in dates]
        with ThreadPoolExecutor(max_workers=8) as pool:
            assert list(pool.map(ar.is_date_allowed, dates)) == expected


class TestZoneNameCase:
    def test_lowercase_zone_name(self):
        ar = AllowedRange("* 9-17 * * 1-5", "america/toronto")
        assert ar.is_date_allowed(utc(2019, 10, 23, 22, 0, 0)) is False
        assert ar.is_date_allowed(utc(2019, 10, 23, 13, 0, 0)) is True


class TestInputType:
    """Only datetimes carry the minute and hour the fields need."""

    @pytest.mark.parametrize("value", [date(1995, 12, 18), "1995-12-18T09:00:00Z", 819277200, None])
    def test_non_datetime_rejected(self, value):
        ar = AllowedRange("* * * * *")
        with pytest.raises(TypeError, match="Expected a datetime"):
            ar.is_date_allowed(value)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            ar.explain(value)  # type: ignore[arg-type]
