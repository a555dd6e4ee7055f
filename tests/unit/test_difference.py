"""
Тесты для Difference (Span между двумя zoned instant)

Проверяет:
1. Построение и проверку часовых поясов
2. Точные единицы (микросекунды..часы), включая DST
3. Календарные единицы (дни..тысячелетия)
4. Календарную разницу полей (to_interval)
5. Fluent builders и статические shortcut'ы
6. Диспетчеризацию to_unit и идемпотентность кэша
"""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from dateutil.relativedelta import relativedelta

from calendiff import Difference, FromBuilder, TimezoneMismatch, ToBuilder, Unit, between

UTC = timezone.utc
TORONTO = ZoneInfo("America/Toronto")
NAIROBI = ZoneInfo("Africa/Nairobi")


@pytest.fixture
def fall_back_utc() -> tuple[datetime, datetime]:
    """Сутки 2024-11-03 → 2024-11-04 в UTC"""
    return (
        datetime(2024, 11, 3, 1, 24, 22, 848816, tzinfo=UTC),
        datetime(2024, 11, 4, 1, 24, 22, 848816, tzinfo=UTC),
    )


@pytest.fixture
def fall_back_toronto() -> tuple[datetime, datetime]:
    """Те же wall-clock сутки в Toronto (переход EDT → EST)"""
    return (
        datetime(2024, 11, 3, 1, 24, 22, 848816, tzinfo=TORONTO),
        datetime(2024, 11, 4, 1, 24, 22, 848816, tzinfo=TORONTO),
    )


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestConstruction:
    """Тесты построения Span"""

    def test_between(self, fall_back_utc) -> None:
        start, end = fall_back_utc
        span = Difference.between(start, end)

        assert span.from_ == start
        assert span.to == end
        assert between(start, end) == span

    def test_timezone_mismatch(self) -> None:
        new_york = ZoneInfo("America/New_York")
        amsterdam = ZoneInfo("Europe/Amsterdam")

        with pytest.raises(TimezoneMismatch) as exc_info:
            Difference.between(datetime.now(new_york), datetime.now(amsterdam))

        assert exc_info.value.from_timezone == "America/New_York"
        assert exc_info.value.to_timezone == "Europe/Amsterdam"
        assert str(exc_info.value) == str(TimezoneMismatch.from_timezones(new_york, amsterdam))

    def test_same_offset_different_zone_is_mismatch(self) -> None:
        """Совпадение offset не делает пояса одинаковыми"""
        with pytest.raises(TimezoneMismatch):
            Difference.between(
                datetime(2024, 1, 1, tzinfo=UTC),
                datetime(2024, 1, 2, tzinfo=ZoneInfo("Europe/London")),
            )

    def test_naive_datetime_is_mismatch(self) -> None:
        with pytest.raises(TimezoneMismatch) as exc_info:
            Difference.between(datetime(2024, 1, 1), datetime(2024, 1, 2, tzinfo=UTC))

        assert exc_info.value.from_timezone is None
        assert exc_info.value.to_timezone == "UTC"

    def test_both_naive_is_mismatch(self) -> None:
        with pytest.raises(TimezoneMismatch):
            Difference.between(datetime(2024, 1, 1), datetime(2024, 1, 2))

    def test_immutable(self, fall_back_utc) -> None:
        span = Difference.between(*fall_back_utc)

        with pytest.raises(AttributeError):
            span.to = datetime(2030, 1, 1, tzinfo=UTC)  # type: ignore

    def test_with_start(self, fall_back_utc) -> None:
        start, end = fall_back_utc
        moment = start + timedelta(hours=6)

        assert Difference.between(start, end).with_start(moment) == Difference.between(moment, end)


# =============================================================================
# BUILDERS
# =============================================================================


class TestBuilders:
    """Тесты fluent builders"""

    def test_starting_at(self, fall_back_utc) -> None:
        start, end = fall_back_utc
        builder = Difference.starting_at(start)

        assert isinstance(builder, ToBuilder)
        assert builder.to(end) == Difference.between(start, end)

    def test_ending_at(self, fall_back_utc) -> None:
        start, end = fall_back_utc
        builder = Difference.ending_at(end)

        assert isinstance(builder, FromBuilder)
        assert builder.from_(start) == Difference.between(start, end)

    def test_builder_checks_timezones(self) -> None:
        with pytest.raises(TimezoneMismatch):
            Difference.starting_at(datetime(2024, 1, 1, tzinfo=UTC)).to(datetime(2024, 1, 1, tzinfo=TORONTO))


# =============================================================================
# EXACT UNITS
# =============================================================================


class TestExactUnits:
    """Тесты точных единиц"""

    @pytest.mark.parametrize(
        "expected, start, end",
        [
            (
                ((16 - 15) * 60 + (34 - 26)) * 1_000_000 + (456789 - 123456),
                datetime(2024, 7, 28, 14, 15, 26, 123456, tzinfo=UTC),
                datetime(2024, 7, 28, 14, 16, 34, 456789, tzinfo=UTC),
            ),
            (
                6 * 3_600_000_000,
                datetime(2024, 7, 28, 14, 15, 26, tzinfo=UTC),
                datetime(2024, 7, 28, 20, 15, 26, tzinfo=UTC),
            ),
            (
                24.0 * 60 * 60 * 1000 * 1000,
                datetime(2024, 11, 3, 1, 24, 22, 848816, tzinfo=UTC),
                datetime(2024, 11, 4, 1, 24, 22, 848816, tzinfo=UTC),
            ),
        ],
    )
    def test_to_microseconds(self, expected: float, start: datetime, end: datetime) -> None:
        result = Difference.between(start, end).to_microseconds()

        assert result == expected
        assert isinstance(result, float)

    def test_microseconds_antisymmetric(self) -> None:
        a = datetime(2024, 7, 28, 14, 15, 26, 123456, tzinfo=TORONTO)
        b = datetime(2026, 3, 8, 2, 59, 59, 999999, tzinfo=TORONTO)

        assert Difference.microseconds(a, b) == -Difference.microseconds(b, a)

    def test_to_hours_utc(self, fall_back_utc) -> None:
        start, end = fall_back_utc

        assert Difference.starting_at(start).to(end).to_hours() == 24.0

    def test_to_hours_across_fall_back(self, fall_back_toronto) -> None:
        start, end = fall_back_toronto

        assert Difference.ending_at(end).from_(start).to_hours() == 25.0
        assert Difference.hours(start, end) == 25.0

    def test_to_minutes(self, fall_back_utc) -> None:
        assert Difference.minutes(*fall_back_utc) == 24.0 * 60

    def test_to_seconds(self, fall_back_utc) -> None:
        assert Difference.seconds(*fall_back_utc) == 24.0 * 60 * 60

    def test_to_milliseconds(self, fall_back_utc) -> None:
        assert Difference.milliseconds(*fall_back_utc) == 24.0 * 60 * 60 * 1000


# =============================================================================
# CALENDAR UNITS
# =============================================================================


class TestCalendarUnits:
    """Тесты календарных единиц"""

    def test_to_days_across_fall_back(self, fall_back_toronto) -> None:
        """25 часов, но ровно один календарный день"""
        assert Difference.between(*fall_back_toronto).to_days() == 1.0

    @pytest.mark.parametrize("zone", [UTC, TORONTO])
    def test_to_days(self, zone) -> None:
        start = datetime(2030, 11, 3, 1, 24, 22, 848816, tzinfo=zone)
        end = datetime(2027, 5, 2, 1, 24, 22, 848816, tzinfo=zone)

        assert Difference.starting_at(start).to(end).to_days() == -1281.0
        assert Difference.ending_at(end).from_(start).to_days() == -1281.0
        assert Difference.days(start, end) == -1281.0

    @pytest.mark.parametrize("zone", [UTC, TORONTO])
    def test_to_weeks(self, zone) -> None:
        start = datetime(2030, 11, 3, 1, 24, 22, 848816, tzinfo=zone)
        end = datetime(2027, 5, 2, 1, 24, 22, 848816, tzinfo=zone)

        assert Difference.between(start, end).to_weeks() == -1281.0 / 7
        assert Difference.weeks(start, end) == -1281.0 / 7

    def test_to_months(self) -> None:
        first = datetime(2022, 12, 1, tzinfo=NAIROBI)
        second = datetime(2022, 11, 1, tzinfo=NAIROBI)

        assert Difference.between(first, second).to_months() == -1.0
        assert Difference.between(second, first).to_months() == 1.0

    def test_to_months_across_zones_converted(self) -> None:
        first = datetime(2022, 2, 1, 16, tzinfo=TORONTO)
        second = datetime(2022, 1, 1, 20, tzinfo=ZoneInfo("Europe/Berlin")).astimezone(TORONTO)

        assert Difference.months(first, second) == pytest.approx(-1.0029761904761905, abs=1e-8)
        assert Difference.months(second, first) == pytest.approx(1.0029761904761905, abs=1e-8)

    def test_to_quarters(self) -> None:
        first = datetime(2023, 12, 1, tzinfo=NAIROBI)
        second = datetime(2024, 4, 1, tzinfo=NAIROBI)

        assert Difference.quarters(first, second) == 4 / 3
        assert Difference.quarters(second, first) == -4 / 3

    def test_to_years(self) -> None:
        first = datetime(2023, 12, 1, tzinfo=NAIROBI)
        second = datetime(2025, 4, 15, 12, tzinfo=NAIROBI)

        assert Difference.years(first, second) == pytest.approx(1 + 135.5 / 365)
        assert Difference.years(second, first) == pytest.approx(-(1 + 135.5 / 365))

    def test_to_decades(self) -> None:
        first = datetime(2023, 12, 1, tzinfo=NAIROBI)
        second = datetime(2038, 12, 1, tzinfo=NAIROBI)

        assert Difference.decades(first, second) == 1.5
        assert Difference.decades(second, first) == -1.5

    def test_to_centuries(self) -> None:
        first = datetime(2023, 12, 1, tzinfo=NAIROBI)
        second = datetime(2173, 12, 1, tzinfo=NAIROBI)

        assert Difference.centuries(first, second) == 1.5
        assert Difference.centuries(second, first) == -1.5

    def test_to_millennia(self) -> None:
        first = datetime(2023, 12, 1, tzinfo=NAIROBI)
        second = datetime(3523, 12, 1, tzinfo=NAIROBI)

        assert Difference.millennia(first, second) == 1.5
        assert Difference.millennia(second, first) == -1.5


# =============================================================================
# INTERVAL
# =============================================================================


class TestInterval:
    """Тесты календарной разницы полей"""

    def test_time_fields(self) -> None:
        span = Difference.between(
            datetime(2024, 7, 28, 14, 15, 26, 123456, tzinfo=UTC),
            datetime(2024, 7, 28, 14, 16, 34, 456789, tzinfo=UTC),
        )

        assert span.to_interval() == relativedelta(minutes=1, seconds=8, microseconds=333333)

    def test_date_fields(self) -> None:
        span = Difference.between(datetime(2024, 7, 28, tzinfo=UTC), datetime(2024, 8, 30, tzinfo=UTC))

        assert span.to_interval() == relativedelta(months=1, days=2)

    def test_relative_and_absolute(self) -> None:
        span = Difference.between(datetime(2024, 8, 30, tzinfo=UTC), datetime(2024, 7, 28, tzinfo=UTC))

        assert span.to_interval() == relativedelta(months=-1, days=-2)
        assert span.to_interval(absolute=True) == relativedelta(months=1, days=2)


# =============================================================================
# DISPATCH & CACHE
# =============================================================================


class TestDispatch:
    """Тесты to_unit и кэша"""

    def test_to_unit_matches_accessors(self) -> None:
        span = Difference.between(
            datetime(2024, 11, 3, 1, 24, 22, 848816, tzinfo=UTC),
            datetime(2027, 8, 14, 14, 13, 50, 12455, tzinfo=UTC),
        )

        assert span.to_unit(Unit.MICROSECOND) == span.to_microseconds()
        assert span.to_unit(Unit.HOUR) == span.to_hours()
        assert span.to_unit(Unit.WEEK) == span.to_weeks()
        assert span.to_unit(Unit.QUARTER) == span.to_quarters()
        assert span.to_unit(Unit.MILLENNIUM) == span.to_millennia()

    def test_every_unit_dispatches(self) -> None:
        span = Difference.between(datetime(2024, 1, 1, tzinfo=UTC), datetime(2025, 1, 1, tzinfo=UTC))

        for unit in Unit:
            assert span.to_unit(unit) > 0

    def test_accessors_idempotent(self, fall_back_toronto) -> None:
        span = Difference.between(*fall_back_toronto)

        for unit in Unit:
            assert span.to_unit(unit) == span.to_unit(unit)

        assert span.to_interval() == span.to_interval()

    def test_cache_does_not_affect_equality(self, fall_back_utc) -> None:
        computed = Difference.between(*fall_back_utc)
        computed.to_years()

        assert computed == Difference.between(*fall_back_utc)
        assert hash(computed) == hash(Difference.between(*fall_back_utc))
