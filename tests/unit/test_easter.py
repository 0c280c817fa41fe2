"""
Тесты для Easter — Paschal computus

Проверяемые инварианты:
1. Известные даты (2000, 2001, 2024, ...)
2. Выбор базиса по EasterMode (1582 / 1752 / фиксированный)
3. Пасха всегда воскресенье, 22 марта .. 25 апреля
4. easter_date ограничен 1970..2037, easter_days — нет
5. Год по умолчанию — текущий (wall clock)
"""

import pytest

from src.calendars import easter
from src.calendars.easter import (
    EASTER_DATE_MAX_YEAR,
    EASTER_DATE_MIN_YEAR,
    easter_date,
    easter_days,
    easter_month_day,
    offset_to_month_day,
    uses_julian_basis,
)
from src.calendars.gregorian import gregorian_to_sdn
from src.calendars.julian import julian_to_sdn
from src.core.domain.calendar import SECONDS_PER_DAY, CalendarArgumentError
from src.core.domain.modes import EasterMode


def weekday(sdn: int) -> int:
    return (sdn + 1) % 7


# =============================================================================
# ТЕСТЫ: easter_days
# =============================================================================


class TestEasterDays:
    """Тесты смещения Пасхи от 21 марта."""

    @pytest.mark.parametrize(
        "year,mode,expected",
        [
            (2000, EasterMode.DEFAULT, 33),
            (2000, EasterMode.ALWAYS_JULIAN, 27),
            (1999, EasterMode.DEFAULT, 14),
            (1913, EasterMode.DEFAULT, 2),
            (2024, EasterMode.DEFAULT, 10),
            (1492, EasterMode.DEFAULT, 32),
        ],
    )
    def test_known_offsets(self, year, mode, expected):
        assert easter_days(year, mode) == expected

    def test_unrestricted_year_range(self):
        """easter_days не ограничен 1970..2037."""
        assert 1 <= easter_days(1969) <= 35
        assert 1 <= easter_days(2038) <= 35
        assert 1 <= easter_days(4000) <= 35

    def test_invalid_mode_rejected(self):
        with pytest.raises(CalendarArgumentError, match="mode must be a valid Easter"):
            easter_days(2000, 7)

    def test_defaults_to_current_year(self, monkeypatch):
        monkeypatch.setattr(easter, "current_year", lambda: 2000)
        assert easter_days() == 33


class TestUsesJulianBasis:
    """Тесты выбора календарного базиса."""

    @pytest.mark.parametrize(
        "year,mode,expected",
        [
            (1582, EasterMode.ROMAN, True),
            (1583, EasterMode.ROMAN, False),
            (1752, EasterMode.DEFAULT, True),
            (1753, EasterMode.DEFAULT, False),
            (1000, EasterMode.ALWAYS_GREGORIAN, False),
            (2000, EasterMode.ALWAYS_JULIAN, True),
        ],
    )
    def test_basis(self, year, mode, expected):
        assert uses_julian_basis(year, mode) is expected

    def test_reform_rule_selects_basis_for_1700(self):
        assert easter_days(1700, EasterMode.ROMAN) == easter_days(
            1700, EasterMode.ALWAYS_GREGORIAN
        )
        assert easter_days(1700, EasterMode.DEFAULT) == easter_days(
            1700, EasterMode.ALWAYS_JULIAN
        )


class TestEasterIsSunday:
    """Пасха — всегда воскресенье в календаре своего базиса."""

    def test_gregorian_easter_is_sunday(self):
        for year in range(1583, 2600):
            month, day = easter_month_day(year, EasterMode.ALWAYS_GREGORIAN)
            assert weekday(gregorian_to_sdn(year, month, day)) == 0
            assert (month, day) >= (3, 22)
            assert (month, day) <= (4, 25)

    def test_julian_easter_is_sunday(self):
        for year in range(300, 1583):
            month, day = easter_month_day(year, EasterMode.ALWAYS_JULIAN)
            assert weekday(julian_to_sdn(year, month, day)) == 0


# =============================================================================
# ТЕСТЫ: easter_month_day / easter_date
# =============================================================================


class TestEasterMonthDay:
    @pytest.mark.parametrize(
        "offset,expected", [(1, (3, 22)), (10, (3, 31)), (11, (4, 1)), (35, (4, 25))]
    )
    def test_offset_to_month_day(self, offset, expected):
        assert offset_to_month_day(offset) == expected

    def test_known_dates(self):
        assert easter_month_day(2024) == (3, 31)
        assert easter_month_day(2000) == (4, 23)


class TestEasterDate:
    """Тесты Unix timestamp полуночи дня Пасхи."""

    @pytest.mark.parametrize(
        "year,mode,expected",
        [
            (2000, EasterMode.DEFAULT, 956448000),
            (2001, EasterMode.DEFAULT, 987292800),
            (2002, EasterMode.DEFAULT, 1017532800),
            (2000, EasterMode.ALWAYS_JULIAN, 955929600),
        ],
    )
    def test_known_timestamps(self, year, mode, expected):
        assert easter_date(year, mode) == expected

    def test_julian_basis_six_days_earlier_in_2000(self):
        delta = easter_date(2000) - easter_date(2000, EasterMode.ALWAYS_JULIAN)
        assert delta == 6 * SECONDS_PER_DAY

    def test_result_is_midnight(self):
        for year in range(EASTER_DATE_MIN_YEAR, EASTER_DATE_MAX_YEAR + 1):
            assert easter_date(year) % SECONDS_PER_DAY == 0

    @pytest.mark.parametrize("year", [1969, 2038])
    def test_year_outside_unix_range_rejected(self, year):
        with pytest.raises(
            CalendarArgumentError,
            match="only valid for years between 1970 and 2037 inclusive",
        ):
            easter_date(year)

    def test_defaults_to_current_year(self, monkeypatch):
        monkeypatch.setattr(easter, "current_year", lambda: 2001)
        assert easter_date() == 987292800
