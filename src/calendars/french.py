"""
French — календарь Французской республики ⇄ SDN

Домен: годы 1..14 (22 сентября 1792 — 1805).
- 12 месяцев по 30 дней + месяц 13 (Sansculottides)
- Sansculottides: 5 дней, 6 дней в високосные годы 3, 7, 11

to_sdn — линейная формула (блок 4 лет × длина месяца + смещение).
from_sdn валиден только для SDN, соответствующих годам 1..14.
"""

from typing import Final

from src.core.domain.calendar import INVALID_DATE, CalendarDate, CalendarId

FRENCH_SDN_OFFSET: Final[int] = 2375474
DAYS_PER_4_YEARS: Final[int] = 1461
DAYS_PER_MONTH: Final[int] = 30

FRENCH_FIRST_VALID_SDN: Final[int] = 2375840
FRENCH_LAST_VALID_SDN: Final[int] = 2380952

FRENCH_MIN_YEAR: Final[int] = 1
FRENCH_MAX_YEAR: Final[int] = 14
FRENCH_LEAP_YEARS: Final[frozenset[int]] = frozenset({3, 7, 11})


def sansculottides_length(year: int) -> int:
    """Число дополнительных дней (месяц 13) в году."""
    return 6 if year in FRENCH_LEAP_YEARS else 5


def french_to_sdn(year: int, month: int, day: int) -> int:
    """
    Конверсия республиканской даты в SDN.

    Returns:
        SDN > 0, либо 0 вне годов 1..14, месяцев 1..13, дней 1..30
        и для дней Sansculottides сверх длины года

    Examples:
        >>> french_to_sdn(1, 1, 1)
        2375840
        >>> french_to_sdn(1, 13, 6)
        0
        >>> french_to_sdn(3, 13, 6)
        2376935
    """
    if (
        year < FRENCH_MIN_YEAR
        or year > FRENCH_MAX_YEAR
        or month < 1
        or month > 13
        or day < 1
        or day > DAYS_PER_MONTH
    ):
        return 0

    if month == 13 and day > sansculottides_length(year):
        return 0

    return (
        (year * DAYS_PER_4_YEARS) // 4
        + (month - 1) * DAYS_PER_MONTH
        + day
        + FRENCH_SDN_OFFSET
    )


def sdn_to_french(sdn: int) -> CalendarDate:
    """
    Конверсия SDN в республиканскую дату.

    Returns:
        CalendarDate, либо INVALID_DATE вне [2375840, 2380952]
    """
    if sdn < FRENCH_FIRST_VALID_SDN or sdn > FRENCH_LAST_VALID_SDN:
        return INVALID_DATE

    temp = (sdn - FRENCH_SDN_OFFSET) * 4 - 1
    year = temp // DAYS_PER_4_YEARS
    day_of_year = (temp % DAYS_PER_4_YEARS) // 4

    return CalendarDate(
        year,
        day_of_year // DAYS_PER_MONTH + 1,
        day_of_year % DAYS_PER_MONTH + 1,
    )


def sdn_to_french_string(sdn: int) -> str:
    """SDN → "m/d/y" ("0/0/0" вне домена)."""
    return str(sdn_to_french(sdn))


class FrenchRepublicanCalendar:
    """Календарь Французской республики (SdnConvertible)."""

    calendar_id = CalendarId.FRENCH

    def to_sdn(self, year: int, month: int, day: int) -> int:
        return french_to_sdn(year, month, day)

    def from_sdn(self, sdn: int) -> CalendarDate:
        return sdn_to_french(sdn)
