"""
Gregorian — пролептический григорианский календарь ⇄ SDN

SDN 1 = 25 ноября 4714 BCE (year = -4714).

Алгоритм to_sdn:
1. Год нормализуется к неотрицательному счётчику (BCE +4801, CE +4800)
2. Начало года сдвигается на март (январь/февраль → предыдущий год)
3. Дни = блоки 400 лет (через столетия) + блоки 4 лет внутри столетия
   + блок 5 месяцев / 153 дня + день - смещение

Все деления целочисленные (floor); нормализованный год всегда
положителен, поэтому floor совпадает с усечением C.
"""

from typing import Final

from src.core.domain.calendar import INVALID_DATE, CalendarDate, CalendarId
from src.core.math.integer_arithmetic import DEFAULT_PLATFORM_LIMITS, PlatformLimits

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

GREGOR_SDN_OFFSET: Final[int] = 32045
DAYS_PER_5_MONTHS: Final[int] = 153
DAYS_PER_4_YEARS: Final[int] = 1461
DAYS_PER_400_YEARS: Final[int] = 146097

GREGORIAN_MIN_YEAR: Final[int] = -4714


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def gregorian_to_sdn(
    year: int,
    month: int,
    day: int,
    limits: PlatformLimits = DEFAULT_PLATFORM_LIMITS,
) -> int:
    """
    Конверсия григорианской даты в SDN.

    Args:
        year: Год (астрономический, без года 0; -1 = 1 BCE)
        month: Месяц 1..12
        day: День 1..31 (длина месяца не проверяется)
        limits: Платформенные лимиты (год должен помещаться в int)

    Returns:
        SDN > 0, либо 0 для невалидной даты или даты до SDN 1

    Examples:
        >>> gregorian_to_sdn(1970, 1, 1)
        2440588
        >>> gregorian_to_sdn(-4714, 11, 25)
        1
        >>> gregorian_to_sdn(0, 1, 1)
        0
    """
    if (
        year == 0
        or year < GREGORIAN_MIN_YEAR
        or year > limits.int_max
        or month <= 0
        or month > 12
        or day <= 0
        or day > 31
    ):
        return 0

    # До SDN 1 (25 ноября 4714 BCE)
    if year == GREGORIAN_MIN_YEAR:
        if month < 11:
            return 0
        if month == 11 and day < 25:
            return 0

    if year < 0:
        year += 4801
    else:
        year += 4800

    if month > 2:
        month -= 3
    else:
        month += 9
        year -= 1

    return (
        ((year // 100) * DAYS_PER_400_YEARS) // 4
        + ((year % 100) * DAYS_PER_4_YEARS) // 4
        + (month * DAYS_PER_5_MONTHS + 2) // 5
        + day
        - GREGOR_SDN_OFFSET
    )


def sdn_to_gregorian(
    sdn: int,
    limits: PlatformLimits = DEFAULT_PLATFORM_LIMITS,
) -> CalendarDate:
    """
    Конверсия SDN в григорианскую дату.

    Args:
        sdn: Serial Day Number
        limits: Платформенные лимиты для обнаружения переполнения

    Returns:
        CalendarDate, либо INVALID_DATE если sdn <= 0, промежуточное
        значение переполнило бы long, или год не помещается в int

    Examples:
        >>> sdn_to_gregorian(2440588)
        CalendarDate(year=1970, month=1, day=1)
        >>> sdn_to_gregorian(0)
        CalendarDate(year=0, month=0, day=0)
    """
    if sdn <= 0 or sdn > (limits.long_max - 4 * GREGOR_SDN_OFFSET) // 4:
        return INVALID_DATE

    temp = (sdn + GREGOR_SDN_OFFSET) * 4 - 1

    century = temp // DAYS_PER_400_YEARS

    # Год и день года (1 <= day_of_year <= 366)
    temp = ((temp % DAYS_PER_400_YEARS) // 4) * 4 + 3
    year = century * 100 + temp // DAYS_PER_4_YEARS
    day_of_year = (temp % DAYS_PER_4_YEARS) // 4 + 1

    temp = day_of_year * 5 - 3
    month = temp // DAYS_PER_5_MONTHS
    day = (temp % DAYS_PER_5_MONTHS) // 5 + 1

    if month < 10:
        month += 3
    else:
        year += 1
        month -= 9

    year -= 4800
    if year <= 0:
        year -= 1

    if not limits.fits_int(year):
        return INVALID_DATE

    return CalendarDate(year, month, day)


def sdn_to_gregorian_string(
    sdn: int,
    limits: PlatformLimits = DEFAULT_PLATFORM_LIMITS,
) -> str:
    """SDN → "m/d/y" ("0/0/0" вне домена)."""
    return str(sdn_to_gregorian(sdn, limits))


# =============================================================================
# SDN CONVERTIBLE
# =============================================================================


class GregorianCalendar:
    """Пролептический григорианский календарь (SdnConvertible)."""

    calendar_id = CalendarId.GREGORIAN

    def __init__(self, limits: PlatformLimits | None = None):
        self.limits = limits or DEFAULT_PLATFORM_LIMITS

    def to_sdn(self, year: int, month: int, day: int) -> int:
        return gregorian_to_sdn(year, month, day, self.limits)

    def from_sdn(self, sdn: int) -> CalendarDate:
        return sdn_to_gregorian(sdn, self.limits)
