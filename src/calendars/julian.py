"""
Julian — пролептический юлианский календарь ⇄ SDN

SDN 1 = 2 января 4713 BCE (year = -4713).

Та же схема, что и Gregorian, но без поправки столетий: только блоки
4 лет и 5 месяцев / 153 дня.

Дополнительно: legacy-форматтер legacy_sdn_to_gregorian_string —
исторический floor-алгоритм SDN → григорианская строка с модулем
обёртки 535117748.
"""

from typing import Final

from src.core.domain.calendar import INVALID_DATE, CalendarDate, CalendarId
from src.core.math.integer_arithmetic import (
    DEFAULT_PLATFORM_LIMITS,
    PlatformLimits,
    trunc_mod,
)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

JULIAN_SDN_OFFSET: Final[int] = 32083
DAYS_PER_5_MONTHS: Final[int] = 153
DAYS_PER_4_YEARS: Final[int] = 1461

JULIAN_MIN_YEAR: Final[int] = -4713

# Legacy-форматтер: граница домена и модуль обёртки
LEGACY_SDN_LIMIT: Final[int] = 536838867
LEGACY_WRAP_MODULUS: Final[int] = 535117748
LEGACY_MARCH_EPOCH_SDN: Final[int] = 1721119


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def julian_to_sdn(
    year: int,
    month: int,
    day: int,
    limits: PlatformLimits = DEFAULT_PLATFORM_LIMITS,
) -> int:
    """
    Конверсия юлианской даты в SDN.

    Returns:
        SDN > 0, либо 0 для невалидной даты или даты до 2 января 4713 BCE

    Examples:
        >>> julian_to_sdn(2019, 12, 25)
        2458856
        >>> julian_to_sdn(-4713, 1, 2)
        1
        >>> julian_to_sdn(-4713, 1, 1)
        0
    """
    if (
        year == 0
        or year < JULIAN_MIN_YEAR
        or year > limits.int_max
        or month <= 0
        or month > 12
        or day <= 0
        or day > 31
    ):
        return 0

    # До SDN 1 (2 января 4713 BCE)
    if year == JULIAN_MIN_YEAR and month == 1 and day == 1:
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
        (year * DAYS_PER_4_YEARS) // 4
        + (month * DAYS_PER_5_MONTHS + 2) // 5
        + day
        - JULIAN_SDN_OFFSET
    )


def sdn_to_julian(
    sdn: int,
    limits: PlatformLimits = DEFAULT_PLATFORM_LIMITS,
) -> CalendarDate:
    """
    Конверсия SDN в юлианскую дату.

    Returns:
        CalendarDate, либо INVALID_DATE при sdn <= 0 или переполнении

    Examples:
        >>> sdn_to_julian(2458856)
        CalendarDate(year=2019, month=12, day=25)
    """
    if sdn <= 0:
        return INVALID_DATE

    # Переполнение sdn * 4 + offset в long
    if sdn > (limits.long_max - JULIAN_SDN_OFFSET * 4 + 1) // 4:
        return INVALID_DATE

    temp = sdn * 4 + (JULIAN_SDN_OFFSET * 4 - 1)

    year = temp // DAYS_PER_4_YEARS
    if not limits.fits_int(year):
        return INVALID_DATE
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

    return CalendarDate(year, month, day)


def sdn_to_julian_string(
    sdn: int,
    limits: PlatformLimits = DEFAULT_PLATFORM_LIMITS,
) -> str:
    """SDN → "m/d/y" юлианской даты ("0/0/0" вне домена)."""
    return str(sdn_to_julian(sdn, limits))


def legacy_sdn_to_gregorian_string(sdn: int) -> str:
    """
    Legacy-форматтер SDN → григорианская дата "m/d/y".

    Исторический алгоритм с отсчётом от 1 марта 0 года (SDN 1721119)
    и floor-делением. Домен: 0 < sdn < 536838867, иначе "0/0/0".

    Examples:
        >>> legacy_sdn_to_gregorian_string(2458465)
        '12/12/2018'
        >>> legacy_sdn_to_gregorian_string(1)
        '11/25/-4714'
    """
    if sdn <= 0 or sdn >= LEGACY_SDN_LIMIT:
        return str(INVALID_DATE)

    julian = trunc_mod(sdn - LEGACY_MARCH_EPOCH_SDN, LEGACY_WRAP_MODULUS)

    calc1 = 4 * julian - 1
    year = calc1 // 146097
    julian = calc1 - 146097 * year
    day = julian // 4

    calc2 = 4 * day + 3
    julian = calc2 // 1461
    day = calc2 - 1461 * julian
    day = (day + 4) // 4

    calc3 = 5 * day - 3
    month = calc3 // 153
    day = calc3 - 153 * month
    day = (day + 5) // 5

    year = 100 * year + julian

    if month < 10:
        month += 3
    else:
        month -= 9
        year += 1

    if year <= 0:
        year -= 1

    return f"{month}/{day}/{year}"


# =============================================================================
# SDN CONVERTIBLE
# =============================================================================


class JulianCalendar:
    """Пролептический юлианский календарь (SdnConvertible)."""

    calendar_id = CalendarId.JULIAN

    def __init__(self, limits: PlatformLimits | None = None):
        self.limits = limits or DEFAULT_PLATFORM_LIMITS

    def to_sdn(self, year: int, month: int, day: int) -> int:
        return julian_to_sdn(year, month, day, self.limits)

    def from_sdn(self, sdn: int) -> CalendarDate:
        return sdn_to_julian(sdn, self.limits)
