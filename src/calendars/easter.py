"""
Easter — Paschal computus

Алгоритм (Kershaw / Bradley):
1. Golden Number = year % 19 + 1
2. Выбор базиса (Julian vs Gregorian) по EasterMode
3. Dominical Number (якорь дня недели) и некорректированное
   пасхальное полнолуние; для Gregorian — солнечная и лунная поправки
   от столетий с 1600/1400
4. Коррекция: полнолуние 29, или 28 при Golden Number > 11 → -1
5. Пасха = полнолуние + ((4 - полнолуние - dominical) mod 7) + 1
   дней после 21 марта

Деления в поправках выполняются с усечением к нулю (trunc_div),
остатки нормализуются в неотрицательные.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. easter_days не ограничен по году
2. easter_date (абсолютная дата) допускает только 1970..2037
"""

import logging
from datetime import date
from typing import Final

from src.calendars.gregorian import gregorian_to_sdn
from src.core.domain.calendar import (
    SECONDS_PER_DAY,
    UNIX_EPOCH_SDN,
    CalendarArgumentError,
)
from src.core.domain.modes import EasterMode
from src.core.math.integer_arithmetic import trunc_div, trunc_mod

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MARCH: Final[int] = 3
APRIL: Final[int] = 4

EASTER_DATE_MIN_YEAR: Final[int] = 1970
EASTER_DATE_MAX_YEAR: Final[int] = 2037

ROMAN_REFORM_LAST_JULIAN_YEAR: Final[int] = 1582
BRITISH_REFORM_LAST_JULIAN_YEAR: Final[int] = 1752


# =============================================================================
# COMPUTUS
# =============================================================================


def current_year() -> int:
    """Текущий год по wall clock (читается один раз на вызов)."""
    year = date.today().year
    logger.debug("Easter year defaulted to current year %d", year)
    return year


def uses_julian_basis(year: int, mode: int = EasterMode.DEFAULT) -> bool:
    """
    Выбор календарного базиса computus.

    - ALWAYS_JULIAN → Julian
    - ALWAYS_GREGORIAN → Gregorian
    - ROMAN → Julian для year <= 1582
    - DEFAULT → Julian для year <= 1752

    Raises:
        CalendarArgumentError: Если mode не входит в EasterMode
    """
    try:
        mode = EasterMode(mode)
    except ValueError:
        raise CalendarArgumentError(
            f"mode must be a valid Easter calculation method, got {mode}"
        ) from None

    if mode == EasterMode.ALWAYS_JULIAN:
        return True
    if mode == EasterMode.ALWAYS_GREGORIAN:
        return False
    if mode == EasterMode.ROMAN:
        return year <= ROMAN_REFORM_LAST_JULIAN_YEAR
    return year <= BRITISH_REFORM_LAST_JULIAN_YEAR


def cal_easter(
    year: int,
    wants_absolute_date: bool,
    mode: int = EasterMode.DEFAULT,
) -> int:
    """
    Число дней после 21 марта, на которое приходится Пасха.

    Args:
        year: Год
        wants_absolute_date: True, если результат будет преобразован
            в абсолютную дату (ограничение 1970..2037)
        mode: EasterMode

    Returns:
        Смещение Пасхи от 21 марта (дни)

    Raises:
        CalendarArgumentError: Если wants_absolute_date и year вне 1970..2037,
            либо mode невалиден
    """
    if wants_absolute_date and (
        year < EASTER_DATE_MIN_YEAR or year > EASTER_DATE_MAX_YEAR
    ):
        logger.warning("Easter absolute date requested for out-of-range year %d", year)
        raise CalendarArgumentError(
            f"This function is only valid for years between "
            f"{EASTER_DATE_MIN_YEAR} and {EASTER_DATE_MAX_YEAR} inclusive"
        )

    golden = trunc_mod(year, 19) + 1

    if uses_julian_basis(year, mode):
        dominical = (year + trunc_div(year, 4) + 5) % 7
        paschal_full_moon = (3 - 11 * golden - 7) % 30
    else:
        dominical = (
            year + trunc_div(year, 4) - trunc_div(year, 100) + trunc_div(year, 400)
        ) % 7

        solar = trunc_div(year - 1600, 100) - trunc_div(year - 1600, 400)
        lunar = trunc_div(trunc_div(year - 1400, 100) * 8, 25)

        paschal_full_moon = (3 - 11 * golden + solar - lunar) % 30

    # Корректированное пасхальное полнолуние
    if paschal_full_moon == 29 or (paschal_full_moon == 28 and golden > 11):
        paschal_full_moon -= 1

    return paschal_full_moon + (4 - paschal_full_moon - dominical) % 7 + 1


def easter_days(year: int | None = None, mode: int = EasterMode.DEFAULT) -> int:
    """
    Смещение Пасхи от 21 марта.

    Args:
        year: Год (default: текущий год)
        mode: EasterMode

    Examples:
        >>> easter_days(2000)
        33
        >>> easter_days(2000, EasterMode.ALWAYS_JULIAN)
        27
    """
    if year is None:
        year = current_year()
    return cal_easter(year, False, mode)


def offset_to_month_day(offset: int) -> tuple[int, int]:
    """Смещение от 21 марта → (month, day)."""
    if offset < 11:
        return MARCH, offset + 21
    return APRIL, offset - 10


def easter_month_day(year: int, mode: int = EasterMode.DEFAULT) -> tuple[int, int]:
    """
    Месяц и день Пасхи (без ограничения по году).

    Examples:
        >>> easter_month_day(2024)
        (3, 31)
    """
    return offset_to_month_day(cal_easter(year, False, mode))


def easter_date(year: int | None = None, mode: int = EasterMode.DEFAULT) -> int:
    """
    Unix timestamp полуночи (UTC) дня Пасхи.

    Месяц/день computus интерпретируются как григорианская дата
    независимо от базиса: при юлианском базисе результат не пересчитывается
    из юлианского календаря, поэтому easter_date(2000, ALWAYS_JULIAN) на 6 дней
    раньше easter_date(2000), а не на календарный дрейф позже.

    Raises:
        CalendarArgumentError: Если year вне 1970..2037

    Examples:
        >>> easter_date(2000)
        956448000
    """
    if year is None:
        year = current_year()

    month, day = offset_to_month_day(cal_easter(year, True, mode))
    return (gregorian_to_sdn(year, month, day) - UNIX_EPOCH_SDN) * SECONDS_PER_DAY
