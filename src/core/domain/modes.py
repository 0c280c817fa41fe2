"""Modes — режимы Easter computus, дня недели, названий месяцев и
флаги форматирования еврейских числительных.

Числовые значения совместимы с legacy-константами CAL_*.
"""

from enum import IntEnum, IntFlag


class EasterMode(IntEnum):
    """Правило выбора календарного базиса (Julian vs Gregorian) для computus.

    - DEFAULT: Julian для year <= 1752 (британская реформа)
    - ROMAN: Julian для year <= 1582 (папская реформа)
    - ALWAYS_GREGORIAN / ALWAYS_JULIAN: фиксированный базис
    """

    DEFAULT = 0
    ROMAN = 1
    ALWAYS_GREGORIAN = 2
    ALWAYS_JULIAN = 3


class DayOfWeekMode(IntEnum):
    """Формат результата day_of_week."""

    DAY_NUMBER = 0
    LONG = 1
    SHORT = 2


class MonthNameMode(IntEnum):
    """Таблица названий месяцев для month_name."""

    GREGORIAN_SHORT = 0
    GREGORIAN_LONG = 1
    JULIAN_SHORT = 2
    JULIAN_LONG = 3
    JEWISH = 4
    FRENCH = 5


class HebrewNumeralFlag(IntFlag):
    """Флаги рендеринга еврейских числительных."""

    NONE = 0
    ADD_ALAFIM_GERESH = 2
    ADD_ALAFIM = 4
    ADD_GERESHAYIM = 8
