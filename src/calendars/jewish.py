"""
Jewish — еврейский лунно-солнечный календарь ⇄ SDN

Базовая единица времени — halakim (1/1080 часа).
- Лунный месяц: 29 дней 13753 halakim
- Метонов цикл: 19 лет, из них 7 високосных (13 месяцев) на позициях
  2, 5, 7, 10, 13, 16, 18 (0-indexed)
- Молад (новолуние) Тишрея определяет начало года

Начало года (1 Тишрея) получается из молада применением dehiyyot:
- Правило 2: молад в полдень или позже → +1 день
- Правило 3: обычный год, вторник, молад >= 9h 204p → +1 день
- Правило 4: после високосного года, понедельник, молад >= 15h 589p → +1 день
- Правило 1 (последним, может добавиться к предыдущим): среда, пятница
  или воскресенье → +1 день

Арифметика молада выполняется нативными целыми Python (divmod):
произведения halakim не ограничены разрядностью.

Нумерация месяцев: 1 Tishri, 2 Heshvan, 3 Kislev, 4 Tevet, 5 Shevat,
6 Adar I, 7 Adar / Adar II, 8 Nisan, ..., 13 Elul.
"""

from typing import Final, NamedTuple

from src.calendars.hebrew_numerals import to_hebrew_numeral
from src.core.domain.calendar import (
    INVALID_DATE,
    CalendarArgumentError,
    CalendarDate,
    CalendarId,
)
from src.core.domain.metadata import JEWISH_MONTH_NAMES, JEWISH_MONTH_NAMES_LEAP
from src.core.domain.modes import HebrewNumeralFlag

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

HALAKIM_PER_HOUR: Final[int] = 1080
HALAKIM_PER_DAY: Final[int] = 25920
HALAKIM_PER_LUNAR_CYCLE: Final[int] = 29 * HALAKIM_PER_DAY + 13753
HALAKIM_PER_METONIC_CYCLE: Final[int] = HALAKIM_PER_LUNAR_CYCLE * (12 * 19 + 7)

JEWISH_SDN_OFFSET: Final[int] = 347997
JEWISH_SDN_MAX: Final[int] = 324542846
NEW_MOON_OF_CREATION: Final[int] = 31524

SUNDAY: Final[int] = 0
MONDAY: Final[int] = 1
TUESDAY: Final[int] = 2
WEDNESDAY: Final[int] = 3
THURSDAY: Final[int] = 4
FRIDAY: Final[int] = 5
SATURDAY: Final[int] = 6

NOON: Final[int] = 18 * HALAKIM_PER_HOUR
AM3_11_20: Final[int] = 9 * HALAKIM_PER_HOUR + 204
AM9_32_43: Final[int] = 15 * HALAKIM_PER_HOUR + 589

# Число лунных месяцев от начала метонова цикла до Тишрея каждого года
YEAR_OFFSET: Final[tuple[int, ...]] = (
    0, 12, 24, 37, 49, 61, 74, 86, 99, 111, 123,
    136, 148, 160, 173, 185, 197, 210, 222,
)

MONTHS_PER_YEAR: Final[tuple[int, ...]] = (
    12, 12, 13, 12, 12, 13, 12, 13, 12, 12, 13, 12, 12, 13, 12, 12, 13, 12, 13,
)

LEAP_YEAR_POSITIONS: Final[frozenset[int]] = frozenset({2, 5, 7, 10, 13, 16, 18})
AFTER_LEAP_YEAR_POSITIONS: Final[frozenset[int]] = frozenset({0, 3, 6, 8, 11, 14, 17})

POSTPONED_WEEKDAYS: Final[frozenset[int]] = frozenset({WEDNESDAY, FRIDAY, SUNDAY})

# Смещения от 1 Тишрея следующего года (дней до начала месяца + 1)
ADAR_II_ONWARD_OFFSETS: Final[dict[int, int]] = {
    7: 207, 8: 178, 9: 148, 10: 119, 11: 89, 12: 60, 13: 30,
}
TEVET_TO_ADAR_I_OFFSETS: Final[dict[int, int]] = {4: 237, 5: 208, 6: 178}

# Последние 6 месяцев года: (месяц, смещение до следующего 1 Тишрея)
LAST_MONTHS_OFFSETS: Final[tuple[tuple[int, int], ...]] = (
    (13, 30), (12, 60), (11, 89), (10, 119), (9, 148),
)

COMPLETE_YEAR_LENGTHS: Final[frozenset[int]] = frozenset({355, 385})

HEBREW_MONTH_NAMES: Final[tuple[str, ...]] = (
    "", "תשרי", "חשון", "כסלו", "טבת", "שבט", "",
    "אדר", "ניסן", "אייר", "סיון", "תמוז", "אב", "אלול",
)

HEBREW_MONTH_NAMES_LEAP: Final[tuple[str, ...]] = (
    "", "תשרי", "חשון", "כסלו", "טבת", "שבט", "אדר א'",
    "אדר ב'", "ניסן", "אייר", "סיון", "תמוז", "אב", "אלול",
)

HEBREW_YEAR_MIN: Final[int] = 1
HEBREW_YEAR_MAX: Final[int] = 9999


# =============================================================================
# MODELS
# =============================================================================


class Molad(NamedTuple):
    """Момент молада: день от сотворения и halakim внутри дня."""

    day: int
    halakim: int


class YearStart(NamedTuple):
    """Начало еврейского года."""

    metonic_cycle: int
    metonic_year: int
    molad: Molad
    tishri1: int


# =============================================================================
# МОЛАД И DEHIYYOT
# =============================================================================


def _advance(molad: Molad, halakim: int) -> Molad:
    day, rest = divmod(molad.halakim + halakim, HALAKIM_PER_DAY)
    return Molad(molad.day + day, rest)


def molad_of_metonic_cycle(metonic_cycle: int) -> Molad:
    """
    Молад Тишрея первого года метонова цикла.

    Examples:
        >>> molad_of_metonic_cycle(0)
        Molad(day=1, halakim=5604)
    """
    day, halakim = divmod(
        NEW_MOON_OF_CREATION + metonic_cycle * HALAKIM_PER_METONIC_CYCLE,
        HALAKIM_PER_DAY,
    )
    return Molad(day, halakim)


def tishri1(metonic_year: int, molad: Molad) -> int:
    """
    День 1 Тишрея (от сотворения) по моладу и позиции в цикле.

    Применяет dehiyyot: правила 2, 3, 4, затем правило 1.
    """
    day = molad.day
    dow = day % 7
    leap_year = metonic_year in LEAP_YEAR_POSITIONS
    last_was_leap_year = metonic_year in AFTER_LEAP_YEAR_POSITIONS

    if (
        molad.halakim >= NOON
        or (not leap_year and dow == TUESDAY and molad.halakim >= AM3_11_20)
        or (last_was_leap_year and dow == MONDAY and molad.halakim >= AM9_32_43)
    ):
        day += 1
        dow = (dow + 1) % 7

    # Правило 1 применяется последним
    if dow in POSTPONED_WEEKDAYS:
        day += 1

    return day


def find_start_of_year(year: int) -> YearStart:
    """
    Начало еврейского года: метонов цикл, позиция, молад и 1 Тишрея.

    Args:
        year: Еврейский год (>= 1)
    """
    metonic_cycle, metonic_year = divmod(year - 1, 19)
    molad = _advance(
        molad_of_metonic_cycle(metonic_cycle),
        HALAKIM_PER_LUNAR_CYCLE * YEAR_OFFSET[metonic_year],
    )
    return YearStart(metonic_cycle, metonic_year, molad, tishri1(metonic_year, molad))


def _find_tishri_molad(input_day: int) -> tuple[int, int, Molad]:
    """
    Молад Тишрея, "ближайший" к input_day.

    Для первых двух месяцев года — молад начала года, для последних
    месяцев — молад конца года; для третьего месяца нужны оба.

    Returns:
        (metonic_cycle, metonic_year, molad)
    """
    # Оценка цикла может быть занижена (6939.6896 дней в цикле, не 6940),
    # но никогда не завышена; цикл ниже корректирует её
    metonic_cycle = (input_day + 310) // 6940
    molad = molad_of_metonic_cycle(metonic_cycle)

    while molad.day < input_day - 6940 + 310:
        metonic_cycle += 1
        molad = _advance(molad, HALAKIM_PER_METONIC_CYCLE)

    metonic_year = 0
    while metonic_year < 18:
        if molad.day > input_day - 74:
            break
        molad = _advance(molad, HALAKIM_PER_LUNAR_CYCLE * MONTHS_PER_YEAR[metonic_year])
        metonic_year += 1

    return metonic_cycle, metonic_year, molad


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def jewish_to_sdn(year: int, month: int, day: int) -> int:
    """
    Конверсия еврейской даты в SDN.

    Args:
        year: Еврейский год (>= 1)
        month: Месяц 1..13 (6 = Adar I, 7 = Adar / Adar II)
        day: День 1..30

    Returns:
        SDN > 0, либо 0 для невалидного входа или SDN вне поддерживаемого
        диапазона

    Examples:
        >>> jewish_to_sdn(1, 1, 1)
        347998
        >>> jewish_to_sdn(5779, 4, 4)
        2458465
    """
    if year <= 0 or day <= 0 or day > 30:
        return 0

    if month in (1, 2):
        # Tishri, Heshvan: длина года не нужна
        start = find_start_of_year(year)
        sdn = start.tishri1 + day + (-1 if month == 1 else 29)

    elif month == 3:
        # Kislev: длина Heshvan зависит от длины года
        start = find_start_of_year(year)
        next_molad = _advance(
            start.molad, HALAKIM_PER_LUNAR_CYCLE * MONTHS_PER_YEAR[start.metonic_year]
        )
        tishri1_after = tishri1((start.metonic_year + 1) % 19, next_molad)
        year_length = tishri1_after - start.tishri1
        sdn = start.tishri1 + day + (59 if year_length in COMPLETE_YEAR_LENGTHS else 58)

    elif month in TEVET_TO_ADAR_I_OFFSETS:
        # Tevet, Shevat, Adar I: от конца года через блок Adar I + II
        tishri1_after = find_start_of_year(year + 1).tishri1
        length_of_adar_i_and_ii = 29 if MONTHS_PER_YEAR[(year - 1) % 19] == 12 else 59
        sdn = (
            tishri1_after
            + day
            - length_of_adar_i_and_ii
            - TEVET_TO_ADAR_I_OFFSETS[month]
        )

    elif month in ADAR_II_ONWARD_OFFSETS:
        tishri1_after = find_start_of_year(year + 1).tishri1
        sdn = tishri1_after + day - ADAR_II_ONWARD_OFFSETS[month]

    else:
        return 0

    sdn += JEWISH_SDN_OFFSET
    if sdn > JEWISH_SDN_MAX:
        return 0
    return sdn


def sdn_to_jewish(sdn: int) -> CalendarDate:
    """
    Конверсия SDN в еврейскую дату.

    Returns:
        CalendarDate, либо INVALID_DATE для sdn <= 347997 (до 1 Тишрея 1 года)
        и sdn > JEWISH_SDN_MAX

    Examples:
        >>> sdn_to_jewish(347998)
        CalendarDate(year=1, month=1, day=1)
    """
    if sdn <= JEWISH_SDN_OFFSET or sdn > JEWISH_SDN_MAX:
        return INVALID_DATE

    input_day = sdn - JEWISH_SDN_OFFSET

    metonic_cycle, metonic_year, molad = _find_tishri_molad(input_day)
    tishri1_day = tishri1(metonic_year, molad)

    if input_day >= tishri1_day:
        # День на или после начала года
        year = metonic_cycle * 19 + metonic_year + 1

        if input_day < tishri1_day + 59:
            if input_day < tishri1_day + 30:
                return CalendarDate(year, 1, input_day - tishri1_day + 1)
            return CalendarDate(year, 2, input_day - tishri1_day - 29)

        next_molad = _advance(
            molad, HALAKIM_PER_LUNAR_CYCLE * MONTHS_PER_YEAR[metonic_year]
        )
        tishri1_after = tishri1((metonic_year + 1) % 19, next_molad)

    else:
        # День до начала следующего года
        year = metonic_cycle * 19 + metonic_year

        if input_day >= tishri1_day - 177:
            for month, offset in LAST_MONTHS_OFFSETS:
                if input_day > tishri1_day - offset:
                    return CalendarDate(year, month, input_day - tishri1_day + offset)
            return CalendarDate(year, 8, input_day - tishri1_day + 178)

        month = 7
        day = input_day - tishri1_day + 207
        if day > 0:
            return CalendarDate(year, month, day)

        if MONTHS_PER_YEAR[(year - 1) % 19] == 13:
            month -= 1
            day += 30
            if day > 0:
                return CalendarDate(year, month, day)
            month -= 1
        else:
            month -= 2
        day += 30

        if day > 0:
            return CalendarDate(year, month, day)
        month -= 1
        day += 29
        if day > 0:
            return CalendarDate(year, month, day)

        # Heshvan / Kislev: нужна длина года
        tishri1_after = tishri1_day
        metonic_cycle, metonic_year, molad = _find_tishri_molad(molad.day - 365)
        tishri1_day = tishri1(metonic_year, molad)

    year_length = tishri1_after - tishri1_day
    day = input_day - tishri1_day - 29

    heshvan_length = 30 if year_length in COMPLETE_YEAR_LENGTHS else 29
    if day <= heshvan_length:
        return CalendarDate(year, 2, day)
    return CalendarDate(year, 3, day - heshvan_length)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def is_leap_year(year: int) -> bool:
    """Високосный (13-месячный) год: (year * 7 + 1) % 19 < 7."""
    return (year * 7 + 1) % 19 < 7


def jewish_month_names(year: int) -> tuple[str, ...]:
    """Английские названия месяцев для года (обычный или високосный)."""
    return JEWISH_MONTH_NAMES_LEAP if is_leap_year(year) else JEWISH_MONTH_NAMES


def hebrew_month_names(year: int) -> tuple[str, ...]:
    """Еврейские названия месяцев для года (обычный или високосный)."""
    return HEBREW_MONTH_NAMES_LEAP if is_leap_year(year) else HEBREW_MONTH_NAMES


def sdn_to_jewish_string(
    sdn: int,
    hebrew: bool = False,
    flags: int = HebrewNumeralFlag.NONE,
) -> str:
    """
    SDN → еврейская дата строкой.

    Args:
        sdn: Serial Day Number
        hebrew: False → "m/d/y"; True → "<день> <месяц> <год>" еврейскими буквами
        flags: HebrewNumeralFlag для числительных дня и года

    Raises:
        CalendarArgumentError: Если hebrew=True и год вне 1..9999

    Examples:
        >>> sdn_to_jewish_string(2458465)
        '4/4/5779'
    """
    date = sdn_to_jewish(sdn)

    if not hebrew:
        return str(date)

    if date.year < HEBREW_YEAR_MIN or date.year > HEBREW_YEAR_MAX:
        raise CalendarArgumentError("Year out of range (0-9999)")

    return " ".join(
        (
            to_hebrew_numeral(date.day, flags),
            hebrew_month_names(date.year)[date.month],
            to_hebrew_numeral(date.year, flags),
        )
    )


# =============================================================================
# SDN CONVERTIBLE
# =============================================================================


class JewishCalendar:
    """Еврейский календарь (SdnConvertible)."""

    calendar_id = CalendarId.JEWISH

    def to_sdn(self, year: int, month: int, day: int) -> int:
        return jewish_to_sdn(year, month, day)

    def from_sdn(self, sdn: int) -> CalendarDate:
        return sdn_to_jewish(sdn)
