"""CalendarFacade — диспетчеризация по идентификатору календаря.

Фасад связывает календарные модули фиксированной таблицей
CalendarId → SdnConvertible и добавляет календарно-независимые операции:
- to_sdn / from_sdn (полная разбивка даты)
- days_in_month
- day_of_week, month_name
- sdn_to_unix_time / unix_time_to_sdn
- metadata (cal_info)

Каналы ошибок:
- to_sdn никогда не бросает: 0 = невалидная дата
- Нарушения контракта (неизвестный календарь, лимиты платформы,
  Unix-диапазон) → CalendarArgumentError

Особый случай (bug-compatible): from_sdn для Jewish с year <= 0 возвращает
weekday=None и пустые названия вместо реального дня недели SDN.
"""

import logging
from typing import Final

from src.calendars.base import SdnConvertible
from src.calendars.french import FrenchRepublicanCalendar
from src.calendars.gregorian import GregorianCalendar
from src.calendars.jewish import JewishCalendar, jewish_month_names
from src.calendars.julian import JulianCalendar
from src.core.domain.calendar import (
    CalendarArgumentError,
    CalendarDate,
    CalendarId,
    coerce_calendar_id,
)
from src.core.domain.metadata import (
    CALENDAR_METADATA,
    DAY_NAMES_LONG,
    DAY_NAMES_SHORT,
    FRENCH_MONTH_NAMES,
    MONTH_NAMES_LONG,
    MONTH_NAMES_SHORT,
    CalendarMetadata,
    DateBreakdown,
)
from src.core.domain.modes import DayOfWeekMode, MonthNameMode
from src.core.math.integer_arithmetic import (
    DEFAULT_PLATFORM_LIMITS,
    PlatformLimits,
    validate_in_range,
)
from src.facade.unix_time import sdn_to_unix_time, unix_time_to_sdn

logger = logging.getLogger(__name__)

# (short, long) таблицы названий месяцев; Jewish зависит от года
MONTH_NAME_TABLES: Final[dict[CalendarId, tuple[tuple[str, ...], tuple[str, ...]]]] = {
    CalendarId.GREGORIAN: (MONTH_NAMES_SHORT, MONTH_NAMES_LONG),
    CalendarId.JULIAN: (MONTH_NAMES_SHORT, MONTH_NAMES_LONG),
    CalendarId.FRENCH: (FRENCH_MONTH_NAMES, FRENCH_MONTH_NAMES),
}

# MonthNameMode → (календарь, использовать длинные названия)
MONTH_NAME_MODES: Final[dict[MonthNameMode, tuple[CalendarId, bool]]] = {
    MonthNameMode.GREGORIAN_SHORT: (CalendarId.GREGORIAN, False),
    MonthNameMode.GREGORIAN_LONG: (CalendarId.GREGORIAN, True),
    MonthNameMode.JULIAN_SHORT: (CalendarId.JULIAN, False),
    MonthNameMode.JULIAN_LONG: (CalendarId.JULIAN, True),
    MonthNameMode.JEWISH: (CalendarId.JEWISH, True),
    MonthNameMode.FRENCH: (CalendarId.FRENCH, True),
}

PROBE_MAX_DAY: Final[int] = 32
ALL_CALENDARS: Final[int] = -1


class CalendarFacade:
    """Календарно-независимые операции поверх SDN-конверсий.

    Stateless: лимиты платформы задаются один раз в конструкторе,
    таблица календарей неизменна.
    """

    def __init__(self, limits: PlatformLimits | None = None):
        """
        Args:
            limits: Платформенные лимиты int/long (default: wide 64-bit)
        """
        self.limits = limits or DEFAULT_PLATFORM_LIMITS
        self._calendars: dict[CalendarId, SdnConvertible] = {
            CalendarId.GREGORIAN: GregorianCalendar(self.limits),
            CalendarId.JULIAN: JulianCalendar(self.limits),
            CalendarId.JEWISH: JewishCalendar(),
            CalendarId.FRENCH: FrenchRepublicanCalendar(),
        }

    def calendar(self, calendar_id: int) -> SdnConvertible:
        """Календарный модуль по идентификатору.

        Raises:
            CalendarArgumentError: Если идентификатор неизвестен
        """
        try:
            return self._calendars[coerce_calendar_id(calendar_id)]
        except CalendarArgumentError:
            logger.warning("Rejected unknown calendar id %r", calendar_id)
            raise

    # -------------------------------------------------------------------------
    # SDN конверсии
    # -------------------------------------------------------------------------

    def to_sdn(self, calendar_id: int, month: int, day: int, year: int) -> int:
        """Дата календаря → SDN (0 для невалидной даты)."""
        calendar = self.calendar(calendar_id)
        sdn = calendar.to_sdn(year, month, day)
        logger.debug(
            "to_sdn %s %d/%d/%d -> %d",
            calendar.calendar_id.name, month, day, year, sdn,
        )
        return sdn

    def from_sdn(self, sdn: int, calendar_id: int) -> DateBreakdown:
        """
        Полная разбивка SDN: дата, день недели, названия месяца.

        Returns:
            DateBreakdown; для Jewish с year <= 0 — weekday=None и пустые названия
        """
        calendar = self.calendar(calendar_id)
        date = calendar.from_sdn(sdn)
        is_jewish = calendar.calendar_id == CalendarId.JEWISH

        if not is_jewish or date.year > 0:
            weekday: int | None = self.day_of_week(sdn)
            weekday_abbrev = DAY_NAMES_SHORT[weekday]
            weekday_name = DAY_NAMES_LONG[weekday]
        else:
            weekday = None
            weekday_abbrev = ""
            weekday_name = ""

        if is_jewish:
            month_name = jewish_month_names(date.year)[date.month] if date.year > 0 else ""
            month_abbrev = month_name
        else:
            short_names, long_names = MONTH_NAME_TABLES[calendar.calendar_id]
            month_abbrev = short_names[date.month]
            month_name = long_names[date.month]

        return DateBreakdown(
            date=str(date),
            month=date.month,
            day=date.day,
            year=date.year,
            weekday=weekday,
            weekday_abbrev=weekday_abbrev,
            weekday_name=weekday_name,
            month_abbrev=month_abbrev,
            month_name=month_name,
        )

    # -------------------------------------------------------------------------
    # Производные операции
    # -------------------------------------------------------------------------

    def days_in_month(self, calendar_id: int, month: int, year: int) -> int:
        """
        Число дней в месяце.

        Разность SDN первого дня месяца и первого дня следующего месяца
        (с переходом на следующий год; после 1 BCE идёт 1 CE). Если
        следующий месяц не разрешим (конец French календаря), выполняется
        линейный перебор дней 1..32.

        Raises:
            CalendarArgumentError: Неизвестный календарь, month/year вне лимитов
                платформы, или первый день месяца невалиден
        """
        calendar = self.calendar(calendar_id)

        validate_in_range(
            month, "month", 1, self.limits.int_max - 1, CalendarArgumentError
        )
        if year > self.limits.int_max - 1:
            logger.warning("Rejected year %d in days_in_month", year)
            raise CalendarArgumentError(f"year must be less than {self.limits.int_max}")
        validate_in_range(year, "year", self.limits.int_min, None, CalendarArgumentError)

        sdn_start = calendar.to_sdn(year, month, 1)
        if sdn_start == 0:
            raise CalendarArgumentError("Invalid date")

        sdn_next = calendar.to_sdn(year, month + 1, 1)
        if sdn_next == 0:
            next_year = 1 if year == -1 else year + 1
            sdn_next = calendar.to_sdn(next_year, 1, 1)

        if sdn_next == 0:
            return self._probe_last_day(calendar, year, month)

        return sdn_next - sdn_start

    @staticmethod
    def _probe_last_day(calendar: SdnConvertible, year: int, month: int) -> int:
        last_day = 0
        for day in range(1, PROBE_MAX_DAY + 1):
            if calendar.to_sdn(year, month, day) <= 0:
                break
            last_day = day
        return last_day

    def day_of_week(self, sdn: int, mode: int = DayOfWeekMode.DAY_NUMBER) -> int | str:
        """
        День недели SDN: 0 = воскресенье.

        Args:
            sdn: Serial Day Number
            mode: DAY_NUMBER → int, LONG → "Monday", SHORT → "Mon"

        Examples:
            >>> CalendarFacade().day_of_week(2440588)
            4
        """
        weekday = (sdn + 1) % 7

        if mode == DayOfWeekMode.LONG:
            return DAY_NAMES_LONG[weekday]
        if mode == DayOfWeekMode.SHORT:
            return DAY_NAMES_SHORT[weekday]
        return weekday

    def month_name(self, sdn: int, mode: int = MonthNameMode.GREGORIAN_SHORT) -> str:
        """
        Название месяца SDN в календаре, выбранном mode.

        Неизвестный mode трактуется как GREGORIAN_SHORT. Пустая строка
        для SDN вне домена календаря.
        """
        try:
            calendar_id, use_long = MONTH_NAME_MODES[MonthNameMode(mode)]
        except ValueError:
            calendar_id, use_long = MONTH_NAME_MODES[MonthNameMode.GREGORIAN_SHORT]

        date: CalendarDate = self._calendars[calendar_id].from_sdn(sdn)

        if calendar_id == CalendarId.JEWISH:
            if date.year <= 0:
                return ""
            return jewish_month_names(date.year)[date.month]

        short_names, long_names = MONTH_NAME_TABLES[calendar_id]
        return (long_names if use_long else short_names)[date.month]

    def sdn_to_unix_time(self, sdn: int) -> int:
        return sdn_to_unix_time(sdn, self.limits)

    def unix_time_to_sdn(self, timestamp: int | None = None) -> int:
        return unix_time_to_sdn(timestamp, self.limits)

    def metadata(
        self, calendar_id: int | None = None
    ) -> CalendarMetadata | list[CalendarMetadata]:
        """
        Статические записи о календарях.

        Args:
            calendar_id: Календарь; None (или -1) → список всех календарей
        """
        if calendar_id is None or calendar_id == ALL_CALENDARS:
            return [CALENDAR_METADATA[cal_id] for cal_id in CalendarId]
        return CALENDAR_METADATA[self.calendar(calendar_id).calendar_id]


# =============================================================================
# МОДУЛЬНЫЙ API (default facade)
# =============================================================================

_DEFAULT_FACADE: Final[CalendarFacade] = CalendarFacade()


def cal_to_sdn(calendar_id: int, month: int, day: int, year: int) -> int:
    return _DEFAULT_FACADE.to_sdn(calendar_id, month, day, year)


def cal_from_sdn(sdn: int, calendar_id: int) -> DateBreakdown:
    return _DEFAULT_FACADE.from_sdn(sdn, calendar_id)


def cal_days_in_month(calendar_id: int, month: int, year: int) -> int:
    return _DEFAULT_FACADE.days_in_month(calendar_id, month, year)


def sdn_day_of_week(sdn: int, mode: int = DayOfWeekMode.DAY_NUMBER) -> int | str:
    return _DEFAULT_FACADE.day_of_week(sdn, mode)


def sdn_month_name(sdn: int, mode: int = MonthNameMode.GREGORIAN_SHORT) -> str:
    return _DEFAULT_FACADE.month_name(sdn, mode)


def cal_info(calendar_id: int | None = None) -> CalendarMetadata | list[CalendarMetadata]:
    return _DEFAULT_FACADE.metadata(calendar_id)
