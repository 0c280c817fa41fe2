"""
Metadata — статические таблицы названий и экспортируемые записи

- Таблицы названий месяцев и дней недели (индекс 0 — пустая строка,
  чтобы sentinel-дата 0/0/0 давала пустое название)
- CalendarMetadata: read-only запись о календаре (cal_info)
- DateBreakdown: полная разбивка SDN в дату календаря (cal_from_jd)

Immutable Pydantic модели. Legacy-ключи (calname, dow, monthname, ...)
доступны как aliases через to_record().
"""

from typing import Any, Final

from pydantic import BaseModel, Field

from src.core.domain.calendar import CalendarId


# =============================================================================
# ТАБЛИЦЫ НАЗВАНИЙ
# =============================================================================

DAY_NAMES_LONG: Final[tuple[str, ...]] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)

DAY_NAMES_SHORT: Final[tuple[str, ...]] = (
    "Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat",
)

MONTH_NAMES_LONG: Final[tuple[str, ...]] = (
    "", "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MONTH_NAMES_SHORT: Final[tuple[str, ...]] = (
    "", "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

# Обычный (12 месяцев) год: Adar I отсутствует
JEWISH_MONTH_NAMES: Final[tuple[str, ...]] = (
    "", "Tishri", "Heshvan", "Kislev", "Tevet", "Shevat", "",
    "Adar", "Nisan", "Iyyar", "Sivan", "Tammuz", "Av", "Elul",
)

# Високосный (13 месяцев) год
JEWISH_MONTH_NAMES_LEAP: Final[tuple[str, ...]] = (
    "", "Tishri", "Heshvan", "Kislev", "Tevet", "Shevat", "Adar I",
    "Adar II", "Nisan", "Iyyar", "Sivan", "Tammuz", "Av", "Elul",
)

FRENCH_MONTH_NAMES: Final[tuple[str, ...]] = (
    "", "Vendemiaire", "Brumaire", "Frimaire", "Nivose", "Pluviose", "Ventose",
    "Germinal", "Floreal", "Prairial", "Messidor", "Thermidor", "Fructidor", "Extra",
)


def _one_based(table: tuple[str, ...]) -> dict[int, str]:
    return {index: name for index, name in enumerate(table) if index > 0}


# =============================================================================
# MODELS
# =============================================================================


class CalendarMetadata(BaseModel):
    """Статическая запись о календаре.

    Создаётся один раз при импорте, никогда не мутируется.
    leap_months заполнен только для Jewish (таблица 13-месячного года).
    Для Jewish months/abbrev_months содержат таблицу обычного года
    (6 = "", 7 = "Adar"), а не "Adar I"/"Adar II" как в legacy cal_info.
    """

    display_name: str = Field(..., alias="calname", description="Отображаемое имя")
    symbol: str = Field(..., alias="calsymbol", description="Символьный идентификатор")
    max_days_in_month: int = Field(..., alias="maxdaysinmonth", gt=0, le=31)
    months: dict[int, str] = Field(..., description="Полные названия месяцев (1-based)")
    abbrev_months: dict[int, str] = Field(..., alias="abbrevmonths")
    leap_months: dict[int, str] | None = Field(None, alias="leapmonths")

    model_config = {"frozen": True, "populate_by_name": True}

    def to_record(self) -> dict[str, Any]:
        """Запись с legacy-ключами (calname, calsymbol, ...)."""
        return self.model_dump(by_alias=True, exclude_none=True)


class DateBreakdown(BaseModel):
    """Полная разбивка SDN в дату календаря.

    weekday равен None только в bug-compatible случае Jewish year <= 0.
    """

    date: str = Field(..., description="Дата в формате m/d/y")
    month: int = Field(..., ge=0)
    day: int = Field(..., ge=0)
    year: int
    weekday: int | None = Field(..., alias="dow", ge=0, le=6)
    weekday_abbrev: str = Field(..., alias="abbrevdayname")
    weekday_name: str = Field(..., alias="dayname")
    month_abbrev: str = Field(..., alias="abbrevmonth")
    month_name: str = Field(..., alias="monthname")

    model_config = {"frozen": True, "populate_by_name": True}

    def to_record(self) -> dict[str, Any]:
        """Запись с legacy-ключами (date, dow, dayname, monthname, ...)."""
        return self.model_dump(by_alias=True)


CALENDAR_METADATA: Final[dict[CalendarId, CalendarMetadata]] = {
    CalendarId.GREGORIAN: CalendarMetadata(
        display_name="Gregorian",
        symbol="CAL_GREGORIAN",
        max_days_in_month=31,
        months=_one_based(MONTH_NAMES_LONG),
        abbrev_months=_one_based(MONTH_NAMES_SHORT),
    ),
    CalendarId.JULIAN: CalendarMetadata(
        display_name="Julian",
        symbol="CAL_JULIAN",
        max_days_in_month=31,
        months=_one_based(MONTH_NAMES_LONG),
        abbrev_months=_one_based(MONTH_NAMES_SHORT),
    ),
    CalendarId.JEWISH: CalendarMetadata(
        display_name="Jewish",
        symbol="CAL_JEWISH",
        max_days_in_month=30,
        months=_one_based(JEWISH_MONTH_NAMES),
        abbrev_months=_one_based(JEWISH_MONTH_NAMES),
        leap_months=_one_based(JEWISH_MONTH_NAMES_LEAP),
    ),
    CalendarId.FRENCH: CalendarMetadata(
        display_name="French",
        symbol="CAL_FRENCH",
        max_days_in_month=30,
        months=_one_based(FRENCH_MONTH_NAMES),
        abbrev_months=_one_based(FRENCH_MONTH_NAMES),
    ),
}
