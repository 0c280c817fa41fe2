"""
Calendar — базовые типы календарного домена

- CalendarId: идентификатор календаря (числовые значения совместимы с legacy API)
- CalendarDate: неизменяемая тройка (year, month, day)
- INVALID_DATE: sentinel "0/0/0" для дат вне поддерживаемого домена
- CalendarArgumentError: отклонение входа (нарушение контракта вызывающим)

Семантика year зависит от календаря:
- Gregorian/Julian: астрономическая нумерация без года 0 (-1 = 1 BCE)
- Jewish/French: всегда положительный год от эпохи календаря
"""

from enum import IntEnum
from typing import Final, NamedTuple


# =============================================================================
# ENUMS
# =============================================================================


class CalendarId(IntEnum):
    """Идентификатор календаря."""

    GREGORIAN = 0
    JULIAN = 1
    JEWISH = 2
    FRENCH = 3


CALENDAR_COUNT: Final[int] = len(CalendarId)

# SDN 1 января 1970 (Unix epoch)
UNIX_EPOCH_SDN: Final[int] = 2440588
SECONDS_PER_DAY: Final[int] = 86400


# =============================================================================
# EXCEPTIONS
# =============================================================================


class CalendarArgumentError(ValueError):
    """
    Вход отклонён: нарушение контракта вызывающим кодом.

    Канал ошибок отделён от "silent zero": конверсии to_sdn никогда
    не бросают исключений, а возвращают 0. Это исключение бросается только
    проверками границ уровня фасада (неизвестный календарь, лимиты
    платформы, Unix-диапазон, диапазон еврейских числительных и т.д.).
    """

    pass


# =============================================================================
# CALENDAR DATE
# =============================================================================


class CalendarDate(NamedTuple):
    """Дата календаря (year, month, day)."""

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.month}/{self.day}/{self.year}"

    @property
    def is_valid(self) -> bool:
        """False для sentinel 0/0/0."""
        return self.month != 0


INVALID_DATE: Final[CalendarDate] = CalendarDate(0, 0, 0)


def coerce_calendar_id(calendar_id: int) -> CalendarId:
    """
    Преобразование числового идентификатора в CalendarId.

    Raises:
        CalendarArgumentError: Если идентификатор не входит в CalendarId
    """
    try:
        return CalendarId(calendar_id)
    except ValueError:
        raise CalendarArgumentError(
            f"calendar must be a valid calendar ID, got {calendar_id}"
        ) from None
