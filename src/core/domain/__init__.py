"""
Domain models and value objects.

Contains calendar identifiers, the date triple, option modes, name tables
and the exported metadata/breakdown records.
"""

from src.core.domain.calendar import (
    CALENDAR_COUNT,
    INVALID_DATE,
    SECONDS_PER_DAY,
    UNIX_EPOCH_SDN,
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
    JEWISH_MONTH_NAMES,
    JEWISH_MONTH_NAMES_LEAP,
    MONTH_NAMES_LONG,
    MONTH_NAMES_SHORT,
    CalendarMetadata,
    DateBreakdown,
)
from src.core.domain.modes import (
    DayOfWeekMode,
    EasterMode,
    HebrewNumeralFlag,
    MonthNameMode,
)

__all__ = [
    # Calendar module
    "CALENDAR_COUNT",
    "INVALID_DATE",
    "SECONDS_PER_DAY",
    "UNIX_EPOCH_SDN",
    "CalendarArgumentError",
    "CalendarDate",
    "CalendarId",
    "coerce_calendar_id",
    # Metadata module
    "CALENDAR_METADATA",
    "DAY_NAMES_LONG",
    "DAY_NAMES_SHORT",
    "FRENCH_MONTH_NAMES",
    "JEWISH_MONTH_NAMES",
    "JEWISH_MONTH_NAMES_LEAP",
    "MONTH_NAMES_LONG",
    "MONTH_NAMES_SHORT",
    "CalendarMetadata",
    "DateBreakdown",
    # Modes module
    "DayOfWeekMode",
    "EasterMode",
    "HebrewNumeralFlag",
    "MonthNameMode",
]
