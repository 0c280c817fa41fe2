"""
Calendar facade: calendar-independent operations dispatched by CalendarId.
"""

from src.facade.calendar_facade import (
    CalendarFacade,
    cal_days_in_month,
    cal_from_sdn,
    cal_info,
    cal_to_sdn,
    sdn_day_of_week,
    sdn_month_name,
)
from src.facade.unix_time import max_unix_sdn, sdn_to_unix_time, unix_time_to_sdn

__all__ = [
    "CalendarFacade",
    "cal_days_in_month",
    "cal_from_sdn",
    "cal_info",
    "cal_to_sdn",
    "sdn_day_of_week",
    "sdn_month_name",
    "max_unix_sdn",
    "sdn_to_unix_time",
    "unix_time_to_sdn",
]
