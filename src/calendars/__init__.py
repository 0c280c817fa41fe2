"""
Calendar modules: conversion between calendar dates and serial day numbers.

- Gregorian (proleptic), Julian (proleptic)
- Jewish (molad arithmetic with postponement rules)
- French Republican (years 1..14)
- Easter computus
- Hebrew numerals
"""

from src.calendars.base import SdnConvertible
from src.calendars.easter import (
    EASTER_DATE_MAX_YEAR,
    EASTER_DATE_MIN_YEAR,
    easter_date,
    easter_days,
    easter_month_day,
)
from src.calendars.french import (
    FrenchRepublicanCalendar,
    french_to_sdn,
    sdn_to_french,
    sdn_to_french_string,
)
from src.calendars.gregorian import (
    GregorianCalendar,
    gregorian_to_sdn,
    sdn_to_gregorian,
    sdn_to_gregorian_string,
)
from src.calendars.hebrew_numerals import HEBREW_LEGACY_ENCODING, to_hebrew_numeral
from src.calendars.jewish import (
    JewishCalendar,
    is_leap_year,
    jewish_to_sdn,
    sdn_to_jewish,
    sdn_to_jewish_string,
)
from src.calendars.julian import (
    JulianCalendar,
    julian_to_sdn,
    legacy_sdn_to_gregorian_string,
    sdn_to_julian,
    sdn_to_julian_string,
)

__all__ = [
    # Contract
    "SdnConvertible",
    # Gregorian
    "GregorianCalendar",
    "gregorian_to_sdn",
    "sdn_to_gregorian",
    "sdn_to_gregorian_string",
    # Julian
    "JulianCalendar",
    "julian_to_sdn",
    "sdn_to_julian",
    "sdn_to_julian_string",
    "legacy_sdn_to_gregorian_string",
    # Jewish
    "JewishCalendar",
    "is_leap_year",
    "jewish_to_sdn",
    "sdn_to_jewish",
    "sdn_to_jewish_string",
    # French
    "FrenchRepublicanCalendar",
    "french_to_sdn",
    "sdn_to_french",
    "sdn_to_french_string",
    # Easter
    "EASTER_DATE_MAX_YEAR",
    "EASTER_DATE_MIN_YEAR",
    "easter_date",
    "easter_days",
    "easter_month_day",
    # Hebrew numerals
    "HEBREW_LEGACY_ENCODING",
    "to_hebrew_numeral",
]
