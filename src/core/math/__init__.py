"""
Core math modules

Целочисленные примитивы календарной арифметики: платформенные лимиты,
деление с усечением к нулю, валидация диапазонов.
"""

from src.core.math.integer_arithmetic import (
    # Platform limits
    DEFAULT_PLATFORM_LIMITS,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    PlatformLimits,
    # Truncating division
    trunc_div,
    trunc_mod,
    # Validation
    validate_in_range,
)

__all__ = [
    # Integer Arithmetic: Platform limits
    "DEFAULT_PLATFORM_LIMITS",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "PlatformLimits",
    # Integer Arithmetic: Truncating division
    "trunc_div",
    "trunc_mod",
    # Integer Arithmetic: Validation
    "validate_in_range",
]
