"""
Тесты для Integer Arithmetic — платформенные лимиты и деление с усечением

Проверяемые инварианты:
1. trunc_div / trunc_mod повторяют семантику C (усечение к нулю)
2. trunc_div(a, b) * b + trunc_mod(a, b) == a
3. PlatformLimits: wide/narrow профили, валидация, immutability
4. validate_in_range: сообщения по каждому варианту границ
"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.domain.calendar import CalendarArgumentError
from src.core.math import (
    DEFAULT_PLATFORM_LIMITS,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    PlatformLimits,
    trunc_div,
    trunc_mod,
    validate_in_range,
)


# =============================================================================
# ТЕСТЫ: Деление с усечением к нулю
# =============================================================================


class TestTruncDiv:
    """Тесты trunc_div: знак частного и отличие от floor-деления."""

    @pytest.mark.parametrize(
        "numerator,denominator,expected",
        [
            (7, 2, 3),
            (-7, 2, -3),
            (7, -2, -3),
            (-7, -2, 3),
            (0, 5, 0),
            (6, 3, 2),
            (-6, 3, -2),
        ],
    )
    def test_truncates_toward_zero(self, numerator, denominator, expected):
        assert trunc_div(numerator, denominator) == expected

    def test_differs_from_floor_division_for_negatives(self):
        """-7 // 2 == -4 в Python, но -3 в C."""
        assert -7 // 2 == -4
        assert trunc_div(-7, 2) == -3

    def test_zero_denominator_raises(self):
        with pytest.raises(ZeroDivisionError):
            trunc_div(1, 0)


class TestTruncMod:
    """Тесты trunc_mod: знак остатка следует делимому."""

    @pytest.mark.parametrize(
        "numerator,denominator,expected",
        [
            (7, 3, 1),
            (-7, 3, -1),
            (7, -3, 1),
            (-7, -3, -1),
            (-19, 19, 0),
        ],
    )
    def test_sign_follows_numerator(self, numerator, denominator, expected):
        assert trunc_mod(numerator, denominator) == expected

    @pytest.mark.parametrize("numerator", [-1000, -101, -1, 0, 1, 99, 1000])
    @pytest.mark.parametrize("denominator", [-19, -7, 3, 100, 400])
    def test_division_identity(self, numerator, denominator):
        """trunc_div(a, b) * b + trunc_mod(a, b) == a."""
        quotient = trunc_div(numerator, denominator)
        assert quotient * denominator + trunc_mod(numerator, denominator) == numerator


# =============================================================================
# ТЕСТЫ: PlatformLimits
# =============================================================================


class TestPlatformLimits:
    """Тесты конфигурации платформенных лимитов."""

    def test_default_is_wide(self):
        assert DEFAULT_PLATFORM_LIMITS == PlatformLimits.wide()
        assert DEFAULT_PLATFORM_LIMITS.int_max == INT32_MAX
        assert DEFAULT_PLATFORM_LIMITS.int_min == INT32_MIN
        assert DEFAULT_PLATFORM_LIMITS.long_max == INT64_MAX
        assert DEFAULT_PLATFORM_LIMITS.long_min == INT64_MIN

    def test_narrow_has_32bit_long(self):
        narrow = PlatformLimits.narrow()
        assert narrow.long_max == INT32_MAX
        assert narrow.long_min == INT32_MIN
        assert narrow.int_max == INT32_MAX

    def test_fits_int_and_long(self):
        limits = PlatformLimits.wide()
        assert limits.fits_int(INT32_MAX)
        assert not limits.fits_int(INT32_MAX + 1)
        assert limits.fits_int(INT32_MIN)
        assert not limits.fits_int(INT32_MIN - 1)
        assert limits.fits_long(INT32_MAX + 1)
        assert not limits.fits_long(INT64_MAX + 1)

    def test_rejects_non_positive_limits(self):
        with pytest.raises(ValueError, match="Platform limits must be positive"):
            PlatformLimits(int_max=0)

    def test_rejects_long_narrower_than_int(self):
        with pytest.raises(ValueError, match="must be >= int_max"):
            PlatformLimits(int_max=1000, long_max=10)

    def test_frozen(self):
        limits = PlatformLimits()
        with pytest.raises(FrozenInstanceError):
            limits.int_max = 5


# =============================================================================
# ТЕСТЫ: validate_in_range
# =============================================================================


class TestValidateInRange:
    """Тесты validate_in_range."""

    def test_inside_range_passes(self):
        validate_in_range(5, "month", 1, 12)
        validate_in_range(1, "month", 1, 12)
        validate_in_range(12, "month", 1, 12)
        validate_in_range(0, "timestamp", min_value=0)
        validate_in_range(-5, "year", max_value=0)

    def test_between_message(self):
        with pytest.raises(ValueError, match="month must be between 1 and 12"):
            validate_in_range(13, "month", 1, 12)

    def test_lower_bound_message(self):
        with pytest.raises(ValueError, match="must be greater than or equal to 0"):
            validate_in_range(-1, "timestamp", min_value=0)

    def test_upper_bound_message(self):
        with pytest.raises(ValueError, match="must be less than or equal to 10"):
            validate_in_range(11, "value", max_value=10)

    def test_custom_error_class(self):
        with pytest.raises(CalendarArgumentError, match="jday must be between"):
            validate_in_range(0, "jday", 1, 2, CalendarArgumentError)
