"""
Integer Arithmetic — платформенные лимиты и целочисленные примитивы

Модуль обеспечивает детерминированную целочисленную арифметику для всех
календарных конверсий:
- Платформенные лимиты int/long (wide 64-bit vs narrow 32-bit)
- Деление и остаток с усечением к нулю (семантика C), где это требуется
  историческими формулами
- Проверки переполнения относительно платформенных лимитов
- Валидация целочисленных аргументов в диапазоне

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакой плавающей точки: только int
2. Переполнение обнаруживается явно, а не "заворачивается"
3. Лимиты — конфигурируемая константа платформы, а не жёсткий 64-bit
4. Все операции детерминированы и воспроизводимы
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# ПЛАТФОРМЕННЫЕ ЛИМИТЫ
# =============================================================================

INT32_MAX: Final[int] = 2**31 - 1
INT32_MIN: Final[int] = -(2**31)
INT64_MAX: Final[int] = 2**63 - 1
INT64_MIN: Final[int] = -(2**63)


@dataclass(frozen=True)
class PlatformLimits:
    """Ширина целых чисел хост-платформы.

    - int_max / int_min: диапазон "int" (год, месяц, день)
    - long_max / long_min: диапазон "long" (SDN, timestamp)
    """

    int_max: int = INT32_MAX
    int_min: int = INT32_MIN
    long_max: int = INT64_MAX
    long_min: int = INT64_MIN

    def __post_init__(self) -> None:
        if self.int_max <= 0 or self.long_max <= 0:
            raise ValueError(
                f"Platform limits must be positive, got int_max={self.int_max}, "
                f"long_max={self.long_max}"
            )
        if self.long_max < self.int_max:
            raise ValueError(
                f"long_max {self.long_max} must be >= int_max {self.int_max}"
            )

    @classmethod
    def wide(cls) -> "PlatformLimits":
        """64-bit long, 32-bit int."""
        return cls()

    @classmethod
    def narrow(cls) -> "PlatformLimits":
        """32-bit long и 32-bit int."""
        return cls(long_max=INT32_MAX, long_min=INT32_MIN)

    def fits_int(self, value: int) -> bool:
        return self.int_min <= value <= self.int_max

    def fits_long(self, value: int) -> bool:
        return self.long_min <= value <= self.long_max


DEFAULT_PLATFORM_LIMITS: Final[PlatformLimits] = PlatformLimits.wide()


# =============================================================================
# ДЕЛЕНИЕ С УСЕЧЕНИЕМ К НУЛЮ
# =============================================================================


def trunc_div(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю (как `/` для int в C).

    Python `//` округляет к минус бесконечности; для отрицательных
    аргументов результаты различаются.

    Args:
        numerator: Делимое
        denominator: Делитель (не ноль)

    Returns:
        Частное, усечённое к нулю

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
        >>> -7 // 2
        -4
    """
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


def trunc_mod(numerator: int, denominator: int) -> int:
    """
    Остаток со знаком делимого (как `%` для int в C).

    Инвариант: trunc_div(a, b) * b + trunc_mod(a, b) == a

    Examples:
        >>> trunc_mod(7, 3)
        1
        >>> trunc_mod(-7, 3)
        -1
        >>> -7 % 3
        2
    """
    return numerator - trunc_div(numerator, denominator) * denominator


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_in_range(
    value: int,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
    error_cls: type[ValueError] = ValueError,
) -> None:
    """
    Валидация, что целое значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)
        error_cls: Класс исключения (подкласс ValueError)

    Raises:
        ValueError: Если value вне диапазона (экземпляр error_cls)
    """
    if min_value is not None and max_value is not None:
        if value < min_value or value > max_value:
            raise error_cls(f"{name} must be between {min_value} and {max_value}")
        return

    if min_value is not None and value < min_value:
        raise error_cls(f"{name} must be greater than or equal to {min_value}")

    if max_value is not None and value > max_value:
        raise error_cls(f"{name} must be less than or equal to {max_value}")
