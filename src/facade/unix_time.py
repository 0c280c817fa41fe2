"""Unix time — аффинное отображение SDN ⇄ Unix timestamp.

timestamp = (sdn - 2440588) * 86400

Верхняя граница SDN зависит от ширины long платформы
(PlatformLimits), а не зашита под 64 бита.
"""

import logging
import time

from src.core.domain.calendar import (
    SECONDS_PER_DAY,
    UNIX_EPOCH_SDN,
    CalendarArgumentError,
)
from src.core.math.integer_arithmetic import (
    DEFAULT_PLATFORM_LIMITS,
    PlatformLimits,
    validate_in_range,
)

logger = logging.getLogger(__name__)


def current_timestamp() -> int:
    """Текущее время (wall clock), секунды с Unix epoch."""
    timestamp = int(time.time())
    logger.debug("Timestamp defaulted to wall clock %d", timestamp)
    return timestamp


def max_unix_sdn(limits: PlatformLimits = DEFAULT_PLATFORM_LIMITS) -> int:
    """Максимальный SDN, timestamp которого помещается в long."""
    return limits.long_max // SECONDS_PER_DAY + UNIX_EPOCH_SDN


def sdn_to_unix_time(sdn: int, limits: PlatformLimits = DEFAULT_PLATFORM_LIMITS) -> int:
    """
    SDN → Unix timestamp полуночи (UTC) этого дня.

    Raises:
        CalendarArgumentError: Если sdn вне [2440588, max_unix_sdn(limits)]

    Examples:
        >>> sdn_to_unix_time(2440588)
        0
    """
    validate_in_range(
        sdn, "jday", UNIX_EPOCH_SDN, max_unix_sdn(limits), CalendarArgumentError
    )
    return (sdn - UNIX_EPOCH_SDN) * SECONDS_PER_DAY


def unix_time_to_sdn(
    timestamp: int | None = None,
    limits: PlatformLimits = DEFAULT_PLATFORM_LIMITS,
) -> int:
    """
    Unix timestamp → SDN дня, содержащего этот момент (UTC).

    Args:
        timestamp: Секунды с epoch (default: текущее время)
        limits: Платформенные лимиты

    Raises:
        CalendarArgumentError: Если timestamp < 0 или не помещается в long
    """
    if timestamp is None:
        timestamp = current_timestamp()
    else:
        validate_in_range(timestamp, "timestamp", 0, None, CalendarArgumentError)
        validate_in_range(
            timestamp, "timestamp", None, limits.long_max, CalendarArgumentError
        )

    return timestamp // SECONDS_PER_DAY + UNIX_EPOCH_SDN
