"""
Тесты для Unix time — SDN ⇄ Unix timestamp

Проверяемые инварианты:
1. SDN 2440588 ⇄ timestamp 0; 86400 секунд на день
2. Верхняя граница SDN зависит от ширины long (PlatformLimits)
3. Отрицательный timestamp отклоняется
4. timestamp по умолчанию — wall clock
"""

import pytest

from src.core.domain.calendar import CalendarArgumentError
from src.core.math.integer_arithmetic import INT64_MAX, PlatformLimits
from src.facade import unix_time
from src.facade.unix_time import (
    current_timestamp,
    max_unix_sdn,
    sdn_to_unix_time,
    unix_time_to_sdn,
)


class TestSdnToUnixTime:
    """Тесты sdn_to_unix_time."""

    def test_epoch(self):
        assert sdn_to_unix_time(2440588) == 0
        assert sdn_to_unix_time(2440589) == 86400

    def test_below_epoch_rejected(self):
        with pytest.raises(CalendarArgumentError, match="jday must be between 2440588 and"):
            sdn_to_unix_time(2440587)

    def test_wide_upper_bound(self):
        upper = max_unix_sdn()
        assert upper == INT64_MAX // 86400 + 2440588
        assert sdn_to_unix_time(upper) <= INT64_MAX
        with pytest.raises(CalendarArgumentError):
            sdn_to_unix_time(upper + 1)

    def test_narrow_upper_bound(self):
        narrow = PlatformLimits.narrow()
        assert max_unix_sdn(narrow) == 2465443
        assert sdn_to_unix_time(2465443, narrow) == 2147472000
        with pytest.raises(CalendarArgumentError, match="jday must be between 2440588 and 2465443"):
            sdn_to_unix_time(2465444, narrow)


class TestUnixTimeToSdn:
    """Тесты unix_time_to_sdn."""

    @pytest.mark.parametrize(
        "timestamp,expected",
        [
            (0, 2440588),
            (86399, 2440588),
            (86400, 2440589),
            (956448000, 2451658),
        ],
    )
    def test_known_values(self, timestamp, expected):
        assert unix_time_to_sdn(timestamp) == expected

    def test_negative_timestamp_rejected(self):
        with pytest.raises(
            CalendarArgumentError,
            match="timestamp must be greater than or equal to 0",
        ):
            unix_time_to_sdn(-1)

    def test_timestamp_beyond_long_rejected(self):
        with pytest.raises(CalendarArgumentError, match="less than or equal to 2147483647"):
            unix_time_to_sdn(2**31, PlatformLimits.narrow())

    def test_defaults_to_wall_clock(self, monkeypatch):
        monkeypatch.setattr(unix_time, "current_timestamp", lambda: 86400 * 3 + 5)
        assert unix_time_to_sdn() == 2440591

    def test_current_timestamp_truncates(self, monkeypatch):
        monkeypatch.setattr(unix_time.time, "time", lambda: 1234.9)
        assert current_timestamp() == 1234

    def test_inverse_of_sdn_to_unix_time(self):
        for sdn in range(2440588, 2500000, 4999):
            assert unix_time_to_sdn(sdn_to_unix_time(sdn)) == sdn
