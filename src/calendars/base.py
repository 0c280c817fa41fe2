"""SdnConvertible — общий контракт календарных модулей.

Контракт to_sdn (слабая валидность):
- 0 возвращается для любого входа, распознанного как невалидный
  или вне поддерживаемого диапазона
- Результат > 0 НЕ гарантирует, что дата каноническая (например, 31 февраля)
- Единственная проверка валидности: date → SDN → date и сравнение с исходной

from_sdn возвращает INVALID_DATE (0/0/0) для SDN вне домена.
"""

from typing import Protocol, runtime_checkable

from src.core.domain.calendar import CalendarDate, CalendarId


@runtime_checkable
class SdnConvertible(Protocol):
    """Календарь с конверсией date ⇄ SDN."""

    calendar_id: CalendarId

    def to_sdn(self, year: int, month: int, day: int) -> int:
        ...

    def from_sdn(self, sdn: int) -> CalendarDate:
        ...
