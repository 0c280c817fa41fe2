"""
Тесты для Hebrew Numerals — числа 1..9999 еврейскими буквами

Проверяемые инварианты:
1. Единицы, десятки, сотни, повтор тав для >= 400
2. 15 и 16 пишутся как tet-vav / tet-zayin
3. Флаги alafim (geresh, слово "אלפים") и gereshayim
4. Отклонение чисел вне 1..9999
"""

import pytest

from src.calendars.hebrew_numerals import HEBREW_LEGACY_ENCODING, to_hebrew_numeral
from src.core.domain.calendar import CalendarArgumentError
from src.core.domain.modes import HebrewNumeralFlag


class TestToHebrewNumeral:
    """Тесты базового рендеринга."""

    @pytest.mark.parametrize(
        "number,expected",
        [
            (1, "א"),
            (9, "ט"),
            (10, "י"),
            (11, "יא"),
            (15, "טו"),
            (16, "טז"),
            (17, "יז"),
            (20, "כ"),
            (100, "ק"),
            (300, "ש"),
            (400, "ת"),
            (500, "תק"),
            (800, "תת"),
            (900, "תתק"),
            (115, "קטו"),
            (5779, "התשעט"),
        ],
    )
    def test_rendering(self, number, expected):
        assert to_hebrew_numeral(number) == expected

    @pytest.mark.parametrize("number", [0, -1, 10000])
    def test_out_of_range(self, number):
        with pytest.raises(CalendarArgumentError, match="number must be between 1 and 9999"):
            to_hebrew_numeral(number)

    def test_encodable_in_legacy_charset(self):
        assert len(to_hebrew_numeral(5779).encode(HEBREW_LEGACY_ENCODING)) == 5


class TestHebrewNumeralFlags:
    """Тесты флагов форматирования."""

    def test_gereshayim_single_letter(self):
        assert to_hebrew_numeral(4, HebrewNumeralFlag.ADD_GERESHAYIM) == "ד'"

    def test_gereshayim_multiple_letters(self):
        assert to_hebrew_numeral(15, HebrewNumeralFlag.ADD_GERESHAYIM) == 'ט"ו'
        assert to_hebrew_numeral(5779, HebrewNumeralFlag.ADD_GERESHAYIM) == 'התשע"ט'

    def test_gereshayim_skipped_for_bare_thousands(self):
        assert to_hebrew_numeral(5000, HebrewNumeralFlag.ADD_GERESHAYIM) == "ה"

    def test_alafim_geresh(self):
        assert to_hebrew_numeral(5779, HebrewNumeralFlag.ADD_ALAFIM_GERESH) == "ה'תשעט"

    def test_alafim_word(self):
        assert to_hebrew_numeral(5001, HebrewNumeralFlag.ADD_ALAFIM) == "ה אלפים א"

    def test_combined_flags(self):
        flags = HebrewNumeralFlag.ADD_ALAFIM_GERESH | HebrewNumeralFlag.ADD_GERESHAYIM
        assert to_hebrew_numeral(5001, flags) == "ה'א'"

    def test_integer_flags_accepted(self):
        assert to_hebrew_numeral(5779, 8) == 'התשע"ט'
