"""
Hebrew Numerals — рендеринг чисел 1..9999 еврейскими буквами

Табличный, stateless алгоритм:
1. Тысячи (alafim): буква тысяч + опционально geresh и/или слово "אלפים"
2. Сотни >= 400: повтор тав (400)
3. Сотни 100..300: kuf/reish/shin
4. 15 и 16: tet-vav / tet-zayin (вместо yud-he / yud-vav)
5. Десятки, единицы

Gereshayim (ADD_GERESHAYIM) ставится только в хвост после тысяч:
- хвост пуст → ничего
- хвост из 1 символа → добавляется geresh (')
- иначе → gershayim (") вставляется перед последним символом

Результат — str из букв U+05D0..U+05EA; legacy-байты получаются через
.encode(HEBREW_LEGACY_ENCODING).
"""

from typing import Final

from src.core.domain.calendar import CalendarArgumentError
from src.core.domain.modes import HebrewNumeralFlag

HEBREW_LEGACY_ENCODING: Final[str] = "iso-8859-8"

HEBREW_NUMERAL_MIN: Final[int] = 1
HEBREW_NUMERAL_MAX: Final[int] = 9999

# Индекс 0 не используется; 1..9 единицы, 10 yud, 11..18 десятки 20..90,
# 19..22 сотни 100..400
ALEF_BET: Final[tuple[str, ...]] = (
    "0",
    "א", "ב", "ג", "ד", "ה", "ו", "ז", "ח", "ט",
    "י", "כ", "ל", "מ", "נ", "ס", "ע", "פ", "צ",
    "ק", "ר", "ש", "ת",
)

TET: Final[int] = 9
TAV: Final[int] = 22

GERESH: Final[str] = "'"
GERSHAYIM: Final[str] = '"'
ALAFIM_WORD: Final[str] = " אלפים "


def to_hebrew_numeral(number: int, flags: int = HebrewNumeralFlag.NONE) -> str:
    """
    Рендеринг числа еврейскими буквами.

    Args:
        number: Число 1..9999
        flags: Комбинация HebrewNumeralFlag

    Returns:
        Строка еврейских букв

    Raises:
        CalendarArgumentError: Если number вне 1..9999

    Examples:
        >>> to_hebrew_numeral(15)
        'טו'
        >>> to_hebrew_numeral(5779, HebrewNumeralFlag.ADD_GERESHAYIM)
        'התשע"ט'
    """
    if number < HEBREW_NUMERAL_MIN or number > HEBREW_NUMERAL_MAX:
        raise CalendarArgumentError(
            f"number must be between {HEBREW_NUMERAL_MIN} and {HEBREW_NUMERAL_MAX}, "
            f"got {number}"
        )

    flags = HebrewNumeralFlag(flags)
    parts: list[str] = []
    end_of_alafim = 0

    # alafim (тысячи)
    if number >= 1000:
        parts.append(ALEF_BET[number // 1000])
        if flags & HebrewNumeralFlag.ADD_ALAFIM_GERESH:
            parts.append(GERESH)
        if flags & HebrewNumeralFlag.ADD_ALAFIM:
            parts.append(ALAFIM_WORD)
        end_of_alafim = len("".join(parts))
        number %= 1000

    # tav-tav (400)
    while number >= 400:
        parts.append(ALEF_BET[TAV])
        number -= 400

    # meot (сотни)
    if number >= 100:
        parts.append(ALEF_BET[18 + number // 100])
        number %= 100

    if number in (15, 16):
        parts.append(ALEF_BET[TET])
        parts.append(ALEF_BET[number - 9])
    else:
        # asarot (десятки)
        if number >= 10:
            parts.append(ALEF_BET[9 + number // 10])
            number %= 10
        # yehidot (единицы)
        if number > 0:
            parts.append(ALEF_BET[number])

    text = "".join(parts)

    if flags & HebrewNumeralFlag.ADD_GERESHAYIM:
        after_alafim = len(text) - end_of_alafim
        if after_alafim == 1:
            text += GERESH
        elif after_alafim > 1:
            text = text[:-1] + GERSHAYIM + text[-1]

    return text
