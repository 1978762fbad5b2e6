"""
Numeric Coercion — приведение произвольного значения к конечному float

Единственный допустимый способ прочитать цену или количество из
нетипизированной записи позиции заказа.

Правила (по порядку):
1. None → 0.0
2. Число (int/float/Decimal/Fraction, но не bool) → float, если конечное
3. Строка:
   - пустая после strip → 0.0
   - удаляются символы валют ($ € £ ¥ ₹) и разделители групп (,)
   - строка целиком вида "-123" / "-123.45" → это число
   - иначе первое вхождение такого числа в строке
   - ничего не найдено → 0.0
4. Любой другой тип (list, dict, bool, ...) → 0.0

КРИТИЧЕСКИЙ ИНВАРИАНТ:
    coerce_to_float(x) всегда конечное число и никогда не бросает исключение.
"""

import re
from decimal import Decimal
from numbers import Real
from typing import Any, Final

from src.core.math.numerical_safeguards import sanitize_float


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Символы валют, которые вырезаются из текста перед разбором
CURRENCY_SYMBOLS: Final[tuple[str, ...]] = ("$", "€", "£", "¥", "₹")

# Разделители групп разрядов ("1,000.50")
GROUPING_SEPARATORS: Final[tuple[str, ...]] = (",",)

# Необязательный минус, цифры, необязательная дробная часть.
# Только ASCII-цифры: \d в Python совпадает и с другими системами записи.
NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")

_STRIPPED_CHARS: Final[tuple[str, ...]] = CURRENCY_SYMBOLS + GROUPING_SEPARATORS


# =============================================================================
# COERCION
# =============================================================================


def coerce_to_float(value: Any) -> float:
    """
    Приведение значения к конечному float.

    Args:
        value: Значение любого типа

    Returns:
        Конечный float; 0.0 для None, мусора и NaN/Inf

    Examples:
        >>> coerce_to_float("$1,000.50")
        1000.5
        >>> coerce_to_float("abc123.00")
        123.0
        >>> coerce_to_float(float('inf'))
        0.0
        >>> coerce_to_float(True)
        0.0
    """
    try:
        return _dispatch(value)
    except Exception:
        # __float__ или str-методы подкласса могут бросить что угодно
        return 0.0


def _dispatch(value: Any) -> float:
    """Выбор правила по типу значения."""
    if value is None:
        return 0.0

    # bool — подкласс int, проверяется до чисел
    if isinstance(value, bool):
        return 0.0

    if isinstance(value, (Real, Decimal)):
        return _coerce_number(value)

    if isinstance(value, str):
        return _coerce_text(value)

    return 0.0


def _coerce_number(value: Real | Decimal) -> float:
    """Число → float; переполнение и signaling NaN дают 0.0."""
    try:
        result = float(value)
    except (ValueError, OverflowError, TypeError):
        return 0.0
    return sanitize_float(result)


def _coerce_text(text: str) -> float:
    """Строка → float по правилам разбора денежного текста."""
    cleaned = text.strip()
    if not cleaned:
        return 0.0

    for char in _STRIPPED_CHARS:
        cleaned = cleaned.replace(char, "")

    match = NUMBER_PATTERN.fullmatch(cleaned)
    if match is None:
        match = NUMBER_PATTERN.search(cleaned)
    if match is None:
        return 0.0

    try:
        result = float(match.group(0))
    except (ValueError, OverflowError):
        return 0.0

    # "1" * 400 разбирается в inf
    return sanitize_float(result)
