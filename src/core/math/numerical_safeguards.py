"""
Numerical Safeguards — примитивы конечной арифметики

Модуль обеспечивает, что денежные величины никогда не становятся
NaN/Inf и никогда не ломают вызывающий код:
- NaN/Inf санитизация с fallback значением
- Проверка "строго положительное конечное число"
- Ограничение значения диапазоном

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют (заменяются на fallback)
2. Функции принимают значения любого типа и не бросают исключений
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Any


# =============================================================================
# NaN/Inf САНИТИЗАЦИЯ
# =============================================================================


def is_valid_float(value: Any) -> bool:
    """
    Проверка, является ли значение конечным float (не NaN, не Inf).

    bool и нечисловые типы не считаются валидными.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение — конечное число, иначе False
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False

    try:
        return math.isfinite(value)
    except OverflowError:
        # int за пределами диапазона float
        return False


def sanitize_float(value: Any, fallback: float = 0.0) -> float:
    """
    Санитизация: замена NaN/Inf (и нечисловых значений) на fallback.

    Args:
        value: Исходное значение
        fallback: Значение для замены (default: 0.0)

    Returns:
        float(value) если значение конечное, иначе fallback

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
        >>> sanitize_float(float('-inf'), fallback=-1.0)
        -1.0
    """
    if is_valid_float(value):
        return float(value)
    return fallback


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def is_strictly_positive(value: float) -> bool:
    """
    Проверка value > 0 для конечного числа.

    Сравнение строгое, без толерантности: 1e-300 считается положительным.
    """
    return is_valid_float(value) and value > 0


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(150.0, max_value=100.0)
        100.0
        >>> clamp(-3.0, min_value=0.0)
        0.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result
