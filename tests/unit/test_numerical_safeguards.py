"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Детекцию конечных float
2. NaN/Inf санитизацию
3. Строгую положительность
4. Ограничение диапазоном
"""

import math
from decimal import Decimal

from src.core.math.numerical_safeguards import (
    clamp,
    is_strictly_positive,
    is_valid_float,
    sanitize_float,
)


# =============================================================================
# ТЕСТЫ NaN/Inf САНИТИЗАЦИИ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        """Конечные числа валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-5.5)
        assert is_valid_float(42)
        assert is_valid_float(1e308)

    def test_non_finite_values_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_bool_is_not_a_number(self) -> None:
        """bool — подкласс int, но числом не считается"""
        assert not is_valid_float(True)
        assert not is_valid_float(False)

    def test_non_numeric_types_invalid(self) -> None:
        """Строки, None, контейнеры и Decimal невалидны"""
        assert not is_valid_float("1.0")
        assert not is_valid_float(None)
        assert not is_valid_float([])
        assert not is_valid_float({})
        assert not is_valid_float(Decimal("1.0"))

    def test_huge_int_invalid(self) -> None:
        """int вне диапазона float невалиден и не бросает OverflowError"""
        assert not is_valid_float(10**400)


class TestSanitizeFloat:
    """Тесты для sanitize_float"""

    def test_valid_value_passes_through(self) -> None:
        """Конечное значение возвращается как float"""
        assert sanitize_float(10.5) == 10.5
        result = sanitize_float(3)
        assert result == 3.0
        assert isinstance(result, float)

    def test_nan_replaced_with_fallback(self) -> None:
        """NaN заменяется на fallback"""
        assert sanitize_float(float("nan")) == 0.0
        assert sanitize_float(float("nan"), fallback=-1.0) == -1.0

    def test_inf_replaced_with_fallback(self) -> None:
        """+Inf и -Inf заменяются на fallback"""
        assert sanitize_float(float("inf")) == 0.0
        assert sanitize_float(float("-inf"), fallback=7.0) == 7.0

    def test_garbage_replaced_with_fallback(self) -> None:
        """Нечисловые значения заменяются на fallback"""
        assert sanitize_float(None) == 0.0
        assert sanitize_float("abc") == 0.0
        assert sanitize_float(True) == 0.0

    def test_result_always_finite(self) -> None:
        """Результат всегда конечен"""
        for value in [float("nan"), float("inf"), -1e308 * 10, 10**400, None, "x"]:
            assert math.isfinite(sanitize_float(value))


# =============================================================================
# ТЕСТЫ СРАВНЕНИЙ
# =============================================================================


class TestIsStrictlyPositive:
    """Тесты для is_strictly_positive"""

    def test_positive_values(self) -> None:
        """Положительные значения, включая очень малые"""
        assert is_strictly_positive(1.0)
        assert is_strictly_positive(1e-300)

    def test_zero_and_negative(self) -> None:
        """Ноль и отрицательные значения не положительны"""
        assert not is_strictly_positive(0.0)
        assert not is_strictly_positive(-0.0)
        assert not is_strictly_positive(-1.0)

    def test_non_finite(self) -> None:
        """+Inf не считается положительным конечным числом"""
        assert not is_strictly_positive(float("inf"))
        assert not is_strictly_positive(float("nan"))


# =============================================================================
# ТЕСТЫ УТИЛИТ
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_within_range(self) -> None:
        assert clamp(5.0, 0.0, 10.0) == 5.0

    def test_below_min(self) -> None:
        assert clamp(-1.0, 0.0, 10.0) == 0.0

    def test_above_max(self) -> None:
        assert clamp(150.0, max_value=100.0) == 100.0

    def test_no_bounds(self) -> None:
        """Без границ значение не меняется"""
        assert clamp(-42.0) == -42.0
