"""Discount and payment helpers.

Простые бизнес-правила без приведения типов:
- apply_discount: скидка в процентах, не больше 100%, итог не ниже 0
- process_payment: проверка способа оплаты по фиксированному списку
"""

from dataclasses import dataclass
from typing import Any, Final

from src.core.math.numerical_safeguards import clamp, sanitize_float


# =============================================================================
# CONSTANTS
# =============================================================================

SUPPORTED_PAYMENT_METHODS: Final[tuple[str, ...]] = (
    "credit_card",
    "debit_card",
    "paypal",
    "bank_transfer",
)

MAX_DISCOUNT_PERCENT: Final[float] = 100.0

ERROR_INVALID_INPUT: Final[str] = "Invalid input"
ERROR_UNSUPPORTED_METHOD: Final[str] = "Unsupported payment method"


# =============================================================================
# DISCOUNT
# =============================================================================


def apply_discount(
    total: float | None,
    discount_percentage: float | None,
    max_percent: float = MAX_DISCOUNT_PERCENT,
) -> float | None:
    """Применение скидки к сумме заказа.

    Args:
        total: сумма заказа
        discount_percentage: скидка в процентах (сверху ограничена max_percent)
        max_percent: верхняя граница скидки (default: 100)

    Returns:
        max(total - total * pct / 100, 0); total без изменений,
        если total или discount_percentage равны None
    """
    if total is None or discount_percentage is None:
        return total

    amount = sanitize_float(total)
    percent = clamp(sanitize_float(discount_percentage), max_value=max_percent)
    discount_amount = amount * (percent / 100.0)

    # Отрицательная скидка не ограничена снизу: 1e308 * 2 даёт inf
    return sanitize_float(max(amount - discount_amount, 0.0))


# =============================================================================
# PAYMENT
# =============================================================================


@dataclass(frozen=True)
class PaymentResult:
    """Результат проверки оплаты."""

    success: bool
    amount: Any = None
    method: str | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Представление для граничного слоя: {success, amount, method} или {success, error}."""
        if self.success:
            return {"success": True, "amount": self.amount, "method": self.method}
        return {"success": False, "error": self.error}


def process_payment(
    amount: Any,
    payment_method: str | None,
    supported_methods: tuple[str, ...] = SUPPORTED_PAYMENT_METHODS,
) -> PaymentResult:
    """Проверка способа оплаты.

    Args:
        amount: сумма к оплате
        payment_method: имя способа оплаты
        supported_methods: допустимые способы (default: SUPPORTED_PAYMENT_METHODS)

    Returns:
        PaymentResult
    """
    if amount is None or payment_method is None:
        return PaymentResult(success=False, error=ERROR_INVALID_INPUT)

    if payment_method in supported_methods:
        return PaymentResult(success=True, amount=amount, method=payment_method)

    return PaymentResult(success=False, error=ERROR_UNSUPPORTED_METHOD)
