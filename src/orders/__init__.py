"""Orders — расчёт суммы заказа, валидация, скидки и оплата.

Конвейер:
    сырые позиции → coerce_to_float(price, quantity) → правило включения → сумма
"""

from src.orders.aggregator import (
    TotalBreakdown,
    calculate_total,
    calculate_total_breakdown,
)
from src.orders.payments import (
    SUPPORTED_PAYMENT_METHODS,
    PaymentResult,
    apply_discount,
    process_payment,
)
from src.orders.processor import OrderProcessor, OrderProcessorConfig
from src.orders.validator import all_items_invalid, is_item_valid, is_valid_order

__all__ = [
    # Aggregator
    "TotalBreakdown",
    "calculate_total",
    "calculate_total_breakdown",
    # Validator
    "all_items_invalid",
    "is_item_valid",
    "is_valid_order",
    # Payments
    "SUPPORTED_PAYMENT_METHODS",
    "PaymentResult",
    "apply_discount",
    "process_payment",
    # Processor
    "OrderProcessor",
    "OrderProcessorConfig",
]
