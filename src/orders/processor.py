"""OrderProcessor — фасад расчёта заказа для граничного слоя.

Объединяет агрегатор, валидатор и платёжные хелперы за одним объектом
с конфигурацией. Граничный слой (HTTP и т.п.) решает сам, какую политику
применить:
- calculate_total: best-effort сумма, невалидные позиции пропускаются
- validate_order: всё или ничего
- should_reject: непустой заказ, в котором нет ни одной валидной позиции
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from src.core.domain.line_item import is_item_sequence
from src.core.math.coercion import coerce_to_float
from src.orders.aggregator import TotalBreakdown, calculate_total_breakdown
from src.orders.payments import (
    MAX_DISCOUNT_PERCENT,
    SUPPORTED_PAYMENT_METHODS,
    PaymentResult,
    apply_discount,
    process_payment,
)
from src.orders.validator import all_items_invalid, is_valid_order

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class OrderProcessorConfig:
    """Конфигурация OrderProcessor."""

    supported_payment_methods: tuple[str, ...] = SUPPORTED_PAYMENT_METHODS

    # Верхняя граница скидки в процентах
    max_discount_percent: float = MAX_DISCOUNT_PERCENT


# =============================================================================
# PROCESSOR
# =============================================================================


class OrderProcessor:
    """Расчёт суммы, проверка заказа, скидки и оплата."""

    def __init__(self, config: OrderProcessorConfig | None = None):
        """Инициализация.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or OrderProcessorConfig()

    def convert_to_number(self, value: Any) -> float:
        """Приведение значения к конечному float."""
        return coerce_to_float(value)

    def calculate_total_breakdown(self, items: Sequence[Any] | None) -> TotalBreakdown:
        """Сумма заказа с индексами учтённых и пропущенных позиций."""
        if items is not None and not is_item_sequence(items):
            logger.warning(
                "Invalid input: items must be a sequence, got %s", type(items).__name__
            )

        breakdown = calculate_total_breakdown(items)

        if breakdown.skipped_indices:
            logger.debug("Skipped line items at indices %s", list(breakdown.skipped_indices))
        logger.info(
            "Order total calculated: %s for %d included of %d items",
            breakdown.total,
            len(breakdown.included_indices),
            len(breakdown.included_indices) + len(breakdown.skipped_indices),
        )
        return breakdown

    def calculate_total(self, items: Sequence[Any] | None) -> float:
        """Best-effort сумма заказа."""
        return self.calculate_total_breakdown(items).total

    def validate_order(self, items: Sequence[Any] | None) -> bool:
        """Проверка заказа по принципу "всё или ничего"."""
        return is_valid_order(items)

    def should_reject(self, items: Sequence[Any] | None) -> bool:
        """True если заказ непуст и ни одна позиция не валидна."""
        rejected = all_items_invalid(items)
        if rejected:
            logger.warning("Order rejected: all %d items invalid", len(items))
        return rejected

    def apply_discount(
        self, total: float | None, discount_percentage: float | None
    ) -> float | None:
        """Скидка в процентах с ограничением из конфигурации."""
        return apply_discount(
            total, discount_percentage, max_percent=self.config.max_discount_percent
        )

    def process_payment(self, amount: Any, payment_method: str | None) -> PaymentResult:
        """Проверка способа оплаты по списку из конфигурации."""
        result = process_payment(
            amount,
            payment_method,
            supported_methods=self.config.supported_payment_methods,
        )
        if not result.success:
            logger.warning("Payment declined: %s (method=%r)", result.error, payment_method)
        return result
