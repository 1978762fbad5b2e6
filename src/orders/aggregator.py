"""Total Aggregator — сумма заказа по нетипизированным позициям.

Алгоритм:
- None или пустой список → 0.0 без итерации
- None-элемент пропускается, итерация продолжается
- price и quantity каждой позиции приводятся независимо (coerce_to_float)
- Позиция даёт price * quantity только при price > 0 и quantity > 0
- Итоговая сумма проверяется на конечность; иначе 0.0

Функции чистые: без состояния, без I/O, без исключений.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from src.core.domain.line_item import CoercedLine, is_item_sequence
from src.core.math.numerical_safeguards import sanitize_float


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class TotalBreakdown:
    """Сумма заказа с указанием, какие позиции учтены."""

    total: float

    # Индексы элементов входного списка
    included_indices: tuple[int, ...]
    skipped_indices: tuple[int, ...]

    @property
    def has_billable_items(self) -> bool:
        """Отличает "нет валидных позиций" от "сумма равна нулю"."""
        return len(self.included_indices) > 0


_EMPTY_BREAKDOWN = TotalBreakdown(total=0.0, included_indices=(), skipped_indices=())


# =============================================================================
# AGGREGATION
# =============================================================================


def calculate_total_breakdown(items: Sequence[Any] | None) -> TotalBreakdown:
    """Сумма заказа вместе с индексами учтённых и пропущенных позиций.

    Args:
        items: список позиций (Mapping / LineItem / None)

    Returns:
        TotalBreakdown с конечной суммой
    """
    if not is_item_sequence(items) or len(items) == 0:
        return _EMPTY_BREAKDOWN

    total = 0.0
    included: list[int] = []
    skipped: list[int] = []

    for index, item in enumerate(items):
        if item is None:
            skipped.append(index)
            continue

        line = CoercedLine.from_item(index, item)
        if not line.is_billable:
            skipped.append(index)
            continue

        total += line.subtotal
        included.append(index)

    return TotalBreakdown(
        # Переполнение при сложении/умножении даёт inf
        total=sanitize_float(total),
        included_indices=tuple(included),
        skipped_indices=tuple(skipped),
    )


def calculate_total(items: Sequence[Any] | None) -> float:
    """Сумма price * quantity по учитываемым позициям; всегда конечная."""
    return calculate_total_breakdown(items).total
