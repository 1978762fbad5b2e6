"""
LineItem — Модель позиции заказа

Две модели:
- LineItem: сырая запись, как она пришла от вызывающей стороны
  (price/quantity любого типа, лишние ключи игнорируются)
- CoercedLine: та же позиция после приведения price/quantity к конечным float

Обе модели immutable (frozen=True) и живут в пределах одного запроса.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, Field

from src.core.math.coercion import coerce_to_float
from src.core.math.numerical_safeguards import is_strictly_positive


# =============================================================================
# RAW LINE ITEM
# =============================================================================


class LineItem(BaseModel):
    """
    Нетипизированная позиция заказа.

    Поля не валидируются: любое значение (строка с валютой, None, dict,
    NaN) допустимо и разбирается только при приведении.
    """

    price: Any = Field(None, description="Цена (денежная сумма, любой тип)")
    quantity: Any = Field(None, description="Количество (любой тип)")

    model_config = {"frozen": True, "extra": "ignore"}


def read_field(item: Any, name: str) -> Any:
    """
    Чтение поля позиции независимо от её представления.

    Args:
        item: LineItem, Mapping или что угодно ещё
        name: Имя поля ("price" / "quantity")

    Returns:
        Значение поля; None если поля нет или item не является записью
    """
    if isinstance(item, LineItem):
        return getattr(item, name, None)
    if isinstance(item, Mapping):
        try:
            return item.get(name)
        except Exception:
            # пользовательский Mapping с ломающимся get
            return None
    return None


def is_item_sequence(items: Any) -> bool:
    """
    Проверка, что items — последовательность позиций.

    list, tuple, deque и прочие Sequence подходят; str, bytes и
    bytearray тоже Sequence, но списком позиций не являются.
    """
    return isinstance(items, Sequence) and not isinstance(items, (str, bytes, bytearray))


# =============================================================================
# COERCED LINE
# =============================================================================


class CoercedLine(BaseModel):
    """
    Позиция заказа после приведения.

    price и quantity гарантированно конечные (allow_inf_nan=False).
    """

    index: int = Field(..., ge=0, description="Позиция элемента во входном списке")
    price: float = Field(..., allow_inf_nan=False, description="Приведённая цена")
    quantity: float = Field(..., allow_inf_nan=False, description="Приведённое количество")

    model_config = {"frozen": True}

    @classmethod
    def from_item(cls, index: int, item: Any) -> "CoercedLine":
        """Приведение price и quantity сырой позиции."""
        return cls(
            index=index,
            price=coerce_to_float(read_field(item, "price")),
            quantity=coerce_to_float(read_field(item, "quantity")),
        )

    @property
    def is_billable(self) -> bool:
        """Позиция учитывается в сумме только при price > 0 и quantity > 0."""
        return is_strictly_positive(self.price) and is_strictly_positive(self.quantity)

    @property
    def subtotal(self) -> float:
        """price * quantity для учитываемой позиции, иначе 0.0."""
        if not self.is_billable:
            return 0.0
        return self.price * self.quantity
