"""Order Validator — проверка заказа по принципу "всё или ничего".

В отличие от агрегатора, который пропускает невалидные позиции,
валидатор отклоняет весь заказ при первой же невалидной позиции.
"""

from collections.abc import Sequence
from typing import Any

from src.core.domain.line_item import is_item_sequence, read_field
from src.core.math.coercion import coerce_to_float
from src.core.math.numerical_safeguards import is_strictly_positive


def is_item_valid(item: Any) -> bool:
    """Позиция валидна, если приведённые price > 0 и quantity > 0."""
    if item is None:
        return False

    price = coerce_to_float(read_field(item, "price"))
    quantity = coerce_to_float(read_field(item, "quantity"))
    return is_strictly_positive(price) and is_strictly_positive(quantity)


def is_valid_order(items: Sequence[Any] | None) -> bool:
    """Заказ валиден только если он непуст и каждая позиция валидна.

    Args:
        items: последовательность позиций (str/bytes не считаются)

    Returns:
        False для None, пустого списка и при любой невалидной позиции
    """
    if not is_item_sequence(items) or len(items) == 0:
        return False

    return all(is_item_valid(item) for item in items)


def all_items_invalid(items: Sequence[Any] | None) -> bool:
    """Предикат жёсткого отказа для граничного слоя.

    True только для непустого списка, в котором каждая позиция
    имеет price <= 0 или quantity <= 0. None-элементы невалидными
    не считаются: такой заказ не отклоняется, а суммируется.
    """
    if not is_item_sequence(items) or len(items) == 0:
        return False

    return all(item is not None and not is_item_valid(item) for item in items)
