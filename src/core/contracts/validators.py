"""
JSON Schema Contract Validators

Валидация входящего тела запроса на расчёт заказа по схеме
schema/order_request.json: {"items": [...]}, не более 1000 позиций,
содержимое позиций не ограничивается.

Граничный слой также вызывает extract_line_items, чтобы отбросить
элементы, не являющиеся записями, до передачи позиций в агрегатор.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Final, List

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.line_item import LineItem

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

ORDER_REQUEST_SCHEMA: Final[str] = "order_request"

# Кэш схем по полному пути файла
_SCHEMA_CACHE: Dict[Path, Dict[str, Any]] = {}


# =============================================================================
# SCHEMA LOADING
# =============================================================================


def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema.

    Args:
        schema_name: Имя схемы без расширения
        schema_dir: Каталог со схемами (default: schema/ рядом с модулем)

    Returns:
        Схема как dict (повторные вызовы возвращают тот же объект)

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если схема не проходит meta-validation
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if schema_path in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[schema_path]

    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

    _SCHEMA_CACHE[schema_path] = schema
    return schema


# =============================================================================
# ORDER REQUEST
# =============================================================================


class OrderRequestValidator:
    """Валидатор тела запроса на расчёт заказа."""

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self.schema = load_schema(ORDER_REQUEST_SCHEMA, schema_dir)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, payload: Any) -> None:
        """
        Raises:
            ValidationError: первая найденная ошибка схемы
        """
        self._validator.validate(payload)

    def is_valid(self, payload: Any) -> bool:
        return self._validator.is_valid(payload)


def validate_order_request(payload: Any) -> None:
    """
    Валидация тела запроса.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OrderRequestValidator().validate(payload)


def extract_line_items(payload: Any) -> List[LineItem]:
    """
    Извлечение позиций из тела запроса.

    Отсутствующий или не-списочный "items" даёт пустой список.
    Элементы, не являющиеся записями (строки, числа, None, списки),
    отбрасываются.

    Args:
        payload: Десериализованное тело запроса

    Returns:
        Список LineItem в исходном порядке
    """
    if not isinstance(payload, Mapping):
        return []

    raw_items = payload.get("items")
    if not isinstance(raw_items, list):
        return []

    line_items: List[LineItem] = []
    for entry in raw_items:
        if isinstance(entry, LineItem):
            line_items.append(entry)
        elif isinstance(entry, Mapping):
            line_items.append(LineItem.model_validate(dict(entry)))
    return line_items
