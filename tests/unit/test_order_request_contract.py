"""
Tests for the order request JSON Schema contract

Проверяет:
- Валидность самой схемы
- Валидацию правильных тел запроса
- Детекцию нарушений типа и ограничения maxItems
- extract_line_items: фильтрацию элементов, не являющихся записями
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    SCHEMA_DIR,
    OrderRequestValidator,
    extract_line_items,
    load_schema,
    validate_order_request,
)
from src.core.domain import LineItem
from src.orders import calculate_total


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestLoadSchema:
    """Тесты для load_schema"""

    def test_loads_order_request_schema(self) -> None:
        schema = load_schema("order_request")
        assert schema["title"] == "order_request"
        assert schema["properties"]["items"]["maxItems"] == 1000

    def test_schema_cached(self) -> None:
        assert load_schema("order_request") is load_schema("order_request", SCHEMA_DIR)

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            OrderRequestValidator(tmp_path / "missing")

    def test_invalid_schema(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            load_schema("broken", tmp_path)


# =============================================================================
# VALIDATION
# =============================================================================


class TestOrderRequestValidator:
    """Тесты для OrderRequestValidator"""

    def test_valid_payloads(self) -> None:
        validator = OrderRequestValidator()
        assert validator.is_valid({"items": [{"price": 10.5, "quantity": 2}]})
        assert validator.is_valid({"items": []})
        assert validator.is_valid({"items": None})
        assert validator.is_valid({})

    def test_untyped_entries_accepted(self) -> None:
        """Схема не ограничивает содержимое позиций"""
        validate_order_request({"items": [None, "x", {"price": "$1", "quantity": []}]})

    def test_items_must_be_array(self) -> None:
        with pytest.raises(ValidationError):
            validate_order_request({"items": "10.50"})

    def test_payload_must_be_object(self) -> None:
        assert not OrderRequestValidator().is_valid([{"price": 1}])

    def test_max_items(self) -> None:
        payload = {"items": [{"price": 1, "quantity": 1}] * 1001}
        with pytest.raises(ValidationError) as exc_info:
            validate_order_request(payload)
        assert exc_info.value.validator == "maxItems"

        assert OrderRequestValidator().is_valid({"items": payload["items"][:1000]})


# =============================================================================
# EXTRACTION
# =============================================================================


class TestExtractLineItems:
    """Тесты для extract_line_items"""

    def test_keeps_records_only(self) -> None:
        payload = {
            "items": [
                {"price": 10.50, "quantity": 2},
                "",
                None,
                42,
                ["price", 1],
                {"price": "$5.25", "quantity": "3", "sku": "X"},
            ]
        }
        items = extract_line_items(payload)

        assert items == [
            LineItem(price=10.50, quantity=2),
            LineItem(price="$5.25", quantity="3"),
        ]
        assert calculate_total(items) == 36.75

    def test_missing_items(self) -> None:
        assert extract_line_items(None) == []
        assert extract_line_items({}) == []
        assert extract_line_items({"items": None}) == []
        assert extract_line_items({"items": "abc"}) == []
        assert extract_line_items([{"price": 1, "quantity": 1}]) == []

    def test_line_items_pass_through(self) -> None:
        item = LineItem(price=1, quantity=1)
        assert extract_line_items({"items": [item]}) == [item]
