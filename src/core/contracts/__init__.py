"""
Contract Validation Module

Модуль для валидации JSON контрактов входящих запросов.
"""

from .validators import (
    ORDER_REQUEST_SCHEMA,
    SCHEMA_DIR,
    OrderRequestValidator,
    extract_line_items,
    load_schema,
    validate_order_request,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "ORDER_REQUEST_SCHEMA",
    # Classes
    "OrderRequestValidator",
    # Functions
    "load_schema",
    "validate_order_request",
    "extract_line_items",
]
