"""
Domain models and value objects.

Contains the order line item models used by aggregation and validation.
"""

from src.core.domain.line_item import CoercedLine, LineItem, is_item_sequence, read_field

__all__ = [
    "LineItem",
    "CoercedLine",
    "read_field",
    "is_item_sequence",
]
