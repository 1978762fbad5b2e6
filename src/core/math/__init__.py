"""
Core math modules для order-totals

Численные примитивы и приведение нетипизированных значений к конечным числам.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    clamp,
    is_strictly_positive,
    is_valid_float,
    sanitize_float,
)

# Numeric Coercion
from src.core.math.coercion import (
    CURRENCY_SYMBOLS,
    GROUPING_SEPARATORS,
    NUMBER_PATTERN,
    coerce_to_float,
)

__all__ = [
    # Numerical Safeguards
    "clamp",
    "is_strictly_positive",
    "is_valid_float",
    "sanitize_float",
    # Numeric Coercion — Constants
    "CURRENCY_SYMBOLS",
    "GROUPING_SEPARATORS",
    "NUMBER_PATTERN",
    # Numeric Coercion — Functions
    "coerce_to_float",
]
