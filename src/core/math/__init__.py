"""
Core math modules

Математические примитивы для value-типов с корректной семантикой IEEE-754.
"""

from src.core.math.numerical_safeguards import (
    # Constants
    CANONICAL_NAN_BITS,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Total order and hashing
    compare_total_order,
    double_hash_code,
    double_to_long_bits,
    # IEEE-754 division
    ieee_divide,
    # Epsilon comparisons
    is_close,
)

__all__ = [
    # Numerical Safeguards — Constants
    "CANONICAL_NAN_BITS",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Total order and hashing
    "compare_total_order",
    "double_hash_code",
    "double_to_long_bits",
    # Numerical Safeguards — IEEE-754 division
    "ieee_divide",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
]
