"""
Domain models and value objects.

Contains immutable value types: Complex and the factory-only SealedComplex.
"""

from src.core.domain.complex import I, ONE, ZERO, Complex
from src.core.domain.sealed_complex import SealedComplex

__all__ = [
    # Complex value type
    "Complex",
    "ZERO",
    "ONE",
    "I",
    # Static factory illustration
    "SealedComplex",
]
