"""
Core math modules для матричной библиотеки

Численные примитивы, общие для всех матричных операций.
"""

from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_CALC,
    EPS_MATRIX_COMPARE_ABS,
    MAX_SQUARE_DIMENSION_DEFAULT,
    # NaN/Inf checks
    is_valid_float,
    # Epsilon comparisons
    exceeds_abs_tolerance,
    # Cofactor sign
    cofactor_sign,
    # Validation
    is_valid_dimension,
    validate_dimension,
    validate_positive,
)

__all__ = [
    # Epsilon constants
    "EPS_CALC",
    "EPS_MATRIX_COMPARE_ABS",
    "MAX_SQUARE_DIMENSION_DEFAULT",
    # NaN/Inf checks
    "is_valid_float",
    # Epsilon comparisons
    "exceeds_abs_tolerance",
    # Cofactor sign
    "cofactor_sign",
    # Validation
    "is_valid_dimension",
    "validate_dimension",
    "validate_positive",
]
