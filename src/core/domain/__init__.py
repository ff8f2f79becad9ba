"""
Domain models and value objects.

Contains the Matrix entity, its serialization snapshot, error codes,
exceptions and operation result types.
"""

from src.core.domain.errors import (
    InvalidMatrixError,
    MatrixCalculationError,
    MatrixError,
    MatrixErrorCode,
    error_for_code,
)
from src.core.domain.matrix import Matrix, MatrixSnapshot
from src.core.domain.results import DeterminantResult, MatrixResult

__all__ = [
    # Matrix model
    "Matrix",
    "MatrixSnapshot",
    # Error codes
    "MatrixErrorCode",
    # Exceptions
    "MatrixError",
    "InvalidMatrixError",
    "MatrixCalculationError",
    "error_for_code",
    # Results
    "MatrixResult",
    "DeterminantResult",
]
