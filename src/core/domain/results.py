"""
Результаты матричных операций.

MatrixResult / DeterminantResult заменяют "нулевую" матрицу-сентинел:
при ошибке результат явно отсутствует (None), а отсутствие отличимо
от валидной матрицы на уровне типа.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.errors import (
    InvalidMatrixError,
    MatrixCalculationError,
    MatrixErrorCode,
    error_for_code,
)
from src.core.domain.matrix import Matrix


@dataclass(frozen=True)
class MatrixResult:
    """Результат операции, возвращающей матрицу."""

    code: MatrixErrorCode
    matrix: Optional[Matrix] = None

    # Диагностика
    details: str = ""

    @property
    def ok(self) -> bool:
        return self.code == MatrixErrorCode.OK

    def unwrap(self) -> Matrix:
        """
        Матрица результата или исключение, соответствующее коду.

        Raises:
            InvalidMatrixError: Если code == INVALID_MATRIX или OK без матрицы
            MatrixCalculationError: Если code == CALCULATION_ERROR
        """
        if self.code != MatrixErrorCode.OK:
            raise error_for_code(self.code, self.details)
        if self.matrix is None:
            raise InvalidMatrixError("Successful result carries no matrix")
        return self.matrix

    @classmethod
    def success(cls, matrix: Matrix) -> "MatrixResult":
        return cls(code=MatrixErrorCode.OK, matrix=matrix, details="OK")

    @classmethod
    def failure(cls, code: MatrixErrorCode, details: str) -> "MatrixResult":
        return cls(code=code, matrix=None, details=details)


@dataclass(frozen=True)
class DeterminantResult:
    """Результат вычисления определителя."""

    code: MatrixErrorCode
    value: Optional[float] = None

    # Диагностика
    details: str = ""

    @property
    def ok(self) -> bool:
        return self.code == MatrixErrorCode.OK

    def unwrap(self) -> float:
        """
        Значение определителя или исключение, соответствующее коду.

        Raises:
            InvalidMatrixError: Если code == INVALID_MATRIX
            MatrixCalculationError: Если code == CALCULATION_ERROR или OK без значения
        """
        if self.code != MatrixErrorCode.OK:
            raise error_for_code(self.code, self.details)
        if self.value is None:
            raise MatrixCalculationError("Successful result carries no determinant value")
        return self.value
