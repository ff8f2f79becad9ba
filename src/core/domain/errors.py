"""
Matrix Errors — коды ошибок и исключения матричных операций

Закрытая таксономия из трёх значений:
- OK: операция выполнена
- INVALID_MATRIX: операнд отсутствует, освобождён или имеет размерность <= 0
- CALCULATION_ERROR: матрицы корректны, но операция для них не определена
  (несовпадение размеров, неквадратная матрица, вырожденная матрица)

Операции библиотеки не бросают исключений и возвращают код. Исключения
используются только при явном unwrap() результата и в конструкторах Matrix.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class MatrixErrorCode(int, Enum):
    """
    Код результата матричной операции.

    Целочисленные значения совпадают с историческими кодами возврата.
    """

    OK = 0
    INVALID_MATRIX = 1
    CALCULATION_ERROR = 2


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixError(Exception):
    """Базовое исключение матричной библиотеки."""

    code: MatrixErrorCode = MatrixErrorCode.INVALID_MATRIX

    def __init__(self, message: str = ""):
        super().__init__(message or self.code.name)


class InvalidMatrixError(MatrixError):
    """
    Некорректная матрица: отсутствует, освобождена или имеет размерность <= 0.
    """

    code = MatrixErrorCode.INVALID_MATRIX


class MatrixCalculationError(MatrixError):
    """
    Ошибка вычисления: несовпадающие размеры, неквадратная или вырожденная
    матрица.
    """

    code = MatrixErrorCode.CALCULATION_ERROR


def error_for_code(code: MatrixErrorCode, details: str = "") -> MatrixError:
    """
    Исключение, соответствующее коду ошибки.

    Raises:
        ValueError: Если code == OK (успех не имеет исключения)
    """
    if code == MatrixErrorCode.INVALID_MATRIX:
        return InvalidMatrixError(details)
    if code == MatrixErrorCode.CALCULATION_ERROR:
        return MatrixCalculationError(details)
    raise ValueError(f"No exception for result code {code!r}")
