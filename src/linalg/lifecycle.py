"""Жизненный цикл матрицы: создание, освобождение, проверка, сравнение.

Порядок проверок операций:
1. Отсутствующий операнд (None) → INVALID_MATRIX
2. Освобождённый операнд / размерность <= 0 → INVALID_MATRIX
3. Несовместимые размеры → CALCULATION_ERROR

Ошибки обнаруживаются до любого выделения памяти.
"""

import logging
from typing import Optional

from src.core.domain.errors import InvalidMatrixError, MatrixErrorCode
from src.core.domain.matrix import Matrix
from src.core.domain.results import MatrixResult
from src.core.math.numerical_safeguards import exceeds_abs_tolerance
from src.linalg.config import DEFAULT_CONFIG, MatrixConfig

logger = logging.getLogger(__name__)


def create_matrix(rows: int, columns: int) -> MatrixResult:
    """
    Создание матрицы rows x columns, заполненной нулями.

    Args:
        rows: Количество строк (> 0)
        columns: Количество столбцов (> 0)

    Returns:
        MatrixResult:
        - OK с новой матрицей
        - INVALID_MATRIX если rows <= 0, columns <= 0 или не хватило памяти

    Examples:
        >>> create_matrix(2, 3).matrix.shape
        (2, 3)
        >>> create_matrix(0, 3).code
        <MatrixErrorCode.INVALID_MATRIX: 1>
    """
    try:
        matrix = Matrix(rows, columns)
    except InvalidMatrixError as e:
        logger.debug("create_matrix rejected %r x %r: %s", rows, columns, e)
        return MatrixResult.failure(MatrixErrorCode.INVALID_MATRIX, str(e))
    except (MemoryError, OverflowError):
        logger.warning("create_matrix: allocation of %d x %d failed", rows, columns)
        return MatrixResult.failure(
            MatrixErrorCode.INVALID_MATRIX,
            f"Allocation of {rows}x{columns} matrix failed",
        )

    return MatrixResult.success(matrix)


def remove_matrix(matrix: Optional[Matrix]) -> None:
    """
    Освобождение матрицы.

    Безопасно для None и для уже освобождённой матрицы.
    """
    if matrix is not None:
        matrix.remove()


def check_matrix(matrix: Optional[Matrix]) -> MatrixErrorCode:
    """
    Проверка корректности матрицы.

    Returns:
        OK если матрица задана, данные выделены и rows > 0, columns > 0;
        иначе INVALID_MATRIX
    """
    if matrix is None or not matrix.is_valid:
        return MatrixErrorCode.INVALID_MATRIX
    return MatrixErrorCode.OK


def eq_matrix(
    a: Optional[Matrix],
    b: Optional[Matrix],
    config: MatrixConfig | None = None,
) -> bool:
    """
    Поэлементное сравнение матриц с абсолютной толерантностью.

    Args:
        a: Первая матрица
        b: Вторая матрица
        config: Конфигурация (eq_tolerance, default: 1e-7)

    Returns:
        False если любая матрица некорректна, размеры различаются или
        хотя бы одна пара ячеек отличается на >= eq_tolerance; иначе True.
        Пара с NaN-разностью (NaN, inf - inf) различием не считается.
    """
    config = config or DEFAULT_CONFIG

    if check_matrix(a) != MatrixErrorCode.OK or check_matrix(b) != MatrixErrorCode.OK:
        return False
    if a.shape != b.shape:
        return False

    for row_a, row_b in zip(a.values, b.values):
        for value_a, value_b in zip(row_a, row_b):
            if exceeds_abs_tolerance(value_a, value_b, config.eq_tolerance):
                return False
    return True
