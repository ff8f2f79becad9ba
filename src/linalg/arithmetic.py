"""Поэлементные и алгебраические операции: сумма, разность, умножение на
число, умножение матриц, транспонирование.

Все операции возвращают новую матрицу и не изменяют входные.
"""

import logging
from typing import Optional

from src.core.domain.errors import MatrixErrorCode
from src.core.domain.matrix import Matrix
from src.core.domain.results import MatrixResult
from src.linalg.lifecycle import check_matrix, create_matrix

logger = logging.getLogger(__name__)


def _check_same_shape(
    operation: str,
    a: Optional[Matrix],
    b: Optional[Matrix],
) -> MatrixResult | None:
    """
    Общие проверки для поэлементных бинарных операций.

    Returns:
        MatrixResult с ошибкой или None если операнды совместимы
    """
    # Отсутствие операнда проверяется до формы
    if a is None or b is None:
        logger.debug("%s rejected: operand is missing", operation)
        return MatrixResult.failure(
            MatrixErrorCode.INVALID_MATRIX, f"{operation}: operand is missing"
        )

    if check_matrix(a) != MatrixErrorCode.OK or check_matrix(b) != MatrixErrorCode.OK:
        logger.debug("%s rejected: operand is released", operation)
        return MatrixResult.failure(
            MatrixErrorCode.INVALID_MATRIX, f"{operation}: operand is released"
        )

    if a.shape != b.shape:
        logger.debug(
            "%s rejected: shape mismatch %dx%d vs %dx%d",
            operation, a.rows, a.columns, b.rows, b.columns,
        )
        return MatrixResult.failure(
            MatrixErrorCode.CALCULATION_ERROR,
            f"{operation}: shape mismatch {a.rows}x{a.columns} vs {b.rows}x{b.columns}",
        )

    return None


def sum_matrix(a: Optional[Matrix], b: Optional[Matrix]) -> MatrixResult:
    """
    Сумма матриц: result[i][j] = a[i][j] + b[i][j].

    Returns:
        MatrixResult:
        - INVALID_MATRIX если операнд отсутствует или освобождён
        - CALCULATION_ERROR если размеры различаются
    """
    error = _check_same_shape("sum_matrix", a, b)
    if error is not None:
        return error

    result = create_matrix(a.rows, a.columns)
    if not result.ok:
        return result

    out = result.matrix.values
    for i in range(a.rows):
        for j in range(a.columns):
            out[i][j] = a.values[i][j] + b.values[i][j]
    return result


def sub_matrix(a: Optional[Matrix], b: Optional[Matrix]) -> MatrixResult:
    """
    Разность матриц: result[i][j] = a[i][j] - b[i][j].

    Returns:
        MatrixResult:
        - INVALID_MATRIX если операнд отсутствует или освобождён
        - CALCULATION_ERROR если размеры различаются
    """
    error = _check_same_shape("sub_matrix", a, b)
    if error is not None:
        return error

    result = create_matrix(a.rows, a.columns)
    if not result.ok:
        return result

    out = result.matrix.values
    for i in range(a.rows):
        for j in range(a.columns):
            out[i][j] = a.values[i][j] - b.values[i][j]
    return result


def mult_number(a: Optional[Matrix], number: float) -> MatrixResult:
    """
    Умножение матрицы на число: result[i][j] = a[i][j] * number.

    NaN/Inf в number не обрабатываются особо и распространяются по IEEE-754.

    Returns:
        MatrixResult: INVALID_MATRIX если матрица некорректна
    """
    if check_matrix(a) != MatrixErrorCode.OK:
        logger.debug("mult_number rejected: invalid matrix")
        return MatrixResult.failure(
            MatrixErrorCode.INVALID_MATRIX, "mult_number: invalid matrix"
        )

    result = create_matrix(a.rows, a.columns)
    if not result.ok:
        return result

    out = result.matrix.values
    for i in range(a.rows):
        for j in range(a.columns):
            out[i][j] = a.values[i][j] * number
    return result


def mult_matrix(a: Optional[Matrix], b: Optional[Matrix]) -> MatrixResult:
    """
    Произведение матриц a (r x k) и b (k x c).

    Накопление с нуля в порядке обхода i, j, k:
        result[i][j] += a[i][k] * b[k][j]

    Returns:
        MatrixResult:
        - INVALID_MATRIX если любая матрица некорректна
        - CALCULATION_ERROR если a.columns != b.rows
    """
    if check_matrix(a) != MatrixErrorCode.OK or check_matrix(b) != MatrixErrorCode.OK:
        logger.debug("mult_matrix rejected: invalid matrix")
        return MatrixResult.failure(
            MatrixErrorCode.INVALID_MATRIX, "mult_matrix: invalid matrix"
        )

    if a.columns != b.rows:
        logger.debug(
            "mult_matrix rejected: inner dimensions %d vs %d", a.columns, b.rows
        )
        return MatrixResult.failure(
            MatrixErrorCode.CALCULATION_ERROR,
            f"mult_matrix: a.columns={a.columns} != b.rows={b.rows}",
        )

    result = create_matrix(a.rows, b.columns)
    if not result.ok:
        return result

    out = result.matrix.values
    for i in range(a.rows):
        for j in range(b.columns):
            for k in range(b.rows):
                out[i][j] += a.values[i][k] * b.values[k][j]
    return result


def transpose(a: Optional[Matrix]) -> MatrixResult:
    """
    Транспонирование: result[j][i] = a[i][j].

    Returns:
        MatrixResult: INVALID_MATRIX если матрица некорректна
    """
    if check_matrix(a) != MatrixErrorCode.OK:
        logger.debug("transpose rejected: invalid matrix")
        return MatrixResult.failure(
            MatrixErrorCode.INVALID_MATRIX, "transpose: invalid matrix"
        )

    result = create_matrix(a.columns, a.rows)
    if not result.ok:
        return result

    out = result.matrix.values
    for i in range(a.rows):
        for j in range(a.columns):
            out[j][i] = a.values[i][j]
    return result
