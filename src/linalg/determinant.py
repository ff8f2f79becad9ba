"""Определитель, матрица алгебраических дополнений и обратная матрица.

Определитель считается рекурсивным разложением Лапласа по первой строке:

    det(A) = Σ_i (-1)^i * A[0][i] * det(M_0i)

где M_0i — минор без строки 0 и столбца i. Сложность O(n!), поэтому
размерность ограничена MatrixConfig.max_square_dimension.

Обратная матрица — через присоединённую:

    A^-1 = transpose(C) * (1 / det(A)),  C[i][j] = (-1)^(i+j) * det(M_ij)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вырожденность проверяется точным сравнением det == 0.0 (без толерантности)
2. Каждый рекурсивный вызов определителя владеет своим минором
3. Промежуточные матрицы освобождаются на всех путях, включая ошибки
"""

import logging
from typing import Optional

from src.core.domain.errors import MatrixErrorCode
from src.core.domain.matrix import Matrix
from src.core.domain.results import DeterminantResult, MatrixResult
from src.core.math.numerical_safeguards import cofactor_sign
from src.linalg.arithmetic import mult_number, transpose
from src.linalg.config import DEFAULT_CONFIG, MatrixConfig
from src.linalg.lifecycle import check_matrix, create_matrix, remove_matrix

logger = logging.getLogger(__name__)


# =============================================================================
# MINOR
# =============================================================================


def fill_minor(a: Matrix, exclude_row: int, exclude_col: int, minor: Matrix) -> None:
    """
    Заполнение минора: копия a без строки exclude_row и столбца exclude_col.

    Относительный порядок элементов сохраняется. minor должен быть уже
    создан с размером (rows-1) x (columns-1); проверок не выполняется.
    """
    minor_row = 0
    for i in range(a.rows):
        if i == exclude_row:
            continue
        source = a.values[i]
        target = minor.values[minor_row]
        minor_col = 0
        for j in range(a.columns):
            if j == exclude_col:
                continue
            target[minor_col] = source[j]
            minor_col += 1
        minor_row += 1


def _laplace_determinant(a: Matrix) -> float:
    """Рекурсивное разложение по первой строке (a — valid и квадратная)."""
    if a.rows == 1:
        return a.values[0][0]

    det = 0.0
    minor = Matrix(a.rows - 1, a.columns - 1)
    try:
        first_row = a.values[0]
        for i in range(a.columns):
            fill_minor(a, 0, i, minor)
            if i % 2:
                det -= first_row[i] * _laplace_determinant(minor)
            else:
                det += first_row[i] * _laplace_determinant(minor)
    finally:
        minor.remove()
    return det


def _check_square(operation: str, a: Optional[Matrix], config: MatrixConfig) -> MatrixErrorCode:
    if check_matrix(a) != MatrixErrorCode.OK:
        logger.debug("%s rejected: invalid matrix", operation)
        return MatrixErrorCode.INVALID_MATRIX

    if a.rows != a.columns:
        logger.debug("%s rejected: non-square %dx%d", operation, a.rows, a.columns)
        return MatrixErrorCode.CALCULATION_ERROR

    if a.rows > config.max_square_dimension:
        logger.debug(
            "%s rejected: size %d exceeds limit %d",
            operation, a.rows, config.max_square_dimension,
        )
        return MatrixErrorCode.CALCULATION_ERROR

    return MatrixErrorCode.OK


# =============================================================================
# DETERMINANT
# =============================================================================


def determinant(
    a: Optional[Matrix],
    config: MatrixConfig | None = None,
) -> DeterminantResult:
    """
    Определитель квадратной матрицы.

    Args:
        a: Квадратная матрица
        config: Конфигурация (max_square_dimension)

    Returns:
        DeterminantResult:
        - OK со значением определителя
        - INVALID_MATRIX если матрица некорректна
        - CALCULATION_ERROR если матрица неквадратная или больше предела

    Examples:
        >>> determinant(Matrix.from_rows([[5.0]])).value
        5.0
        >>> determinant(Matrix.from_rows([[1, 2], [3, 4]])).value
        -2.0
    """
    config = config or DEFAULT_CONFIG

    code = _check_square("determinant", a, config)
    if code != MatrixErrorCode.OK:
        return DeterminantResult(code=code, value=None, details=f"determinant: {code.name}")

    return DeterminantResult(
        code=MatrixErrorCode.OK,
        value=_laplace_determinant(a),
        details="OK",
    )


# =============================================================================
# ALGEBRAIC COMPLEMENTS
# =============================================================================


def calc_complements(
    a: Optional[Matrix],
    config: MatrixConfig | None = None,
) -> MatrixResult:
    """
    Матрица алгебраических дополнений: C[i][j] = (-1)^(i+j) * det(M_ij).

    Один минор (n-1) x (n-1) создаётся до цикла, перезаписывается для
    каждой пары (i, j) и освобождается после цикла.

    Для матрицы 1x1 результат [[1.0]]: определитель пустого минора равен 1.

    Returns:
        MatrixResult:
        - INVALID_MATRIX если матрица некорректна
        - CALCULATION_ERROR если матрица неквадратная или больше предела
    """
    config = config or DEFAULT_CONFIG

    code = _check_square("calc_complements", a, config)
    if code != MatrixErrorCode.OK:
        return MatrixResult.failure(code, f"calc_complements: {code.name}")

    result = create_matrix(a.rows, a.columns)
    if not result.ok:
        return result

    out = result.matrix.values
    if a.rows == 1:
        out[0][0] = 1.0
        return result

    minor = Matrix(a.rows - 1, a.columns - 1)
    try:
        for i in range(a.rows):
            for j in range(a.columns):
                fill_minor(a, i, j, minor)
                out[i][j] = cofactor_sign(i + j) * _laplace_determinant(minor)
    finally:
        minor.remove()
    return result


# =============================================================================
# INVERSE
# =============================================================================


def inverse_matrix(
    a: Optional[Matrix],
    config: MatrixConfig | None = None,
) -> MatrixResult:
    """
    Обратная матрица методом присоединённой матрицы.

    Шаги:
    1. det(A); ошибки валидации пробрасываются, det == 0.0 → CALCULATION_ERROR
    2. C = calc_complements(A)
    3. adj = transpose(C)
    4. A^-1 = mult_number(adj, 1 / det)

    Returns:
        MatrixResult:
        - INVALID_MATRIX если матрица некорректна
        - CALCULATION_ERROR если матрица неквадратная, больше предела
          или вырожденная
    """
    config = config or DEFAULT_CONFIG

    det_result = determinant(a, config)
    if not det_result.ok:
        return MatrixResult.failure(det_result.code, f"inverse_matrix: {det_result.details}")

    det = det_result.value
    if det == 0.0:
        logger.warning("inverse_matrix rejected: singular %dx%d matrix", a.rows, a.columns)
        return MatrixResult.failure(
            MatrixErrorCode.CALCULATION_ERROR, "inverse_matrix: matrix is singular (det == 0)"
        )

    complements: Matrix | None = None
    adjugate: Matrix | None = None
    try:
        complements_result = calc_complements(a, config)
        if not complements_result.ok:
            return complements_result
        complements = complements_result.matrix

        adjugate_result = transpose(complements)
        if not adjugate_result.ok:
            return adjugate_result
        adjugate = adjugate_result.matrix

        return mult_number(adjugate, 1.0 / det)
    finally:
        remove_matrix(adjugate)
        remove_matrix(complements)
