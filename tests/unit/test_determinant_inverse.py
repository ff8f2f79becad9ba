"""Тесты определителя, матрицы дополнений и обратной матрицы

Покрытие:
- fill_minor: исключение строки/столбца с сохранением порядка
- determinant: 1x1, 2x2, 3x3, единичная, нулевая строка, вырожденная,
  неквадратная, предел размерности
- calc_complements: известный пример 3x3, 1x1, ошибки
- inverse_matrix: A * A^-1 = I, 1x1, вырожденная, освобождение промежуточных
"""

import importlib
import logging

import pytest

from src.core.domain import Matrix, MatrixCalculationError, MatrixErrorCode, MatrixResult
from src.linalg import (
    MatrixConfig,
    calc_complements,
    determinant,
    eq_matrix,
    fill_minor,
    inverse_matrix,
    mult_matrix,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def invertible_3x3():
    """Невырожденная матрица 3x3 с det = -1."""
    return Matrix.from_rows([[2.0, 5.0, 7.0], [6.0, 3.0, 4.0], [5.0, -2.0, -3.0]])


@pytest.fixture
def sequential_3x3():
    """Вырожденная матрица 1..9."""
    return Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])


# =============================================================================
# MINOR
# =============================================================================


class TestFillMinor:
    """Тесты для fill_minor"""

    def test_center_excluded(self, sequential_3x3) -> None:
        """Исключение строки 1 и столбца 1"""
        minor = Matrix(2, 2)
        fill_minor(sequential_3x3, 1, 1, minor)
        assert minor.to_rows() == [[1.0, 3.0], [7.0, 9.0]]

    def test_corner_excluded(self, sequential_3x3) -> None:
        """Исключение строки 0 и столбца 2"""
        minor = Matrix(2, 2)
        fill_minor(sequential_3x3, 0, 2, minor)
        assert minor.to_rows() == [[4.0, 5.0], [7.0, 8.0]]

    def test_scratch_overwritten(self, sequential_3x3) -> None:
        """Повторное заполнение полностью перезаписывает минор"""
        minor = Matrix(2, 2)
        fill_minor(sequential_3x3, 0, 0, minor)
        fill_minor(sequential_3x3, 2, 2, minor)
        assert minor.to_rows() == [[1.0, 2.0], [4.0, 5.0]]

    def test_source_unchanged(self, sequential_3x3) -> None:
        """Исходная матрица не изменяется"""
        before = sequential_3x3.to_rows()
        fill_minor(sequential_3x3, 1, 0, Matrix(2, 2))
        assert sequential_3x3.to_rows() == before


# =============================================================================
# DETERMINANT
# =============================================================================


class TestDeterminant:
    """Тесты для determinant"""

    @pytest.mark.parametrize("value", [5.0, -3.25, 0.0, 1e-300])
    def test_1x1_exact(self, value: float) -> None:
        """det([[v]]) = v точно"""
        result = determinant(Matrix.from_rows([[value]]))
        assert result.code == MatrixErrorCode.OK
        assert result.value == value

    def test_2x2(self) -> None:
        """det([[1, 2], [3, 4]]) = -2"""
        assert determinant(Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])).value == -2.0

    def test_3x3(self, invertible_3x3) -> None:
        """det = -1"""
        assert determinant(invertible_3x3).value == -1.0

    def test_identity(self) -> None:
        """det(I3) = 1.0"""
        assert determinant(Matrix.identity(3)).value == 1.0

    def test_identity_4x4(self) -> None:
        """det(I4) = 1.0"""
        assert determinant(Matrix.identity(4)).value == 1.0

    @pytest.mark.parametrize("zero_row", [0, 1, 2])
    def test_zero_row(self, zero_row: int) -> None:
        """Матрица с нулевой строкой → det = 0.0"""
        rows = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [-7.0, 8.5, 9.0]]
        rows[zero_row] = [0.0, 0.0, 0.0]
        assert determinant(Matrix.from_rows(rows)).value == 0.0

    def test_singular(self, sequential_3x3) -> None:
        """Линейно зависимые строки → det = 0.0"""
        assert determinant(sequential_3x3).value == 0.0

    def test_4x4(self) -> None:
        """Известный пример 4x4"""
        m = Matrix.from_rows(
            [
                [1.0, 0.0, 2.0, -1.0],
                [3.0, 0.0, 0.0, 5.0],
                [2.0, 1.0, 4.0, -3.0],
                [1.0, 0.0, 5.0, 0.0],
            ]
        )
        assert determinant(m).value == 30.0

    def test_non_square(self) -> None:
        """Неквадратная матрица → CALCULATION_ERROR"""
        result = determinant(Matrix(2, 3))
        assert result.code == MatrixErrorCode.CALCULATION_ERROR
        assert result.value is None

    def test_invalid(self) -> None:
        """None или освобождённая матрица → INVALID_MATRIX"""
        assert determinant(None).code == MatrixErrorCode.INVALID_MATRIX
        m = Matrix.identity(2)
        m.remove()
        assert determinant(m).code == MatrixErrorCode.INVALID_MATRIX

    def test_dimension_limit(self) -> None:
        """Размер больше предела → CALCULATION_ERROR"""
        config = MatrixConfig(max_square_dimension=3)
        result = determinant(Matrix.identity(4), config=config)
        assert result.code == MatrixErrorCode.CALCULATION_ERROR
        assert determinant(Matrix.identity(3), config=config).value == 1.0

    def test_input_unchanged(self, invertible_3x3) -> None:
        """Вычисление не изменяет вход"""
        before = invertible_3x3.to_rows()
        determinant(invertible_3x3)
        assert invertible_3x3.to_rows() == before


# =============================================================================
# COMPLEMENTS
# =============================================================================


class TestCalcComplements:
    """Тесты для calc_complements"""

    def test_known_3x3(self) -> None:
        """Известный пример 3x3"""
        m = Matrix.from_rows([[1.0, 2.0, 3.0], [0.0, 4.0, 2.0], [5.0, 2.0, 1.0]])
        expected = Matrix.from_rows(
            [[0.0, 10.0, -20.0], [4.0, -14.0, 8.0], [-8.0, -2.0, 4.0]]
        )
        result = calc_complements(m)
        assert result.code == MatrixErrorCode.OK
        assert eq_matrix(result.matrix, expected)

    def test_2x2(self) -> None:
        """2x2: [[d, -c], [-b, a]]"""
        m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        assert calc_complements(m).matrix.to_rows() == [[4.0, -3.0], [-2.0, 1.0]]

    def test_1x1(self) -> None:
        """1x1 → [[1.0]]"""
        result = calc_complements(Matrix.from_rows([[7.0]]))
        assert result.matrix.to_rows() == [[1.0]]

    def test_non_square(self) -> None:
        """Неквадратная матрица → CALCULATION_ERROR"""
        result = calc_complements(Matrix(3, 2))
        assert result.code == MatrixErrorCode.CALCULATION_ERROR
        assert result.matrix is None

    def test_invalid(self) -> None:
        """None → INVALID_MATRIX"""
        assert calc_complements(None).code == MatrixErrorCode.INVALID_MATRIX


# =============================================================================
# INVERSE
# =============================================================================


class TestInverseMatrix:
    """Тесты для inverse_matrix"""

    def test_known_3x3(self, invertible_3x3) -> None:
        """Известная обратная матрица для det = -1"""
        expected = Matrix.from_rows(
            [[1.0, -1.0, 1.0], [-38.0, 41.0, -34.0], [27.0, -29.0, 24.0]]
        )
        result = inverse_matrix(invertible_3x3)
        assert result.code == MatrixErrorCode.OK
        assert eq_matrix(result.matrix, expected)

    def test_product_is_identity(self, invertible_3x3) -> None:
        """A * A^-1 = I в пределах 1e-7"""
        inverse = inverse_matrix(invertible_3x3).unwrap()
        product = mult_matrix(invertible_3x3, inverse).unwrap()
        assert eq_matrix(product, Matrix.identity(3))

    def test_2x2(self) -> None:
        """[[4, 7], [2, 6]]^-1 = [[0.6, -0.7], [-0.2, 0.4]]"""
        m = Matrix.from_rows([[4.0, 7.0], [2.0, 6.0]])
        expected = Matrix.from_rows([[0.6, -0.7], [-0.2, 0.4]])
        assert eq_matrix(inverse_matrix(m).matrix, expected)

    def test_1x1(self) -> None:
        """[[4]]^-1 = [[0.25]]"""
        result = inverse_matrix(Matrix.from_rows([[4.0]]))
        assert result.matrix.to_rows() == [[0.25]]

    def test_singular_2x2(self) -> None:
        """det([[1, 2], [2, 4]]) = 0 → CALCULATION_ERROR"""
        result = inverse_matrix(Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]]))
        assert result.code == MatrixErrorCode.CALCULATION_ERROR
        assert result.matrix is None
        with pytest.raises(MatrixCalculationError, match="singular"):
            result.unwrap()

    def test_singular_logged(self, sequential_3x3, caplog) -> None:
        """Вырожденная матрица логируется на уровне WARNING"""
        with caplog.at_level(logging.WARNING, logger="src.linalg.determinant"):
            inverse_matrix(sequential_3x3)
        assert "singular" in caplog.text

    def test_non_square(self) -> None:
        """Неквадратная матрица → CALCULATION_ERROR"""
        assert inverse_matrix(Matrix(2, 3)).code == MatrixErrorCode.CALCULATION_ERROR

    def test_invalid(self) -> None:
        """None → INVALID_MATRIX"""
        assert inverse_matrix(None).code == MatrixErrorCode.INVALID_MATRIX

    def test_dimension_limit(self, invertible_3x3) -> None:
        """Предел размерности применяется и к обратной матрице"""
        result = inverse_matrix(invertible_3x3, config=MatrixConfig(max_square_dimension=2))
        assert result.code == MatrixErrorCode.CALCULATION_ERROR

    def test_intermediates_released_on_success(self, invertible_3x3, monkeypatch) -> None:
        """Промежуточные матрицы освобождаются после успешного вычисления"""
        det_module = importlib.import_module("src.linalg.determinant")

        created = []
        original_complements = det_module.calc_complements

        def _recording_complements(a, config=None):
            result = original_complements(a, config)
            created.append(result.matrix)
            return result

        monkeypatch.setattr(det_module, "calc_complements", _recording_complements)
        result = det_module.inverse_matrix(invertible_3x3)

        assert result.ok
        assert len(created) == 1
        assert not created[0].is_valid

    def test_intermediates_released_on_failure(self, invertible_3x3, monkeypatch) -> None:
        """Ошибка на шаге транспонирования: дополнения всё равно освобождаются"""
        det_module = importlib.import_module("src.linalg.determinant")

        created = []
        original_complements = det_module.calc_complements

        def _recording_complements(a, config=None):
            result = original_complements(a, config)
            created.append(result.matrix)
            return result

        def _failing_transpose(a):
            return MatrixResult.failure(MatrixErrorCode.INVALID_MATRIX, "transpose failed")

        monkeypatch.setattr(det_module, "calc_complements", _recording_complements)
        monkeypatch.setattr(det_module, "transpose", _failing_transpose)
        result = det_module.inverse_matrix(invertible_3x3)

        assert result.code == MatrixErrorCode.INVALID_MATRIX
        assert result.matrix is None
        assert not created[0].is_valid
