"""Конфигурация матричных операций."""

from dataclasses import dataclass

from src.core.math.numerical_safeguards import (
    EPS_MATRIX_COMPARE_ABS,
    MAX_SQUARE_DIMENSION_DEFAULT,
    validate_dimension,
    validate_positive,
)


@dataclass(frozen=True)
class MatrixConfig:
    """Конфигурация матричных операций.

    - eq_tolerance: абсолютная толерантность поэлементного сравнения
    - max_square_dimension: жёсткий предел n для определителя, матрицы
      дополнений и обратной матрицы (разложение по строке стоит O(n!))
    """

    eq_tolerance: float = EPS_MATRIX_COMPARE_ABS
    max_square_dimension: int = MAX_SQUARE_DIMENSION_DEFAULT

    def __post_init__(self) -> None:
        validate_positive(self.eq_tolerance, "eq_tolerance")
        validate_dimension(self.max_square_dimension, "max_square_dimension")


DEFAULT_CONFIG = MatrixConfig()
