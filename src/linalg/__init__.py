"""Linalg — операции над плотными матрицами.

- Жизненный цикл: create_matrix, remove_matrix, check_matrix, eq_matrix
- Арифметика: sum_matrix, sub_matrix, mult_number, mult_matrix, transpose
- Определитель и обратная: determinant, calc_complements, inverse_matrix
- Сериализация: dump_matrix, load_matrix
"""

from .arithmetic import (
    mult_matrix,
    mult_number,
    sub_matrix,
    sum_matrix,
    transpose,
)
from .config import DEFAULT_CONFIG, MatrixConfig
from .determinant import (
    calc_complements,
    determinant,
    fill_minor,
    inverse_matrix,
)
from .lifecycle import (
    check_matrix,
    create_matrix,
    eq_matrix,
    remove_matrix,
)
from .serialization import (
    dump_matrix,
    dump_matrix_json,
    load_matrix,
    load_matrix_json,
)

__all__ = [
    # Config
    "MatrixConfig",
    "DEFAULT_CONFIG",
    # Lifecycle
    "create_matrix",
    "remove_matrix",
    "check_matrix",
    "eq_matrix",
    # Arithmetic
    "sum_matrix",
    "sub_matrix",
    "mult_number",
    "mult_matrix",
    "transpose",
    # Determinant / inverse
    "fill_minor",
    "determinant",
    "calc_complements",
    "inverse_matrix",
    # Serialization
    "dump_matrix",
    "dump_matrix_json",
    "load_matrix",
    "load_matrix_json",
]
