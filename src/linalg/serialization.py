"""Сериализация матриц в dict/JSON и обратно.

load_matrix проверяет данные в два этапа:
1. JSON Schema контракт (типы, обязательные поля, размерности >= 1)
2. MatrixSnapshot (согласованность values с rows/columns)
"""

import json
from typing import Any, Dict

from src.core.contracts import validate_matrix_payload
from src.core.domain.matrix import Matrix, MatrixSnapshot


def dump_matrix(matrix: Matrix) -> Dict[str, Any]:
    """
    Сериализация матрицы в dict {"rows", "columns", "values"}.

    Raises:
        InvalidMatrixError: Если матрица освобождена
    """
    return matrix.to_snapshot().model_dump()


def dump_matrix_json(matrix: Matrix) -> str:
    """Сериализация матрицы в JSON строку."""
    return matrix.to_snapshot().model_dump_json()


def load_matrix(data: Dict[str, Any]) -> Matrix:
    """
    Новая матрица из сериализованных данных.

    Raises:
        jsonschema.ValidationError: Если данные нарушают контракт
        pydantic.ValidationError: Если values не согласованы с rows/columns
    """
    validate_matrix_payload(data)
    snapshot = MatrixSnapshot.model_validate(data)
    return Matrix.from_snapshot(snapshot)


def load_matrix_json(payload: str) -> Matrix:
    """Новая матрица из JSON строки (см. load_matrix)."""
    return load_matrix(json.loads(payload))
