"""
Matrix — плотная матрица double-precision значений

Единственная сущность библиотеки. Владеет своими данными целиком:
каждая строка — отдельный список float, создаваемый внутри экземпляра.
Никакие два экземпляра не разделяют строки.

Состояния:
- valid: rows > 0, columns > 0, данные выделены и инициализированы
  (при создании — нулями)
- released: rows = 0, columns = 0, данные отсутствуют (values is None)

Создание атомарно: хранилище полностью строится до присвоения экземпляру,
поэтому неудачное создание (неверные размеры, MemoryError) не оставляет
частично выделенного объекта.

Также содержит MatrixSnapshot — immutable Pydantic модель для сериализации.
"""

from typing import Optional, Sequence

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from src.core.domain.errors import InvalidMatrixError
from src.core.math.numerical_safeguards import is_valid_dimension


# =============================================================================
# MATRIX
# =============================================================================


class Matrix:
    """
    Плотная матрица rows x columns.

    Доступ к элементам: m[i, j] и m[i, j] = value.
    Прямой доступ к строкам: m.values[i][j] (только для valid матрицы).

    Raises:
        InvalidMatrixError: Если rows <= 0 или columns <= 0
    """

    __slots__ = ("rows", "columns", "values")

    def __init__(self, rows: int, columns: int):
        if not is_valid_dimension(rows) or not is_valid_dimension(columns):
            raise InvalidMatrixError(
                f"Matrix dimensions must be positive integers, got {rows!r}x{columns!r}"
            )

        # Строим хранилище целиком до присвоения экземпляру
        storage = [[0.0] * columns for _ in range(rows)]

        self.rows: int = rows
        self.columns: int = columns
        self.values: Optional[list[list[float]]] = storage

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_rows(cls, data: Sequence[Sequence[float]]) -> "Matrix":
        """
        Создание матрицы из последовательности строк.

        Значения копируются, входная последовательность не сохраняется.

        Args:
            data: Непустая последовательность строк одинаковой длины

        Returns:
            Новая valid матрица

        Raises:
            InvalidMatrixError: Если данные пусты или строки разной длины

        Examples:
            >>> Matrix.from_rows([[1, 2], [3, 4]]).shape
            (2, 2)
        """
        if not data or not data[0]:
            raise InvalidMatrixError("Matrix data must contain at least one value")

        columns = len(data[0])
        for index, row in enumerate(data):
            if len(row) != columns:
                raise InvalidMatrixError(
                    f"Row {index} has {len(row)} columns, expected {columns}"
                )

        matrix = cls(len(data), columns)
        matrix.values = [[float(value) for value in row] for row in data]
        return matrix

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        """Единичная матрица size x size."""
        matrix = cls(size, size)
        for i in range(size):
            matrix.values[i][i] = 1.0
        return matrix

    def copy(self) -> "Matrix":
        """
        Глубокая копия матрицы.

        Raises:
            InvalidMatrixError: Если матрица освобождена
        """
        return Matrix.from_rows(self._require_values())

    # -------------------------------------------------------------------------
    # Состояние
    # -------------------------------------------------------------------------

    @property
    def is_valid(self) -> bool:
        """True если данные выделены и обе размерности > 0."""
        return self.values is not None and self.rows > 0 and self.columns > 0

    @property
    def is_square(self) -> bool:
        return self.is_valid and self.rows == self.columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    def remove(self) -> None:
        """
        Освобождение данных и переход в состояние released.

        Идемпотентно: повторный вызов ничего не делает.
        """
        self.values = None
        self.rows = 0
        self.columns = 0

    # -------------------------------------------------------------------------
    # Доступ к элементам
    # -------------------------------------------------------------------------

    def _require_values(self) -> list[list[float]]:
        if self.values is None:
            raise InvalidMatrixError("Matrix storage has been released")
        return self.values

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, column = index
        return self._require_values()[row][column]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, column = index
        self._require_values()[row][column] = float(value)

    def to_rows(self) -> list[list[float]]:
        """Копия данных в виде списка строк."""
        return [list(row) for row in self._require_values()]

    def __repr__(self) -> str:
        if not self.is_valid:
            return "Matrix(released)"
        return f"Matrix({self.rows}x{self.columns}, {self.values!r})"

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def to_snapshot(self) -> "MatrixSnapshot":
        """Immutable снапшот матрицы для сериализации."""
        return MatrixSnapshot(
            rows=self.rows,
            columns=self.columns,
            values=self.to_rows(),
        )

    @classmethod
    def from_snapshot(cls, snapshot: "MatrixSnapshot") -> "Matrix":
        """Новая матрица из снапшота."""
        return cls.from_rows(snapshot.values)


# =============================================================================
# SNAPSHOT MODEL
# =============================================================================


class MatrixSnapshot(BaseModel):
    """
    Снапшот матрицы.

    Immutable модель (frozen=True). Совместима с JSON Schema
    (src/core/contracts/schema/matrix.json).

    В JSON inf/nan пишутся константами Infinity/NaN, а не null.
    """

    rows: int = Field(..., gt=0, description="Количество строк")
    columns: int = Field(..., gt=0, description="Количество столбцов")
    values: list[list[float]] = Field(
        ..., min_length=1, description="Значения по строкам (row-major)"
    )

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    @field_validator("values")
    @classmethod
    def validate_shape(cls, v: list[list[float]], info: ValidationInfo) -> list[list[float]]:
        """
        Проверка согласованности values с rows/columns.
        """
        rows = info.data.get("rows")
        columns = info.data.get("columns")
        if rows is None or columns is None:
            # rows/columns уже не прошли валидацию
            return v

        if len(v) != rows:
            raise ValueError(f"values has {len(v)} rows, expected {rows}")

        for index, row in enumerate(v):
            if len(row) != columns:
                raise ValueError(
                    f"values row {index} has {len(row)} columns, expected {columns}"
                )
        return v
