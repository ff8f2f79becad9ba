"""
Numerical Safeguards — численные примитивы для матричной арифметики

Модуль содержит общие для всех матричных операций проверки:
- Epsilon-параметры сравнения матриц
- Проверка float на конечность (NaN/Inf)
- Абсолютное сравнение с толерантностью (без относительной составляющей)
- Валидация размерностей и параметров конфигурации
- Знак алгебраического дополнения по чётности индекса

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Различие ячеек — только абсолютная толерантность: abs(a - b) >= tol
2. Знак дополнения вычисляется по чётности целого числа, не через pow()
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность поэлементного сравнения матриц
# Пара ячеек считается различной при abs(a - b) >= EPS_MATRIX_COMPARE_ABS
EPS_MATRIX_COMPARE_ABS: Final[float] = 1e-7

# Epsilon для проверки положительности параметров конфигурации
EPS_CALC: Final[float] = 1e-12

# Жёсткий предел размерности для рекурсивного определителя (O(n!))
MAX_SQUARE_DIMENSION_DEFAULT: Final[int] = 64


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def exceeds_abs_tolerance(
    a: float,
    b: float,
    tol: float = EPS_MATRIX_COMPARE_ABS,
) -> bool:
    """
    Абсолютная проверка различия двух float.

    Граница включена: значения, отличающиеся ровно на tol, считаются
    различными. Если разность NaN (NaN в операнде, inf - inf), сравнение
    abs(a - b) >= tol ложно и пара различием не считается.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: 1e-7)

    Returns:
        True если abs(a - b) >= tol

    Examples:
        >>> exceeds_abs_tolerance(1.0, 1.0 + 1e-8)
        False
        >>> exceeds_abs_tolerance(1.0, 1.0 + 1e-6)
        True
        >>> exceeds_abs_tolerance(float('nan'), float('nan'))
        False
    """
    return abs(a - b) >= tol


# =============================================================================
# ЗНАК АЛГЕБРАИЧЕСКОГО ДОПОЛНЕНИЯ
# =============================================================================


def cofactor_sign(index_sum: int) -> float:
    """
    Знак (-1)^(i+j) по чётности суммы индексов.

    Args:
        index_sum: Сумма индексов строки и столбца (i + j)

    Returns:
        +1.0 для чётной суммы, -1.0 для нечётной

    Examples:
        >>> cofactor_sign(0)
        1.0
        >>> cofactor_sign(3)
        -1.0
    """
    if index_sum % 2:
        return -1.0
    return 1.0


# =============================================================================
# ВАЛИДАЦИЯ И ПРОВЕРКИ
# =============================================================================


def is_valid_dimension(value: object) -> bool:
    """
    Проверка, что значение — допустимая размерность матрицы.

    bool исключается явно: True/False не являются размерностями.

    Args:
        value: Проверяемое значение

    Returns:
        True если value — int > 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return value > 0


def validate_positive(value: float, name: str, eps: float = EPS_CALC) -> None:
    """
    Валидация, что значение положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        eps: Минимальный порог (default: EPS_CALC)

    Raises:
        ValueError: Если value <= eps или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= eps:
        raise ValueError(f"{name} must be positive (> {eps}), got {value}")


def validate_dimension(value: object, name: str) -> None:
    """
    Валидация размерности матрицы.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или value <= 0
    """
    if not is_valid_dimension(value):
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
