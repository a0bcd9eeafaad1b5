"""
Arithmetic — базовые арифметические операции

Четыре чистые функции над двумя числовыми операндами:
- add(a, b) = a + b
- sub(a, b) = a - b
- mul(a, b) = a * b
- div(a, b) = a / b (всегда float-деление)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль → DivisionByZeroError (никогда не возвращается inf)
2. int, не помещающийся в float там, где нужен float (div или смешанные
   int/float операнды) → FloatRangeError
3. Все операции детерминированы и без побочных эффектов
"""

import functools
from typing import Callable, TypeVar, Union

Number = Union[int, float]

_R = TypeVar("_R")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZeroError(ZeroDivisionError):
    """Делитель равен нулю (0, 0.0 или -0.0)."""
    pass


class FloatRangeError(OverflowError):
    """Операнд или результат не представим как float."""
    pass


def _float_range_guard(func: Callable[[Number, Number], _R]) -> Callable[[Number, Number], _R]:
    # Операнды не попадают в сообщение: repr огромного int может сам упасть
    @functools.wraps(func)
    def wrapper(a: Number, b: Number) -> _R:
        try:
            return func(a, b)
        except OverflowError as e:
            raise FloatRangeError(f"{func.__name__}: value outside float range ({e})") from e

    return wrapper


# =============================================================================
# OPERATIONS
# =============================================================================


@_float_range_guard
def add(a: Number, b: Number) -> Number:
    """Сумма двух чисел."""
    return a + b


@_float_range_guard
def sub(a: Number, b: Number) -> Number:
    """Разность a - b."""
    return a - b


@_float_range_guard
def mul(a: Number, b: Number) -> Number:
    """Произведение двух чисел."""
    return a * b


@_float_range_guard
def div(a: Number, b: Number) -> float:
    """
    Float-деление a / b.

    Для целых операндов результат всё равно float: div(2, 3) ≈ 0.6667.

    Args:
        a: Делимое
        b: Делитель

    Returns:
        a / b как float

    Raises:
        DivisionByZeroError: если b == 0
        FloatRangeError: если частное не помещается в float (div(10**400, 3))

    Examples:
        >>> div(7, -12)
        -0.5833333333333334
        >>> div(10**400, 10**399)
        10.0
        >>> div(1, 0)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DivisionByZeroError: ...
    """
    if b == 0:
        raise DivisionByZeroError(f"Division by zero: divisor is {b!r}")

    return a / b
