"""
Sequences — итеративное вычисление чисел Фибоначчи

Индексация с 1: fib_iter(1) = 0, fib_iter(2) = 1, fib_iter(3) = 1, ...

Вычисление идёт циклом по двум регистрам (a, b): время O(n), память O(1),
глубина стека постоянная. Рекурсия не используется.
"""

from typing import Iterator


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidFibonacciIndexError(ValueError):
    """Индекс Фибоначчи вне домена (не целое число или меньше 1)."""
    pass


def _require_int(value: int, name: str) -> None:
    # bool является подклассом int, но как индекс не принимается
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFibonacciIndexError(
            f"{name} must be an integer, got {type(value).__name__}: {value!r}"
        )


# =============================================================================
# FIBONACCI
# =============================================================================


def fib_iter(n: int) -> int:
    """
    n-е число Фибоначчи (индексация с 1).

    Args:
        n: Индекс, n >= 1

    Returns:
        F(n): 0, 1, 1, 2, 3, 5, ... для n = 1, 2, 3, 4, 5, 6, ...

    Raises:
        InvalidFibonacciIndexError: если n не целое или n < 1

    Examples:
        >>> fib_iter(1)
        0
        >>> fib_iter(6)
        5
    """
    _require_int(n, "n")
    if n < 1:
        raise InvalidFibonacciIndexError(f"n must be >= 1, got {n}")

    a, b = 0, 1
    for _ in range(n - 1):
        a, b = b, a + b
    return a


def fibonacci_sequence(count: int) -> Iterator[int]:
    """
    Ленивый генератор первых count чисел Фибоначчи.

    Эквивалентно [fib_iter(i) for i in range(1, count + 1)], но за один проход.

    Raises:
        InvalidFibonacciIndexError: если count не целое или count < 0
    """
    _require_int(count, "count")
    if count < 0:
        raise InvalidFibonacciIndexError(f"count must be >= 0, got {count}")

    return _generate(count)


def _generate(count: int) -> Iterator[int]:
    a, b = 0, 1
    for _ in range(count):
        yield a
        a, b = b, a + b
