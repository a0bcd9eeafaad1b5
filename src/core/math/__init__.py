"""
Core math modules

Арифметика, последовательности и численные примитивы.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    DEFAULT_COMPARE_TOLERANCE,
    is_close,
    is_valid_float,
    validate_positive,
)

# Arithmetic
from src.core.math.arithmetic import (
    DivisionByZeroError,
    FloatRangeError,
    Number,
    add,
    div,
    mul,
    sub,
)

# Sequences
from src.core.math.sequences import (
    InvalidFibonacciIndexError,
    fib_iter,
    fibonacci_sequence,
)

__all__ = [
    # Numerical Safeguards — Constants
    "DEFAULT_COMPARE_TOLERANCE",
    # Numerical Safeguards — Functions
    "is_close",
    "is_valid_float",
    "validate_positive",
    # Arithmetic — Exceptions
    "DivisionByZeroError",
    "FloatRangeError",
    # Arithmetic — Types
    "Number",
    # Arithmetic — Functions
    "add",
    "div",
    "mul",
    "sub",
    # Sequences — Exceptions
    "InvalidFibonacciIndexError",
    # Sequences — Functions
    "fib_iter",
    "fibonacci_sequence",
]
