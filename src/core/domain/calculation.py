"""
CalculationResult — Модель результата вычисления

Immutable Pydantic модель, представляющая один вызов helper-функции:
операция, операнды и результат.
Полная совместимость с JSON Schema (contracts/schema/calculation_result.json).
"""

from enum import Enum
from typing import List, Union

from pydantic import BaseModel, Field, model_validator

from src.core.math.numerical_safeguards import DEFAULT_COMPARE_TOLERANCE, is_close


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Поддерживаемые операции."""

    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    FIB_ITER = "FIB_ITER"

    @property
    def arity(self) -> int:
        """Количество операндов операции."""
        if self is Operation.FIB_ITER:
            return 1
        return 2


# =============================================================================
# CALCULATION RESULT MODEL
# =============================================================================


class CalculationResult(BaseModel):
    """
    Результат вычисления.

    Immutable модель (frozen=True). Инвариант: len(operands) == operation.arity.
    """

    operation: Operation = Field(..., description="Выполненная операция")
    operands: List[Union[int, float]] = Field(
        ..., min_length=1, max_length=2, description="Операнды в порядке вызова"
    )
    value: Union[int, float] = Field(..., description="Результат операции")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_arity(self) -> "CalculationResult":
        """Число операндов должно соответствовать операции."""
        if len(self.operands) != self.operation.arity:
            raise ValueError(
                f"{self.operation.value} expects {self.operation.arity} operand(s), "
                f"got {len(self.operands)}"
            )
        return self

    def matches(self, expected: float, tolerance: float = DEFAULT_COMPARE_TOLERANCE) -> bool:
        """
        Сравнение результата с ожидаемым значением.

        Args:
            expected: Ожидаемое значение
            tolerance: Абсолютная толерантность (default: 0.01)

        Returns:
            True если |value - expected| <= tolerance

        Два int сравниваются точно, без приведения к float: значения
        Фибоначчи выходят за диапазон float уже при n >= 1478.
        """
        if isinstance(self.value, int) and isinstance(expected, int):
            return abs(self.value - expected) <= tolerance

        try:
            return is_close(self.value, expected, rel_tol=0.0, abs_tol=tolerance)
        except OverflowError:
            # int вне диапазона float не может быть в пределах tolerance от float
            return False
