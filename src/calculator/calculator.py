"""Calculator: единая точка вызова арифметики и Фибоначчи

Оборачивает чистые helper-функции (src.core.math) и возвращает
иммутабельные CalculationResult:
- evaluate(): ADD / SUB / MUL / DIV над двумя операндами
- fibonacci(): FIB_ITER с ограничением максимального индекса
- check(): сравнение результата с ожидаемым значением в пределах толерантности
- export() / restore(): JSON-payload по контракту calculation_result

Ошибки домена не перехватываются: DivisionByZeroError, FloatRangeError и
InvalidFibonacciIndexError пробрасываются вызывающему коду.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from jsonschema import ValidationError

from src.core.contracts.validators import CalculationResultContract
from src.core.domain.calculation import CalculationResult, Operation
from src.core.math.arithmetic import Number, add, div, mul, sub
from src.core.math.numerical_safeguards import DEFAULT_COMPARE_TOLERANCE, validate_positive
from src.core.math.sequences import InvalidFibonacciIndexError, fib_iter

logger = logging.getLogger(__name__)


_BINARY_OPERATIONS: Dict[Operation, Callable[[Number, Number], Number]] = {
    Operation.ADD: add,
    Operation.SUB: sub,
    Operation.MUL: mul,
    Operation.DIV: div,
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора."""

    # Абсолютная толерантность для check()
    compare_tolerance: float = DEFAULT_COMPARE_TOLERANCE

    # Верхняя граница индекса для fibonacci() (время O(n))
    max_fibonacci_index: int = 10_000

    def __post_init__(self) -> None:
        validate_positive(self.compare_tolerance, "compare_tolerance")
        if self.max_fibonacci_index < 1:
            raise ValueError(
                f"max_fibonacci_index must be >= 1, got {self.max_fibonacci_index}"
            )


# =============================================================================
# CALCULATOR
# =============================================================================


class Calculator:
    """Калькулятор поверх src.core.math."""

    def __init__(
        self,
        config: Optional[CalculatorConfig] = None,
        contract: Optional[CalculationResultContract] = None,
    ):
        self.config = config or CalculatorConfig()
        self.contract = contract or CalculationResultContract()

    def evaluate(self, operation: Operation, a: Number, b: Number) -> CalculationResult:
        """Выполнение бинарной операции.

        Args:
            operation: ADD / SUB / MUL / DIV
            a: первый операнд
            b: второй операнд

        Returns:
            CalculationResult с операндами и результатом

        Raises:
            ValueError: если операция не бинарная
            DivisionByZeroError: если DIV и b == 0
            FloatRangeError: если операнд или результат вне диапазона float
        """
        operation = Operation(operation)
        func = _BINARY_OPERATIONS.get(operation)
        if func is None:
            raise ValueError(f"{operation.value} is not a binary operation")

        try:
            value = func(a, b)
        except ArithmeticError as e:
            logger.warning("Rejected %s: %s", operation.value, e)
            raise

        logger.debug("%s(%r, %r) = %r", operation.value, a, b, value)
        return CalculationResult(operation=operation, operands=[a, b], value=value)

    def fibonacci(self, n: int) -> CalculationResult:
        """Вычисление fib_iter(n) с проверкой max_fibonacci_index.

        Raises:
            InvalidFibonacciIndexError: если n вне [1, max_fibonacci_index]
        """
        if isinstance(n, int) and not isinstance(n, bool) and n > self.config.max_fibonacci_index:
            logger.warning(
                "Rejected FIB_ITER(%r): above max_fibonacci_index=%d",
                n,
                self.config.max_fibonacci_index,
            )
            raise InvalidFibonacciIndexError(
                f"n must be <= {self.config.max_fibonacci_index}, got {n}"
            )

        try:
            value = fib_iter(n)
        except InvalidFibonacciIndexError:
            logger.warning("Rejected FIB_ITER(%r): invalid index", n)
            raise

        logger.debug("FIB_ITER(%r) = %r", n, value)
        return CalculationResult(operation=Operation.FIB_ITER, operands=[n], value=value)

    def check(self, result: CalculationResult, expected: float) -> bool:
        """Совпадает ли результат с expected в пределах compare_tolerance."""
        return result.matches(expected, tolerance=self.config.compare_tolerance)

    def export(self, result: CalculationResult) -> Dict[str, Any]:
        """JSON-payload результата, проверенный по контракту.

        Raises:
            jsonschema.ValidationError: если результат не представим (NaN/Inf)
        """
        try:
            return self.contract.serialize(result)
        except ValidationError:
            logger.warning("Rejected export of %s: value violates contract", result.operation.value)
            raise

    def restore(self, payload: Dict[str, Any]) -> CalculationResult:
        """CalculationResult из JSON-payload (схема, затем модель)."""
        return self.contract.parse(payload)
