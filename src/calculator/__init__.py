"""
Calculator facade.

Config + Calculator поверх арифметики и Фибоначчи из src.core.math.
"""

from src.calculator.calculator import Calculator, CalculatorConfig

__all__ = [
    "Calculator",
    "CalculatorConfig",
]
