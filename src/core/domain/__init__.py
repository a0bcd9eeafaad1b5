"""
Domain models and value objects.

Contains the CalculationResult record produced by the calculator.
"""

from src.core.domain.calculation import CalculationResult, Operation

__all__ = [
    "CalculationResult",
    "Operation",
]
