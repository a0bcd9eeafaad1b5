"""
Contract Validation Module

JSON Schema контракт сериализованных результатов вычислений.
"""

from .validators import (
    CALCULATION_RESULT_SCHEMA,
    SCHEMA_DIR,
    CalculationResultContract,
    load_schema,
    validate_calculation_result,
)

__all__ = [
    # Constants
    "CALCULATION_RESULT_SCHEMA",
    "SCHEMA_DIR",
    # Classes
    "CalculationResultContract",
    # Functions
    "load_schema",
    "validate_calculation_result",
]
