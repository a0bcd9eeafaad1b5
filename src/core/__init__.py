"""
Core: pure arithmetic and Fibonacci helpers, the CalculationResult model
and its JSON Schema contract.
"""
