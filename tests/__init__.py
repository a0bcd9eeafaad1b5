"""
Test suite

Contains:
- tests/unit/          : Unit tests for helpers, models, contracts and the calculator
"""
