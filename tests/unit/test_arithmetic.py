"""
Тесты для модуля Arithmetic

Проверяет:
1. Эталонные значения add/sub/mul/div (delta = 0.01)
2. Алгебраические свойства (коммутативность, антисимметрия, обратимость)
3. Деление на ноль → DivisionByZeroError
4. Выход за диапазон float → FloatRangeError
"""

import math

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from src.core.math.arithmetic import DivisionByZeroError, FloatRangeError, add, div, mul, sub

DELTA = 0.01

# Операнды точно представимы float: погрешность div/mul только от округления частного
bounded_ints = st.integers(min_value=-(10**15), max_value=10**15)


# =============================================================================
# ЭТАЛОННЫЕ ЗНАЧЕНИЯ
# =============================================================================


class TestReferenceValues:
    """Эталонные значения с delta = 0.01"""

    def test_add(self) -> None:
        assert add(2, 3) == pytest.approx(5, abs=DELTA)
        assert add(7, -12) == pytest.approx(-5, abs=DELTA)

    def test_sub(self) -> None:
        assert sub(2, 3) == pytest.approx(-1, abs=DELTA)
        assert sub(7, -12) == pytest.approx(19, abs=DELTA)

    def test_mul(self) -> None:
        assert mul(2, 3) == pytest.approx(6, abs=DELTA)
        assert mul(7, -12) == pytest.approx(-84, abs=DELTA)

    def test_div(self) -> None:
        assert div(2, 3) == pytest.approx(2.0 / 3.0, abs=DELTA)
        assert div(7, -12) == pytest.approx(7.0 / -12.0, abs=DELTA)

    def test_div_rounded_literals(self) -> None:
        assert div(2, 3) == pytest.approx(0.6667, abs=DELTA)
        assert div(7, -12) == pytest.approx(-0.5833, abs=DELTA)


# =============================================================================
# СВОЙСТВА
# =============================================================================


class TestProperties:
    """Алгебраические свойства операций"""

    @given(st.integers(), st.integers())
    def test_add_commutative(self, a: int, b: int) -> None:
        assert add(a, b) == add(b, a)

    @given(st.integers(), st.integers())
    def test_sub_antisymmetric(self, a: int, b: int) -> None:
        assert sub(a, b) == -sub(b, a)

    @given(bounded_ints, bounded_ints)
    def test_div_then_mul_restores_dividend(self, a: int, b: int) -> None:
        assume(b != 0)
        assert mul(div(a, b), b) == pytest.approx(a, rel=1e-12, abs=1e-9)

    @given(st.integers(), st.integers())
    def test_mul_commutative(self, a: int, b: int) -> None:
        assert mul(a, b) == mul(b, a)

    def test_integer_operations_stay_integer(self) -> None:
        """add/sub/mul над int возвращают int"""
        assert isinstance(add(2, 3), int)
        assert isinstance(sub(2, 3), int)
        assert isinstance(mul(2, 3), int)

    def test_div_always_float(self) -> None:
        """div всегда float, даже при делении нацело"""
        result = div(6, 3)
        assert isinstance(result, float)
        assert result == 2.0

    def test_float_operands(self) -> None:
        assert add(0.1, 0.2) == pytest.approx(0.3)
        assert mul(1.5, -2.0) == -3.0


# =============================================================================
# ДЕЛЕНИЕ НА НОЛЬ
# =============================================================================


class TestDivisionByZero:
    """Деление на ноль никогда не возвращает inf"""

    @pytest.mark.parametrize("zero", [0, 0.0, -0.0])
    def test_zero_divisor_raises(self, zero: float) -> None:
        with pytest.raises(DivisionByZeroError, match="Division by zero"):
            div(1, zero)

    def test_zero_by_zero_raises(self) -> None:
        with pytest.raises(DivisionByZeroError):
            div(0, 0)

    def test_is_builtin_zero_division_error(self) -> None:
        """DivisionByZeroError ловится как стандартный ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError):
            div(5, 0)

    def test_tiny_divisor_allowed(self) -> None:
        """Малый ненулевой делитель: обычное деление"""
        assert div(1.0, 1e-300) == pytest.approx(1e300)

    def test_nan_passes_through(self) -> None:
        """NaN операнды передаются нативному оператору"""
        assert math.isnan(div(float("nan"), 2))
        assert math.isnan(add(float("nan"), 1))


# =============================================================================
# ДИАПАЗОН FLOAT
# =============================================================================


class TestFloatRange:
    """int вне диапазона float там, где нужен float"""

    def test_huge_quotient_raises(self) -> None:
        with pytest.raises(FloatRangeError, match="div: value outside float range"):
            div(10**400, 3)

    def test_huge_exact_quotient_allowed(self) -> None:
        """Частное в диапазоне float при огромных операндах"""
        assert div(10**400, 10**399) == 10.0

    def test_mixed_int_float_raises(self) -> None:
        with pytest.raises(FloatRangeError, match="add: value outside float range"):
            add(10**400, 1.0)
        with pytest.raises(FloatRangeError, match="mul: value outside float range"):
            mul(1.5, 10**400)

    def test_is_builtin_overflow_error(self) -> None:
        with pytest.raises(OverflowError):
            sub(10**400, 0.5)

    def test_huge_ints_stay_exact(self) -> None:
        """int + int не приводится к float"""
        assert add(10**400, 1) - 10**400 == 1
        assert mul(10**400, 10**400) == 10**800

    def test_float_overflow_is_inf(self) -> None:
        """float * float по IEEE 754 даёт inf, не исключение"""
        assert mul(1e308, 10.0) == math.inf

    def test_wrapped_names_preserved(self) -> None:
        assert div.__name__ == "div"
        assert "Float-деление" in div.__doc__
