"""
Tests for arithmetic simplification.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from unilog.core.arithmetic import simplify, is_op
from unilog.core.errors import ArithmeticFault, NotNumeric, NotUnifiable, UnilogError
from unilog.core.terms import Var, Num, Ctr


def op(name, x, y):
    return Ctr(name, [x, y])


@st.composite
def ground_expressions(draw, max_depth=3):
    if max_depth == 0:
        return Num(draw(st.integers(min_value=0, max_value=20)))
    choice = draw(st.integers(min_value=0, max_value=3))
    if choice == 0:
        return Num(draw(st.integers(min_value=0, max_value=20)))
    if choice == 1:
        return Ctr(draw(st.sampled_from(["a", "b"])))
    name = draw(st.sampled_from(["+", "-", "*", "/"]))
    return op(name,
              draw(ground_expressions(max_depth=max_depth - 1)),
              draw(ground_expressions(max_depth=max_depth - 1)))


class TestPassThrough:
    def test_num_unchanged(self):
        assert simplify(Num(3)) == Num(3)

    def test_var_unchanged(self):
        assert simplify(Var("X")) == Var("X")

    def test_ordinary_compound_unchanged(self):
        t = Ctr("f", [op("+", Num(1), Num(2))])
        assert simplify(t) == t

    def test_is_op(self):
        assert all(is_op(name) for name in "+-*/")
        assert not is_op("f")
        assert not is_op("mod")


class TestEvaluation:
    def test_nested(self):
        assert simplify(op("+", Num(2), op("*", Num(3), Num(4)))) == Num(14)

    def test_each_operator(self):
        assert simplify(op("+", Num(7), Num(2))) == Num(9)
        assert simplify(op("-", Num(7), Num(2))) == Num(5)
        assert simplify(op("*", Num(7), Num(2))) == Num(14)
        assert simplify(op("/", Num(7), Num(2))) == Num(3)

    def test_subtraction_to_zero(self):
        assert simplify(op("-", Num(4), Num(4))) == Num(0)

    def test_method_form(self):
        assert op("*", Num(6), Num(7)).simplify() == Num(42)
        assert Num(1).simplify() == Num(1)

    def test_large_values_do_not_wrap(self):
        big = 2 ** 40
        assert simplify(op("*", Num(big), Num(big))) == Num(big * big)


class TestFailures:
    def test_variable_operand(self):
        with pytest.raises(NotNumeric):
            simplify(op("+", Var("X"), Num(1)))

    def test_not_numeric_is_still_a_unification_failure(self):
        with pytest.raises(NotUnifiable):
            simplify(op("+", Var("X"), Num(1)))

    def test_compound_operand(self):
        with pytest.raises(NotNumeric):
            simplify(op("*", Ctr("f", [Num(1)]), Num(2)))

    def test_wrong_arity(self):
        with pytest.raises(NotNumeric):
            simplify(Ctr("+", [Num(1)]))
        with pytest.raises(NotNumeric):
            simplify(Ctr("-", [Num(1), Num(2), Num(3)]))
        with pytest.raises(NotNumeric):
            simplify(Ctr("*"))

    def test_underflow(self):
        with pytest.raises(ArithmeticFault):
            simplify(op("-", Num(3), Num(5)))

    def test_division_by_zero(self):
        with pytest.raises(ArithmeticFault):
            simplify(op("/", Num(3), op("-", Num(2), Num(2))))

    def test_fault_is_a_builtin_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            simplify(op("/", Num(1), Num(0)))

    def test_fault_is_not_a_unification_failure(self):
        try:
            simplify(op("-", Num(0), Num(1)))
        except NotUnifiable:
            pytest.fail("ArithmeticFault must not be a NotUnifiable")
        except ArithmeticFault:
            pass


class TestSimplifyProperties:

    @given(ground_expressions())
    def test_idempotent_on_ground_terms(self, t):
        try:
            once = simplify(t)
        except UnilogError:
            return
        assert simplify(once) == once
