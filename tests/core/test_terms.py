"""
Unit tests for the term model: construction, vars(), has_var(), rendering.
"""

import pytest

from unilog.core.terms import Var, Num, Ctr, is_term, union_names, walk


class TestConstruction:
    def test_ctr_args_become_tuple(self):
        t = Ctr("f", [Var("X"), Num(1)])
        assert t.args == (Var("X"), Num(1))
        assert t.arity == 2

    def test_zero_arity_ctr(self):
        assert Ctr("nil").args == ()
        assert Ctr("nil").arity == 0

    def test_structural_equality(self):
        assert Ctr("f", [Var("X")]) == Ctr("f", (Var("X"),))
        assert Ctr("f", [Var("X")]) != Ctr("f", [Var("Y")])
        assert Var("X") != Num(0)

    def test_terms_are_hashable(self):
        assert len({Ctr("f", [Num(1)]), Ctr("f", [Num(1)]), Var("X")}) == 2

    def test_negative_num_rejected(self):
        with pytest.raises(ValueError):
            Num(-1)

    def test_bool_num_rejected(self):
        with pytest.raises(ValueError):
            Num(True)

    def test_non_term_argument_rejected(self):
        with pytest.raises(TypeError):
            Ctr("f", ["X"])

    @pytest.mark.parametrize("make", [
        lambda: Var(5),
        lambda: Var(None),
        lambda: Ctr(1),
        lambda: Ctr(None, [Num(1)]),
    ])
    def test_non_string_names_rejected(self, make):
        with pytest.raises(TypeError):
            make()

    def test_is_term(self):
        assert is_term(Var("X"))
        assert is_term(Num(3))
        assert is_term(Ctr("f"))
        assert not is_term("X")
        assert not is_term(3)


class TestVars:
    def test_num_has_no_vars(self):
        assert Num(7).vars() == ()

    def test_var_is_its_own_var(self):
        assert Var("X").vars() == ("X",)

    def test_first_seen_order_no_duplicates(self):
        t = Ctr("f", [Var("Y"), Ctr("g", [Var("X"), Var("Y")]), Var("Z"), Var("X")])
        assert t.vars() == ("Y", "X", "Z")

    def test_ground_compound(self):
        t = Ctr("f", [Num(1), Ctr("a")])
        assert t.vars() == ()
        assert t.is_ground

    def test_union_names(self):
        assert union_names(("A", "B"), ("B", "C"), ("A",)) == ("A", "B", "C")


class TestHasVar:
    def test_num(self):
        assert not Num(1).has_var("X")

    def test_var_same_name(self):
        assert Var("X").has_var("X")
        assert not Var("X").has_var("Y")

    def test_nested(self):
        t = Ctr("f", [Num(1), Ctr("g", [Ctr("h", [Var("X")])])])
        assert t.has_var("X")
        assert not t.has_var("Y")

    def test_zero_arity(self):
        assert not Ctr("a").has_var("a")


class TestRendering:
    def test_var(self):
        assert str(Var("Who")) == "Who"

    def test_num(self):
        assert str(Num(42)) == "42"

    def test_compound(self):
        assert str(Ctr("f", [Var("X"), Num(1), Ctr("g", [Var("Y")])])) == "f(X, 1, g(Y))"

    def test_zero_arity_compound(self):
        assert str(Ctr("nil")) == "nil()"


class TestDeepTerms:
    def long_list(self, n, tail):
        t = tail
        for i in range(n):
            t = Ctr("cons", [Num(i), t])
        return t

    def test_vars_of_long_list(self):
        t = self.long_list(5000, Var("T"))
        assert t.vars() == ("T",)
        assert not t.is_ground

    def test_has_var_in_long_list(self):
        t = self.long_list(5000, Var("T"))
        assert t.has_var("T")
        assert not t.has_var("U")

    def test_walk_is_pre_order(self):
        t = Ctr("f", [Var("X"), Ctr("g", [Num(1)]), Var("Y")])
        assert [str(s) for s in walk(t)] == ["f(X, g(1), Y)", "X", "g(1)", "1", "Y"]
