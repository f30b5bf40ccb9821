"""Tests for core data structures: leaves, containers, canonical ordering."""

import dataclasses
from itertools import permutations

import pytest
from realexpr.core.assignment import Assignment
from realexpr.core.containers import (
    Addition, Multiplication, UnaryExpression,
    re_add, re_add_unsorted, re_mult, re_mult_unsorted,
)
from realexpr.core.errors import InvalidArgumentError, NullArgumentError
from realexpr.core.expression import ONE, ZERO, Constant, Variable, compare
from realexpr.core.unary import Cosine, Negation, Sine


@pytest.fixture
def xyz():
    return Variable("x"), Variable("y"), Variable("z")


class TestLeaves:
    def test_variable(self):
        x = Variable("x")
        assert x.variables() == {x}
        assert repr(x) == "x"

    def test_variable_equality_is_by_name(self):
        assert Variable("x") == Variable("x")
        assert hash(Variable("x")) == hash(Variable("x"))
        assert Variable("x") != Variable("y")

    def test_variable_is_immutable(self):
        x = Variable("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            x.name = "y"

    def test_constant(self):
        c = Constant(2)
        assert c.value == 2.0
        assert isinstance(c.value, float)
        assert c.variables() == set()
        assert c == Constant(2.0)
        assert str(c) == "2"
        assert str(Constant(0.5)) == "0.5"

    def test_identities(self):
        assert ZERO == Constant(0)
        assert ONE == Constant(1)

    def test_variable_is_not_a_constant(self):
        assert Variable("x") != Constant(1)


class TestConstruction:
    def test_none_sequence(self):
        with pytest.raises(NullArgumentError):
            Addition(None)
        with pytest.raises(NullArgumentError):
            Multiplication(None, sort_children=False)

    def test_null_argument_is_a_type_error(self):
        with pytest.raises(TypeError):
            Addition(None)

    def test_empty_sequence(self):
        with pytest.raises(InvalidArgumentError):
            Addition([])
        with pytest.raises(InvalidArgumentError):
            re_mult()
        with pytest.raises(ValueError):
            re_add_unsorted()

    def test_none_entry(self, xyz):
        x, y, _ = xyz
        with pytest.raises(InvalidArgumentError):
            re_add(x, None)
        with pytest.raises(InvalidArgumentError):
            Multiplication([x, None, y], sort_children=False)
        with pytest.raises(InvalidArgumentError):
            Negation(None)

    def test_non_expression_entry(self, xyz):
        x, _, _ = xyz
        with pytest.raises(InvalidArgumentError):
            re_add(x, 3)

    def test_defensive_copy(self, xyz):
        x, y, z = xyz
        terms = [y, x]
        expr = Addition(terms)
        terms.append(z)
        terms[0] = z
        assert expr.children == (x, y)
        assert isinstance(expr.children, tuple)

    def test_containers_are_immutable(self, xyz):
        x, y, _ = xyz
        expr = re_add(x, y)
        with pytest.raises(dataclasses.FrozenInstanceError):
            expr.children = (x,)

    def test_single_child(self, xyz):
        x, _, _ = xyz
        assert re_add(x).children == (x,)
        assert re_mult(x).children == (x,)
        assert re_add(x).evaluate(Assignment({x: 4.0})) == 4.0
        assert re_mult(x).evaluate(Assignment({x: 4.0})) == 4.0

    def test_unary_wraps_one_child(self, xyz):
        x, _, _ = xyz
        neg = Negation(x)
        assert neg.children == (x,)
        assert neg.child == x


class TestCanonicalOrder:
    def test_commutative_addition(self, xyz):
        x, y, _ = xyz
        assert re_add(x, y) == re_add(y, x)
        assert hash(re_add(x, y)) == hash(re_add(y, x))

    def test_commutative_multiplication(self, xyz):
        x, y, _ = xyz
        assert re_mult(x, y) == re_mult(y, x)
        assert hash(re_mult(x, y)) == hash(re_mult(y, x))

    def test_all_permutations_agree(self, xyz):
        x, y, z = xyz
        operands = [z, Constant(2), Sine(x), re_mult(x, y), re_add(x, y), x]
        expected = re_add(*operands)
        for perm in permutations(operands):
            built = re_add(*perm)
            assert built == expected
            assert built.children == expected.children
            assert hash(built) == hash(expected)

    def test_kind_ranking(self, xyz):
        x, y, _ = xyz
        c = Constant(5)
        assert compare(c, x) < 0
        assert compare(x, re_mult(x, y)) < 0
        assert compare(re_mult(x, y), re_add(x, y)) < 0
        assert compare(re_add(x, y), Negation(x)) < 0
        assert compare(Negation(x), c) > 0

    def test_within_kind(self, xyz):
        x, y, z = xyz
        assert compare(Constant(1), Constant(2)) < 0
        assert compare(y, x) > 0
        assert compare(re_add(x, y), re_add(x, z)) < 0
        assert compare(re_add(x, y), re_add(x, y, z)) < 0
        assert compare(re_add(x, y), re_add(y, x)) == 0

    def test_unary_operators_order_by_type(self, xyz):
        x, _, _ = xyz
        assert re_add(Sine(x), Cosine(x)).children == (Cosine(x), Sine(x))

    def test_sorted_children(self, xyz):
        x, y, _ = xyz
        assert re_add(re_mult(x, y), x).children == (x, re_mult(x, y))
        assert re_mult(y, Constant(2)).children == (Constant(2), y)

    def test_nested_commutativity(self, xyz):
        x, y, z = xyz
        assert re_mult(re_add(x, y), z) == re_mult(z, re_add(y, x))


class TestOrderPreserving:
    def test_keeps_given_order(self, xyz):
        x, y, _ = xyz
        assert re_add_unsorted(y, x).children == (y, x)
        assert re_mult_unsorted(y, x).children == (y, x)

    def test_out_of_order_is_not_equal(self, xyz):
        x, y, _ = xyz
        assert re_add_unsorted(y, x) != re_add_unsorted(x, y)
        assert re_add_unsorted(y, x) != re_add(x, y)
        assert re_mult_unsorted(y, x) != re_mult(y, x)

    def test_already_canonical_is_equal(self, xyz):
        x, y, _ = xyz
        assert re_add_unsorted(x, y) == re_add(y, x)
        assert re_mult_unsorted(x, y) == re_mult(y, x)

    def test_explicit_flag(self, xyz):
        x, y, _ = xyz
        assert Addition([y, x], sort_children=False).children == (y, x)
        assert Addition([y, x]).children == (x, y)


class TestEquality:
    def test_different_kinds_differ(self, xyz):
        x, y, _ = xyz
        assert re_add(x, y) != re_mult(x, y)
        assert hash(re_add(x, y)) != hash(re_mult(x, y))
        assert Negation(x) != Sine(x)

    def test_equal_hash_is_not_enough(self, xyz):
        x, y, z = xyz
        a = re_add(x, y)
        b = re_add(x, z)
        object.__setattr__(b, "_hash", hash(a))
        assert hash(a) == hash(b)
        assert a != b

    def test_usable_as_dict_key(self, xyz):
        x, y, _ = xyz
        seen = {re_add(x, y): "sum"}
        assert seen[re_add(y, x)] == "sum"

    def test_shared_subtrees(self, xyz):
        x, y, _ = xyz
        shared = re_add(x, y)
        expr = re_mult(shared, shared)
        assert expr.children[0] is expr.children[1]
        assert expr.evaluate(Assignment({x: 1.0, y: 2.0})) == 9.0


class TestVariables:
    def test_free_variables(self, xyz):
        x, y, z = xyz
        expr = re_mult(re_add(x, y), z)
        assert expr.variables() == {x, y, z}

    def test_constants_contribute_nothing(self, xyz):
        x, _, _ = xyz
        assert re_add(Constant(1), Sine(x)).variables() == {x}

    def test_returns_fresh_set(self, xyz):
        x, y, _ = xyz
        expr = re_add(x, y)
        expr.variables().add(Variable("w"))
        assert expr.variables() == {x, y}


class TestOperators:
    def test_sugar_builds_canonical_containers(self, xyz):
        x, y, z = xyz
        assert (x + y) * z == re_mult(re_add(x, y), z)
        assert y + x == re_add(x, y)
        assert 2 * x == re_mult(Constant(2), x)

    def test_subtraction_and_division(self, xyz):
        x, y, _ = xyz
        assert x - y == re_add(x, Negation(y))
        assert -x == Negation(x)
        value = (x / y).evaluate(Assignment({x: 6.0, y: 3.0}))
        assert value == pytest.approx(2.0)

    def test_rejects_non_numbers(self, xyz):
        x, _, _ = xyz
        with pytest.raises(TypeError):
            x + "y"

    def test_str(self, xyz):
        x, y, z = xyz
        assert str(re_add(re_mult(x, y), x)) == "x + x*y"
        assert str(re_mult(re_add(x, y), z)) == "z*(x + y)"
        assert str(Sine(x)) == "sin(x)"


class TestUnaryBase:
    def test_operator_without_rules(self, xyz):
        x, _, _ = xyz

        class Opaque(UnaryExpression):
            name = "opaque"

        expr = Opaque(x)
        assert expr.variables() == {x}
        with pytest.raises(NotImplementedError):
            expr.evaluate(Assignment({x: 1.0}))
        with pytest.raises(NotImplementedError):
            expr.derivative(x)


class TestAssignment:
    def test_get_and_put(self):
        x = Variable("x")
        a = Assignment()
        assert a.get(x) is None
        a.put(x, 2)
        assert a.get(x) == 2.0
        assert x in a
        assert len(a) == 1

    def test_from_names(self):
        a = Assignment.from_names({"x": 1, "y": 2})
        assert a.get(Variable("y")) == 2.0
        assert set(a) == {Variable("x"), Variable("y")}

    def test_contains_all(self):
        x, y = Variable("x"), Variable("y")
        a = Assignment({x: 1.0})
        assert a.contains_all({x})
        assert not a.contains_all({x, y})
        assert a.contains_all(set())

    def test_rejects_non_variable_keys(self):
        with pytest.raises(TypeError):
            Assignment().put("x", 1.0)

    def test_copy_is_independent(self):
        x = Variable("x")
        a = Assignment({x: 1.0})
        b = a.copy()
        b.put(x, 5.0)
        assert a.get(x) == 1.0

    def test_mutation_between_evaluations(self):
        x = Variable("x")
        expr = re_add(x, Constant(1))
        a = Assignment({x: 1.0})
        assert expr.evaluate(a) == 2.0
        a.put(x, 10.0)
        assert expr.evaluate(a) == 11.0

    def test_repr(self):
        assert repr(Assignment.from_names({"x": 2})) == "Assignment(x=2)"
