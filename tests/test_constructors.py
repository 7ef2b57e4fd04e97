from fractions import Fraction

import pytest

from symbolic_core import (
    Add, Mul, Pow, Sin, Cos, FunctionSymbol, Integer, Rational,
    InvariantViolation, configure,
    add, add_many, sub, neg, mul, mul_many, div, pow, sin, cos,
    function_symbol, integer, rational, symbol, as_node, abs_, zero, one, minus_one
)


def test_symbol_identity_is_name():
    assert symbol("x") == symbol("x")
    assert symbol("x") != symbol("y")
    assert symbol("x").name == "x"


def test_sin_cos_of_zero():
    assert sin(zero) == zero
    assert cos(zero) == one
    assert sin(integer(0)) is zero


def test_sin_cos_simplification_is_partial(x):
    """Only the literal zero argument is reduced"""
    assert isinstance(sin(x), Sin)
    assert isinstance(cos(x), Cos)
    assert isinstance(sin(one), Sin)
    assert isinstance(cos(rational(1, 2)), Cos)
    assert isinstance(sin(sub(x, x)), Integer)


def test_function_symbol_never_reduces(x):
    f = function_symbol("f", zero)
    assert isinstance(f, FunctionSymbol)
    assert f.name == "f" and f.arg == zero
    assert function_symbol("f", x) != function_symbol("g", x)


def test_add_is_commutative(x, y):
    assert add(x, y) == add(y, x)
    assert add(x, y) is add(y, x)
    assert hash(add(x, y)) == hash(add(y, x))


def test_add_flattens(x, y, z):
    left = add(add(x, y), z)
    right = add(x, add(y, z))
    assert left == right
    assert isinstance(left, Add)
    assert len(left.terms) == 3


def test_add_collects_like_terms(x, y):
    assert add(x, x) == mul(2, x)
    assert sub(x, x) == zero
    assert add(add(x, 3), add(y, -3)) == add(x, y)
    assert add_many([x, y, x, 1, 2]) == add_many([mul(2, x), y, 3])


def test_add_identity(x):
    assert add(x, 0) is x
    assert add(0, x) is x


def test_mul_identities(x):
    assert mul(x, 1) is x
    assert mul(x, 0) == zero
    assert mul(1, x) is x


def test_mul_is_commutative(x, y):
    assert mul(x, y) == mul(y, x)
    assert mul(mul(x, y), 3) == mul(3, mul(y, x))


def test_mul_collects_powers(x):
    assert mul(x, x) == pow(x, 2)
    assert mul(pow(x, 2), pow(x, -2)) == one
    assert mul_many([x, x, x]) == pow(x, 3)


def test_number_distributes_over_sum(x, y):
    assert mul(2, add(x, y)) == add(mul(2, x), mul(2, y))
    assert neg(add(x, y)) == add(neg(x), neg(y))


def test_sum_times_symbol_is_kept(x, y, z):
    product = mul(z, add(x, y))
    assert isinstance(product, Mul)


def test_pow_rules(x, y):
    assert pow(x, 0) == one
    assert pow(x, 1) is x
    assert pow(1, x) == one
    assert pow(mul(2, x), 2) == mul(4, pow(x, 2))
    assert pow(pow(x, 2), 3) == pow(x, 6)
    assert pow(mul(x, y), 2) == mul(pow(x, 2), pow(y, 2))
    assert isinstance(pow(x, y), Pow)


def test_div_and_neg(x, y):
    assert div(x, x) == one
    assert neg(neg(x)) == x
    assert div(x, y) == mul(x, pow(y, -1))
    assert div(6, 4) == rational(3, 2)


def test_as_node_coercion():
    assert as_node(3) == integer(3)
    assert as_node(Fraction(1, 2)) == rational(1, 2)
    with pytest.raises(TypeError):
        as_node(1.5)
    with pytest.raises(TypeError):
        as_node("x")


def test_direct_construction_must_be_canonical(x):
    with pytest.raises(InvariantViolation):
        Sin(zero)
    with pytest.raises(InvariantViolation):
        Rational(Fraction(4, 2))
    with pytest.raises(InvariantViolation):
        Add(zero, ((x, one),))
    with pytest.raises(InvariantViolation):
        Pow(x, one)
    with pytest.raises(InvariantViolation):
        Mul(one, ((x, one),))


def test_canonical_check_can_be_disabled():
    configure(validate_canonical=False, intern_nodes=False)
    node = Cos(zero)
    assert node.arg == zero


def test_nodes_are_immutable(x):
    node = sin(x)
    with pytest.raises(AttributeError):
        node.arg = zero
    with pytest.raises(AttributeError):
        del node.arg
    assert node.arg == x


def test_constructor_results_are_canonical(x, y):
    from symbolic_core.expression_tree.utils import ExpressionValidator
    samples = [
        add(mul(3, x), pow(add(x, y), 2)),
        mul(minus_one, sin(add(x, 1))),
        div(cos(x), add(y, rational(1, 3))),
        pow(mul(2, x), rational(1, 2)),
    ]
    for node in samples:
        assert ExpressionValidator.is_canonical_tree(node)


def test_abs_of_numbers():
    assert abs_(integer(-7)) == integer(7)
    assert abs_(rational(-3, 4)) == rational(3, 4)
    assert abs_(zero) == zero
    assert abs_(5) == integer(5)


def test_abs_of_expressions(x):
    assert abs_(x) == pow(pow(x, 2), rational(1, 2))
    assert abs_(mul(-3, x)) == mul(3, abs_(x))
    assert abs_(abs_(x)) == abs_(x)
    assert abs_(neg(x)) == abs_(x)
