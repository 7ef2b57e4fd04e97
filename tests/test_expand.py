from symbolic_core import (
    add, add_many, sub, mul, mul_many, pow, sin, function_symbol, derivative,
    expand, integer, rational, sympy_equivalent
)


def test_expand_square(x, y):
    result = expand(pow(add(x, y), 2))
    assert result == add_many([pow(x, 2), mul(2, mul(x, y)), pow(y, 2)])


def test_expand_product_of_sums(x, y):
    result = expand(mul(add(x, 1), add(y, -1)))
    assert result == add_many([mul(x, y), mul(-1, x), y, integer(-1)])


def test_expand_symbol_times_sum(x, y, z):
    assert expand(mul(z, add(x, y))) == add(mul(x, z), mul(y, z))


def test_expand_cancels(x):
    expr = mul(add(x, 1), sub(x, 1))
    assert expand(expr) == sub(pow(x, 2), 1)


def test_expand_is_idempotent(x, y, z):
    samples = [
        pow(add(x, y), 3),
        mul(add(x, 1), pow(add(y, z), 2)),
        pow(mul(x, add(y, 1)), 2),
        sin(pow(add(x, 1), 2)),
        mul(pow(add(x, y), -2), add(x, 1)),
    ]
    for expr in samples:
        once = expand(expr)
        assert expand(once) == once


def test_expand_preserves_value(x, y, z):
    samples = [
        pow(add(x, y), 4),
        mul_many([add(x, rational(1, 2)), add(y, z), add(x, z)]),
        pow(mul(2, add(x, y)), 2),
    ]
    for expr in samples:
        assert sympy_equivalent(expand(expr), expr)


def test_expand_negative_power_expands_denominator(x, y):
    result = expand(pow(add(x, y), -2))
    assert result == pow(add_many([pow(x, 2), mul(2, mul(x, y)), pow(y, 2)]), -1)


def test_expand_leaves_non_integer_powers(x, y):
    expr = pow(add(x, y), rational(1, 2))
    assert expand(expr) == expr


def test_expand_inside_functions(x):
    assert expand(sin(pow(add(x, 1), 2))) == sin(add_many([pow(x, 2), mul(2, x), 1]))
    f = function_symbol("f", mul(x, add(x, 1)))
    assert expand(f) == function_symbol("f", add(pow(x, 2), x))


def test_expand_derivative_argument(x, y):
    d = derivative(function_symbol("f", x), [x])
    assert expand(d) == d


def test_expand_method_matches_function(x, y):
    expr = pow(add(x, y), 2)
    assert expr.expand() == expand(expr)
