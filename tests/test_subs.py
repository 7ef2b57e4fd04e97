from symbolic_core import (
    Derivative,
    add, mul, pow, sin, cos, function_symbol, derivative, integer, rational, symbol,
    zero, one, minus_one
)


def test_subs_symbol(x, y):
    assert x.subs({x: y}) == y
    assert y.subs({x: integer(3)}) == y


def test_subs_simplifies_through_constructors(x, y):
    expr = add(pow(x, 2), x)
    assert expr.subs({x: integer(2)}) == integer(6)
    assert mul(2, mul(x, y)).subs({x: y}) == mul(2, pow(y, 2))
    assert sin(x).subs({x: zero}) == zero
    assert cos(add(x, -1)).subs({x: one}) == one


def test_subs_returns_self_when_unchanged(x, y, z):
    expr = add(sin(x), mul(x, y))
    assert expr.subs({z: one}) is expr
    assert expr.subs({}) is expr


def test_subs_whole_expression(x, y):
    expr = add(x, y)
    assert expr.subs({expr: integer(1)}) == one


def test_subs_is_structural_only(x, y, z):
    # x + y is not a structural child of x + y + z
    expr = add(add(x, y), z)
    assert expr.subs({add(x, y): integer(1)}) == expr


def test_subs_is_simultaneous(x, y):
    expr = add(x, mul(2, y))
    assert expr.subs({x: y, y: x}) == add(y, mul(2, x))


def test_subs_inside_function_symbol(x, y):
    f = function_symbol("f", x)
    assert f.subs({x: y}) == function_symbol("f", y)
    assert f.subs({f: pow(x, 3)}) == pow(x, 3)


def test_subs_into_derivative_reevaluates(x):
    d = derivative(function_symbol("f", x), [x])
    assert isinstance(d, Derivative)
    assert d.subs({function_symbol("f", x): pow(x, 2)}) == mul(2, x)


def test_numeric_keys_only_match_real_operands(x, y, z):
    # The zero constant and unit coefficients of a sum are not operands
    assert add(x, y).subs({zero: z}) == add(x, y)
    assert add(x, y).subs({one: integer(2)}) == add(x, y)
    assert mul(x, y).subs({one: integer(2)}) == mul(x, y)
    assert pow(x, 2).subs({one: z}) == pow(x, 2)


def test_numeric_keys_match_numeric_operands(x, y):
    assert add(x, 1).subs({one: integer(2)}) == add(x, 2)
    assert mul(3, x).subs({integer(3): y}) == mul(x, y)
    assert pow(x, 2).subs({integer(2): y}) == pow(x, y)
    assert mul(minus_one, x).subs({minus_one: integer(5)}) == mul(5, x)


def test_subs_matches_whole_summands_and_factors(x, y, z):
    expr = add(mul(2, x), y)
    assert expr.subs({mul(2, x): z}) == add(y, z)
    assert mul(x, pow(y, 2)).subs({pow(y, 2): z}) == mul(x, z)


def test_subs_into_derivative_variables(x):
    d = function_symbol("f", x).diff(x)
    result = d.subs({x: integer(0)})
    assert isinstance(result, Derivative)
    assert result.arg == function_symbol("f", integer(0))
    assert result.variables == (x,)


def test_subs_renames_derivative_variables(x):
    t = symbol("t")
    d = derivative(function_symbol("f", x), [x, x])
    assert d.subs({x: t}) == derivative(function_symbol("f", t), [t, t])


def test_subs_derivative_variable_and_constant_argument(x):
    d = function_symbol("f", x).diff(x)
    assert d.subs({function_symbol("f", x): integer(3), x: rational(1, 2)}) == zero
