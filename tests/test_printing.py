from symbolic_core import (
    add, sub, mul, div, neg, pow, sin, cos, function_symbol, derivative,
    integer, rational
)


def test_numbers():
    assert integer(-12).to_string() == "-12"
    assert rational(1, 2).to_string() == "1/2"
    assert str(rational(-2, 6)) == "-1/3"


def test_sums(x, y):
    assert add(x, 2).to_string() == "x + 2"
    assert sub(x, y).to_string() == "x - y"
    assert add(x, pow(x, 2)).to_string() == "x + x^2"
    assert sub(2, x).to_string() == "-x + 2"


def test_products(x, y, z):
    assert mul(2, x).to_string() == "2*x"
    assert neg(x).to_string() == "-x"
    assert mul(-2, x).to_string() == "-2*x"
    assert mul(rational(1, 2), x).to_string() == "(1/2)*x"
    assert mul(z, add(x, y)).to_string() == "z*(x + y)"
    assert div(x, y).to_string() == "x*y^(-1)"


def test_powers(x, y):
    assert pow(add(x, y), 2).to_string() == "(x + y)^2"
    assert pow(x, -1).to_string() == "x^(-1)"
    assert pow(x, rational(1, 2)).to_string() == "x^(1/2)"
    assert pow(sin(x), 2).to_string() == "sin(x)^2"
    assert pow(x, add(y, 1)).to_string() == "x^(y + 1)"


def test_functions(x):
    assert sin(add(x, 1)).to_string() == "sin(x + 1)"
    assert cos(mul(2, x)).to_string() == "cos(2*x)"
    assert function_symbol("f", x).to_string() == "f(x)"
    assert derivative(function_symbol("f", x), [x, x]).to_string() == "Derivative(f(x), x, x)"


def test_repr(x):
    assert repr(sin(x)) == "Sin('sin(x)')"
