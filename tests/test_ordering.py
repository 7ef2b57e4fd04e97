import copy
import random

from symbolic_core import (
    add, mul, pow, sin, cos, function_symbol, derivative, integer, rational, symbol
)


def _sample_nodes():
    x, y = symbol("x"), symbol("y")
    return [
        integer(-3), integer(7), rational(1, 2), rational(-5, 3),
        x, y, add(x, 1), add(x, y), mul(2, x), mul(x, y),
        pow(x, 2), pow(x, y), sin(x), sin(y), cos(x),
        function_symbol("f", x), function_symbol("g", x), function_symbol("f", y),
        derivative(function_symbol("f", x), [x]),
    ]


def test_equal_nodes_hash_equal():
    x, y = symbol("x"), symbol("y")
    left = add(mul(3, pow(x, 2)), sin(y))
    right = add(sin(y), mul(pow(x, 2), 3))
    assert left == right
    assert hash(left) == hash(right)
    assert len({left, right}) == 1


def test_nodes_as_dict_keys():
    x = symbol("x")
    table = {sin(x): "sine", cos(x): "cosine"}
    assert table[sin(symbol("x"))] == "sine"


def test_compare_is_antisymmetric_and_zero_on_equality():
    nodes = _sample_nodes()
    for a in nodes:
        for b in nodes:
            assert a.compare(b) == -b.compare(a)
            assert (a.compare(b) == 0) == (a == b)


def test_compare_is_transitive():
    nodes = _sample_nodes()
    for a in nodes:
        for b in nodes:
            for c in nodes:
                if a.compare(b) < 0 and b.compare(c) < 0:
                    assert a.compare(c) < 0


def test_sorting_is_independent_of_input_order():
    nodes = _sample_nodes()
    expected = sorted(nodes)
    shuffled = list(nodes)
    random.Random(0).shuffle(shuffled)
    assert sorted(shuffled) == expected


def test_kind_rank_orders_different_kinds():
    x = symbol("x")
    assert integer(100) < rational(1, 2) < x < add(x, 1) < mul(2, x) < pow(x, 2)
    assert pow(x, 2) < sin(x) < cos(x) < function_symbol("f", x)


def test_function_symbol_orders_by_name_first():
    x, y = symbol("x"), symbol("y")
    assert function_symbol("f", y) < function_symbol("g", x)
    assert function_symbol("f", x) < function_symbol("f", y)


def test_comparison_with_non_nodes():
    x = symbol("x")
    assert x != "x"
    assert not (x == 1.0)


def test_copies_share_the_node():
    node = add(symbol("x"), sin(symbol("y")))
    assert copy.copy(node) is node
    assert copy.deepcopy(node) is node
    assert node.copy() is node
