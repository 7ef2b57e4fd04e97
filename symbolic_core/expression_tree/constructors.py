"""Canonical constructors.

These are the only sanctioned way to build expression nodes. Each one applies
its simplification rules before a node is created, so structural equality of
the results is all that is needed to compare expressions.
"""

from fractions import Fraction
from operator import itemgetter
from typing import Dict, Iterable, Sequence

import numpy as np
import sympy as sp

from .core.base import Node
from .core.node import Symbol, Add, Mul, Pow, Sin, Cos, FunctionSymbol
from .core.numbers import (
  Number, Integer, ExactValue, make_integer, number_from_value,
  add_values, mul_values, pow_value, zero, one, minus_one
)
from .optimization.node_cache import get_global_cache
from ..errors import InvalidRational

__all__ = [
  'as_node', 'symbol', 'integer', 'rational', 'sin', 'cos', 'function_symbol', 'derivative',
  'add', 'add_many', 'sub', 'neg', 'mul', 'mul_many', 'div', 'pow', 'abs_',
  'zero', 'one', 'minus_one',
]


def as_node(value) -> Node:
  """Coerce exact numbers and existing nodes into nodes"""
  if isinstance(value, Node):
    return value
  if isinstance(value, bool):
    raise TypeError("Booleans are not expression values")
  if isinstance(value, (int, np.integer)):
    return make_integer(int(value))
  if isinstance(value, Fraction):
    return number_from_value(value)
  if isinstance(value, sp.Rational):
    return number_from_value(Fraction(int(value.p), int(value.q)))
  raise TypeError(f"Cannot convert {type(value).__name__} to an expression node")


# Leaves

def symbol(name: str) -> Symbol:
  if not isinstance(name, str):
    raise TypeError(f"Symbol name must be a string, got {type(name).__name__}")
  return get_global_cache().intern(Symbol, name)


def integer(value) -> Integer:
  """Integer from a Python int, base-10 text, a numpy integer or a sympy Integer"""
  if isinstance(value, Integer):
    return value
  if isinstance(value, bool):
    raise TypeError("Booleans are not integer values")
  if isinstance(value, str):
    return make_integer(int(value.strip(), 10))
  if isinstance(value, (int, np.integer, sp.Integer)):
    return make_integer(int(value))
  raise TypeError(f"Cannot build an Integer from {type(value).__name__}")


def _integer_operand(value) -> int:
  if isinstance(value, Integer):
    return value.value
  if isinstance(value, (int, np.integer, sp.Integer)) and not isinstance(value, bool):
    return int(value)
  raise InvalidRational(f"Rational operands must be integers, got {value!r}")


def rational(numerator, denominator) -> Number:
  """Reduced ratio; collapses to Integer when the denominator reduces to one"""
  p = _integer_operand(numerator)
  q = _integer_operand(denominator)
  if q == 0:
    raise InvalidRational(f"Zero denominator in {p}/{q}")
  return number_from_value(Fraction(p, q))


# Functions

def sin(arg) -> Node:
  # Only the literal zero argument is reduced
  arg = as_node(arg)
  if arg == zero:
    return zero
  return get_global_cache().intern(Sin, arg)


def cos(arg) -> Node:
  arg = as_node(arg)
  if arg == zero:
    return one
  return get_global_cache().intern(Cos, arg)


def function_symbol(name: str, arg) -> FunctionSymbol:
  if not isinstance(name, str):
    raise TypeError(f"Function name must be a string, got {type(name).__name__}")
  return get_global_cache().intern(FunctionSymbol, name, as_node(arg))


def derivative(expr, variables: Sequence[Symbol]) -> Node:
  """Differentiate `expr` by each variable in turn.

  Closed forms are used wherever they exist; an unevaluated Derivative is
  left only where there is none (opaque functions, variable exponents).
  """
  result = as_node(expr)
  for variable in variables:
    result = result.diff(variable)
  return result


# Sums

def add(left, right) -> Node:
  return add_many((left, right))


def add_many(args: Iterable) -> Node:
  coef: ExactValue = 0
  terms: Dict[Node, ExactValue] = {}
  for arg in args:
    coef = _absorb_summand(as_node(arg), 1, coef, terms)
  return _add_from_dict(coef, terms)


def sub(left, right) -> Node:
  return add_many((left, mul(minus_one, right)))


def neg(arg) -> Node:
  return mul(minus_one, arg)


def _absorb_summand(node: Node, weight: ExactValue, coef: ExactValue,
                    terms: Dict[Node, ExactValue]) -> ExactValue:
  if isinstance(node, Number):
    return add_values(coef, mul_values(weight, node.value))
  if isinstance(node, Add):
    coef = add_values(coef, mul_values(weight, node.coef.value))
    for term, term_coef in node.terms:
      _accumulate_term(terms, term, mul_values(weight, term_coef.value))
    return coef
  if isinstance(node, Mul) and not node.coef.is_one:
    return _absorb_summand(_strip_coefficient(node), mul_values(weight, node.coef.value), coef, terms)
  _accumulate_term(terms, node, weight)
  return coef


def _accumulate_term(terms: Dict[Node, ExactValue], term: Node, weight: ExactValue):
  if term in terms:
    terms[term] = add_values(terms[term], weight)
  else:
    terms[term] = weight


def _strip_coefficient(node: Mul) -> Node:
  if len(node.factors) > 1:
    return get_global_cache().intern(Mul, one, node.factors)
  base, exp = node.factors[0]
  if exp == one:
    return base
  return get_global_cache().intern(Pow, base, exp)


def _add_from_dict(coef: ExactValue, terms: Dict[Node, ExactValue]) -> Node:
  pairs = [(term, number_from_value(term_coef)) for term, term_coef in terms.items() if term_coef != 0]
  if not pairs:
    return number_from_value(coef)
  if coef == 0 and len(pairs) == 1:
    term, term_coef = pairs[0]
    return term if term_coef.is_one else mul(term_coef, term)
  pairs.sort(key=itemgetter(0))
  return get_global_cache().intern(Add, number_from_value(coef), tuple(pairs))


# Products

def mul(left, right) -> Node:
  return mul_many((left, right))


def mul_many(args: Iterable) -> Node:
  coef: ExactValue = 1
  factors: Dict[Node, Node] = {}
  for arg in args:
    coef = _absorb_factor(as_node(arg), coef, factors)
  return _mul_from_dict(coef, factors)


def div(left, right) -> Node:
  return mul(left, pow(right, minus_one))


def _absorb_factor(node: Node, coef: ExactValue, factors: Dict[Node, Node]) -> ExactValue:
  if isinstance(node, Number):
    return mul_values(coef, node.value)
  if isinstance(node, Mul):
    coef = mul_values(coef, node.coef.value)
    for base, exp in node.factors:
      _accumulate_power(factors, base, exp)
    return coef
  if isinstance(node, Pow):
    _accumulate_power(factors, node.base, node.exp)
    return coef
  _accumulate_power(factors, node, one)
  return coef


def _accumulate_power(factors: Dict[Node, Node], base: Node, exp: Node):
  if base in factors:
    factors[base] = add(factors[base], exp)
  else:
    factors[base] = exp


def _is_zero(node: Node) -> bool:
  return isinstance(node, Number) and node.is_zero


def _needs_rewrite(base: Node, exp: Node) -> bool:
  """Whether base^exp reduces further and cannot be stored as a factor"""
  if isinstance(exp, Integer) and isinstance(base, (Number, Mul, Pow)):
    return True
  return isinstance(base, Number) and (base.is_zero or base.is_one)


def _mul_from_dict(coef: ExactValue, factors: Dict[Node, Node]) -> Node:
  while True:
    pending = [(base, exp) for base, exp in factors.items()
               if _is_zero(exp) or _needs_rewrite(base, exp)]
    if not pending:
      break
    for base, exp in pending:
      del factors[base]
      if not _is_zero(exp):
        coef = _absorb_factor(pow(base, exp), coef, factors)

  if coef == 0:
    return zero
  if not factors:
    return number_from_value(coef)
  if len(factors) == 1:
    (base, exp), = factors.items()
    if coef == 1:
      return base if exp == one else get_global_cache().intern(Pow, base, exp)
    if isinstance(base, Add) and exp == one:
      # A number times a lone sum is distributed over its terms
      scaled = {term: mul_values(coef, term_coef.value) for term, term_coef in base.terms}
      return _add_from_dict(mul_values(coef, base.coef.value), scaled)

  pairs = sorted(factors.items(), key=itemgetter(0))
  return get_global_cache().intern(Mul, number_from_value(coef), tuple(pairs))


# Powers

def pow(base, exp) -> Node:
  base = as_node(base)
  exp = as_node(exp)

  if isinstance(exp, Number):
    if exp.is_zero:
      return one
    if exp.is_one:
      return base

  if isinstance(base, Number):
    if base.is_one:
      return one
    if base.is_zero and isinstance(exp, Number):
      if exp.is_negative:
        raise ZeroDivisionError("Zero raised to a negative power")
      return zero
    if isinstance(exp, Integer):
      return number_from_value(pow_value(base.value, exp.value))

  if isinstance(exp, Integer):
    if isinstance(base, Mul):
      return mul_many([pow(base.coef, exp)] + [pow(b, mul(e, exp)) for b, e in base.factors])
    if isinstance(base, Pow):
      return pow(base.base, mul(base.exp, exp))

  return get_global_cache().intern(Pow, base, exp)


def abs_(arg) -> Node:
  """Absolute value.

  Numbers fold exactly. There is no absolute-value node kind, so any other
  argument `u` becomes the real-valued `(u^2)^(1/2)`, with a numeric
  coefficient pulled out first.
  """
  arg = as_node(arg)
  if isinstance(arg, Number):
    return number_from_value(abs(arg.value))
  if isinstance(arg, Mul) and not arg.coef.is_one:
    return mul(number_from_value(abs(arg.coef.value)), abs_(_strip_coefficient(arg)))
  return pow(pow(arg, 2), number_from_value(Fraction(1, 2)))
