import sympy as sp
from sympy.core.function import AppliedUndef

from ..core.base import Node
from ..constructors import (
  symbol, rational, integer, add_many, mul_many, pow, sin, cos, function_symbol, derivative
)
from ...logging_system import log_warning


def to_sympy(node: Node) -> sp.Basic:
  """Convert a node tree into the equivalent SymPy expression"""
  return node.to_sympy()


def from_sympy(expr) -> Node:
  """Rebuild a SymPy expression through the canonical constructors"""
  expr = sp.sympify(expr)

  if isinstance(expr, sp.Integer):
    return integer(int(expr))
  if isinstance(expr, sp.Rational):
    return rational(int(expr.p), int(expr.q))
  if isinstance(expr, sp.Symbol):
    return symbol(expr.name)
  if isinstance(expr, sp.Add):
    return add_many([from_sympy(arg) for arg in expr.args])
  if isinstance(expr, sp.Mul):
    return mul_many([from_sympy(arg) for arg in expr.args])
  if isinstance(expr, sp.Pow):
    return pow(from_sympy(expr.base), from_sympy(expr.exp))
  if isinstance(expr, sp.sin):
    return sin(from_sympy(expr.args[0]))
  if isinstance(expr, sp.cos):
    return cos(from_sympy(expr.args[0]))
  if isinstance(expr, AppliedUndef) and len(expr.args) == 1:
    return function_symbol(expr.func.__name__, from_sympy(expr.args[0]))
  if isinstance(expr, sp.Derivative):
    variables = []
    for variable, count in expr.variable_count:
      variables.extend([from_sympy(variable)] * int(count))
    return derivative(from_sympy(expr.expr), variables)

  log_warning(f"No node kind for SymPy expression {expr!r}")
  raise ValueError(f"Cannot convert SymPy {type(expr).__name__} to an expression node")


def sympy_equivalent(left: Node, right: Node) -> bool:
  """Mathematical (not structural) equivalence, decided by SymPy"""
  difference = sp.simplify(left.to_sympy() - right.to_sympy())
  return difference == 0


def latex_representation(node: Node) -> str:
  """LaTeX text of the expression"""
  return sp.latex(node.to_sympy())
