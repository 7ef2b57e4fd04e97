"""Expression Tree Module

Canonical expression trees for the symbolic core.
"""

from .expression import Expression
from .core.base import Node
from .core.numbers import Number, Integer, Rational, zero, one, minus_one
from .core.node import Symbol, Add, Mul, Pow, Sin, Cos, FunctionSymbol, Derivative
from .core.operators import NodeType
from .constructors import (
  as_node, symbol, integer, rational, sin, cos, function_symbol, derivative,
  add, add_many, sub, neg, mul, mul_many, div, pow, abs_
)
from .optimization import NodeCache, get_global_cache, clear_global_cache
from .utils import (
  ExpressionExpander, ExpressionValidator, expand,
  to_sympy, from_sympy, sympy_equivalent, latex_representation
)

__all__ = [
  "Expression",
  "Node", "Number", "Integer", "Rational", "Symbol", "Add", "Mul", "Pow",
  "Sin", "Cos", "FunctionSymbol", "Derivative", "NodeType",
  "zero", "one", "minus_one",
  "as_node", "symbol", "integer", "rational", "sin", "cos", "function_symbol", "derivative",
  "add", "add_many", "sub", "neg", "mul", "mul_many", "div", "pow", "abs_",
  "NodeCache", "get_global_cache", "clear_global_cache",
  "ExpressionExpander", "ExpressionValidator", "expand",
  "to_sympy", "from_sympy", "sympy_equivalent", "latex_representation"
]
