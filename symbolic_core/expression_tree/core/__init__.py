"""Core expression tree components."""

from .base import Node
from .numbers import Number, Integer, Rational, zero, one, minus_one
from .node import Symbol, Add, Mul, Pow, Sin, Cos, FunctionSymbol, Derivative
from .operators import NodeType

__all__ = [
  'Node', 'Number', 'Integer', 'Rational', 'Symbol', 'Add', 'Mul', 'Pow',
  'Sin', 'Cos', 'FunctionSymbol', 'Derivative', 'NodeType',
  'zero', 'one', 'minus_one'
]
