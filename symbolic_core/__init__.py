# Python

"""Symbolic Core Package

Immutable, canonically constructed expression trees with structural
hashing and ordering, differentiation, substitution and expansion.
"""

from .expression_tree import (
  Expression,
  Node, Number, Integer, Rational, Symbol, Add, Mul, Pow,
  Sin, Cos, FunctionSymbol, Derivative, NodeType,
  zero, one, minus_one,
  as_node, symbol, integer, rational, sin, cos, function_symbol, derivative,
  add, add_many, sub, neg, mul, mul_many, div, pow, abs_,
  get_global_cache, clear_global_cache,
  expand, to_sympy, from_sympy, sympy_equivalent, latex_representation
)
from .errors import (
  SymbolicCoreError, NotASymbol, InvalidRational, NumericOverflow, InvariantViolation
)
from .config import CoreConfig, get_config, configure, reset_config
from .logging_system import LogLevel, get_logger, configure_logging, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression",
  "Node", "Number", "Integer", "Rational", "Symbol", "Add", "Mul", "Pow",
  "Sin", "Cos", "FunctionSymbol", "Derivative", "NodeType",
  "zero", "one", "minus_one",
  "as_node", "symbol", "integer", "rational", "sin", "cos", "function_symbol", "derivative",
  "add", "add_many", "sub", "neg", "mul", "mul_many", "div", "pow", "abs_",
  "get_global_cache", "clear_global_cache",
  "expand", "to_sympy", "from_sympy", "sympy_equivalent", "latex_representation",
  "SymbolicCoreError", "NotASymbol", "InvalidRational", "NumericOverflow", "InvariantViolation",
  "CoreConfig", "get_config", "configure", "reset_config",
  "LogLevel", "get_logger", "configure_logging", "set_log_level"
]
