import numpy as np
import sympy as sp
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from .core.base import Node
from .core.numbers import Integer, Rational, zero
from .core.node import Symbol
from .constructors import as_node, add, sub, mul, div, pow, neg, abs_, symbol
from .utils.expander import expand
from .utils.sympy_utils import from_sympy
from .utils.tree_utils import tree_size, calculate_tree_depth
from .utils.validator import ExpressionValidator


def _unwrap(value) -> Node:
  if isinstance(value, Expression):
    return value.root
  return as_node(value)


class Expression:
  """Handle holding one canonical node.

  The handle itself can be re-pointed with `assign`; the node it refers to
  never changes.
  """

  __slots__ = ('root', '_string_cache')

  def __init__(self, root=None):
    node = zero if root is None else _unwrap(root)
    ExpressionValidator.check_node(node)
    self.root = node
    self._string_cache: Optional[str] = None

  @classmethod
  def symbol(cls, name: str) -> 'Expression':
    return cls(symbol(name))

  def assign(self, other) -> 'Expression':
    """Point this handle at another node"""
    node = _unwrap(other)
    ExpressionValidator.check_node(node)
    self.root = node
    self.clear_cache()
    return self

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def clear_cache(self):
    """Clear cached values"""
    self._string_cache = None

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"

  def copy(self) -> 'Expression':
    return Expression(self.root)

  # Type predicates

  @property
  def is_integer(self) -> bool:
    return isinstance(self.root, Integer)

  @property
  def is_rational(self) -> bool:
    return isinstance(self.root, Rational)

  @property
  def is_symbol(self) -> bool:
    return isinstance(self.root, Symbol)

  # Arithmetic

  def __add__(self, other) -> 'Expression':
    return Expression(add(self.root, _unwrap(other)))

  def __radd__(self, other) -> 'Expression':
    return Expression(add(_unwrap(other), self.root))

  def __sub__(self, other) -> 'Expression':
    return Expression(sub(self.root, _unwrap(other)))

  def __rsub__(self, other) -> 'Expression':
    return Expression(sub(_unwrap(other), self.root))

  def __mul__(self, other) -> 'Expression':
    return Expression(mul(self.root, _unwrap(other)))

  def __rmul__(self, other) -> 'Expression':
    return Expression(mul(_unwrap(other), self.root))

  def __truediv__(self, other) -> 'Expression':
    return Expression(div(self.root, _unwrap(other)))

  def __rtruediv__(self, other) -> 'Expression':
    return Expression(div(_unwrap(other), self.root))

  def __pow__(self, other) -> 'Expression':
    return Expression(pow(self.root, _unwrap(other)))

  def __rpow__(self, other) -> 'Expression':
    return Expression(pow(_unwrap(other), self.root))

  def __neg__(self) -> 'Expression':
    return Expression(neg(self.root))

  def __abs__(self) -> 'Expression':
    return Expression(abs_(self.root))

  # Transformations

  def diff(self, x) -> 'Expression':
    return Expression(self.root.diff(_unwrap(x)))

  def subs(self, mapping: Mapping) -> 'Expression':
    node_mapping = {_unwrap(key): _unwrap(value) for key, value in mapping.items()}
    return Expression(self.root.subs(node_mapping))

  def expand(self) -> 'Expression':
    return Expression(expand(self.root))

  # Inspection

  def size(self) -> int:
    """Node count"""
    return tree_size(self.root)

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  # Numerics and interop

  def evaluate(self, values: Dict[str, Any]) -> np.ndarray:
    return self.root.evaluate(values)

  def lambdify(self, names: Sequence[str]) -> Callable:
    """Numerical function of the given symbols, in order"""
    names = list(names)
    root = self.root

    def function(*arrays):
      if len(arrays) != len(names):
        raise ValueError(f"Expected {len(names)} arguments, got {len(arrays)}")
      return root.evaluate(dict(zip(names, arrays)))
    return function

  def to_sympy(self) -> sp.Basic:
    return self.root.to_sympy()

  @classmethod
  def from_sympy(cls, expr) -> 'Expression':
    return cls(from_sympy(expr))

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if isinstance(other, Expression):
      return self.root == other.root
    if isinstance(other, Node):
      return self.root == other
    return NotImplemented
