from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Tuple

import numpy as np
import sympy as sp

from .operators import NodeType, PRECEDENCE_ATOM, compare_values
from ...config import get_config
from ...errors import InvariantViolation, NotASymbol
from ...logging_system import log_critical


def require_canonical(condition: bool, kind: str, detail: str):
  """Fail fast when a node is about to be built in non-canonical form"""
  if condition or not get_config().validate_canonical:
    return
  message = f"Non-canonical {kind} node: {detail}"
  log_critical(message)
  raise InvariantViolation(message)


def compare_parts(left: Any, right: Any) -> int:
  """Three-way comparison of structural parts (nodes, tuples of parts, plain values)"""
  if isinstance(left, Node):
    return left.compare(right)
  if isinstance(left, tuple):
    if len(left) != len(right):
      return compare_values(len(left), len(right))
    for l_part, r_part in zip(left, right):
      cmp = compare_parts(l_part, r_part)
      if cmp != 0:
        return cmp
    return 0
  return compare_values(left, right)


class Node(ABC):
  """Immutable expression node.

  Subclasses describe themselves through `_key()`, the tuple of structural
  parts that drives hashing, equality, ordering and interning. Substitution
  and traversal go through `args`, the real operands.
  Build nodes with the canonical constructors, not with the classes directly.
  """

  __slots__ = ('_hash_cache', '__weakref__')

  type_code: NodeType

  def __init__(self):
    object.__setattr__(self, '_hash_cache', None)

  def __setattr__(self, name, value):
    raise AttributeError(f"{type(self).__name__} nodes are immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} nodes are immutable")

  def copy(self) -> 'Node':
    # Immutable, so every holder can share the same instance
    return self

  def __copy__(self):
    return self

  def __deepcopy__(self, memo):
    return self

  @abstractmethod
  def _key(self) -> tuple:
    pass

  @property
  def args(self) -> Tuple['Node', ...]:
    """Operands of the expression; empty for leaves.

    Coefficients and unit exponents that a kind only stores internally are
    not children unless they are real operands.
    """
    return ()

  def _from_args(self, args: Tuple['Node', ...]) -> 'Node':
    """Rebuild a node of this kind from new operands through its canonical constructor"""
    raise TypeError(f"{type(self).__name__} nodes have no operands to rebuild from")

  # Structural hash / equality / order

  def __hash__(self) -> int:
    cached = self._hash_cache
    if cached is None:
      cached = hash((self.type_code,) + self._key())
      object.__setattr__(self, '_hash_cache', cached)
    return cached

  def __eq__(self, other) -> bool:
    if self is other:
      return True
    if not isinstance(other, Node):
      return NotImplemented
    if self.type_code != other.type_code or hash(self) != hash(other):
      return False
    return self._key() == other._key()

  def __ne__(self, other) -> bool:
    result = self.__eq__(other)
    if result is NotImplemented:
      return result
    return not result

  def equals(self, other) -> bool:
    return isinstance(other, Node) and self == other

  def compare(self, other: 'Node') -> int:
    """Strict total order: -1, 0 or 1, zero exactly when the nodes are equal"""
    if self is other:
      return 0
    if self.type_code != other.type_code:
      return compare_values(self.type_code, other.type_code)
    return compare_parts(self._key(), other._key())

  def __lt__(self, other):
    if not isinstance(other, Node):
      return NotImplemented
    return self.compare(other) < 0

  def __le__(self, other):
    if not isinstance(other, Node):
      return NotImplemented
    return self.compare(other) <= 0

  def __gt__(self, other):
    if not isinstance(other, Node):
      return NotImplemented
    return self.compare(other) > 0

  def __ge__(self, other):
    if not isinstance(other, Node):
      return NotImplemented
    return self.compare(other) >= 0

  # Printing

  @abstractmethod
  def to_string(self) -> str:
    pass

  @property
  def precedence(self) -> int:
    return PRECEDENCE_ATOM

  def wrap(self, level: int) -> str:
    """String form, parenthesized when binding looser than `level`"""
    text = self.to_string()
    if self.precedence < level:
      return f"({text})"
    return text

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()!r})"

  # Transformations

  def diff(self, x: 'Node') -> 'Node':
    """Derivative with respect to the Symbol `x`"""
    from .node import Symbol
    if not isinstance(x, Symbol):
      raise NotASymbol(x)
    return self._diff(x)

  @abstractmethod
  def _diff(self, x) -> 'Node':
    pass

  def subs(self, mapping: Mapping['Node', 'Node']) -> 'Node':
    """Structural substitution; returns self when nothing changes"""
    if not mapping:
      return self
    if self in mapping:
      return mapping[self]
    return self._subs_args(mapping)

  def _subs_args(self, mapping: Mapping['Node', 'Node']) -> 'Node':
    args = self.args
    new_args = tuple(arg.subs(mapping) for arg in args)
    if all(new is old for new, old in zip(new_args, args)):
      return self
    return self._from_args(new_args)

  def expand(self) -> 'Node':
    from ..utils.expander import expand
    return expand(self)

  def free_symbols(self) -> frozenset:
    from .node import Symbol
    if isinstance(self, Symbol):
      return frozenset((self,))
    symbols = frozenset()
    for child in self.args:
      symbols |= child.free_symbols()
    return symbols

  def has(self, target: 'Node') -> bool:
    if self == target:
      return True
    return any(child.has(target) for child in self.args)

  # Interop

  @abstractmethod
  def evaluate(self, values: Dict[str, Any]) -> np.ndarray:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Basic:
    pass
