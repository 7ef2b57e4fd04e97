"""Numeric leaf kernel.

Exact values are Python's arbitrary-precision ``int`` and
``fractions.Fraction``; this module only wraps them as leaf nodes and
routes arithmetic between them.
"""

from fractions import Fraction
from typing import Union

import numpy as np
import sympy as sp

from .base import Node, require_canonical
from .operators import NodeType, PRECEDENCE_ADD, PRECEDENCE_MUL, PRECEDENCE_ATOM, evaluate_number
from ..optimization.node_cache import get_global_cache
from ...errors import NumericOverflow

ExactValue = Union[int, Fraction]


class Number(Node):
  """Base class for numeric leaves"""

  __slots__ = ()

  value: ExactValue

  def _key(self) -> tuple:
    return (self.value,)

  @property
  def is_zero(self) -> bool:
    return self.value == 0

  @property
  def is_one(self) -> bool:
    return self.value == 1

  @property
  def is_minus_one(self) -> bool:
    return self.value == -1

  @property
  def is_negative(self) -> bool:
    return self.value < 0

  @property
  def is_positive(self) -> bool:
    return self.value > 0

  def _diff(self, x) -> 'Number':
    return zero

  def evaluate(self, values) -> np.ndarray:
    return evaluate_number(self.value)


class Integer(Number):
  __slots__ = ('value',)

  type_code = NodeType.INTEGER

  def __init__(self, value: int):
    super().__init__()
    require_canonical(Integer.is_canonical(value), 'Integer', repr(value))
    object.__setattr__(self, 'value', value)

  @staticmethod
  def is_canonical(value) -> bool:
    return type(value) is int

  def to_string(self) -> str:
    return str(self.value)

  @property
  def precedence(self) -> int:
    return PRECEDENCE_ADD if self.value < 0 else PRECEDENCE_ATOM

  def __int__(self) -> int:
    return self.value

  def __index__(self) -> int:
    return self.value

  def as_machine_int(self, dtype=np.int64) -> np.integer:
    """Value as a fixed-width numpy integer; NumericOverflow when it does not fit"""
    info = np.iinfo(dtype)
    if not info.min <= self.value <= info.max:
      raise NumericOverflow(f"{self.value} does not fit in {np.dtype(dtype).name}")
    return np.dtype(dtype).type(self.value)

  def to_sympy(self) -> sp.Integer:
    return sp.Integer(self.value)


class Rational(Number):
  __slots__ = ('value',)

  type_code = NodeType.RATIONAL

  def __init__(self, value: Fraction):
    super().__init__()
    require_canonical(Rational.is_canonical(value), 'Rational', repr(value))
    object.__setattr__(self, 'value', value)

  @staticmethod
  def is_canonical(value) -> bool:
    # Fraction keeps itself reduced with a positive denominator
    return isinstance(value, Fraction) and value.denominator != 1

  @property
  def numerator(self) -> 'Integer':
    return make_integer(self.value.numerator)

  @property
  def denominator(self) -> 'Integer':
    return make_integer(self.value.denominator)

  def to_string(self) -> str:
    return f"{self.value.numerator}/{self.value.denominator}"

  @property
  def precedence(self) -> int:
    return PRECEDENCE_ADD if self.value < 0 else PRECEDENCE_MUL

  def to_fraction(self) -> Fraction:
    return self.value

  def to_sympy(self) -> sp.Rational:
    return sp.Rational(self.value.numerator, self.value.denominator)


def make_integer(value: int) -> Integer:
  return get_global_cache().intern(Integer, int(value))


def make_rational(value: Fraction) -> Rational:
  return get_global_cache().intern(Rational, value)


def number_from_value(value: ExactValue) -> Number:
  """Canonical number node for an exact value; integral fractions become Integer"""
  if isinstance(value, Fraction):
    if value.denominator == 1:
      return make_integer(value.numerator)
    return make_rational(value)
  return make_integer(value)


def add_values(left: ExactValue, right: ExactValue) -> ExactValue:
  return _normalize(Fraction(left) + Fraction(right))


def mul_values(left: ExactValue, right: ExactValue) -> ExactValue:
  return _normalize(Fraction(left) * Fraction(right))


def pow_value(base: ExactValue, exponent: int) -> ExactValue:
  """Exact integer power; ZeroDivisionError for zero to a negative power"""
  if base == 0 and exponent < 0:
    raise ZeroDivisionError("Zero raised to a negative power")
  return _normalize(Fraction(base) ** exponent)


def _normalize(value: Fraction) -> ExactValue:
  if value.denominator == 1:
    return value.numerator
  return value


# Shared constants, created once at import
zero = make_integer(0)
one = make_integer(1)
minus_one = make_integer(-1)
