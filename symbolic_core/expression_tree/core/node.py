import numpy as np
import sympy as sp
from typing import Any, Dict, List, Tuple

from .base import Node, require_canonical
from .numbers import Number, Integer, zero, one, minus_one
from .operators import (
  NodeType, PRECEDENCE_ADD, PRECEDENCE_MUL, PRECEDENCE_POW, UNARY_FUNCTION_MAP,
  evaluate_sum, evaluate_product, evaluate_power, evaluate_unary_function
)
from ..optimization.node_cache import get_global_cache
from ...logging_system import log_debug


def format_product(coef: Number, factor_strings: List[str]) -> str:
  body = '*'.join(factor_strings)
  if coef.is_one:
    return body
  if coef.is_minus_one:
    return f"-{body}"
  if coef.is_negative:
    from .numbers import number_from_value
    magnitude = number_from_value(-coef.value)
    return f"-{magnitude.wrap(PRECEDENCE_MUL + 1)}*{body}"
  return f"{coef.wrap(PRECEDENCE_MUL + 1)}*{body}"


def format_power(base: Node, exp: Node) -> str:
  if exp == one:
    return base.wrap(PRECEDENCE_MUL)
  return f"{base.wrap(PRECEDENCE_POW + 1)}^{exp.wrap(PRECEDENCE_POW + 1)}"


def make_derivative(arg: Node, variables: Tuple['Symbol', ...]) -> 'Derivative':
  """Unevaluated derivative node; callers have already decided no closed form applies"""
  return get_global_cache().intern(Derivative, arg, tuple(variables))


def unevaluated_derivative(arg: Node, variables: Tuple['Symbol', ...]) -> Node:
  """Derivative of `arg` kept unevaluated, folding constants and nested derivatives"""
  if isinstance(arg, Number):
    return zero
  if isinstance(arg, Derivative):
    return make_derivative(arg.arg, arg.variables + tuple(variables))
  return make_derivative(arg, variables)


class Symbol(Node):
  __slots__ = ('name',)

  type_code = NodeType.SYMBOL

  def __init__(self, name: str):
    super().__init__()
    require_canonical(Symbol.is_canonical(name), 'Symbol', repr(name))
    object.__setattr__(self, 'name', name)

  @staticmethod
  def is_canonical(name) -> bool:
    return isinstance(name, str)

  def _key(self) -> tuple:
    return (self.name,)

  def to_string(self) -> str:
    return self.name

  def _diff(self, x: 'Symbol') -> Node:
    return one if self == x else zero

  def evaluate(self, values: Dict[str, Any]) -> np.ndarray:
    if self.name not in values:
      raise ValueError(f"No value supplied for symbol '{self.name}'")
    return np.asarray(values[self.name], dtype=np.float64)

  def to_sympy(self) -> sp.Symbol:
    return sp.Symbol(self.name)


class Add(Node):
  """Sum `coef + c1*t1 + c2*t2 + ...` with terms sorted by the total order"""

  __slots__ = ('coef', 'terms')

  type_code = NodeType.ADD

  def __init__(self, coef: Number, terms: Tuple[Tuple[Node, Number], ...]):
    super().__init__()
    require_canonical(Add.is_canonical(coef, terms), 'Add', f"coef={coef!r}, terms={terms!r}")
    object.__setattr__(self, 'coef', coef)
    object.__setattr__(self, 'terms', terms)

  @staticmethod
  def is_canonical(coef, terms) -> bool:
    if not isinstance(coef, Number) or not isinstance(terms, tuple) or not terms:
      return False
    if len(terms) == 1 and coef.is_zero:
      return False
    previous = None
    for pair in terms:
      if not isinstance(pair, tuple) or len(pair) != 2:
        return False
      term, term_coef = pair
      if not isinstance(term_coef, Number) or term_coef.is_zero:
        return False
      if not isinstance(term, Node) or isinstance(term, (Number, Add)):
        return False
      if isinstance(term, Mul) and not term.coef.is_one:
        return False
      if previous is not None and previous.compare(term) >= 0:
        return False
      previous = term
    return True

  def _key(self) -> tuple:
    return (self.coef, self.terms)

  @property
  def args(self) -> Tuple[Node, ...]:
    return tuple(self.summands())

  def _from_args(self, args: Tuple[Node, ...]) -> Node:
    from ..constructors import add_many
    return add_many(args)

  def summands(self) -> List[Node]:
    from ..constructors import mul
    summands = [mul(term_coef, term) for term, term_coef in self.terms]
    if not self.coef.is_zero:
      summands.append(self.coef)
    return summands

  @property
  def precedence(self) -> int:
    return PRECEDENCE_ADD

  def to_string(self) -> str:
    pieces = []
    for term, term_coef in self.terms:
      if term_coef.is_one:
        pieces.append(term.to_string())
      else:
        pieces.append(format_product(term_coef, [term.wrap(PRECEDENCE_MUL)]))
    if not self.coef.is_zero:
      pieces.append(self.coef.to_string())

    text = pieces[0]
    for piece in pieces[1:]:
      if piece.startswith('-'):
        text += f" - {piece[1:]}"
      else:
        text += f" + {piece}"
    return text

  def _diff(self, x: 'Symbol') -> Node:
    from ..constructors import add_many, mul
    return add_many([mul(term_coef, term.diff(x)) for term, term_coef in self.terms])

  def evaluate(self, values: Dict[str, Any]) -> np.ndarray:
    return evaluate_sum(self.coef.value,
                        [(term_coef.value, term.evaluate(values)) for term, term_coef in self.terms])

  def to_sympy(self) -> sp.Expr:
    parts = [sp.Mul(term_coef.to_sympy(), term.to_sympy()) for term, term_coef in self.terms]
    return sp.Add(self.coef.to_sympy(), *parts)


class Mul(Node):
  """Product `coef * b1^e1 * b2^e2 * ...` with bases sorted by the total order"""

  __slots__ = ('coef', 'factors')

  type_code = NodeType.MUL

  def __init__(self, coef: Number, factors: Tuple[Tuple[Node, Node], ...]):
    super().__init__()
    require_canonical(Mul.is_canonical(coef, factors), 'Mul', f"coef={coef!r}, factors={factors!r}")
    object.__setattr__(self, 'coef', coef)
    object.__setattr__(self, 'factors', factors)

  @staticmethod
  def is_canonical(coef, factors) -> bool:
    if not isinstance(coef, Number) or coef.is_zero:
      return False
    if not isinstance(factors, tuple) or not factors:
      return False
    previous = None
    for pair in factors:
      if not isinstance(pair, tuple) or len(pair) != 2:
        return False
      base, exp = pair
      if not isinstance(base, Node) or not isinstance(exp, Node):
        return False
      if isinstance(exp, Number) and exp.is_zero:
        return False
      if isinstance(base, Number) and (base.is_zero or base.is_one):
        return False
      if isinstance(exp, Integer) and isinstance(base, (Number, Mul, Pow)):
        return False
      if previous is not None and previous.compare(base) >= 0:
        return False
      previous = base
    if len(factors) == 1:
      base, exp = factors[0]
      if coef.is_one or (isinstance(base, Add) and exp == one):
        return False
    return True

  def _key(self) -> tuple:
    return (self.coef, self.factors)

  @property
  def args(self) -> Tuple[Node, ...]:
    return tuple(self.operands())

  def _from_args(self, args: Tuple[Node, ...]) -> Node:
    from ..constructors import mul_many
    return mul_many(args)

  def operands(self) -> List[Node]:
    """Coefficient (when not one) followed by each factor as a node"""
    from ..constructors import pow
    operands = [] if self.coef.is_one else [self.coef]
    operands.extend(pow(base, exp) for base, exp in self.factors)
    return operands

  @property
  def precedence(self) -> int:
    return PRECEDENCE_ADD if self.coef.is_negative else PRECEDENCE_MUL

  def to_string(self) -> str:
    return format_product(self.coef, [format_power(base, exp) for base, exp in self.factors])

  def _diff(self, x: 'Symbol') -> Node:
    from ..constructors import add_many, mul_many, pow
    factors = [pow(base, exp) for base, exp in self.factors]
    summands = []
    for i, factor in enumerate(factors):
      d_factor = factor.diff(x)
      if d_factor == zero:
        continue
      summands.append(mul_many([self.coef, d_factor] + factors[:i] + factors[i + 1:]))
    return add_many(summands)

  def evaluate(self, values: Dict[str, Any]) -> np.ndarray:
    return evaluate_product(self.coef.value,
                            [(base.evaluate(values), exp.evaluate(values)) for base, exp in self.factors])

  def to_sympy(self) -> sp.Expr:
    parts = [sp.Pow(base.to_sympy(), exp.to_sympy()) for base, exp in self.factors]
    return sp.Mul(self.coef.to_sympy(), *parts)


class Pow(Node):
  __slots__ = ('base', 'exp')

  type_code = NodeType.POW

  def __init__(self, base: Node, exp: Node):
    super().__init__()
    require_canonical(Pow.is_canonical(base, exp), 'Pow', f"base={base!r}, exp={exp!r}")
    object.__setattr__(self, 'base', base)
    object.__setattr__(self, 'exp', exp)

  @staticmethod
  def is_canonical(base, exp) -> bool:
    if not isinstance(base, Node) or not isinstance(exp, Node):
      return False
    if isinstance(exp, Number) and (exp.is_zero or exp.is_one):
      return False
    if isinstance(base, Number):
      if base.is_one:
        return False
      if base.is_zero and isinstance(exp, Number):
        return False
    if isinstance(exp, Integer) and isinstance(base, (Number, Mul, Pow)):
      return False
    return True

  def _key(self) -> tuple:
    return (self.base, self.exp)

  @property
  def args(self) -> Tuple[Node, ...]:
    return (self.base, self.exp)

  def _from_args(self, args: Tuple[Node, ...]) -> Node:
    from ..constructors import pow
    return pow(*args)

  @property
  def precedence(self) -> int:
    return PRECEDENCE_POW

  def to_string(self) -> str:
    return format_power(self.base, self.exp)

  def _diff(self, x: 'Symbol') -> Node:
    from ..constructors import add, mul_many, pow
    if not self.exp.has(x):
      return mul_many([self.exp, pow(self.base, add(self.exp, minus_one)), self.base.diff(x)])
    # Exponent depends on x: the closed form needs a logarithm, which has no node kind
    log_debug(f"Leaving derivative of {self.to_string()} with respect to {x.name} unevaluated")
    return make_derivative(self, (x,))

  def evaluate(self, values: Dict[str, Any]) -> np.ndarray:
    return evaluate_power(self.base.evaluate(values), self.exp.evaluate(values))

  def to_sympy(self) -> sp.Expr:
    return sp.Pow(self.base.to_sympy(), self.exp.to_sympy())


class UnaryFunctionNode(Node):
  """Shared behaviour of single-argument trigonometric functions"""

  __slots__ = ('arg',)

  def __init__(self, arg: Node):
    super().__init__()
    require_canonical(type(self).is_canonical(arg), type(self).__name__, repr(arg))
    object.__setattr__(self, 'arg', arg)

  @staticmethod
  def is_canonical(arg) -> bool:
    # Only a literal zero argument is rejected; sin(k*pi) and friends are not reduced
    if not isinstance(arg, Node):
      return False
    return not (isinstance(arg, Integer) and arg.is_zero)

  @property
  def function_name(self) -> str:
    return UNARY_FUNCTION_MAP[self.type_code]

  def _key(self) -> tuple:
    return (self.arg,)

  @property
  def args(self) -> Tuple[Node, ...]:
    return (self.arg,)

  def to_string(self) -> str:
    return f"{self.function_name}({self.arg.to_string()})"

  def evaluate(self, values: Dict[str, Any]) -> np.ndarray:
    return evaluate_unary_function(self.arg.evaluate(values), self.type_code)


class Sin(UnaryFunctionNode):
  __slots__ = ()

  type_code = NodeType.SIN

  def _from_args(self, args: Tuple[Node, ...]) -> Node:
    from ..constructors import sin
    return sin(args[0])

  def _diff(self, x: 'Symbol') -> Node:
    from ..constructors import cos, mul
    return mul(cos(self.arg), self.arg.diff(x))

  def to_sympy(self) -> sp.Expr:
    return sp.sin(self.arg.to_sympy())


class Cos(UnaryFunctionNode):
  __slots__ = ()

  type_code = NodeType.COS

  def _from_args(self, args: Tuple[Node, ...]) -> Node:
    from ..constructors import cos
    return cos(args[0])

  def _diff(self, x: 'Symbol') -> Node:
    from ..constructors import sin, mul
    return mul(mul(minus_one, sin(self.arg)), self.arg.diff(x))

  def to_sympy(self) -> sp.Expr:
    return sp.cos(self.arg.to_sympy())


class FunctionSymbol(Node):
  """Application of an opaque named function with no known rules"""

  __slots__ = ('name', 'arg')

  type_code = NodeType.FUNCTION_SYMBOL

  def __init__(self, name: str, arg: Node):
    super().__init__()
    require_canonical(FunctionSymbol.is_canonical(name, arg), 'FunctionSymbol', f"{name!r}, {arg!r}")
    object.__setattr__(self, 'name', name)
    object.__setattr__(self, 'arg', arg)

  @staticmethod
  def is_canonical(name, arg) -> bool:
    return isinstance(name, str) and isinstance(arg, Node)

  def _key(self) -> tuple:
    return (self.name, self.arg)

  @property
  def args(self) -> Tuple[Node, ...]:
    return (self.arg,)

  def _from_args(self, args: Tuple[Node, ...]) -> Node:
    from ..constructors import function_symbol
    return function_symbol(self.name, args[0])

  def to_string(self) -> str:
    return f"{self.name}({self.arg.to_string()})"

  def _diff(self, x: 'Symbol') -> Node:
    if self.arg.diff(x) == zero:
      return zero
    return make_derivative(self, (x,))

  def evaluate(self, values: Dict[str, Any]) -> np.ndarray:
    function = values.get(self.name)
    if not callable(function):
      raise ValueError(f"No callable supplied for function '{self.name}'")
    return np.asarray(function(self.arg.evaluate(values)), dtype=np.float64)

  def to_sympy(self) -> sp.Expr:
    return sp.Function(self.name)(self.arg.to_sympy())


class Derivative(Node):
  """Unevaluated derivative of `arg` by each symbol of `variables` in turn"""

  __slots__ = ('arg', 'variables')

  type_code = NodeType.DERIVATIVE

  def __init__(self, arg: Node, variables: Tuple[Symbol, ...]):
    super().__init__()
    require_canonical(Derivative.is_canonical(arg, variables), 'Derivative', f"{arg!r}, {variables!r}")
    object.__setattr__(self, 'arg', arg)
    object.__setattr__(self, 'variables', variables)

  @staticmethod
  def is_canonical(arg, variables) -> bool:
    if not isinstance(arg, Node) or isinstance(arg, (Number, Derivative)):
      return False
    if not isinstance(variables, tuple) or not variables:
      return False
    return all(isinstance(v, Symbol) for v in variables)

  def _key(self) -> tuple:
    return (self.arg, self.variables)

  @property
  def args(self) -> Tuple[Node, ...]:
    return (self.arg,) + self.variables

  def _subs_args(self, mapping) -> Node:
    arg = self.arg.subs(mapping)
    variables = tuple(v.subs(mapping) for v in self.variables)
    if arg is self.arg and all(new is old for new, old in zip(variables, self.variables)):
      return self
    if all(isinstance(v, Symbol) for v in variables):
      from ..constructors import derivative
      return derivative(arg, variables)
    # A variable replaced by a non-symbol: the derivative stays taken with
    # respect to the original variables, over the substituted argument
    return unevaluated_derivative(arg, self.variables)

  def to_string(self) -> str:
    names = ', '.join(v.name for v in self.variables)
    return f"Derivative({self.arg.to_string()}, {names})"

  def _diff(self, x: 'Symbol') -> Node:
    return make_derivative(self.arg, self.variables + (x,))

  def evaluate(self, values: Dict[str, Any]) -> np.ndarray:
    raise ValueError(f"Cannot evaluate unevaluated derivative {self.to_string()}")

  def to_sympy(self) -> sp.Expr:
    return sp.Derivative(self.arg.to_sympy(), *[v.to_sympy() for v in self.variables])
