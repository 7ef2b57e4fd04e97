from typing import List

from ..core.base import Node
from ..core.numbers import Number, Integer, number_from_value, minus_one
from ..core.node import Symbol, Add, Mul, Pow, Sin, Cos, FunctionSymbol, Derivative, unevaluated_derivative
from ..constructors import add_many, mul, mul_many, pow, sin, cos, function_symbol
from ...logging_system import log_debug


class ExpressionExpander:
  """Distributes products over sums and integer powers over sums and products"""

  @staticmethod
  def expand(node: Node) -> Node:
    """Fully distributed form; applying it again returns an equal node"""
    result = ExpressionExpander._expand(node)
    passes = 1
    while True:
      again = ExpressionExpander._expand(result)
      if again == result:
        break
      result = again
      passes += 1
    if passes > 1:
      log_debug(f"Expansion of {node.to_string()} needed {passes} passes")
    return result

  @staticmethod
  def _expand(node: Node) -> Node:
    if isinstance(node, (Number, Symbol)):
      return node

    if isinstance(node, Add):
      summands = [node.coef]
      for term, term_coef in node.terms:
        summands.append(mul(term_coef, ExpressionExpander._expand(term)))
      return add_many(summands)

    if isinstance(node, Mul):
      result = node.coef
      for base, exp in node.factors:
        factor = ExpressionExpander._expand_power(ExpressionExpander._expand(base),
                                                  ExpressionExpander._expand(exp))
        result = ExpressionExpander._multiply_out(result, factor)
      return result

    if isinstance(node, Pow):
      return ExpressionExpander._expand_power(ExpressionExpander._expand(node.base),
                                              ExpressionExpander._expand(node.exp))

    if isinstance(node, Sin):
      return sin(ExpressionExpander._expand(node.arg))

    if isinstance(node, Cos):
      return cos(ExpressionExpander._expand(node.arg))

    if isinstance(node, FunctionSymbol):
      return function_symbol(node.name, ExpressionExpander._expand(node.arg))

    if isinstance(node, Derivative):
      arg = ExpressionExpander._expand(node.arg)
      if arg is node.arg:
        return node
      return unevaluated_derivative(arg, node.variables)

    raise TypeError(f"Cannot expand node of type {type(node).__name__}")

  @staticmethod
  def _expand_power(base: Node, exp: Node) -> Node:
    """base^exp for already expanded base and exponent"""
    if isinstance(exp, Integer) and isinstance(base, Add):
      if exp.value > 0:
        result = base
        for _ in range(exp.value - 1):
          result = ExpressionExpander._multiply_out(result, base)
        return result
      # Negative powers keep the reciprocal but expand the denominator
      positive = ExpressionExpander._expand_power(base, number_from_value(-exp.value))
      return pow(positive, minus_one)
    result = pow(base, exp)
    if isinstance(result, Mul) and isinstance(exp, Integer):
      # (a*b)^n distributed into factors that may themselves be sums
      return ExpressionExpander._expand(result)
    return result

  @staticmethod
  def _summands(node: Node) -> List[Node]:
    if isinstance(node, Add):
      return node.summands()
    return [node]

  @staticmethod
  def _multiply_out(left: Node, right: Node) -> Node:
    """Product of two expanded nodes, distributed over their summands"""
    left_summands = ExpressionExpander._summands(left)
    right_summands = ExpressionExpander._summands(right)
    if len(left_summands) == 1 and len(right_summands) == 1:
      return mul(left, right)
    return add_many(mul_many((l_part, r_part))
                    for l_part in left_summands for r_part in right_summands)


def expand(node: Node) -> Node:
  """Distribute products over sums and integer powers over sums and products"""
  return ExpressionExpander.expand(node)
