import numpy as np
from enum import IntEnum


class NodeType(IntEnum):
  # Value order is the fixed rank used to order nodes of different kinds
  INTEGER = 0
  RATIONAL = 1
  SYMBOL = 2
  ADD = 3
  MUL = 4
  POW = 5
  SIN = 6
  COS = 7
  FUNCTION_SYMBOL = 8
  DERIVATIVE = 9


# Printing precedence; a child whose precedence is below its parent's slot
# gets parenthesized
PRECEDENCE_ADD = 10
PRECEDENCE_MUL = 20
PRECEDENCE_POW = 30
PRECEDENCE_ATOM = 100

UNARY_FUNCTION_MAP = {
  NodeType.SIN: 'sin',
  NodeType.COS: 'cos',
}


def compare_values(left, right) -> int:
  """Three-way comparison of plain Python values"""
  return (left > right) - (left < right)


def evaluate_number(value) -> np.ndarray:
  return np.asarray(float(value), dtype=np.float64)


def evaluate_sum(constant, weighted_terms) -> np.ndarray:
  result = evaluate_number(constant)
  for weight, term_val in weighted_terms:
    result = result + float(weight) * term_val
  return result


def evaluate_product(constant, powers) -> np.ndarray:
  result = evaluate_number(constant)
  for base_val, exp_val in powers:
    result = result * evaluate_power(base_val, exp_val)
  return result


def evaluate_power(base_val, exp_val) -> np.ndarray:
  with np.errstate(divide='ignore', invalid='ignore'):
    return np.power(np.asarray(base_val, dtype=np.float64), exp_val)


def evaluate_unary_function(operand_val, op_type: NodeType) -> np.ndarray:
  if op_type == NodeType.SIN:
    return np.sin(operand_val)
  elif op_type == NodeType.COS:
    return np.cos(operand_val)
  raise ValueError(f"No numerical rule for {op_type.name}")
