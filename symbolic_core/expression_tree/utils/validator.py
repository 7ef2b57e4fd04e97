from ..core.base import Node, require_canonical
from .tree_utils import get_all_nodes


class ExpressionValidator:
  """Re-checks the canonical-form predicates of already built nodes"""

  @staticmethod
  def is_canonical_node(node: Node) -> bool:
    return type(node).is_canonical(*node._key())

  @staticmethod
  def is_canonical_tree(node: Node) -> bool:
    return all(ExpressionValidator.is_canonical_node(n) for n in get_all_nodes(node))

  @staticmethod
  def check_node(node: Node):
    """Raise InvariantViolation when `node` itself is not canonical"""
    if not isinstance(node, Node):
      raise TypeError(f"Expected an expression node, got {type(node).__name__}")
    require_canonical(ExpressionValidator.is_canonical_node(node),
                      type(node).__name__, node.to_string())

  @staticmethod
  def check_tree(node: Node):
    """Raise InvariantViolation for the first non-canonical node in the tree"""
    for current in get_all_nodes(node, traversal_order='depth_first'):
      ExpressionValidator.check_node(current)
