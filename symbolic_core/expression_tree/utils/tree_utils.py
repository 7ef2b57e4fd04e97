"""
Tree Utility Functions

Traversal and inspection helpers for expression trees. Nodes are immutable,
so everything here only reads.
"""

from collections import Counter
from typing import Dict, List, Type, TypeVar

from ..core.base import Node
from ..core.node import Symbol, FunctionSymbol

T = TypeVar('T', bound=Node)


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree, shared subtrees listed once per occurrence
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []
    index = 0

    while index < len(nodes_to_visit):
        current_node = nodes_to_visit[index]
        index += 1
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.args)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal"""
    nodes = [node]
    for child in node.args:
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Leaf nodes have depth 1.
    """
    children = node.args
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def tree_size(node: Node) -> int:
    """Number of nodes in the tree"""
    return len(get_all_nodes(node))


def find_nodes_by_type(node: Node, node_type: Type[T]) -> List[T]:
    """All nodes of the given kind, breadth-first"""
    return [n for n in get_all_nodes(node) if isinstance(n, node_type)]


def get_symbols(node: Node) -> List[Symbol]:
    """Distinct symbols of the tree in canonical order"""
    return sorted(node.free_symbols())


def get_function_names(node: Node) -> List[str]:
    """Distinct opaque function names used in the tree"""
    return sorted({fn.name for fn in find_nodes_by_type(node, FunctionSymbol)})


def get_node_type_counts(node: Node) -> Dict[str, int]:
    """How often each node kind occurs in the tree"""
    return dict(Counter(type(n).__name__ for n in get_all_nodes(node)))
