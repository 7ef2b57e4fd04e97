"""Utilities for expression trees."""

from .expander import ExpressionExpander, expand
from .sympy_utils import to_sympy, from_sympy, sympy_equivalent, latex_representation
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, tree_size, find_nodes_by_type,
    get_symbols, get_function_names, get_node_type_counts
)
from .validator import ExpressionValidator

__all__ = [
    'ExpressionExpander', 'expand',
    'to_sympy', 'from_sympy', 'sympy_equivalent', 'latex_representation',
    'get_all_nodes', 'calculate_tree_depth', 'tree_size', 'find_nodes_by_type',
    'get_symbols', 'get_function_names', 'get_node_type_counts',
    'ExpressionValidator'
]
