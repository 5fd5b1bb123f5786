"""Utilities for expression trees."""

from .tree_utils import (
    get_all_nodes, calculate_tree_depth, find_nodes_by_type, get_variables,
    structurally_equal, shares_nodes, validate_tree_structure
)

__all__ = [
    'get_all_nodes', 'calculate_tree_depth', 'find_nodes_by_type', 'get_variables',
    'structurally_equal', 'shares_nodes', 'validate_tree_structure'
]
