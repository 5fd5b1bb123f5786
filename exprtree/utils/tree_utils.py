"""
Tree Utility Functions

Traversal and structural comparison helpers for expression trees. These walk
nodes through ``Expression.children`` and never modify a tree.
"""

from collections import deque
from typing import List, Set, Type, TypeVar

from ..core.node import Expression, Variable

T = TypeVar('T', bound=Expression)


def get_all_nodes(node: Expression, traversal_order: str = 'breadth_first') -> List[Expression]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default) or 'depth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Expression) -> List[Expression]:
    """Breadth-first traversal (iterative)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Expression) -> List[Expression]:
    """Depth-first pre-order traversal (recursive)"""
    nodes = [node]
    for child in node.children():
        nodes.extend(_depth_first_traversal(child))
    return nodes


def calculate_tree_depth(node: Expression) -> int:
    """
    Calculate the maximum depth of the tree.

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    children = node.children()
    if not children:
        return 1
    return 1 + max(calculate_tree_depth(child) for child in children)


def find_nodes_by_type(node: Expression, node_type: Type[T]) -> List[T]:
    return [n for n in get_all_nodes(node, 'depth_first') if isinstance(n, node_type)]


def get_variables(node: Expression) -> List[str]:
    """Variable names in depth-first order, each listed once"""
    names = []
    for var in find_nodes_by_type(node, Variable):
        if var.name not in names:
            names.append(var.name)
    return names


def structurally_equal(a: Expression, b: Expression) -> bool:
    """Same node kinds, values, operators, names and shape"""
    return a == b


def shares_nodes(a: Expression, b: Expression) -> bool:
    """True if any node object is reachable from both trees"""
    seen = {id(n) for n in get_all_nodes(a)}
    return any(id(n) in seen for n in get_all_nodes(b))


def validate_tree_structure(node: Expression) -> bool:
    """
    Check that no node is reachable twice from the root.

    Construction already forbids shared children, so this only fails for
    trees assembled by bypassing the node constructors.
    """
    seen: Set[int] = set()
    for n in get_all_nodes(node):
        if id(n) in seen:
            return False
        seen.add(id(n))
    return True
