"""
Tree Utility Functions

Traversal and analysis helpers shared by the expression facade, the
validator and the tests.
"""

import math
from typing import List, Dict, Optional
from collections import Counter

from ..core.node import Node, BinaryOpNode, ConstantNode, VariableNode
from ..core.operators import NodeType
from ..core.walk import fold_post_order, iter_pre_order, iter_post_order


def get_all_nodes(node: Node, traversal_order: str = 'breadth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'breadth_first' (default), 'depth_first' (pre-order)
            or 'post_order'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    elif traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    elif traversal_order == 'post_order':
        return _post_order_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop(0)  # FIFO for breadth-first
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.children())

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative, explicit stack)"""
    return list(iter_pre_order(node))


def _post_order_traversal(node: Node) -> List[Node]:
    return list(iter_post_order(node))


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    return fold_post_order(node, lambda leaf: 1, lambda _, left, right: 1 + max(left, right))


def get_variables(node: Node) -> List[str]:
    """Variable names in left-to-right order of first occurrence"""
    seen: Dict[str, None] = {}
    for current in _depth_first_traversal(node):
        if isinstance(current, VariableNode):
            seen.setdefault(current.name, None)
    return list(seen)


def get_constants(node: Node) -> List[float]:
    """Constant values in left-to-right order"""
    return [current.value for current in _depth_first_traversal(node)
            if isinstance(current, ConstantNode)]


def count_nodes_by_type(node: Node) -> Dict[NodeType, int]:
    counts = Counter(current.node_type for current in get_all_nodes(node))
    return {node_type: counts.get(node_type, 0) for node_type in NodeType}


def find_nodes_by_operator(node: Node, operator: str) -> List[BinaryOpNode]:
    return [current for current in get_all_nodes(node)
            if isinstance(current, BinaryOpNode) and current.operator == operator]


def trees_equal(a: Optional[Node], b: Optional[Node]) -> bool:
    """
    Structural equality: same shape, operators, names and constant values.

    NaN constants compare equal to each other so that folded division by
    zero does not break comparisons.
    """
    pairs = [(a, b)]
    while pairs:
        a, b = pairs.pop()
        if a is None or b is None:
            if a is not b:
                return False
            continue
        if type(a) is not type(b):
            return False
        if isinstance(a, ConstantNode):
            if not (a.value == b.value or (math.isnan(a.value) and math.isnan(b.value))):
                return False
        elif isinstance(a, VariableNode):
            if a.name != b.name:
                return False
        elif isinstance(a, BinaryOpNode):
            if a.operator != b.operator:
                return False
            pairs.append((a.right, b.right))
            pairs.append((a.left, b.left))
        else:
            return False
    return True


def clone_tree(node: Optional[Node]) -> Optional[Node]:
    """Deep copy through the node pool; None clones to None"""
    if node is None:
        return None
    return node.copy()
