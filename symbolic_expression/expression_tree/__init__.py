"""Expression Tree Module

Node model, parser and structural operations of the symbolic expression engine.
"""

from .core.node import Node, ConstantNode, VariableNode, BinaryOpNode
from .core.operators import NodeType, BINARY_OPS, ARITHMETIC_OPS
from .optimization import NodePool, get_global_pool, clear_global_pool, reset_global_pool, release_tree
from .parser import ExpressionParser, parse
from .utils import (
    evaluate, evaluate_array, make_lookup,
    differentiate, simplify, substitute, substitute_many,
    to_string, to_string_bounded, BoundedBuffer,
    ExpressionSimplifier, ExpressionDifferentiator, ExpressionValidator, SymPyBridge,
    trees_equal, clone_tree, get_variables, calculate_tree_depth
)
from .expression import Expression

__all__ = [
    "Expression",
    "Node", "ConstantNode", "VariableNode", "BinaryOpNode",
    "NodeType", "BINARY_OPS", "ARITHMETIC_OPS",
    "NodePool", "get_global_pool", "clear_global_pool", "reset_global_pool", "release_tree",
    "ExpressionParser", "parse",
    "evaluate", "evaluate_array", "make_lookup",
    "differentiate", "simplify", "substitute", "substitute_many",
    "to_string", "to_string_bounded", "BoundedBuffer",
    "ExpressionSimplifier", "ExpressionDifferentiator", "ExpressionValidator", "SymPyBridge",
    "trees_equal", "clone_tree", "get_variables", "calculate_tree_depth"
]
