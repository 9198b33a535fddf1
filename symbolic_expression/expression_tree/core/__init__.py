"""Core expression tree components."""

from .node import Node, VariableNode, ConstantNode, BinaryOpNode, cap_name
from .operators import (
    NodeType, BINARY_OPS, ARITHMETIC_OPS, ADDITIVE_OPS, MULTIPLICATIVE_OPS,
    evaluate_constant, evaluate_binary_op, evaluate_binary_op_array
)

__all__ = [
    'Node', 'VariableNode', 'ConstantNode', 'BinaryOpNode', 'cap_name',
    'NodeType', 'BINARY_OPS', 'ARITHMETIC_OPS', 'ADDITIVE_OPS', 'MULTIPLICATIVE_OPS',
    'evaluate_constant', 'evaluate_binary_op', 'evaluate_binary_op_array'
]
