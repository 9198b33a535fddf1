"""Symbolic Expression Package

Parses algebraic expressions into trees and differentiates, simplifies,
substitutes, evaluates and serializes them.
"""

from .expression_tree import (
  Expression, Node, ConstantNode, VariableNode, BinaryOpNode,
  parse, evaluate, evaluate_array, make_lookup,
  differentiate, simplify, substitute, substitute_many,
  to_string, to_string_bounded,
  release_tree, get_global_pool, trees_equal
)
from .exceptions import SymbolicExpressionError, ExpressionSyntaxError, UnsupportedOperatorError
from .logging_system import LogLevel, configure_logging, set_log_level, get_logger

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "ConstantNode", "VariableNode", "BinaryOpNode",
  "parse", "evaluate", "evaluate_array", "make_lookup",
  "differentiate", "simplify", "substitute", "substitute_many",
  "to_string", "to_string_bounded",
  "release_tree", "get_global_pool", "trees_equal",
  "SymbolicExpressionError", "ExpressionSyntaxError", "UnsupportedOperatorError",
  "LogLevel", "configure_logging", "set_log_level", "get_logger"
]
