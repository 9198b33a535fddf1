"""Operations and utilities for expression trees."""

from .evaluator import evaluate, evaluate_array, make_lookup
from .differentiator import ExpressionDifferentiator, differentiate
from .simplifier import ExpressionSimplifier, simplify
from .substitution import substitute, substitute_many
from .serializer import BoundedBuffer, format_constant, to_string, to_string_bounded
from .sympy_utils import SymPyBridge
from .validator import ExpressionValidator
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, get_variables, get_constants,
    count_nodes_by_type, find_nodes_by_operator, trees_equal, clone_tree
)

__all__ = [
    'evaluate', 'evaluate_array', 'make_lookup',
    'ExpressionDifferentiator', 'differentiate',
    'ExpressionSimplifier', 'simplify',
    'substitute', 'substitute_many',
    'BoundedBuffer', 'format_constant', 'to_string', 'to_string_bounded',
    'SymPyBridge', 'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth', 'get_variables', 'get_constants',
    'count_nodes_by_type', 'find_nodes_by_operator', 'trees_equal', 'clone_tree'
]
