from typing import Optional
from ..core.node import Node, ConstantNode, BinaryOpNode
from ..core.operators import ARITHMETIC_OPS, evaluate_binary_op
from ..core.walk import fold_post_order
from ..optimization.memory_pool import get_global_pool


class ExpressionSimplifier:
  """Bottom-up constant folding. Algebraic identities are not applied."""

  @staticmethod
  def simplify_expression(node: Optional[Node]) -> Optional[Node]:
    """Return a new folded tree; the input is left untouched"""
    if node is None:
      return None
    return fold_post_order(node, lambda leaf: leaf.copy(), ExpressionSimplifier._fold_constants)

  @staticmethod
  def _fold_constants(node: BinaryOpNode, left: Node, right: Node) -> Node:
    """Rebuild node over its already simplified children, folding two constants"""
    pool = get_global_pool()
    if (node.operator in ARITHMETIC_OPS and
        isinstance(left, ConstantNode) and isinstance(right, ConstantNode)):
      # 1/0 folds to NaN
      value = evaluate_binary_op(left.value, right.value, node.operator)
      pool.return_node(left)
      pool.return_node(right)
      return pool.get_constant_node(value)

    return pool.get_binary_node(node.operator, left, right)


def simplify(node: Optional[Node]) -> Optional[Node]:
  return ExpressionSimplifier.simplify_expression(node)
