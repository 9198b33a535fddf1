from typing import Optional

from ..core.node import Node, ConstantNode, VariableNode, BinaryOpNode, cap_name
from ..core.operators import ARITHMETIC_OPS
from ..core.walk import fold_post_order, iter_pre_order
from ..optimization.memory_pool import get_global_pool
from ...exceptions import UnsupportedOperatorError
from ...logging_system import log_warning


class ExpressionDifferentiator:
  """Structural differentiation with the sum, difference, product and quotient rules.

  The result never shares nodes with the input: whenever a rule needs u or v
  verbatim it takes a fresh deep copy, once per occurrence.
  """

  def __init__(self, variable: str):
    self.variable = cap_name(variable)
    self.pool = get_global_pool()

  def differentiate(self, node: Node) -> Node:
    # Reject before building anything, so a failure leaves nothing allocated
    for current in iter_pre_order(node):
      if isinstance(current, BinaryOpNode) and current.operator not in ARITHMETIC_OPS:
        raise UnsupportedOperatorError(current.operator)
    return fold_post_order(node, self._leaf_derivative, self._apply_rule)

  def _leaf_derivative(self, node: Node) -> Node:
    if isinstance(node, ConstantNode):
      return self.pool.get_constant_node(0.0)
    if isinstance(node, VariableNode):
      return self.pool.get_constant_node(1.0 if node.name == self.variable else 0.0)
    raise TypeError(f"cannot differentiate {type(node).__name__}")

  def _apply_rule(self, node: BinaryOpNode, du: Node, dv: Node) -> Node:
    u, v = node.left, node.right

    if node.operator in ('+', '-'):
      return self.pool.get_binary_node(node.operator, du, dv)

    # du * v and u * dv are shared by the product and quotient rules
    left = self.pool.get_binary_node('*', du, v.copy())
    right = self.pool.get_binary_node('*', u.copy(), dv)

    if node.operator == '*':
      return self.pool.get_binary_node('+', left, right)

    numerator = self.pool.get_binary_node('-', left, right)
    denominator = self.pool.get_binary_node('*', v.copy(), v.copy())
    return self.pool.get_binary_node('/', numerator, denominator)


def differentiate(node: Optional[Node], variable: str) -> Optional[Node]:
  """d(node)/d(variable) as a new tree, or None if the tree holds an operator with no rule"""
  if node is None:
    return None
  try:
    return ExpressionDifferentiator(variable).differentiate(node)
  except UnsupportedOperatorError as e:
    log_warning(f"Differentiation aborted: {e}")
    return None
