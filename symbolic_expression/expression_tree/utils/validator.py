import math
from typing import Optional, Set

from ..core.node import Node, ConstantNode, BinaryOpNode, VariableNode
from ..core.operators import BINARY_OPS
from ..core.walk import iter_pre_order
from ...config import MAX_NAME_LENGTH


class ExpressionValidator:
  """Checks the structural invariants of an expression tree"""

  @staticmethod
  def is_valid_expression(node: Optional[Node]) -> bool:
    if node is None:
      return False

    seen: Set[int] = set()
    stack = [node]
    while stack:
      current = stack.pop()
      # A node object reachable twice means shared ownership
      if id(current) in seen:
        return False
      seen.add(id(current))

      if not ExpressionValidator._is_locally_valid(current):
        return False
      if isinstance(current, BinaryOpNode):
        stack.append(current.right)
        stack.append(current.left)

    return True

  @staticmethod
  def _is_locally_valid(node: Node) -> bool:
    if isinstance(node, ConstantNode):
      return isinstance(node.value, float)

    elif isinstance(node, VariableNode):
      return isinstance(node.name, str) and 0 < len(node.name) <= MAX_NAME_LENGTH

    elif isinstance(node, BinaryOpNode):
      if node.operator not in BINARY_OPS:
        return False
      return isinstance(node.left, Node) and isinstance(node.right, Node)

    return False

  @staticmethod
  def has_undefined_constants(node: Node) -> bool:
    """True when a NaN constant (e.g. a folded 1/0) is present"""
    return any(isinstance(current, ConstantNode) and math.isnan(current.value)
               for current in iter_pre_order(node))
