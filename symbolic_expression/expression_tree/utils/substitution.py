from typing import Mapping, Optional

from ..core.node import Node, ConstantNode, VariableNode, BinaryOpNode, cap_name
from ..core.walk import fold_post_order
from ..optimization.memory_pool import get_global_pool


def substitute(node: Optional[Node], variable: str, value: float) -> Optional[Node]:
  """Deep copy of node with every occurrence of variable replaced by Const(value)"""
  return substitute_many(node, {variable: value})


def substitute_many(node: Optional[Node], values: Mapping[str, float]) -> Optional[Node]:
  """Replace several variables in one pass; the input tree stays usable"""
  if node is None:
    return None
  replacements = {cap_name(name): float(value) for name, value in values.items()}
  return _substitute(node, replacements)


def _substitute(node: Node, replacements: Mapping[str, float]) -> Node:
  pool = get_global_pool()

  def leaf(current: Node) -> Node:
    if isinstance(current, VariableNode) and current.name in replacements:
      return pool.get_constant_node(replacements[current.name])
    if isinstance(current, (ConstantNode, VariableNode)):
      return current.copy()
    raise TypeError(f"cannot substitute into {type(current).__name__}")

  def combine(current: BinaryOpNode, left: Node, right: Node) -> Node:
    return pool.get_binary_node(current.operator, left, right)

  return fold_post_order(node, leaf, combine)
