"""
Tree-to-text rendering.

Binary nodes render as ``<left> <op> <right>`` without parentheses, so the
text of a mixed-precedence tree does not parse back to the same shape.
"""

import math
from typing import List, Optional, Tuple

from ..core.node import Node, ConstantNode, VariableNode, BinaryOpNode


class BoundedBuffer:
  """Append-only text builder that stops growing at a fixed capacity.

  ``capacity`` counts a terminator slot, as a C character buffer would, so at
  most ``capacity - 1`` characters are kept. ``None`` means unbounded.
  """

  def __init__(self, capacity: Optional[int] = None):
    self.limit = None if capacity is None else max(capacity - 1, 0)
    self._parts: List[str] = []
    self.length = 0
    self.truncated = False

  @property
  def full(self) -> bool:
    return self.limit is not None and self.length >= self.limit

  def append(self, text: str):
    """Append as much of text as fits, setting truncated if anything was cut off"""
    if self.limit is not None:
      room = self.limit - self.length
      if len(text) > room:
        text = text[:room]
        self.truncated = True
    if text:
      self._parts.append(text)
      self.length += len(text)

  def getvalue(self) -> str:
    return ''.join(self._parts)


def format_constant(value: float) -> str:
  """Shortest decimal text that reads back as the same float"""
  if math.isnan(value):
    return 'nan'
  if math.isinf(value):
    return 'inf' if value > 0 else '-inf'
  text = repr(value)
  if text.endswith('.0'):
    text = text[:-2]
  return text


def write_node(node: Node, out: BoundedBuffer):
  # Operator separators are pushed between the two operands on the stack
  pending = [node]
  while pending and not out.full:
    item = pending.pop()
    if isinstance(item, str):
      out.append(item)
    elif isinstance(item, ConstantNode):
      out.append(format_constant(item.value))
    elif isinstance(item, VariableNode):
      out.append(item.name)
    elif isinstance(item, BinaryOpNode):
      pending.append(item.right)
      pending.append(f" {item.operator} ")
      pending.append(item.left)
    else:
      raise TypeError(f"cannot serialize {type(item).__name__}")


def to_string(node: Optional[Node]) -> str:
  if node is None:
    return ''
  out = BoundedBuffer()
  write_node(node, out)
  return out.getvalue()


def to_string_bounded(node: Optional[Node], capacity: int) -> Tuple[str, int]:
  """Render into at most capacity - 1 characters; returns (text, length)"""
  if node is None or capacity <= 0:
    return '', 0
  out = BoundedBuffer(capacity)
  write_node(node, out)
  return out.getvalue(), out.length
