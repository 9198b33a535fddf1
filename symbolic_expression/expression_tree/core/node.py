import math
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Tuple
from .operators import NodeType
from .walk import fold_post_order, iter_pre_order
from ...config import MAX_NAME_LENGTH
from ..optimization.memory_pool import get_global_pool


def cap_name(name: str) -> str:
  """Apply the variable-name length cap"""
  if not isinstance(name, str):
    raise TypeError(f"variable name must be a string, got {type(name).__name__}")
  return name[:MAX_NAME_LENGTH]


class Node(ABC):
  """Base node class with structural hash and size caching"""

  __slots__ = ('_hash_cache', '_size_cache', '__weakref__')

  node_type: NodeType

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None

  def _clear_cache(self):
    self._hash_cache = None
    self._size_cache = None

  @abstractmethod
  def copy(self) -> 'Node':
    pass

  @abstractmethod
  def children(self) -> Tuple['Node', ...]:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = sum(1 for _ in iter_pre_order(self))
    return self._size_cache

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  @abstractmethod
  def _compute_hash(self) -> int:
    pass


class ConstantNode(Node):
  __slots__ = ('value',)

  node_type = NodeType.CONSTANT

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  def copy(self) -> 'ConstantNode':
    return get_global_pool().get_constant_node(self.value)

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _compute_hash(self) -> int:
    # hash(nan) is identity-based; every NaN constant must hash alike
    key = 'nan' if math.isnan(self.value) else self.value
    return hash((NodeType.CONSTANT, key))

  def to_sympy(self):
    return sp.Float(self.value)

  def __repr__(self) -> str:
    return f"ConstantNode({self.value!r})"


class VariableNode(Node):
  __slots__ = ('name',)

  node_type = NodeType.VARIABLE

  def __init__(self, name: str):
    super().__init__()
    self.name = cap_name(name)

  def copy(self) -> 'VariableNode':
    return get_global_pool().get_variable_node(self.name)

  def children(self) -> Tuple[Node, ...]:
    return ()

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self.name))

  def to_sympy(self):
    return sp.Symbol(self.name)

  def __repr__(self) -> str:
    return f"VariableNode({self.name!r})"


class BinaryOpNode(Node):
  __slots__ = ('operator', 'left', 'right')

  node_type = NodeType.BINARY_OP

  def __init__(self, operator: str, left: Node, right: Node):
    super().__init__()
    if left is None or right is None:
      raise ValueError(f"operator '{operator}' needs two operands")
    self.operator = operator
    self.left = left
    self.right = right

  def copy(self) -> 'BinaryOpNode':
    pool = get_global_pool()
    return fold_post_order(
      self, lambda leaf: leaf.copy(),
      lambda node, left, right: pool.get_binary_node(node.operator, left, right))

  def children(self) -> Tuple[Node, ...]:
    return (self.left, self.right)

  def _compute_hash(self) -> int:
    def combine(node, left_hash, right_hash):
      if node._hash_cache is None:
        node._hash_cache = hash((NodeType.BINARY_OP, node.operator, left_hash, right_hash))
      return node._hash_cache
    return fold_post_order(self, hash, combine)

  def to_sympy(self):
    return fold_post_order(self, lambda leaf: leaf.to_sympy(), _sympy_binary)

  def __repr__(self) -> str:
    return fold_post_order(
      self, repr, lambda node, left, right: f"BinaryOpNode({node.operator!r}, {left}, {right})")


def _sympy_binary(node: BinaryOpNode, left: sp.Expr, right: sp.Expr) -> sp.Expr:
  if node.operator == '+':
    return sp.Add(left, right)
  elif node.operator == '-':
    return sp.Add(left, sp.Mul(-1, right))
  elif node.operator == '*':
    return sp.Mul(left, right)
  elif node.operator == '/':
    return sp.Mul(left, sp.Pow(right, -1))
  elif node.operator == '^':
    return sp.Pow(left, right)
  else:
    raise ValueError(f"to_sympy reached unexpected operation: {node.operator}")
