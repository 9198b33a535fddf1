from typing import List, TYPE_CHECKING, Optional
import threading
import weakref

from ...config import POOL_INITIAL_SIZE, POOL_MAX_FREE
from ...logging_system import LogLevel, get_logger, log_info

if TYPE_CHECKING:
  from ..core.node import Node, VariableNode, ConstantNode, BinaryOpNode


class NodePool:
  """Node allocator with free lists and allocation counting.

  Every node handed out is live until it is returned exactly once, either
  through return_node or through release_tree on a tree containing it.
  Live nodes are tracked by weak reference, so a tree its owner drops without
  releasing is garbage collected and stops counting as live.
  """

  def __init__(self, initial_size: int = POOL_INITIAL_SIZE, max_free: int = POOL_MAX_FREE):
    self.variable_pool: List['VariableNode'] = []
    self.constant_pool: List['ConstantNode'] = []
    self.binary_pool: List['BinaryOpNode'] = []
    self.max_free = max_free
    self.allocated = 0
    self.released = 0
    self._live: 'weakref.WeakValueDictionary[int, Node]' = weakref.WeakValueDictionary()
    self._preallocate(initial_size)

  def _preallocate(self, size: int):
    # Import here to avoid circular imports
    from ..core.node import VariableNode, ConstantNode, BinaryOpNode

    third = size // 3
    for _ in range(third):
      self.variable_pool.append(VariableNode.__new__(VariableNode))
      self.constant_pool.append(ConstantNode.__new__(ConstantNode))
      self.binary_pool.append(BinaryOpNode.__new__(BinaryOpNode))

  def _track(self, node: 'Node') -> 'Node':
    self.allocated += 1
    self._live[id(node)] = node
    return node

  @property
  def live_count(self) -> int:
    """Nodes currently owned by callers and still reachable"""
    return len(self._live)

  def owns(self, node: 'Node') -> bool:
    return id(node) in self._live

  def get_variable_node(self, name: str) -> 'VariableNode':
    from ..core.node import VariableNode
    if self.variable_pool:
      node = self.variable_pool.pop()
      node.__init__(name)
      return self._track(node)
    return self._track(VariableNode(name))

  def get_constant_node(self, value: float) -> 'ConstantNode':
    from ..core.node import ConstantNode
    if self.constant_pool:
      node = self.constant_pool.pop()
      node.__init__(value)
      return self._track(node)
    return self._track(ConstantNode(value))

  def get_binary_node(self, operator: str, left: 'Node', right: 'Node') -> 'BinaryOpNode':
    from ..core.node import BinaryOpNode
    if self.binary_pool:
      node = self.binary_pool.pop()
      node.__init__(operator, left, right)
      return self._track(node)
    return self._track(BinaryOpNode(operator, left, right))

  def return_node(self, node: 'Node'):
    """Return a single node to the pool for reuse (children untouched)"""
    from ..core.node import VariableNode, ConstantNode, BinaryOpNode

    if id(node) not in self._live:
      get_logger().warning(
        f"Ignoring release of {type(node).__name__} not owned by the pool "
        "(already released or built outside the pool)")
      return

    del self._live[id(node)]
    self.released += 1
    node._clear_cache()

    if isinstance(node, VariableNode) and len(self.variable_pool) < self.max_free:
      self.variable_pool.append(node)
    elif isinstance(node, ConstantNode) and len(self.constant_pool) < self.max_free:
      self.constant_pool.append(node)
    elif isinstance(node, BinaryOpNode):
      node.left = None
      node.right = None
      if len(self.binary_pool) < self.max_free:
        self.binary_pool.append(node)

  def release_tree(self, root: Optional['Node']):
    """Release a whole tree, children before their parent. None is a no-op."""
    if root is None:
      return
    from ..core.walk import iter_post_order
    # Collect first: return_node detaches children from binary nodes
    for node in list(iter_post_order(root)):
      self.return_node(node)

  def get_stats(self) -> dict:
    """Get pool statistics"""
    return {
      'variable_pool_size': len(self.variable_pool),
      'constant_pool_size': len(self.constant_pool),
      'binary_pool_size': len(self.binary_pool),
      'allocated': self.allocated,
      'released': self.released,
      'live': self.live_count
    }

  def log_stats(self):
    """Write the pool counters to the log at DETAILED verbosity"""
    get_logger().pool_summary(self.get_stats())

  def clear(self):
    """Clear all free lists (live nodes stay tracked)"""
    self.variable_pool.clear()
    self.constant_pool.clear()
    self.binary_pool.clear()


_GLOBAL_POOL: Optional[NodePool] = None
_POOL_LOCK = threading.Lock()


def get_global_pool() -> NodePool:
  """Get the process-global pool, creating it on first use"""
  global _GLOBAL_POOL

  if _GLOBAL_POOL is not None:
    return _GLOBAL_POOL

  with _POOL_LOCK:
    if _GLOBAL_POOL is None:
      _GLOBAL_POOL = NodePool()

  return _GLOBAL_POOL


def clear_global_pool():
  """Drop the free lists of the global pool and forget it"""
  global _GLOBAL_POOL
  with _POOL_LOCK:
    if _GLOBAL_POOL is not None:
      _GLOBAL_POOL.clear()
    _GLOBAL_POOL = None
  log_info("Global node pool cleared", LogLevel.DETAILED)


def reset_global_pool():
  """Replace the global pool with a fresh one"""
  global _GLOBAL_POOL
  with _POOL_LOCK:
    _GLOBAL_POOL = NodePool()
  log_info("Global node pool reset", LogLevel.DETAILED)


def release_tree(root: Optional['Node']):
  """Release a tree owned by the caller back to the global pool"""
  get_global_pool().release_tree(root)
