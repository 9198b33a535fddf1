import numpy as np
import collections.abc
import sympy as sp
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from .core.node import Node
from .parser import parse as parse_expression
from .optimization.memory_pool import release_tree
from .utils.evaluator import evaluate, evaluate_array, make_lookup
from .utils.differentiator import differentiate
from .utils.simplifier import simplify
from .utils.substitution import substitute, substitute_many
from .utils.serializer import to_string, to_string_bounded
from .utils.sympy_utils import SymPyBridge
from .utils.validator import ExpressionValidator
from .utils.tree_utils import calculate_tree_depth, get_variables, trees_equal
from ..config import DEFAULT_BUFFER_SIZE

LookupLike = Union[Callable[[str], float], Mapping[str, float], None]


class Expression:
  """Owning handle around the root node of an expression tree.

  Every transformation returns a new Expression with its own tree; release()
  (or leaving a ``with`` block) hands this tree back to the node pool.
  """

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Optional[Node]):
    self.root = root
    self._string_cache: Optional[str] = None

  @classmethod
  def parse(cls, expr_str: str) -> Optional['Expression']:
    """Parse text; None when it is malformed"""
    root = parse_expression(expr_str)
    if root is None:
      return None
    return cls(root)

  @classmethod
  def from_string(cls, expr_str: str) -> Optional['Expression']:
    return cls.parse(expr_str)

  @staticmethod
  def _wrap(root: Optional[Node]) -> Optional['Expression']:
    return Expression(root) if root is not None else None

  def evaluate(self, lookup: LookupLike = None) -> float:
    if isinstance(lookup, collections.abc.Mapping):
      lookup = make_lookup(lookup)
    return evaluate(self.root, lookup)

  def evaluate_array(self, variables: Mapping[str, np.ndarray],
                     n_samples: Optional[int] = None) -> np.ndarray:
    return evaluate_array(self.root, variables, n_samples)

  def differentiate(self, variable: str) -> Optional['Expression']:
    return self._wrap(differentiate(self.root, variable))

  def simplify(self) -> Optional['Expression']:
    return self._wrap(simplify(self.root))

  def substitute(self, variable: str, value: float) -> Optional['Expression']:
    return self._wrap(substitute(self.root, variable, value))

  def substitute_many(self, values: Dict[str, float]) -> Optional['Expression']:
    return self._wrap(substitute_many(self.root, values))

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = to_string(self.root)
    return self._string_cache

  def to_string_bounded(self, capacity: int = DEFAULT_BUFFER_SIZE) -> Tuple[str, int]:
    return to_string_bounded(self.root, capacity)

  def copy(self) -> 'Expression':
    return Expression(self.root.copy() if self.root is not None else None)

  def size(self) -> int:
    """Node count"""
    return self.root.size() if self.root is not None else 0

  def depth(self) -> int:
    return calculate_tree_depth(self.root) if self.root is not None else 0

  def variables(self) -> List[str]:
    return get_variables(self.root) if self.root is not None else []

  def is_valid(self) -> bool:
    return ExpressionValidator.is_valid_expression(self.root)

  def to_sympy(self) -> sp.Expr:
    return SymPyBridge.to_sympy(self.root)

  def to_latex(self) -> str:
    return SymPyBridge.latex_representation(self.root)

  @property
  def released(self) -> bool:
    return self.root is None

  def release(self):
    """Return the tree to the node pool; calling it again is a no-op"""
    release_tree(self.root)
    self.root = None
    self._string_cache = None

  def __enter__(self) -> 'Expression':
    return self

  def __exit__(self, exc_type, exc, tb):
    self.release()
    return False

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return trees_equal(self.root, other.root)
