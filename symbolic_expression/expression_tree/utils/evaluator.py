"""Numeric evaluation of expression trees.

Both entry points walk the tree post-order and evaluate every operand
(no short-circuiting). Invalid arithmetic never raises: division by exactly
zero, unresolved variables and unknown operators all yield NaN, and NaN
propagates through the rest of the walk.
"""

import numpy as np
from typing import Callable, Mapping, Optional

from ..core.node import Node, ConstantNode, VariableNode, BinaryOpNode
from ..core.operators import evaluate_constant, evaluate_binary_op, evaluate_binary_op_array
from ..core.walk import fold_post_order

Lookup = Callable[[str], float]


def make_lookup(values: Mapping[str, float]) -> Lookup:
  """Adapt a mapping to a lookup; names missing from it evaluate to NaN"""
  def lookup(name: str) -> float:
    if name in values:
      return float(values[name])
    return np.nan
  return lookup


def evaluate(node: Optional[Node], lookup: Optional[Lookup] = None) -> float:
  if node is None:
    return np.nan
  return _evaluate(node, lookup)


def _evaluate(node: Node, lookup: Optional[Lookup]) -> float:
  def leaf(current: Node) -> float:
    if isinstance(current, ConstantNode):
      return current.value
    if isinstance(current, VariableNode):
      if lookup is None:
        return np.nan
      return float(lookup(current.name))
    raise TypeError(f"cannot evaluate {type(current).__name__}")

  def combine(current: BinaryOpNode, left_val: float, right_val: float) -> float:
    return float(evaluate_binary_op(left_val, right_val, current.operator))

  return fold_post_order(node, leaf, combine)


def evaluate_array(node: Optional[Node], variables: Mapping[str, np.ndarray],
                   n_samples: Optional[int] = None) -> np.ndarray:
  """Evaluate over sample arrays, one value per sample.

  All arrays in ``variables`` must share one length. Without variables the
  sample count comes from ``n_samples`` (default 1).
  """
  columns = {name: np.ascontiguousarray(values, dtype=np.float64).ravel()
             for name, values in variables.items()}

  lengths = {column.shape[0] for column in columns.values()}
  if n_samples is not None:
    lengths.add(n_samples)
  if len(lengths) > 1:
    raise ValueError(f"sample arrays differ in length: {sorted(lengths)}")
  n = lengths.pop() if lengths else 1

  if node is None:
    return evaluate_constant(n, np.nan)
  return _evaluate_array(node, columns, n)


def _evaluate_array(node: Node, columns: Mapping[str, np.ndarray], n: int) -> np.ndarray:
  def leaf(current: Node) -> np.ndarray:
    if isinstance(current, ConstantNode):
      return evaluate_constant(n, current.value)
    if isinstance(current, VariableNode):
      column = columns.get(current.name)
      if column is None:
        return evaluate_constant(n, np.nan)
      return column.copy()
    raise TypeError(f"cannot evaluate {type(current).__name__}")

  def combine(current: BinaryOpNode, left_val: np.ndarray, right_val: np.ndarray) -> np.ndarray:
    return evaluate_binary_op_array(left_val, right_val, current.operator)

  return fold_post_order(node, leaf, combine)
