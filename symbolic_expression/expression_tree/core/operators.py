import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  CONSTANT = 0
  VARIABLE = 1
  BINARY_OP = 2

# Operators the parser emits and the differentiator has rules for
ARITHMETIC_OPS = ('+', '-', '*', '/')

# '^' evaluates when built by hand but is never produced by the parser
BINARY_OPS = ARITHMETIC_OPS + ('^',)

ADDITIVE_OPS = ('+', '-')
MULTIPLICATIVE_OPS = ('*', '/')

@numba.njit(cache=True, inline='always')
def evaluate_constant(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

@numba.njit(cache=True)
def evaluate_binary_op(left_val, right_val, operator):
  """Scalar arithmetic; division by exactly zero and unknown operators give NaN"""
  if operator == '+':
    return left_val + right_val
  elif operator == '-':
    return left_val - right_val
  elif operator == '*':
    return left_val * right_val
  elif operator == '/':
    if right_val == 0.0:
      return np.nan
    return left_val / right_val
  elif operator == '^':
    return np.power(left_val, right_val)
  return np.nan

@numba.njit(cache=True)
def evaluate_binary_op_array(left_val, right_val, operator):
  """Elementwise version of evaluate_binary_op over 1-D float64 arrays"""
  n = left_val.shape[0]
  if operator == '+':
    return left_val + right_val
  elif operator == '-':
    return left_val - right_val
  elif operator == '*':
    return left_val * right_val
  elif operator == '/':
    out = np.full(n, np.nan)
    for i in range(n):
      if right_val[i] != 0.0:
        out[i] = left_val[i] / right_val[i]
    return out
  elif operator == '^':
    return np.power(left_val, right_val)
  return np.full(n, np.nan)
