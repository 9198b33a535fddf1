"""
Iterative tree walks.

Parsed chains such as ``1 + 1 + ... + 1`` are left-deep and can be far deeper
than the interpreter's recursion limit, so every whole-tree pass goes
through these helpers instead of recursing. Nodes are only reached through
``children()``.
"""

from typing import Callable, Iterator, List, Tuple, TypeVar

T = TypeVar('T')


def iter_pre_order(root) -> Iterator:
  """Yield nodes parent first, children left to right"""
  stack = [root]
  while stack:
    node = stack.pop()
    yield node
    stack.extend(reversed(node.children()))


def iter_post_order(root) -> Iterator:
  """Yield nodes children first, left to right, parent last"""
  stack: List[Tuple[object, bool]] = [(root, False)]
  while stack:
    node, expanded = stack.pop()
    children = node.children()
    if expanded or not children:
      yield node
      continue
    stack.append((node, True))
    for child in reversed(children):
      stack.append((child, False))


def fold_post_order(root, leaf: Callable[..., T], combine: Callable[..., T]) -> T:
  """
  Bottom-up fold of a tree without recursion.

  Args:
      root: Root node
      leaf: leaf(node) gives the value of a node without children
      combine: combine(node, left_value, right_value) gives the value of a
          binary node once both children are done

  Returns:
      The value computed for root
  """
  results: List[T] = []
  for node in iter_post_order(root):
    if node.children():
      right = results.pop()
      left = results.pop()
      results.append(combine(node, left, right))
    else:
      results.append(leaf(node))
  return results.pop()
