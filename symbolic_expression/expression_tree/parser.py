"""
Recursive-descent parser turning expression text into a node tree.

Grammar (ascending precedence, left-associative):

    expr   = term { ('+' | '-') term }
    term   = factor { ('*' | '/') factor }
    factor = number | named-constant | identifier | '(' expr ')'

There is no unary minus and no exponent operator. Malformed input never
raises out of parse(); it yields None and the reason is logged at debug level.
"""

import re
import string
from typing import List, Optional

from .core.node import Node
from .core.operators import ADDITIVE_OPS, MULTIPLICATIVE_OPS
from .optimization.memory_pool import get_global_pool
from ..config import NAMED_CONSTANTS, MAX_NAME_LENGTH
from ..exceptions import ExpressionSyntaxError
from ..logging_system import log_debug

# Leading digit or '.', optional fraction, optional signed exponent
NUMBER_PATTERN = re.compile(r'(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)

WHITESPACE = ' \t\r\n\v\f'
IDENT_START = string.ascii_letters
IDENT_CHARS = string.ascii_letters + string.digits


class ExpressionParser:
  """Single-use parser over one input string"""

  def __init__(self, text: str):
    self.text = text
    self.pos = 0
    self.pool = get_global_pool()
    self._allocated: List[Node] = []

  def parse(self) -> Node:
    self._skip_whitespace()
    if self._at_end():
      raise ExpressionSyntaxError("empty expression", self.pos)

    root = self._parse_expr()

    self._skip_whitespace()
    if not self._at_end():
      raise ExpressionSyntaxError(f"unexpected trailing character {self._peek()!r}", self.pos)

    self._allocated.clear()
    return root

  def discard(self):
    """Return every node built so far; each is released exactly once"""
    for node in self._allocated:
      self.pool.return_node(node)
    self._allocated.clear()

  def _parse_expr(self) -> Node:
    node = self._parse_term()
    while True:
      self._skip_whitespace()
      op = self._peek()
      if op not in ADDITIVE_OPS:
        return node
      self.pos += 1
      rhs = self._parse_term()
      node = self._new_binary(op, node, rhs)

  def _parse_term(self) -> Node:
    node = self._parse_factor()
    while True:
      self._skip_whitespace()
      op = self._peek()
      if op not in MULTIPLICATIVE_OPS:
        return node
      self.pos += 1
      rhs = self._parse_factor()
      node = self._new_binary(op, node, rhs)

  def _parse_factor(self) -> Node:
    self._skip_whitespace()
    if self._at_end():
      raise ExpressionSyntaxError("missing operand", self.pos)

    ch = self._peek()

    if ch in string.digits or ch == '.':
      return self._parse_number()

    constant = self._match_named_constant()
    if constant is not None:
      return constant

    if ch in IDENT_START:
      return self._parse_identifier()

    if ch == '(':
      start = self.pos
      self.pos += 1
      node = self._parse_expr()
      self._skip_whitespace()
      if self._peek() != ')':
        raise ExpressionSyntaxError(f"unclosed parenthesis opened at {start}", self.pos)
      self.pos += 1
      return node

    raise ExpressionSyntaxError(f"unexpected character {ch!r}", self.pos)

  def _parse_number(self) -> Node:
    match = NUMBER_PATTERN.match(self.text, self.pos)
    if match is None:
      raise ExpressionSyntaxError("malformed number", self.pos)
    self.pos = match.end()
    return self._track(self.pool.get_constant_node(float(match.group())))

  def _match_named_constant(self) -> Optional[Node]:
    for name, value in NAMED_CONSTANTS.items():
      if not self.text.startswith(name, self.pos):
        continue
      after = self.pos + len(name)
      if after < len(self.text) and (self.text[after] in IDENT_CHARS or self.text[after] == '_'):
        continue
      self.pos = after
      return self._track(self.pool.get_constant_node(value))
    return None

  def _parse_identifier(self) -> Node:
    start = self.pos
    while not self._at_end() and self.text[self.pos] in IDENT_CHARS:
      self.pos += 1
    name = self.text[start:self.pos]
    if len(name) > MAX_NAME_LENGTH:
      log_debug(f"Variable name truncated to {MAX_NAME_LENGTH} characters: {name!r}")
    return self._track(self.pool.get_variable_node(name))

  def _new_binary(self, op: str, left: Node, right: Node) -> Node:
    return self._track(self.pool.get_binary_node(op, left, right))

  def _track(self, node: Node) -> Node:
    self._allocated.append(node)
    return node

  def _skip_whitespace(self):
    while not self._at_end() and self.text[self.pos] in WHITESPACE:
      self.pos += 1

  def _peek(self) -> str:
    return self.text[self.pos] if self.pos < len(self.text) else ''

  def _at_end(self) -> bool:
    return self.pos >= len(self.text)


def parse(text: Optional[str]) -> Optional[Node]:
  """Parse expression text into a new tree owned by the caller, or None if malformed"""
  if not isinstance(text, str):
    return None

  parser = ExpressionParser(text)
  try:
    return parser.parse()
  except (ExpressionSyntaxError, RecursionError) as e:
    parser.discard()
    log_debug(f"Parse failed for {text!r}: {e}")
    return None
