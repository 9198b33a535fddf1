class SymbolicExpressionError(Exception):
  """Base class for errors raised inside the expression engine"""


class ExpressionSyntaxError(SymbolicExpressionError):
  """Malformed expression text; carries the offset where parsing stopped"""

  def __init__(self, message: str, position: int):
    super().__init__(f"{message} at position {position}")
    self.position = position


class UnsupportedOperatorError(SymbolicExpressionError):
  """Operator symbol with no differentiation rule"""

  def __init__(self, operator: str):
    super().__init__(f"no differentiation rule for operator '{operator}'")
    self.operator = operator
