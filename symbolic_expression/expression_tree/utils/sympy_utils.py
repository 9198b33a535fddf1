import sympy as sp
from typing import Optional, Union

from ..core.node import Node


class SymPyBridge:
  """Conversion of expression trees to SymPy for display and cross-checking"""

  @staticmethod
  def to_sympy(node: Node) -> sp.Expr:
    return node.to_sympy()

  @staticmethod
  def latex_representation(node: Optional[Node]) -> str:
    """Get LaTeX representation of the expression"""
    if node is None:
      return ''
    return sp.latex(node.to_sympy())

  @staticmethod
  def symbolically_equivalent(a: Union[Node, sp.Expr], b: Union[Node, sp.Expr]) -> bool:
    """True when SymPy reduces a - b to zero"""
    if isinstance(a, Node):
      a = a.to_sympy()
    if isinstance(b, Node):
      b = b.to_sympy()
    try:
      # Floats become exact rationals before simplifying
      difference = sp.simplify(sp.nsimplify(a - b, rational=True))
    except (TypeError, ValueError):
      return False
    return difference == 0

  @staticmethod
  def derivative_reference(node: Node, variable: str) -> sp.Expr:
    """SymPy's own derivative, used as an oracle for the structural one"""
    return sp.diff(node.to_sympy(), sp.Symbol(variable))
