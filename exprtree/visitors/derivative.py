"""
Symbolic differentiation as a tree transformer.

The result is a new tree built with the standard rules. Subtrees of the input
that appear in the derivative (u in the product rule, for instance) are
copied so the derivative never shares nodes with the input. No
simplification is attempted: d/dx (3 * x) comes back as
``((0 * x) + (3 * 1))``.
"""

from ..core.node import Expression, Number, BinaryOperation, FunctionCall, Variable
from ..core.operators import OpType
from .base import Transformer
from .copier import CopySyntaxTree


class DifferentiationTransformer(Transformer):

  def __init__(self, variable: str):
    self.variable = variable
    self._copier = CopySyntaxTree()

  def _copy(self, node: Expression) -> Expression:
    return node.accept_visitor(self._copier)

  def transform_number(self, number: Number) -> Expression:
    return Number(0.0)

  def transform_variable(self, var: Variable) -> Expression:
    return Number(1.0 if var.name == self.variable else 0.0)

  def transform_binary_operation(self, binop: BinaryOperation) -> Expression:
    u, v = binop.left, binop.right
    du = u.accept_visitor(self)
    dv = v.accept_visitor(self)
    op = binop.operator

    if op in (OpType.ADD, OpType.SUB):
      return BinaryOperation(du, op, dv)

    # u'v and uv' are shared by the product and quotient rules
    du_v = BinaryOperation(du, OpType.MUL, self._copy(v))
    u_dv = BinaryOperation(self._copy(u), OpType.MUL, dv)
    if op == OpType.MUL:
      return BinaryOperation(du_v, OpType.ADD, u_dv)
    if op == OpType.DIV:
      numerator = BinaryOperation(du_v, OpType.SUB, u_dv)
      denominator = BinaryOperation(self._copy(v), OpType.MUL, self._copy(v))
      return BinaryOperation(numerator, OpType.DIV, denominator)
    raise ValueError(f"Cannot differentiate operator {op!r}")

  def transform_function_call(self, fcall: FunctionCall) -> Expression:
    u = fcall.arg
    du = u.accept_visitor(self)

    if fcall.name == 'sqrt':
      # sqrt(u)' = u' / (2 * sqrt(u))
      denominator = BinaryOperation(Number(2.0), OpType.MUL, FunctionCall('sqrt', self._copy(u)))
      return BinaryOperation(du, OpType.DIV, denominator)
    if fcall.name == 'abs':
      # abs(u)' = u' * u / abs(u), nan at u == 0
      numerator = BinaryOperation(du, OpType.MUL, self._copy(u))
      return BinaryOperation(numerator, OpType.DIV, FunctionCall('abs', self._copy(u)))
    raise ValueError(f"Cannot differentiate function {fcall.name!r}")


def differentiate(expression: Expression, variable: str) -> Expression:
  return expression.accept_visitor(DifferentiationTransformer(variable))
