import sympy as sp
from ..core.node import Expression, Number, BinaryOperation, FunctionCall, Variable
from ..core.operators import OpType
from .base import ExpressionVisitor


class SymPyConverter(ExpressionVisitor):
  """Export a tree as a sympy expression.

  Variables become ``sympy.Symbol`` objects, so the result can be evaluated
  with real bindings through ``subs`` even though ``Variable.evaluate`` is a
  placeholder.
  """

  def transform_number(self, number: Number) -> sp.Expr:
    return sp.Float(number.value)

  def transform_binary_operation(self, binop: BinaryOperation) -> sp.Expr:
    left = binop.left.accept_visitor(self)
    right = binop.right.accept_visitor(self)
    if binop.operator == OpType.ADD:
      return sp.Add(left, right)
    elif binop.operator == OpType.SUB:
      return sp.Add(left, sp.Mul(-1, right))
    elif binop.operator == OpType.MUL:
      return sp.Mul(left, right)
    elif binop.operator == OpType.DIV:
      return sp.Mul(left, sp.Pow(right, -1))
    raise ValueError(f"Unexpected binary operator: {binop.operator!r}")

  def transform_function_call(self, fcall: FunctionCall) -> sp.Expr:
    arg = fcall.arg.accept_visitor(self)
    if fcall.name == 'sqrt':
      return sp.sqrt(arg)
    elif fcall.name == 'abs':
      return sp.Abs(arg)
    raise ValueError(f"Unexpected function: {fcall.name!r}")

  def transform_variable(self, var: Variable) -> sp.Expr:
    return sp.Symbol(var.name)


def to_sympy(expression: Expression) -> sp.Expr:
  return expression.accept_visitor(SymPyConverter())
