from ..core.node import Number, BinaryOperation, FunctionCall, Variable
from .base import ExpressionVisitor


class ExpressionPrinter(ExpressionVisitor):
  """Fully parenthesised infix rendering"""

  def __init__(self, number_format: str = 'g'):
    self.number_format = number_format

  def transform_number(self, number: Number) -> str:
    return format(number.value, self.number_format)

  def transform_binary_operation(self, binop: BinaryOperation) -> str:
    left = binop.left.accept_visitor(self)
    right = binop.right.accept_visitor(self)
    return f"({left} {binop.operator.symbol} {right})"

  def transform_function_call(self, fcall: FunctionCall) -> str:
    return f"{fcall.name}({fcall.arg.accept_visitor(self)})"

  def transform_variable(self, var: Variable) -> str:
    return var.name
