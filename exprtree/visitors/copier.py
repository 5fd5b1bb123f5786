from ..core.node import Expression, Number, BinaryOperation, FunctionCall, Variable
from .base import Transformer


class CopySyntaxTree(Transformer):
  """Deep structural copy: every node is rebuilt even though nothing changes"""

  def transform_number(self, number: Number) -> Expression:
    return Number(number.value)

  def transform_binary_operation(self, binop: BinaryOperation) -> Expression:
    left = binop.left.accept_visitor(self)
    right = binop.right.accept_visitor(self)
    return BinaryOperation(left, binop.operator, right)

  def transform_function_call(self, fcall: FunctionCall) -> Expression:
    arg = fcall.arg.accept_visitor(self)
    return FunctionCall(fcall.name, arg)

  def transform_variable(self, var: Variable) -> Expression:
    return Variable(var.name)


def copy_tree(expression: Expression) -> Expression:
  return expression.accept_visitor(CopySyntaxTree())
