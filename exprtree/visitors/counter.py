from collections import Counter
from ..core.node import Expression, Number, BinaryOperation, FunctionCall, Variable
from .base import ExpressionVisitor


class NodeCounter(ExpressionVisitor):
  """Count nodes per kind, keyed by class name"""

  def transform_number(self, number: Number) -> Counter:
    return Counter({'Number': 1})

  def transform_binary_operation(self, binop: BinaryOperation) -> Counter:
    counts = Counter({'BinaryOperation': 1})
    counts.update(binop.left.accept_visitor(self))
    counts.update(binop.right.accept_visitor(self))
    return counts

  def transform_function_call(self, fcall: FunctionCall) -> Counter:
    counts = Counter({'FunctionCall': 1})
    counts.update(fcall.arg.accept_visitor(self))
    return counts

  def transform_variable(self, var: Variable) -> Counter:
    return Counter({'Variable': 1})


def count_nodes(expression: Expression) -> Counter:
  return expression.accept_visitor(NodeCounter())
