from abc import ABC, abstractmethod
from typing import Any
from ..core.node import Expression, Number, BinaryOperation, FunctionCall, Variable
from ..logging_system import get_logger


class ExpressionVisitor(ABC):
  """One handler per node kind.

  Nodes route to the handler for their own kind through
  ``Expression.accept_visitor``; handlers recurse into children the same way.
  """

  def visit(self, expression: Expression) -> Any:
    if not isinstance(expression, Expression):
      raise TypeError(f"{type(self).__name__} cannot visit {type(expression).__name__}")
    return expression.accept_visitor(self)

  @abstractmethod
  def transform_number(self, number: Number) -> Any:
    pass

  @abstractmethod
  def transform_binary_operation(self, binop: BinaryOperation) -> Any:
    pass

  @abstractmethod
  def transform_function_call(self, fcall: FunctionCall) -> Any:
    pass

  @abstractmethod
  def transform_variable(self, var: Variable) -> Any:
    pass


class Transformer(ExpressionVisitor):
  """Visitor whose handlers build and return a new Expression.

  The returned tree is owned by the caller and shares no node with the input.
  """

  @abstractmethod
  def transform_number(self, number: Number) -> Expression:
    pass

  @abstractmethod
  def transform_binary_operation(self, binop: BinaryOperation) -> Expression:
    pass

  @abstractmethod
  def transform_function_call(self, fcall: FunctionCall) -> Expression:
    pass

  @abstractmethod
  def transform_variable(self, var: Variable) -> Expression:
    pass


def transform(visitor: ExpressionVisitor, expression: Expression) -> Any:
  """Run a visitor over a whole tree starting at its root"""
  if not isinstance(expression, Expression):
    raise TypeError(f"{type(visitor).__name__} cannot visit {type(expression).__name__}")
  logger = get_logger()
  if logger.is_debug_enabled():
    logger.debug(f"{type(visitor).__name__} over tree of size {expression.size()}")
  return visitor.visit(expression)
