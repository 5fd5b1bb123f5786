import math
import numbers
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, Union, TYPE_CHECKING
from .operators import (
  NodeType, OpType, BINARY_OP_MAP, FUNCTION_NAMES,
  evaluate_binary_op, evaluate_function
)
from ..errors import (
  InvalidConstructionError, MissingOperandError, InvalidOperandError,
  InvalidOperatorError, InvalidFunctionNameError, SharedNodeError
)
from ..logging_system import log_debug

if TYPE_CHECKING:
  from ..visitors.base import ExpressionVisitor


def _fail(error_cls, message: str):
  log_debug(f"Rejected node construction: {message}")
  raise error_cls(message)


def _check_operand(owner: str, role: str, operand: Any) -> 'Expression':
  if operand is None:
    _fail(MissingOperandError, f"{owner} {role} is missing")
  if not isinstance(operand, Expression):
    _fail(InvalidOperandError, f"{owner} {role} must be an Expression, got {type(operand).__name__}")
  if operand._attached:
    _fail(SharedNodeError, f"{owner} {role} {operand!r} already belongs to another node")
  return operand


def _coerce_operator(operator: Union[OpType, str]) -> OpType:
  if isinstance(operator, OpType):
    return operator
  if isinstance(operator, str) and operator in BINARY_OP_MAP:
    return BINARY_OP_MAP[operator]
  _fail(InvalidOperatorError, f"Unknown binary operator: {operator!r}")


class Expression(ABC):
  """Base node of an arithmetic syntax tree.

  Nodes are immutable and form a strict tree: each node belongs to at most
  one parent. New tree-wide operations are written as visitors and entered
  through ``accept_visitor``.
  """

  __slots__ = ('_hash_cache', '_size_cache', '_attached')

  def __init__(self):
    self._hash_cache: Optional[int] = None
    self._size_cache: Optional[int] = None
    self._attached = False

  @abstractmethod
  def evaluate(self) -> float:
    pass

  @abstractmethod
  def accept_visitor(self, visitor: 'ExpressionVisitor') -> Any:
    """Call the visitor's handler for this node kind and return its result"""
    pass

  def transform(self, visitor: 'ExpressionVisitor') -> Any:
    return self.accept_visitor(visitor)

  def children(self) -> Tuple['Expression', ...]:
    return ()

  def is_attached(self) -> bool:
    """True once the node has been adopted by a parent"""
    return self._attached

  def size(self) -> int:
    """Node count of the subtree"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(child.size() for child in self.children())
    return self._size_cache

  def to_string(self) -> str:
    from ..visitors.printer import ExpressionPrinter
    return self.accept_visitor(ExpressionPrinter())

  def __str__(self) -> str:
    return self.to_string()

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = self._compute_hash()
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if type(other) is not type(self):
      return NotImplemented
    return self._equals(other)

  @abstractmethod
  def _compute_hash(self) -> int:
    pass

  @abstractmethod
  def _equals(self, other) -> bool:
    pass


class Number(Expression):
  __slots__ = ('_value',)

  def __init__(self, value: float):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
      _fail(InvalidConstructionError, f"Number value must be a real number, got {value!r}")
    try:
      converted = float(value)
    except OverflowError:
      _fail(InvalidConstructionError, f"Number value {value!r} is out of float range")
    super().__init__()
    self._value = converted

  @property
  def value(self) -> float:
    return self._value

  def evaluate(self) -> float:
    return self._value

  def accept_visitor(self, visitor):
    return visitor.transform_number(self)

  def _compute_hash(self) -> int:
    key = 'nan' if math.isnan(self._value) else self._value
    return hash((NodeType.NUMBER, key))

  def _equals(self, other) -> bool:
    if math.isnan(self._value):
      return math.isnan(other._value)
    return self._value == other._value

  def __repr__(self) -> str:
    return f"Number({self._value!r})"


class BinaryOperation(Expression):
  __slots__ = ('_left', '_operator', '_right')

  def __init__(self, left: Expression, operator: Union[OpType, str], right: Expression):
    _check_operand('BinaryOperation', 'left operand', left)
    _check_operand('BinaryOperation', 'right operand', right)
    if left is right:
      _fail(SharedNodeError, "BinaryOperation operands must be distinct nodes")
    op = _coerce_operator(operator)
    super().__init__()
    left._attached = True
    right._attached = True
    self._left = left
    self._operator = op
    self._right = right

  @property
  def left(self) -> Expression:
    return self._left

  @property
  def right(self) -> Expression:
    return self._right

  @property
  def operator(self) -> OpType:
    return self._operator

  def evaluate(self) -> float:
    left_val = self._left.evaluate()
    right_val = self._right.evaluate()
    return evaluate_binary_op(left_val, right_val, self._operator)

  def accept_visitor(self, visitor):
    return visitor.transform_binary_operation(self)

  def children(self) -> Tuple[Expression, ...]:
    return (self._left, self._right)

  def _compute_hash(self) -> int:
    return hash((NodeType.BINARY_OP, self._operator, hash(self._left), hash(self._right)))

  def _equals(self, other) -> bool:
    return (self._operator == other._operator and
            self._left == other._left and
            self._right == other._right)

  def __repr__(self) -> str:
    return f"BinaryOperation({self._left!r}, {self._operator.symbol!r}, {self._right!r})"


class FunctionCall(Expression):
  __slots__ = ('_name', '_arg')

  def __init__(self, name: str, arg: Expression):
    if not isinstance(name, str) or name not in FUNCTION_NAMES:
      _fail(InvalidFunctionNameError,
            f"Unknown function {name!r}, expected one of {sorted(FUNCTION_NAMES)}")
    _check_operand('FunctionCall', 'argument', arg)
    super().__init__()
    arg._attached = True
    self._name = name
    self._arg = arg

  @property
  def name(self) -> str:
    return self._name

  @property
  def arg(self) -> Expression:
    return self._arg

  def evaluate(self) -> float:
    return evaluate_function(self._arg.evaluate(), self._name)

  def accept_visitor(self, visitor):
    return visitor.transform_function_call(self)

  def children(self) -> Tuple[Expression, ...]:
    return (self._arg,)

  def _compute_hash(self) -> int:
    return hash((NodeType.FUNCTION_CALL, self._name, hash(self._arg)))

  def _equals(self, other) -> bool:
    return self._name == other._name and self._arg == other._arg

  def __repr__(self) -> str:
    return f"FunctionCall({self._name!r}, {self._arg!r})"


class Variable(Expression):
  """Named placeholder; there is no environment, so it always evaluates to 0.0"""

  __slots__ = ('_name',)

  def __init__(self, name: str):
    if not isinstance(name, str):
      _fail(InvalidConstructionError, f"Variable name must be a string, got {name!r}")
    super().__init__()
    self._name = name

  @property
  def name(self) -> str:
    return self._name

  def evaluate(self) -> float:
    return 0.0

  def accept_visitor(self, visitor):
    return visitor.transform_variable(self)

  def _compute_hash(self) -> int:
    return hash((NodeType.VARIABLE, self._name))

  def _equals(self, other) -> bool:
    return self._name == other._name

  def __repr__(self) -> str:
    return f"Variable({self._name!r})"
