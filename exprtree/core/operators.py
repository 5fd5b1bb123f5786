import numpy as np
from enum import IntEnum
from typing import Callable, Dict


class NodeType(IntEnum):
  NUMBER = 0
  BINARY_OP = 1
  FUNCTION_CALL = 2
  VARIABLE = 3


class OpType(IntEnum):
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3

  @property
  def symbol(self) -> str:
    return OP_SYMBOLS[self]


# Mapping dictionaries
BINARY_OP_MAP: Dict[str, OpType] = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV}
OP_SYMBOLS: Dict[OpType, str] = {op: sym for sym, op in BINARY_OP_MAP.items()}

FUNCTION_MAP: Dict[str, Callable[[np.float64], np.float64]] = {
    'sqrt': np.sqrt,
    'abs': np.abs,
}
FUNCTION_NAMES = frozenset(FUNCTION_MAP)


def evaluate_binary_op(left_val: float, right_val: float, op_type: OpType) -> float:
  """IEEE-754 arithmetic: x/0 gives +-inf and 0/0 gives nan instead of raising"""
  left = np.float64(left_val)
  right = np.float64(right_val)
  with np.errstate(all='ignore'):
    if op_type == OpType.ADD:
      result = left + right
    elif op_type == OpType.SUB:
      result = left - right
    elif op_type == OpType.MUL:
      result = left * right
    elif op_type == OpType.DIV:
      result = left / right
    else:
      raise ValueError(f"Unknown binary operator: {op_type!r}")
  return float(result)


def evaluate_function(operand_val: float, name: str) -> float:
  """sqrt of a negative operand gives nan"""
  func = FUNCTION_MAP[name]
  with np.errstate(all='ignore'):
    result = func(np.float64(operand_val))
  return float(result)
