"""Core expression tree components."""

from .node import Expression, Number, BinaryOperation, FunctionCall, Variable
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, OP_SYMBOLS, FUNCTION_MAP, FUNCTION_NAMES,
    evaluate_binary_op, evaluate_function
)

__all__ = [
    'Expression', 'Number', 'BinaryOperation', 'FunctionCall', 'Variable',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'OP_SYMBOLS', 'FUNCTION_MAP', 'FUNCTION_NAMES',
    'evaluate_binary_op', 'evaluate_function'
]
