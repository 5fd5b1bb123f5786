# Python

"""Expression Tree Package

Arithmetic syntax trees with numeric evaluation and visitor-based
transformations.
"""

from .core import (
  Expression, Number, BinaryOperation, FunctionCall, Variable,
  NodeType, OpType, FUNCTION_NAMES
)
from .errors import (
  InvalidConstructionError, MissingOperandError, InvalidOperandError,
  InvalidOperatorError, InvalidFunctionNameError, SharedNodeError
)
from .visitors import (
  ExpressionVisitor, Transformer, transform,
  CopySyntaxTree, copy_tree, ExpressionPrinter,
  SymPyConverter, to_sympy,
  DifferentiationTransformer, differentiate,
  NodeCounter, count_nodes
)
from .utils import (
  get_all_nodes, calculate_tree_depth, find_nodes_by_type, get_variables,
  structurally_equal, shares_nodes, validate_tree_structure
)
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "Number", "BinaryOperation", "FunctionCall", "Variable",
  "NodeType", "OpType", "FUNCTION_NAMES",
  "InvalidConstructionError", "MissingOperandError", "InvalidOperandError",
  "InvalidOperatorError", "InvalidFunctionNameError", "SharedNodeError",
  "ExpressionVisitor", "Transformer", "transform",
  "CopySyntaxTree", "copy_tree", "ExpressionPrinter",
  "SymPyConverter", "to_sympy",
  "DifferentiationTransformer", "differentiate",
  "NodeCounter", "count_nodes",
  "get_all_nodes", "calculate_tree_depth", "find_nodes_by_type", "get_variables",
  "structurally_equal", "shares_nodes", "validate_tree_structure",
  "LogLevel", "configure_logging", "get_logger", "set_log_level"
]
