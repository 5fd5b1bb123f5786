"""Visitors over expression trees."""

from .base import ExpressionVisitor, Transformer, transform
from .copier import CopySyntaxTree, copy_tree
from .printer import ExpressionPrinter
from .sympy_converter import SymPyConverter, to_sympy
from .derivative import DifferentiationTransformer, differentiate
from .counter import NodeCounter, count_nodes

__all__ = [
    'ExpressionVisitor', 'Transformer', 'transform',
    'CopySyntaxTree', 'copy_tree',
    'ExpressionPrinter',
    'SymPyConverter', 'to_sympy',
    'DifferentiationTransformer', 'differentiate',
    'NodeCounter', 'count_nodes'
]
