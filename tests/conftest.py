import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from exprtree import Number, BinaryOperation, FunctionCall, Variable, OpType
from exprtree.logging_system import LogLevel, configure_logging


def build_sample_tree():
    """abs(var * sqrt(32 - 16))"""
    n32 = Number(32.0)
    n16 = Number(16.0)
    minus = BinaryOperation(n32, OpType.SUB, n16)
    call_sqrt = FunctionCall('sqrt', minus)
    var = Variable('var')
    mult = BinaryOperation(var, OpType.MUL, call_sqrt)
    return FunctionCall('abs', mult)


def build_tree_family():
    return [
        Number(10.0),
        Variable('x'),
        BinaryOperation(Number(1.234), OpType.DIV, Number(-1.234)),
        FunctionCall('sqrt', BinaryOperation(Number(32.0), OpType.SUB, Number(16.0))),
        FunctionCall('abs', BinaryOperation(Number(2.0), OpType.MUL,
                                            FunctionCall('sqrt', BinaryOperation(Number(32.0), '-', Number(16.0))))),
        BinaryOperation(Number(1.0), '/', Number(0.0)),
        FunctionCall('sqrt', Number(-4.0)),
        build_sample_tree(),
    ]


@pytest.fixture
def sample_tree():
    return build_sample_tree()


@pytest.fixture(autouse=True)
def reset_logging():
    configure_logging(LogLevel.MODERATE)
    yield
    configure_logging(LogLevel.MODERATE)
