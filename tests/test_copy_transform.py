import gc
import math

import pytest

from exprtree import (
    Number, BinaryOperation, FunctionCall, Variable,
    CopySyntaxTree, copy_tree, transform, shares_nodes, get_all_nodes
)
from conftest import build_tree_family


def _same_value(a: float, b: float) -> bool:
    return (math.isnan(a) and math.isnan(b)) or a == b


@pytest.mark.parametrize("tree", build_tree_family(), ids=repr)
def test_copy_is_structurally_equal_and_disjoint(tree):
    copied = transform(CopySyntaxTree(), tree)
    assert copied == tree
    assert copied is not tree
    assert not shares_nodes(tree, copied)
    assert len(get_all_nodes(copied)) == len(get_all_nodes(tree))


@pytest.mark.parametrize("tree", build_tree_family(), ids=repr)
def test_evaluation_is_invariant_under_copy(tree):
    copied = tree.transform(CopySyntaxTree())
    assert _same_value(tree.evaluate(), copied.evaluate())


def test_copy_through_accept_visitor(sample_tree):
    copied = sample_tree.accept_visitor(CopySyntaxTree())
    assert isinstance(copied, FunctionCall)
    assert copied.name == 'abs'
    assert copied.arg is not sample_tree.arg
    assert copied.evaluate() == sample_tree.evaluate() == 0.0


def test_copy_of_variable():
    var = Variable('x')
    copied = transform(CopySyntaxTree(), var)
    assert isinstance(copied, Variable)
    assert copied.name == 'x'
    assert copied is not var
    assert copied.evaluate() == 0.0


def test_copy_of_subtree_is_a_free_root(sample_tree):
    minus = sample_tree.arg.right.arg
    assert minus.is_attached()
    copied = copy_tree(minus)
    assert not copied.is_attached()
    assert copied.evaluate() == 16.0
    # the copy can be adopted by a new parent
    assert FunctionCall('sqrt', copied).evaluate() == 4.0


def test_original_is_untouched(sample_tree):
    before = repr(sample_tree)
    copy_tree(sample_tree)
    assert repr(sample_tree) == before
    assert sample_tree.evaluate() == 0.0


def test_copy_survives_discarding_the_original():
    original = BinaryOperation(Number(32.0), '-', Number(16.0))
    copied = copy_tree(original)
    del original
    gc.collect()
    assert copied.evaluate() == 16.0


def test_copy_is_unaffected_by_changes_to_the_original():
    original = BinaryOperation(Number(32.0), '-', Number(16.0))
    copied = copy_tree(original)
    # bypass immutability to simulate mutation of the source tree
    original._left = Number(100.0)
    assert original.evaluate() == 84.0
    assert copied.evaluate() == 16.0


def test_copy_visitor_is_reusable():
    copier = CopySyntaxTree()
    tree = FunctionCall('abs', Number(-3.0))
    first = tree.transform(copier)
    second = tree.transform(copier)
    assert first == second
    assert not shares_nodes(first, second)
