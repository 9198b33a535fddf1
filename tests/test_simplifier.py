import math

import pytest

from symbolic_expression import (
    parse, simplify, evaluate, make_lookup, to_string, trees_equal, get_global_pool,
    ConstantNode, BinaryOpNode
)
from symbolic_expression.expression_tree.utils.tree_utils import get_all_nodes


def test_folds_constant_sum(pool, release):
    simplified = release(simplify(release(parse("2 + 2"))))

    assert isinstance(simplified, ConstantNode)
    assert simplified.value == 4.0
    assert "4" in to_string(simplified)


@pytest.mark.parametrize("text,expected", [
    ("x + 2 * 3", "x + 6"),
    ("(1 + 2) * (3 + x)", "3 * 3 + x"),
    ("x * (8 / 4 - 1)", "x * 1"),
    ("(2 * 3) / (x - 1)", "6 / x - 1"),
    ("x + y", "x + y"),
])
def test_folds_only_constant_subtrees(pool, release, text, expected):
    assert to_string(release(simplify(release(parse(text))))) == expected


@pytest.mark.parametrize("text", ["x * 1", "x + 0", "0 * x", "x - x", "x / 1"])
def test_no_algebraic_identities(pool, release, text):
    simplified = release(simplify(release(parse(text))))

    assert to_string(simplified) == text


def test_division_by_zero_folds_to_nan(pool, release):
    simplified = release(simplify(release(parse("1 / 0"))))

    assert isinstance(simplified, ConstantNode)
    assert math.isnan(simplified.value)


def test_nan_folds_upward(pool, release):
    simplified = release(simplify(release(parse("(1 / 0) * 2 + 3"))))

    assert isinstance(simplified, ConstantNode)
    assert math.isnan(simplified.value)


@pytest.mark.parametrize("text", [
    "2 + 2",
    "x + 2 * 3",
    "(1 + 2) * (x + 3 * 4) / (5 - 5)",
    "1 / 0 + x",
    "x * y - (2 + pi) * e",
    "x",
    "7",
])
def test_simplify_is_idempotent(pool, release, text):
    once = release(simplify(release(parse(text))))
    twice = release(simplify(once))

    assert trees_equal(once, twice)


def test_preserves_value(pool, release):
    tree = release(parse("(2 + 3) * x - 4 / (1 + 1) * y"))
    simplified = release(simplify(tree))
    lookup = make_lookup({"x": 1.5, "y": -2.0})

    assert evaluate(simplified, lookup) == pytest.approx(evaluate(tree, lookup))


def test_input_is_untouched_and_unshared(pool, release):
    tree = release(parse("x * (2 + 3)"))
    simplified = release(simplify(tree))

    assert to_string(tree) == "x * 2 + 3"
    assert isinstance(tree.right, BinaryOpNode)
    input_ids = {id(node) for node in get_all_nodes(tree)}
    assert input_ids.isdisjoint(id(node) for node in get_all_nodes(simplified))


def test_operators_without_folding_rule_are_kept(pool, release):
    node_pool = get_global_pool()
    power = release(node_pool.get_binary_node(
        '^', node_pool.get_binary_node('+', node_pool.get_constant_node(1.0), node_pool.get_constant_node(1.0)),
        node_pool.get_constant_node(3.0)))

    simplified = release(simplify(power))

    assert isinstance(simplified, BinaryOpNode)
    assert simplified.operator == '^'
    assert simplified.left.value == 2.0


def test_nothing_to_simplify():
    assert simplify(None) is None
