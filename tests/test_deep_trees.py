import sys

import numpy as np
import pytest

from symbolic_expression import (
    Expression, parse, evaluate, evaluate_array, differentiate, simplify, substitute,
    to_string, to_string_bounded, release_tree, trees_equal, ConstantNode
)
from symbolic_expression.expression_tree import ExpressionValidator, calculate_tree_depth, get_variables

# Well past the interpreter's recursion limit
TERMS = max(1500, 2 * sys.getrecursionlimit())


def chain(term, op="+", count=TERMS):
    return f" {op} ".join([term] * count)


def test_long_chain_parses_and_evaluates(pool, release):
    tree = release(parse(chain("1")))

    assert tree is not None
    assert evaluate(tree) == TERMS
    assert calculate_tree_depth(tree) == TERMS
    assert tree.size() == 2 * TERMS - 1


def test_long_chain_evaluates_over_arrays(pool, release):
    tree = release(parse(chain("x")))

    result = evaluate_array(tree, {"x": np.array([1.0, 2.0])})

    np.testing.assert_allclose(result, [TERMS, 2 * TERMS])


def test_long_chain_serializes(pool, release):
    text = chain("1")
    tree = release(parse(text))

    assert to_string(tree) == text
    assert to_string_bounded(tree, 10) == ("1 + 1 + 1", 9)


def test_long_chain_differentiates(pool, release):
    tree = release(parse(chain("x")))

    derivative = release(differentiate(tree, "x"))

    assert derivative is not None
    assert evaluate(derivative, lambda name: 5.0) == TERMS


def test_long_chain_simplifies_to_one_constant(pool, release):
    tree = release(parse(chain("2")))

    folded = release(simplify(tree))

    assert isinstance(folded, ConstantNode)
    assert folded.value == 2.0 * TERMS


def test_long_chain_substitutes(pool, release):
    tree = release(parse(chain("x", op="*", count=TERMS)))

    replaced = release(substitute(tree, "x", 1.0))

    assert evaluate(replaced) == 1.0


def test_long_chain_structural_operations(pool, release):
    tree = release(parse(chain("y")))
    duplicate = release(tree.copy())

    assert trees_equal(tree, duplicate)
    assert hash(tree) == hash(duplicate)
    assert ExpressionValidator.is_valid_expression(tree)
    assert get_variables(tree) == ["y"]


def test_long_chain_releases_completely(pool):
    live_before = pool.live_count
    released_before = pool.released
    tree = parse(chain("z"))

    release_tree(tree)

    assert pool.live_count == live_before
    assert pool.released - released_before == 2 * TERMS - 1


def test_long_chain_through_expression(pool):
    with Expression.parse(chain("x", op="-")) as expr:
        assert expr.depth() == TERMS
        with expr.simplify() as simplified:
            assert simplified.evaluate({"x": 1.0}) == pytest.approx(2.0 - TERMS)
