import math

import pytest

from symbolic_expression import (
    parse, evaluate, release_tree, ConstantNode, VariableNode, BinaryOpNode
)
from symbolic_expression.config import MAX_NAME_LENGTH


def test_precedence_builds_product_under_sum(pool, release):
    tree = release(parse("2 + 3 * 4"))

    assert isinstance(tree, BinaryOpNode)
    assert tree.operator == '+'
    assert isinstance(tree.left, ConstantNode) and tree.left.value == 2.0
    assert isinstance(tree.right, BinaryOpNode) and tree.right.operator == '*'


def test_parentheses_override_precedence(pool, release):
    tree = release(parse("(2 + 3) * 4"))

    assert tree.operator == '*'
    assert tree.left.operator == '+'
    assert evaluate(tree) == 20.0


def test_operators_are_left_associative(pool, release):
    difference = release(parse("8 - 3 - 2"))
    quotient = release(parse("12 / 3 / 2"))

    assert difference.left.operator == '-'
    assert evaluate(difference) == 3.0
    assert evaluate(quotient) == 2.0


@pytest.mark.parametrize("name,expected", [
    ("pi", math.pi),
    ("e", math.e),
    ("ln2", math.log(2.0)),
    ("ln10", math.log(10.0)),
    ("sqrt2", math.sqrt(2.0)),
    ("sqrt1_2", math.sqrt(0.5)),
    ("deg2rad", math.pi / 180.0),
    ("rad2deg", 180.0 / math.pi),
    ("log2e", math.log2(math.e)),
    ("log10e", math.log10(math.e)),
    ("two_pi", 2.0 * math.pi),
    ("half_pi", 0.5 * math.pi),
])
def test_named_constants(pool, release, name, expected):
    tree = release(parse(name))

    assert isinstance(tree, ConstantNode)
    assert tree.value == pytest.approx(expected, rel=1e-15)


@pytest.mark.parametrize("text", ["pix", "e2", "Pi", "ln", "exp", "E"])
def test_identifiers_that_only_resemble_constants_are_variables(pool, release, text):
    tree = release(parse(text))

    assert isinstance(tree, VariableNode)
    assert tree.name == text


def test_constant_followed_by_underscore_is_not_a_constant():
    # "pi" is not a constant here and '_' cannot continue an identifier
    assert parse("pi_x") is None


def test_constants_inside_expressions(pool, release):
    tree = release(parse("2 * pi + e"))

    assert evaluate(tree) == pytest.approx(2 * math.pi + math.e)


@pytest.mark.parametrize("text,expected", [
    ("42", 42.0),
    ("1.5e3", 1500.0),
    (".5", 0.5),
    ("2.", 2.0),
    ("1e-2", 0.01),
    ("3.25E+1", 32.5),
])
def test_number_literals(pool, release, text, expected):
    tree = release(parse(text))

    assert isinstance(tree, ConstantNode)
    assert tree.value == expected


def test_whitespace_is_skipped_between_tokens(pool, release):
    tree = release(parse("  x\t*\n y  "))

    assert tree.operator == '*'
    assert (tree.left.name, tree.right.name) == ("x", "y")


@pytest.mark.parametrize("text", [
    "",
    "   ",
    "2 +",
    "(1 + 2",
    "1 + 2)",
    "2 3",
    "* 2",
    "()",
    ".",
    "2 $ 3",
    "x^2",
    "-x",
    "1e",
    "(x + (y * 2)",
    "x + * y",
])
def test_malformed_input_yields_none(pool, text):
    assert parse(text) is None


def test_non_string_input_yields_none():
    assert parse(None) is None


def test_failed_parse_returns_partial_nodes_to_pool(pool):
    allocated_before = pool.allocated

    assert parse("x * (y + 2 * z") is None
    assert pool.allocated > allocated_before


def test_long_variable_names_are_truncated(pool, release):
    long_name = "a" * 40 + "b"
    tree = release(parse(long_name + " + 1"))

    assert tree.left.name == "a" * MAX_NAME_LENGTH
    assert len(tree.left.name) == MAX_NAME_LENGTH


def test_variable_names_may_contain_digits(pool, release):
    tree = release(parse("x1 * y22"))

    assert (tree.left.name, tree.right.name) == ("x1", "y22")


def test_each_parse_builds_an_independent_tree(pool):
    first = parse("x + 1")
    second = parse("x + 1")

    assert first is not second
    assert first.left is not second.left
    release_tree(first)
    release_tree(second)
