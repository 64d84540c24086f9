"""Test enum Operator."""
import math

import pytest

from rpn_calculator.common.operators import Operator, is_operator


@pytest.mark.parametrize("symbol,priority,right", [
    ("+", 1, False),
    ("-", 1, False),
    ("*", 2, False),
    ("/", 2, False),
    ("%", 3, True),
    ("^", 3, True),
    ("(", 0, False),
])
def test_priority_and_associativity(symbol: str, priority: int, right: bool) -> None:
    """Each symbol maps to its priority and associativity."""
    op = Operator(symbol)
    assert op.symbol == symbol
    assert op.priority == priority
    assert op.right_associative is right


@pytest.mark.parametrize("symbol,lhs,rhs,expected", [
    ("+", 3.0, 4.0, 7.0),
    ("-", 3.0, 4.0, -1.0),
    ("*", 3.0, 4.0, 12.0),
    ("/", 3.0, 4.0, 0.75),
    ("%", 7.0, 3.0, 1.0),
    ("%", -7.0, 3.0, -1.0),  # sign follows the dividend
    ("^", 2.0, 10.0, 1024.0),
    ("^", 4.0, 0.5, 2.0),
])
def test_apply(symbol: str, lhs: float, rhs: float, expected: float) -> None:
    """Operators compute lhs <op> rhs."""
    assert Operator(symbol).apply(lhs, rhs) == expected


def test_divide_by_zero_is_infinite() -> None:
    """Division by zero follows IEEE-754 instead of raising."""
    assert Operator.DIV.apply(1.0, 0.0) == math.inf
    assert Operator.DIV.apply(-1.0, 0.0) == -math.inf
    assert math.isnan(Operator.DIV.apply(0.0, 0.0))


def test_modulo_by_zero_is_nan() -> None:
    """Modulo by zero gives NaN like C fmod."""
    assert math.isnan(Operator.MOD.apply(5.0, 0.0))


def test_power_edge_cases() -> None:
    """Real-valued power gives NaN or infinity rather than raising."""
    assert math.isnan(Operator.POW.apply(-8.0, 1.0 / 3.0))
    assert Operator.POW.apply(0.0, -1.0) == math.inf
    assert Operator.POW.apply(10.0, 400.0) == math.inf


def test_open_paren_cannot_be_applied() -> None:
    """The open parenthesis is not an arithmetic operator."""
    with pytest.raises(ValueError):
        Operator.OPEN_PAREN.apply(1.0, 2.0)


@pytest.mark.parametrize("char,expected", [
    ("+", True),
    ("^", True),
    ("(", False),
    (".", False),
    ("x", False),
])
def test_is_operator(char: str, expected: bool) -> None:
    """Only the six arithmetic symbols are operators."""
    assert is_operator(char) is expected
