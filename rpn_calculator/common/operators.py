"""Operator tokens with their priority, associativity and arithmetic."""
from collections.abc import Callable as ABCCallable
from enum import Enum
from typing import Callable, Dict, Tuple

import numpy as np


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

LEFT = "left"
RIGHT = "right"


class Operator(Enum):
    """Single-character tokens that can sit on the operator stack."""

    OPEN_PAREN = "("
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    POW = "^"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def priority(self) -> int:
        """Binding strength; the open parenthesis binds weakest of all."""
        if self is Operator.OPEN_PAREN:
            return 0
        return OPERATORS[self][0]

    @property
    def right_associative(self) -> bool:
        return self is not Operator.OPEN_PAREN and OPERATORS[self][1] == RIGHT

    def apply(self, lhs: float, rhs: float) -> float:
        """
        Compute ``lhs <op> rhs`` with IEEE-754 semantics.

        Division and modulo by zero give ``inf``/``nan`` instead of raising,
        ``%`` truncates like C ``fmod`` and ``^`` is the real-valued power.

        :param float lhs: Left operand (pushed first)
        :param float rhs: Right operand (pushed last)

        :return: Result of the operation
        :rtype: float
        :raises ValueError: If called on the open parenthesis
        """
        if self is Operator.OPEN_PAREN:
            raise ValueError("Open parenthesis is not an arithmetic operator")
        fn = OPERATORS[self][2]
        with np.errstate(all="ignore"):
            return float(fn(np.float64(lhs), np.float64(rhs)))


# Mapping of arithmetic operators to (priority, associativity, function)
OPERATORS: Dict[Operator, Tuple[int, str, OperatorFn]] = {
    Operator.ADD: (1, LEFT, np.add),
    Operator.SUB: (1, LEFT, np.subtract),
    Operator.MUL: (2, LEFT, np.multiply),
    Operator.DIV: (2, LEFT, np.true_divide),
    Operator.MOD: (3, RIGHT, np.fmod),
    Operator.POW: (3, RIGHT, np.power),
}

OPERATOR_SYMBOLS = frozenset(op.symbol for op in OPERATORS)


def is_operator(char: str) -> bool:
    """Return True if ``char`` is one of the six arithmetic operator symbols."""
    return char in OPERATOR_SYMBOLS
