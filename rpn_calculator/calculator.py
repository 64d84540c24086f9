"""
Entry points turning an infix expression into RPN text or a numeric result.

Both functions report failures through their result model instead of
raising, so callers can show where the expression went wrong:

    >>> calculate("(3+4)*(5+6)").value
    77.0
    >>> result = calculate("3++4")
    >>> result.error, result.fail_pos
    (<ErrorKind.OPERATOR_MISPLACED: 'operator misplaced'>, 2)
"""
from typing import Optional

from rpn_calculator.common.errors import ExpressionError
from rpn_calculator.common.logger import logger
from rpn_calculator.common.models import CalculationResult, ConversionResult, StackLimits
from rpn_calculator.common.parser import ExpressionParser


def convert(expression: str, limits: Optional[StackLimits] = None) -> ConversionResult:
    """
    Convert an infix expression to Reverse Polish Notation.

    :param str expression: Infix arithmetic expression
    :param StackLimits limits: Stack capacities, defaults to StackLimits()

    :return: RPN text with ``fail_pos == -1``, or the failure position and kind
    :rtype: ConversionResult
    """
    try:
        rpn = ExpressionParser.to_rpn(expression, limits)
    except ExpressionError as exc:
        logger.info(f"Rejected {expression!r} at {exc.position}: {exc.message}")
        return ConversionResult(
            expression=expression,
            fail_pos=exc.position,
            error=exc.kind,
            message=exc.message,
        )

    return ConversionResult(expression=expression, rpn=rpn)


def calculate(expression: str, limits: Optional[StackLimits] = None) -> CalculationResult:
    """
    Convert then evaluate an infix expression.

    Conversion errors keep their position. Errors raised while evaluating the
    RPN (e.g. a trailing operator in ``"3+"``) are reported at
    ``len(expression)`` rather than being dropped.

    :param str expression: Infix arithmetic expression
    :param StackLimits limits: Stack capacities, defaults to StackLimits()

    :return: Value with ``fail_pos == -1``, or ``value == 0`` and the failure
    :rtype: CalculationResult
    """
    try:
        value = ExpressionParser.evaluate(expression, limits)
    except ExpressionError as exc:
        logger.info(f"Rejected {expression!r} at {exc.position}: {exc.message}")
        return CalculationResult(
            expression=expression,
            fail_pos=exc.position,
            error=exc.kind,
            message=exc.message,
        )

    return CalculationResult(expression=expression, value=value)
