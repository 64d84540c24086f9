"""Validate, convert and evaluate arithmetic expressions safely."""
from typing import List, Optional, TypeVar

from rpn_calculator.common.errors import ErrorKind, ExpressionError
from rpn_calculator.common.logger import logger
from rpn_calculator.common.models import StackLimits
from rpn_calculator.common.operators import Operator, is_operator
from rpn_calculator.common.scanner import NUMBER_CHARS, POINT, is_digit, scan_number
from rpn_calculator.common.stack import BoundedStack, StackFullError

# Emitted once before every operator so adjacent number runs stay apart
SEPARATOR = " "

T = TypeVar("T")


def _describe(char: Optional[str]) -> str:
    return "start of expression" if char is None else repr(char)


class ExpressionParser:
    """
    Parse and evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - Every call owns its stacks, nothing is shared between calls
        - Stacks are bounded, an expression that needs more room is rejected

    Algorithm:
        1. Scan the infix expression once, checking each character against
           the one before it
        2. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        3. Evaluate RPN using a stack

    Numbers are copied to the RPN text as unbroken runs of digits and points.
    A single space is written before each operator is handled, which is
    enough to keep two consecutive numbers apart since a number can never
    directly follow a closing parenthesis.

    Examples:
        - Infix expression (standard notation): 3+4*2
        - Corresponding RPN text: "3 4 2*+"
        - Infix expression: (3+4)*(5+6)
        - Corresponding RPN text: "3 4+ 5 6+*"

    """

    @staticmethod
    def _push(stack: BoundedStack[T], item: T, position: int, what: str) -> None:
        """Push onto a bounded stack, turning overflow into a positioned error."""
        try:
            stack.push(item)
        except StackFullError:
            raise ExpressionError(
                ErrorKind.TOO_COMPLEX, position, f"{what} stack holds at most {stack.capacity} entries"
            ) from None

    @staticmethod
    def _should_pop(top: Operator, incoming: Operator) -> bool:
        """
        Decide whether ``top`` must be emitted before ``incoming`` is pushed.

        Left-associative operators pop everything of equal or higher priority,
        right-associative ones only what binds strictly tighter. The open
        parenthesis has the lowest priority and is never popped here.

        :param Operator top: Operator currently on top of the stack
        :param Operator incoming: Operator just scanned

        :return: True if ``top`` must be popped to the output
        :rtype: bool
        """
        if incoming.right_associative:
            return top.priority > incoming.priority
        return top.priority >= incoming.priority

    @staticmethod
    def to_rpn(expr: str, limits: Optional[StackLimits] = None) -> str:
        """
        Validate an infix expression and convert it to Reverse Polish Notation.

        :param str expr: Infix arithmetic expression, without whitespace
        :param StackLimits limits: Stack capacities, defaults to StackLimits()

        :return: RPN text
        :rtype: str
        :raises ExpressionError: At the first character breaking the grammar,
            or at ``len(expr)`` if a parenthesis is left open
        """
        limits = limits or StackLimits()
        stack: BoundedStack[Operator] = BoundedStack(limits.operator_capacity)
        output: List[str] = []

        prev: Optional[str] = None
        point_count = 0
        open_parens = 0

        for position, char in enumerate(expr):
            if char == "(":
                if prev is not None and prev != "(" and not is_operator(prev):
                    raise ExpressionError(
                        ErrorKind.OPEN_PAREN_MISPLACED, position, f"'(' can't follow {_describe(prev)}"
                    )
                ExpressionParser._push(stack, Operator.OPEN_PAREN, position, "operator")
                open_parens += 1
                point_count = 0

            elif char == ")":
                if prev != ")" and not is_digit(prev):
                    raise ExpressionError(
                        ErrorKind.CLOSE_PAREN_MISPLACED, position, f"')' can't follow {_describe(prev)}"
                    )
                if open_parens == 0:
                    raise ExpressionError(ErrorKind.MISSING_OPEN_PAREN, position)
                # Flush operators back to the matching parenthesis, then drop it
                while stack.peek() is not Operator.OPEN_PAREN:
                    output.append(stack.pop().symbol)
                stack.pop()
                open_parens -= 1
                point_count = 0

            elif is_operator(char):
                if prev != ")" and not is_digit(prev):
                    raise ExpressionError(
                        ErrorKind.OPERATOR_MISPLACED, position, f"{char!r} can't follow {_describe(prev)}"
                    )
                incoming = Operator(char)
                output.append(SEPARATOR)
                while stack and ExpressionParser._should_pop(stack.peek(), incoming):
                    output.append(stack.pop().symbol)
                ExpressionParser._push(stack, incoming, position, "operator")
                point_count = 0

            elif char == POINT:
                if prev == ")":
                    raise ExpressionError(ErrorKind.MISPLACED_POINT, position, "'.' can't follow ')'")
                if point_count > 0:
                    raise ExpressionError(ErrorKind.TOO_MANY_POINTS, position)
                output.append(char)
                point_count += 1

            elif is_digit(char):
                if prev == ")":
                    raise ExpressionError(ErrorKind.DIGIT_AFTER_CLOSE_PAREN, position, f"{char!r} can't follow ')'")
                output.append(char)

            else:
                raise ExpressionError(ErrorKind.UNKNOWN_SYMBOL, position, repr(char))

            prev = char

        if open_parens > 0:
            raise ExpressionError(
                ErrorKind.MISSING_CLOSE_PAREN, len(expr), f"{open_parens} parenthesis left open"
            )

        # Append remaining operators in reverse order (stack top first)
        while stack:
            output.append(stack.pop().symbol)

        rpn = "".join(output)
        logger.debug(f"Converted {expr!r} to RPN {rpn!r}")
        return rpn

    @staticmethod
    def evaluate_rpn(rpn: str, limits: Optional[StackLimits] = None) -> float:
        """
        Evaluate RPN text produced by ``to_rpn``.

        Any character that is neither part of a number nor an operator is
        treated as a separator and skipped.

        :param str rpn: RPN text
        :param StackLimits limits: Stack capacities, defaults to StackLimits()

        :return: Computed result as float
        :rtype: float
        :raises ExpressionError: On operand stack overflow or an arity error,
            positioned in the RPN text
        """
        limits = limits or StackLimits()
        stack: BoundedStack[float] = BoundedStack(limits.operand_capacity)

        position = 0
        while position < len(rpn):
            char = rpn[position]

            if char in NUMBER_CHARS:
                value, next_position = scan_number(rpn, position)
                ExpressionParser._push(stack, value, position, "operand")
                position = next_position
                continue

            if is_operator(char):
                # Operator requires two operands
                if len(stack) < 2:
                    raise ExpressionError(
                        ErrorKind.TOO_FEW_OPERANDS, position, f"{char!r} needs 2, got {len(stack)}"
                    )
                rhs: float = stack.pop()
                lhs: float = stack.pop()
                stack.push(Operator(char).apply(lhs, rhs))

            position += 1

        if len(stack) > 1:
            raise ExpressionError(ErrorKind.MISSING_OPERATOR, len(rpn), f"{len(stack)} operands left over")
        if not stack:
            raise ExpressionError(ErrorKind.EMPTY_EXPRESSION, len(rpn))

        return stack.pop()

    @staticmethod
    def evaluate(expr: str, limits: Optional[StackLimits] = None) -> float:
        """
        Evaluate an arithmetic expression safely.

        Errors found while evaluating the RPN are reported at ``len(expr)``,
        the whole input having been consumed by then.

        :param str expr: Infix arithmetic expression
        :param StackLimits limits: Stack capacities, defaults to StackLimits()

        :return: Computed result as float
        :rtype: float
        :raises ExpressionError: If the expression is invalid or malformed
        """
        rpn = ExpressionParser.to_rpn(expr, limits)
        try:
            result = ExpressionParser.evaluate_rpn(rpn, limits)
        except ExpressionError as exc:
            raise ExpressionError(exc.kind, len(expr), exc.detail) from exc

        logger.debug(f"Evaluated {expr!r} = {result}")
        return result
