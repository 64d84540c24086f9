"""
Command-line front end for the calculator.

This script:
- Reads one infix expression, from the command line or a line of stdin
- Prints its value, or its RPN text with --rpn
- On failure, prints the expression with a caret under the failing column

Exit codes: 0 on success, 1 when the expression is rejected, 2 on bad
command-line arguments.
"""

import argparse
import logging
import sys
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rpn_calculator.calculator import calculate, convert
from rpn_calculator.common.logger import configure_logging, logger
from rpn_calculator.common.models import (
    OPERAND_STACK_CAPACITY,
    OPERATOR_STACK_CAPACITY,
    CalculationResult,
    ConversionResult,
    StackLimits,
)


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : str
        Infix expression to evaluate, kept exactly as typed.
    rpn_only : bool
        Print the RPN text instead of evaluating it.
    limits : StackLimits
        Capacities of the operator and operand stacks.
    verbose : bool
        Enable debug logging.
    """

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Infix arithmetic expression")
    rpn_only: bool = Field(default=False, description="Only convert to RPN")
    limits: StackLimits = Field(default_factory=StackLimits, description="Stack capacities")
    verbose: bool = Field(default=False, description="Enable debug logging")


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="rpn-calc",
        description="Evaluate an infix arithmetic expression through Reverse Polish Notation",
    )

    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression such as '(3+4)*2', read from stdin when omitted",
    )
    parser.add_argument("--rpn", action="store_true", help="Print the RPN text instead of the value")
    parser.add_argument(
        "--operator-capacity",
        type=int,
        default=OPERATOR_STACK_CAPACITY,
        help="Operator stack capacity (default: %(default)s)",
    )
    parser.add_argument(
        "--operand-capacity",
        type=int,
        default=OPERAND_STACK_CAPACITY,
        help="Operand stack capacity (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    expression = args.expression
    if expression is None:
        expression = sys.stdin.readline().rstrip("\r\n")

    try:
        return CliArgs(
            expression=expression,
            rpn_only=args.rpn,
            limits=StackLimits(
                operator_capacity=args.operator_capacity,
                operand_capacity=args.operand_capacity,
            ),
            verbose=args.verbose,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def format_value(value: float) -> str:
    """
    Format a result without a trailing ``.0`` for whole numbers.

    Examples
    --------
    11.0 -> "11"
    0.1 -> "0.1"
    float("inf") -> "inf"
    """
    return f"{value:.15g}"


def format_error(result: Union[CalculationResult, ConversionResult]) -> str:
    """
    Render a failure as the expression, a caret line and the message.

    Examples
    --------
    3++4
      ^
    error: operator misplaced: '+' can't follow '+'

    :param result: Failed conversion or calculation

    :return: Three-line error report
    :rtype: str
    """
    caret = " " * result.fail_pos + "^"
    return f"{result.expression}\n{caret}\nerror: {result.message}"


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function executed by the ``rpn-calc`` console script.

    :param list argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Process exit code
    :rtype: int
    """
    cli_args = parse_args(argv)
    configure_logging(logging.DEBUG if cli_args.verbose else logging.WARNING)
    logger.info(f"🧮 Processing {cli_args.expression!r}")

    if cli_args.rpn_only:
        result = convert(cli_args.expression, cli_args.limits)
        output = result.rpn if result.ok else None
    else:
        result = calculate(cli_args.expression, cli_args.limits)
        output = format_value(result.value) if result.ok else None

    if output is None:
        print(format_error(result), file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
