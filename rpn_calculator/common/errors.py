"""Error kinds and exceptions raised while converting or evaluating expressions."""
from enum import Enum


class ErrorKind(str, Enum):
    """Every way an expression can be rejected."""

    # Grammar violations found by the converter
    OPEN_PAREN_MISPLACED = "open parenthesis misplaced"
    CLOSE_PAREN_MISPLACED = "close parenthesis misplaced"
    OPERATOR_MISPLACED = "operator misplaced"
    MISPLACED_POINT = "misplaced point"
    TOO_MANY_POINTS = "too many decimal points"
    DIGIT_AFTER_CLOSE_PAREN = "digit after close-parenthesis"
    UNKNOWN_SYMBOL = "unknown symbol"
    MISSING_OPEN_PAREN = "missing open parenthesis"
    MISSING_CLOSE_PAREN = "missing close parenthesis"

    # Either stack at capacity
    TOO_COMPLEX = "expression too complex"

    # Arity errors found by the evaluator
    TOO_FEW_OPERANDS = "too few operands"
    MISSING_OPERATOR = "missing operator(s)"
    EMPTY_EXPRESSION = "empty expression"


class ExpressionError(ValueError):
    """
    Raised when an expression cannot be converted or evaluated.

    :param ErrorKind kind: What went wrong
    :param int position: 0-based index of the offending character
    :param str detail: Optional extra context appended to the kind
    """

    def __init__(self, kind: ErrorKind, position: int, detail: str = ""):
        self.kind = kind
        self.position = position
        self.detail = detail
        self.message = f"{kind.value}: {detail}" if detail else kind.value
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"ExpressionError(kind={self.kind.name}, position={self.position}, message={self.message!r})"
