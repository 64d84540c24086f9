"""Pydantic models for stack limits and conversion/calculation results."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from rpn_calculator.common.errors import ErrorKind

OPERATOR_STACK_CAPACITY = 256
OPERAND_STACK_CAPACITY = 32


class StackLimits(BaseModel):
    """Capacities of the bounded stacks used by one conversion or evaluation."""

    # Limits are shared by reference between calls, keep them read-only
    model_config = ConfigDict(frozen=True)

    operator_capacity: int = Field(default=OPERATOR_STACK_CAPACITY, ge=1, description="Operator stack capacity")
    operand_capacity: int = Field(default=OPERAND_STACK_CAPACITY, ge=1, description="Operand stack capacity")


class ConversionResult(BaseModel):
    """Outcome of converting an infix expression to Reverse Polish Notation."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original infix expression")
    rpn: str = Field(default="", description="RPN text, empty on failure")
    fail_pos: int = Field(default=-1, ge=-1, description="Index of the failing character, -1 on success")
    error: Optional[ErrorKind] = Field(default=None, description="Kind of failure, None on success")
    message: Optional[str] = Field(default=None, description="Human-readable failure message")

    @property
    def ok(self) -> bool:
        return self.error is None


class CalculationResult(BaseModel):
    """Outcome of evaluating an infix expression."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original infix expression")
    value: float = Field(default=0.0, description="Evaluated numeric result, 0 on failure")
    fail_pos: int = Field(default=-1, ge=-1, description="Index of the failing character, -1 on success")
    error: Optional[ErrorKind] = Field(default=None, description="Kind of failure, None on success")
    message: Optional[str] = Field(default=None, description="Human-readable failure message")

    @property
    def ok(self) -> bool:
        return self.error is None
