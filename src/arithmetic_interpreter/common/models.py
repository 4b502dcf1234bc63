"""Pydantic models for evaluated expressions."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


def format_number(value: float) -> str:
    """
    Format a result for display: integral values without a trailing ``.0``.

    :param float value: Evaluated result

    :return: Display string
    :rtype: str
    """
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


class EvaluationResult(BaseModel):
    """Outcome of evaluating one expression: either a result or an error message."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original arithmetic expression")
    result: Optional[float] = Field(default=None, description="Evaluated numeric result")
    error: Optional[str] = Field(default=None, description="Error message if evaluation failed")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "EvaluationResult":
        """Ensure that exactly one of result and error is set."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of result and error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        """Render the outcome as a single output line (without newline)."""
        if self.ok:
            return f"{self.expression} = {format_number(self.result)}"
        return f"{self.expression} -> ERROR: {self.error}"
