"""
Typed step results.

The driver wraps every operation in a StepResult instead of only logging the
failure, so the caller can see which step failed and whether retrying makes
sense.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ..exceptions import Outcome, outcome_for


class StepResult(BaseModel):
    """Outcome of one named step."""

    step: str
    outcome: Outcome
    value: Any = None
    error: Optional[BaseException] = None

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def ok(self) -> bool:
        return self.outcome == Outcome.SUCCESS

    @property
    def retryable(self) -> bool:
        return self.outcome.retryable

    @classmethod
    def success(cls, step: str, value: Any = None) -> 'StepResult':
        return cls(step=step, outcome=Outcome.SUCCESS, value=value)

    @classmethod
    def failure(cls, step: str, error: BaseException) -> 'StepResult':
        return cls(step=step, outcome=outcome_for(error), error=error)

    @classmethod
    def skipped(cls, step: str) -> 'StepResult':
        return cls(step=step, outcome=Outcome.CANCELLED)
