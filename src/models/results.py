"""Results produced by scenario steps and whole scenarios."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class StepResult(BaseModel):
    """Outcome of a single step handler.

    Step handlers report assertion failures by returning a failed result
    rather than raising, the harness decides how to surface it.
    """

    model_config = ConfigDict(frozen=True)

    passed: bool
    message: Optional[str] = None

    @classmethod
    def success(cls) -> "StepResult":
        """Return a passed result."""
        return cls(passed=True)

    @classmethod
    def failure(cls, message: str) -> "StepResult":
        """Return a failed result carrying the user visible message."""
        return cls(passed=False, message=message)


class ScenarioOutcome(BaseModel):
    """Outcome of one scenario run by the scenario runner."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    steps: list[str] = Field(default_factory=list)
    failed_step: Optional[str] = None
    message: Optional[str] = None
    error: Optional[BaseException] = Field(default=None, exclude=True)

    @property
    def passed(self) -> bool:
        """Return True when no step failed."""
        return self.failed_step is None
