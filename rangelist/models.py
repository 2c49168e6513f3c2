"""Pydantic v2 models for range-list scenarios and their results."""

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _validate_breakpoints(breakpoints: list[tuple[float, float]], owner: str) -> None:
    """Validate that breakpoint positions are finite and strictly increasing.

    Args:
        breakpoints: ``(position, intensity)`` pairs to validate.
        owner: Name of the owning model for error messages.
    """
    previous = None
    for idx, (position, intensity) in enumerate(breakpoints):
        if not (math.isfinite(position) and math.isfinite(intensity)):
            raise ValueError(f"{owner}.expected[{idx}] must contain finite numbers")
        if previous is not None and position <= previous:
            raise ValueError(
                f"{owner}.expected[{idx}] position {position} is not greater than {previous}"
            )
        previous = position


class OperationKind(str, Enum):
    """Range update kinds supported by a RangeList."""

    add = "add"
    set = "set"


class RangeOperation(BaseModel):
    """A single ``add`` or ``set`` call over ``[start, end)``."""

    model_config = ConfigDict(populate_by_name=True)

    op: OperationKind
    start: float = Field(alias="from")
    end: float = Field(alias="to")
    amount: float

    @field_validator("start", "end", "amount")
    @classmethod
    def reject_non_finite(cls, value: float) -> float:
        """Reject NaN and infinite numbers.

        Args:
            value: Field value to check.

        Returns:
            The unchanged value.
        """
        if not math.isfinite(value):
            raise ValueError("must be a finite number")
        return value

    def describe(self) -> str:
        """Render the operation as a short human-readable string."""
        args = ", ".join(format_number(n) for n in (self.start, self.end, self.amount))
        return f"{self.op.value}({args})"


class Scenario(BaseModel):
    """A named sequence of operations with an optional expected end state."""

    name: str
    description: str = ""
    operations: list[RangeOperation] = Field(default_factory=list)
    expected: list[tuple[float, float]] | None = None

    @model_validator(mode="after")
    def check_expected(self) -> "Scenario":
        """Validate the expected breakpoints when present.

        Returns:
            The validated Scenario instance.
        """
        if self.expected is not None:
            _validate_breakpoints(self.expected, f"Scenario[{self.name}]")
        return self


class ScenarioFile(BaseModel):
    """Top-level document of a scenario YAML file."""

    scenarios: list[Scenario] = Field(min_length=1)

    @model_validator(mode="after")
    def unique_names(self) -> "ScenarioFile":
        """Reject files that reuse a scenario name.

        Returns:
            The validated ScenarioFile instance.
        """
        seen: set[str] = set()
        for scenario in self.scenarios:
            if scenario.name in seen:
                raise ValueError(f"Duplicate scenario name: {scenario.name}")
            seen.add(scenario.name)
        return self


class StepResult(BaseModel):
    """Breakpoints observed after applying one operation."""

    operation: RangeOperation
    breakpoints: list[tuple[float, float]]


class ScenarioResult(BaseModel):
    """Outcome of replaying a scenario."""

    name: str
    steps: list[StepResult] = Field(default_factory=list)
    breakpoints: list[tuple[float, float]] = Field(default_factory=list)
    expected: list[tuple[float, float]] | None = None
    passed: bool | None = None


def format_number(number: float) -> str:
    """Format a number without a trailing ``.0`` for integral values."""
    if float(number).is_integer():
        return str(int(number))
    return str(number)
