"""Replay scenarios of range operations against a RangeList."""

import logging

from rangelist.config import Config
from rangelist.models import (
    OperationKind,
    RangeOperation,
    Scenario,
    ScenarioResult,
    StepResult,
)
from rangelist.range_list import RangeList

logger = logging.getLogger(__name__)


def _op(kind: str, start: float, end: float, amount: float) -> RangeOperation:
    return RangeOperation(op=kind, start=start, end=end, amount=amount)


DEMO_SCENARIOS = [
    Scenario(
        name="example-1",
        description="Overlapping adds followed by a negative add across both ranges",
        operations=[
            _op("add", 10, 30, 1),
            _op("add", 20, 40, 1),
            _op("add", 10, 40, -2),
        ],
        expected=[(10, -1), (20, 0), (30, -1), (40, 0)],
    ),
    Scenario(
        name="example-2",
        description="Partial cancellation reached in two negative steps",
        operations=[
            _op("add", 10, 30, 1),
            _op("add", 20, 40, 1),
            _op("add", 10, 40, -1),
            _op("add", 10, 40, -1),
        ],
        expected=[(10, -1), (20, 0), (30, -1), (40, 0)],
    ),
]


def apply_operation(range_list: RangeList, operation: RangeOperation) -> None:
    """Dispatch one operation to the matching RangeList method.

    Args:
        range_list: Range list to mutate.
        operation: Operation to apply.
    """
    if operation.op == OperationKind.add:
        range_list.add(operation.start, operation.end, operation.amount)
    elif operation.op == OperationKind.set:
        range_list.set(operation.start, operation.end, operation.amount)
    else:
        raise ValueError(f"Unknown operation: {operation.op}")


def run_scenario(scenario: Scenario, config: Config | None = None) -> ScenarioResult:
    """Replay a scenario on a fresh RangeList and record every step.

    Args:
        scenario: Scenario to replay.
        config: Optional configuration; integrity checks run after each step
            when ``verify_integrity`` is set.

    Returns:
        ScenarioResult with per-step breakpoints and the expectation outcome.
    """
    config = config or Config()
    range_list = RangeList()
    steps = []

    for operation in scenario.operations:
        apply_operation(range_list, operation)
        if config.verify_integrity:
            range_list.map.verify_integrity()
        steps.append(StepResult(operation=operation, breakpoints=range_list.to_array()))

    breakpoints = range_list.to_array()
    passed = None
    if scenario.expected is not None:
        passed = [tuple(p) for p in scenario.expected] == breakpoints
        if not passed:
            logger.warning(
                "Scenario %s: expected %s, got %s",
                scenario.name, scenario.expected, breakpoints,
            )

    return ScenarioResult(
        name=scenario.name,
        steps=steps,
        breakpoints=breakpoints,
        expected=scenario.expected,
        passed=passed,
    )


def run_scenarios(
    scenarios: list[Scenario], config: Config | None = None
) -> list[ScenarioResult]:
    """Replay several scenarios independently.

    Args:
        scenarios: Scenarios to replay, each on its own RangeList.
        config: Optional configuration shared by all runs.

    Returns:
        One result per scenario, in input order.
    """
    return [run_scenario(scenario, config) for scenario in scenarios]
