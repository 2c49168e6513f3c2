"""Parse YAML scenario files into Scenario models."""

from pathlib import Path

import yaml

from rangelist.models import RangeOperation, Scenario, ScenarioFile


def parse_scenarios(scenario_path: Path) -> list[Scenario]:
    """Parse a YAML scenario file and return its scenarios.

    Args:
        scenario_path: Path to the YAML scenario file.

    Returns:
        Scenarios in file order.
    """
    try:
        text = scenario_path.read_text()
    except OSError as exc:
        raise ValueError(f"Cannot read scenario file: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Scenario file is not valid YAML: {exc}") from exc
    if not data:
        raise ValueError("Scenario file is empty")
    if not isinstance(data, dict):
        raise ValueError("Scenario file must contain a mapping with a 'scenarios' key")
    return ScenarioFile(**data).scenarios


def parse_inline_operations(tokens: list[str]) -> list[RangeOperation]:
    """Build operations from a flat ``op from to amount`` token list.

    Args:
        tokens: Command-line tokens, four per operation.

    Returns:
        Parsed operations in order.
    """
    if not tokens or len(tokens) % 4:
        raise ValueError("Operations must be given as groups of: op from to amount")
    operations = []
    for i in range(0, len(tokens), 4):
        op, start, end, amount = tokens[i:i + 4]
        operations.append(
            RangeOperation(op=op, start=start, end=end, amount=amount)
        )
    return operations
