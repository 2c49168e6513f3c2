"""CLI entry point for replaying range-list operations."""

import argparse
from pathlib import Path

from rangelist.config import Config
from rangelist.display import (
    configure_logging,
    display_error,
    display_results_json,
    display_scenario_result,
    display_summary,
)
from rangelist.models import Scenario, ScenarioResult
from rangelist.runner import DEMO_SCENARIOS, run_scenario, run_scenarios
from rangelist.scenario_intake import parse_inline_operations, parse_scenarios


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser with run, demo and apply subcommands.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="rangelist")
    subcommands = parser.add_subparsers(dest="command", required=True)

    run_parser = subcommands.add_parser("run")
    run_parser.add_argument("scenario_path")
    _add_output_arguments(run_parser)

    demo_parser = subcommands.add_parser("demo")
    _add_output_arguments(demo_parser)

    apply_parser = subcommands.add_parser("apply")
    apply_parser.add_argument(
        "operations", nargs="+",
        help="Groups of: op from to amount (op is add or set)",
    )
    _add_output_arguments(apply_parser)
    return parser


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--format", choices=["table", "json"], default=None)
    parser.add_argument(
        "--steps", action="store_true",
        help="Print breakpoints after every operation",
    )


def report(results: list[ScenarioResult], output_format: str, show_steps: bool) -> bool:
    """Print results in the requested format.

    Args:
        results: Scenario results to print.
        output_format: Either ``table`` or ``json``.
        show_steps: When True, print per-step breakpoints in table mode.

    Returns:
        False when any scenario failed its expectation.
    """
    if output_format == "json":
        display_results_json(results)
    else:
        for result in results:
            display_scenario_result(result, show_steps=show_steps)
        if len(results) > 1:
            display_summary(results)
    return all(result.passed is not False for result in results)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args and dispatch to run, demo or apply behavior.

    Args:
        argv: Optional argument vector for testing.
    """
    args = build_parser().parse_args(argv)
    try:
        config = Config()
    except ValueError as exc:
        display_error(f"Invalid RANGELIST_* settings: {exc}")
        raise SystemExit(1) from exc
    configure_logging(config.log_level)

    output_format = args.format or config.output_format
    show_steps = args.steps or config.show_steps

    if args.command == "run":
        scenario_path = Path(args.scenario_path)
        if not scenario_path.is_file():
            display_error(f"Scenario file not found: {scenario_path}")
            raise SystemExit(1)
        try:
            scenarios = parse_scenarios(scenario_path)
        except ValueError as exc:
            display_error(f"Invalid scenario file {scenario_path}: {exc}")
            raise SystemExit(1) from exc
        results = run_scenarios(scenarios, config)
    elif args.command == "demo":
        results = run_scenarios(DEMO_SCENARIOS, config)
    else:
        try:
            operations = parse_inline_operations(args.operations)
        except ValueError as exc:
            display_error(str(exc))
            raise SystemExit(1) from exc
        results = [run_scenario(Scenario(name="inline", operations=operations), config)]

    if not report(results, output_format, show_steps):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
