"""Rich terminal display helpers for range-list output."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from rangelist.models import ScenarioResult, format_number

_console = Console()


def configure_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Route stdlib logging through a rich handler.

    Args:
        level: Logging level name for the root logger.
        console: Optional console override for tests.
    """
    handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper())


def build_breakpoint_table(
    breakpoints: list[tuple[float, float]], title: str | None = None
) -> Table:
    """Build a two-column table of breakpoints.

    Args:
        breakpoints: ``(position, intensity)`` pairs in position order.
        title: Optional table title.

    Returns:
        Rich table ready to print.
    """
    table = Table(title=title)
    table.add_column("Position", justify="right")
    table.add_column("Intensity", justify="right")
    for position, intensity in breakpoints:
        table.add_row(format_number(position), format_number(intensity))
    return table


def display_scenario_result(
    result: ScenarioResult, show_steps: bool = False, console: Console | None = None
) -> None:
    """Print a scenario's final breakpoints and expectation status.

    Args:
        result: Result produced by the runner.
        show_steps: When True, print the breakpoints after every operation.
        console: Optional console override for tests.
    """
    c = console or _console
    c.print(f"\n[bold]Scenario: {escape(result.name)}[/bold]")

    if show_steps:
        for index, step in enumerate(result.steps, start=1):
            c.print(
                f"[cyan]{index}. {step.operation.describe()}[/cyan] "
                f"-> {_fmt_pairs(step.breakpoints)}"
            )

    if result.breakpoints:
        c.print(build_breakpoint_table(result.breakpoints, title="Breakpoints"))
    else:
        c.print("[dim](no breakpoints)[/dim]")

    if result.passed is True:
        c.print("[green]Matches expected breakpoints[/green]")
    elif result.passed is False:
        c.print(f"[red]Expected {_fmt_pairs(result.expected or [])}[/red]")


def display_results_json(results: list[ScenarioResult], console: Console | None = None) -> None:
    """Print scenario results as a JSON array.

    Args:
        results: Results to serialize.
        console: Optional console override for tests.
    """
    c = console or _console
    payload = ",\n".join(result.model_dump_json(indent=2) for result in results)
    c.print_json(f"[{payload}]")


def display_summary(results: list[ScenarioResult], console: Console | None = None) -> None:
    """Print a table summarizing pass/fail status of every scenario.

    Args:
        results: Results to summarize.
        console: Optional console override for tests.
    """
    c = console or _console
    table = Table(title="Scenario Summary")
    table.add_column("Scenario")
    table.add_column("Breakpoints", justify="right")
    table.add_column("Status")

    for result in results:
        if result.passed is None:
            status = "-"
        else:
            status = "pass" if result.passed else "FAIL"
        table.add_row(result.name, str(len(result.breakpoints)), status)
    c.print(table)


def display_error(message: str, console: Console | None = None) -> None:
    """Print an error message in red.

    Args:
        message: Error message to display.
        console: Optional console override for tests.
    """
    c = console or _console
    c.print(f"[red]Error: {escape(message)}[/red]")


def _fmt_pairs(breakpoints: list[tuple[float, float]]) -> str:
    pairs = ", ".join(f"[{format_number(p)}, {format_number(v)}]" for p, v in breakpoints)
    return escape(f"[{pairs}]")
