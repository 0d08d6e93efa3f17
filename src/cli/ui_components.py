"""CLI UI components (Rich).

Everything here renders to the stderr console: stdout belongs to the
puzzle input.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from core.domain.models import ScaffoldReport

err_console = Console(stderr=True, highlight=False, soft_wrap=True)


def print_usage(console: Console, prog: str) -> None:
    console.print(f"usage: {prog} day [year]", markup=False)


def print_error(console: Console, message: str) -> None:
    console.print(Text(message, style="red"))


def build_steps_table(report: ScaffoldReport) -> Table:
    """Table summarizing every step of a scaffold run."""

    table = Table(title=f"Scaffold {report.project_name}")
    table.add_column("Step", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Exit", style="white")
    table.add_column("Details", style="dim")
    for step in report.steps:
        status = "[green]OK[/green]" if step.ok else "[red]FAIL[/red]"
        exit_code = "" if step.returncode is None else str(step.returncode)
        table.add_row(step.name, status, exit_code, Text(step.detail))
    return table
