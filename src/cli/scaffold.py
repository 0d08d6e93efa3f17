"""`aoc-setup`: create a project for a puzzle day.

    aoc-setup <day> [year] [--strict]

Creates `<prefix>-<year>-<dd>` in the tool's directory, copies the
template, fetches `input.txt` and opens the editor without waiting.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console

from cli.ui_components import build_steps_table, err_console, print_error, print_usage
from core.config import AppSettings, tool_paths
from core.domain.errors import StepFailedError, UsageError
from core.domain.models import PuzzleDay
from core.services.scaffold_pipeline import ScaffoldHooks, ScaffoldRequest, run_scaffold

app = typer.Typer(add_completion=False, help="Create a project for a puzzle day.")


def scaffold_main(
    day: str,
    year: str | None,
    *,
    default_year: str,
    tool_dir: Path,
    console: Console,
    prog: str = "aoc-setup",
    settings: AppSettings | None = None,
    strict: bool = False,
) -> int:
    """Run the scaffolder and return its exit code."""

    if not day:
        print_usage(console, prog)
        return 1

    settings = settings or AppSettings()
    puzzle = PuzzleDay(day=day, year=year or default_year)
    try:
        project_name = puzzle.project_name(settings.project_prefix)
    except UsageError as exc:
        print_error(console, str(exc))
        print_usage(console, prog)
        return 1

    request = ScaffoldRequest.from_settings(puzzle, tool_dir=tool_dir, settings=settings, strict=strict)
    hooks = ScaffoldHooks(
        step_started=lambda name: console.print(f"[dim]-> {name}[/dim]"),
    )

    console.print(f"[bold]{project_name}[/bold] in {request.workspace}")
    try:
        report = run_scaffold(request, hooks)
    except StepFailedError as exc:
        if exc.report is not None:
            console.print(build_steps_table(exc.report))
        print_error(console, str(exc))
        return 1

    console.print(build_steps_table(report))
    return 0


DAY_ARGUMENT = typer.Argument("", show_default=False, help="Puzzle day.")
YEAR_ARGUMENT = typer.Argument(None, show_default=False, help="Puzzle year (default: AOC_DEFAULT_YEAR).")
STRICT_OPTION = typer.Option(False, "--strict", help="Stop at the first failing step.")


def _run_setup(day: str, year: str | None, strict: bool, *, prog: str) -> None:
    settings = AppSettings()
    tool_dir, _ = tool_paths()
    code = scaffold_main(
        day,
        year,
        default_year=settings.default_year,
        tool_dir=tool_dir,
        console=err_console,
        prog=prog,
        settings=settings,
        strict=strict,
    )
    raise typer.Exit(code)


@app.command()
def setup(
    day: str = DAY_ARGUMENT,
    year: str | None = YEAR_ARGUMENT,
    strict: bool = STRICT_OPTION,
) -> None:
    """Create the project for DAY (and YEAR), fetch its input and open the editor."""

    _run_setup(day, year, strict, prog=Path(sys.argv[0]).name)


def setup_subcommand(
    day: str = DAY_ARGUMENT,
    year: str | None = YEAR_ARGUMENT,
    strict: bool = STRICT_OPTION,
) -> None:
    """Create the project for DAY (and YEAR), fetch its input and open the editor."""

    _run_setup(day, year, strict, prog=f"{Path(sys.argv[0]).name} setup")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
