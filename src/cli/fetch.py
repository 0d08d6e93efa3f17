"""`aoc-input`: download a puzzle input to stdout.

    aoc-input <day> [year] [--headers-file PATH]

The headers file defaults to `<tool name>.txt` next to the executable.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO

import httpx
import typer
from rich.console import Console

from adapters.headers_file import headers_file_for, load_headers
from adapters.input_fetcher import fetch_input
from cli.ui_components import err_console, print_error, print_usage
from core.config import AppSettings, current_year, tool_paths
from core.domain.errors import ConfigurationError
from core.domain.models import PuzzleDay
from core.services.scaffold_pipeline import FETCHER_NAME

app = typer.Typer(add_completion=False, help="Download a puzzle input to stdout.")


def fetch_main(
    day: str,
    year: str | None,
    *,
    default_year: str,
    headers_file: Path,
    out: BinaryIO,
    console: Console,
    prog: str = "aoc-input",
    settings: AppSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> int:
    """Run the fetcher and return its exit code."""

    if not day:
        print_usage(console, prog)
        return 1

    settings = settings or AppSettings()
    try:
        headers = load_headers(headers_file)
    except ConfigurationError as exc:
        console.print(str(exc), markup=False)
        return 1
    except UnicodeError as exc:
        print_error(console, f"{prog}: cannot read headers file {headers_file}: {exc}")
        return 1

    puzzle = PuzzleDay(day=day, year=year or default_year)
    try:
        fetch_input(puzzle, headers=headers, out=out, settings=settings, transport=transport)
    except httpx.HTTPError as exc:
        print_error(console, f"{prog}: {puzzle.input_url(settings.host)}: {exc}")
        return 1
    except UnicodeError as exc:
        print_error(console, f"{prog}: headers in {headers_file} must be ASCII: {exc}")
        return 1
    return 0


DAY_ARGUMENT = typer.Argument("", show_default=False, help="Puzzle day.")
YEAR_ARGUMENT = typer.Argument(None, show_default=False, help="Puzzle year (default: current year).")
HEADERS_FILE_OPTION = typer.Option(
    None,
    "--headers-file",
    help="Headers file with the session cookie (default: <tool name>.txt next to the tool).",
)


def _run_fetch(day: str, year: str | None, headers_file: Path | None, *, tool_name: str | None, prog: str) -> None:
    settings = AppSettings()
    tool_dir, own_name = tool_paths()
    code = fetch_main(
        day,
        year,
        default_year=current_year(),
        headers_file=headers_file or settings.headers_file or headers_file_for(tool_dir, tool_name or own_name),
        out=sys.stdout.buffer,
        console=err_console,
        prog=prog,
        settings=settings,
    )
    raise typer.Exit(code)


@app.command()
def fetch(
    day: str = DAY_ARGUMENT,
    year: str | None = YEAR_ARGUMENT,
    headers_file: Path | None = HEADERS_FILE_OPTION,
) -> None:
    """Download the input of DAY (and YEAR) to stdout."""

    _run_fetch(day, year, headers_file, tool_name=None, prog=Path(sys.argv[0]).name)


def fetch_subcommand(
    day: str = DAY_ARGUMENT,
    year: str | None = YEAR_ARGUMENT,
    headers_file: Path | None = HEADERS_FILE_OPTION,
) -> None:
    """Download the input of DAY (and YEAR) to stdout."""

    # Under `aoc input` the headers file is still the fetcher's own.
    _run_fetch(day, year, headers_file, tool_name=FETCHER_NAME, prog=f"{Path(sys.argv[0]).name} input")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
