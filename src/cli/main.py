"""`aoc` umbrella command.

Groups `input` and `setup` (the same commands as `aoc-input` and
`aoc-setup`) with the maintenance commands under `doctor`.
"""

from __future__ import annotations

import typer

from cli import doctor
from cli.fetch import fetch_subcommand
from cli.scaffold import setup_subcommand

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Advent of Code helper tools.")
app.command(name="input")(fetch_subcommand)
app.command(name="setup")(setup_subcommand)
app.add_typer(doctor.app, name="doctor")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
