from __future__ import annotations

from pathlib import Path

from rich.console import Console
from typer.testing import CliRunner

from cli.scaffold import app, scaffold_main
from core.config import AppSettings

runner = CliRunner()


def test_empty_day_prints_usage(tmp_path: Path, console: Console, settings: AppSettings, processes) -> None:
    code = scaffold_main(
        "",
        None,
        default_year="2019",
        tool_dir=tmp_path,
        console=console,
        prog="setup.sh",
        settings=settings,
    )

    assert code == 1
    assert console.file.getvalue().strip() == "usage: setup.sh day [year]"
    assert processes.run_calls == []
    assert processes.popen_calls == []
    assert list(tmp_path.iterdir()) == []


def test_non_numeric_day(tmp_path: Path, console: Console, settings: AppSettings, processes) -> None:
    code = scaffold_main("x", None, default_year="2019", tool_dir=tmp_path, console=console, settings=settings)

    assert code == 1
    assert "usage: aoc-setup day [year]" in console.file.getvalue()
    assert processes.run_calls == []


def test_default_year_is_fixed(tmp_path: Path, console: Console, settings: AppSettings, processes) -> None:
    code = scaffold_main("3", None, default_year="2019", tool_dir=tmp_path, console=console, settings=settings)

    assert code == 0
    assert processes.run_calls[0] == ["cargo", "new", "--lib", "aoc-2019-03"]
    assert processes.run_calls[1][-2:] == ["3", "2019"]
    assert (tmp_path / "aoc-2019-03" / "input.txt").exists()
    assert "aoc-2019-03" in console.file.getvalue()


def test_permissive_failure_still_exits_zero(
    tmp_path: Path, console: Console, settings: AppSettings, processes
) -> None:
    processes.project_returncode = 101

    code = scaffold_main("3", "2020", default_year="2019", tool_dir=tmp_path, console=console, settings=settings)

    assert code == 0
    assert "FAIL" in console.file.getvalue()


def test_strict_failure_exits_one(tmp_path: Path, console: Console, settings: AppSettings, processes) -> None:
    processes.project_returncode = 101

    code = scaffold_main(
        "3",
        "2020",
        default_year="2019",
        tool_dir=tmp_path,
        console=console,
        settings=settings,
        strict=True,
    )

    assert code == 1
    assert "Scaffold aoc-2020-03" in console.file.getvalue()
    assert "create-project" in console.file.getvalue()
    assert len(processes.run_calls) == 1


def test_cli_without_day_exits_one(processes) -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "day [year]" in result.output
    assert processes.run_calls == []
