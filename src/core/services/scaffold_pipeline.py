"""Project scaffolding orchestration.

A scaffold run is a straight sequence of external steps executed from the
workspace directory:

1. create the project skeleton (blocking)
2. copy the template source file into it (overwrites)
3. run the input fetcher with stdout redirected to `input.txt` (overwrites)
4. open the editor on the source file (detached, never waited on)

In the default permissive mode every step is attempted whatever happened
before, and failures are only recorded in the report. Strict mode stops at
the first failure. Printing is left to the caller through `ScaffoldHooks`.
"""

from __future__ import annotations

import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from adapters.headers_file import headers_file_for
from core.config import AppSettings
from core.domain.errors import StepFailedError
from core.domain.models import PuzzleDay, ScaffoldReport, StepResult
from core.resources_loader import resolve_template_path

FETCHER_NAME = "aoc-input"
INPUT_FILENAME = "input.txt"


@dataclass
class ScaffoldRequest:
    """Parameters of a scaffold run."""

    puzzle: PuzzleDay
    workspace: Path
    template: Path
    project_prefix: str = "aoc"
    source_path: str = "src/lib.rs"
    project_command: Sequence[str] = ("cargo", "new", "--lib")
    fetch_command: Sequence[str] = ()
    editor_command: Sequence[str] = ("emacsclient", "--no-wait")
    strict: bool = False

    @classmethod
    def from_settings(
        cls,
        puzzle: PuzzleDay,
        *,
        tool_dir: Path,
        settings: AppSettings | None = None,
        strict: bool = False,
    ) -> "ScaffoldRequest":
        settings = settings or AppSettings()
        headers_file = settings.headers_file or headers_file_for(tool_dir, FETCHER_NAME)
        return cls(
            puzzle=puzzle,
            workspace=settings.workspace_dir or tool_dir,
            template=resolve_template_path(tool_dir, settings),
            project_prefix=settings.project_prefix,
            source_path=settings.source_path,
            project_command=settings.project_argv(),
            fetch_command=fetch_command_for(tool_dir, headers_file),
            editor_command=settings.editor_argv(),
            strict=strict,
        )


@dataclass
class ScaffoldHooks:
    """Optional callbacks for UI layers (progress)."""

    step_started: Callable[[str], None] | None = None
    step_finished: Callable[[StepResult], None] | None = None


@dataclass
class _Step:
    name: str
    action: Callable[[], StepResult]


def fetch_command_for(tool_dir: Path, headers_file: Path) -> list[str]:
    """Command line of the input fetcher living next to the scaffolder.

    Falls back to running the fetcher module with the current interpreter
    when no `aoc-input` executable sits in `tool_dir`.
    """

    for candidate in (tool_dir / FETCHER_NAME, tool_dir / f"{FETCHER_NAME}.exe"):
        if candidate.is_file():
            command = [str(candidate)]
            break
    else:
        command = [sys.executable, "-m", "cli.fetch"]
    return [*command, "--headers-file", str(headers_file)]


def _command_result(name: str, argv: Sequence[str], returncode: int) -> StepResult:
    detail = " ".join(argv)
    if returncode != 0:
        detail = f"{detail} exited with {returncode}"
    return StepResult(name=name, ok=returncode == 0, returncode=returncode, detail=detail)


def _create_project(request: ScaffoldRequest, project_name: str) -> StepResult:
    argv = [*request.project_command, project_name]
    try:
        proc = subprocess.run(argv, cwd=request.workspace, check=False)
    except OSError as exc:
        return StepResult(name="create-project", ok=False, detail=str(exc))
    return _command_result("create-project", argv, proc.returncode)


def _copy_template(template: Path, source_file: Path) -> StepResult:
    try:
        shutil.copyfile(template, source_file)
    except OSError as exc:
        return StepResult(name="copy-template", ok=False, detail=str(exc))
    return StepResult(name="copy-template", detail=f"{template} -> {source_file}")


def _fetch_input(request: ScaffoldRequest, input_file: Path) -> StepResult:
    argv = [*request.fetch_command, request.puzzle.day, request.puzzle.year]
    try:
        with input_file.open("wb") as out:
            proc = subprocess.run(argv, cwd=request.workspace, stdout=out, check=False)
    except OSError as exc:
        return StepResult(name="fetch-input", ok=False, detail=str(exc))
    return _command_result("fetch-input", argv, proc.returncode)


def _open_editor(request: ScaffoldRequest, source_file: Path) -> StepResult:
    argv = [*request.editor_command, str(source_file)]
    try:
        # Detached: no handle is kept and the scaffolder never waits on it.
        subprocess.Popen(
            argv,
            cwd=request.workspace,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        return StepResult(name="open-editor", ok=False, detail=str(exc))
    return StepResult(name="open-editor", detail=" ".join(argv))


def run_scaffold(request: ScaffoldRequest, hooks: ScaffoldHooks | None = None) -> ScaffoldReport:
    """Run every scaffold step and return the per-step report.

    Raises `UsageError` before any side effect when the day is not a number,
    and `StepFailedError` on the first failing step of a strict run.
    """

    hooks = hooks or ScaffoldHooks()
    project_name = request.puzzle.project_name(request.project_prefix)
    project_dir = (request.workspace / project_name).resolve()
    source_file = project_dir / request.source_path

    report = ScaffoldReport(
        project_name=project_name,
        project_dir=str(project_dir),
        source_file=str(source_file),
    )

    steps = (
        _Step("create-project", lambda: _create_project(request, project_name)),
        _Step("copy-template", lambda: _copy_template(request.template, source_file)),
        _Step("fetch-input", lambda: _fetch_input(request, project_dir / INPUT_FILENAME)),
        _Step("open-editor", lambda: _open_editor(request, source_file)),
    )

    for step in steps:
        if hooks.step_started:
            hooks.step_started(step.name)
        result = step.action()
        report.steps.append(result)
        if hooks.step_finished:
            hooks.step_finished(result)
        if request.strict and not result.ok:
            raise StepFailedError(step.name, result.detail, report=report)

    return report
