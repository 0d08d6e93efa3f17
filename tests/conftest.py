from __future__ import annotations

import io
import subprocess
from pathlib import Path

import pytest
from rich.console import Console

from core.config import AppSettings


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        _env_file=None,
        host="adventofcode.com",
        default_year="2019",
        workspace_dir=tmp_path,
        headers_file=tmp_path / "aoc-input.txt",
    )


@pytest.fixture
def headers_file(tmp_path: Path) -> Path:
    path = tmp_path / "aoc-input.txt"
    path.write_text("Cookie: session=abc123\n", encoding="utf-8")
    return path


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, highlight=False, soft_wrap=True)


class FakeProcesses:
    """Stands in for `subprocess.run` / `subprocess.Popen` in scaffold runs."""

    def __init__(self) -> None:
        self.run_calls: list[list[str]] = []
        self.popen_calls: list[tuple[list[str], dict]] = []
        self.project_returncode = 0
        self.fetch_returncode = 0
        self.fetch_body = b"1\n2\n3\n"
        self.create_dirs = True
        self.editor_error: OSError | None = None

    def run(self, argv, cwd=None, stdout=None, check=False, **kwargs):
        argv = list(argv)
        self.run_calls.append(argv)
        if stdout is not None:
            stdout.write(self.fetch_body)
            return subprocess.CompletedProcess(argv, self.fetch_returncode)
        if self.create_dirs and self.project_returncode == 0:
            (Path(cwd) / argv[-1] / "src").mkdir(parents=True)
        return subprocess.CompletedProcess(argv, self.project_returncode)

    def popen(self, argv, **kwargs):
        if self.editor_error is not None:
            raise self.editor_error
        self.popen_calls.append((list(argv), kwargs))
        return _DetachedProcess()


class _DetachedProcess:
    pid = 4242

    def wait(self, timeout=None):
        raise AssertionError("the editor must not be waited on")

    def communicate(self, *args, **kwargs):
        raise AssertionError("the editor must not be waited on")


@pytest.fixture
def processes(monkeypatch: pytest.MonkeyPatch) -> FakeProcesses:
    fake = FakeProcesses()
    monkeypatch.setattr(subprocess, "run", fake.run)
    monkeypatch.setattr(subprocess, "Popen", fake.popen)
    return fake
