"""Domain errors.

The core raises these; only the CLI turns them into messages and exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from core.config import SESSION_HEADER_FORMAT

if TYPE_CHECKING:
    from core.domain.models import ScaffoldReport


class AocToolError(RuntimeError):
    """Base exception for aoc-tools."""


class UsageError(AocToolError):
    """Raised when the command line arguments cannot be used."""


class ConfigurationError(AocToolError):
    """Raised when local configuration required by a command is missing."""


class MissingHeadersFileError(ConfigurationError):
    """
    Raised when the headers file with the session cookie does not exist.

    Attributes:
        path: Where the headers file was expected.
    """

    def __init__(self, path: Path):
        super().__init__(
            f"missing headers file at {path}\n"
            "should contain your adventofcode.com session cookie in this format:\n"
            f"{SESSION_HEADER_FORMAT}"
        )
        self.path = path


class StepFailedError(AocToolError):
    """Raised by a strict scaffold run when one of its steps fails."""

    def __init__(self, step: str, detail: str, report: ScaffoldReport | None = None):
        super().__init__(f"step '{step}' failed: {detail}")
        self.step = step
        self.detail = detail
        self.report = report
