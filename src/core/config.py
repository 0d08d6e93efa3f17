"""Core configuration.

Centralizes environment variables (pydantic-settings) so the CLI and the
adapters read the same values. Both year defaults live here and are passed
into the entry points explicitly.
"""

from __future__ import annotations

import os
import shlex
import sys
from datetime import date
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

SESSION_HEADER_FORMAT = "Cookie: session=0123456789abcdef..."


def user_env_file() -> Path:
    """`.env` in the per-user config directory (APPDATA, Application Support or XDG)."""

    if sys.platform.startswith("win"):
        root = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        root = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return root / "aoc-tools" / ".env"


def current_year() -> str:
    """Default year for the input fetcher: the host clock's calendar year."""

    return f"{date.today().year:04d}"


def tool_paths(argv0: str | None = None) -> tuple[Path, str]:
    """Return `(directory, name)` of the running tool.

    The name loses everything from its first dot on, so `aoc-input.sh` and
    `aoc-input.exe` both become `aoc-input`.
    """

    invoked = Path(argv0 if argv0 is not None else sys.argv[0])
    name = invoked.name.split(".", 1)[0]
    return invoked.resolve().parent, name


def write_headers_file(path: Path, token: str) -> Path:
    """Write a headers file holding the session cookie for the puzzle site."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"Cookie: session={token.strip()}\n", encoding="utf-8")
    return path


class AppSettings(BaseSettings):
    """Central application settings.

    Every value can be overridden with an `AOC_` prefixed environment
    variable, a project `.env` or the user config `.env`.
    """

    model_config = SettingsConfigDict(
        env_prefix="AOC_",
        extra="ignore",
        case_sensitive=False,
        # Project first, then the per-user config.
        env_file=(".env", str(user_env_file())),
        env_file_encoding="utf-8",
    )

    host: str = Field(
        default="adventofcode.com",
        min_length=1,
        description="Host serving the puzzle inputs.",
    )
    default_year: str = Field(
        default="2019",
        pattern=r"^\d{4}$",
        description="Year used by the scaffolder when none is given.",
    )
    project_prefix: str = Field(
        default="aoc",
        min_length=1,
        description="Prefix of generated project names (<prefix>-<year>-<day>).",
    )
    project_command: str = Field(
        default="cargo new --lib",
        min_length=1,
        description="Command creating a library skeleton; the project name is appended.",
    )
    source_path: str = Field(
        default="src/lib.rs",
        min_length=1,
        description="Location of the template inside a new project.",
    )
    template_path: Path | None = Field(
        default=None,
        description="Template source file copied into each new project.",
    )
    editor_command: str = Field(
        default="emacsclient --no-wait",
        min_length=1,
        description="Editor command; must return immediately, the file path is appended.",
    )
    headers_file: Path | None = Field(
        default=None,
        description="Explicit headers file (otherwise derived from the fetcher's name).",
    )
    workspace_dir: Path | None = Field(
        default=None,
        description="Directory where projects are created (defaults to the scaffolder's directory).",
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for the input request (seconds).",
    )
    user_agent: str = Field(
        default="aoc-tools/0.1 (+https://local)",
        min_length=1,
        description="User-Agent sent with input requests.",
    )

    def project_argv(self) -> list[str]:
        return shlex.split(self.project_command)

    def editor_argv(self) -> list[str]:
        return shlex.split(self.editor_command)
