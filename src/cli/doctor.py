"""Doctor command for environment diagnostics."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.headers_file import headers_file_for, load_headers
from adapters.http_client import build_client
from core.config import AppSettings, tool_paths, write_headers_file
from core.domain.errors import ConfigurationError
from core.resources_loader import resolve_template_path
from core.services.scaffold_pipeline import FETCHER_NAME

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _default_headers_file(settings: AppSettings) -> Path:
    tool_dir, _ = tool_paths()
    return settings.headers_file or headers_file_for(tool_dir, FETCHER_NAME)


def _check_headers(path: Path) -> tuple[str, str]:
    try:
        headers = load_headers(path)
    except ConfigurationError:
        return "MISSING", f"{path} (run `aoc doctor setup-session`)"
    if any(name.lower() == "cookie" and "session=" in value for name, value in headers):
        return "OK", str(path)
    return "WARN", f"{path} has no 'Cookie: session=...' line"


def _check_command(argv: list[str]) -> tuple[str, str]:
    if not argv:
        return "FAIL", "empty command"
    found = shutil.which(argv[0])
    if found:
        return "OK", found
    return "MISSING", f"{argv[0]} not found on PATH"


def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    tool_dir, _ = tool_paths()

    table = Table(title="aoc-tools Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    status, detail = _check_headers(_default_headers_file(settings))
    table.add_row("Headers file", status, detail)

    status, detail = _check_command(settings.project_argv())
    table.add_row("Project command", status, settings.project_command if status == "OK" else detail)

    status, detail = _check_command(settings.editor_argv())
    table.add_row("Editor", status, settings.editor_command if status == "OK" else detail)

    template = resolve_template_path(tool_dir, settings)
    table.add_row("Template", "OK" if template.is_file() else "MISSING", str(template))

    workspace = settings.workspace_dir or tool_dir
    writable = workspace.is_dir() and os.access(workspace, os.W_OK)
    table.add_row("Workspace", "OK" if writable else "FAIL", str(workspace))

    ok_http, detail_http = _check_http(f"https://{settings.host}/", settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not writable:
        _console.print("\n[yellow]Note:[/yellow] set AOC_WORKSPACE_DIR to a writable directory for new projects.")


@app.command(name="setup-session")
def setup_session(
    headers_file: Path | None = typer.Option(None, "--headers-file", help="Where to write the headers file."),
) -> None:
    """Store the puzzle site session cookie in the headers file."""

    settings = AppSettings()
    path = headers_file or _default_headers_file(settings)
    token = typer.prompt("Session token", hide_input=True, confirmation_prompt=False).strip()
    if token.lower().startswith("session="):
        token = token.split("=", 1)[1]
    if not token:
        raise typer.BadParameter("session token is required")

    write_headers_file(path, token)
    _console.print(f"[green]Saved session cookie to:[/green] {path}")
