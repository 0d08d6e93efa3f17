"""Headers file loader.

The headers file lives next to the fetcher and holds HTTP header lines,
at minimum the session cookie:

    Cookie: session=0123456789abcdef...

Lines are read the way `curl -H @file` reads them: one header per line,
blank lines and lines without a colon are skipped.
"""

from __future__ import annotations

from pathlib import Path

from core.domain.errors import MissingHeadersFileError


def headers_file_for(tool_dir: Path, tool_name: str) -> Path:
    """`<tool_dir>/<tool_name>.txt`."""

    return tool_dir / f"{tool_name}.txt"


def parse_headers(text: str) -> list[tuple[str, str]]:
    headers: list[tuple[str, str]] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or ":" not in line:
            continue
        name, value = line.split(":", 1)
        name = name.strip()
        if name:
            headers.append((name, value.strip()))
    return headers


def load_headers(path: Path) -> list[tuple[str, str]]:
    """Read the headers file; raises `MissingHeadersFileError` when absent."""

    if not path.is_file():
        raise MissingHeadersFileError(path)
    return parse_headers(path.read_text(encoding="utf-8"))
