"""Puzzle input fetcher.

One GET per call, body streamed verbatim to a binary stream. No retries,
no caching, no status code handling.
"""

from __future__ import annotations

from typing import BinaryIO, Sequence

import httpx

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import PuzzleDay


def fetch_input(
    puzzle: PuzzleDay,
    *,
    headers: Sequence[tuple[str, str]],
    out: BinaryIO,
    settings: AppSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> int:
    """Download the input of `puzzle` into `out` and return the bytes written."""

    settings = settings or AppSettings()
    url = puzzle.input_url(settings.host)

    written = 0
    with build_client(settings, extra_headers=headers, transport=transport) as client:
        with client.stream("GET", url) as resp:
            for chunk in resp.iter_bytes():
                out.write(chunk)
                written += len(chunk)
    out.flush()
    return written
