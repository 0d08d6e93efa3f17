"""httpx wrapper.

Standardizes timeout and User-Agent for every request to the puzzle site.
Redirects are not followed and error statuses are not raised: the response
is handed back as the server sent it.
"""

from __future__ import annotations

from typing import Sequence

import httpx

from core.config import AppSettings


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: Sequence[tuple[str, str]] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with the configured defaults.

    `extra_headers` is a sequence of pairs so a headers file may repeat a
    name. `transport` lets tests plug in `httpx.MockTransport`.
    """

    settings = settings or AppSettings()
    pairs = list(extra_headers or ())
    if not any(name.lower() == "user-agent" for name, _ in pairs):
        pairs.insert(0, ("User-Agent", settings.user_agent))
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=httpx.Headers(pairs),
        transport=transport,
    )
