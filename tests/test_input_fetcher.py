from __future__ import annotations

import io

import httpx

from adapters.http_client import build_client
from adapters.input_fetcher import fetch_input
from core.config import AppSettings
from core.domain.models import PuzzleDay


class Recorder:
    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def test_single_get_with_headers_and_verbatim_body(settings: AppSettings) -> None:
    body = b"1721\n979\n366\r\n\xff raw bytes\n"
    recorder = Recorder(httpx.Response(200, content=body))
    out = io.BytesIO()

    written = fetch_input(
        PuzzleDay(day="5", year="2021"),
        headers=[("Cookie", "session=abc123")],
        out=out,
        settings=settings,
        transport=recorder.transport,
    )

    assert len(recorder.requests) == 1
    request = recorder.requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://adventofcode.com/2021/day/5/input"
    assert request.headers["Cookie"] == "session=abc123"
    assert request.content == b""
    assert out.getvalue() == body
    assert written == len(body)


def test_error_status_body_is_still_written(settings: AppSettings) -> None:
    body = b"Please log in to get your puzzle input.\n"
    recorder = Recorder(httpx.Response(400, content=body))
    out = io.BytesIO()

    fetch_input(
        PuzzleDay(day="1", year="2019"),
        headers=[],
        out=out,
        settings=settings,
        transport=recorder.transport,
    )

    assert out.getvalue() == body


def test_redirects_are_not_followed(settings: AppSettings) -> None:
    recorder = Recorder(httpx.Response(302, headers={"Location": "https://adventofcode.com/"}))
    out = io.BytesIO()

    fetch_input(
        PuzzleDay(day="1", year="2019"),
        headers=[],
        out=out,
        settings=settings,
        transport=recorder.transport,
    )

    assert len(recorder.requests) == 1
    assert out.getvalue() == b""


def test_client_user_agent(settings: AppSettings) -> None:
    recorder = Recorder(httpx.Response(200))
    with build_client(settings, transport=recorder.transport) as client:
        client.get("https://adventofcode.com/")
    assert recorder.requests[0].headers["User-Agent"] == settings.user_agent

    with build_client(
        settings,
        extra_headers=[("User-Agent", "me@example.com"), ("Cookie", "session=x")],
        transport=recorder.transport,
    ) as client:
        client.get("https://adventofcode.com/")
    assert recorder.requests[1].headers["User-Agent"] == "me@example.com"
