import io
import logging

import httpx
import pytest
from rich.console import Console

from httpeek.config import set_config


@pytest.fixture(autouse=True)
def reset_state():
    set_config(None)
    yield
    set_config(None)
    logger = logging.getLogger("httpeek")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def console():
    """Plain-text console writing to a buffer."""
    return Console(file=io.StringIO(), highlight=False, width=80, force_terminal=False)


@pytest.fixture
def color_console():
    """Console that always emits ANSI colour codes."""
    return Console(file=io.StringIO(), highlight=False, width=80,
                   force_terminal=True, color_system="standard")


class RecordingHandler:
    """MockTransport handler that records requests and replies with a canned response."""

    def __init__(self, status_code=200, headers=None, content=b"", error=None):
        self.status_code = status_code
        self.headers = headers or []
        self.content = content
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(f"{self.error.__name__} for {request.url}", request=request)
        return httpx.Response(self.status_code, headers=self.headers, content=self.content)


@pytest.fixture
def json_handler():
    return RecordingHandler(
        headers=[("Content-Type", "application/json"), ("X-Trace-Id", "abc123")],
        content=b'{"url": "https://httpbin.org/get", "args": {}}',
    )
