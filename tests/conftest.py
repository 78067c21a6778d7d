"""Shared test fixtures for httpcli.

Provides reusable fixtures for capturing requests through an
``httpx.MockTransport``, managing global output state, and running CLI
commands. These fixtures are automatically discovered by pytest and
available to all test modules without explicit imports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import httpx
import pytest

from httpcli.output import OutputManager, reset_output, set_output
from httpcli.transport import Transport


Handler = Callable[[httpx.Request], httpx.Response]


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches a reference to sys.stderr at creation time.
    When Typer's CliRunner redirects the streams during a test and the
    test finishes, the cached reference becomes stale. Resetting forces a
    fresh manager to be created on next use.
    """
    yield
    reset_output()


@pytest.fixture(autouse=True)
def _no_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep NO_COLOR from the developer's shell out of the tests."""
    monkeypatch.delenv("NO_COLOR", raising=False)


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def plain_output() -> OutputManager:
    """Install a colourless OutputManager so stderr text is easy to match."""
    output = OutputManager(no_color=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def verbose_output() -> OutputManager:
    """Install a colourless, verbose OutputManager."""
    output = OutputManager(no_color=True, verbose=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# Transport fixtures
# ---------------------------------------------------------------------------


class RecordingHandler:
    """MockTransport handler that records every request it receives.

    Args:
        response: Response returned for each request. Defaults to a
            ``200 OK`` with a small text body.
        error: Exception raised instead of responding (e.g. a timeout).
    """

    def __init__(
        self,
        response: Optional[httpx.Response] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.requests: list[httpx.Request] = []
        self._response = response
        self._error = error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        if self._response is not None:
            return self._response
        return httpx.Response(
            200,
            headers={"content-type": "text/plain; charset=utf-8", "x-server": "mock"},
            text="hello",
        )

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


@pytest.fixture
def recorder() -> RecordingHandler:
    """A handler returning ``200 OK`` with body ``hello``."""
    return RecordingHandler()


@pytest.fixture
def make_transport() -> Callable[[Handler], Transport]:
    """Factory for unopened transports that send through a handler."""

    def _make(handler: Handler) -> Transport:
        return Transport(transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def upload_file(tmp_path: Path) -> Path:
    """A small file to upload with ``-f``."""
    path = tmp_path / "upload.txt"
    path.write_bytes(b"file payload\n")
    return path


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
