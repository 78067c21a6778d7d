"""HTTP transport -- owns the :class:`httpx.Client` and sends one request.

:class:`Transport` is created once per process by the CLI root callback and
handed to the dispatcher by reference. It wraps :class:`httpx.Client` with a
fixed timeout and reports every network-level problem as a single
:class:`~httpcli.exceptions.TransportError`. There is no retry: each
:meth:`Transport.send` makes exactly one attempt.

Example::

    with Transport() as transport:
        view = transport.send(spec)
"""

from __future__ import annotations

import time
from typing import Optional

import httpx

from httpcli.exceptions import ClientInitError, TransportError
from httpcli.models import ClientSettings, RequestSpec, ResponseView
from httpcli.output import debug
from httpcli.request_builder import to_httpx_request


class Transport:
    """Synchronous, single-shot HTTP transport.

    Must be used as a context manager so that the underlying client is
    opened and closed exactly once.

    Args:
        settings: Timeout, redirect and User-Agent settings. Defaults to a
            10 second timeout.
        transport: Optional :class:`httpx.BaseTransport` to send through
            instead of the network (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        settings: Optional[ClientSettings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> Transport:
        try:
            self._client = httpx.Client(
                timeout=self._settings.timeout,
                follow_redirects=self._settings.follow_redirects,
                headers={"User-Agent": self._settings.user_agent},
                transport=self._transport,
            )
        except Exception as exc:
            raise ClientInitError(f"Could not create HTTP client: {exc}") from exc
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Sending
    # ------------------------------------------------------------------ #

    def send(self, spec: RequestSpec) -> ResponseView:
        """Send *spec* once and return the fully read response.

        Args:
            spec: The request to send.

        Returns:
            A :class:`~httpcli.models.ResponseView` of the response. HTTP
            error statuses (4xx, 5xx) are returned, not raised.

        Raises:
            TransportError: On any DNS, connection, TLS, timeout, protocol
                or URL error. The original exception is kept on ``cause``.
        """
        assert self._client is not None, "Transport not opened -- use as context manager"

        try:
            request = to_httpx_request(spec, self._client)
            debug(f"{request.method} {request.url} (body: {spec.body.kind})")
            started = time.monotonic()
            response = self._client.send(request)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(str(exc) or type(exc).__name__, cause=exc) from exc

        debug(f"Received {response.status_code} in {time.monotonic() - started:.3f}s")
        return ResponseView.from_httpx(response)
