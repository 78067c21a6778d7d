"""Command dispatch -- runs one subcommand end to end.

Each subcommand goes through the same steps::

    parse headers -> build request (normalise URL, read upload)
                  -> Transport.send -> present response

Argument and file errors propagate to the caller and abort the invocation
before anything is sent. Transport errors are caught here and reported on
stderr; the invocation then ends normally.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from httpcli.exceptions import TransportError
from httpcli.headers import parse_headers
from httpcli.models import HTTPMethod, RequestSpec
from httpcli.presenter import present_response, present_transport_error
from httpcli.request_builder import build_request
from httpcli.transport import Transport


def execute(spec: RequestSpec, transport: Transport) -> bool:
    """Send an already built request and print the outcome.

    Args:
        spec: The request to send.
        transport: An opened :class:`~httpcli.transport.Transport`.

    Returns:
        ``True`` if a response was received, ``False`` if the request
        failed and the error was reported.
    """
    try:
        view = transport.send(spec)
    except TransportError as exc:
        present_transport_error(exc)
        return False
    present_response(view)
    return True


def dispatch(
    method: HTTPMethod,
    url: str,
    transport: Transport,
    headers: Iterable[str] = (),
    data: Optional[str] = None,
    file: Optional[Union[str, Path]] = None,
) -> bool:
    """Run one subcommand: build the request from raw arguments and send it.

    Args:
        method: HTTP method of the subcommand.
        url: URL as typed on the command line.
        transport: The process-wide transport.
        headers: Raw ``-H`` tokens.
        data: Raw body from ``-d`` (POST/PUT only).
        file: Upload path from ``-f`` (POST/PUT only).

    Returns:
        Whether a response was received (see :func:`execute`).

    Raises:
        ArgumentError: If a header token is malformed.
        FileReadError: If the upload file cannot be read.
    """
    spec = build_request(method, url, parse_headers(headers), data=data, file=file)
    return execute(spec, transport)
