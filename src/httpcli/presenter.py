"""Response presentation -- prints a :class:`ResponseView` or a transport error.

A successful exchange is written to stdout as::

    HTTP/1.1 200 OK
    content-type: text/plain
    content-length: 5

    hello

The status line and headers are printed before the body is decoded. If the
body turns out not to be text, the decode error goes to stderr and the
lines already printed stay where they are.

A transport failure writes a summary and a detailed line to stderr and
nothing to stdout.

See Also:
    :mod:`httpcli.output` -- the stdout/stderr manager used here.
"""

from __future__ import annotations

from httpcli.exceptions import DecodeError, TransportError
from httpcli.models import ResponseView
from httpcli.output import error, print_data


def present_response(view: ResponseView) -> None:
    """Print status line, headers, a blank line and the decoded body.

    Args:
        view: The response to print.
    """
    print_data(view.status_line)
    for header in view.headers:
        print_data(f"{header.name}: {header.value}")
    print_data("")

    try:
        text = view.text()
    except DecodeError as exc:
        error(f"Failed to read response body: {exc}")
        return
    print_data(text)


def present_transport_error(exc: TransportError) -> None:
    """Report a failed request on stderr with its summary and detailed form."""
    error(f"Request failed: {exc}\nDetails: {exc.details}")
