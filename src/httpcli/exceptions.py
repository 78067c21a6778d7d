"""Exception hierarchy for httpcli.

All exceptions inherit from :class:`HttpCliError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`httpcli.exit_codes`.
The top-level handler in :func:`httpcli.app.main` catches ``HttpCliError``
and exits with the matching code.

Subclass hierarchy::

    HttpCliError (exit 1)
    +-- ArgumentError    (exit 2)
    +-- FileReadError    (exit 3)
    +-- ClientInitError  (exit 1)
    +-- TransportError   (exit 1, reported by the dispatcher)
    +-- DecodeError      (exit 1, reported by the presenter)

``ArgumentError`` and ``FileReadError`` abort the invocation before any
network I/O. ``TransportError`` and ``DecodeError`` are caught at the
dispatch boundary and printed to stderr instead.
"""

from __future__ import annotations

from typing import Optional

from httpcli.exit_codes import (
    EXIT_FILE_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
)


class HttpCliError(Exception):
    """Base exception for all httpcli errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ArgumentError(HttpCliError):
    """Raised for a header token that is not in ``key=value`` form."""

    exit_code = EXIT_INVALID_USAGE


class FileReadError(HttpCliError):
    """Raised when the upload file given with ``-f`` cannot be read."""

    exit_code = EXIT_FILE_ERROR


class ClientInitError(HttpCliError):
    """Raised when the underlying ``httpx.Client`` cannot be constructed."""


class TransportError(HttpCliError):
    """Raised for any network-level failure while sending the request.

    DNS failures, refused connections, TLS problems, timeouts and protocol
    errors all end up here without further classification. The original
    exception is kept on :attr:`cause` so its detailed form can be printed.

    Args:
        message: Short summary of the failure.
        cause: The underlying :mod:`httpx` exception, if any.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause

    @property
    def details(self) -> str:
        """Detailed form of the failure, used for the second stderr line."""
        return repr(self.cause) if self.cause is not None else repr(self)


class DecodeError(HttpCliError):
    """Raised when a response body cannot be decoded as text."""
