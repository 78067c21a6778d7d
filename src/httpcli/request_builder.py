"""Request construction -- turns parsed arguments into a :class:`RequestSpec`.

Nothing in this module touches the network. :func:`build_request` produces
the in-memory description; :func:`to_httpx_request` turns it into the
:class:`httpx.Request` that the transport sends.

Body selection for POST and PUT:

1. ``-f FILE`` -- the file's bytes, uploaded as a multipart field named
   ``file``. Takes priority over ``-d`` when both are given.
2. ``-d DATA`` -- the string's UTF-8 bytes, sent with
   ``Content-Type: application/json``.
3. Neither -- no body.

GET and DELETE never carry a body.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

import httpx

from httpcli.exceptions import FileReadError
from httpcli.headers import build_header_map
from httpcli.models import (
    Body,
    FileBody,
    HeaderEntry,
    HTTPMethod,
    NoBody,
    RawBody,
    RequestSpec,
)
from httpcli.output import debug, warning
from httpcli.urls import normalize_url

PathLike = Union[str, Path]


def read_upload(path: PathLike) -> bytes:
    """Read the whole upload file into memory.

    Args:
        path: Path given with ``-f``.

    Returns:
        The file's raw bytes.

    Raises:
        FileReadError: If the file is missing, is a directory, or cannot be
            read.
    """
    try:
        with open(path, "rb") as fh:
            return fh.read()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise FileReadError(f"Cannot read file '{path}': {reason}") from exc


def build_body(
    method: HTTPMethod,
    data: Optional[str] = None,
    file: Optional[PathLike] = None,
) -> Body:
    """Choose the body variant for *method*.

    The upload file is only read when it will actually be sent, so a bad
    path combined with GET or DELETE is never touched.
    """
    if not method.accepts_body:
        if data is not None or file is not None:
            debug(f"Ignoring body arguments for {method.value}")
        return NoBody()

    if file is not None:
        if data is not None:
            warning("Both --data and --file given; sending the file")
        path = Path(file)
        return FileBody(content=read_upload(path), filename=path.name)

    if data is not None:
        return RawBody(content=data.encode("utf-8"))

    return NoBody()


def build_request(
    method: HTTPMethod,
    url: str,
    headers: Sequence[HeaderEntry] = (),
    data: Optional[str] = None,
    file: Optional[PathLike] = None,
) -> RequestSpec:
    """Assemble a :class:`RequestSpec` from parsed command-line arguments.

    Args:
        method: The subcommand's HTTP method.
        url: URL as typed by the user; normalised here.
        headers: Parsed ``-H`` entries, in order.
        data: Raw body from ``-d``.
        file: Upload path from ``-f``.

    Raises:
        FileReadError: If an upload file is needed and cannot be read.
    """
    return RequestSpec(
        method=method,
        url=normalize_url(url),
        headers=list(headers),
        body=build_body(method, data, file),
    )


def to_httpx_request(spec: RequestSpec, client: httpx.Client) -> httpx.Request:
    """Build the wire request for *spec* using *client*'s defaults.

    User headers go in first. A raw body then forces its own
    ``Content-Type``, replacing any value given with ``-H``. For file
    uploads a user ``Content-Type`` is removed so the multipart boundary
    generated by httpx is used.
    """
    headers = build_header_map(spec.headers)
    body = spec.body

    if isinstance(body, RawBody):
        headers["Content-Type"] = body.content_type
        return client.build_request(
            spec.method.value, spec.url, headers=headers, content=body.content,
        )

    if isinstance(body, FileBody):
        if "content-type" in headers:
            del headers["content-type"]
        return client.build_request(
            spec.method.value,
            spec.url,
            headers=headers,
            files={body.field_name: (body.filename, body.content)},
        )

    return client.build_request(spec.method.value, spec.url, headers=headers)
