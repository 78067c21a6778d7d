"""Pydantic models shared across httpcli.

Every other module imports its data shapes from here. The models fall into
three groups:

**Request models** -- built from command-line arguments and consumed once by
the transport: :class:`HTTPMethod`, :class:`HeaderEntry`, the body variants
:class:`NoBody`, :class:`RawBody` and :class:`FileBody`, and
:class:`RequestSpec`.

**Response models** -- :class:`ResponseView`, a detached snapshot of an
:class:`httpx.Response` handed to the presenter.

**Settings** -- :class:`ClientSettings`, the only runtime configuration. It
is never read from disk or from the environment.

None of these objects outlive a single process invocation.
"""

from __future__ import annotations

import enum
from typing import Annotated, Literal, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, Field

from httpcli import __version__
from httpcli.exceptions import DecodeError


DEFAULT_TIMEOUT = 10.0
"""Seconds allowed for each phase of a request (connect, write, read, pool).

httpx applies the limit per phase, so a slow exchange can take longer in total.
"""

JSON_CONTENT_TYPE = "application/json"


# --- Request models ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods exposed as subcommands."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def accepts_body(self) -> bool:
        """Whether requests with this method may carry a body."""
        return self in (HTTPMethod.POST, HTTPMethod.PUT)


class HeaderEntry(BaseModel):
    """A single ``name=value`` header taken from the command line.

    Entries are kept in the order given. Whether the name and value are
    acceptable on the wire is only checked when the header map is built
    (see :func:`httpcli.headers.build_header_map`).
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class NoBody(BaseModel):
    """The request carries no body."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["none"] = "none"


class RawBody(BaseModel):
    """A raw body given with ``-d``, sent with an explicit content type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["raw"] = "raw"
    content: bytes
    content_type: str = JSON_CONTENT_TYPE


class FileBody(BaseModel):
    """A file given with ``-f``, sent as a single multipart form field."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = "file"
    content: bytes
    filename: str
    field_name: str = "file"


Body = Annotated[Union[NoBody, RawBody, FileBody], Field(discriminator="kind")]


class RequestSpec(BaseModel):
    """In-memory description of the outgoing request.

    Example::

        RequestSpec(
            method=HTTPMethod.POST,
            url="http://example.com",
            headers=[HeaderEntry(name="X-Trace", value="1")],
            body=RawBody(content=b'{"k": 1}'),
        )
    """

    method: HTTPMethod
    url: str = Field(description="Absolute URL, always scheme-prefixed")
    headers: list[HeaderEntry] = Field(default_factory=list)
    body: Body = Field(default_factory=NoBody)


# --- Response models ---


class ResponseView(BaseModel):
    """Snapshot of a received response, consumed once by the presenter."""

    status_code: int
    reason_phrase: str = ""
    http_version: str = "HTTP/1.1"
    headers: list[HeaderEntry] = Field(default_factory=list)
    content: bytes = b""
    encoding: Optional[str] = Field(
        default=None, description="Charset declared in the Content-Type header"
    )

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> ResponseView:
        """Build a view from a fully read :class:`httpx.Response`.

        Headers are kept in the order received, duplicates included, with
        lower-cased names.
        """
        return cls(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase or "",
            http_version=response.http_version or "HTTP/1.1",
            headers=[
                HeaderEntry(name=name, value=value)
                for name, value in response.headers.multi_items()
            ],
            content=response.content,
            encoding=response.charset_encoding,
        )

    @property
    def status_line(self) -> str:
        return f"{self.http_version} {self.status_code} {self.reason_phrase}".rstrip()

    def text(self) -> str:
        """Decode the body using the declared charset (UTF-8 by default).

        Raises:
            DecodeError: If the body is not valid in that encoding or the
                declared charset is unknown.
        """
        encoding = self.encoding or "utf-8"
        try:
            return self.content.decode(encoding)
        except LookupError as exc:
            raise DecodeError(f"unknown charset '{encoding}'") from exc
        except UnicodeDecodeError as exc:
            raise DecodeError(f"body is not valid {encoding}: {exc.reason}") from exc


# --- Settings ---


class ClientSettings(BaseModel):
    """Settings for the HTTP client owned by :class:`~httpcli.transport.Transport`."""

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    follow_redirects: bool = True
    user_agent: str = f"httpcli/{__version__}"
