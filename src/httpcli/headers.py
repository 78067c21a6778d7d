"""Header parsing and header-map construction.

Headers arrive on the command line as ``-H name=value`` tokens. Parsing and
wire validation happen at two different points, with different failure
modes:

* :func:`parse_header` runs while arguments are parsed. A token without
  ``=`` is a usage error and aborts the invocation.
* :func:`build_header_map` runs when the request is built. Values are
  trimmed of surrounding whitespace; entries whose name is not a valid HTTP
  token, or whose value contains control characters, are dropped without
  failing the request.

Repeated names are all kept by the parser; the header map keeps only the
last value for each (case-insensitive) name.
"""

from __future__ import annotations

import re
from typing import Iterable

import httpx

from httpcli.exceptions import ArgumentError
from httpcli.models import HeaderEntry
from httpcli.output import debug

HEADER_FORMAT_MESSAGE = "Header format must be key=value"

# RFC 9110 section 5.6.2 ``token``.
_TOKEN_RE = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")

# RFC 9110 section 5.5 ``field-value``: visible ASCII or obs-text, with
# spaces and tabs allowed only between visible characters.
_VALUE_RE = re.compile(
    rb"(?:[\x21-\x7e\x80-\xff](?:[\t\x20-\x7e\x80-\xff]*[\x21-\x7e\x80-\xff])?)?"
)


def parse_header(token: str) -> HeaderEntry:
    """Split a ``name=value`` token on the first ``=``.

    The value may itself contain ``=``::

        >>> parse_header("a=b=c")
        HeaderEntry(name='a', value='b=c')

    Args:
        token: Raw token from the command line.

    Returns:
        The parsed :class:`~httpcli.models.HeaderEntry`.

    Raises:
        ArgumentError: If the token contains no ``=``.
    """
    name, sep, value = token.partition("=")
    if not sep:
        raise ArgumentError(f"{HEADER_FORMAT_MESSAGE}, got '{token}'")
    return HeaderEntry(name=name, value=value)


def parse_headers(tokens: Iterable[str]) -> list[HeaderEntry]:
    """Parse every token in order, keeping duplicates."""
    return [parse_header(token) for token in tokens]


def is_valid_name(name: str) -> bool:
    return bool(_TOKEN_RE.fullmatch(name))


def is_valid_value(value: str | bytes) -> bool:
    """Check *value* against the RFC 9110 ``field-value`` grammar.

    Strings are checked as their UTF-8 bytes. Leading or trailing
    whitespace makes a value invalid.
    """
    if isinstance(value, str):
        value = value.encode("utf-8")
    return bool(_VALUE_RE.fullmatch(value))


def build_header_map(entries: Iterable[HeaderEntry]) -> httpx.Headers:
    """Fold parsed entries into a header map with unique names.

    Values are stripped of surrounding spaces and tabs and sent as UTF-8
    bytes. Later entries overwrite earlier ones with the same name
    (compared case-insensitively). Invalid entries are skipped.

    Args:
        entries: Parsed headers in command-line order.

    Returns:
        An :class:`httpx.Headers` holding at most one value per name.
    """
    collected: dict[str, tuple[str, bytes]] = {}
    for entry in entries:
        value = entry.value.strip(" \t").encode("utf-8")
        if not is_valid_name(entry.name) or not is_valid_value(value):
            debug(f"Dropping header that cannot be sent: {entry.name!r}={entry.value!r}")
            continue
        collected[entry.name.lower()] = (entry.name, value)
    return httpx.Headers(list(collected.values()))
