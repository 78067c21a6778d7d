"""URL scheme normalisation."""

from __future__ import annotations

DEFAULT_SCHEME = "http://"
_KNOWN_PREFIXES = ("http://", "https://")


def normalize_url(url: str) -> str:
    """Return *url* with a scheme, prefixing ``http://`` when none is present.

    Only the ``http://`` and ``https://`` prefixes are recognised; anything
    else, including a bare host, gets ``http://`` in front. No other
    validation happens here. A malformed host surfaces later as a
    :class:`~httpcli.exceptions.TransportError`.

    Example::

        >>> normalize_url("example.com/path")
        'http://example.com/path'
        >>> normalize_url("https://example.com")
        'https://example.com'
    """
    if url.startswith(_KNOWN_PREFIXES):
        return url
    return f"{DEFAULT_SCHEME}{url}"
