"""URL anchors and resolution for `src` attribute values."""

from __future__ import annotations

from geh.constants import URI_SCHEME_PREFIX_LENGTH
from geh.exceptions import InvalidDocumentUriError

_ABSOLUTE_PREFIXES = ("http://", "https://")
_SCHEME_SEPARATOR = "://"


def resolve_url(base: str, relative: str, src: str) -> str:
    """Build a complete URL for an image source value.

    Args:
        base: Scheme and host of the document, see `derive_base`.
        relative: Directory of the document, see `derive_relative`.
        src: Raw `src` attribute value.

    Returns:
        str: `base + src` for site-absolute paths, `src` itself for http(s) URLs,
        `relative + "/" + src` otherwise.
    """
    if src.startswith("/"):
        return base + src
    if src.lower().startswith(_ABSOLUTE_PREFIXES):
        return src
    return f"{relative}/{src}"


def derive_base(uri: str) -> str:
    """Return the scheme and host part of a document URI.

    The first eight characters are taken as the scheme prefix and the host ends at
    the next `/`. Without one, the whole URI is the base.

    Args:
        uri: Origin URI of the document.

    Raises:
        InvalidDocumentUriError: If the URI is shorter than the scheme prefix.

    Returns:
        str: URI truncated before the first path separator.
    """
    if len(uri) < URI_SCHEME_PREFIX_LENGTH:
        raise InvalidDocumentUriError(uri=uri)
    end = uri.find("/", URI_SCHEME_PREFIX_LENGTH)
    if end == -1:
        return uri
    return uri[:end]


def derive_relative(uri: str) -> str:
    """Return the containing directory of a document URI (no trailing slash).

    The `//` after the scheme is not a separator, so a URI without a path is its
    own directory.
    """
    scheme_end = uri.find(_SCHEME_SEPARATOR)
    start = 0 if scheme_end == -1 else scheme_end + len(_SCHEME_SEPARATOR)
    end = uri.rfind("/", start)
    if end == -1:
        return uri
    return uri[:end]
