"""Image link extraction from HTML documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

from geh.constants import DOCUMENT_READ_CHUNK_SIZE
from geh.exceptions import DocumentUnavailableError, InvalidDocumentUriError
from geh.extraction.tags import extract_src
from geh.extraction.urls import derive_base, derive_relative, resolve_url
from geh.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from geh.typing.models import Document

logger = get_logger(__name__)

_TAG_OPEN = b"<img"
_TAG_CLOSE = ord(">")


def _iter_bytes(stream: BinaryIO) -> Iterator[int]:
    """Yield the stream content one byte at a time."""
    while chunk := stream.read(DOCUMENT_READ_CHUNK_SIZE):
        yield from chunk


def iter_img_tags(stream: BinaryIO) -> Iterator[str]:
    """Yield the raw text of every `<img ...>` tag in a byte stream.

    Matching of `<img` ignores case. Once matched, every byte up to and including
    the next `>` belongs to the tag, quotes and nested brackets included. A tag cut
    short by the end of the stream is still yielded.

    Args:
        stream: Binary stream, read forward once.

    Yields:
        str: Tag text starting with `<img`, decoded as UTF-8.
    """
    matched = 0
    buffer: bytearray | None = None

    for byte in _iter_bytes(stream):
        if buffer is not None:
            buffer.append(byte)
            if byte == _TAG_CLOSE:
                yield buffer.decode("utf-8", errors="replace")
                buffer = None
            continue

        expected = _TAG_OPEN[matched]
        # Letters after "<" compare case-insensitively.
        if byte == expected or (matched and (byte | 0x20) == expected):
            matched += 1
        elif byte == _TAG_OPEN[0]:
            matched = 1
        else:
            matched = 0

        if matched == len(_TAG_OPEN):
            buffer = bytearray(_TAG_OPEN)
            matched = 0

    if buffer is not None:
        yield buffer.decode("utf-8", errors="replace")


def scan_image_urls(stream: BinaryIO, uri: str) -> list[str]:
    """Extract absolute image URLs from an HTML byte stream.

    Args:
        stream: Document content.
        uri: Origin URI of the document, used to resolve relative sources.

    Raises:
        InvalidDocumentUriError: If no base can be derived from `uri`.

    Returns:
        list[str]: URLs in document order, duplicates kept.
    """
    base = derive_base(uri)
    relative = derive_relative(uri)

    urls: list[str] = []
    for tag in iter_img_tags(stream):
        src = extract_src(tag)
        if src is None:
            continue
        urls.append(resolve_url(base, relative, src))
    return urls


def _open_document(document: Document) -> BinaryIO:
    try:
        return document.path.open("rb")
    except OSError as exc:
        raise DocumentUnavailableError(path=str(document.path), exc=exc) from exc


def extract_image_urls(document: Document) -> list[str]:
    """Extract image URLs from a fetched document.

    Failures are scoped to the document: an unreadable file or an unusable URI
    is logged as a warning and yields no URLs.

    Args:
        document: Local copy of the document and its origin URI.

    Returns:
        list[str]: URLs in document order.
    """
    try:
        with _open_document(document) as stream:
            urls = scan_image_urls(stream, document.uri)
    except (DocumentUnavailableError, InvalidDocumentUriError) as exc:
        logger.warning(str(exc), extra={"path": str(document.path), "uri": document.uri})
        return []

    logger.debug("Image links extracted", extra={"uri": document.uri, "count": len(urls)})
    return urls
