"""Image link extraction pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

from geh.extraction.scanner import extract_image_urls, iter_img_tags, scan_image_urls
from geh.extraction.tags import extract_src
from geh.extraction.urls import derive_base, derive_relative, resolve_url

if TYPE_CHECKING:
    from geh.typing.models import Document
    from geh.typing.protocol import Fetchable


def feed_image_links(document: Document, sink: Fetchable) -> int:
    """Queue every image linked from a document for fetching.

    Args:
        document: Fetched HTML document.
        sink: Fetch queue receiving the URLs.

    Returns:
        int: Number of URLs handed to the queue.
    """
    urls = extract_image_urls(document)
    for url in urls:
        sink.add_url(url)
    return len(urls)


__all__ = [
    "derive_base",
    "derive_relative",
    "extract_image_urls",
    "extract_src",
    "feed_image_links",
    "iter_img_tags",
    "resolve_url",
    "scan_image_urls",
]
