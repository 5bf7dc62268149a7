"""Collaborator interfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from geh.typing.models import Document


class Fetchable(Protocol):
    """Fetch queue accepting URLs discovered in documents."""

    def add_url(self, url: str) -> None:
        """Queue a URL for fetching.

        Args:
            url: Absolute URL to fetch.
        """


class DocumentSource(Protocol):
    """Source of documents to scan for image links."""

    def open_document(self, source: str, *, uri: str | None = None) -> Document:
        """Make a source available as a local document.

        Args:
            source: Local path or remote URL.
            uri: Origin URI overriding the one derived from `source`.

        Returns:
            Document: Local copy with its origin URI.
        """
