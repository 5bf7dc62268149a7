"""Local and remote document access."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Self
from urllib.parse import unquote, urlparse

import httpx

from geh.exceptions import FetchError
from geh.logging import get_logger
from geh.settings import build_httpx_client_kwargs
from geh.typing.models import Document

if TYPE_CHECKING:
    from geh.settings import Settings

logger = get_logger(__name__)

_REMOTE_PREFIXES = ("http://", "https://")
_DEFAULT_FILENAME = "index.html"


def is_remote(source: str) -> bool:
    """Return whether a source has to be downloaded before use."""
    return source.lower().startswith(_REMOTE_PREFIXES)


def _local_filename(url: str) -> str:
    """Return a file name for the downloaded copy of `url`."""
    name = Path(unquote(urlparse(url).path)).name
    return name or _DEFAULT_FILENAME


class DocumentFetcher:
    """Makes local files and http(s) URLs available as documents.

    Without a configured download directory, downloads go to a temporary
    directory that is removed by `close` or when leaving the `with` block.
    """

    def __init__(self, settings: Settings, *, download_dir: Path | None = None) -> None:
        """Create a fetcher.

        Args:
            settings: Runtime settings (HTTP client options, download directory).
            download_dir: Override of `settings.download_dir`.
        """
        self._settings = settings
        self._download_dir = download_dir or (Path(settings.download_dir) if settings.download_dir else None)
        self._temporary_dir: tempfile.TemporaryDirectory[str] | None = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def download_dir(self) -> Path:
        """Return the download directory, creating it on first use."""
        if self._download_dir is None:
            if self._temporary_dir is None:
                self._temporary_dir = tempfile.TemporaryDirectory(prefix="geh-")
            return Path(self._temporary_dir.name)
        self._download_dir.mkdir(parents=True, exist_ok=True)
        return self._download_dir

    def close(self) -> None:
        """Remove the temporary download directory and the documents in it."""
        if self._temporary_dir is None:
            return
        logger.debug("Removing downloads", extra={"path": self._temporary_dir.name})
        self._temporary_dir.cleanup()
        self._temporary_dir = None

    def open_document(self, source: str, *, uri: str | None = None) -> Document:
        """Return a local document for `source`, downloading it when remote.

        Args:
            source: Local path or http(s) URL.
            uri: Origin URI of a local file, defaults to its absolute `file:` URI.

        Raises:
            FetchError: If a remote source cannot be downloaded.

        Returns:
            Document: Local path with origin URI.
        """
        if not is_remote(source):
            return Document(path=Path(source), uri=uri or Path(source).resolve().as_uri())
        return Document(path=self.fetch(source), uri=source)

    def fetch(self, url: str) -> Path:
        """Download `url` into the download directory.

        Args:
            url: http(s) URL.

        Raises:
            FetchError: On transport errors and non-success HTTP statuses.

        Returns:
            Path: Path of the local copy.
        """
        destination = self.download_dir / _local_filename(url)
        try:
            with httpx.Client(**build_httpx_client_kwargs(self._settings, target_url=url)) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            raise FetchError(url=url, message=f"Failed to fetch ({exc})") from exc

        try:
            destination.write_bytes(response.content)
        except OSError as exc:
            raise FetchError(url=url, message=f"Failed to store {destination} ({exc})") from exc

        logger.info("Document fetched", extra={"url": url, "path": str(destination), "bytes": len(response.content)})
        return destination
