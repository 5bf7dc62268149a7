"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class DependencyError(PackageError):
    """Raised when optional runtime dependencies are missing."""

    missing_package: list[str]
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Missing runtime dependencies for '{self.message}': {', '.join(self.missing_package)}"


@dataclass(frozen=True)
class DocumentUnavailableError(PackageError):
    """Raised when a document cannot be opened for reading."""

    path: str
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        message = f"Unable to open {self.path} for reading"
        return f"{message}: {self.exc}" if self.exc else message


@dataclass(frozen=True)
class InvalidDocumentUriError(PackageError):
    """Raised when a document URI is too short to carry a scheme prefix."""

    uri: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Document URI is too short to derive a base: '{self.uri}'"


@dataclass(frozen=True)
class FetchError(PackageError):
    """Raised when a remote document cannot be downloaded."""

    url: str
    message: str = "Failed to fetch"

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message} {self.url}"


@dataclass(frozen=True)
class ImageLoadError(PackageError):
    """Raised when the source image cannot be loaded."""

    path: str
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        message = f"Unable to load image {self.path}"
        return f"{message}: {self.exc}" if self.exc else message


@dataclass(frozen=True)
class UnsupportedModeError(PackageError):
    """Raised when a compositing mode has no implementation."""

    mode: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.mode} background mode is not yet supported"


@dataclass(frozen=True)
class ResourceTypeMismatchError(PackageError):
    """Raised when the root pixmap property holds an unexpected type."""

    property_name: str
    actual_type: int

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Mismatching root atom type for {self.property_name}: {self.actual_type}"


@dataclass(frozen=True)
class DisplayConnectionError(PackageError):
    """Raised when a connection to the display server cannot be opened."""

    display_name: str | None
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        message = f"Unable to open display {self.display_name or '(default)'}"
        return f"{message}: {self.exc}" if self.exc else message
