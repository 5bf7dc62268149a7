"""geh package: image link extraction and root window backgrounds."""

from geh.exceptions import (
    DependencyError,
    DisplayConnectionError,
    DocumentUnavailableError,
    FetchError,
    ImageLoadError,
    InvalidDocumentUriError,
    PackageError,
    ResourceTypeMismatchError,
    SettingsError,
    UnsupportedModeError,
)
from geh.logging import configure_logging, get_logger
from geh.settings import Settings, get_settings

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("geh")

__all__ = [
    "DependencyError",
    "DisplayConnectionError",
    "DocumentUnavailableError",
    "FetchError",
    "ImageLoadError",
    "InvalidDocumentUriError",
    "PackageError",
    "ResourceTypeMismatchError",
    "Settings",
    "SettingsError",
    "UnsupportedModeError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "logger",
]
