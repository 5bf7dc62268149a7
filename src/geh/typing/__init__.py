"""Typing-centric domain modules."""

from geh.typing.enums import CompositingMode
from geh.typing.models import BackgroundRequest, BackgroundResult, Document
from geh.typing.protocol import DocumentSource, Fetchable

__all__ = [
    "BackgroundRequest",
    "BackgroundResult",
    "CompositingMode",
    "Document",
    "DocumentSource",
    "Fetchable",
]
