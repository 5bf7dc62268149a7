"""Core domain models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from geh.constants import DEFAULT_BACKGROUND_COLOR
from geh.typing.enums import CompositingMode


class Document(BaseModel):
    """Fetched document: local copy plus the URI it came from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Path
    uri: str


class BackgroundRequest(BaseModel):
    """Parameters of one background setting call."""

    model_config = ConfigDict(extra="forbid")

    image_path: Path
    color: str | None = None
    mode: CompositingMode = CompositingMode.CENTER

    @property
    def fill_color(self) -> str:
        """Return the requested color, black when none was given."""
        return self.color or DEFAULT_BACKGROUND_COLOR


class BackgroundResult(BaseModel):
    """Outcome of one background setting call."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    success: bool
    mode: CompositingMode
    mode_applied: bool = False
    width: int | None = Field(default=None, ge=1)
    height: int | None = Field(default=None, ge=1)
    pixmap_id: int | None = None
