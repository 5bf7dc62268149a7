"""Background setting orchestration."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from PIL import Image
from Xlib.display import Display

from geh.background.canvas import build_base
from geh.background.compositor import composite
from geh.background.installer import PersistentSurfaceInstaller, open_display
from geh.exceptions import ImageLoadError, UnsupportedModeError
from geh.logging import get_logger
from geh.typing.models import BackgroundResult

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from geh.settings import Settings
    from geh.typing.models import BackgroundRequest

logger = get_logger(__name__)


def load_image(path: Path) -> Image.Image:
    """Load an image file fully into memory.

    Args:
        path: Image file.

    Raises:
        ImageLoadError: If the file is missing or not a readable image.

    Returns:
        Image.Image: Decoded image.
    """
    try:
        image = Image.open(path)
        image.load()
    except (OSError, Image.DecompressionBombError) as exc:
        raise ImageLoadError(path=str(path), exc=exc) from exc
    return image


def set_background(
    request: BackgroundRequest,
    settings: Settings,
    *,
    connect: Callable[[str | None], Any] = Display,
) -> BackgroundResult:
    """Render an image to a full-screen background and install it.

    A mode without implementation still installs the plain colored canvas and is
    reported through `BackgroundResult.mode_applied`.

    Args:
        request: Image, color and mode to use.
        settings: Runtime settings, providing the display name.
        connect: X connection factory.

    Raises:
        DisplayConnectionError: If the display cannot be opened.

    Returns:
        BackgroundResult: Outcome; `success` is False when the image failed to load.
    """
    try:
        image = load_image(request.image_path)
    except ImageLoadError as exc:
        logger.warning(str(exc))
        return BackgroundResult(success=False, mode=request.mode)

    display = open_display(settings.display_name, connect=connect)
    try:
        screen = display.screen()
        canvas = build_base(screen.width_in_pixels, screen.height_in_pixels, request.fill_color)

        mode_applied = True
        try:
            composite(canvas, image, request.mode)
        except UnsupportedModeError as exc:
            logger.warning(str(exc))
            mode_applied = False

        installer = PersistentSurfaceInstaller(display, display_name=settings.display_name, connect=connect)
        pixmap_id = installer.install(canvas)
    finally:
        display.close()

    width, height = canvas.size
    return BackgroundResult(
        success=True,
        mode=request.mode,
        mode_applied=mode_applied,
        width=width,
        height=height,
        pixmap_id=pixmap_id,
    )
