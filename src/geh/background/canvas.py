"""Full-screen base canvas creation."""

from __future__ import annotations

from PIL import Image, ImageColor

from geh.constants import DEFAULT_BACKGROUND_COLOR
from geh.logging import get_logger

logger = get_logger(__name__)

_BLACK = (0, 0, 0, 255)


def parse_color(color_spec: str) -> tuple[int, int, int, int] | None:
    """Parse a color name or value into opaque RGBA.

    Args:
        color_spec: Color name (`navy`), hex value (`#000`, `#102030`) or CSS
            function (`rgb(...)`, `hsl(...)`).

    Returns:
        tuple[int, int, int, int] | None: RGBA color, or None when unrecognized.
    """
    try:
        red, green, blue, *_ = ImageColor.getrgb(color_spec.strip())
    except ValueError:
        return None
    return (red, green, blue, 255)


def build_base(screen_width: int, screen_height: int, color_spec: str = DEFAULT_BACKGROUND_COLOR) -> Image.Image:
    """Create a screen sized RGBA canvas filled with a solid color.

    An unrecognized color is reported and replaced by black.

    Args:
        screen_width: Canvas width in pixels.
        screen_height: Canvas height in pixels.
        color_spec: Fill color.

    Returns:
        Image.Image: New canvas.
    """
    fill = parse_color(color_spec)
    if fill is None:
        logger.warning("Failed to parse color", extra={"color": color_spec})
        fill = _BLACK

    logger.debug("Creating background base", extra={"width": screen_width, "height": screen_height})
    return Image.new("RGBA", (screen_width, screen_height), fill)
