"""Drawing of a source image onto the background canvas."""

from __future__ import annotations

from PIL import Image

from geh.exceptions import UnsupportedModeError
from geh.logging import get_logger
from geh.typing.enums import CompositingMode

logger = get_logger(__name__)


def _as_rgba(image: Image.Image) -> Image.Image:
    if image.mode == "RGBA":
        return image
    return image.convert("RGBA")


def composite_centered(canvas: Image.Image, image: Image.Image) -> None:
    """Draw the image unscaled in the middle of the canvas.

    An image larger than the canvas along an axis is cropped evenly on both sides;
    a smaller one is offset by half the difference.
    """
    src_width, src_height = image.size
    dest_width, dest_height = canvas.size

    src_x = src_y = dest_x = dest_y = 0
    if src_width > dest_width:
        src_x = (src_width - dest_width) // 2
    else:
        dest_x = (dest_width - src_width) // 2
    if src_height > dest_height:
        src_y = (src_height - dest_height) // 2
    else:
        dest_y = (dest_height - src_height) // 2

    width = min(dest_width, src_width)
    height = min(dest_height, src_height)
    logger.debug(
        "Copying image centered",
        extra={"source": (src_width, src_height, src_x, src_y), "dest": (dest_width, dest_height, dest_x, dest_y)},
    )
    region = image.crop((src_x, src_y, src_x + width, src_y + height))
    canvas.paste(_as_rgba(region), (dest_x, dest_y))


def composite_scaled(canvas: Image.Image, image: Image.Image) -> None:
    """Stretch the image over the whole canvas, axes scaled independently."""
    scaled = _as_rgba(image).resize(canvas.size, Image.Resampling.BILINEAR)
    canvas.paste(scaled, (0, 0))


def composite_tiled(canvas: Image.Image, image: Image.Image) -> None:
    """Repeat the image unscaled from the top left corner of the canvas."""
    tile = _as_rgba(image)
    tile_width, tile_height = tile.size
    dest_width, dest_height = canvas.size
    for y in range(0, dest_height, tile_height):
        for x in range(0, dest_width, tile_width):
            canvas.paste(tile, (x, y))


def composite(canvas: Image.Image, image: Image.Image, mode: CompositingMode) -> None:
    """Draw `image` onto `canvas` according to `mode`.

    The canvas is modified in place; the image is left untouched.

    Args:
        canvas: Base background, see `build_base`.
        image: Loaded source image.
        mode: Compositing mode.

    Raises:
        UnsupportedModeError: For crop, which has no implementation, and for any
            value outside `CompositingMode`. The canvas is left unchanged.
    """
    match mode:
        case CompositingMode.CENTER:
            composite_centered(canvas, image)
        case CompositingMode.SCALE | CompositingMode.FILL:
            composite_scaled(canvas, image)
        case CompositingMode.TILE:
            composite_tiled(canvas, image)
        case CompositingMode.CROP:
            raise UnsupportedModeError(mode=mode.value)
        case _:
            raise UnsupportedModeError(mode=str(mode))
