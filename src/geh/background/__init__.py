"""Root window background compositing and installation."""

from geh.background.canvas import build_base, parse_color
from geh.background.compositor import composite
from geh.background.installer import PersistentSurfaceInstaller, open_display
from geh.background.setter import load_image, set_background

__all__ = [
    "PersistentSurfaceInstaller",
    "build_base",
    "composite",
    "load_image",
    "open_display",
    "parse_color",
    "set_background",
]
