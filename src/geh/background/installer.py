"""Installation of a canvas as the persistent X root window background.

The background pixmap has to outlive the process that sets it. It is created on
a connection of its own whose close-down mode is switched to RetainPermanent
right before closing, and its id is published in the `_XROOTPMAP_ID` root
property. The next setter, whichever tool it is, reads that property and kills
the retained resources before publishing its own pixmap.

Only one installer may run against a display at a time: the property is read
and rewritten without any locking.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from Xlib import X, Xatom, error
from Xlib.display import Display

from geh.constants import ROOT_PIXMAP_ATOM
from geh.exceptions import DisplayConnectionError, ResourceTypeMismatchError
from geh.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from PIL import Image

logger = get_logger(__name__)


def open_display(display_name: str | None = None, *, connect: Callable[[str | None], Any] = Display) -> Any:
    """Open a connection to the X server.

    Args:
        display_name: Display to connect to, `$DISPLAY` when None.
        connect: Connection factory.

    Raises:
        DisplayConnectionError: If the display cannot be opened.

    Returns:
        Any: Open `Xlib.display.Display`.
    """
    try:
        return connect(display_name)
    except error.DisplayError as exc:
        raise DisplayConnectionError(display_name=display_name, exc=exc) from exc


class PersistentSurfaceInstaller:
    """Installs canvases as the root background, freeing the previous one."""

    def __init__(
        self,
        display: Any,
        *,
        display_name: str | None = None,
        connect: Callable[[str | None], Any] = Display,
    ) -> None:
        """Bind the installer to the caller's display connection.

        Args:
            display: Connection owned by the caller, used to reclaim the previous
                background. It is never switched to RetainPermanent.
            display_name: Display for the background connection.
            connect: Connection factory for the background connection.
        """
        self._display = display
        self._display_name = display_name
        self._connect = connect

    def previous_pixmap(self) -> int | None:
        """Return the pixmap id published in the root property, if any.

        Raises:
            ResourceTypeMismatchError: If the property is not of type PIXMAP.

        Returns:
            int | None: Pixmap id, or None when no background was published.
        """
        atom = self._display.intern_atom(ROOT_PIXMAP_ATOM, only_if_exists=True)
        if atom == X.NONE:
            # The atom was never interned so the property cannot be set.
            return None

        root = self._display.screen().root
        prop = root.get_full_property(atom, Xatom.PIXMAP)
        if prop is None:
            return None
        if prop.property_type != Xatom.PIXMAP:
            raise ResourceTypeMismatchError(property_name=ROOT_PIXMAP_ATOM, actual_type=prop.property_type)
        if not prop.value:
            return None
        return int(prop.value[0])

    def release_previous(self) -> bool:
        """Kill the resources retained by the previous background setter.

        Returns:
            bool: True when a previous pixmap was found and released.
        """
        try:
            pixmap_id = self.previous_pixmap()
        except ResourceTypeMismatchError as exc:
            logger.warning(str(exc))
            return False
        if pixmap_id is None:
            return False

        catcher = error.CatchError(error.BadValue)
        self._display.kill_client(pixmap_id, onerror=catcher)
        self._display.sync()
        if catcher.get_error():
            logger.warning("Previous background pixmap no longer exists", extra={"pixmap": pixmap_id})
            return False

        logger.debug("Released previous background", extra={"pixmap": pixmap_id})
        return True

    @contextmanager
    def _retained_connection(self) -> Iterator[Any]:
        """Yield a fresh connection whose resources survive its closing.

        RetainPermanent is only requested once the body completed; on error the
        connection closes normally and the server frees what was created on it.
        """
        connection = open_display(self._display_name, connect=self._connect)
        try:
            yield connection
            connection.set_close_down_mode(X.RetainPermanent)
            connection.sync()
        finally:
            connection.close()

    def install(self, canvas: Image.Image) -> int:
        """Make `canvas` the root window background.

        Args:
            canvas: Full-screen image to install.

        Raises:
            DisplayConnectionError: If the background connection cannot be opened.

        Returns:
            int: Id of the new, retained background pixmap.
        """
        width, height = canvas.size
        self.release_previous()

        with self._retained_connection() as connection:
            logger.debug("Setting background", extra={"width": width, "height": height})
            screen = connection.screen()
            root = screen.root

            pixmap = root.create_pixmap(width, height, screen.root_depth)
            gc = pixmap.create_gc()
            pixmap.put_pil_image(gc, 0, 0, canvas.convert("RGB"))
            gc.free()

            atom = connection.intern_atom(ROOT_PIXMAP_ATOM)
            root.change_property(atom, Xatom.PIXMAP, 32, [pixmap.id], X.PropModeReplace)
            root.change_attributes(background_pixmap=pixmap)
            root.clear_area()

        logger.info("Background installed", extra={"pixmap": pixmap.id, "width": width, "height": height})
        return pixmap.id
