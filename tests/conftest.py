"""Pytest marker auto-assignment by folder, plus an in-memory X server."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

import pytest
from Xlib import X, error

from geh import logger

if TYPE_CHECKING:
    from PIL import Image


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    """Mark collected tests located under tests/<marker>/."""
    target_dir = Path(config.rootpath) / "tests" / marker
    target_dir = target_dir.resolve()

    for item in items:
        try:
            path = Path(str(item.fspath)).resolve()
        except Exception:
            logger.warning(
                f"Could not resolve path for test item {item.name!s}; skipping {marker!s} marker assignment",
            )
            continue

        if path == target_dir or target_dir in path.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Apply directory-based markers to test items."""
    _mark_tests_by_directory(config, items, "unit")
    _mark_tests_by_directory(config, items, "integration")
    _mark_tests_by_directory(config, items, "end2end")


@dataclass
class FakePixmap:
    id: int
    owner: int
    width: int
    height: int
    depth: int
    image: Image.Image | None = None

    def create_gc(self) -> SimpleNamespace:
        return SimpleNamespace(free=lambda: None)

    def put_pil_image(self, gc: Any, x: int, y: int, image: Image.Image) -> None:
        assert image.mode == "RGB"
        assert (x, y) == (0, 0)
        self.image = image.copy()


class FakeRoot:
    def __init__(self, server: FakeXServer, client: FakeConnection) -> None:
        self._server = server
        self._client = client

    def create_pixmap(self, width: int, height: int, depth: int) -> FakePixmap:
        pixmap = FakePixmap(self._server.allocate_id(), self._client.client_id, width, height, depth)
        self._server.pixmaps[pixmap.id] = pixmap
        return pixmap

    def get_full_property(self, atom: int, property_type: int) -> SimpleNamespace | None:
        if atom not in self._server.properties:
            return None
        actual_type, value = self._server.properties[atom]
        # Like the server, only hand out data when the requested type matches.
        return SimpleNamespace(
            property_type=actual_type,
            format=32,
            value=list(value) if actual_type == property_type else [],
        )

    def change_property(self, atom: int, property_type: int, fmt: int, data: list[int], mode: int) -> None:
        assert fmt == 32
        assert mode == X.PropModeReplace
        self._server.properties[atom] = (property_type, list(data))

    def change_attributes(self, background_pixmap: FakePixmap) -> None:
        self._server.background = background_pixmap.id

    def clear_area(self) -> None:
        self._server.clear_count += 1


class FakeConnection:
    def __init__(self, server: FakeXServer) -> None:
        self._server = server
        self.client_id = server.allocate_id()
        self.close_down_mode = X.DestroyAll
        self.closed = False
        self.sync_count = 0
        self.killed: list[int] = []

    def screen(self) -> SimpleNamespace:
        return SimpleNamespace(
            root=FakeRoot(self._server, self),
            root_depth=self._server.depth,
            width_in_pixels=self._server.width,
            height_in_pixels=self._server.height,
        )

    def intern_atom(self, name: str, only_if_exists: bool = False) -> int:
        if name not in self._server.atoms:
            if only_if_exists:
                return X.NONE
            self._server.atoms[name] = self._server.allocate_id()
        return self._server.atoms[name]

    def kill_client(self, resource: int, onerror: Any = None) -> None:
        self.killed.append(resource)
        pixmap = self._server.pixmaps.get(resource)
        if pixmap is None:
            if onerror is not None:
                onerror(error.BadValue.__new__(error.BadValue), None)
            return
        self._server.free_client_resources(pixmap.owner)

    def set_close_down_mode(self, mode: int) -> None:
        self.close_down_mode = mode

    def sync(self) -> None:
        self.sync_count += 1

    def close(self) -> None:
        assert not self.closed, "connection closed twice"
        self.closed = True
        if self.close_down_mode != X.RetainPermanent:
            self._server.free_client_resources(self.client_id)


@dataclass
class FakeXServer:
    """Server-side state shared by every connection: atoms, properties, pixmaps."""

    width: int = 64
    height: int = 48
    depth: int = 24
    refuse_connections: bool = False
    atoms: dict[str, int] = field(default_factory=dict)
    properties: dict[int, tuple[int, list[int]]] = field(default_factory=dict)
    pixmaps: dict[int, FakePixmap] = field(default_factory=dict)
    connections: list[FakeConnection] = field(default_factory=list)
    background: int | None = None
    clear_count: int = 0
    _next_id: int = 0x200000

    def allocate_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def connect(self, display_name: str | None) -> FakeConnection:
        if self.refuse_connections:
            raise error.DisplayConnectionError(display_name or ":0", "connection refused")
        connection = FakeConnection(self)
        self.connections.append(connection)
        return connection

    def free_client_resources(self, client_id: int) -> None:
        for pixmap_id in [pid for pid, pixmap in self.pixmaps.items() if pixmap.owner == client_id]:
            del self.pixmaps[pixmap_id]

    def root_pixmap(self) -> int | None:
        atom = self.atoms.get("_XROOTPMAP_ID")
        if atom is None or atom not in self.properties:
            return None
        return self.properties[atom][1][0]


@pytest.fixture
def x_server() -> FakeXServer:
    return FakeXServer()
