from __future__ import annotations

import pytest

from geh.background.canvas import build_base, parse_color


@pytest.mark.parametrize(
    ("color", "expected"),
    [
        ("#000000", (0, 0, 0, 255)),
        ("#fff", (255, 255, 255, 255)),
        ("#102030", (16, 32, 48, 255)),
        ("navy", (0, 0, 128, 255)),
        ("  Red ", (255, 0, 0, 255)),
        ("rgb(1, 2, 3)", (1, 2, 3, 255)),
    ],
)
def test_parse_color(color: str, expected: tuple[int, int, int, int]) -> None:
    assert parse_color(color) == expected


@pytest.mark.parametrize("color", ["", "not-a-color", "#12", "#gggggg"])
def test_parse_color_rejects_unknown_values(color: str) -> None:
    assert parse_color(color) is None


def test_build_base_has_screen_size_and_solid_fill() -> None:
    canvas = build_base(40, 30, "#336699")

    assert canvas.mode == "RGBA"
    assert canvas.size == (40, 30)
    assert canvas.getcolors() == [(40 * 30, (0x33, 0x66, 0x99, 255))]


def test_build_base_defaults_to_black() -> None:
    canvas = build_base(4, 4)

    assert canvas.getcolors() == [(16, (0, 0, 0, 255))]


def test_build_base_falls_back_to_black_on_unparsable_color(mocker) -> None:
    logger = mocker.patch("geh.background.canvas.logger")

    canvas = build_base(4, 2, "chartreuse-ish")

    assert canvas.getcolors() == [(8, (0, 0, 0, 255))]
    logger.warning.assert_called_once()
