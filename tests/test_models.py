from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from swatchkit.core.types import ROLES
from swatchkit.models.palette import Palette
from swatchkit.models.swatch import Swatch


def test_swatch_derives_hsl():
    hue, saturation, luma = Swatch((200, 50, 50), 100).get_hsl()
    assert hue == pytest.approx(0.0)
    assert saturation == pytest.approx(0.6)
    assert luma == pytest.approx(125 / 255)


def test_swatch_equality_is_identity():
    a = Swatch((1, 2, 3), 4)
    b = Swatch((1, 2, 3), 4)
    assert a == a
    assert a != b
    assert len({a, b}) == 2


def test_swatch_is_immutable_and_normalises_rgb():
    swatch = Swatch(np.array([10, 20, 30], dtype=np.uint8), 5)
    assert swatch.get_rgb() == (10, 20, 30)
    assert swatch.get_population() == 5
    assert all(type(v) is int for v in swatch.rgb)
    with pytest.raises(dataclasses.FrozenInstanceError):
        swatch.population = 10  # type: ignore[misc]


def test_swatch_text_colours():
    assert Swatch((0, 0, 0)).title_text_color == "#fff"
    assert Swatch((255, 255, 255)).body_text_color == "#000"
    grey = Swatch((170, 170, 170))
    assert grey.yiq == pytest.approx(170)
    assert grey.title_text_color == "#fff"
    assert grey.body_text_color == "#000"


def test_swatch_to_dict():
    data = Swatch((200, 32, 48), 7).to_dict()
    assert data["rgb"] == [200, 32, 48]
    assert data["hex"] == "#c82030"
    assert data["population"] == 7
    assert {"hsl", "titleTextColor", "bodyTextColor"}.issubset(data)


def test_palette_starts_empty_in_role_order():
    palette = Palette()
    assert list(palette) == list(ROLES)
    assert all(swatch is None for _, swatch in palette.items())
    assert palette.to_dict() == {role: None for role in ROLES}


def test_palette_rejects_unknown_role():
    palette = Palette()
    with pytest.raises(KeyError):
        palette["Pastel"] = Swatch((1, 1, 1))  # type: ignore[index]


def test_palette_selection_uses_identity():
    chosen = Swatch((200, 50, 50), 1)
    twin = Swatch((200, 50, 50), 1)
    palette = Palette(Vibrant=chosen)
    assert palette.is_selected(chosen)
    assert not palette.is_selected(twin)
    assert palette.get("Muted", twin) is twin
