# tests/test_tokens_shades.py
"""Shade-scale and starter-palette generation."""

from __future__ import annotations

from importlib import import_module

import pytest

shades = import_module("color_token_engine.engine.tokens.shades")
color = import_module("color_token_engine.engine.color")


def _lum(hex_value: str) -> float:
    return color.relative_luminance(color.parse_color(hex_value))


# ---------- generate_shades ----------
def test_three_stop_scale_scenario():
    tokens = shades.generate_shades("#3b82f6", "primary", [50, 500, 950])
    assert [t.shade for t in tokens] == [50, 500, 950]
    assert tokens[1].value == "#3b82f6"
    seed_lum = _lum("#3b82f6")
    assert _lum(tokens[0].value) > seed_lum
    assert _lum(tokens[2].value) < seed_lum


def test_default_scale_names_and_order():
    tokens = shades.generate_shades("#6b7280", "neutral")
    assert [t.shade for t in tokens] == list(color.DEFAULT_SHADE_SCALE)
    assert [t.name for t in tokens][:2] == ["neutral-50", "neutral-100"]
    lums = [_lum(t.value) for t in tokens]
    assert lums == sorted(lums, reverse=True)


@pytest.mark.parametrize("seed", ["#3B82F6", "3b82f6", "rgb(59, 130, 246)", (59, 130, 246)])
def test_base_stop_is_normalized_seed(seed):
    tokens = shades.generate_shades(seed, "primary", [500])
    assert tokens[0].value == "#3b82f6"


def test_short_hex_seed_is_expanded():
    assert shades.generate_shades("#FFF", "white", [500])[0].value == "#ffffff"


def test_scale_is_sorted_but_not_deduped():
    tokens = shades.generate_shades("#3b82f6", "primary", [950, 500, 50, 500])
    assert [t.shade for t in tokens] == [50, 500, 500, 950]


def test_mix_ratios_are_asymmetric():
    assert shades.shade_mix_ratio(500) == 0.0
    assert shades.shade_mix_ratio(50) == pytest.approx(0.81)
    assert shades.shade_mix_ratio(950) == pytest.approx(0.72)


def test_exact_mix_values():
    # black 72% toward white, white 64% toward black
    assert shades.generate_shades("#000000", "k", [100])[0].value == "#b8b8b8"
    assert shades.generate_shades("#ffffff", "w", [900])[0].value == "#5c5c5c"


@pytest.mark.parametrize("seed", ["notacolor", "", None, "#12"])
def test_invalid_seed_returns_empty(seed):
    assert shades.generate_shades(seed, "primary") == []
    assert color.is_valid_color(seed) is False


def test_empty_scale_is_distinguishable_from_invalid_seed():
    assert shades.generate_shades("#3b82f6", "primary", []) == []
    assert color.is_valid_color("#3b82f6") is True


# ---------- generate_semantic_palette ----------
def test_semantic_palette_from_red():
    palette = shades.generate_semantic_palette("#ff0000")
    assert list(palette) == ["primary", "secondary", "neutral", "success", "warning", "error", "info"]
    assert palette["primary"] == "#ff0000"
    assert palette["secondary"] in ("#ff7f00", "#ff8000")
    assert palette["neutral"] == "#a27272"
    assert palette["success"] == shades.STATUS_COLORS["success"]


def test_semantic_palette_invalid_seed():
    assert shades.generate_semantic_palette("nope") == {}
