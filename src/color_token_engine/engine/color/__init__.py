"""
color.
=====

Does: Aggregate the color primitives shared across the engine: fixed tables,
      parsing/normalization, and color-space math.
Used By: Shade generation, semantic/mode/state derivation, accessibility, health.
Returns: Pure data and pure functions; no side effects.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    BASE_SHADE,
    BLACK,
    CVD_MATRICES,
    DARKEN_RATIO,
    DEFAULT_SHADE_SCALE,
    GRAY,
    LAB_KN,
    LIGHTEN_RATIO,
    WCAG_AA,
    WCAG_AA_LARGE,
    WCAG_AAA,
    WCAG_AAA_LARGE,
    WHITE,
)

# ── Parsing ──────────────────────────────────────────────────────────────────
from .parsing import RGB, is_valid_color, normalize_hex, parse_color

# ── Color space ──────────────────────────────────────────────────────────────
from .space import (
    RGBf,
    brighten,
    contrast_ratio,
    darken,
    desaturate,
    hsl_to_rgb,
    lab_to_rgb,
    mix_lrgb,
    mix_rgb,
    relative_luminance,
    rgb_to_hsl,
    rgb_to_lab,
    saturate,
    to_hex,
)

__all__ = [
    # constants
    "DEFAULT_SHADE_SCALE",
    "BASE_SHADE",
    "LIGHTEN_RATIO",
    "DARKEN_RATIO",
    "WHITE",
    "BLACK",
    "GRAY",
    "LAB_KN",
    "WCAG_AA",
    "WCAG_AAA",
    "WCAG_AA_LARGE",
    "WCAG_AAA_LARGE",
    "CVD_MATRICES",
    # parsing
    "RGB",
    "parse_color",
    "normalize_hex",
    "is_valid_color",
    # space
    "RGBf",
    "to_hex",
    "relative_luminance",
    "contrast_ratio",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_lab",
    "lab_to_rgb",
    "mix_rgb",
    "mix_lrgb",
    "darken",
    "brighten",
    "saturate",
    "desaturate",
]
