"""
space.py
========

Does: Color-space math on float sRGB triples (0–255): WCAG luminance and
      contrast, HSL and Lab/LCh round-trips, linear RGB mixing, and the
      Lab-based brighten/darken/saturate operators used across the engine.
Used By: Shades, modes, state tokens, contrast, blindness, health.
Returns: Floats, float triples, or canonical '#rrggbb' strings.
"""

from __future__ import annotations

import colorsys
import math
from functools import lru_cache
from typing import Tuple

import webcolors

from color_token_engine.engine.color.constants import LAB_KN

__all__ = [
    "RGBf",
    "to_hex",
    "relative_luminance",
    "contrast_ratio",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "mix_rgb",
    "mix_lrgb",
    "rgb_to_lab",
    "lab_to_rgb",
    "darken",
    "brighten",
    "saturate",
    "desaturate",
]

__docformat__ = "google"

# ── Types ─────────────────────────────────────────────────────────────────────
RGBf = Tuple[float, float, float]

# D65 reference white
_XN, _YN, _ZN = 0.950470, 1.0, 1.088830
_T0 = 4 / 29
_T1 = 6 / 29
_T2 = 3 * _T1 * _T1
_T3 = _T1 ** 3


def _clamp(v: float, lo: float = 0.0, hi: float = 255.0) -> float:
    return lo if v < lo else hi if v > hi else v


def _clip(rgb: RGBf) -> RGBf:
    return (_clamp(rgb[0]), _clamp(rgb[1]), _clamp(rgb[2]))


def to_hex(rgb: RGBf) -> str:
    """Does: Clamp to [0,255], round half up, and encode as lowercase '#rrggbb'."""
    ints = tuple(int(math.floor(_clamp(c) + 0.5)) for c in rgb)
    return webcolors.rgb_to_hex(ints)


# =============================================================================
# 1) WCAG LUMINANCE / CONTRAST
# =============================================================================

def _channel_luminance(c: float) -> float:
    c = c / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGBf) -> float:
    """Does: WCAG 2.x relative luminance in [0, 1]."""
    r, g, b = _clip(rgb)
    return (
        0.2126 * _channel_luminance(r)
        + 0.7152 * _channel_luminance(g)
        + 0.0722 * _channel_luminance(b)
    )


def contrast_ratio(rgb1: RGBf, rgb2: RGBf) -> float:
    """Does: WCAG contrast ratio (1..21), symmetric in its arguments."""
    l1 = relative_luminance(rgb1)
    l2 = relative_luminance(rgb2)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


# =============================================================================
# 2) HSL
# =============================================================================

def rgb_to_hsl(rgb: RGBf) -> Tuple[float, float, float]:
    """Does: Convert to (hue degrees [0,360), saturation [0,1], lightness [0,1])."""
    r, g, b = (c / 255.0 for c in _clip(rgb))
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return h * 360.0, s, l


def hsl_to_rgb(h: float, s: float, l: float) -> RGBf:
    """Does: Convert HSL (hue wraps, s/l clamped to [0,1]) back to float sRGB."""
    s = min(1.0, max(0.0, s))
    l = min(1.0, max(0.0, l))
    r, g, b = colorsys.hls_to_rgb((h % 360.0) / 360.0, l, s)
    return r * 255.0, g * 255.0, b * 255.0


# =============================================================================
# 3) MIXING
# =============================================================================

def mix_rgb(a: RGBf, b: RGBf, ratio: float) -> RGBf:
    """Does: Linear per-channel sRGB interpolation; ratio 0 → a, 1 → b."""
    return (
        a[0] + ratio * (b[0] - a[0]),
        a[1] + ratio * (b[1] - a[1]),
        a[2] + ratio * (b[2] - a[2]),
    )


def mix_lrgb(a: RGBf, b: RGBf, ratio: float) -> RGBf:
    """Does: Interpolate squared channels (energy-preserving mix), then take the root."""
    return tuple(  # type: ignore[return-value]
        math.sqrt(x * x * (1 - ratio) + y * y * ratio) for x, y in zip(a, b)
    )


# =============================================================================
# 4) LAB / LCH
# =============================================================================

def _rgb_xyz(c: float) -> float:
    c = c / 255.0
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def _xyz_lab(t: float) -> float:
    return t ** (1 / 3) if t > _T3 else t / _T2 + _T0


def _lab_xyz(t: float) -> float:
    return t ** 3 if t > _T1 else _T2 * (t - _T0)


def _xyz_rgb(c: float) -> float:
    return 255.0 * (12.92 * c if c <= 0.00304 else 1.055 * c ** (1 / 2.4) - 0.055)


@lru_cache(maxsize=4096)
def rgb_to_lab(rgb: RGBf) -> Tuple[float, float, float]:
    """Does: sRGB → CIE L*a*b* (D65)."""
    r, g, b = (_rgb_xyz(c) for c in _clip(rgb))
    x = _xyz_lab((0.4124564 * r + 0.3575761 * g + 0.1804375 * b) / _XN)
    y = _xyz_lab((0.2126729 * r + 0.7151522 * g + 0.0721750 * b) / _YN)
    z = _xyz_lab((0.0193339 * r + 0.1191920 * g + 0.9503041 * b) / _ZN)
    L = 116 * y - 16
    return (L if L > 0 else 0.0), 500 * (x - y), 200 * (y - z)


def lab_to_rgb(L: float, a: float, b: float) -> RGBf:
    """Does: CIE L*a*b* (D65) → sRGB, clipped into gamut."""
    y = (L + 16) / 116
    x = y + a / 500
    z = y - b / 200
    x = _XN * _lab_xyz(x)
    y = _YN * _lab_xyz(y)
    z = _ZN * _lab_xyz(z)
    return _clip(
        (
            _xyz_rgb(3.2404542 * x - 1.5371385 * y - 0.4985314 * z),
            _xyz_rgb(-0.9692660 * x + 1.8760108 * y + 0.0415560 * z),
            _xyz_rgb(0.0556434 * x - 0.2040259 * y + 1.0572252 * z),
        )
    )


def darken(rgb: RGBf, amount: float = 1.0) -> RGBf:
    """Does: Lower Lab lightness by LAB_KN * amount."""
    L, a, b = rgb_to_lab(rgb)
    return lab_to_rgb(L - LAB_KN * amount, a, b)


def brighten(rgb: RGBf, amount: float = 1.0) -> RGBf:
    """Does: Raise Lab lightness by LAB_KN * amount."""
    return darken(rgb, -amount)


def saturate(rgb: RGBf, amount: float = 1.0) -> RGBf:
    """Does: Raise LCh chroma by LAB_KN * amount (floored at 0), hue kept."""
    L, a, b = rgb_to_lab(rgb)
    c = math.hypot(a, b)
    h = math.atan2(b, a)
    c = max(0.0, c + LAB_KN * amount)
    return lab_to_rgb(L, c * math.cos(h), c * math.sin(h))


def desaturate(rgb: RGBf, amount: float = 1.0) -> RGBf:
    """Does: Lower LCh chroma by LAB_KN * amount."""
    return saturate(rgb, -amount)
