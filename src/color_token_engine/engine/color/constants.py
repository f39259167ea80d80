"""
constants.py
============

Does: Centralize the engine's fixed color tables: default shade scale, mix
      ratios, WCAG thresholds, reference colors, and CVD simulation matrices.
Used By: Shade generation, contrast evaluation, mode transforms, health scoring.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

__all__ = [
    "DEFAULT_SHADE_SCALE",
    "BASE_SHADE",
    "LIGHTEN_RATIO",
    "DARKEN_RATIO",
    "WHITE",
    "BLACK",
    "GRAY",
    "WCAG_AA",
    "WCAG_AAA",
    "WCAG_AA_LARGE",
    "WCAG_AAA_LARGE",
    "LAB_KN",
    "CVD_MATRICES",
]

__docformat__ = "google"

# ── Shade scale ──────────────────────────────────────────────────────────────
DEFAULT_SHADE_SCALE: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
BASE_SHADE = 500

# Toward white for stops < 500, toward black for stops > 500. Kept asymmetric so
# the extreme stops never collapse into pure white/black.
LIGHTEN_RATIO = 0.9
DARKEN_RATIO = 0.8

# ── Reference colors ─────────────────────────────────────────────────────────
WHITE = "#ffffff"
BLACK = "#000000"
GRAY = "#808080"

# ── WCAG 2.x thresholds ──────────────────────────────────────────────────────
WCAG_AA = 4.5
WCAG_AAA = 7.0
WCAG_AA_LARGE = 3.0
WCAG_AAA_LARGE = 4.5

# Lab lightness per brighten/darken unit
LAB_KN = 18.0

# ── Color-vision deficiency matrices (row-major, applied to 0–255 sRGB) ──────
Matrix3 = Tuple[Tuple[float, float, float], Tuple[float, float, float], Tuple[float, float, float]]

CVD_MATRICES: Mapping[str, Matrix3] = MappingProxyType(
    {
        "protanopia": (
            (0.567, 0.433, 0.0),
            (0.558, 0.442, 0.0),
            (0.0, 0.242, 0.758),
        ),
        "deuteranopia": (
            (0.625, 0.375, 0.0),
            (0.7, 0.3, 0.0),
            (0.0, 0.3, 0.7),
        ),
        "tritanopia": (
            (0.95, 0.05, 0.0),
            (0.0, 0.433, 0.567),
            (0.0, 0.475, 0.525),
        ),
    }
)
