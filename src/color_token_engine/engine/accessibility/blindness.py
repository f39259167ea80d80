"""
blindness.py
============

Does: Approximate how a color looks under protanopia, deuteranopia, or
      tritanopia with a fixed 3×3 matrix on 0–255 sRGB channels.
Used By: Contrast tooling, palette previews, CLI.
Returns: Canonical hex (or the input unchanged for 'none' / unparseable input).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Union

from color_token_engine.engine.color import CVD_MATRICES, parse_color, to_hex

__all__ = ["BlindnessType", "simulate_color_blindness", "simulate_palette"]

__docformat__ = "google"

log = logging.getLogger(__name__)


class BlindnessType(str, Enum):
    NONE = "none"
    PROTANOPIA = "protanopia"
    DEUTERANOPIA = "deuteranopia"
    TRITANOPIA = "tritanopia"


def simulate_color_blindness(color: str, kind: Union[BlindnessType, str]) -> str:
    """
    Does: out[i] = r*M[i][0] + g*M[i][1] + b*M[i][2], clamped and hex-encoded.
    Returns: Simulated hex; `color` untouched when kind is 'none' or it does not parse.
    """
    kind = BlindnessType(kind)
    if kind is BlindnessType.NONE:
        return color

    rgb = parse_color(color)
    if rgb is None:
        log.debug("[cvd] unparseable %r passed through", color)
        return color

    r, g, b = rgb
    m = CVD_MATRICES[kind.value]
    return to_hex(tuple(r * row[0] + g * row[1] + b * row[2] for row in m))  # type: ignore[arg-type]


def simulate_palette(colors: List[str]) -> Dict[str, List[str]]:
    """Does: Run every deficiency over a palette, keyed by BlindnessType value."""
    return {
        kind.value: [simulate_color_blindness(c, kind) for c in colors]
        for kind in BlindnessType
    }
