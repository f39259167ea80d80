"""
shades.py
=========

Does: Derive a tonal scale (50…950) from one seed color by linear sRGB mixing
      toward white/black, and sketch a starter semantic palette from one seed.
Used By: Orchestrator, presets, CLI, and every consumer of base tokens.
Returns: list[ColorToken] sorted by shade; dict[str, str] group → hex.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from color_token_engine.engine.color import (
    BASE_SHADE,
    BLACK,
    DARKEN_RATIO,
    DEFAULT_SHADE_SCALE,
    GRAY,
    LIGHTEN_RATIO,
    WHITE,
    hsl_to_rgb,
    mix_lrgb,
    mix_rgb,
    parse_color,
    rgb_to_hsl,
    to_hex,
)
from color_token_engine.engine.tokens.types import ColorToken

__all__ = [
    "generate_shades",
    "shade_mix_ratio",
    "generate_semantic_palette",
    "STATUS_COLORS",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

_WHITE_RGB = parse_color(WHITE)
_BLACK_RGB = parse_color(BLACK)
_GRAY_RGB = parse_color(GRAY)

# Fixed status hues used by the starter palette
STATUS_COLORS: Dict[str, str] = {
    "success": "#22c55e",
    "warning": "#eab308",
    "error": "#ef4444",
    "info": "#3b82f6",
}

SECONDARY_HUE_SHIFT = 30.0
NEUTRAL_GRAY_RATIO = 0.8


def shade_mix_ratio(shade: int) -> float:
    """
    Does: Mix ratio for one stop: toward white below 500, toward black above.
    Returns: 0.0 at 500; positive ratio otherwise (direction implied by the stop).
    """
    if shade == BASE_SHADE:
        return 0.0
    if shade < BASE_SHADE:
        return ((BASE_SHADE - shade) / BASE_SHADE) * LIGHTEN_RATIO
    return ((shade - BASE_SHADE) / BASE_SHADE) * DARKEN_RATIO


def generate_shades(
    seed: object,
    name: str,
    scale: Iterable[int] = DEFAULT_SHADE_SCALE,
) -> List[ColorToken]:
    """
    Does: Build one ColorToken per stop of `scale` (sorted ascending, not deduped).
          The 500 stop is the seed itself, canonicalized to lowercase hex.
    Returns: Tokens named '<name>-<shade>'; [] when the seed is not a color
             (use `is_valid_color` to tell that apart from an empty scale).
    """
    base = parse_color(seed)
    if base is None:
        log.debug("[shades] invalid seed %r for %r → []", seed, name)
        return []

    tokens: List[ColorToken] = []
    for shade in sorted(scale):
        ratio = shade_mix_ratio(shade)
        if shade == BASE_SHADE:
            rgb = base
        elif shade < BASE_SHADE:
            rgb = mix_rgb(base, _WHITE_RGB, ratio)
        else:
            rgb = mix_rgb(base, _BLACK_RGB, ratio)
        tokens.append(ColorToken(name=f"{name}-{shade}", value=to_hex(rgb), shade=shade))

    log.debug("[shades] %s: %d stops from %s", name, len(tokens), tokens[0].value if tokens else None)
    return tokens


def generate_semantic_palette(seed: object) -> Dict[str, str]:
    """
    Does: Sketch a full palette from one brand color: primary (seed), secondary
          (hue +30°), neutral (seed pulled 80% toward gray), fixed status hues.
    Returns: {group: hex}; {} when the seed is not a color.
    """
    base = parse_color(seed)
    if base is None:
        return {}

    h, s, l = rgb_to_hsl(base)
    palette = {
        "primary": to_hex(base),
        "secondary": to_hex(hsl_to_rgb(h + SECONDARY_HUE_SHIFT, s, l)),
        "neutral": to_hex(mix_lrgb(base, _GRAY_RGB, NEUTRAL_GRAY_RATIO)),
    }
    palette.update(STATUS_COLORS)
    return palette
