"""
parsing.py
==========

Does: Turn user-supplied color strings (hex, CSS names, xkcd names, rgb tuples)
      into validated RGB triples and canonical lowercase hex.
Used By: Every engine entry point that accepts a seed or reference color.
Returns: RGB (tuple[int,int,int]) or None; canonical '#rrggbb' or None.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Dict, Optional, Tuple, Union

import webcolors

__all__ = [
    "RGB",
    "ColorInput",
    "parse_color",
    "normalize_hex",
    "is_valid_color",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = Tuple[int, int, int]
ColorInput = Union[str, Tuple[int, int, int]]

_HEX_RE = re.compile(r"#?(?:[0-9a-f]{3}|[0-9a-f]{6})")

_RGB_PATTERNS = [
    r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$",
    r"^\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$",
    r"^\[\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\]$",
]


def _in_range(rgb: Tuple[int, ...]) -> bool:
    return len(rgb) == 3 and all(0 <= v <= 255 for v in rgb)


@lru_cache(maxsize=1)
def _xkcd_map() -> Dict[str, str]:
    """Does: Load matplotlib's XKCD survey colors as {name: hex} (lazy import)."""
    from matplotlib.colors import XKCD_COLORS

    return {k.replace("xkcd:", ""): v for k, v in XKCD_COLORS.items()}


@lru_cache(maxsize=1)
def _css4_map() -> Dict[str, str]:
    """Does: Load matplotlib's CSS4 named colors keyed by squashed name (no spaces/hyphens)."""
    from matplotlib.colors import CSS4_COLORS

    return {k.lower(): v for k, v in CSS4_COLORS.items()}


def _parse_rgb_string(text: str) -> Optional[RGB]:
    for pat in _RGB_PATTERNS:
        m = re.match(pat, text)
        if m:
            rgb = tuple(map(int, m.groups()))
            if _in_range(rgb):
                return rgb  # type: ignore[return-value]
            log.debug("[❌ OUT-OF-RANGE] RGB out of bounds: %s", rgb)
            return None
    return None


def parse_color(value: object) -> Optional[RGB]:
    """
    Does: Parse hex ('#3b82f6', '3b82f6', '#fff'), CSS names ('rebeccapurple'),
          'xkcd:<name>' and 'rgb(r, g, b)' strings, or an int triple.
    Returns: RGB triple, or None when the value is not a color.
    """
    if isinstance(value, tuple):
        if all(isinstance(v, int) and not isinstance(v, bool) for v in value) and _in_range(value):
            return value  # type: ignore[return-value]
        return None
    if not isinstance(value, str):
        return None

    text = value.strip().lower()
    if not text:
        return None

    if _HEX_RE.fullmatch(text):
        hx = webcolors.normalize_hex(text if text.startswith("#") else f"#{text}")
        return tuple(webcolors.hex_to_rgb(hx))  # type: ignore[return-value]

    if text.startswith("xkcd:"):
        hx = _xkcd_map().get(text[5:].strip())
        if hx is None:
            log.debug("[🕵️ NOT FOUND] %r not in XKCD colors", value)
            return None
        return tuple(webcolors.hex_to_rgb(hx))  # type: ignore[return-value]

    if text.startswith(("rgb", "(", "[")):
        return _parse_rgb_string(text)

    hx = _css4_map().get(re.sub(r"[\s\-_]+", "", text))
    if hx is None:
        log.debug("[❌ PARSE FAIL] Not a color: %r", value)
        return None
    return tuple(webcolors.hex_to_rgb(hx))  # type: ignore[return-value]


def normalize_hex(value: object) -> Optional[str]:
    """Does: Canonicalize any parseable color to lowercase '#rrggbb'."""
    rgb = parse_color(value)
    return webcolors.rgb_to_hex(rgb) if rgb is not None else None


def is_valid_color(value: object) -> bool:
    """Does: Tell whether a value parses as an sRGB color."""
    return parse_color(value) is not None
