"""
contrast.py
===========

Does: WCAG 2.x contrast math: ratio between two colors, pass/fail grid, best
      black-or-white text color, and iterative searches for an accessible
      variant of a color (fix-suggestion and shade-suggestion).
Used By: Mode transforms (high-contrast), health scoring, system audit, CLI.
Returns: Floats, A11yScore records, canonical hex strings or None.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from color_token_engine.engine.color import (
    BLACK,
    WCAG_AA,
    WCAG_AA_LARGE,
    WCAG_AAA,
    WCAG_AAA_LARGE,
    WHITE,
    RGBf,
    brighten,
    contrast_ratio,
    darken,
    parse_color,
    relative_luminance,
    to_hex,
)

__all__ = [
    "WcagLevel",
    "A11yScore",
    "get_contrast",
    "get_luminance",
    "get_accessible_text_color",
    "check_accessibility",
    "suggest_fix",
    "suggest_accessible_shade",
    "FIX_STEP",
    "FIX_MAX_STEPS",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
FIX_STEP = 0.01        # brighten/darken units per iteration
FIX_MAX_STEPS = 100    # hard iteration budget
SHADE_STEP = 0.1
SHADE_MAX_STEPS = 20

_WHITE_RGB = parse_color(WHITE)
_BLACK_RGB = parse_color(BLACK)


class WcagLevel(str, Enum):
    AA = "AA"
    AAA = "AAA"


_LEVEL_RATIO: Dict[WcagLevel, float] = {WcagLevel.AA: WCAG_AA, WcagLevel.AAA: WCAG_AAA}


@dataclass(frozen=True)
class A11yScore:
    score: float
    aa: bool
    aaa: bool
    aa_large: bool
    aaa_large: bool


# =============================================================================
# 1) RATIOS
# =============================================================================

def get_luminance(color: object) -> float:
    """Does: WCAG relative luminance; 0.0 when the color does not parse."""
    rgb = parse_color(color)
    return relative_luminance(rgb) if rgb is not None else 0.0


def get_contrast(a: object, b: object) -> float:
    """
    Does: WCAG contrast ratio between two colors (order-independent).
    Returns: 1.0–21.0, or 0.0 when either side does not parse.
    """
    rgb_a = parse_color(a)
    rgb_b = parse_color(b)
    if rgb_a is None or rgb_b is None:
        log.debug("[contrast] unparseable pair %r / %r → 0.0", a, b)
        return 0.0
    return contrast_ratio(rgb_a, rgb_b)


def get_accessible_text_color(bg: object) -> str:
    """
    Does: Pick white or black text for a background.
    Returns: WHITE only if it beats black strictly; black on ties.
    """
    return WHITE if get_contrast(bg, WHITE) > get_contrast(bg, BLACK) else BLACK


def check_accessibility(fg: object, bg: object) -> A11yScore:
    """Does: Grade a foreground/background pair against the four WCAG thresholds."""
    score = get_contrast(fg, bg)
    return A11yScore(
        score=score,
        aa=score >= WCAG_AA,
        aaa=score >= WCAG_AAA,
        aa_large=score >= WCAG_AA_LARGE,
        aaa_large=score >= WCAG_AAA_LARGE,
    )


# =============================================================================
# 2) FIX SEARCH
# =============================================================================

def _passes(candidate: str, paired: RGBf, ratio: float) -> bool:
    # judge the encoded hex, not the float color, so the returned value is what passes
    return contrast_ratio(parse_color(candidate), paired) >= ratio  # type: ignore[arg-type]


def suggest_fix(color: object, target: Union[WcagLevel, str] = WcagLevel.AA) -> Optional[str]:
    """
    Does: Treat `color` as a background, pair it with its best text color, and
          nudge it away from that text (brighten under black text, darken under
          white text) in FIX_STEP units until the target ratio is met.
    Returns: The color itself if it already passes, the first passing variant,
             or None after FIX_MAX_STEPS (or when `color` does not parse).
    """
    base = parse_color(color)
    if base is None:
        return None
    ratio = _LEVEL_RATIO[WcagLevel(target)]

    text = get_accessible_text_color(to_hex(base))
    paired = _WHITE_RGB if text == WHITE else _BLACK_RGB
    current_hex = to_hex(base)
    if _passes(current_hex, paired, ratio):
        return current_hex

    step = brighten if text == BLACK else darken
    fixed: RGBf = base
    for i in range(FIX_MAX_STEPS):
        fixed = step(fixed, FIX_STEP)
        candidate = to_hex(fixed)
        if _passes(candidate, paired, ratio):
            log.debug("[fix] %s → %s after %d steps (%s vs %s)", current_hex, candidate, i + 1, target, text)
            return candidate

    log.debug("[fix] %s did not reach %.1f against %s", current_hex, ratio, text)
    return None


def suggest_accessible_shade(base: object, bg: object, ratio: float = WCAG_AA) -> Optional[str]:
    """
    Does: Find a variant of `base` readable on `bg`: try darker first, then lighter,
          SHADE_MAX_STEPS steps of SHADE_STEP each.
    Returns: Canonical hex, or None when neither direction reaches `ratio`.
    """
    start = parse_color(base)
    back = parse_color(bg)
    if start is None or back is None:
        return None
    if contrast_ratio(start, back) >= ratio:
        return to_hex(start)

    for step in (darken, brighten):
        shifted: RGBf = start
        for _ in range(SHADE_MAX_STEPS):
            shifted = step(shifted, SHADE_STEP)
            candidate = to_hex(shifted)
            if _passes(candidate, back, ratio):
                return candidate
    return None
