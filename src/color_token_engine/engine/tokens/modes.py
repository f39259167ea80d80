"""
modes.py
========

Does: Derive light / dark / high-contrast variants of base tokens. Dark mode
      inverts luminance while keeping hue; high-contrast pushes lightness away
      from the middle until AAA is plausible against a reference background.
      Optional ModeAdjustments apply a dark-mode HSL shift and a high-contrast
      lightness multiplier on top.
Used By: Orchestrator, CLI.
Returns: ModeToken, or {mode: [ModeToken, ...]} for a whole base-token map.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Union

from color_token_engine.engine.accessibility.contrast import get_contrast
from color_token_engine.engine.color import (
    WCAG_AAA,
    WHITE,
    RGBf,
    hsl_to_rgb,
    parse_color,
    relative_luminance,
    rgb_to_hsl,
    to_hex,
)
from color_token_engine.engine.tokens.types import (
    BaseTokens,
    ColorMode,
    ColorToken,
    ModeToken,
    token_key,
)

__all__ = [
    "ModeAdjustments",
    "generate_mode_token",
    "apply_adjustments",
    "generate_mode_tokens",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
DARK_FROM_LIGHT_BASE = 0.15
DARK_FROM_LIGHT_SPAN = 0.2
DARK_FROM_LIGHT_SAT = 1.2
LIGHT_FROM_DARK_BASE = 0.7
LIGHT_FROM_DARK_SPAN = 0.3
LIGHT_FROM_DARK_SAT = 0.9
HC_LIGHTNESS_PUSH = 0.3
HC_LIGHTNESS_MAX = 0.95
HC_LIGHTNESS_MIN = 0.05
HC_SAT_BOOST = 1.2


@dataclass(frozen=True)
class ModeAdjustments:
    """Post-processing knobs for the multi-mode batch.

    ``hue_shift_degrees``, ``saturation_shift_percent`` and
    ``lightness_shift_percent`` shift dark-mode outputs only;
    ``contrast_multiplier`` scales high-contrast lightness away from 0.5.
    """

    hue_shift_degrees: float = 0.0
    saturation_shift_percent: float = 0.0
    lightness_shift_percent: float = 0.0
    contrast_multiplier: float = 1.0

    def __post_init__(self) -> None:
        for field_name in (
            "hue_shift_degrees",
            "saturation_shift_percent",
            "lightness_shift_percent",
            "contrast_multiplier",
        ):
            value = getattr(self, field_name)
            if not isinstance(value, (int, float)) or isinstance(value, bool) or not math.isfinite(value):
                raise ValueError(f"{field_name} must be a finite number, got {value!r}")
        if not -360.0 <= self.hue_shift_degrees <= 360.0:
            raise ValueError(f"hue_shift_degrees out of range [-360, 360]: {self.hue_shift_degrees}")
        for field_name in ("saturation_shift_percent", "lightness_shift_percent"):
            value = getattr(self, field_name)
            if not -100.0 <= value <= 100.0:
                raise ValueError(f"{field_name} out of range [-100, 100]: {value}")
        if self.contrast_multiplier < 1.0:
            raise ValueError(f"contrast_multiplier must be >= 1.0, got {self.contrast_multiplier}")

    @property
    def has_dark_shift(self) -> bool:
        return any((self.hue_shift_degrees, self.saturation_shift_percent, self.lightness_shift_percent))

    @property
    def has_contrast_boost(self) -> bool:
        return self.contrast_multiplier != 1.0


# =============================================================================
# 1) SINGLE TOKEN
# =============================================================================

def _dark_variant(rgb: RGBf) -> RGBf:
    h, s, _ = rgb_to_hsl(rgb)
    lum = relative_luminance(rgb)
    if lum > 0.5:
        return hsl_to_rgb(h, min(1.0, s * DARK_FROM_LIGHT_SAT), DARK_FROM_LIGHT_BASE + lum * DARK_FROM_LIGHT_SPAN)
    return hsl_to_rgb(h, max(0.0, s * LIGHT_FROM_DARK_SAT), LIGHT_FROM_DARK_BASE + lum * LIGHT_FROM_DARK_SPAN)


def _high_contrast_variant(rgb: RGBf, background: object) -> RGBf:
    if get_contrast(to_hex(rgb), background) >= WCAG_AAA:
        return rgb
    h, s, _ = rgb_to_hsl(rgb)
    lum = relative_luminance(rgb)
    if lum > 0.5:
        return hsl_to_rgb(h, s, min(HC_LIGHTNESS_MAX, lum + HC_LIGHTNESS_PUSH))
    return hsl_to_rgb(h, min(1.0, s * HC_SAT_BOOST), max(HC_LIGHTNESS_MIN, lum - HC_LIGHTNESS_PUSH))


def generate_mode_token(
    token: ColorToken,
    name: str,
    mode: Union[ColorMode, str],
    reference_background: Optional[str] = None,
) -> ModeToken:
    """
    Does: Derive one mode variant of a base token.
          - light: identity
          - dark: luminance-inverting, hue-preserving HSL remap
          - high-contrast: lightness pushed ±0.3 when below 7:1 against
            `reference_background` (default white), else unchanged
    Returns: ModeToken with `base_value` = the token's own value. An
             unparseable token value is carried through unchanged.
    """
    mode = ColorMode(mode)
    rgb = parse_color(token.value)
    if rgb is None or mode is ColorMode.LIGHT:
        return ModeToken(name=name, mode=mode, value=token.value, base_value=token.value)

    if mode is ColorMode.DARK:
        out = _dark_variant(rgb)
    else:
        bg = reference_background if parse_color(reference_background) is not None else WHITE
        out = _high_contrast_variant(rgb, bg)

    return ModeToken(name=name, mode=mode, value=to_hex(out), base_value=token.value)


# =============================================================================
# 2) POST-PROCESSING
# =============================================================================

def apply_adjustments(token: ModeToken, adjustments: ModeAdjustments) -> ModeToken:
    """
    Does: Dark tokens get the uniform HSL shift; high-contrast tokens get the
          lightness multiplier (l*m above 0.5, l/m at or below, clamped to [0, 1]).
    Returns: A new ModeToken (light tokens and no-op adjustments pass through).
    """
    rgb = parse_color(token.value)
    if rgb is None:
        return token

    if token.mode is ColorMode.DARK and adjustments.has_dark_shift:
        h, s, l = rgb_to_hsl(rgb)
        out = hsl_to_rgb(
            h + adjustments.hue_shift_degrees,
            max(0.0, min(1.0, s + adjustments.saturation_shift_percent / 100)),
            max(0.0, min(1.0, l + adjustments.lightness_shift_percent / 100)),
        )
    elif token.mode is ColorMode.HIGH_CONTRAST and adjustments.has_contrast_boost:
        h, s, l = rgb_to_hsl(rgb)
        m = adjustments.contrast_multiplier
        out = hsl_to_rgb(h, s, min(1.0, l * m) if l > 0.5 else max(0.0, l / m))
    else:
        return token

    return ModeToken(name=token.name, mode=token.mode, value=to_hex(out), base_value=token.base_value)


# =============================================================================
# 3) BATCH
# =============================================================================

def generate_mode_tokens(
    base_tokens: BaseTokens,
    reference_background: Optional[str] = None,
    adjustments: Optional[ModeAdjustments] = None,
    modes: Iterable[Union[ColorMode, str]] = tuple(ColorMode),
) -> Dict[str, List[ModeToken]]:
    """
    Does: Derive every requested mode for every base token ('<group>/<shade>' names)
          and apply optional post-processing.
    Returns: {mode value: [ModeToken, ...]} in base-token order.
    """
    wanted = [ColorMode(m) for m in modes]
    out: Dict[str, List[ModeToken]] = {m.value: [] for m in wanted}
    for group, tokens in base_tokens.items():
        for token in tokens:
            name = token_key(group, token.shade)
            for mode in wanted:
                mode_token = generate_mode_token(token, name, mode, reference_background)
                if adjustments is not None:
                    mode_token = apply_adjustments(mode_token, adjustments)
                out[mode.value].append(mode_token)
    log.debug("[modes] %s", {k: len(v) for k, v in out.items()})
    return out
