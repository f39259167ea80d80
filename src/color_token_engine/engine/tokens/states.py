"""
states.py
=========

Does: Derive interaction-state variants (default/hover/active/disabled/focus)
      from one base token using Lab lightness and LCh chroma steps.
Used By: Orchestrator (component state layer), CLI.
Returns: list[StateToken] in InteractionState order.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List

from color_token_engine.engine.color import (
    RGBf,
    brighten,
    darken,
    desaturate,
    parse_color,
    saturate,
    to_hex,
)
from color_token_engine.engine.tokens.types import ColorToken, InteractionState, StateToken

__all__ = ["STATE_TRANSFORMS", "generate_state_tokens"]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Per-state recipes (amounts in brighten/darken/saturate units) ────────────
STATE_TRANSFORMS: Dict[InteractionState, Callable[[RGBf], RGBf]] = {
    InteractionState.DEFAULT: lambda c: c,
    InteractionState.HOVER: lambda c: saturate(darken(c, 0.1), 0.1),
    InteractionState.ACTIVE: lambda c: darken(c, 0.2),
    InteractionState.DISABLED: lambda c: brighten(desaturate(c, 0.5), 0.2),
    InteractionState.FOCUS: lambda c: brighten(c, 0.1),
}


def generate_state_tokens(token: ColorToken, base_name: str) -> List[StateToken]:
    """
    Does: Apply every STATE_TRANSFORMS recipe to `token.value`.
    Returns: Tokens named '<base_name>.<state>'; [] when the token value is not a color.
    """
    base = parse_color(token.value)
    if base is None:
        log.debug("[states] invalid base value %r for %r → []", token.value, base_name)
        return []

    return [
        StateToken(
            name=f"{base_name}.{state.value}",
            base_token=base_name,
            state=state,
            value=to_hex(transform(base)),
        )
        for state, transform in STATE_TRANSFORMS.items()
    ]
