"""
tokens.
======

Does: Token records and derivations: tonal shade scales, semantic aliases,
      light/dark/high-contrast modes, interaction states, naming, presets.
Used By: Orchestrator, health scoring, versioning, CLI.
"""

from .modes import ModeAdjustments, apply_adjustments, generate_mode_token, generate_mode_tokens
from .naming import NamingConvention, format_shade_name
from .presets import TokenPreset, generate_preset_tokens, get_preset, load_presets
from .semantic import (
    SEMANTIC_PATTERNS,
    SEMANTIC_RULES,
    resolve_alias,
    resolve_semantic_tokens,
    suggest_semantic_tokens,
    validate_alias,
)
from .shades import generate_semantic_palette, generate_shades
from .states import generate_state_tokens
from .types import (
    AliasError,
    AliasValidation,
    BaseTokens,
    ColorMode,
    ColorToken,
    InteractionState,
    ModeToken,
    SemanticCategory,
    SemanticToken,
    StateToken,
    parse_token_key,
    token_key,
)

__all__ = [
    # types
    "ColorToken",
    "BaseTokens",
    "SemanticCategory",
    "SemanticToken",
    "ColorMode",
    "ModeToken",
    "InteractionState",
    "StateToken",
    "AliasError",
    "AliasValidation",
    "token_key",
    "parse_token_key",
    # shades
    "generate_shades",
    "generate_semantic_palette",
    # semantic
    "SEMANTIC_RULES",
    "SEMANTIC_PATTERNS",
    "suggest_semantic_tokens",
    "validate_alias",
    "resolve_alias",
    "resolve_semantic_tokens",
    # states
    "generate_state_tokens",
    # modes
    "ModeAdjustments",
    "generate_mode_token",
    "apply_adjustments",
    "generate_mode_tokens",
    # naming
    "NamingConvention",
    "format_shade_name",
    # presets
    "TokenPreset",
    "load_presets",
    "get_preset",
    "generate_preset_tokens",
]
