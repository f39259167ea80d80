# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level wiring from seed colors to a complete token system:
      seeds → base tokens → semantic aliases → mode variants → state variants
      → health score + readability audit.
Returns:
  - build_base_tokens(seeds, scale) -> {group: [ColorToken, ...]}
  - build_token_system(seeds, ...) -> {
        "baseTokens": {group: [ {name,value,shade}, ... ]},
        "semanticTokens": [ {name,aliasTo,category,subcategory}, ... ],
        "resolved": {semantic name: hex},
        "modes": {mode: [ {name,mode,value,baseValue}, ... ]},
        "states": {semantic name: [ {name,baseToken,state,value}, ... ]},
        "health": {overallScore, metrics, summary},
        "audit": {grade, summary, avgContrast, ...},
        "invalidSeeds": [group, ...],
    }
Used by: CLI demo and host integrations that want everything in one call.
"""

import logging
from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from color_token_engine.engine.accessibility.audit import evaluate_system
from color_token_engine.engine.color import DEFAULT_SHADE_SCALE, is_valid_color
from color_token_engine.engine.general.utils.log import debug
from color_token_engine.engine.health.scoring import calculate_token_health
from color_token_engine.engine.tokens.modes import ModeAdjustments, generate_mode_tokens
from color_token_engine.engine.tokens.naming import NamingConvention, format_shade_name
from color_token_engine.engine.tokens.semantic import (
    resolve_alias,
    resolve_semantic_tokens,
    suggest_semantic_tokens,
)
from color_token_engine.engine.tokens.shades import generate_shades
from color_token_engine.engine.tokens.states import generate_state_tokens
from color_token_engine.engine.tokens.types import ColorToken, SemanticCategory, SemanticToken

logger = logging.getLogger(__name__)

__all__ = [
    "build_base_tokens",
    "build_state_layer",
    "build_token_system",
]

# Semantic categories that get interaction-state variants
STATEFUL_CATEGORIES: Tuple[SemanticCategory, ...] = (SemanticCategory.BRAND, SemanticCategory.STATE)


def build_base_tokens(
    seeds: Mapping[str, str],
    scale: Iterable[int] = DEFAULT_SHADE_SCALE,
    naming: Optional[NamingConvention] = None,
    pattern: Optional[str] = None,
) -> Dict[str, List[ColorToken]]:
    """
    Does: Expand each valid seed into a shade scale; invalid seeds are skipped
          with a warning. `naming` re-labels token names without touching keys.
    Returns: {group: [ColorToken, ...]} in seed order.
    """
    stops = tuple(scale)
    base: Dict[str, List[ColorToken]] = {}
    for group, seed in seeds.items():
        if not is_valid_color(seed):
            logger.warning("Skipping group %r: %r is not a color", group, seed)
            continue
        tokens = generate_shades(seed, group, stops)
        if naming is not None:
            tokens = [
                ColorToken(name=format_shade_name(group, t.shade, naming, pattern), value=t.value, shade=t.shade)
                for t in tokens
            ]
        base[group] = tokens
        debug(f"{group}: {len(tokens)} shades from {seed}", topic="shades")
    return base


def build_state_layer(
    semantic_tokens: List[SemanticToken],
    base_tokens: Mapping[str, List[ColorToken]],
) -> Dict[str, List[Dict[str, Any]]]:
    """Does: Generate interaction states for brand and state semantic tokens."""
    layer: Dict[str, List[Dict[str, Any]]] = {}
    for tok in semantic_tokens:
        if tok.category not in STATEFUL_CATEGORIES:
            continue
        value = resolve_alias(tok, base_tokens)
        if value is None:
            continue
        source = ColorToken(name=tok.name, value=value, shade=tok.target[1])  # type: ignore[index]
        layer[tok.name] = [s.to_dict() for s in generate_state_tokens(source, tok.name)]
    return layer


def build_token_system(
    seeds: Mapping[str, str],
    *,
    scale: Iterable[int] = DEFAULT_SHADE_SCALE,
    reference_background: Optional[str] = None,
    adjustments: Optional[ModeAdjustments] = None,
    usage_data: Optional[Mapping[str, int]] = None,
    naming: Optional[NamingConvention] = None,
    naming_pattern: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Does: Run the whole derivation for a set of seeds and return a JSON-ready dict.
    Returns: See module docstring. Never raises for bad seeds; they are listed
             under "invalidSeeds".
    """
    base = build_base_tokens(seeds, scale, naming, naming_pattern)
    invalid = [g for g in seeds if g not in base]

    semantic = suggest_semantic_tokens(base)
    debug(f"{len(semantic)} semantic tokens", topic="semantic")

    modes = generate_mode_tokens(base, reference_background, adjustments)
    debug(f"modes: { {m: len(v) for m, v in modes.items()} }", topic="modes")

    health = calculate_token_health(base, semantic, usage_data)
    debug(f"health {health.overall_score}: {health.summary}", topic="health")

    audit = evaluate_system(base)

    return {
        "baseTokens": {g: [t.to_dict() for t in ts] for g, ts in base.items()},
        "semanticTokens": [t.to_dict() for t in semantic],
        "resolved": resolve_semantic_tokens(semantic, base),
        "modes": {m: [t.to_dict() for t in ts] for m, ts in modes.items()},
        "states": build_state_layer(semantic, base),
        "health": health.to_dict(),
        "audit": asdict(audit),
        "invalidSeeds": invalid,
    }
