"""
semantic.py
===========

Does: Map base tokens onto semantic roles (brand/text/bg/border/state) through a
      fixed rule table, validate '<group>/<shade>' alias references, and resolve
      aliases lazily against a base-token map.
Used By: Orchestrator, health scoring (semantic coverage), presets.
Returns: list[SemanticToken], AliasValidation, resolved hex values.
"""

from __future__ import annotations

import logging
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from color_token_engine.engine.tokens.types import (
    AliasError,
    AliasValidation,
    BaseTokens,
    ColorToken,
    SemanticCategory,
    SemanticToken,
    token_key,
)

__all__ = [
    "SemanticRule",
    "SEMANTIC_RULES",
    "SEMANTIC_PATTERNS",
    "suggest_semantic_tokens",
    "validate_alias",
    "resolve_alias",
    "resolve_semantic_tokens",
]

__docformat__ = "google"

log = logging.getLogger(__name__)


class SemanticRule(NamedTuple):
    category: SemanticCategory
    subcategory: str
    group: str
    shade: int

    @property
    def name(self) -> str:
        return f"color.{self.category.value}.{self.subcategory}"


_B, _T, _G, _O, _S = (
    SemanticCategory.BRAND,
    SemanticCategory.TEXT,
    SemanticCategory.BG,
    SemanticCategory.BORDER,
    SemanticCategory.STATE,
)

# ── Rule table (order is the output order) ───────────────────────────────────
SEMANTIC_RULES: Tuple[SemanticRule, ...] = (
    SemanticRule(_B, "primary", "primary", 500),
    SemanticRule(_B, "secondary", "secondary", 500),
    SemanticRule(_T, "primary", "neutral", 900),
    SemanticRule(_T, "secondary", "neutral", 700),
    SemanticRule(_T, "tertiary", "neutral", 500),
    SemanticRule(_T, "disabled", "neutral", 300),
    SemanticRule(_G, "surface", "neutral", 50),
    SemanticRule(_G, "elevated", "neutral", 100),
    SemanticRule(_G, "overlay", "neutral", 200),
    SemanticRule(_O, "subtle", "neutral", 200),
    SemanticRule(_O, "default", "neutral", 300),
    SemanticRule(_O, "strong", "neutral", 400),
    SemanticRule(_S, "success", "success", 500),
    SemanticRule(_S, "error", "error", 500),
    SemanticRule(_S, "warning", "warning", 500),
    SemanticRule(_S, "info", "info", 500),
)

# Vocabulary of known subcategories per category
SEMANTIC_PATTERNS: Dict[SemanticCategory, Tuple[str, ...]] = {
    _B: ("primary", "secondary", "accent"),
    _T: ("primary", "secondary", "tertiary", "disabled", "inverse"),
    _G: ("surface", "elevated", "overlay", "base"),
    _O: ("subtle", "default", "strong", "focus"),
    _S: ("success", "error", "warning", "info", "neutral"),
}


def _find_shade(tokens: Optional[Sequence[ColorToken]], shade: int) -> Optional[ColorToken]:
    for t in tokens or ():
        if t.shade == shade:
            return t
    return None


# =============================================================================
# 1) SUGGESTION
# =============================================================================

def suggest_semantic_tokens(base_tokens: BaseTokens) -> List[SemanticToken]:
    """
    Does: Apply SEMANTIC_RULES; emit a token only when its (group, shade) exists.
    Returns: Semantic tokens in rule-table order (missing targets silently skipped).
    """
    suggestions: List[SemanticToken] = []
    for rule in SEMANTIC_RULES:
        if _find_shade(base_tokens.get(rule.group), rule.shade) is None:
            log.debug("[semantic] skip %s → %s (absent)", rule.name, token_key(rule.group, rule.shade))
            continue
        suggestions.append(
            SemanticToken(
                name=rule.name,
                alias_to=token_key(rule.group, rule.shade),
                category=rule.category,
                subcategory=rule.subcategory,
            )
        )
    return suggestions


# =============================================================================
# 2) VALIDATION
# =============================================================================

def validate_alias(token: SemanticToken, base_tokens: BaseTokens) -> AliasValidation:
    """
    Does: Check that `token.alias_to` is exactly '<group>/<shade>' and points at
          an existing base token. No side effects.
    Returns: AliasValidation(valid=True) or a failure carrying AliasError + message.
    """
    path = token.alias_to or ""
    if not path:
        return AliasValidation(False, AliasError.MALFORMED_PATH, "No alias target specified")

    parts = path.split("/")
    if len(parts) != 2:
        return AliasValidation(
            False,
            AliasError.MALFORMED_PATH,
            f"Invalid alias path format {path!r}: expected '<group>/<shade>'",
        )

    group, raw_shade = parts
    try:
        shade = int(raw_shade)
    except ValueError:
        return AliasValidation(
            False, AliasError.MALFORMED_PATH, f"Shade {raw_shade!r} in {path!r} is not an integer"
        )

    if group not in base_tokens:
        return AliasValidation(
            False, AliasError.UNKNOWN_GROUP, f'Base token group "{group}" not found'
        )

    if _find_shade(base_tokens[group], shade) is None:
        return AliasValidation(
            False, AliasError.UNKNOWN_SHADE, f'Base token "{token_key(group, shade)}" not found'
        )

    return AliasValidation(True)


# =============================================================================
# 3) RESOLUTION
# =============================================================================

def resolve_alias(token: SemanticToken, base_tokens: BaseTokens) -> Optional[str]:
    """Does: Look up the hex a semantic token points at; None when it doesn't resolve."""
    target = token.target
    if target is None or not validate_alias(token, base_tokens):
        return None
    group, shade = target
    hit = _find_shade(base_tokens[group], shade)
    return hit.value if hit is not None else None


def resolve_semantic_tokens(
    semantic_tokens: List[SemanticToken],
    base_tokens: BaseTokens,
) -> Dict[str, str]:
    """
    Does: Resolve every semantic token to its current hex.
    Returns: {semantic name: hex}; unresolved aliases are left out and logged.
    """
    resolved: Dict[str, str] = {}
    for tok in semantic_tokens:
        value = resolve_alias(tok, base_tokens)
        if value is None:
            log.warning("[semantic] unresolved alias %s → %r", tok.name, tok.alias_to)
            continue
        resolved[tok.name] = value
    return resolved
