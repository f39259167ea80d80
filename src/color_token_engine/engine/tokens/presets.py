"""
presets.py
==========

Does: Load ready-made token systems (seed colors + semantic aliases) from
      <data>/presets.json and expand them into base tokens.
Used By: CLI `--preset`, orchestrator callers that want a starting point.
Returns: TokenPreset records; {group: [ColorToken, ...]} maps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from color_token_engine.engine.color import DEFAULT_SHADE_SCALE
from color_token_engine.engine.general.utils.load_config import load_config
from color_token_engine.engine.tokens.shades import generate_shades
from color_token_engine.engine.tokens.types import ColorToken, SemanticToken

__all__ = [
    "TokenPreset",
    "load_presets",
    "get_preset",
    "generate_preset_tokens",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

PRESETS_FILE = "presets"
_REQUIRED_KEYS = ("name", "description", "baseColors", "semanticTokens")


@dataclass(frozen=True)
class TokenPreset:
    id: str
    name: str
    description: str
    base_colors: Dict[str, str]
    semantic_tokens: Tuple[SemanticToken, ...]
    has_modes: bool = False
    has_states: bool = False
    has_brand_layer: bool = False


def _validate_presets(data: Dict[str, Any]) -> Dict[str, Any]:
    """Does: Reject preset entries missing required keys or with non-dict seeds."""
    for preset_id, entry in data.items():
        if not isinstance(entry, dict):
            raise TypeError(f"preset {preset_id!r} must be an object")
        missing = [k for k in _REQUIRED_KEYS if k not in entry]
        if missing:
            raise KeyError(f"preset {preset_id!r} missing keys: {missing}")
        if not isinstance(entry["baseColors"], dict):
            raise TypeError(f"preset {preset_id!r}: baseColors must be an object")
    return data


def _to_preset(preset_id: str, entry: Dict[str, Any]) -> TokenPreset:
    structure = entry.get("structure") or {}
    return TokenPreset(
        id=preset_id,
        name=entry["name"],
        description=entry["description"],
        base_colors=dict(entry["baseColors"]),
        semantic_tokens=tuple(SemanticToken.from_dict(t) for t in entry["semanticTokens"]),
        has_modes=bool(structure.get("hasModes", False)),
        has_states=bool(structure.get("hasStates", False)),
        has_brand_layer=bool(structure.get("hasBrandLayer", False)),
    )


def load_presets(base_dir: Optional[Path] = None) -> List[TokenPreset]:
    """Does: Parse every preset in <data>/presets.json (file order kept)."""
    raw = load_config(PRESETS_FILE, base_dir=base_dir, validator=_validate_presets)
    return [_to_preset(pid, entry) for pid, entry in raw.items()]


def get_preset(preset_id: str, base_dir: Optional[Path] = None) -> Optional[TokenPreset]:
    """Does: Fetch one preset by id; None when unknown."""
    for preset in load_presets(base_dir):
        if preset.id == preset_id:
            return preset
    log.debug("[presets] unknown preset %r", preset_id)
    return None


def generate_preset_tokens(
    preset: TokenPreset,
    scale: Tuple[int, ...] = DEFAULT_SHADE_SCALE,
) -> Dict[str, List[ColorToken]]:
    """Does: Expand each preset seed into a full shade scale, keyed by group."""
    return {group: generate_shades(seed, group, scale) for group, seed in preset.base_colors.items()}
