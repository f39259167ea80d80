# color_token_engine/engine/tokens/types.py
from __future__ import annotations

"""
types.py.

Does: Define the immutable token records (base, semantic, mode, state) and the
      typed alias-validation result shared by the token modules.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

__all__ = [
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
]

__docformat__ = "google"


def token_key(group: str, shade: int) -> str:
    """Does: Build the '<group>/<shade>' identity key of a base token."""
    return f"{group}/{shade}"


def parse_token_key(key: Optional[str]) -> Optional[Tuple[str, int]]:
    """Does: Split '<group>/<shade>' into (group, shade); None when malformed."""
    if not key:
        return None
    parts = key.split("/")
    if len(parts) != 2 or not parts[0]:
        return None
    try:
        return parts[0], int(parts[1])
    except ValueError:
        return None


# ── Base tokens ──────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ColorToken:
    name: str
    value: str
    shade: int

    def key(self, group: str) -> str:
        return token_key(group, self.shade)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value, "shade": self.shade}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ColorToken:
        return cls(name=str(data["name"]), value=str(data["value"]), shade=int(data["shade"]))


BaseTokens = Mapping[str, Sequence[ColorToken]]


# ── Semantic tokens ──────────────────────────────────────────────────────────
class SemanticCategory(str, Enum):
    BRAND = "brand"
    TEXT = "text"
    BG = "bg"
    BORDER = "border"
    STATE = "state"


@dataclass(frozen=True)
class SemanticToken:
    """A named role that references a base token by '<group>/<shade>'."""

    name: str
    alias_to: str
    category: SemanticCategory
    subcategory: str

    @property
    def target(self) -> Optional[Tuple[str, int]]:
        return parse_token_key(self.alias_to)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "aliasTo": self.alias_to,
            "category": self.category.value,
            "subcategory": self.subcategory,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SemanticToken:
        return cls(
            name=str(data["name"]),
            alias_to=str(data.get("aliasTo", data.get("alias_to", ""))),
            category=SemanticCategory(data["category"]),
            subcategory=str(data["subcategory"]),
        )


class AliasError(str, Enum):
    MALFORMED_PATH = "malformed_path"
    UNKNOWN_GROUP = "unknown_group"
    UNKNOWN_SHADE = "unknown_shade"


@dataclass(frozen=True)
class AliasValidation:
    valid: bool
    error: Optional[AliasError] = None
    message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid


# ── Mode tokens ──────────────────────────────────────────────────────────────
class ColorMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    HIGH_CONTRAST = "high-contrast"


@dataclass(frozen=True)
class ModeToken:
    name: str
    mode: ColorMode
    value: str
    base_value: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "mode": self.mode.value,
            "value": self.value,
            "baseValue": self.base_value,
        }


# ── State tokens ─────────────────────────────────────────────────────────────
class InteractionState(str, Enum):
    DEFAULT = "default"
    HOVER = "hover"
    ACTIVE = "active"
    DISABLED = "disabled"
    FOCUS = "focus"


@dataclass(frozen=True)
class StateToken:
    name: str
    base_token: str
    state: InteractionState
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "baseToken": self.base_token,
            "state": self.state.value,
            "value": self.value,
        }
