"""
snapshot.py
===========

Does: Capture immutable point-in-time snapshots of a token system and diff two
      captures structurally by '<group>/<shade>' key (base tokens only).
Used By: Host persistence (via SnapshotStore), orchestrator callers, CLI.
Returns: TokenSnapshot, TokenDiff, and a stable text rendering of a diff.
"""

from __future__ import annotations

import copy
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import (
    Any,
    Dict,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    runtime_checkable,
)

from color_token_engine.engine.tokens.types import BaseTokens, ColorToken, SemanticToken, token_key

__all__ = [
    "SnapshotMetadata",
    "TokenSnapshot",
    "ModifiedToken",
    "TokenDiff",
    "SnapshotStore",
    "create_snapshot",
    "flatten_tokens",
    "diff_token_maps",
    "compare_snapshots",
    "format_diff",
]

__docformat__ = "google"

log = logging.getLogger(__name__)


# ── Records ──────────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class SnapshotMetadata:
    token_count: int
    semantic_count: int


@dataclass(frozen=True)
class TokenSnapshot:
    """Immutable, hashable capture. Groups are stored as ``((group, tokens), ...)``
    pairs so the record pickles and deep-copies; ``base_tokens`` is a read-only view.
    """

    id: str
    timestamp: datetime
    name: str
    groups: Tuple[Tuple[str, Tuple[ColorToken, ...]], ...]
    metadata: SnapshotMetadata
    description: Optional[str] = None
    semantic_tokens: Optional[Tuple[SemanticToken, ...]] = None

    @property
    def base_tokens(self) -> Mapping[str, Tuple[ColorToken, ...]]:
        return MappingProxyType(dict(self.groups))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe form for the host's key-value store."""
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "name": self.name,
            "description": self.description,
            "baseTokens": {g: [t.to_dict() for t in ts] for g, ts in self.base_tokens.items()},
            "semanticTokens": (
                [t.to_dict() for t in self.semantic_tokens] if self.semantic_tokens is not None else None
            ),
            "metadata": {
                "tokenCount": self.metadata.token_count,
                "semanticCount": self.metadata.semantic_count,
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TokenSnapshot:
        base = {g: tuple(ColorToken.from_dict(t) for t in ts) for g, ts in data["baseTokens"].items()}
        semantic = data.get("semanticTokens")
        meta = data.get("metadata") or {}
        return cls(
            id=str(data["id"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            name=str(data["name"]),
            description=data.get("description"),
            groups=tuple(base.items()),
            semantic_tokens=(
                tuple(SemanticToken.from_dict(t) for t in semantic) if semantic is not None else None
            ),
            metadata=SnapshotMetadata(
                token_count=int(meta.get("tokenCount", sum(len(ts) for ts in base.values()))),
                semantic_count=int(meta.get("semanticCount", len(semantic or ()))),
            ),
        )


@dataclass(frozen=True)
class ModifiedToken:
    token: str
    old_value: str
    new_value: str


@dataclass(frozen=True)
class TokenDiff:
    added: Tuple[str, ...] = field(default_factory=tuple)
    removed: Tuple[str, ...] = field(default_factory=tuple)
    modified: Tuple[ModifiedToken, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.removed or self.modified)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "added": list(self.added),
            "removed": list(self.removed),
            "modified": [
                {"token": m.token, "oldValue": m.old_value, "newValue": m.new_value} for m in self.modified
            ],
        }


@runtime_checkable
class SnapshotStore(Protocol):
    """Persistence boundary implemented by the host; the engine ships none."""

    def save(self, snapshot: TokenSnapshot) -> None: ...

    def load(self, snapshot_id: str) -> Optional[TokenSnapshot]: ...

    def list(self) -> List[TokenSnapshot]: ...

    def delete(self, snapshot_id: str) -> None: ...


# =============================================================================
# 1) CAPTURE
# =============================================================================

def create_snapshot(
    base_tokens: BaseTokens,
    semantic_tokens: Optional[Sequence[SemanticToken]] = None,
    name: Optional[str] = None,
    description: Optional[str] = None,
) -> TokenSnapshot:
    """
    Does: Deep-copy the inputs into read-only structures, stamp a unique id and
          a UTC timestamp, and count tokens.
    Returns: TokenSnapshot that shares no mutable state with the caller's maps.
    """
    now = datetime.now(timezone.utc)
    copied = copy.deepcopy({g: list(ts) for g, ts in base_tokens.items()})
    groups = tuple((g, tuple(ts)) for g, ts in copied.items())
    semantic = tuple(copy.deepcopy(list(semantic_tokens))) if semantic_tokens is not None else None

    snapshot = TokenSnapshot(
        id=f"snapshot-{int(now.timestamp() * 1000)}-{uuid.uuid4().hex[:9]}",
        timestamp=now,
        name=name or f"Snapshot {now.strftime('%Y-%m-%d %H:%M:%S')}",
        description=description,
        groups=groups,
        semantic_tokens=semantic,
        metadata=SnapshotMetadata(
            token_count=sum(len(ts) for _, ts in groups),
            semantic_count=len(semantic or ()),
        ),
    )
    log.debug("[snapshot] %s: %d tokens, %d semantic", snapshot.id, snapshot.metadata.token_count, snapshot.metadata.semantic_count)
    return snapshot


# =============================================================================
# 2) DIFF
# =============================================================================

def flatten_tokens(base_tokens: BaseTokens) -> Dict[str, str]:
    """Does: Build the '<group>/<shade>' → hex map used for diffing."""
    return {token_key(group, t.shade): t.value for group, tokens in base_tokens.items() for t in tokens}


def diff_token_maps(old: BaseTokens, new: BaseTokens) -> TokenDiff:
    """
    Does: Key-by-key comparison: only in new → added, only in old → removed,
          in both with different values → modified. Equal values are omitted.
    Returns: TokenDiff (added in new-map order, removed/modified in old-map order).
    """
    old_map = flatten_tokens(old)
    new_map = flatten_tokens(new)
    return TokenDiff(
        added=tuple(k for k in new_map if k not in old_map),
        removed=tuple(k for k in old_map if k not in new_map),
        modified=tuple(
            ModifiedToken(token=k, old_value=v, new_value=new_map[k])
            for k, v in old_map.items()
            if k in new_map and new_map[k] != v
        ),
    )


def compare_snapshots(old: TokenSnapshot, new: TokenSnapshot) -> TokenDiff:
    """Does: Diff the base tokens of two snapshots (semantic tokens are not compared)."""
    return diff_token_maps(old.base_tokens, new.base_tokens)


def format_diff(diff: TokenDiff) -> str:
    """Does: Render a diff as indented +/-/~ lines; a fixed message when empty."""
    lines: List[str] = []
    if diff.added:
        lines.append(f"Added ({len(diff.added)}):")
        lines.extend(f"  + {k}" for k in diff.added)
    if diff.removed:
        lines.append(f"Removed ({len(diff.removed)}):")
        lines.extend(f"  - {k}" for k in diff.removed)
    if diff.modified:
        lines.append(f"Modified ({len(diff.modified)}):")
        for m in diff.modified:
            lines.append(f"  ~ {m.token}")
            lines.append(f"    {m.old_value} → {m.new_value}")
    return "\n".join(lines) if lines else "No changes detected."
