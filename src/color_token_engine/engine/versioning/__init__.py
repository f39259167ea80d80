"""
versioning.
==========

Does: Snapshot token systems and diff snapshots over time.
Used By: Host persistence layer, CLI.
"""

from .snapshot import (
    ModifiedToken,
    SnapshotMetadata,
    SnapshotStore,
    TokenDiff,
    TokenSnapshot,
    compare_snapshots,
    create_snapshot,
    diff_token_maps,
    flatten_tokens,
    format_diff,
)

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
