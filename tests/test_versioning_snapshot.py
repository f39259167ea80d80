# tests/test_versioning_snapshot.py
"""Snapshot capture, isolation from live maps, base-token diffs and diff rendering."""

from __future__ import annotations

import copy
import pickle
from datetime import timezone
from importlib import import_module
from typing import Dict, List, Optional

import pytest

snapshot = import_module("color_token_engine.engine.versioning.snapshot")
shades = import_module("color_token_engine.engine.tokens.shades")
semantic = import_module("color_token_engine.engine.tokens.semantic")
types_ = import_module("color_token_engine.engine.tokens.types")

ColorToken = types_.ColorToken


@pytest.fixture
def base():
    return {
        "primary": shades.generate_shades("#3b82f6", "primary", [100, 500, 900]),
        "secondary": shades.generate_shades("#8b5cf6", "secondary", [100, 500, 900]),
    }


def _replace(base, group, shade, value):
    out = {g: list(ts) for g, ts in base.items()}
    out[group] = [ColorToken(name=t.name, value=value, shade=t.shade) if t.shade == shade else t for t in out[group]]
    return out


# ---------- capture ----------
def test_create_snapshot_metadata(base):
    sem = semantic.suggest_semantic_tokens(base)
    snap = snapshot.create_snapshot(base, sem, name="v1", description="first")
    assert snap.name == "v1"
    assert snap.description == "first"
    assert snap.metadata.token_count == 6
    assert snap.metadata.semantic_count == 2
    assert snap.id.startswith("snapshot-")
    assert snap.timestamp.tzinfo is timezone.utc


def test_snapshot_ids_are_unique(base):
    ids = {snapshot.create_snapshot(base).id for _ in range(20)}
    assert len(ids) == 20


def test_default_name(base):
    snap = snapshot.create_snapshot(base)
    assert snap.name.startswith("Snapshot ")
    assert snap.semantic_tokens is None
    assert snap.metadata.semantic_count == 0


def test_snapshot_does_not_alias_live_maps(base):
    snap = snapshot.create_snapshot(base)
    base["primary"].append(ColorToken(name="primary-950", value="#000000", shade=950))
    base["accent"] = []
    assert [t.shade for t in snap.base_tokens["primary"]] == [100, 500, 900]
    assert "accent" not in snap.base_tokens


def test_snapshot_is_read_only(base):
    snap = snapshot.create_snapshot(base)
    with pytest.raises(TypeError):
        snap.base_tokens["primary"] = ()  # type: ignore[index]
    with pytest.raises(AttributeError):
        snap.name = "renamed"  # type: ignore[misc]


def test_snapshot_pickles_copies_and_hashes(base):
    snap = snapshot.create_snapshot(base, semantic.suggest_semantic_tokens(base), name="v1")
    assert pickle.loads(pickle.dumps(snap)) == snap
    clone = copy.deepcopy(snap)
    assert clone == snap
    assert hash(clone) == hash(snap)
    assert snapshot.compare_snapshots(snap, clone).is_empty


def test_dict_round_trip(base):
    sem = semantic.suggest_semantic_tokens(base)
    snap = snapshot.create_snapshot(base, sem, name="v1")
    back = snapshot.TokenSnapshot.from_dict(snap.to_dict())
    assert back.id == snap.id
    assert back.timestamp == snap.timestamp
    assert dict(back.base_tokens) == dict(snap.base_tokens)
    assert back.semantic_tokens == snap.semantic_tokens
    assert back.metadata == snap.metadata


# ---------- diff ----------
def test_compare_identity_is_empty(base):
    snap = snapshot.create_snapshot(base)
    diff = snapshot.compare_snapshots(snap, snap)
    assert diff.is_empty
    assert diff.to_dict() == {"added": [], "removed": [], "modified": []}


def test_single_modified_token(base):
    old = snapshot.create_snapshot(base)
    new = snapshot.create_snapshot(_replace(base, "secondary", 500, "#7c3aed"))
    diff = snapshot.compare_snapshots(old, new)
    assert diff.added == ()
    assert diff.removed == ()
    assert len(diff.modified) == 1
    mod = diff.modified[0]
    assert mod.token == "secondary/500"
    assert (mod.old_value, mod.new_value) == ("#8b5cf6", "#7c3aed")


def test_added_and_removed(base):
    new = {g: list(ts) for g, ts in base.items()}
    new["primary"] = [t for t in new["primary"] if t.shade != 900]
    new["accent"] = shades.generate_shades("#f97316", "accent", [500])
    diff = snapshot.diff_token_maps(base, new)
    assert diff.added == ("accent/500",)
    assert diff.removed == ("primary/900",)
    assert diff.modified == ()


def test_semantic_changes_are_not_diffed(base):
    old = snapshot.create_snapshot(base, semantic.suggest_semantic_tokens(base))
    new = snapshot.create_snapshot(base, [])
    assert snapshot.compare_snapshots(old, new).is_empty


def test_flatten_tokens(base):
    flat = snapshot.flatten_tokens(base)
    assert flat["primary/500"] == "#3b82f6"
    assert len(flat) == 6


# ---------- rendering ----------
def test_format_empty_diff():
    assert snapshot.format_diff(snapshot.TokenDiff()) == "No changes detected."


def test_format_diff_sections(base):
    new = _replace(base, "secondary", 500, "#7c3aed")
    new["accent"] = shades.generate_shades("#f97316", "accent", [500])
    text = snapshot.format_diff(snapshot.diff_token_maps(base, new))
    assert text.splitlines() == [
        "Added (1):",
        "  + accent/500",
        "Modified (1):",
        "  ~ secondary/500",
        "    #8b5cf6 → #7c3aed",
    ]


# ---------- persistence boundary ----------
class _MemoryStore:
    def __init__(self) -> None:
        self._items: Dict[str, dict] = {}

    def save(self, snap) -> None:
        self._items[snap.id] = snap.to_dict()

    def load(self, snapshot_id: str) -> Optional[object]:
        data = self._items.get(snapshot_id)
        return snapshot.TokenSnapshot.from_dict(data) if data else None

    def list(self) -> List[object]:
        return [snapshot.TokenSnapshot.from_dict(d) for d in self._items.values()]

    def delete(self, snapshot_id: str) -> None:
        self._items.pop(snapshot_id, None)


def test_host_store_satisfies_protocol(base):
    store = _MemoryStore()
    assert isinstance(store, snapshot.SnapshotStore)
    snap = snapshot.create_snapshot(base)
    store.save(snap)
    loaded = store.load(snap.id)
    assert snapshot.compare_snapshots(snap, loaded).is_empty
    store.delete(snap.id)
    assert store.list() == []
