# color_token_engine/engine/__init__.py

"""
engine.
======

Does: Host the token derivation and accessibility engine: color primitives,
      token derivations, accessibility checks, health scoring, versioning.
Returns: Nothing at package level; import from the subpackages.
Used by: Orchestrator, CLI demo, host integrations.
"""
from __future__ import annotations

__all__: list[str] = []
__docformat__ = "google"
