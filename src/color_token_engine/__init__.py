"""
color_token_engine
==================

Does: Root package initializer for the color token engine.
Returns: Exposes the `engine` subpackages (color, tokens, accessibility, health,
         versioning) through a stable namespace.
Used by: All higher-level imports starting from `color_token_engine.*`.
"""

__all__: list[str] = []
__version__ = "0.1.0"
__docformat__ = "google"
