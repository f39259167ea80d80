"""
general.
=======

Does: Host domain-agnostic helpers (config loading, topic debug logging).
Used by: Every engine subpackage that needs data files or debug traces.
"""

__all__: list[str] = []
__docformat__ = "google"
