"""Feature flags consulted by `cfg(...)` guards.

Generated traversal modules evaluate their guards once, when they are
imported, so the enabled set must be settled before that import.
"""

from __future__ import annotations

DEFAULT_FEATURES = frozenset({"full"})

_enabled: set[str] = set(DEFAULT_FEATURES)


def cfg(*features: str) -> bool:
    """True when every named feature is enabled (an empty list is always true)."""
    return all(name in _enabled for name in features)


def enable(*features: str) -> None:
    _enabled.update(features)


def disable(*features: str) -> None:
    _enabled.difference_update(features)


def enabled_features() -> frozenset[str]:
    return frozenset(_enabled)
