"""Deep merge used when layering configuration sources."""
from __future__ import annotations

from typing import Any, Dict


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Nested mappings merge key by key. Any other value in ``override``
    (lists included) replaces the value in ``base``.

    Example:
        >>> deep_merge({"scan": {"warning_threshold": 1000}}, {"scan": {"severe_threshold": 5000}})
        {'scan': {'warning_threshold': 1000, 'severe_threshold': 5000}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


__all__ = ["deep_merge"]
