"""
Default configuration for crudgen.

Every setting the library consumes is listed here; projects override any
subset through the ``CRUDGEN`` dict in their Django settings.
"""

from __future__ import annotations

from typing import Any

LIBRARY_DEFAULTS: dict[str, Any] = {
    "update_settings": {
        "generate_update": True,
        "excluded_models": [],
        "hooks": {},
    },
}


def merge_settings(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    result = dict(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_settings(result[key], value)
        else:
            result[key] = value
    return result
