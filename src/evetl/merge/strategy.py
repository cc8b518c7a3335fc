"""Structural merge of JSON trees."""

from __future__ import annotations

import copy
from typing import Any


def deep_merge(base: Any, overlay: Any) -> Any:
    """Layer ``overlay`` on top of ``base`` and return a new tree.

    Objects merge key by key, recursively; base keys keep their position
    and keys only the overlay has are appended. Any other pairing,
    arrays included, yields the overlay value unchanged. Neither input is
    modified and the result shares no containers with them.
    """
    if not (isinstance(base, dict) and isinstance(overlay, dict)):
        return copy.deepcopy(overlay)

    merged = {}
    for key, value in base.items():
        if key in overlay:
            merged[key] = deep_merge(value, overlay[key])
        else:
            merged[key] = copy.deepcopy(value)
    for key, value in overlay.items():
        if key not in merged:
            merged[key] = copy.deepcopy(value)
    return merged
