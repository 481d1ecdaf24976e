"""Recursive merge of style fragments."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

__all__ = ["deep_merge"]


def _merge_into(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        current = target.get(key)
        if isinstance(value, Mapping) and isinstance(current, dict):
            _merge_into(current, value)
        elif isinstance(value, Mapping):
            fresh: dict[str, Any] = {}
            _merge_into(fresh, value)
            target[key] = fresh
        else:
            # Lists, scalars and None replace whatever was there.
            target[key] = copy.deepcopy(value)


def deep_merge(*fragments: Mapping[str, Any]) -> dict[str, Any]:
    """Merge *fragments* left to right into a new dict.

    Keys whose values are mappings on both sides are merged recursively;
    any other value from a later fragment replaces the earlier one whole.
    The result shares no mutable objects with the inputs.
    """
    result: dict[str, Any] = {}
    for fragment in fragments:
        _merge_into(result, fragment)
    return result
