"""Recursive replace merge for nested configuration values."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def replace_recursive(base: Any, replacements: Any) -> Any:
    """Recursively replace values in ``base`` with those in ``replacements``.

    Mappings are merged key by key and lists index by index, so nested
    values in ``replacements`` win while untouched keys and trailing list
    items of ``base`` survive. Any other value in ``replacements`` replaces
    the corresponding value outright. Neither argument is modified.

    Example:
        >>> replace_recursive({"labels": {"home": "Home", "tag": "Tag: "}}, {"labels": {"home": "Start"}})
        {'labels': {'home': 'Start', 'tag': 'Tag: '}}
    """
    if isinstance(base, Mapping) and isinstance(replacements, Mapping):
        merged = dict(base)
        for key, value in replacements.items():
            merged[key] = replace_recursive(base[key], value) if key in base else value
        return merged
    if _is_list(base) and _is_list(replacements):
        merged_list = list(base)
        for index, value in enumerate(replacements):
            if index < len(merged_list):
                merged_list[index] = replace_recursive(merged_list[index], value)
            else:
                merged_list.append(value)
        return merged_list
    return replacements


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))
