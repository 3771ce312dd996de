# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Deep merge of JSON-shaped values."""

from __future__ import annotations

from typing import Any

from .values import is_mapping


def deep_merge(target: Any, source: Any) -> Any:
    """Merge source into target.

    When both are dicts, every key of source is written into target:
    nested dicts are merged recursively (a non-dict target entry is first
    replaced by an empty dict), anything else, lists included, replaces the
    target entry wholesale. In any other case source wins as is.

    Args:
        target: Value being updated. Mutated in place when it is a dict.
        source: Value to merge in. Never copied, so callers must not pass
            data they keep using.

    Returns:
        target when both are dicts, otherwise source.

    Example:
        >>> deep_merge({'a': {'x': 1}, 'b': [1]}, {'a': {'y': 2}, 'b': [2]})
        {'a': {'x': 1, 'y': 2}, 'b': [2]}
        >>> deep_merge({'a': 1}, [1, 2])
        [1, 2]
    """
    if not (is_mapping(target) and is_mapping(source)):
        return source

    for key, value in source.items():
        if is_mapping(value):
            if not is_mapping(target.get(key)):
                target[key] = {}
            deep_merge(target[key], value)
        else:
            target[key] = value

    return target
