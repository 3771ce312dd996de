# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Value model helpers for JSON-shaped trees.

A tree value is one of:
- a primitive: str, int, float, bool or None
- a list of values
- a dict mapping str keys to values

Absence is represented by the ``MISSING`` sentinel, so that a stored
``None`` (JSON ``null``) stays distinguishable from a key that is not there.
"""

from __future__ import annotations

from typing import Any


class _Missing:
    """Singleton marker for an absent value."""

    __slots__ = ()
    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> _Missing:
        return self

    def __deepcopy__(self, memo: dict) -> _Missing:
        return self

    def __reduce__(self) -> str:
        return 'MISSING'


MISSING: Any = _Missing()


def is_mapping(value: Any) -> bool:
    """True if value is a JSON object (a dict)."""
    return isinstance(value, dict)


def is_array(value: Any) -> bool:
    """True if value is a JSON array (a list)."""
    return isinstance(value, list)


def is_nullable(value: Any) -> bool:
    """True if value is absent or None."""
    return value is MISSING or value is None


def clone(value: Any) -> Any:
    """Return a structural deep copy of a tree value.

    Dicts and lists are rebuilt recursively, tuples become lists (as they
    would after a JSON round trip) and every other value is returned as is,
    since primitives are immutable. ``MISSING`` clones to itself.

    Example:
        >>> src = {'a': [1, {'b': 2}]}
        >>> dst = clone(src)
        >>> dst == src, dst['a'] is src['a']
        (True, False)
    """
    if isinstance(value, dict):
        return {key: clone(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [clone(item) for item in value]
    return value
