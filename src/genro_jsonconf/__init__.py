# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-JsonConf - JSON configuration trees edited through dotted paths.

A lightweight, zero-dependency library that keeps a JSON-shaped tree in
memory and reads, writes, merges and removes values by path ('a.b.c').
"""

from __future__ import annotations

from typing import Any

__version__ = "0.1.0"

from .exceptions import InvalidPathError, JsonConfError, NotAnArrayError
from .merge import deep_merge
from .paths import Location, read_path, resolve_for_mutation, split_path
from .store import JsonStore
from .values import MISSING, clone


def create(initial: Any = None, **options: bool) -> JsonStore:
    """Create a JsonStore from an initial tree.

    Args:
        initial: Initial tree (copied).
        **options: Store defaults for set(), 'parse' and/or 'merge'.
    """
    return JsonStore(initial, **options)


__all__ = [
    # Core classes
    "JsonStore",
    "create",
    # Path and merge primitives
    "Location",
    "read_path",
    "resolve_for_mutation",
    "split_path",
    "deep_merge",
    "clone",
    "MISSING",
    # Exceptions
    "JsonConfError",
    "NotAnArrayError",
    "InvalidPathError",
]
