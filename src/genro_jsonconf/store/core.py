# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""JsonStore - An in-memory editor for JSON configuration trees.

This module provides the JsonStore class, which owns a JSON-shaped tree
(nested dicts and lists of primitives) and edits it through dotted paths.

Key Features:
    - **Path navigation**: Dotted paths ('a.b.c'), numeric segments index lists
    - **Autocreate**: Writes create missing intermediate dicts
    - **Deep merge**: Dict values are merged key by key into what is stored
    - **Isolation**: Every value going in or out is a deep copy
    - **Reset**: Restore the construction tree, or any other tree

Example:
    Basic usage::

        conf = JsonStore({'server': {'port': 8080}})
        conf.set('server.host', 'localhost')
        conf.get('server')           # {'port': 8080, 'host': 'localhost'}
        conf.set('server', '{"port": 9090}')
        conf.get('server.port')      # 9090 (JSON text is parsed)
        conf.set('plugins', [])
        conf.push('plugins', 'auth')
        conf.remove('server.host')
        conf.serialize()             # '{"server":{"port":9090},"plugins":["auth"]}'
        conf.reset()                 # back to {'server': {'port': 8080}}
"""

from __future__ import annotations

import logging
from typing import Any

from ..codec import dump_json, try_parse_json
from ..exceptions import NotAnArrayError
from ..merge import deep_merge
from ..paths import read_path, resolve_for_mutation
from ..values import MISSING, clone, is_array, is_mapping, is_nullable

logger = logging.getLogger(__name__)


class JsonStore:
    """A JSON tree addressed by dotted paths.

    JsonStore provides:
    - get(path, default): Read a copy of a value
    - set(path, value, parse=, merge=): Write with autocreate and deep merge
    - push(path, value): Append to a list
    - remove(path): Delete a key or list element
    - reset(to): Restore the construction tree or a given one
    - serialize(): Compact JSON text of the tree

    The tree is never shared with callers: values are deep copied when they
    enter the store and again when they are returned.

    Example:
        >>> conf = JsonStore({'a': {'b': 1}})
        >>> conf.set('a.c', 2)
        2
        >>> conf.get()
        {'a': {'b': 1, 'c': 2}}
    """

    __slots__ = ('_tree', '_initial', '_parse', '_merge')

    def __init__(
        self,
        initial: Any = None,
        *,
        parse: bool = True,
        merge: bool = True,
    ) -> None:
        """Initialize a JsonStore.

        Args:
            initial: Initial tree, normally a dict. None means an empty dict.
                It is copied, later changes to it do not affect the store.
            parse: Default for set(): decode str values that hold JSON text.
            merge: Default for set(): deep merge dict values into what is
                already stored instead of replacing it.

        Example:
            >>> JsonStore({'debug': False})
            >>> JsonStore(merge=False)  # set() always replaces
        """
        self._initial = {} if initial is None else clone(initial)
        self._tree = clone(self._initial)
        self._parse = parse
        self._merge = merge

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing top-level keys."""
        if is_mapping(self._tree):
            return f"JsonStore({list(self._tree.keys())})"
        return f"JsonStore({self._tree!r})"

    def __str__(self) -> str:
        """Return the JSON text of the tree."""
        return self.serialize()

    def __contains__(self, path: str) -> bool:
        """Check if a value (possibly None) is stored at path."""
        return read_path(self._tree, path) is not MISSING

    def __getitem__(self, path: str) -> Any:
        """Get a copy of the value at path.

        Raises:
            KeyError: If path cannot be resolved.
        """
        value = read_path(self._tree, path)
        if value is MISSING:
            raise KeyError(path)
        return clone(value)

    def __setitem__(self, path: str, value: Any) -> None:
        """Set value at path using the store defaults."""
        self.set(path, value)

    def __delitem__(self, path: str) -> None:
        """Remove the value at path.

        Raises:
            KeyError: If nothing is stored at path.
        """
        if path not in self:
            raise KeyError(path)
        self.remove(path)

    @property
    def options(self) -> dict[str, bool]:
        """The default set() options of this store."""
        return {'parse': self._parse, 'merge': self._merge}

    # ==================== Core API ====================

    def get(self, path: str | None = None, default: Any = None) -> Any:
        """Get a copy of the value at path.

        Args:
            path: Dotted path. None or '' returns the whole tree.
            default: Returned (not copied) when path cannot be resolved.

        Returns:
            Deep copy of the stored value, or default.

        Example:
            >>> conf.get('server.port')
            >>> conf.get('server.missing', 'fallback')  # 'fallback'
        """
        value = read_path(self._tree, path)
        if value is MISSING:
            return default
        return clone(value)

    def set(
        self,
        path: str | None = None,
        value: Any = None,
        *,
        parse: bool | None = None,
        merge: bool | None = None,
    ) -> Any:
        """Set a value at path, creating intermediate dicts as needed.

        Args:
            path: Dotted path. None or '' targets the root: the value, which
                must then be a dict, is written into the top level.
            value: The value to store.
            parse: If True, a str value holding JSON text is decoded first;
                text that is not JSON is stored as is. None uses the store
                default.
            merge: If True and both the stored and the new value are dicts,
                the new one is deep merged into the stored one; otherwise the
                new value replaces it. None uses the store default.

        Returns:
            Deep copy of the value now stored at path; for the root, the
            whole tree.

        Raises:
            InvalidPathError: If path needs a non-index key inside a list.

        Example:
            >>> conf.set('db', {'host': 'a'})
            >>> conf.set('db', {'port': 1})        # {'host': 'a', 'port': 1}
            >>> conf.set('db', {'port': 2}, merge=False)  # {'port': 2}
            >>> conf.set('db.port', '5432')        # stored as int 5432
        """
        if parse is None:
            parse = self._parse
        if merge is None:
            merge = self._merge

        if parse:
            value = try_parse_json(value)
        value = clone(value)

        if not path:
            return self._set_root(value, merge)

        location = resolve_for_mutation(self._tree, path, populate=True)
        current = location.value()
        if is_nullable(current):
            current = {}
            location.assign(current)

        new_value = deep_merge(current, value) if merge else value
        location.assign(new_value)
        logger.debug("set %r (merge=%s)", path, merge)
        return clone(new_value)

    def _set_root(self, value: Any, merge: bool) -> Any:
        """Write value into the top level of the tree.

        Returns:
            Deep copy of the whole tree after the update.
        """
        new_value = deep_merge(self._tree, value) if merge else value
        if is_mapping(new_value) and is_mapping(self._tree):
            if new_value is not self._tree:
                self._tree.update(new_value)
            logger.debug("set root keys %s (merge=%s)", list(new_value), merge)
        else:
            logger.warning(
                "Ignoring root value of type %s, the root must be a dict",
                type(new_value).__name__,
            )
        return clone(self._tree)

    def push(self, path: str, value: Any) -> list[Any]:
        """Append value to the list stored at path.

        Args:
            path: Dotted path of a list.
            value: Value to append (copied).

        Returns:
            Deep copy of the list after the append.

        Raises:
            NotAnArrayError: If path does not hold a list.

        Example:
            >>> conf.set('tags', [])
            >>> conf.push('tags', 'a')  # ['a']
        """
        target = read_path(self._tree, path)
        if not is_array(target):
            raise NotAnArrayError(path)
        target.append(clone(value))
        logger.debug("push %r (%d items)", path, len(target))
        return clone(target)

    def remove(self, path: str) -> Any:
        """Remove the entry at path.

        Dict entries are removed by key, list elements by index. Removing
        something that does not exist leaves the tree unchanged.

        Args:
            path: Dotted path of the entry.

        Returns:
            Deep copy of the container that held the entry, or None if that
            container does not exist.

        Example:
            >>> conf.remove('db.port')    # {'host': 'a'}
            >>> conf.remove('tags.0')     # []
        """
        location = resolve_for_mutation(self._tree, path, populate=False)
        if location.container is MISSING:
            return None
        if location.delete():
            logger.debug("remove %r", path)
        return clone(location.container)

    def reset(self, to: Any = None) -> Any:
        """Replace the tree with a copy of to, or of the construction tree.

        Args:
            to: New tree. If None, the tree the store was created with is
                restored; passing a value does not change that.

        Returns:
            Deep copy of the new tree.
        """
        self._tree = clone(self._initial if to is None else to)
        logger.debug("reset to %s", "initial tree" if to is None else "given tree")
        return clone(self._tree)

    def serialize(self) -> str:
        """Return the tree as compact JSON text."""
        return dump_json(self._tree)
