# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dotted path resolution over JSON-shaped trees.

Paths are plain strings split on '.', so ``'db.hosts.0'`` addresses
``tree['db']['hosts'][0]``. A segment indexes a dict by key, or a list when
it is a canonical non-negative integer ('0', '12', but not '01' or '-1').

Reads never raise: anything that cannot be resolved comes back as
``MISSING``. Writes go through ``resolve_for_mutation``, which can populate
the path with empty dicts before handing back the (container, key) pair
where the value lives.

Example:
    >>> tree = {'a': {'b': [10, 20]}}
    >>> read_path(tree, 'a.b.1')
    20
    >>> read_path(tree, 'a.x.y')
    MISSING
    >>> loc = resolve_for_mutation(tree, 'a.c.d', populate=True)
    >>> loc.assign(1)
    >>> tree['a']['c']
    {'d': 1}
"""

from __future__ import annotations

import re
from typing import Any, Iterable, NamedTuple

from .exceptions import InvalidPathError
from .values import MISSING, is_array, is_mapping

PATH_SEPARATOR = '.'

_INDEX_RE = re.compile(r'0|[1-9][0-9]*')


def split_path(path: str) -> list[str]:
    """Split a dotted path into its segments."""
    return path.split(PATH_SEPARATOR)


def join_path(segments: Iterable[str]) -> str:
    """Join segments back into a dotted path."""
    return PATH_SEPARATOR.join(segments)


def is_index(segment: str) -> int | None:
    """Return the list index a segment denotes, or None if it is not one."""
    if _INDEX_RE.fullmatch(segment):
        return int(segment)
    return None


def _child(container: Any, segment: str) -> Any:
    """Look up one segment inside container, MISSING if not there."""
    if is_mapping(container):
        return container.get(segment, MISSING)
    if is_array(container):
        index = is_index(segment)
        if index is not None and index < len(container):
            return container[index]
    return MISSING


def _store(container: Any, segment: str, value: Any, path: str) -> None:
    """Write value under segment, padding lists with None when needed."""
    if is_mapping(container):
        container[segment] = value
        return
    if is_array(container):
        index = is_index(segment)
        if index is not None:
            if index >= len(container):
                container.extend([None] * (index + 1 - len(container)))
            container[index] = value
            return
    raise InvalidPathError(path, segment)


def _is_container(value: Any) -> bool:
    return is_mapping(value) or is_array(value)


def read_path(tree: Any, path: str | None) -> Any:
    """Return the value at path, or MISSING if it cannot be resolved.

    An empty or None path returns the tree itself. Containers found along
    the way are the live objects held by ``tree``; callers that hand them
    out must copy them first.
    """
    if not path:
        return tree
    current = tree
    for segment in split_path(path):
        current = _child(current, segment)
        if current is MISSING:
            break
    return current


class Location(NamedTuple):
    """Where a value lives: the parent container and the final key.

    ``container`` is MISSING when the parent path could not be resolved.
    """

    container: Any
    key: str
    path: str = ''

    @property
    def exists(self) -> bool:
        """True if a value (possibly None) is stored at this location."""
        return self.value() is not MISSING

    def value(self) -> Any:
        """Return the stored value or MISSING."""
        return _child(self.container, self.key)

    def assign(self, value: Any) -> None:
        """Store value at this location.

        Raises:
            InvalidPathError: If the container is a list and key is not
                a list index, or the container is not a dict/list at all.
        """
        _store(self.container, self.key, value, self.path)

    def delete(self) -> bool:
        """Remove the value at this location.

        Dict entries are removed by key, list elements by index.

        Returns:
            True if something was removed.
        """
        if is_mapping(self.container):
            if self.key in self.container:
                del self.container[self.key]
                return True
        elif is_array(self.container):
            index = is_index(self.key)
            if index is not None and index < len(self.container):
                del self.container[index]
                return True
        return False


def _populate(tree: Any, segments: list[str], path: str) -> None:
    """Create every missing position along segments as an empty dict.

    Intermediate positions that hold a primitive or None are converted
    into dicts. The final position is only created when absent.
    """
    current = tree
    last = len(segments) - 1
    for i, segment in enumerate(segments):
        child = _child(current, segment)
        if child is MISSING or (i < last and not _is_container(child)):
            child = {}
            _store(current, segment, child, path)
        current = child


def resolve_for_mutation(
    tree: Any, path: str, populate: bool = False
) -> Location:
    """Resolve path to the (container, key) pair a write or delete acts on.

    Args:
        tree: Root container.
        path: Dotted path; its last segment becomes the key.
        populate: If True, create missing positions as empty dicts first,
            so the container is guaranteed to exist.

    Returns:
        Location whose container is the root for single-segment paths,
        otherwise whatever ``read_path`` finds for all but the last segment
        (MISSING if that is not there and populate is False).

    Raises:
        InvalidPathError: If populate is True and a position inside a list
            is not a valid index.
    """
    segments = split_path(path)

    if populate:
        _populate(tree, segments, path)

    if len(segments) == 1:
        return Location(tree, segments[0], path)

    container = read_path(tree, join_path(segments[:-1]))
    return Location(container, segments[-1], path)
