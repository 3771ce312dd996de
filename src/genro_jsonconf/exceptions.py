# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""JsonStore exceptions."""

from __future__ import annotations


class JsonConfError(Exception):
    """Base exception for JsonStore errors."""

    pass


class NotAnArrayError(JsonConfError):
    """Raised when push() targets a path that does not hold a list."""

    def __init__(self, path: str | None) -> None:
        self.path = path
        super().__init__(f"The key '{path}' is not an array")


class InvalidPathError(JsonConfError):
    """Raised when a write needs a non-index key inside a list."""

    def __init__(self, path: str, segment: str) -> None:
        self.path = path
        self.segment = segment
        super().__init__(
            f"Cannot write '{path}': segment '{segment}' is not a valid list index"
        )
