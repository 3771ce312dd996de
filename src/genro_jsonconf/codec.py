# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""JSON text encoding and decoding for store values.

Only standard JSON is accepted and produced: the NaN/Infinity extensions
of the json module are rejected on decode, and non-finite floats are
written as null, as JavaScript's JSON.stringify does.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from .values import MISSING

logger = logging.getLogger(__name__)

# Matches JavaScript's JSON.stringify output: no whitespace.
COMPACT_SEPARATORS = (',', ':')


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_json(text: str | bytes) -> Any:
    """Decode standard JSON text into a tree value.

    Raises:
        ValueError: If text is not valid JSON, including the non-standard
            NaN, Infinity and -Infinity tokens.
    """
    return json.loads(text, parse_constant=_reject_constant)


def try_parse_json(value: Any) -> Any:
    """Decode value if it is JSON text, otherwise return it unchanged.

    Only str and bytes are candidates; a decode failure is not an error,
    the raw value is simply kept.

    Example:
        >>> try_parse_json('{"a": 1}')
        {'a': 1}
        >>> try_parse_json('plain text')
        'plain text'
        >>> try_parse_json('NaN')
        'NaN'
        >>> try_parse_json(42)
        42
    """
    if value is MISSING or not isinstance(value, (str, bytes, bytearray)):
        return value
    try:
        return parse_json(value)
    except ValueError:
        logger.debug("Value %r is not JSON text, keeping it as is", value)
        return value


def _finite(value: Any) -> Any:
    """Return value with non-finite floats replaced by None."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {key: _finite(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(item) for item in value]
    return value


def dump_json(tree: Any) -> str:
    """Encode a tree value as compact standard JSON text, keeping key order."""
    return json.dumps(
        _finite(tree),
        separators=COMPACT_SEPARATORS,
        ensure_ascii=False,
        allow_nan=False,
    )
