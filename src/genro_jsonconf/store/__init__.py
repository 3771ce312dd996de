# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Store package - The JsonStore container.

Example:
    >>> from genro_jsonconf import JsonStore
    >>> conf = JsonStore({'app': {'name': 'demo'}})
    >>> conf.set('app.debug', 'true')
    True
    >>> conf.get('app')
    {'name': 'demo', 'debug': True}
"""

from .core import JsonStore

__all__ = ["JsonStore"]
