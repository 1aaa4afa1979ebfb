# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Escaped dotted paths.

A path is a string of segments separated by '.'. A literal dot inside a
single segment is written as '\\.', so 'a\\.b.c' addresses the key 'c'
inside the key 'a.b'.

Only dots are escaped. A segment that already contains the two characters
'\\.' cannot be told apart from an escaped dot once encoded; that pairing is
kept as is.

Example:
    >>> split_path('config.db\\\\.main.host')
    ['config', 'db.main', 'host']
    >>> join_path(['config', 'db.main', 'host'])
    'config.db\\\\.main.host'
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from .exceptions import InvalidPathError

SEPARATOR = '.'
ESCAPED_SEPARATOR = '\\.'

_SPLIT_RE = re.compile(r'(?<!\\)\.')


def escape_key(key: str) -> str:
    """Return key with every literal dot written as '\\.'."""
    return key.replace(SEPARATOR, ESCAPED_SEPARATOR)


def unescape_key(key: str) -> str:
    """Return key with every '\\.' turned back into a literal dot."""
    return key.replace(ESCAPED_SEPARATOR, SEPARATOR)


def split_path(path: Any) -> list[str]:
    """Split a path on unescaped dots and decode each segment.

    A dot is a separator unless the character right before it is a
    backslash. The empty string is a single empty segment.

    Args:
        path: Escaped dotted path.

    Returns:
        Decoded segment names, outermost first.

    Raises:
        InvalidPathError: If path is not a string.
    """
    if not isinstance(path, str):
        raise InvalidPathError(
            f"path must be str, not {type(path).__name__}"
        )
    return [unescape_key(segment) for segment in _SPLIT_RE.split(path)]


def join_path(segments: Iterable[str]) -> str:
    """Escape each segment name and join them into a path."""
    return SEPARATOR.join(escape_key(segment) for segment in segments)
