# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Conversion between nested mappings and single-level path mappings.

flatten() turns a nested tree into ``{escaped_path: leaf}``; unflatten()
rebuilds the nested tree. Keys containing dots survive the round trip
because flatten escapes them and unflatten splits on unescaped dots only.

Empty mappings have no leaf, so flatten drops them and they do not come
back from unflatten.

Example:
    >>> flatten({'test': {'tester.makeup': {'testing': '10'}}})
    {'test.tester\\\\.makeup.testing': '10'}
    >>> unflatten({'a\\\\.b.c\\\\.d.e': 42})
    {'a.b': {'c.d': {'e': 42}}}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .exceptions import InvalidArgumentError
from .paths import SEPARATOR, escape_key
from .traversal import write_path


def flatten(tree: Mapping, prefix: str = '') -> dict[str, Any]:
    """Flatten a nested mapping into escaped dotted paths.

    Depth-first, in the iteration order of each mapping. Every non-mapping
    value (None and lists included) is a leaf.

    Args:
        tree: Nested mapping to flatten.
        prefix: Escaped path prepended to every key.

    Returns:
        New dict mapping escaped paths to leaf values.

    Raises:
        InvalidArgumentError: If tree is not a mapping.
    """
    if not isinstance(tree, Mapping):
        raise InvalidArgumentError(
            f"tree must be a mapping, not {type(tree).__name__}"
        )

    result: dict[str, Any] = {}

    def _recurse(node: Mapping, node_prefix: str) -> None:
        for key, value in node.items():
            escaped = escape_key(str(key))
            path = f"{node_prefix}{SEPARATOR}{escaped}" if node_prefix else escaped
            if isinstance(value, Mapping):
                _recurse(value, path)
            else:
                result[path] = value

    _recurse(tree, prefix)
    return result


def unflatten(flat: Mapping) -> dict[str, Any]:
    """Rebuild a nested dict from a mapping of escaped paths.

    Each entry is written with write_path into a fresh dict, so an entry
    whose path passes through an earlier leaf replaces that leaf with a
    mapping.

    Raises:
        InvalidArgumentError: If flat is not a mapping or a key is not a
            string.
    """
    if not isinstance(flat, Mapping):
        raise InvalidArgumentError(
            f"flat must be a mapping, not {type(flat).__name__}"
        )

    result: dict[str, Any] = {}
    for path, value in flat.items():
        write_path(result, path, value)
    return result
