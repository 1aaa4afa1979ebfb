# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Path traversal over nested mappings.

Free functions working on plain nested dicts (the shape produced by
``json.load`` and friends):

- read_path: value at path, or MISSING
- write_path: assign at path, creating intermediate mappings
- has_path: True if every segment of the path is present
- search_path: same lookup as read_path under its historical name
- delete_path: remove the key at path

Lists and other non-mapping values are leaves. Traversal never descends
into them.

Example:
    >>> data = {}
    >>> write_path(data, 'config.db\\\\.main.port', 5432)
    >>> data
    {'config': {'db.main': {'port': 5432}}}
    >>> read_path(data, 'config.db\\\\.main.port')
    5432
    >>> read_path(data, 'config.missing')
    MISSING
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from .exceptions import InvalidArgumentError
from .paths import split_path


class _Missing:
    """Marker for a path that does not resolve.

    Distinct from None, which is a legitimate stored value.
    """

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


def _check_tree(tree: Any, writable: bool = False) -> None:
    if tree is None and not writable:
        return
    expected = MutableMapping if writable else Mapping
    if not isinstance(tree, expected):
        raise InvalidArgumentError(
            f"tree must be a mapping, not {type(tree).__name__}"
        )


def _check_path(path: Any) -> None:
    if not isinstance(path, str):
        raise InvalidArgumentError(
            f"path must be str, not {type(path).__name__}"
        )


def _resolve(tree: Mapping | None, keys: list[str]) -> Any:
    """Descend one key at a time; MISSING as soon as a step fails."""
    current: Any = tree
    for key in keys:
        if not isinstance(current, Mapping) or key not in current:
            return MISSING
        current = current[key]
    return current


def read_path(tree: Mapping | None, path: str, default: Any = MISSING) -> Any:
    """Return the value at path.

    Args:
        tree: Root mapping. None is accepted and behaves as an empty tree.
        path: Escaped dotted path.
        default: Returned when the path does not resolve.

    Returns:
        The stored value (possibly None), or default.

    Raises:
        InvalidArgumentError: If tree is not a mapping or None, or path
            is not a string.
    """
    _check_tree(tree)
    _check_path(path)
    value = _resolve(tree, split_path(path))
    return default if value is MISSING else value


def search_path(tree: Mapping | None, path: str, default: Any = MISSING) -> Any:
    """Return the value at path. Same contract as read_path."""
    return read_path(tree, path, default)


def has_path(tree: Mapping | None, path: str) -> bool:
    """Return True if the key at the end of path is present.

    A key holding None still exists.
    """
    _check_tree(tree)
    _check_path(path)
    return _resolve(tree, split_path(path)) is not MISSING


def write_path(tree: MutableMapping, path: str, value: Any) -> None:
    """Assign value at path, creating intermediate mappings as needed.

    Any intermediate segment that is missing or does not hold a mapping is
    replaced with a fresh empty dict, discarding the previous value. The
    last segment is always overwritten. The tree is mutated in place.

    Args:
        tree: Root mapping to write into.
        path: Escaped dotted path.
        value: Value to store.

    Raises:
        InvalidArgumentError: If tree is not a mutable mapping, or path is
            not a string. Nothing is written in that case.
    """
    _check_tree(tree, writable=True)
    _check_path(path)

    keys = split_path(path)
    current = tree
    for key in keys[:-1]:
        child = current.get(key)
        if not isinstance(child, MutableMapping):
            child = {}
            current[key] = child
        current = child
    current[keys[-1]] = value


def delete_path(tree: MutableMapping, path: str) -> Any:
    """Remove the key at path and return its value.

    Raises:
        InvalidArgumentError: If tree is not a mutable mapping, or path is
            not a string.
        KeyError: If the path does not resolve.
    """
    _check_tree(tree, writable=True)
    _check_path(path)
    keys = split_path(path)
    parent = _resolve(tree, keys[:-1])
    if not isinstance(parent, MutableMapping) or keys[-1] not in parent:
        raise KeyError(path)
    return parent.pop(keys[-1])
