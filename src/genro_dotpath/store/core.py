# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""DotStore - A stateful owner of one nested tree.

This module provides the DotStore class, which keeps a single nested dict
and exposes escaped dotted-path operations on it.

Key Features:
    - **Path access**: read/write/has_key/search with escaped dotted paths
    - **Detached output**: dump() and every returned value are deep copies
    - **Normalized input**: init() copies and flattens its source, so empty
      mappings are dropped exactly like flatten() drops them
    - **Multi-criteria search**: has() with path, like, keywords and regex

Path Syntax:
    - Dotted paths: 'parent.child.grandchild'
    - Literal dot in a key: 'parent.child\\\\.name' addresses the key
      'child.name' inside 'parent'

Example:
    Basic usage::

        store = DotStore()
        store.write('config.database.host', 'localhost')
        store.write('config.db\\\\.replica.host', 'replica')

        print(store.read('config.database.host'))  # 'localhost'
        print(store.dump())
        # {'config': {'database': {'host': 'localhost'},
        #             'db.replica': {'host': 'replica'}}}

    Search::

        store.has({'like': 'replica'})
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any, Iterator

from ..flatten import flatten, unflatten
from ..paths import escape_key, split_path
from ..search import SearchCriteria, SearchMatch, iter_tree, search_tree
from ..traversal import (
    MISSING,
    delete_path,
    has_path,
    read_path,
    search_path,
    write_path,
)

logger = logging.getLogger(__name__)


def _detached(value: Any) -> Any:
    """Deep copy value so callers never hold a reference into the store."""
    return copy.deepcopy(value)


class DotStore:
    """A nested tree addressed by escaped dotted paths.

    DotStore provides:
    - read(path) / search(path) / store[path]: Get values
    - write(path, value) / store[path] = value: Set values with autocreate
    - has_key(path) / path in store: Existence checks
    - has(criteria): Multi-criteria search
    - dump() / init(tree): Export and replace the whole tree

    Every instance owns its own tree; there is no shared default store.

    Example:
        >>> store = DotStore({'a': {'b.c': 1}})
        >>> store.read('a.b\\\\.c')
        1
        >>> store.read('a.b.c')
        MISSING
    """

    __slots__ = ('_data', '_raise_on_error')

    def __init__(
        self,
        source: Mapping | None = None,
        raise_on_error: bool = True,
    ) -> None:
        """Initialize a DotStore.

        Args:
            source: Optional initial nested mapping, loaded through init().
            raise_on_error: If True (default), search criteria with unknown
                keys raise InvalidCriteriaError. If False, unknown keys are
                logged and ignored.

        Example:
            >>> DotStore()
            >>> DotStore({'config': {'debug': True}})
            >>> DotStore(raise_on_error=False)  # permissive search
        """
        self._data: dict[str, Any] = {}
        self._raise_on_error = raise_on_error
        if source is not None:
            self.init(source)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing top-level keys."""
        return f"DotStore({list(self._data.keys())})"

    def __len__(self) -> int:
        """Return the number of top-level keys."""
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        """Iterate over top-level keys, escaped, in insertion order."""
        return (escape_key(key) for key in self._data)

    def __contains__(self, path: object) -> bool:
        """Check if a path exists. Non-string paths are never contained."""
        if not isinstance(path, str):
            return False
        return self.has_key(path)

    def __getitem__(self, path: str) -> Any:
        """Get value by path.

        Raises:
            KeyError: If path not found.
        """
        value = self.read(path)
        if value is MISSING:
            raise KeyError(path)
        return value

    def __setitem__(self, path: str, value: Any) -> None:
        """Set value by path, creating intermediate mappings."""
        self.write(path, value)

    def __delitem__(self, path: str) -> None:
        """Delete the key at path.

        Raises:
            KeyError: If path not found.
        """
        delete_path(self._data, path)

    @property
    def raise_on_error(self) -> bool:
        """True if search criteria are validated strictly."""
        return self._raise_on_error

    # ==================== Core API ====================

    def read(self, path: str, default: Any = MISSING) -> Any:
        """Get the value at the given path.

        Args:
            path: Escaped dotted path.
            default: Returned when the path does not resolve.

        Returns:
            A detached copy of the value, or default.
        """
        value = read_path(self._data, path)
        return default if value is MISSING else _detached(value)

    def write(self, path: str, value: Any) -> None:
        """Set value at path, creating intermediate mappings as needed.

        Intermediate segments holding a non-mapping value are replaced by
        an empty mapping. The value is copied on the way in.

        Args:
            path: Escaped dotted path.
            value: The value to store.
        """
        write_path(self._data, path, _detached(value))
        logger.debug("write %r", path)

    def has_key(self, path: str) -> bool:
        """True if the key at path exists, even when it holds None."""
        return has_path(self._data, path)

    def search(self, path: str, default: Any = MISSING) -> Any:
        """Get the value at path. Behaves exactly like read()."""
        value = search_path(self._data, path)
        return default if value is MISSING else _detached(value)

    def get(self, path: str, default: Any = None) -> Any:
        """Get the value at path, or default (None) if absent."""
        return self.read(path, default)

    def get_keys(self, path: str) -> list[str]:
        """Return the decoded segments of path.

        Example:
            >>> DotStore().get_keys('a.b\\\\.c')
            ['a', 'b.c']
        """
        return split_path(path)

    def pop(self, path: str, default: Any = MISSING) -> Any:
        """Remove and return value at path.

        Args:
            path: Path to remove.
            default: Value to return if path not found.

        Returns:
            The removed value, or default.

        Raises:
            KeyError: If path not found and no default is given.
        """
        try:
            return delete_path(self._data, path)
        except KeyError:
            if default is MISSING:
                raise
            return default

    # ==================== Whole-tree Operations ====================

    def dump(self) -> dict[str, Any]:
        """Return a detached nested copy of the whole tree."""
        return copy.deepcopy(self._data)

    def as_dict(self) -> dict[str, Any]:
        """Alias for dump()."""
        return self.dump()

    def flatten(self) -> dict[str, Any]:
        """Return the tree as a single-level mapping of escaped paths."""
        return copy.deepcopy(flatten(self._data))

    def init(self, tree: Mapping | None = None) -> None:
        """Replace the whole tree with a normalized copy of tree.

        The source is deep-copied, flattened and rebuilt, so the caller's
        object is never aliased and empty mappings are dropped.

        Args:
            tree: New nested mapping. None resets to an empty tree.

        Raises:
            InvalidArgumentError: If tree is not a mapping or None.
        """
        self._data = unflatten(flatten(copy.deepcopy({} if tree is None else tree)))
        logger.debug("init with %d top-level keys", len(self._data))

    def clear(self) -> None:
        """Remove everything from the store."""
        self._data = {}
        logger.debug("clear")

    # ==================== Walk & Search ====================

    def walk(self) -> Iterator[tuple[str, Any]]:
        """Yield (escaped_path, value) for every key, pre-order.

        Example:
            >>> for path, value in store.walk():
            ...     print(path, value)
        """
        for path, value in iter_tree(self._data):
            yield path, _detached(value)

    def has(self, criteria: SearchCriteria | Mapping[str, Any]) -> list[SearchMatch]:
        """Search the tree with multiple independent criteria.

        Args:
            criteria: SearchCriteria, or a mapping with any of
                - path: exact escaped path
                - like: substring of the escaped path
                - keywords: substrings of the path or of a string value
                - regex: pattern searched in the escaped path

        Returns:
            List of SearchMatch(path, value). A node matching several
            criteria appears once per criterion.

        Example:
            >>> store.write('example.like.path', 'test')
            >>> store.has({'like': 'like'})
            [SearchMatch(path='example.like', value={'path': 'test'}),
             SearchMatch(path='example.like.path', value='test')]
        """
        matches = search_tree(self._data, criteria, strict=self._raise_on_error)
        return [SearchMatch(m.path, _detached(m.value)) for m in matches]
