# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-DotPath - Escaped dot-notation access to nested trees.

A lightweight, zero-dependency library for reading, writing, flattening and
searching nested mappings with dotted paths, where '\\.' keeps a literal dot
inside a single key.
"""

import logging

__version__ = "0.1.0"

from .exceptions import (
    DotPathError,
    InvalidArgumentError,
    InvalidCriteriaError,
    InvalidPathError,
)
from .flatten import flatten, unflatten
from .paths import escape_key, join_path, split_path, unescape_key
from .search import SearchCriteria, SearchMatch, iter_tree, search_tree
from .store import DotStore
from .traversal import (
    MISSING,
    delete_path,
    has_path,
    read_path,
    search_path,
    write_path,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core classes
    "DotStore",
    "MISSING",
    # Paths
    "split_path",
    "join_path",
    "escape_key",
    "unescape_key",
    # Traversal
    "read_path",
    "write_path",
    "has_path",
    "search_path",
    "delete_path",
    # Transforms
    "flatten",
    "unflatten",
    # Search
    "SearchCriteria",
    "SearchMatch",
    "iter_tree",
    "search_tree",
    # Exceptions
    "DotPathError",
    "InvalidArgumentError",
    "InvalidPathError",
    "InvalidCriteriaError",
]
