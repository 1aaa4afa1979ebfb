# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""DotStore package - Stateful nested tree container.

This package provides the DotStore class, which owns one nested tree and
exposes escaped dotted-path read, write, existence and search operations.

The package is organized into:
- core: Main DotStore class with path access, whole-tree operations and search

Example:
    >>> from genro_dotpath import DotStore
    >>> store = DotStore()
    >>> store.write('config.name', 'MyApp')
    >>> store['config.name']
    'MyApp'
"""

from .core import DotStore

__all__ = ["DotStore"]
