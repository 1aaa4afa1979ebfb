# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""DotPath exceptions."""

from __future__ import annotations


class DotPathError(Exception):
    """Base exception for DotPath errors."""

    pass


class InvalidArgumentError(DotPathError, TypeError):
    """Raised when a tree or path argument has the wrong type."""

    pass


class InvalidPathError(InvalidArgumentError):
    """Raised when the tokenizer receives something that is not a path string."""

    pass


class InvalidCriteriaError(InvalidArgumentError):
    """Raised when search criteria are not a mapping or carry unknown keys."""

    pass
