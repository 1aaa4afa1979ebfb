# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Multi-criteria search over a nested tree.

Four independent criteria are recognized:

- path: exact escaped path, resolved like read_path
- like: substring of the generated escaped path
- keywords: substrings matched against the path, or against the value
  when the value is a string
- regex: pattern searched in the generated escaped path

like, keywords and regex are tested at every key of every depth, branch
nodes included, in pre-order. Each satisfied criterion adds its own match,
so a node can appear more than once in the result.

Example:
    >>> tree = {'example': {'like': {'path': 'test'}}}
    >>> [m.path for m in search_tree(tree, {'like': 'like'})]
    ['example.like', 'example.like.path']
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any, Iterator, NamedTuple

from .exceptions import InvalidCriteriaError
from .paths import SEPARATOR, escape_key
from .traversal import MISSING, read_path

logger = logging.getLogger(__name__)


class SearchMatch(NamedTuple):
    """A single search hit: escaped path and the value found there."""

    path: str
    value: Any


@dataclass
class SearchCriteria:
    """Criteria for search_tree.

    Falsy fields are not applied. keywords accepts a single string as a
    one-keyword list; regex accepts a string or a compiled pattern.
    """

    path: str | None = None
    like: str | None = None
    keywords: Sequence[str] | None = None
    regex: str | re.Pattern[str] | None = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check field types and normalize keywords and regex.

        Raises:
            InvalidCriteriaError: If a field has the wrong type or regex
                does not compile.
        """
        for name in ('path', 'like'):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise InvalidCriteriaError(
                    f"{name} must be str, not {type(value).__name__}"
                )
        if isinstance(self.keywords, str):
            self.keywords = [self.keywords]
        elif self.keywords is not None and (
            not isinstance(self.keywords, Sequence)
            or not all(isinstance(kw, str) for kw in self.keywords)
        ):
            raise InvalidCriteriaError("keywords must be str or a sequence of str")
        if isinstance(self.regex, str):
            try:
                self.regex = re.compile(self.regex)
            except re.error as exc:
                raise InvalidCriteriaError(f"Invalid regex: {exc}") from exc
        elif self.regex is not None and not isinstance(self.regex, re.Pattern):
            raise InvalidCriteriaError(
                f"regex must be str or compiled pattern, not {type(self.regex).__name__}"
            )

    @classmethod
    def from_value(
        cls, criteria: SearchCriteria | Mapping[str, Any], strict: bool = True
    ) -> SearchCriteria:
        """Build criteria from a SearchCriteria or a plain mapping.

        Args:
            criteria: The criteria to normalize.
            strict: If True, unknown keys raise. Otherwise they are logged
                and ignored.

        Raises:
            InvalidCriteriaError: If criteria is not a mapping, has unknown
                keys in strict mode, or has a field of the wrong type.
        """
        if isinstance(criteria, cls):
            criteria.validate()
            return criteria
        if not isinstance(criteria, Mapping):
            raise InvalidCriteriaError(
                f"criteria must be a mapping, not {type(criteria).__name__}"
            )

        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in criteria if k not in known)
        if unknown:
            if strict:
                raise InvalidCriteriaError(
                    f"Unknown search criteria: {', '.join(unknown)}"
                )
            logger.warning("Ignoring unknown search criteria: %s", ', '.join(unknown))

        return cls(**{k: v for k, v in criteria.items() if k in known})

    @property
    def scans_tree(self) -> bool:
        """True if any criterion needs the full traversal."""
        return bool(self.like or self.keywords or self.regex)

    def match_like(self, path: str) -> bool:
        return bool(self.like) and self.like in path

    def match_keywords(self, path: str, value: Any) -> bool:
        if not self.keywords:
            return False
        return any(
            kw in path or (isinstance(value, str) and kw in value)
            for kw in self.keywords
        )

    def match_regex(self, path: str) -> bool:
        return self.regex is not None and self.regex.search(path) is not None


def iter_tree(tree: Mapping, prefix: str = '') -> Iterator[tuple[str, Any]]:
    """Yield (escaped_path, value) for every key at every depth, pre-order."""
    for key, value in tree.items():
        escaped = escape_key(str(key))
        path = f"{prefix}{SEPARATOR}{escaped}" if prefix else escaped
        yield path, value
        if isinstance(value, Mapping):
            yield from iter_tree(value, path)


def search_tree(
    tree: Mapping,
    criteria: SearchCriteria | Mapping[str, Any],
    strict: bool = True,
) -> list[SearchMatch]:
    """Search tree with every criterion applied independently.

    Args:
        tree: Nested mapping to search.
        criteria: SearchCriteria or mapping with path/like/keywords/regex.
        strict: Passed to SearchCriteria.from_value.

    Returns:
        Matches in order: the path hit first (if any), then the traversal
        hits. No deduplication is performed.

    Raises:
        InvalidCriteriaError: See SearchCriteria.from_value.
    """
    crit = SearchCriteria.from_value(criteria, strict=strict)
    results: list[SearchMatch] = []

    if crit.path:
        value = read_path(tree, crit.path)
        if value is not MISSING:
            results.append(SearchMatch(crit.path, value))

    if crit.scans_tree:
        for path, value in iter_tree(tree):
            if crit.match_like(path):
                results.append(SearchMatch(path, value))
            if crit.match_keywords(path, value):
                results.append(SearchMatch(path, value))
            if crit.match_regex(path):
                results.append(SearchMatch(path, value))

    return results
