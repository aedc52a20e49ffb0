"""Regular-expression filters for report entries.

A filter holds two sets of compiled regular expressions. A value passes
the filter if it matches any expression in the ``matches`` set (or that set
is empty) and matches none of the expressions in the ``excludes`` set.
Patterns are searched for anywhere in the value, so anchor them with ``^``
and ``$`` where a whole-value match is wanted.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import re
from re import Pattern

from loguru import logger

from buildreport.core.errors import InvalidPatternError


class Filter:
    """Immutable inclusion/exclusion predicate over strings."""

    __slots__ = ("_matches", "_excludes")

    def __init__(
        self,
        matches: Iterable[Pattern] = (),
        excludes: Iterable[Pattern] = (),
    ):
        self._matches: tuple[Pattern, ...] = tuple(matches)
        self._excludes: tuple[Pattern, ...] = tuple(excludes)

    @classmethod
    def from_patterns(
        cls, patterns: Mapping[str, bool]
    ) -> tuple[Filter, list[InvalidPatternError]]:
        """Build a filter from a mapping of pattern to polarity.

        Patterns mapped to True must match, patterns mapped to False must
        not. Every entry is compiled; a pattern that fails to compile is
        reported in the returned error list and the rest are still used.

        Args:
            patterns: Mapping of regular expression to polarity

        Returns:
            Tuple of (filter, errors for the patterns that did not compile)
        """
        matches: list[Pattern] = []
        excludes: list[Pattern] = []
        errors: list[InvalidPatternError] = []

        for pattern, must_match in patterns.items():
            try:
                regex = re.compile(pattern)
            except re.error as e:
                logger.debug(f"Rejected filter pattern {pattern!r}: {e}")
                errors.append(InvalidPatternError(pattern, str(e)))
                continue

            if must_match:
                matches.append(regex)
            else:
                excludes.append(regex)

        return cls(matches, excludes), errors

    @property
    def matches(self) -> tuple[Pattern, ...]:
        return self._matches

    @property
    def excludes(self) -> tuple[Pattern, ...]:
        return self._excludes

    def has_filters(self) -> bool:
        """Return True if any inclusion or exclusion pattern is present."""
        return bool(self._matches or self._excludes)

    def passes(self, value: str) -> bool:
        """Check whether the value satisfies the filter.

        Args:
            value: The string to check

        Returns:
            True if the value matches any inclusion pattern (or there are
            none) and matches no exclusion pattern
        """
        if self._matches and not any(regex.search(value) for regex in self._matches):
            return False

        for regex in self._excludes:
            if regex.search(value):
                return False

        return True

    def __repr__(self) -> str:
        matches = [regex.pattern for regex in self._matches]
        excludes = [regex.pattern for regex in self._excludes]
        return f"Filter(matches={matches!r}, excludes={excludes!r})"


NO_FILTER = Filter()
