"""Per-worker file name matchers.

Compiled expressions are immutable and shared by every worker. The
matcher objects built from them carry per-call scratch state and are
therefore private to one worker thread. MatcherCache hands each thread
its own matchers, created lazily on first use.
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass

from scopectl.core.patterns import CompiledPatternSet


class FileNameMatcher:
    """Mutable matcher bound to one compiled expression.

    Remembers the last name it was asked about so that repeated queries
    for the same name (a file checked for counting and again for
    reporting) skip the regular expression. This scratch state is why
    instances must not be shared between threads.

    Args:
        expression: Compiled, shared expression.
    """

    __slots__ = ("_expression", "_last_name", "_last_result")

    def __init__(self, expression: re.Pattern[str]) -> None:
        self._expression = expression
        self._last_name: str | None = None
        self._last_result = False

    @property
    def expression(self) -> re.Pattern[str]:
        return self._expression

    def matches(self, name: str) -> bool:
        """Check whether the whole name matches the expression."""
        if name != self._last_name:
            self._last_result = self._expression.fullmatch(name) is not None
            self._last_name = name
        return self._last_result


@dataclass(frozen=True, slots=True)
class WorkerMatchers:
    """Handle holding one worker's private matchers.

    Attributes:
        inclusion: Matcher for plain patterns, or None to match all names.
        exclusion: Matcher for negated patterns, or None to match no names.
    """

    inclusion: FileNameMatcher | None
    exclusion: FileNameMatcher | None

    @classmethod
    def from_patterns(cls, patterns: CompiledPatternSet) -> WorkerMatchers:
        inclusion = patterns.inclusion
        exclusion = patterns.exclusion
        return cls(
            inclusion=FileNameMatcher(inclusion) if inclusion is not None else None,
            exclusion=FileNameMatcher(exclusion) if exclusion is not None else None,
        )

    def matches(self, name: str) -> bool:
        """Apply the inclusion test, then the exclusion veto.

        Args:
            name: File name (last path segment).

        Returns:
            True if the name passes both matchers.
        """
        if self.inclusion is not None and not self.inclusion.matches(name):
            return False
        return not (self.exclusion is not None and self.exclusion.matches(name))


class MatcherCache:
    """Lazily creates one WorkerMatchers per calling thread.

    The compiled pattern set is read-only and shared. Each thread gets a
    private WorkerMatchers on first access and the same instance on
    every later access, so no locking is needed.

    Args:
        patterns: Shared compiled pattern set.
    """

    def __init__(self, patterns: CompiledPatternSet) -> None:
        self._patterns = patterns
        self._local = threading.local()

    @property
    def patterns(self) -> CompiledPatternSet:
        return self._patterns

    def get(self) -> WorkerMatchers:
        """Return the calling thread's matchers, creating them if needed."""
        matchers: WorkerMatchers | None = getattr(self._local, "matchers", None)
        if matchers is None:
            matchers = WorkerMatchers.from_patterns(self._patterns)
            self._local.matchers = matchers
        return matchers
