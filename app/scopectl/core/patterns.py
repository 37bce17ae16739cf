"""File name pattern compilation.

Compiles user supplied glob patterns into two independent regular
expressions: an inclusion expression built from the plain patterns and
an exclusion expression built from the negated ones.

Glob syntax:
- ``*`` matches any run of characters, ``?`` exactly one character
- ``[abc]``, ``[a-z]`` and ``[!abc]`` match one character of a class
- ``\\`` escapes the following character
- ``!`` in front of a pattern moves it to the exclusion set
"""

import logging
import os
import re
from collections.abc import Sequence
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Prefix that turns a pattern into an exclusion pattern
PATTERN_NEGATOR = "!"

# Probed once: on case-insensitive hosts normcase folds "Temp" to "temp"
IS_CASE_SENSITIVE_FILESYSTEM: bool = os.path.normcase("Temp") != os.path.normcase("temp")


class PatternSyntaxError(ValueError):
    """Raised when a file name pattern is not valid glob syntax.

    Attributes:
        pattern: The offending pattern.
        reason: Short description of the problem.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid file name pattern {pattern!r}: {reason}")


@dataclass(frozen=True, slots=True)
class CompiledPatternSet:
    """Immutable pair of compiled file name matchers.

    An absent inclusion expression matches every name; an absent
    exclusion expression matches none.

    Attributes:
        inclusion: Expression built from plain patterns, or None.
        exclusion: Expression built from negated patterns, or None.
        case_sensitive: Case sensitivity fixed at compile time.
        inclusion_patterns: Source patterns of the inclusion expression.
        exclusion_patterns: Source patterns of the exclusion expression.
    """

    inclusion: re.Pattern[str] | None = None
    exclusion: re.Pattern[str] | None = None
    case_sensitive: bool = IS_CASE_SENSITIVE_FILESYSTEM
    inclusion_patterns: tuple[str, ...] = ()
    exclusion_patterns: tuple[str, ...] = ()

    @property
    def matches_all(self) -> bool:
        """True when neither expression is present."""
        return self.inclusion is None and self.exclusion is None


def split_patterns(patterns: Sequence[str]) -> tuple[list[str], list[str]]:
    """Partition patterns into inclusion and exclusion buckets.

    The marker is recognized after leading whitespace. Negated patterns
    lose their marker and surrounding whitespace; plain patterns are
    kept verbatim. Empty results are dropped.

    Args:
        patterns: Raw file name patterns.

    Returns:
        Tuple of (inclusion patterns, exclusion patterns).
    """
    inclusion: list[str] = []
    exclusion: list[str] = []

    for pattern in patterns:
        leading = pattern.lstrip()
        if leading.startswith(PATTERN_NEGATOR):
            stripped = leading[len(PATTERN_NEGATOR) :].strip()
            if stripped:
                exclusion.append(stripped)
            else:
                logger.debug("Dropping empty negated pattern: %r", pattern)
        elif pattern:
            inclusion.append(pattern)
        else:
            logger.debug("Dropping empty pattern")

    return inclusion, exclusion


def translate_glob(pattern: str) -> str:
    """Translate a single glob pattern into a regular expression.

    The result matches a whole file name when used with fullmatch().

    Args:
        pattern: Glob pattern without negation marker.

    Returns:
        Regular expression source.

    Raises:
        PatternSyntaxError: On a trailing escape or an unterminated class.
    """
    parts: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]
        i += 1
        if char == "\\":
            if i >= n:
                raise PatternSyntaxError(pattern, "dangling escape at end of pattern")
            parts.append(re.escape(pattern[i]))
            i += 1
        elif char == "*":
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif char == "?":
            parts.append(".")
        elif char == "[":
            end = _find_class_end(pattern, i)
            if end < 0:
                raise PatternSyntaxError(pattern, "unterminated character class")
            parts.append(_translate_class(pattern[i:end]))
            i = end + 1
        else:
            parts.append(re.escape(char))

    return "".join(parts)


def _find_class_end(pattern: str, start: int) -> int:
    """Return the index of the "]" closing a class opened before start, or -1."""
    j = start
    if j < len(pattern) and pattern[j] == "!":
        j += 1
    # A leading "]" is a literal member of the class
    if j < len(pattern) and pattern[j] == "]":
        j += 1
    return pattern.find("]", j)


def _translate_class(body: str) -> str:
    negate = body.startswith("!")
    if negate:
        body = body[1:]
    members = "".join(ch if ch == "-" else re.escape(ch) for ch in body)
    return f"[^{members}]" if negate else f"[{members}]"


def _compile_bucket(patterns: list[str], case_sensitive: bool) -> re.Pattern[str] | None:
    """Compile a bucket of glob patterns into one alternation."""
    if not patterns:
        return None

    flags = re.DOTALL if case_sensitive else re.DOTALL | re.IGNORECASE
    sources: list[str] = []
    for pattern in patterns:
        source = translate_glob(pattern)
        try:
            re.compile(source, flags)
        except re.error as e:
            raise PatternSyntaxError(pattern, str(e)) from e
        sources.append(f"(?:{source})")

    return re.compile("|".join(sources), flags)


def compile_patterns(
    patterns: Sequence[str] | None,
    case_sensitive: bool = IS_CASE_SENSITIVE_FILESYSTEM,
) -> CompiledPatternSet:
    """Compile file name patterns into inclusion and exclusion matchers.

    Construction is all-or-nothing: a single malformed pattern fails the
    whole set.

    Args:
        patterns: Raw patterns, or None to match every file name.
        case_sensitive: Whether matching distinguishes letter case.

    Returns:
        Immutable CompiledPatternSet.

    Raises:
        PatternSyntaxError: If any pattern is malformed.
    """
    if not patterns:
        return CompiledPatternSet(case_sensitive=case_sensitive)

    inclusion, exclusion = split_patterns(patterns)
    return CompiledPatternSet(
        inclusion=_compile_bucket(inclusion, case_sensitive),
        exclusion=_compile_bucket(exclusion, case_sensitive),
        case_sensitive=case_sensitive,
        inclusion_patterns=tuple(inclusion),
        exclusion_patterns=tuple(exclusion),
    )
