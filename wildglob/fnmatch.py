# noqa: A005
"""
Wild Card Match.

A wildcard matcher supporting `?` and `*` over arbitrary unit sequences.
"""
from __future__ import annotations
from . import _wcparse
from . import util
import copyreg
from .types import WcUnits
from typing import Any, Iterable, Union

__all__ = (
    "CASE", "IGNORECASE", "C", "I",
    "STAR_LIMIT", "PatternLimitException",
    "translate", "fnmatch", "filter", "is_magic", "compile",
    "WcMatcher", "FixedPattern", "SequenceView"
)

C = CASE = _wcparse.CASE
I = IGNORECASE = _wcparse.IGNORECASE

FLAG_MASK = (
    CASE |
    IGNORECASE
)

STAR_LIMIT = _wcparse.STAR_LIMIT

PatternLimitException = _wcparse.PatternLimitException
FixedPattern = _wcparse.FixedPattern
SequenceView = util.SequenceView

Pattern = Union[WcUnits, SequenceView, FixedPattern]
Subject = Union[WcUnits, SequenceView]


class WcMatcher(util.Immutable):
    """Pre-compiled matcher object."""

    __slots__ = ("_matcher",)

    def __init__(self, matcher: _wcparse.WcGlob) -> None:
        """Initialize."""

        super(WcMatcher, self).__init__(_matcher=matcher)

    def __hash__(self) -> int:
        """Hash."""

        return hash((type(self), self._matcher))

    def __eq__(self, other: Any) -> bool:
        """Equal."""

        return isinstance(other, WcMatcher) and self._matcher == other._matcher

    def __ne__(self, other: Any) -> bool:
        """Not equal."""

        return not self == other

    def match(self, subject: Subject) -> bool:
        """Match subject."""

        return self._matcher.match(subject)

    def filter(self, subjects: Iterable[Subject]) -> list[Subject]:
        """Filter subjects."""

        return self._matcher.filter(subjects)


copyreg.pickle(WcMatcher, lambda p: (WcMatcher, (p._matcher,)))


def compile(  # noqa: A001
    pattern: Pattern,
    flags: int = 0,
    limit: int = STAR_LIMIT
) -> WcMatcher:
    """
    Pre-compile a matcher object.

    The pattern is fixed at this point, so repeated matching only needs to
    look at the subject. Like `fnmatch`, the matcher is case sensitive unless
    `IGNORECASE` is given.
    """

    return WcMatcher(_wcparse.compile(pattern, _flag_transform(flags), limit))


def _flag_transform(flags: int) -> int:
    """Transform flags to defaults."""

    return (flags & FLAG_MASK)


def translate(
    pattern: Pattern,
    *,
    flags: int = 0,
    limit: int = STAR_LIMIT
) -> str | bytes:
    """
    Translate pattern to a regular expression.

    The pattern must be `str` or `bytes`, or a view or fixed pattern backed by one.
    The expression is anchored at both ends, so `re.match` gives the same answer as `fnmatch`.
    """

    return _wcparse.translate(pattern, _flag_transform(flags), limit)


def fnmatch(
    subject: Subject,
    pattern: Pattern,
    *,
    flags: int = 0,
    limit: int = STAR_LIMIT
) -> bool:
    """
    Check if subject matches pattern.

    Both may be any string-like object or a `SequenceView` that restricts
    matching to a region of a larger sequence. Matching is case sensitive
    unless `IGNORECASE` is set, in which case only ASCII letters are folded.
    """

    return _wcparse.compile(pattern, _flag_transform(flags), limit).match(subject)


def filter(  # noqa A001
    subjects: Iterable[Subject],
    pattern: Pattern,
    *,
    flags: int = 0,
    limit: int = STAR_LIMIT
) -> list[Subject]:
    """Filter subjects using pattern."""

    return _wcparse.compile(pattern, _flag_transform(flags), limit).filter(subjects)


def is_magic(pattern: Pattern) -> bool:
    """Check if the pattern contains wildcards."""

    if isinstance(pattern, FixedPattern):
        pattern = pattern.to_view()
    return _wcparse.is_magic(pattern)
