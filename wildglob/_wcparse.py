"""
Wild Card Match.

A custom implementation of `fnmatch`.

Licensed under MIT
Copyright (c) 2018 - 2020 Isaac Muse <isaacmuse@gmail.com>

Permission is hereby granted, free of charge, to any person obtaining a copy of this software and associated
documentation files (the "Software"), to deal in the Software without restriction, including without limitation
the rights to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies of the Software,
and to permit persons to whom the Software is furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all copies or substantial portions
of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED
TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL
THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF
CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
IN THE SOFTWARE.
"""
import re
import array
import mmap
import functools
import copyreg
from . import util
from . import _wcmatch

UNICODE = util.UNICODE
BYTES = util.BYTES

# Maximum number of star runs allowed in a pattern.
# Each run costs one level of recursion when matching.
STAR_LIMIT = 256

TERMINATOR = ('\0', 0)

STAR_SYM = (
    '*',
    b'*'
)
QMARK_SYM = (
    '?',
    b'?'
)

CASE = 0x0001
IGNORECASE = 0x0002

FLAG_MASK = (
    CASE |
    IGNORECASE
)
CASE_FLAGS = IGNORECASE | CASE

# Pieces to construct a regular expression

# Question Mark
_QMARK = (r'[^.]', br'[^.]')
# Star
_STAR = (r'.*?', br'.*?')
# Whole pattern
_PATTERN = (r'^(?s%s:%s)\Z', br'^(?s%s:%s)\Z')
# Inline case flags; `str` patterns also need ASCII only folding
_NO_CASE = ('ai', b'i')


class PatternLimitException(Exception):
    """Pattern limit exception."""


def get_case(flags):
    """Parse flags for case sensitivity settings."""

    # Case sensitive unless only `IGNORECASE` is requested
    return (flags & CASE_FLAGS) != IGNORECASE


def count_stars(pattern):
    """Count runs of `*` in the pattern."""

    view = pattern.to_view()
    if view.ptype is None:
        return 0

    star = _wcmatch.STAR[view.ptype]
    count = 0
    last = False
    for unit in view:
        is_star = unit == star
        if is_star and not last:
            count += 1
        last = is_star
    return count


def is_magic(pattern):
    """Check if the pattern contains wildcards."""

    view = util.to_view(pattern)
    if view.ptype is None:
        return False

    magic = (_wcmatch.STAR[view.ptype], _wcmatch.QMARK[view.ptype])
    return any(unit in magic for unit in view)


def translate(pattern, flags, limit=STAR_LIMIT):
    """Translate pattern to a regular expression."""

    if isinstance(pattern, FixedPattern):
        pattern = pattern.to_view()
    if isinstance(pattern, util.SequenceView) and isinstance(pattern.obj, (str, bytes)):
        pattern = pattern.obj[pattern.start:pattern.end]

    pattern = util.to_sequence(pattern)
    if not isinstance(pattern, (str, bytes)):
        raise TypeError("Only str and bytes patterns can be translated, not {}".format(type(pattern)))

    ptype = BYTES if isinstance(pattern, bytes) else UNICODE
    _check_limit(FixedPattern(pattern), limit)

    star = STAR_SYM[ptype]
    qmark = QMARK_SYM[ptype]
    empty = pattern[0:0]

    result = []
    last = None
    for i in range(len(pattern)):
        c = pattern[i:i + 1]
        if c == star:
            if last != star:
                result.append(_STAR[ptype])
        elif c == qmark:
            result.append(_QMARK[ptype])
        else:
            result.append(re.escape(c))
        last = c

    case = empty if get_case(flags) else _NO_CASE[ptype]
    return _PATTERN[ptype] % (case, empty.join(result))


def compile(pattern, flags, limit=STAR_LIMIT):  # noqa A001
    """Compile pattern."""

    if not isinstance(pattern, FixedPattern):
        pattern = FixedPattern(pattern)
    _check_limit(pattern, limit)
    return _compile(pattern, get_case(flags & FLAG_MASK))


def _is_byte_buffer(obj):
    """Check if object is a buffer of single byte units."""

    if isinstance(obj, memoryview):
        return obj.format == 'B' and obj.ndim == 1
    elif isinstance(obj, array.array):
        return obj.typecode == 'B'
    return isinstance(obj, (bytearray, mmap.mmap))


def _check_limit(pattern, limit):
    """Verify the pattern does not exceed the star limit."""

    count = count_stars(pattern)
    if 0 < limit < count:
        raise PatternLimitException("Pattern limit exceeded the limit of {:d}".format(limit))


@functools.lru_cache(maxsize=256, typed=True)
def _compile(pattern, case_sensitive):
    """Compile the pattern to a matcher."""

    return WcGlob(pattern, case_sensitive)


class FixedPattern(util.Immutable):
    """
    Pattern carried as a fixed sequence of units.

    Units are copied so that the pattern cannot change underneath a compiled
    matcher. If `terminated` is enabled, the final unit must be a NUL
    terminator, which is not considered part of the pattern.
    """

    __slots__ = ("_units", "_size", "_ptype", "_hash")

    def __init__(self, pattern, terminated=False):
        """Initialize."""

        view = util.to_view(pattern)
        obj = view.obj
        if isinstance(obj, (str, bytes)) and view.start == 0 and view.end == len(obj):
            units = obj
        elif isinstance(obj, (str, bytes)):
            units = obj[view.start:view.end]
        elif _is_byte_buffer(obj):
            units = bytes(view)
        elif isinstance(obj, array.array) and view.ptype == UNICODE:
            units = ''.join(view)
        else:
            units = tuple(view)

        size = len(units)
        if terminated:
            ptype = view.ptype
            if not size or ptype is None or units[-1] != TERMINATOR[ptype]:
                raise ValueError("Terminated patterns must end with a NUL unit")
            size -= 1

        super(FixedPattern, self).__init__(
            _units=units,
            _size=size,
            _ptype=view.ptype,
            _hash=hash((type(self), type(units), units, size))
        )

    @property
    def ptype(self):
        """Unit type."""

        return self._ptype

    def __len__(self):
        """Length."""

        return self._size

    def __hash__(self):
        """Hash."""

        return self._hash

    def __eq__(self, other):
        """Equal."""

        return (
            isinstance(other, FixedPattern) and
            type(self._units) is type(other._units) and
            self._units == other._units and
            self._size == other._size
        )

    def __ne__(self, other):
        """Not equal."""

        return not self == other

    def to_view(self):
        """Get a read-only view of the pattern."""

        return util.SequenceView(self._units, 0, self._size)


class WcGlob(util.Immutable):
    """Wildcard match object."""

    __slots__ = ("_pattern", "_case_sensitive", "_hash")

    def __init__(self, pattern, case_sensitive=True):
        """Initialization."""

        super(WcGlob, self).__init__(
            _pattern=pattern,
            _case_sensitive=case_sensitive,
            _hash=hash(
                (
                    type(self),
                    type(pattern), pattern,
                    type(case_sensitive), case_sensitive
                )
            )
        )

    def __hash__(self):
        """Hash."""

        return self._hash

    def __len__(self):
        """Length."""

        return len(self._pattern)

    def __eq__(self, other):
        """Equal."""

        return (
            isinstance(other, WcGlob) and
            self._pattern == other._pattern and
            self._case_sensitive == other._case_sensitive
        )

    def __ne__(self, other):
        """Equal."""

        return (
            not isinstance(other, WcGlob) or
            self._pattern != other._pattern or
            self._case_sensitive != other._case_sensitive
        )

    def match(self, subject):
        """Match subject."""

        return _wcmatch._Match(
            subject,
            self._pattern.to_view(),
            self._case_sensitive,
            self._pattern.ptype
        ).match()

    def filter(self, subjects):
        """Filter subjects."""

        return [subject for subject in subjects if self.match(subject)]


def _pickle_pattern(p):
    units = p._units
    if p._size != len(units):
        return FixedPattern, (units, True)
    return FixedPattern, (units,)


def _pickle(p):
    return WcGlob, (p._pattern, p._case_sensitive)


copyreg.pickle(FixedPattern, _pickle_pattern)
copyreg.pickle(WcGlob, _pickle)
