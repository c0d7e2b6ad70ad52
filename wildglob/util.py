"""Compatibility module."""
import os
import array
import mmap
import typing
from collections import UserString
from . import types

UNICODE = 0
BYTES = 1

# Bit that separates `a` from `A` in ASCII.
LOWERCASE_BIT = ord('a') - ord('A')

_LOWER_A = ord('a')
_LOWER_Z = ord('z')

# Array type codes that hold characters instead of integers.
_ARRAY_CHARS = frozenset(('u', 'w'))


def to_lower(c: int) -> int:
    """Lower case an ASCII code."""

    return c | LOWERCASE_BIT


def is_alpha(c: int) -> bool:
    """
    Check if code is an ASCII letter.

    Only `A-Z` and `a-z` are recognized, anything else (including extended
    Latin) is treated as non-alphabetic.
    """

    c = to_lower(c)
    return _LOWER_A <= c <= _LOWER_Z


def to_sequence(obj: typing.Any) -> typing.Any:
    """
    Provide common interface for string-like objects.

    `UserString` is unwrapped and path-like objects are converted to `str` or `bytes`.
    """

    if isinstance(obj, UserString):
        obj = obj.data
    elif isinstance(obj, os.PathLike):
        obj = os.fspath(obj)
    return obj


def unit_type(obj: typing.Any, start: int = 0, end: typing.Optional[int] = None) -> typing.Optional[int]:
    """
    Get the unit type of a sequence.

    Returns `UNICODE` for character units, `BYTES` for integer code units,
    and `None` for an empty sequence of unknown type.
    """

    if isinstance(obj, str):
        return UNICODE
    elif isinstance(obj, (bytes, bytearray, memoryview, mmap.mmap)):
        return BYTES
    elif isinstance(obj, array.array):
        return UNICODE if obj.typecode in _ARRAY_CHARS else BYTES

    if end is None:
        end = len(obj)
    if start >= end:
        return None

    unit = obj[start]
    if isinstance(unit, str):
        return UNICODE
    elif isinstance(unit, int) and not isinstance(unit, bool):
        return BYTES
    raise TypeError("Units should be characters or integers, not {}".format(type(unit)))


class Immutable(object):
    """Immutable."""

    __slots__: typing.Tuple[typing.Any, ...] = tuple()

    def __init__(self, **kwargs: typing.Any) -> None:
        """Initialize."""

        for k, v in kwargs.items():
            super(Immutable, self).__setattr__(k, v)

    def __setattr__(self, name: str, value: typing.Any) -> None:  # pragma: no cover
        """Prevent mutability."""

        raise AttributeError('Class is immutable!')


class SequenceView(Immutable):
    """
    Read-only view of a sequence between a start and end position.

    No data is copied, the view simply records where matching should begin
    and where it should stop within the backing object.
    """

    __slots__ = ("obj", "start", "end", "ptype")

    def __init__(self, obj: types.Units, start: int = 0, end: typing.Optional[int] = None) -> None:
        """Initialize."""

        if isinstance(obj, SequenceView):
            base = obj.start
            size = len(obj)
            obj = obj.obj
        else:
            obj = to_sequence(obj)
            base = 0
            size = len(obj)

        if end is None:
            end = size

        if not 0 <= start <= end <= size:
            raise ValueError(
                "View positions should satisfy 0 <= start <= end <= {:d}, not {:d} and {:d}".format(size, start, end)
            )

        super(SequenceView, self).__init__(
            obj=obj,
            start=base + start,
            end=base + end,
            ptype=unit_type(obj, base + start, base + end)
        )

    def __len__(self) -> int:
        """Length."""

        return self.end - self.start

    def __iter__(self) -> typing.Iterator[typing.Any]:
        """Iterate units."""

        obj = self.obj
        for i in range(self.start, self.end):
            yield obj[i]

    def __repr__(self) -> str:  # pragma: no cover
        """Representation."""

        return "SequenceView({!r}, {:d}, {:d})".format(self.obj, self.start, self.end)


def to_view(obj: typing.Any) -> SequenceView:
    """Convert string-like objects to a view."""

    return obj if isinstance(obj, SequenceView) else SequenceView(obj)
