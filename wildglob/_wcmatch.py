"""Handle unit matching."""
from . import util

STAR = ('*', ord('*'))
QMARK = ('?', ord('?'))
DOT = ('.', ord('.'))


class WcCompare(object):
    """Compare a pattern unit with a subject unit."""

    __slots__ = ("case_sensitive", "is_bytes", "qmark", "dot")

    def __init__(self, case_sensitive, ptype):
        """Initialize."""

        self.case_sensitive = case_sensitive
        self.is_bytes = ptype == util.BYTES
        self.qmark = QMARK[ptype]
        self.dot = DOT[ptype]

    def __call__(self, pattern, subject):
        """
        Compare units.

        `?` matches any unit except `.`. When case is ignored, only ASCII
        letters are folded; everything else must be an exact match.
        """

        if pattern == self.qmark:
            return subject != self.dot

        if pattern == subject:
            return True
        elif self.case_sensitive:
            return False

        if not self.is_bytes:
            pattern = ord(pattern)
            subject = ord(subject)
        return util.is_alpha(pattern) and util.is_alpha(subject) and util.to_lower(pattern) == util.to_lower(subject)


def glob(pattern, pit, pend, subject, sit, send, compare, star):
    """
    Match `pattern[pit:pend]` against `subject[sit:send]`.

    Literal runs are consumed in lockstep. When a `*` is hit, the rest of the
    pattern is tried at the current subject position first, and on failure
    the `*` absorbs one more subject unit and we try again. Recursion only
    happens once per run of `*`, so the depth is bounded by the pattern.
    """

    while True:
        while pit < pend and sit < send:
            p = pattern[pit]
            if p == star or not compare(p, subject[sit]):
                break
            pit += 1
            sit += 1

        if pit == pend:
            return sit == send

        if pattern[pit] != star:
            return False

        # Adjacent stars behave as one.
        nxt = pit + 1
        while nxt < pend and pattern[nxt] == star:
            nxt += 1

        # Trailing star consumes whatever is left.
        if nxt == pend:
            return True

        if glob(pattern, nxt, pend, subject, sit, send, compare, star):
            return True

        if sit == send:
            return False

        sit += 1


class _Match:
    """Match the given subject."""

    def __init__(self, subject, pattern, case_sensitive, ptype=None):
        """Initialize."""

        self.subject = util.to_view(subject)
        self.pattern = pattern
        self.case_sensitive = case_sensitive
        self.ptype = pattern.ptype if ptype is None else ptype

    def match(self):
        """Match."""

        subject = self.subject
        pattern = self.pattern

        ptype = self.ptype
        if ptype is None:
            ptype = util.UNICODE if subject.ptype is None else subject.ptype
        elif subject.ptype is not None and subject.ptype != ptype:
            raise TypeError(
                "The subject and pattern should be of the same unit type, not {} and {}".format(
                    type(subject.obj), type(pattern.obj)
                )
            )

        return glob(
            pattern.obj, pattern.start, pattern.end,
            subject.obj, subject.start, subject.end,
            WcCompare(self.case_sensitive, ptype),
            STAR[ptype]
        )
