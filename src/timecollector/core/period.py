"""
Signed durations and the compact duration literal ("1d 3h 6m", "-20m").
"""
import datetime
import functools

from timecollector.core.utils import UNITS, UNIT_MILLIS


DIGITS = '0123456789'
MAX_GROUPS = len(UNITS)


@functools.total_ordering
class SignedDuration(object):
    """A signed number of milliseconds.

    Durations are immutable values: equality, hashing and ordering all go
    through the millisecond count, so they can be used as dict keys and
    sorted freely.  Months are always 30 days and years 12 such months.
    """

    __slots__ = ('_millis', )

    ZERO = None  # set below

    def __init__(self, millis):
        if millis is None:
            raise ValueError('cannot construct a duration from None')
        if not isinstance(millis, int) or isinstance(millis, bool):
            raise ValueError('duration must be a whole number of milliseconds: %r'
                             % (millis, ))
        self._millis = millis

    @property
    def millis(self):
        return self._millis

    @classmethod
    def from_string(cls, text):
        """Parse a compound duration literal.

        The literal is an optional leading minus followed by one to six
        ``<digits><unit>`` groups, in any order, with units ``y M d h m s``.
        Spaces are ignored.  The minus applies to the whole literal.

            >>> print(SignedDuration.from_string('1h 30m'))
            1h 30m
            >>> SignedDuration.from_string('-3h').millis
            -10800000

        """
        negative = False
        digits = ''
        groups = 0
        total = 0
        seen_anything = False
        for ch in text:
            if ch == ' ':
                continue
            if ch == '-':
                if seen_anything:
                    raise ValueError('bad duration: %r (misplaced "-")' % text)
                negative = True
                seen_anything = True
                continue
            seen_anything = True
            if ch in DIGITS:
                digits += ch
                continue
            if ch not in UNIT_MILLIS:
                raise ValueError('bad duration: %r (unexpected unit %r)'
                                 % (text, ch))
            if not digits:
                raise ValueError('bad duration: %r (missing magnitude before %r)'
                                 % (text, ch))
            total += int(digits) * UNIT_MILLIS[ch]
            digits = ''
            groups += 1
        if digits:
            raise ValueError('bad duration: %r (missing unit after %r)'
                             % (text, digits))
        if not 1 <= groups <= MAX_GROUPS:
            raise ValueError('bad duration: %r (expected 1 to %d groups)'
                             % (text, MAX_GROUPS))
        return cls(-total if negative else total)

    @classmethod
    def from_timedelta(cls, delta):
        """Convert a datetime.timedelta, rounding down to whole milliseconds."""
        return cls((delta.days * 86400 + delta.seconds) * 1000
                   + delta.microseconds // 1000)

    @classmethod
    def between(cls, start, finish):
        """Return the duration from ``start`` to ``finish``.

        Both are datetime.datetime instances; aware datetimes in different
        timezones are compared as absolute instants.
        """
        if start is None:
            raise ValueError('start instant must not be None')
        if finish is None:
            raise ValueError('end instant must not be None')
        return cls.from_timedelta(finish - start)

    @classmethod
    def since(cls, start, now=None):
        """Return the duration from ``start`` until now.

        ``now`` defaults to the current time in the timezone of ``start``
        (local naive time if ``start`` is naive).
        """
        if start is None:
            raise ValueError('start instant must not be None')
        if now is None:
            now = datetime.datetime.now(start.tzinfo)
        return cls.between(start, now)

    def as_timedelta(self):
        return datetime.timedelta(milliseconds=self._millis)

    def plus(self, other):
        """Add two durations.

        Adding None returns this very duration.
        """
        if other is None:
            return self
        return SignedDuration(self._millis + other._millis)

    def __add__(self, other):
        if other is not None and not isinstance(other, SignedDuration):
            return NotImplemented
        return self.plus(other)

    def __neg__(self):
        return SignedDuration(-self._millis)

    def __abs__(self):
        return SignedDuration(abs(self._millis))

    def __bool__(self):
        return self._millis != 0

    def __eq__(self, other):
        if not isinstance(other, SignedDuration):
            return NotImplemented
        return self._millis == other._millis

    def __lt__(self, other):
        if not isinstance(other, SignedDuration):
            return NotImplemented
        return self._millis < other._millis

    def __hash__(self):
        return hash(self._millis)

    def __str__(self):
        if self._millis == 0:
            return '0m'
        rest = abs(self._millis)
        parts = []
        for unit, size in UNITS:
            count, rest = divmod(rest, size)
            if count:
                parts.append('%d%s' % (count, unit))
        # Whatever is left is below one second and is not rendered.
        text = ' '.join(parts)
        if self._millis < 0:
            text = '-' + text
        return text

    def __repr__(self):
        return '%s(%d)' % (self.__class__.__name__, self._millis)


SignedDuration.ZERO = SignedDuration(0)


def sum_durations(durations, start=SignedDuration.ZERO):
    """Add up an iterable of durations (None items are skipped)."""
    return functools.reduce(SignedDuration.plus, durations, start)
