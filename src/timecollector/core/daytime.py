import functools
import re

from timecollector.core.period import SignedDuration
from timecollector.core.utils import DAY, HOUR, MINUTE, SECOND


time_rx = re.compile(r'^(\d+):(\d+)(?::(\d+)(?:\.(\d+))?)?$', re.ASCII)


@functools.total_ordering
class WallClockTime(object):
    """A time of day, stored as milliseconds since midnight.

    Any integer is accepted and wrapped around into a single day, so
    ``WallClockTime(25 * HOUR)`` is 01:00.
    """

    __slots__ = ('_millis', )

    ZERO = None  # set below

    def __init__(self, millis):
        if not isinstance(millis, int) or isinstance(millis, bool):
            raise ValueError('time must be a whole number of milliseconds: %r'
                             % (millis, ))
        self._millis = millis % DAY

    @property
    def millis(self):
        return self._millis

    @classmethod
    def from_fields(cls, hours, minutes, seconds=0, millis=0):
        if not 0 <= hours <= 23:
            raise ValueError('hours must be in [0, 24): %r' % hours)
        if not 0 <= minutes <= 59:
            raise ValueError('minutes must be in [0, 60): %r' % minutes)
        if not 0 <= seconds <= 59:
            raise ValueError('seconds must be in [0, 60): %r' % seconds)
        if not 0 <= millis <= 999:
            raise ValueError('millis must be in [0, 1000): %r' % millis)
        return cls(hours * HOUR + minutes * MINUTE + seconds * SECOND + millis)

    @classmethod
    def from_string(cls, text):
        """Parse 'HH:MM', 'HH:MM:SS' or 'HH:MM:SS.mmm'.

            >>> print(WallClockTime.from_string('9:05'))
            09:05:00.000
            >>> print(WallClockTime.from_string('23:59:59.999'))
            23:59:59.999
            >>> WallClockTime.from_string('24:00')
            Traceback (most recent call last):
              ...
            ValueError: hours must be in [0, 24): 24

        """
        m = time_rx.match(text)
        if not m:
            raise ValueError('bad time: %r' % text)
        hours, minutes, seconds, millis = [int(g or 0) for g in m.groups()]
        return cls.from_fields(hours, minutes, seconds, millis)

    def diff(self, other):
        """Return the duration from this time to ``other``.

        Negative if ``other`` is earlier in the day; spans crossing
        midnight are not adjusted.
        """
        return SignedDuration(other._millis - self._millis)

    def __eq__(self, other):
        if not isinstance(other, WallClockTime):
            return NotImplemented
        return self._millis == other._millis

    def __lt__(self, other):
        if not isinstance(other, WallClockTime):
            return NotImplemented
        return self._millis < other._millis

    def __hash__(self):
        return hash(self._millis)

    def __str__(self):
        hours, rest = divmod(self._millis, HOUR)
        minutes, rest = divmod(rest, MINUTE)
        seconds, millis = divmod(rest, SECOND)
        return '%02d:%02d:%02d.%03d' % (hours, minutes, seconds, millis)

    def __repr__(self):
        return '<WallClockTime: %s>' % self


WallClockTime.ZERO = WallClockTime(0)
