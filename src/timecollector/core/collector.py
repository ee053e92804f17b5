"""
Summing up time spans and durations from a list of lines.

Each line is either a clock span::

    18:35 - 19:40

or a compound duration literal::

    1h30m
    -3h

Lines are added up into a single SignedDuration.
"""
import collections
import logging
import re

from timecollector.core.daytime import WallClockTime
from timecollector.core.period import SignedDuration


log = logging.getLogger('timecollector')


clock_span_rx = re.compile(r'^\d{1,2}:\d{1,2}\s*-\s*\d{1,2}:\d{1,2}$', re.ASCII)
compound_duration_rx = re.compile(r'^-?(\d+[yMdhms]\w*){1,6}$', re.ASCII)


class UnrecognizedLine(ValueError):
    """A line that is neither a clock span nor a duration literal."""

    def __init__(self, line):
        super(UnrecognizedLine, self).__init__('unrecognized line: %r' % line)
        self.line = line


class AccumulatorTerminated(RuntimeError):
    pass


class ClockSpan(collections.namedtuple('ClockSpan', 'start stop')):

    def duration(self):
        return self.start.diff(self.stop)


class CompoundDuration(collections.namedtuple('CompoundDuration', 'value')):

    def duration(self):
        return self.value


Unrecognized = collections.namedtuple('Unrecognized', 'line')


def parse_clock_span(line):
    """Recognize a clock span ("HH:MM-HH:MM").

    Returns a ClockSpan, or None if the line doesn't look like one.
    Raises ValueError if it does but a field is out of range.
    """
    if not clock_span_rx.match(line):
        return None
    start, stop = line.split('-')
    return ClockSpan(WallClockTime.from_string(start.strip()),
                     WallClockTime.from_string(stop.strip()))


def parse_compound_duration(line):
    """Recognize a duration literal ("1h30m", "-3h").

    Returns a CompoundDuration, or None if the line doesn't look like one.
    """
    if not compound_duration_rx.match(line):
        return None
    return CompoundDuration(SignedDuration.from_string(line))


def classify(line):
    """Classify a (stripped) line.

    Clock spans are tried first.  Returns a ClockSpan, a CompoundDuration
    or an Unrecognized.
    """
    for parse in (parse_clock_span, parse_compound_duration):
        result = parse(line)
        if result is not None:
            return result
    return Unrecognized(line)


class LineAccumulator(object):
    """Running total of the durations found in a sequence of lines.

    The accumulator stops accepting lines once collect() finishes or a
    line fails to parse.  To carry on, start a new one seeded with
    result().  Not safe to share between threads; add up partial totals
    with sum_durations() instead.
    """

    def __init__(self, total=SignedDuration.ZERO):
        self.total = total
        self.terminated = False

    def accumulate(self, line):
        """Add one line to the total."""
        if self.terminated:
            raise AccumulatorTerminated('accumulator no longer accepts lines')
        line = line.strip()
        try:
            item = classify(line)
            if isinstance(item, Unrecognized):
                raise UnrecognizedLine(item.line)
            duration = item.duration()
        except ValueError:
            self.terminated = True
            raise
        self.total = self.total.plus(duration)
        log.debug('%s: %s (total %s)', line, duration, self.total)

    def collect(self, stream):
        """Add up lines from a file-like object or an iterable of lines.

        Stops at the first blank line or at the end of the stream.  Byte
        strings are decoded as UTF-8.  Returns the total.
        """
        try:
            for line in stream:
                if isinstance(line, bytes):
                    line = line.decode('UTF-8')
                if not line.strip():
                    break
                self.accumulate(line)
        finally:
            self.terminated = True
        return self.total

    def result(self):
        return self.total
