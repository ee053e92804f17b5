import sys
import time

from timecollector import DEBUG


SECOND = 1000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
MONTH = 30 * DAY
YEAR = 12 * MONTH

# Largest unit first; the formatter relies on this order.
UNITS = (
    ('y', YEAR),
    ('M', MONTH),
    ('d', DAY),
    ('h', HOUR),
    ('m', MINUTE),
    ('s', SECOND),
)

UNIT_MILLIS = dict(UNITS)


# [time of the last mark, time of the last blank mark]
_marks = [0, 0]


def mark_time(what=None):
    if DEBUG:
        t = time.time()
        if what:
            print("{:.3f} ({:+.3f}) {}".format(t - _marks[1], t - _marks[0], what),
                  file=sys.stderr)
        else:
            print(file=sys.stderr)
            _marks[1] = t
        _marks[0] = t


def _sign(duration):
    return '-' if duration.millis < 0 else ''


def as_minutes(duration):
    """Convert a SignedDuration to an integer number of minutes.

    Rounds towards zero, so that negative durations mirror positive ones.
    """
    minutes = abs(duration.millis) // MINUTE
    return -minutes if duration.millis < 0 else minutes


def as_hours(duration):
    """Convert a SignedDuration to a float number of hours."""
    return duration.millis / float(HOUR)


def format_duration_short(duration):
    """Format a SignedDuration with minute precision."""
    h, m = divmod(abs(as_minutes(duration)), 60)
    return '%s%d:%02d' % (_sign(duration), h, m)


def format_duration_long(duration):
    """Format a SignedDuration with minute precision, long format."""
    h, m = divmod(abs(as_minutes(duration)), 60)
    sign = _sign(duration) if h or m else ''
    if h and m:
        return '%s%d hour%s %d min' % (sign, h, h != 1 and "s" or "", m)
    elif h:
        return '%s%d hour%s' % (sign, h, h != 1 and "s" or "")
    else:
        return '%s%d min' % (sign, m)


def format_duration_decimal(duration):
    """Format a SignedDuration as decimal hours (1.5 for 90 minutes)."""
    return '%.2f' % as_hours(duration)
