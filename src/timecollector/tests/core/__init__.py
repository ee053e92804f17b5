import textwrap
from io import StringIO

from timecollector.core.collector import LineAccumulator
from timecollector.core.period import SignedDuration


def collect_text(text, seed=SignedDuration.ZERO):
    return LineAccumulator(seed).collect(StringIO(textwrap.dedent(text)))
