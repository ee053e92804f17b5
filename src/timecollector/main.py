"""Add up time spans and durations listed in text files."""
import argparse
import logging
import sys

from timecollector import DEBUG, __version__
from timecollector.core.collector import LineAccumulator
from timecollector.core.period import SignedDuration, sum_durations
from timecollector.core.utils import (
    format_duration_decimal,
    format_duration_long,
    format_duration_short,
    mark_time,
)
from timecollector.settings import FORMATS, Settings


log = logging.getLogger('timecollector')


FORMATTERS = {
    'canonical': str,
    'short': format_duration_short,
    'long': format_duration_long,
    'decimal': format_duration_decimal,
}


def parse_seed(value):
    try:
        return SignedDuration.from_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


parser = argparse.ArgumentParser(
    prog='timecollector',
    description="add up time spans (18:35-19:40) and durations (1h30m)")
parser.add_argument(
    "files", metavar="FILE", nargs="*",
    help="files to read, one session each; '-' or nothing reads stdin")
parser.add_argument(
    "-f", "--format", choices=FORMATS,
    help="output format (default: canonical, e.g. '1d 2h 5m')")
parser.add_argument(
    "--seed", type=parse_seed,
    help="duration to start counting from (e.g. --seed=-30m)")
parser.add_argument(
    "--config", metavar="FILE",
    help="read settings from FILE instead of the default location")
parser.add_argument(
    "--debug", action="store_true",
    help="show every line as it is added up")
parser.add_argument(
    "--version", action="version", version="%(prog)s " + __version__)


def collect_file(filename, stdin=None):
    """Add up one file (or stdin for '-'), starting from zero."""
    accumulator = LineAccumulator()
    if filename == '-':
        return accumulator.collect(stdin if stdin is not None else sys.stdin)
    with open(filename, 'rb') as f:
        return accumulator.collect(f)


def run(argv=None, stdin=None, stdout=None):
    """Run the command line; returns the exit status."""
    if stdout is None:
        stdout = sys.stdout
    args = parser.parse_args(argv)
    if args.debug:
        log.setLevel(logging.DEBUG)

    settings = Settings()
    try:
        settings.load(args.config)
    except ValueError as e:
        log.error("Could not load settings: %s", e)
        return 1
    seed = args.seed if args.seed is not None else settings.seed
    fmt = args.format or settings.format

    totals = []
    for filename in args.files or ['-']:
        mark_time("reading %s" % filename)
        try:
            totals.append(collect_file(filename, stdin))
        except (OSError, ValueError) as e:
            log.error("%s: %s", filename, e)
            return 1
    total = sum_durations(totals, seed)
    stdout.write(FORMATTERS[fmt](total) + '\n')
    return 0


def main():
    mark_time("in main()")

    root_logger = logging.getLogger()
    root_logger.addHandler(logging.StreamHandler())
    if DEBUG:
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(logging.INFO)

    try:
        sys.exit(run())
    finally:
        mark_time("exiting")


if __name__ == '__main__':
    main()
