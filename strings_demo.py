import argparse
from logging import (
    DEBUG,
    ERROR,
    WARN,
    StreamHandler,
    captureWarnings,
    getLogger,
)
from sys import stdout

import regex as re
import unicodedata2 as unicodedata

from grapheme_clusters import GraphemeIndexedString
from scalars import build_string_from_scalar_range, scalar_from_int

DEFAULT_EXAMPLE = "The quick brown fox jumped over the lazy dog."
DEFAULT_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DEFAULT_RANGE = (97, 122)
SEPARATOR = "=" * 26

RANGE_PATTERN = re.compile(r"\s*(0[xX][0-9a-fA-F]+|\d+)\s*(?:-|\.\.)\s*(0[xX][0-9a-fA-F]+|\d+)\s*")

log = getLogger()

STDOUT_HANDLER = "a-look-at-strings.stdout"
STDERR_HANDLER = "a-look-at-strings.stderr"


class _Handler(StreamHandler):
    def handle(self, record):
        if record.levelno <= WARN:
            return super().handle(record)
        else:
            return False


def setup_logging(verbose=False):
    installed = {handler.get_name() for handler in log.handlers}
    if STDOUT_HANDLER not in installed:
        out = _Handler(stream=stdout)
        out.set_name(STDOUT_HANDLER)
        log.addHandler(out)
    if STDERR_HANDLER not in installed:
        err = StreamHandler()
        err.set_name(STDERR_HANDLER)
        err.setLevel(ERROR)
        log.addHandler(err)
    log.setLevel(DEBUG if verbose else WARN)
    captureWarnings(True)


def character_lines(text):
    return list(GraphemeIndexedString(text))


def scalar_lines(text, names=False):
    lines = []
    for char, value in GraphemeIndexedString(text).unicode_scalars():
        lines.append("The unicode scalar is: {}".format(char))
        lines.append("The unicode scalar's value is: {}".format(value))
        if names:
            lines.append(
                "The unicode scalar's name is: {}".format(
                    unicodedata.name(char, "<unnamed>")
                )
            )
    return lines


def built_string_lines(low, high):
    lines = []
    for value in range(low, high + 1):
        lines.append("Unicode scalar value is: {}".format(value))
        letter = scalar_from_int(value)
        if letter is not None:
            lines.append("About to add this letter to the string: {}".format(letter))
    lines.append(
        "The string built from the loop is: {}".format(
            build_string_from_scalar_range(low, high)
        )
    )
    return lines


def _parse_bound(bound):
    if bound[:2].lower() == "0x":
        return int(bound, 16)
    else:
        return int(bound, 10)


def parse_range(spec):
    match = RANGE_PATTERN.fullmatch(spec)
    if match is None:
        raise argparse.ArgumentTypeError(
            "expected LOW-HIGH, got {!r}".format(spec)
        )
    low, high = (_parse_bound(bound) for bound in match.groups())
    return low, high


def demo_lines(example=DEFAULT_EXAMPLE, alphabet=DEFAULT_ALPHABET,
               scalar_range=DEFAULT_RANGE, names=False):
    low, high = scalar_range
    return (
        character_lines(example)
        + [SEPARATOR]
        + scalar_lines(alphabet, names=names)
        + [SEPARATOR]
        + built_string_lines(low, high)
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="a-look-at-strings",
        description="Walk through characters, Unicode scalars and strings built from scalar ranges.",
    )
    parser.add_argument("--example", default=DEFAULT_EXAMPLE,
                        help="text to iterate character by character")
    parser.add_argument("--alphabet", default=DEFAULT_ALPHABET,
                        help="text whose scalars are listed")
    parser.add_argument("--range", dest="scalar_range", type=parse_range,
                        default=DEFAULT_RANGE, metavar="LOW-HIGH",
                        help="inclusive scalar range to build a string from, e.g. 97-122 or 0x61-0x7a")
    parser.add_argument("--names", action="store_true",
                        help="also print each scalar's Unicode name")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.verbose)
    log.debug("unicodedata %s", unicodedata.unidata_version)
    for line in demo_lines(args.example, args.alphabet, args.scalar_range, args.names):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
