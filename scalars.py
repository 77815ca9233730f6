from logging import getLogger

log = getLogger(__name__)

MAX_SCALAR = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)

_UNIT_WIDTHS = {
    "utf-8": (1, "utf-8"),
    "utf-16": (2, "utf-16-le"),
    "utf-32": (4, "utf-32-le"),
}


class InvalidScalarValue(ValueError):
    def __init__(self, value):
        super().__init__("{!r} is not a Unicode scalar value".format(value))
        self.value = value


def is_scalar_value(value):
    return 0 <= value <= MAX_SCALAR and value not in SURROGATES


def scalar_from_int(value):
    """Return the character for ``value``, or None if it is not a scalar."""
    if is_scalar_value(value):
        return chr(value)
    else:
        return None


def to_scalar(value):
    char = scalar_from_int(value)
    if char is None:
        raise InvalidScalarValue(value)
    return char


def code_points(glyph):
    return [ord(char) for char in glyph]


def storage_units(text, encoding="utf-8"):
    """Count the code units ``text`` occupies in a Unicode encoding form."""
    key = encoding.lower().replace("_", "-")
    if key not in _UNIT_WIDTHS:
        raise ValueError("unsupported encoding: {}".format(encoding))
    width, codec = _UNIT_WIDTHS[key]
    return len(text.encode(codec)) // width


def build_from_scalar_range(low, high):
    """Convert every integer in [low, high] to a character.

    Values that are not Unicode scalars (surrogates, negatives, anything
    above U+10FFFF) are skipped.
    """
    built = []
    for value in range(low, high + 1):
        char = scalar_from_int(value)
        if char is None:
            log.debug("skipping %#x: not a scalar value", value)
            continue
        built.append(char)
    return built


def build_string_from_scalar_range(low, high):
    return "".join(build_from_scalar_range(low, high))
