from itertools import islice
from operator import index

import regex as re

from scalars import code_points as _code_points

GRAPHEME = re.compile(r"\X")


def segment(text):
    return tuple(GRAPHEME.findall(text))


class IndexOutOfRange(IndexError):
    def __init__(self, index, length):
        super().__init__(
            "grapheme index {} out of range for length {}".format(index, length)
        )
        self.index = index
        self.length = length


class GraphemeIndexedString(str):
    """A string indexed by user-perceived characters.

    The text is segmented once, on construction, into extended grapheme
    clusters (``\\X`` of the ``regex`` module, which tracks the current
    Unicode release). Positional access walks those clusters from the
    nearest anchor (the start for ``character_at``, the end for
    ``character_from_end``), so a lookup costs time linear in its distance
    from that anchor. Nothing here indexes into code points or code units
    directly.
    """

    def __new__(cls, content=""):
        if not isinstance(content, str):
            raise TypeError(
                "expected str, got {}".format(type(content).__name__)
            )
        self = str.__new__(cls, content)
        self.__dict__["_graphemes"] = segment(content)
        return self

    @classmethod
    def create(cls, text):
        return cls(text)

    def __setattr__(self, name, value):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def __delattr__(self, name):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def __repr__(self):
        return "{}({})".format(type(self).__name__, str.__repr__(self))

    def __len__(self):
        return len(self._graphemes)

    def length(self):
        """Number of grapheme clusters, not code points or storage units."""
        return len(self._graphemes)

    def graphemes(self):
        return self._graphemes

    def __iter__(self):
        return iter(self._graphemes)

    def __reversed__(self):
        return reversed(self._graphemes)

    def character_at(self, position):
        """Return the grapheme ``position`` clusters after the start.

        Walks forward from the first cluster: O(position).
        """
        position = index(position)
        if position < 0 or position >= len(self._graphemes):
            raise IndexOutOfRange(position, len(self._graphemes))
        return next(islice(iter(self._graphemes), position, None))

    def character_from_end(self, offset):
        """Return the grapheme ``offset`` clusters before the end.

        ``offset`` 1 is the last character. Walks backward from the last
        cluster: O(offset).
        """
        offset = index(offset)
        if offset < 1 or offset > len(self._graphemes):
            raise IndexOutOfRange(offset, len(self._graphemes))
        return next(islice(reversed(self._graphemes), offset - 1, None))

    @staticmethod
    def code_points(glyph):
        return _code_points(glyph)

    def unicode_scalars(self):
        for char in str(self):
            yield char, ord(char)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self.__class__("".join(self._graphemes[key]))
        key = index(key)
        if key < 0:
            return self.character_from_end(-key)
        else:
            return self.character_at(key)

    def __contains__(self, item):
        if not str.__contains__(self, item):
            return False
        wanted = segment(item)
        width = len(wanted)
        return any(
            self._graphemes[start:start + width] == wanted
            for start in range(len(self._graphemes) - width + 1)
        )
