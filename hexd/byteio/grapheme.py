# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import codecs
from enum import Enum

import regex
from wcwidth import wcwidth

GRAPHEME_REGEX = regex.compile(r'\X')
EMOJI_PRESENTATION_SELECTOR = '\ufe0f'


class PlacementKind(Enum):
    CLUSTER = 'cluster'
    SKIP = 'skip'
    SPACE = 'space'


class Placement:
    """
    What one byte of a grapheme cluster contributes to the character table:
    the whole cluster, nothing (second cell of an already printed wide
    cluster) or a blank cell.
    """
    def __init__(self, kind: PlacementKind, text: str = ''):
        self._kind = kind
        self._text = text

    @property
    def kind(self) -> PlacementKind:
        return self._kind

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_cluster(self) -> bool: return self._kind is PlacementKind.CLUSTER

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Placement):
            return False
        return self._kind is other._kind and self._text == other._text

    def __repr__(self) -> str:
        if self.is_cluster:
            return f'{self.__class__.__name__}[{self._kind.value}:{self._text!r}]'
        return f'{self.__class__.__name__}[{self._kind.value}]'


SKIP = Placement(PlacementKind.SKIP)
SPACE = Placement(PlacementKind.SPACE, ' ')


def cluster_width(cluster: str) -> int:
    """Terminal cells taken by a grapheme cluster, 1 or 2."""
    if EMOJI_PRESENTATION_SELECTOR in cluster:
        return 2
    return 2 if any(wcwidth(c) == 2 for c in cluster) else 1


def is_utf8_prefix(raw: bytes) -> bool:
    """True if ``raw`` is valid UTF-8 or valid UTF-8 cut short at the end."""
    try:
        codecs.getincrementaldecoder('utf-8')().decode(raw, final=False)
    except UnicodeDecodeError:
        return False
    return True


def incomplete_suffix(raw: bytes) -> bytes:
    """Trailing bytes of ``raw`` that start a UTF-8 sequence but do not finish it."""
    decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')
    decoder.decode(raw, final=False)
    return decoder.getstate()[0]


class Span:
    """
    A run of raw bytes, optionally holding one parsed grapheme cluster:
    a single-wide or double-wide character, possibly composed of several
    Unicode codepoints.
    """
    def __init__(self, raw: bytes, parsed: str|None = None):
        self._raw = raw
        self._parsed = parsed
        self._wide: bool|None = None

    @staticmethod
    def ascii(raw: bytes) -> Span:
        return Span(raw)

    @staticmethod
    def parse(raw: bytes) -> Span|None:
        """
        Parse the first grapheme cluster of a byte slice. Returns None if the
        slice as a whole is not valid UTF-8.
        """
        try:
            text = raw.decode('utf-8')
        except UnicodeDecodeError:
            return None
        m = GRAPHEME_REGEX.match(text)
        if not m:
            return None
        parsed = m.group(0)
        return Span(raw[:len(parsed.encode('utf-8'))], parsed)

    @property
    def raw(self) -> bytes:
        return self._raw

    @property
    def parsed(self) -> str|None:
        return self._parsed

    @property
    def wide(self) -> bool:
        if self._parsed is None:
            return False
        if self._wide is None:
            self._wide = (cluster_width(self._parsed) == 2)
        return self._wide

    def placement(self, index: int, column: int, width: int) -> Placement:
        """
        Decide what byte number ``index`` of the cluster shows in the character
        table when it lands on ``column`` of a ``width`` columns wide row.

        A wide cluster that would start at the last column is moved to the
        beginning of the next row, the byte left behind becomes a blank cell.
        """
        if self._parsed is None:
            raise ValueError('Placement is defined for parsed grapheme clusters only')

        wide = self.wide
        if (index == 0 and (not wide or column != width - 1)) or (index == 1 and wide and column == 0):
            return Placement(PlacementKind.CLUSTER, self._parsed)
        if wide and ((index == 1 and column != 0) or (index == 2 and column == 1)):
            return SKIP
        return SPACE

    def __len__(self) -> int:
        return len(self._raw)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}[{self._raw.hex(" ")}]{"" if self._parsed is None else repr(self._parsed)}'
