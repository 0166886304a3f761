# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from .const import Kind, NumericMode, NUMERIC_CHARCODES, PRINTABLE_CHARCODES, CONTROL_CHARCODES
from .grapheme import Span


def is_numeric(b: int, numeric: NumericMode) -> bool:
    return b in NUMERIC_CHARCODES[numeric]


def is_printable(b: int) -> bool:
    return b in PRINTABLE_CHARCODES


def is_control(b: int) -> bool:
    return b in CONTROL_CHARCODES


class Group:
    """
    Leading run of bytes sharing one classification :class:`Kind`. Runs of
    numeric, printable, control and invalid bytes are extended greedily,
    grapheme groups always hold exactly one cluster.
    """
    def __init__(self, kind: Kind, span: Span):
        self._kind = kind
        self._span = span

    @property
    def kind(self) -> Kind:
        return self._kind

    @property
    def span(self) -> Span:
        return self._span

    @property
    def raw(self) -> bytes:
        return self._span.raw

    @classmethod
    def gather(cls, raw: bytes, numeric: NumericMode) -> Group:
        if not raw:
            raise ValueError('Cannot gather an empty byte slice')
        b = raw[0]

        if is_numeric(b, numeric):
            return cls._numeric_group(raw, numeric)
        if is_printable(b):
            return cls._printable_group(raw, numeric)
        if is_control(b):
            return cls._control_group(raw)
        if (span := Span.parse(raw)) is not None:
            return Group(Kind.GRAPHEMES, span)
        return cls._invalid_group(raw, numeric)

    @classmethod
    def _numeric_group(cls, raw: bytes, numeric: NumericMode) -> Group:
        length = 1
        for b in raw[1:]:
            if not is_numeric(b, numeric):
                break
            length += 1
        return cls._ascii_group(Kind.NUMERIC, raw[:length])

    @classmethod
    def _printable_group(cls, raw: bytes, numeric: NumericMode) -> Group:
        length = 1
        for b in raw[1:]:
            if not is_printable(b) or is_numeric(b, numeric):
                break
            length += 1
        return cls._ascii_group(Kind.PRINTABLE, raw[:length])

    @classmethod
    def _control_group(cls, raw: bytes) -> Group:
        length = 1
        for b in raw[1:]:
            if not is_control(b):
                break
            length += 1
        return cls._ascii_group(Kind.CONTROL, raw[:length])

    @classmethod
    def _invalid_group(cls, raw: bytes, numeric: NumericMode) -> Group:
        # Each candidate byte needs a grapheme parse of the remaining slice,
        # so long invalid runs cost O(n^2).
        length = 1
        for offset in range(1, len(raw)):
            b = raw[offset]
            if is_numeric(b, numeric) or is_printable(b) or is_control(b) or Span.parse(raw[offset:]) is not None:
                break
            length += 1
        return cls._ascii_group(Kind.INVALID, raw[:length])

    @staticmethod
    def _ascii_group(kind: Kind, raw: bytes) -> Group:
        return Group(kind, Span.ascii(raw))

    def __len__(self) -> int:
        return len(self._span)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}[{self._kind.value}]<{self._span!r}>'
