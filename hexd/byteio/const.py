# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet

from ..common import UnknownNumericError


class Kind(Enum):
    NUMERIC = 'numeric'
    PRINTABLE = 'printable'
    CONTROL = 'control'
    GRAPHEMES = 'graphemes'
    INVALID = 'invalid'

    @property
    def is_ascii(self) -> bool: return self in (self.NUMERIC, self.PRINTABLE)
    @property
    def is_graphemes(self) -> bool: return self is self.GRAPHEMES


class NumericMode(Enum):
    OCTAL = 'octal'
    DECIMAL = 'decimal'
    HEXADECIMAL = 'hexadecimal'

    @classmethod
    def resolve(cls, token: str) -> NumericMode:
        try:
            return NUMERIC_MODE_TOKENS[token.lower()]
        except KeyError:
            raise UnknownNumericError(token) from None


class ColorMode(Enum):
    NEVER = 'never'
    ALWAYS = 'always'
    AUTO = 'auto'


NUMERIC_MODE_TOKENS: Dict[str, NumericMode] = {
    **{t: NumericMode.OCTAL for t in ('o', 'oct', 'octal')},
    **{t: NumericMode.DECIMAL for t in ('d', 'dec', 'decimal')},
    **{t: NumericMode.HEXADECIMAL for t in ('h', 'x', 'hex', 'hexadecimal')},
}

NUMERIC_CHARCODES: Dict[NumericMode, FrozenSet[int]] = {
    NumericMode.OCTAL: frozenset(range(0x30, 0x37)),  # '0'..'6', '7' is left out
    NumericMode.DECIMAL: frozenset(range(0x30, 0x3a)),
    NumericMode.HEXADECIMAL: frozenset([*range(0x30, 0x3a), *range(0x41, 0x47), *range(0x61, 0x67)]),
}
PRINTABLE_CHARCODES = frozenset(range(0x20, 0x7f))
CONTROL_CHARCODES = frozenset([*range(0x00, 0x20), 0x7f])

PLACEHOLDER_CHAR = '.'

KIND_DESCRIPTIONS: Dict[Kind, str] = {
    Kind.NUMERIC: 'digits of the selected numeric class',
    Kind.PRINTABLE: 'ASCII space, letters and punctuation',
    Kind.CONTROL: 'ASCII control characters, 0x00-0x1f and 0x7f',
    Kind.GRAPHEMES: 'UTF-8 encoded grapheme clusters',
    Kind.INVALID: 'bytes that are neither ASCII nor valid UTF-8',
}
