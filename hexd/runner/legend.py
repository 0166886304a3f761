# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from typing import Dict

from . import AbstractRunner
from ..byteio import Kind, Span, KindStyler, KIND_DESCRIPTIONS, PLACEHOLDER_CHAR
from ..console import Console
from ..settings import SettingsManager


class LegendRunner(AbstractRunner):
    SAMPLES: Dict[Kind, bytes] = {
        Kind.NUMERIC: b'1024',
        Kind.PRINTABLE: b'Hex!',
        Kind.CONTROL: b'\x00\x09\x1b\x7f',
        Kind.GRAPHEMES: 'ü'.encode('utf-8'),
        Kind.INVALID: b'\xc0\xfe\xff',
    }
    HEX_COLUMN_LEN = 12

    def run(self):
        styler = KindStyler(Console.renderer)
        numeric = SettingsManager.app_settings.numeric_mode

        Console.info(f'Numeric class: {numeric.value}')
        for kind, sample in self.SAMPLES.items():
            hex_raw = sample.hex(' ')
            table_raw = self._format_table(kind, sample)
            Console.info(
                f'{kind.value:<10s}' +
                styler.style(hex_raw, kind) + ' ' * (self.HEX_COLUMN_LEN - len(hex_raw)) +
                ' | ' + styler.style(table_raw, kind) + ' ' * (len(sample) - len(table_raw)) + ' | ' +
                KIND_DESCRIPTIONS[kind]
            )

    def _format_table(self, kind: Kind, sample: bytes) -> str:
        if kind.is_ascii:
            return sample.decode('ascii')
        if kind.is_graphemes:
            span = Span.parse(sample)
            return ''.join(span.placement(i, i, self.HEX_COLUMN_LEN).text for i in range(len(span)))
        return PLACEHOLDER_CHAR * len(sample)
