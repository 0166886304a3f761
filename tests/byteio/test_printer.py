# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import io
import random
import unittest
from contextlib import redirect_stderr
from typing import List
from unittest import mock

import regex

from hexd import WidthError, GroupingError
from hexd.byteio import Printer, NumericMode, Kind, AbstractStyler, padding, format_address, cluster_width
from hexd.console import Console
from hexd.settings import SettingsManager

ADDRESS_LEN = len('0000_0000_0000_0000:')


class MarkingStyler(AbstractStyler):
    def style(self, text: str, kind: Kind) -> str:
        return f'<{kind.value[0]}>{text}'


def dump(raw: bytes, width: int = 16, group: int = 2, numeric: NumericMode = NumericMode.DECIMAL,
         chunk_size: int = None, styler: AbstractStyler = None) -> List[str]:
    output = io.StringIO()
    printer = Printer(width, group, numeric, styler, output)
    if chunk_size is None:
        printer.feed(raw, finish=True)
    else:
        for start in range(0, len(raw), chunk_size):
            printer.feed(raw[start:start + chunk_size])
        printer.finish()
    return output.getvalue().splitlines()


def hex_area(line: str) -> str:
    return line[ADDRESS_LEN:line.index(' | ')]


class PrinterConfigTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_width_bounds(self):
        for width in (-1, 0, 1, 4096, 10000):
            with self.assertRaises(WidthError, msg=f'width {width}'):
                Printer(width, 1, NumericMode.DECIMAL)
        for width in (2, 16, 4095):
            Printer(width, 1, NumericMode.DECIMAL)

    def test_group_bounds(self):
        with self.assertRaises(GroupingError):
            Printer(8, 9, NumericMode.DECIMAL)
        with self.assertRaises(GroupingError):
            Printer(8, 0, NumericMode.DECIMAL)
        Printer(8, 8, NumericMode.DECIMAL)
        Printer(8, 1, NumericMode.DECIMAL)


class PrinterFormattingTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_single_row(self):
        lines = dump(bytes([0x41, 0x20, 0x01]), width=3, group=3)

        self.assertEqual(lines, ['0000_0000_0000_0000: 412001 | A . |'])

    def test_rows_and_final_padding(self):
        lines = dump(b'ab12\x00', width=4, group=2)

        self.assertEqual(lines, [
            '0000_0000_0000_0000: 6162 3132 | ab12 |',
            '0000_0000_0000_0004: 00        | .    |',
        ])

    def test_empty_input(self):
        self.assertEqual(dump(b''), [])

    def test_invalid_bytes(self):
        lines = dump(b'\xff\xfe', width=4, group=1)

        self.assertEqual(lines, ['0000_0000_0000_0000: ff fe       | ..   |'])

    def test_cluster_followed_by_broken_byte(self):
        lines = dump('é'.encode('utf-8') + b'\xff', width=4, group=4)

        self.assertEqual(lines, ['0000_0000_0000_0000: c3a9ff   | ...  |'])

    def test_narrow_cluster(self):
        lines = dump('ü!'.encode('utf-8'), width=4, group=4)

        self.assertEqual(lines, ['0000_0000_0000_0000: c3bc21   | ü !  |'])

    def test_wide_cluster(self):
        lines = dump('中'.encode('utf-8'), width=4, group=4)

        self.assertEqual(lines, ['0000_0000_0000_0000: e4b8ad   | 中   |'])

    def test_wide_cluster_wraps_to_next_row(self):
        lines = dump(b'abc' + '中'.encode('utf-8'), width=4, group=4)

        self.assertEqual(lines, [
            '0000_0000_0000_0000: 616263e4 | abc  |',
            '0000_0000_0000_0004: b8ad     | 中   |',
        ])

    def test_styling_applied_per_group_fragment(self):
        lines = dump(b'ab12\x00', width=4, group=2, styler=MarkingStyler())

        self.assertEqual(lines, [
            '0000_0000_0000_0000:<p> 6162<n> 3132 | <p>ab<n>12 |',
            '0000_0000_0000_0004:<c> 00        | <c>.    |',
        ])

    def test_address_keeps_growing(self):
        lines = dump(b'x' * 40, width=16, group=2)

        self.assertEqual([line[:ADDRESS_LEN] for line in lines], [
            '0000_0000_0000_0000:',
            '0000_0000_0000_0010:',
            '0000_0000_0000_0020:',
        ])

    def test_address_carries_over_inputs(self):
        output = io.StringIO()
        printer = Printer(4, 2, NumericMode.DECIMAL, output=output)
        printer.feed(b'abcdef', finish=True)
        printer.print_header('second')
        printer.feed(b'gh', finish=True)

        self.assertEqual(printer.address, 12)
        self.assertEqual(output.getvalue().splitlines()[-1],
                         '0000_0000_0000_0008: 6768      | gh   |')
        self.assertIn('[second]', output.getvalue())


class PrinterPropertiesTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()
        rnd = random.Random(2022)
        self.samples = [
            bytes(rnd.randrange(0x100) for _ in range(rnd.randrange(1, 100))) for _ in range(30)
        ] + [
            'Grüße, 世界! 👩🏻‍🚀 é 0x7f\r\n'.encode('utf-8') * 3,
            b'\x00\x01\x02\xff\xfe123abc   \xe2\x82\xac\xf0\x9f\x98\x80',
        ]

    def test_padding_formula(self):
        self.assertEqual(padding(2, 16), 40)
        self.assertEqual(padding(3, 7), 17)
        self.assertEqual(padding(1, 1), 3)

    def test_padding_matches_hex_area(self):
        for width in range(2, 12):
            for group in range(1, width + 1):
                for length in range(1, width + 1):
                    lines = dump(b'A' * length, width=width, group=group)
                    self.assertEqual(len(lines), 1)
                    area = hex_area(lines[0])
                    self.assertEqual(len(area), padding(group, width))
                    self.assertEqual(len(area.rstrip()), padding(group, length))

    def test_hex_area_reconstructs_input(self):
        for width, group in ((2, 1), (3, 2), (8, 3), (16, 2), (16, 16)):
            for sample in self.samples:
                lines = dump(sample, width=width, group=group)
                restored = b''.join(bytes.fromhex(hex_area(line)) for line in lines)
                self.assertEqual(restored, sample)

    def test_table_area_has_fixed_width(self):
        sample = 'Grüße, 世界! 👩🏻‍🚀 0x7f\r\n'.encode('utf-8') * 3
        for width in (4, 7, 8, 16):
            for line in dump(sample, width=width, group=2):
                table = line[line.index(' | ') + 3:-2]
                cells = sum(cluster_width(c) for c in regex.findall(r'\X', table))
                self.assertEqual(cells, width, line)

    def test_chunked_feed_matches_whole_input(self):
        for sample in self.samples:
            whole = dump(sample, width=8, group=2)
            for chunk_size in (1, 2, 3, 5, 7, 64):
                self.assertEqual(dump(sample, width=8, group=2, chunk_size=chunk_size), whole,
                                 f'chunk size {chunk_size}')


    def test_broken_byte_in_later_chunk(self):
        sample = 'é'.encode('utf-8') + b'abc\xff'
        expected = ['0000_0000_0000_0000: c3a9 6162 63ff' + ' ' * 5 + ' | ..abc.' + ' ' * 2 + ' |']

        self.assertEqual(dump(sample, width=8, group=2), expected)
        for chunk_size in (1, 2, 4):
            self.assertEqual(dump(sample, width=8, group=2, chunk_size=chunk_size), expected,
                             f'chunk size {chunk_size}')


class ShortLookaheadPrinter(Printer):
    MAX_PENDING_LEN = 8


class PrinterLookaheadTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_pending_input_is_bounded(self):
        sample = ('ü' * 20).encode('utf-8')
        output = io.StringIO()
        printer = ShortLookaheadPrinter(8, 2, NumericMode.DECIMAL, output=output)

        for start in range(0, len(sample), 4):
            printer.feed(sample[start:start + 4])
        self.assertGreaterEqual(len(output.getvalue().splitlines()), 4)

        printer.finish()
        lines = output.getvalue().splitlines()
        self.assertEqual(b''.join(bytes.fromhex(hex_area(line)) for line in lines), sample)
        for line in lines:
            self.assertEqual(line[line.index(' | '):], ' | ü ü ü ü  |')

    def test_cut_off_sequence_stays_pending(self):
        output = io.StringIO()
        printer = ShortLookaheadPrinter(8, 2, NumericMode.DECIMAL, output=output)

        printer.feed(('ü' * 4).encode('utf-8') + b'a\xe4')
        self.assertEqual(output.getvalue().splitlines(), ['0000_0000_0000_0000: c3bc c3bc c3bc c3bc | ü ü ü ü  |'])

        printer.feed(b'\xb8\xad')
        printer.finish()
        self.assertEqual(output.getvalue().splitlines()[-1],
                         '0000_0000_0000_0008: 61e4 b8ad' + ' ' * 10 + ' | a中 ' + ' ' * 4 + ' |')


class BrokenPipeOutput:
    def __init__(self):
        self.writes = 0

    def write(self, s: str):
        self.writes += 1
        raise BrokenPipeError


class PrinterOutputErrorTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_broken_pipe_exits_immediately(self):
        output = BrokenPipeOutput()
        printer = Printer(4, 2, NumericMode.DECIMAL, output=output)

        with mock.patch('hexd.common.os') as os_mock, mock.patch('sys.stdout', new=mock.Mock()):
            with self.assertRaises(SystemExit) as cm:
                printer.feed(b'abcdefghij', finish=True)

        self.assertEqual(cm.exception.code, 1)
        self.assertEqual(output.writes, 1)
        os_mock.dup2.assert_called_once()


class PrinterDebugTestCase(unittest.TestCase):
    def setUp(self) -> None:
        SettingsManager.init()

    def test_no_group_debug_formatting_when_disabled(self):
        with mock.patch.object(Console, 'printd') as printd:
            dump(b'ab\x00\xff', width=4)

        printd.assert_not_called()

    def test_group_debug_output(self):
        SettingsManager.app_settings.debug = 2
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            lines = dump(b'ab\x00', width=4)

        self.assertEqual(len(lines), 1)
        self.assertIn('Group printable', stderr.getvalue())
        self.assertIn('Group control', stderr.getvalue())


class AddressFormattingTestCase(unittest.TestCase):
    def test_format_address(self):
        self.assertEqual(format_address(0), '0000_0000_0000_0000')
        self.assertEqual(format_address(0x10), '0000_0000_0000_0010')
        self.assertEqual(format_address(0x123456789abcdef0), '1234_5678_9abc_def0')
        self.assertEqual(format_address(0xffff_ffff_ffff_ffff), 'ffff_ffff_ffff_ffff')


if __name__ == '__main__':
    unittest.main()
