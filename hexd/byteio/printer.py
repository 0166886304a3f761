# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from math import ceil
from typing import IO

import pytermor as pt

from .const import Kind, NumericMode, PLACEHOLDER_CHAR
from .grapheme import is_utf8_prefix, incomplete_suffix
from .group import Group
from .styler import AbstractStyler, KindStyler
from ..common import WidthError, GroupingError, exit_on_broken_pipe
from ..console import ConsoleDebugBuffer, Console


def padding(group: int, length: int) -> int:
    """
    Number of columns taken by ``length`` bytes printed as grouped hex digits:
    two digits per byte plus one separator in front of every group.
    """
    return length * 2 + ceil(length / group)


def format_address(address: int) -> str:
    return '_'.join(f'{(address >> shift) & 0xffff:04x}' for shift in (48, 32, 16, 0))


class PrinterState:
    def __init__(self):
        self.address = 0
        self.column = 0
        self.hex = ''
        self.table = ''
        self.hex_group = ''
        self.table_group = ''

    def reset_row(self, width: int):
        self.column = 0
        self.address += width
        self.hex = ''
        self.table = ''


class Printer:
    """
    Row printer. Splits the input into classified groups and pretty prints
    them one row at a time, ``width`` bytes per row, ``group`` bytes per
    hex digit group.

    Input is fed chunk by chunk. A cluster is recognized only if the whole
    rest of the input is valid UTF-8, so groups whose kind the following input
    could still change are held back and classified again with the next chunk.
    At most ``MAX_PENDING_LEN`` bytes are held; past that the held input is
    classified as if it were the end of the stream.
    """
    MIN_WIDTH = 2
    MAX_WIDTH = 4096  # exclusive
    MAX_PENDING_LEN = 4096

    def __init__(self, width: int, group: int, numeric: NumericMode,
                 styler: AbstractStyler = None, output: IO[str] = None):
        if not self.MIN_WIDTH <= width < self.MAX_WIDTH:
            raise WidthError(width)
        if not 1 <= group <= width:
            raise GroupingError(group, width)

        self._width = width
        self._group = group
        self._numeric = numeric
        self._styler = styler or KindStyler()
        self._output = output or sys.stdout

        self._max = padding(group, width)
        self._state = PrinterState()
        self._tail = b''
        self._debug_buffer = ConsoleDebugBuffer('printer', pt.cv.YELLOW)

    @property
    def address(self) -> int:
        return self._state.address

    @property
    def column(self) -> int:
        return self._state.column

    def feed(self, raw: bytes, finish: bool = False):
        data = self._tail + raw
        self._tail = b''

        if finish:
            self._consume(data)
            if self._state.column > 0:
                self._print_row()
            return

        pending = data[self._consume(data, settled_only=True):]
        if len(pending) > self.MAX_PENDING_LEN:
            # lookahead is exhausted, classify everything but a cut off sequence
            cut = len(pending) - len(incomplete_suffix(pending))
            self._debug_buffer.write(2, f'Pending input exceeds {self.MAX_PENDING_LEN} bytes, '
                                        f'classifying {cut} of {len(pending)}')
            self._consume(pending[:cut])
            pending = pending[cut:]
        self._tail = pending

    def finish(self):
        self.feed(b'', finish=True)

    def print_header(self, title: str):
        self._write('\n[' + self._styler.style_header(title) + ']')

    def format_group(self, group: Group):
        state = self._state
        for index, b in enumerate(group.raw):
            if state.column % self._group == 0:
                state.hex_group += ' '
            state.hex_group += f'{b:02x}'

            if group.kind.is_ascii:
                state.table_group += chr(b)
            elif group.kind.is_graphemes:
                state.table_group += group.span.placement(index, state.column, self._width).text
            else:
                state.table_group += PLACEHOLDER_CHAR

            state.column += 1
            if state.column == self._width:
                self._colorize_group(group.kind)
                self._print_row()

        if state.column > 0:
            self._colorize_group(group.kind)

    def _consume(self, data: bytes, settled_only: bool = False) -> int:
        """
        Classify and format groups from the beginning of ``data``. With
        ``settled_only`` stop in front of the first group that the following
        input could still change. Returns the number of bytes consumed.
        """
        start = 0
        while start < len(data):
            group = Group.gather(data[start:], self._numeric)
            end = start + len(group)
            if settled_only and not self._is_settled(group, data, start, end):
                break
            if self._debug_buffer.is_enabled(2):
                self._debug_buffer.write(2, f'Group {group.kind.value}: {Console.printd(group.raw)}',
                                         offset=self._state.address + self._state.column)
            self.format_group(group)
            start = end
        return start

    @staticmethod
    def _is_settled(group: Group, data: bytes, start: int, end: int) -> bool:
        # a cluster stands only while the rest of the input is valid UTF-8, an
        # invalid run is final once each of its bytes precedes a broken sequence
        if group.kind is Kind.GRAPHEMES:
            return False
        if group.kind is not Kind.INVALID:
            return True
        if end == len(data) or data[end] >= 0x80:
            return False
        return not any(is_utf8_prefix(data[offset:]) for offset in range(start, end))

    def _colorize_group(self, kind: Kind):
        state = self._state
        state.hex += self._styler.style(state.hex_group, kind)
        state.table += self._styler.style(state.table_group, kind)
        state.hex_group = ''
        state.table_group = ''

    def _print_row(self):
        state = self._state
        self._write('{addr}:{hex}{hex_pad} | {table}{table_pad} |'.format(
            addr=self._styler.style_address(format_address(state.address)),
            hex=state.hex,
            hex_pad=' ' * (self._max - padding(self._group, state.column)),
            table=state.table,
            table_pad=' ' * (self._width - state.column),
        ))
        state.reset_row(self._width)

    def _write(self, line: str):
        try:
            self._output.write(line + '\n')
        except BrokenPipeError:
            exit_on_broken_pipe()
