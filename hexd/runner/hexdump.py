# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List

import pytermor as pt

from . import AbstractRunner
from ..byteio import Printer, Reader, KindStyler
from ..console import Console, ConsoleDebugBuffer
from ..settings import SettingsManager


class HexDumpRunner(AbstractRunner):
    def run(self):
        app_settings = SettingsManager.app_settings
        self._debug_buffer = ConsoleDebugBuffer('runner', pt.cv.CYAN)
        self._printer = Printer(
            app_settings.width,
            app_settings.group,
            app_settings.numeric_mode,
            KindStyler(Console.renderer),
        )

        filenames: List[str] = app_settings.filenames or ['-']
        show_header = len(filenames) > 1
        for filename in filenames:
            reader = Reader(filename, self._process_chunk)
            if show_header:
                self._printer.print_header(reader.name)
            reader.read()

    def _process_chunk(self, raw_input: bytes, offset: int, finish: bool):
        self._printer.feed(raw_input, finish)
        if finish:
            self._debug_buffer.write(1, f'Input done, next row address 0x{self._printer.address:x}', offset=offset)
