# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import Callable, IO

import pytermor as pt

from ..common import InputReadError
from ..console import ConsoleDebugBuffer, Console
from ..settings import SettingsManager


class Reader:
    STDIN_NAME = '<stdin>'

    def __init__(self, filename: str|None, read_callback: Callable[[bytes, int, bool], None]):
        self._filename = filename
        self._io: IO|None = None
        self._offset = 0
        self._chunk_size = SettingsManager.app_settings.read_chunk_size
        self._read_callback = read_callback
        self._debug_buffer = ConsoleDebugBuffer('reader', pt.cv.MAGENTA)

    @property
    def reading_stdin(self) -> bool:
        return not self._filename or self._filename == '-'

    @property
    def name(self) -> str:
        return self.STDIN_NAME if self.reading_stdin else self._filename

    def read(self):
        self._open()
        self._debug_buffer.write(2, f'Read buffer: size {self._chunk_size}')

        max_bytes: int|None = SettingsManager.app_settings.max_bytes
        chunks = 0
        try:
            while raw_input := self._read_chunk():
                if self._debug_buffer.is_enabled(1):
                    self._debug_buffer.write(1, f'Read chunk #{chunks}: {Console.printd(raw_input)}', offset=self._offset)
                chunks += 1

                if max_bytes and self._offset + len(raw_input) > max_bytes:
                    raw_input = raw_input[:max_bytes - self._offset]
                    self._debug_buffer.write(2, f'Byte limit exceeded: {max_bytes}', offset=self._offset)

                self._read_callback(raw_input, self._offset, False)
                self._offset += len(raw_input)

                if max_bytes and self._offset >= max_bytes:
                    break

            self._debug_buffer.write(1, 'Encountered EOF', offset=self._offset)
            self._read_callback(b'', self._offset, True)

        except KeyboardInterrupt:
            self._debug_buffer.write(1, 'Interrupted', offset=self._offset)
            self._read_callback(b'', self._offset, True)
        finally:
            self.close()

    def _open(self):
        if self.reading_stdin:
            self._io = sys.stdin.buffer
            self._debug_buffer.write(1, 'Reading from stdin')
            return
        try:
            self._io = open(self._filename, 'rb')
        except OSError as e:
            raise InputReadError(self.name) from e
        self._debug_buffer.write(1, f'Opened file: {self._filename}')

    def _read_chunk(self) -> bytes:
        try:
            return self._io.read(self._chunk_size)
        except OSError as e:
            raise InputReadError(self.name) from e

    def close(self):
        if self.reading_stdin:
            return
        if self._io and not self._io.closed:
            self._io.close()
