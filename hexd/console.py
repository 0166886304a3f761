# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
import traceback
from abc import ABCMeta, abstractmethod
from typing import List, Any

import pytermor as pt

from .common import ArgumentError
from .settings import SettingsManager


class AbstractConsoleBuffer(metaclass=ABCMeta):
    @abstractmethod
    def flush(self): raise NotImplementedError


class ConsoleDebugBuffer(AbstractConsoleBuffer):
    def __init__(self, key_prefix: str = None, prefix_color: pt.Color = pt.cv.GRAY):
        self._buf = ''
        self._key_prefix = key_prefix
        self._prefix_style = pt.Style(fg=prefix_color)

        Console.register_buffer(self)

    @staticmethod
    def is_enabled(level: int) -> bool:
        return SettingsManager.app_settings.debug >= level

    def write(self, level: int, s: str, offset: int = None, end='\n', flush=True):
        if not self.is_enabled(level):
            return

        prefix = ''
        if isinstance(offset, int):
            prefix = Console.format_prefix_with_offset(offset, self._prefix_style)
        elif self._key_prefix is not None:
            prefix = Console.format_prefix(self._key_prefix, self._prefix_style)

        self._buf += f'{prefix}{s}{end}'
        if flush:
            self.flush()

    def flush(self):
        if not self._buf:
            return

        Console.debug(self._buf, end='')
        self._buf = ''


class Console:
    STYLE_ERROR = pt.Style(fg=pt.cv.HI_RED)
    STYLE_ERROR_LABEL = pt.Style(fg=pt.cv.HI_RED, bold=True)
    STYLE_ERROR_TRACE = pt.Style(fg=pt.cv.RED)
    STYLE_CAUSE_LABEL = pt.Style(fg=pt.cv.HI_YELLOW)
    STYLE_SEPARATOR = pt.Style(fg=pt.cv.GRAY)
    STYLE_BOLD = pt.Style(bold=True)
    MAIN_PREFIX_LEN = 8

    buffers: List[AbstractConsoleBuffer] = list()
    renderer: pt.IRenderer = pt.NoOpRenderer()

    @staticmethod
    def set_up(renderer: pt.IRenderer):
        Console.renderer = renderer

    @staticmethod
    def render(s: Any, style: pt.Style) -> str:
        return Console.renderer.render(str(s), style)

    @staticmethod
    def register_buffer(buffer: AbstractConsoleBuffer):
        Console.buffers.append(buffer)

    @staticmethod
    def flush_buffers():
        for buffer in Console.buffers:
            buffer.flush()

    @staticmethod
    def on_exception(e: Exception):
        Console.flush_buffers()

        if SettingsManager.app_settings.debug > 0:
            tb_lines = [line.rstrip('\n')
                        for line
                        in traceback.format_exception(e.__class__, e, e.__traceback__)]
            error = tb_lines.pop(-1)
            Console.print(Console.render('\n'.join(tb_lines), Console.STYLE_ERROR_TRACE), file=sys.stderr)
            Console.error(error)
            return

        Console.error(f'{e.__class__.__name__}: {e!s}')
        cause = e.__cause__
        while cause is not None:
            Console.print(f'  {Console.render("Caused by", Console.STYLE_CAUSE_LABEL)}: {cause!s}', file=sys.stderr)
            cause = cause.__cause__

        if isinstance(e, ArgumentError):
            Console.info(e.USAGE_MSG, file=sys.stderr)
        else:
            Console.info("Run the app with '" + Console.render('--debug', Console.STYLE_BOLD) +
                         "' argument to see the details", file=sys.stderr)

    @staticmethod
    def debug(s: str = '', end='\n'):
        Console.print(s, end=end, file=sys.stderr)

    @staticmethod
    def info(s: str = '', end='\n', **kwargs):
        Console.print(s, end=end, **kwargs)

    @staticmethod
    def error(s: str = '', end='\n'):
        Console.print(Console.render('ERROR: ', Console.STYLE_ERROR_LABEL) +
                      Console.render(s, Console.STYLE_ERROR), end=end, file=sys.stderr)

    @staticmethod
    def get_separator() -> str:
        return Console.render('│', Console.STYLE_SEPARATOR)

    @staticmethod
    def format_prefix(label: str, style: pt.Style) -> str:
        return Console.render(f'{label!s:>{Console.MAIN_PREFIX_LEN}.{Console.MAIN_PREFIX_LEN}s}', style) + \
               Console.get_separator()

    @staticmethod
    def format_prefix_with_offset(offset: int, style: pt.Style) -> str:
        return Console.format_prefix(f'0x{offset:x}', style)

    @staticmethod
    def print(s: str, end='\n', **kwargs):
        print(s, end=end, **kwargs)

    @staticmethod
    def printd(v: Any, max_input_len: int = 5) -> str:
        if isinstance(v, bytes):
            result = 'len ' + Console.render(len(v), Console.STYLE_BOLD)
            if not SettingsManager.app_settings.debug_buffer_contents:
                return result

            if len(v) == 0:
                return f'{result} []'
            preview = v[:max_input_len].hex(' ')
            if len(v) > max_input_len:
                preview += ' ..'
            return f'{result} [{preview}]'

        return f'{v!s}'
