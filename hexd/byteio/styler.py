# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from abc import ABCMeta, abstractmethod
from typing import Dict, IO

import pytermor as pt

from .const import Kind, ColorMode


def create_renderer(color_mode: ColorMode, io: IO = None) -> pt.IRenderer:
    if io is None:
        io = sys.stdout
    if color_mode is ColorMode.NEVER:
        return pt.NoOpRenderer()
    if color_mode is ColorMode.AUTO and not io.isatty():
        return pt.NoOpRenderer()
    return pt.SgrRenderer(pt.OutputMode.XTERM_16)


class AbstractStyler(metaclass=ABCMeta):
    @abstractmethod
    def style(self, text: str, kind: Kind) -> str:
        raise NotImplementedError

    def style_address(self, text: str) -> str:
        return text

    def style_header(self, text: str) -> str:
        return text


class KindStyler(AbstractStyler):
    KIND_STYLES: Dict[Kind, pt.Style] = {
        Kind.NUMERIC: pt.Style(fg=pt.cv.HI_CYAN),
        Kind.PRINTABLE: pt.Style(fg=pt.cv.HI_GREEN),
        Kind.CONTROL: pt.Style(fg=pt.cv.HI_YELLOW),
        Kind.GRAPHEMES: pt.Style(fg=pt.cv.GREEN, bold=True),
        Kind.INVALID: pt.Style(fg=pt.cv.HI_RED),
    }
    ADDRESS_STYLE = pt.Style(fg=pt.cv.HI_BLUE)
    HEADER_STYLE = pt.Style(fg=pt.cv.YELLOW)

    def __init__(self, renderer: pt.IRenderer = None):
        if renderer is None:
            renderer = pt.NoOpRenderer()
        self._renderer = renderer

    def style(self, text: str, kind: Kind) -> str:
        return self._render(text, self.KIND_STYLES[kind])

    def style_address(self, text: str) -> str:
        return self._render(text, self.ADDRESS_STYLE)

    def style_header(self, text: str) -> str:
        return self._render(text, self.HEADER_STYLE)

    def _render(self, text: str, style: pt.Style) -> str:
        if not text:
            return text
        return self._renderer.render(text, style)
