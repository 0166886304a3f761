# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import os
from argparse import Namespace
from typing import Any, List, Mapping

from .byteio.const import NumericMode, ColorMode

NO_COLOR_ENV = 'NO_COLOR'
FORCE_COLOR_ENVS = ('ALWAYS_COLOR', 'CLICOLOR_FORCE', 'FORCE_COLOR')


def detect_color_mode(environ: Mapping[str, str] = None) -> ColorMode:
    if environ is None:
        environ = os.environ
    if environ.get(NO_COLOR_ENV):
        return ColorMode.NEVER
    if any(environ.get(name) for name in FORCE_COLOR_ENVS):
        return ColorMode.ALWAYS
    return ColorMode.AUTO


class Settings(Namespace):
    READ_CHUNK_SIZE: int = 4096
    READ_CHUNK_SIZE_DEBUG: int = 128

    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)

        self.buffer: int|None = None  # auto
        self.color_mode: ColorMode = ColorMode.AUTO
        self.debug: int = 0
        self.filenames: List[str] = []
        self.group: int = 2
        self.legend: bool = False
        self.max_bytes: int|None = None  # no limit
        self.numeric: str = NumericMode.DECIMAL.value
        self.version: bool = False
        self.width: int = 16

    @property
    def numeric_mode(self) -> NumericMode:
        return NumericMode.resolve(self.numeric)

    @property
    def read_chunk_size(self) -> int:
        if self.buffer:
            return int(self.buffer)
        if self.debug > 0:
            return self.READ_CHUNK_SIZE_DEBUG
        return self.READ_CHUNK_SIZE

    @property
    def debug_buffer_contents(self) -> bool:
        return self.debug >= 3


class SettingsManager:
    app_settings: Settings = Settings()

    @staticmethod
    def init():
        SettingsManager.app_settings = Settings()
        SettingsManager.app_settings.color_mode = detect_color_mode()
