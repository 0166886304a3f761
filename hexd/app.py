# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import List

from . import AppArgumentParser
from .byteio import create_renderer
from .common import exit_on_broken_pipe
from .console import Console
from .runner import RunnerFactory
from .settings import SettingsManager


class App:
    def run(self, args: List[str] = None):
        try:
            self._parse_args(args)  # help processing is handled by argparse
            (RunnerFactory.create()).run()
        except Exception as e:
            Console.on_exception(e)
            self._exit(1)
        self._exit(0)

    def _parse_args(self, args: List[str]|None):
        SettingsManager.init()
        Console.set_up(create_renderer(SettingsManager.app_settings.color_mode, sys.stdout))
        AppArgumentParser().parse_args(args, namespace=SettingsManager.app_settings)

    def _exit(self, code: int):
        try:
            sys.stdout.flush()
        except BrokenPipeError:
            exit_on_broken_pipe()
        sys.exit(code)


def main():
    App().run()
