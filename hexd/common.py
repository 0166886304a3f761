# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import os
import sys


class ArgumentError(Exception):
    USAGE_MSG = "Run the app with '--help' argument to see the usage"


class WidthError(ArgumentError):
    def __init__(self, width: int):
        super().__init__(f'Width must be in range 2 <= width < 4096, got {width}')


class GroupingError(ArgumentError):
    def __init__(self, group: int, width: int):
        super().__init__(f'Grouping must be in range 1 <= group <= width ({width}), got {group}')


class UnknownNumericError(ArgumentError):
    def __init__(self, token: str):
        super().__init__(f'Unknown numeric class: `{token}`')


class InputReadError(Exception):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f'Unable to read file: {filename}')


def exit_on_broken_pipe():
    # stdout consumer is gone, silence the flush at interpreter shutdown
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    sys.exit(1)
