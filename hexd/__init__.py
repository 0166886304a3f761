# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .common import ArgumentError, WidthError, GroupingError, UnknownNumericError, InputReadError
from .version import __version__

from .arghelp import AppArgumentParser
from .app import App, main
