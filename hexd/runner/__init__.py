# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from ._abstract import AbstractRunner

from .hexdump import HexDumpRunner
from .legend import LegendRunner
from .version import VersionRunner

from .factory import RunnerFactory
