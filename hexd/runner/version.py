# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from importlib.metadata import version, PackageNotFoundError

from . import AbstractRunner
from ..version import __version__
from ..console import Console


class VersionRunner(AbstractRunner):
    DEPENDENCIES = ['pytermor', 'regex', 'wcwidth']

    def run(self):
        Console.info("es7s/hexd".ljust(16) + __version__)
        for name in self.DEPENDENCIES:
            try:
                dist_version = version(name)
            except PackageNotFoundError:
                dist_version = 'n/a'
            Console.info(name.ljust(16) + dist_version)
