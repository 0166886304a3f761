# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .app import main

main()
