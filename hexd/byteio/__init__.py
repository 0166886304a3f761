# -----------------------------------------------------------------------------
# es7s/hexd [Hex display with byte classes and grapheme clusters]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .const import Kind, NumericMode, ColorMode, KIND_DESCRIPTIONS, PLACEHOLDER_CHAR
from .grapheme import Span, Placement, PlacementKind, SKIP, SPACE, cluster_width, is_utf8_prefix, incomplete_suffix
from .group import Group
from .styler import AbstractStyler, KindStyler, create_renderer

from .reader import Reader
from .printer import Printer, padding, format_address
