# This project was developed with assistance from AI tools.
"""
Boolean mark renderers.

There is no "unchecked" mark: a slot that should read as unchecked simply
receives no call. One style is used for a whole document.
"""
import logging
from abc import ABC, abstractmethod
from enum import Enum

from reportlab.pdfbase import pdfmetrics

from .canvas import RenderedPage
from .registry import FieldCoordinate

logger = logging.getLogger(__name__)

CHECK_GLYPH = "✓"


class MarkStyle(str, Enum):
    LINE = "line"
    GLYPH = "glyph"


class MarkRenderer(ABC):
    """Draws a checkmark at a slot."""

    style: MarkStyle

    @abstractmethod
    def draw(self, page: RenderedPage, coord: FieldCoordinate) -> None:
        pass


class LineCheckMark(MarkRenderer):
    """Two line segments forming a tick, scaled from the slot's font size."""

    style = MarkStyle.LINE

    def draw(self, page: RenderedPage, coord: FieldCoordinate) -> None:
        s = coord.size
        stroke = max(0.8, s * 0.1)
        # short leg down to the vertex, long leg up to the right
        vx, vy = coord.x + s * 0.35, coord.y
        page.line(coord.x + s * 0.05, coord.y + s * 0.4, vx, vy, width=stroke)
        page.line(vx, vy, coord.x + s * 0.85, coord.y + s * 0.85, width=stroke)


class GlyphCheckMark(MarkRenderer):
    """The check glyph from the embedded font."""

    style = MarkStyle.GLYPH

    def __init__(self, font_name: str):
        self.font_name = font_name

    def draw(self, page: RenderedPage, coord: FieldCoordinate) -> None:
        page.text(coord.x, coord.y, CHECK_GLYPH, self.font_name, coord.size)


def font_has_glyph(font_name: str, char: str) -> bool:
    """True when a registered TrueType font maps ``char`` to a glyph."""
    try:
        font = pdfmetrics.getFont(font_name)
    except KeyError:
        return False
    char_to_glyph = getattr(getattr(font, "face", None), "charToGlyph", None)
    if not char_to_glyph:
        return False
    return char_to_glyph.get(ord(char), 0) != 0


def mark_renderer(style: MarkStyle | str, font_name: str) -> MarkRenderer:
    """
    Renderer for the whole document.

    The glyph style is only honoured when the font really carries the check
    glyph; otherwise line marks are used throughout.
    """
    style = MarkStyle(style)
    if style is MarkStyle.GLYPH:
        if font_has_glyph(font_name, CHECK_GLYPH):
            return GlyphCheckMark(font_name)
        logger.warning(f"Font '{font_name}' has no check glyph; using line marks")
    return LineCheckMark()
