# This project was developed with assistance from AI tools.
import pytest

from rendering.canvas import LineOp, RenderedPage
from rendering.marks import GlyphCheckMark, LineCheckMark, MarkStyle, font_has_glyph, mark_renderer
from rendering.registry import FieldCoordinate


def test_line_mark_is_two_joined_strokes() -> None:
    page = RenderedPage(1, 595, 842)
    LineCheckMark().draw(page, FieldCoordinate(x=100, y=200, width=12, height=12, font_size=10))

    short, long = page.ops
    assert isinstance(short, LineOp) and isinstance(long, LineOp)
    assert (short.x2, short.y2) == (long.x1, long.y1)
    assert short.x2 == pytest.approx(103.5)
    assert short.y2 == 200
    assert long.y2 > short.y1
    assert page.texts() == []


def test_glyph_mark_draws_check_character(font_name: str) -> None:
    page = RenderedPage(1, 595, 842)
    GlyphCheckMark(font_name).draw(page, FieldCoordinate(x=10, y=20, width=12, height=12, font_size=12))
    assert [op.text for op in page.texts()] == ["✓"]


def test_font_has_glyph(font_name: str) -> None:
    assert font_has_glyph(font_name, "A")


def test_glyph_style_falls_back_to_lines_without_check_glyph(font_name: str) -> None:
    # Vera has no U+2713
    assert isinstance(mark_renderer(MarkStyle.GLYPH, font_name), LineCheckMark)


def test_mark_renderer_style_names(font_name: str) -> None:
    assert isinstance(mark_renderer("line", font_name), LineCheckMark)
    with pytest.raises(ValueError):
        mark_renderer("stamp", font_name)
