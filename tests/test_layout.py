# This project was developed with assistance from AI tools.
import pytest
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont

from rendering.layout import (
    MIN_FONT_SIZE,
    fit_lines,
    line_capacity,
    line_height,
    measure_width,
    shrink_to_fit,
    wrap,
)


def test_wrap_empty_text_has_no_lines(font_name: str) -> None:
    assert wrap("", font_name, 8, 100) == []


def test_wrap_breaks_between_characters_without_spaces(font_name: str) -> None:
    text = "A" * 20
    max_width = measure_width("AAAAA", font_name, 10)

    lines = wrap(text, font_name, 10, max_width)

    assert lines == ["AAAAA"] * 4
    assert all(measure_width(line, font_name, 10) <= max_width for line in lines)


def test_wrap_is_lossless(font_name: str) -> None:
    text = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
    lines = wrap(text, font_name, 9, measure_width("ABCDEFG", font_name, 9))

    assert "".join(lines) == text
    assert len(lines) > 1


def test_wrap_honours_newlines_and_drops_trailing_blank_lines(font_name: str) -> None:
    assert wrap("ab\n\ncd\n\n", font_name, 8, 500) == ["ab", "", "cd"]
    assert wrap("ab\r\ncd", font_name, 8, 500) == ["ab", "cd"]


def test_wrap_gives_an_oversized_glyph_its_own_line(font_name: str) -> None:
    lines = wrap("WWW", font_name, 20, 1.0)
    assert lines == ["W", "W", "W"]


def test_line_capacity() -> None:
    assert line_height(7) == 9
    assert line_capacity(24, 7) == 2
    assert line_capacity(80, 7) == 8
    assert line_capacity(5, 8) == 0


def test_fit_lines_truncates_to_box(font_name: str) -> None:
    text = "\n".join(f"line {i}" for i in range(10))
    lines = fit_lines(text, font_name, 7, 500, 24)
    assert lines == ["line 0", "line 1"]


def test_shrink_to_fit_keeps_size_for_short_text(font_name: str) -> None:
    assert shrink_to_fit("short", font_name, 9, 200) == 9


def test_shrink_to_fit_reduces_size_until_text_fits(font_name: str) -> None:
    text = "A fairly long building name that overflows"
    width = measure_width(text, font_name, 9) * 0.8

    size = shrink_to_fit(text, font_name, 9, width)

    assert MIN_FONT_SIZE <= size < 9
    assert measure_width(text, font_name, size) <= width


def test_shrink_to_fit_stops_at_floor(font_name: str) -> None:
    assert shrink_to_fit("X" * 200, font_name, 9, 20) == MIN_FONT_SIZE


@pytest.fixture(scope="module")
def cjk_font() -> str:
    # Built into reportlab; full-width glyphs are 1000 units wide
    pdfmetrics.registerFont(UnicodeCIDFont("HeiseiKakuGo-W5"))
    return "HeiseiKakuGo-W5"


def test_wrap_japanese_text_per_character(cjk_font: str) -> None:
    assert wrap("京都府京都市南区", cjk_font, 10, 30) == ["京都府", "京都市", "南区"]


def test_wrap_mixed_script_is_lossless_and_fits(cjk_font: str) -> None:
    text = "京都府京都市南区西九条池ノ内町93番地 Sample Mansion 101号室"
    max_width = 60.0

    lines = wrap(text, cjk_font, 9, max_width)

    assert "".join(lines) == text
    assert all(measure_width(line, cjk_font, 9) <= max_width for line in lines)
    assert lines[0] == "京都府京都市"


def test_shrink_to_fit_japanese(cjk_font: str) -> None:
    assert shrink_to_fit("京都府京都市南区西九条", cjk_font, 10, 88) == 8.0
    assert shrink_to_fit("株式会社", cjk_font, 10, 40) == 10


def test_latin_is_narrower_than_kanji(cjk_font: str) -> None:
    assert measure_width("AB", cjk_font, 10) < measure_width("京都", cjk_font, 10)
