# This project was developed with assistance from AI tools.
"""
Text layout engine: measurement, character-level wrapping and shrink-to-fit.

Wrapping is done per character rather than per word; Japanese text has no
whitespace word boundaries, so word-wrap must not be substituted here.
"""
import logging
import math

from reportlab.pdfbase import pdfmetrics

logger = logging.getLogger(__name__)

MIN_FONT_SIZE = 4.0
SHRINK_STEP = 0.5
LINE_GAP = 2.0


def measure_width(text: str, font_name: str, size: float) -> float:
    """Width of ``text`` in points, from the font's glyph metrics."""
    return pdfmetrics.stringWidth(text, font_name, size)


def line_height(size: float) -> float:
    return size + LINE_GAP


def line_capacity(height: float, size: float) -> int:
    """Number of wrapped lines that fit a box of ``height`` points."""
    return max(0, math.floor(height / line_height(size)))


def _wrap_paragraph(paragraph: str, font_name: str, size: float, max_width: float) -> list[str]:
    lines = []
    current = ""
    for char in paragraph:
        candidate = current + char
        if measure_width(candidate, font_name, size) > max_width:
            if current:
                lines.append(current)
            # A glyph wider than max_width still gets a line of its own
            current = char
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def wrap(text: str, font_name: str, size: float, max_width: float) -> list[str]:
    """
    Greedy character-by-character wrap.

    Newlines in the input always start a new line. Blank paragraphs are kept
    as empty lines; trailing blank lines are dropped.
    """
    if not text:
        return []

    lines: list[str] = []
    for paragraph in text.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
        lines.extend(_wrap_paragraph(paragraph, font_name, size, max_width) or [""])

    while lines and not lines[-1]:
        lines.pop()
    return lines


def shrink_to_fit(
    text: str,
    font_name: str,
    initial_size: float,
    max_width: float,
    floor: float = MIN_FONT_SIZE,
    step: float = SHRINK_STEP,
) -> float:
    """
    Largest size, in ``step`` decrements from ``initial_size``, at which
    ``text`` fits on one line of ``max_width``.

    Returns ``floor`` when the text still overflows at the floor size; the
    caller draws it anyway and the overflow is logged.
    """
    size = initial_size
    while size > floor and measure_width(text, font_name, size) > max_width:
        size -= step
    size = max(size, min(floor, initial_size))

    if measure_width(text, font_name, size) > max_width:
        logger.debug(f"Text overflows {max_width:.1f}pt at floor size {size}: {text[:40]!r}")
    return size


def fit_lines(text: str, font_name: str, size: float, max_width: float, height: float) -> list[str]:
    """Wrapped lines truncated to the box's line capacity (excess lines are dropped)."""
    lines = wrap(text, font_name, size, max_width)
    capacity = line_capacity(height, size)
    if len(lines) > capacity:
        logger.debug(f"Truncated {len(lines) - capacity} line(s) beyond box capacity {capacity}")
    return lines[:capacity]
