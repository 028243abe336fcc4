# This project was developed with assistance from AI tools.
"""Calibration sheet: outlines of every registered slot drawn over the template."""
import logging

from .assembler import DocumentAssembler
from .canvas import Color, RenderedPage
from .registry import PageLayout

logger = logging.getLogger(__name__)

FIELD_INK: Color = (0.85, 0.1, 0.1)
ROW_INK: Color = (0.1, 0.5, 0.1)
BAND_INK: Color = (0.1, 0.2, 0.85)
LABEL_SIZE = 4.0


def _outline(page: RenderedPage, x, y, width, height, color: Color) -> None:
    page.rect(x, y, width, height, fill=None, stroke=color, stroke_width=0.4)


def draw_layout(page: RenderedPage, layout: PageLayout, font_name: str) -> None:
    for band in layout.bands:
        _outline(page, band.x0, band.y0, band.width, band.height, BAND_INK)

    for name, coord in layout.fields.items():
        # Wrapped boxes hang from their first baseline
        bottom = coord.y - coord.height + coord.size if coord.wraps else coord.y
        _outline(page, coord.x, bottom, coord.width, coord.height, FIELD_INK)
        page.text(coord.x, bottom + coord.height + 0.5, name, font_name, LABEL_SIZE, FIELD_INK)

    for group_name, group in layout.row_groups.items():
        labels = group.keys or tuple(str(i) for i in range(group.capacity))
        for index, label in enumerate(labels):
            for column in group.columns:
                cell = group.cell(column, index)
                _outline(page, cell.x, cell.y, cell.width, cell.height, ROW_INK)
            first = next(iter(group.columns.values()))
            page.text(first.x - 40, group.row_y(index), f"{group_name}[{label}]", font_name, LABEL_SIZE, ROW_INK)


def render_calibration(assembler: DocumentAssembler) -> bytes:
    """Every page of the template with its registered geometry outlined."""
    pages = []
    for number in range(1, assembler.registry.page_count + 1):
        page = assembler.new_page(number)
        layout = assembler.registry.page(number)
        if layout is not None:
            draw_layout(page, layout, assembler.font_name)
        pages.append(page)
    logger.info(f"Calibration sheet for template {assembler.registry.version}")
    return assembler.assemble(pages)
