# This project was developed with assistance from AI tools.
"""
In-progress page canvas.

A RenderedPage records drawing operations in the order they are issued and
is replayed exactly once onto a reportlab canvas when the document is
assembled. Keeping the operations as data lets the composer be inspected
without producing a PDF.
"""
from dataclasses import dataclass
from io import BytesIO

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas as rl_canvas

Color = tuple[float, float, float]

WHITE: Color = (1.0, 1.0, 1.0)
BLACK: Color = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    fill: Color | None = WHITE
    stroke: Color | None = None
    stroke_width: float = 0.5


@dataclass(frozen=True)
class TextOp:
    x: float
    y: float
    text: str
    font_name: str
    size: float
    color: Color = BLACK


@dataclass(frozen=True)
class LineOp:
    x1: float
    y1: float
    x2: float
    y2: float
    width: float = 1.0
    color: Color = BLACK


@dataclass(frozen=True)
class ImageOp:
    x: float
    y: float
    width: float
    height: float
    data: bytes


DrawOp = RectOp | TextOp | LineOp | ImageOp


class RenderedPage:
    """Append-only list of drawing operations for one output page."""

    def __init__(self, number: int, width: float, height: float):
        self.number = number
        self.width = width
        self.height = height
        self.ops: list[DrawOp] = []

    def __repr__(self) -> str:
        return f"RenderedPage(number={self.number}, ops={len(self.ops)})"

    @property
    def is_blank(self) -> bool:
        return not self.ops

    def rect(self, x, y, width, height, fill: Color | None = WHITE, stroke: Color | None = None,
             stroke_width: float = 0.5) -> None:
        self.ops.append(RectOp(x, y, width, height, fill, stroke, stroke_width))

    def text(self, x, y, text: str, font_name: str, size: float, color: Color = BLACK) -> None:
        self.ops.append(TextOp(x, y, text, font_name, size, color))

    def line(self, x1, y1, x2, y2, width: float = 1.0, color: Color = BLACK) -> None:
        self.ops.append(LineOp(x1, y1, x2, y2, width, color))

    def image(self, x, y, width, height, data: bytes) -> None:
        self.ops.append(ImageOp(x, y, width, height, data))

    def texts(self) -> list[TextOp]:
        return [op for op in self.ops if isinstance(op, TextOp)]

    def replay(self, c: rl_canvas.Canvas) -> None:
        """Issue every recorded operation on ``c`` in order."""
        for op in self.ops:
            if isinstance(op, RectOp):
                c.saveState()
                if op.fill is not None:
                    c.setFillColorRGB(*op.fill)
                if op.stroke is not None:
                    c.setStrokeColorRGB(*op.stroke)
                    c.setLineWidth(op.stroke_width)
                c.rect(op.x, op.y, op.width, op.height,
                       stroke=int(op.stroke is not None), fill=int(op.fill is not None))
                c.restoreState()
            elif isinstance(op, TextOp):
                c.saveState()
                c.setFillColorRGB(*op.color)
                c.setFont(op.font_name, op.size)
                c.drawString(op.x, op.y, op.text)
                c.restoreState()
            elif isinstance(op, LineOp):
                c.saveState()
                c.setStrokeColorRGB(*op.color)
                c.setLineWidth(op.width)
                c.setLineCap(1)
                c.line(op.x1, op.y1, op.x2, op.y2)
                c.restoreState()
            elif isinstance(op, ImageOp):
                c.drawImage(ImageReader(BytesIO(op.data)), op.x, op.y, op.width, op.height)


def render_pages(pages: list[RenderedPage]) -> bytes:
    """
    Replay pages onto a fresh reportlab document, one output page per entry.

    ``invariant=1`` keeps creation dates and document IDs fixed so identical
    input produces identical bytes.
    """
    buffer = BytesIO()
    first = pages[0] if pages else None
    pagesize = (first.width, first.height) if first else (595.0, 842.0)
    c = rl_canvas.Canvas(buffer, pagesize=pagesize, invariant=1, pageCompression=1)
    for page in pages:
        c.setPageSize((page.width, page.height))
        page.replay(c)
        c.showPage()
    c.save()
    return buffer.getvalue()
