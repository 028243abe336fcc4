# This project was developed with assistance from AI tools.
"""
Redaction/overwrite primitive.

Paints opaque white rectangles over a slot's previous contents. Must be
issued before the new text in the same region, never after.
"""
from dataclasses import dataclass

from .canvas import WHITE, RenderedPage
from .registry import Band, FieldCoordinate, OcclusionPolicy, PageLayout

# Tight policy: box plus a small margin
TIGHT_PAD_X = 1.0
TIGHT_PAD_BELOW = 3.0
TIGHT_PAD_ABOVE = 1.0

# Generous policy: placeholder content in the template is wider than the slot
GENEROUS_EXTEND_LEFT = 6.0
GENEROUS_EXTRA_WIDTH = 80.0


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float


def _apply_policy(x: float, width: float, policy: OcclusionPolicy, right_limit: float) -> tuple[float, float]:
    if policy is OcclusionPolicy.GENEROUS:
        x -= GENEROUS_EXTEND_LEFT
        width += GENEROUS_EXTEND_LEFT + GENEROUS_EXTRA_WIDTH
    # Never spill past the page's right margin
    width = min(width, max(0.0, right_limit - x))
    return x, width


def occlusion_rect(coord: FieldCoordinate, right_limit: float) -> Rect:
    """Rectangle covering a single-line slot, including descenders below the baseline."""
    x = coord.x - TIGHT_PAD_X
    width = coord.width + 2 * TIGHT_PAD_X
    x, width = _apply_policy(x, width, coord.occlusion, right_limit)
    return Rect(
        x=x,
        y=coord.y - TIGHT_PAD_BELOW,
        width=width,
        height=coord.height + TIGHT_PAD_BELOW + TIGHT_PAD_ABOVE,
    )


def block_rect(coord: FieldCoordinate, right_limit: float) -> Rect:
    """
    Rectangle covering a wrapped box.

    ``coord.y`` is the first baseline and lines run downward, so the box hangs
    from one font size above the first baseline.
    """
    x = coord.x - TIGHT_PAD_X
    width = coord.width + 2 * TIGHT_PAD_X
    x, width = _apply_policy(x, width, coord.occlusion, right_limit)
    return Rect(
        x=x,
        y=coord.y - coord.height + coord.size - 1,
        width=width,
        height=coord.height + 2,
    )


def occlude(page: RenderedPage, coord: FieldCoordinate, layout: PageLayout) -> Rect:
    rect = block_rect(coord, layout.right_limit) if coord.wraps else occlusion_rect(coord, layout.right_limit)
    page.rect(rect.x, rect.y, rect.width, rect.height, fill=WHITE)
    return rect


def clear_band(page: RenderedPage, band: Band) -> None:
    page.rect(band.x0, band.y0, band.width, band.height, fill=WHITE)
