# This project was developed with assistance from AI tools.
from rendering.canvas import WHITE, RectOp, RenderedPage
from rendering.occlusion import Rect, block_rect, clear_band, occlude, occlusion_rect
from rendering.registry import Band, FieldCoordinate, OcclusionPolicy, PageLayout

LAYOUT = PageLayout(number=1, width=595, height=842)
RIGHT_LIMIT = LAYOUT.right_limit


def test_tight_rect_covers_slot_and_descenders() -> None:
    coord = FieldCoordinate(x=100, y=500, width=50, height=12)
    assert occlusion_rect(coord, RIGHT_LIMIT) == Rect(x=99, y=497, width=52, height=16)


def test_generous_rect_extends_left_and_right() -> None:
    coord = FieldCoordinate(x=100, y=500, width=50, height=12, occlusion=OcclusionPolicy.GENEROUS)
    assert occlusion_rect(coord, RIGHT_LIMIT) == Rect(x=93, y=497, width=138, height=16)


def test_generous_rect_is_capped_at_right_margin() -> None:
    coord = FieldCoordinate(x=500, y=500, width=50, height=12, occlusion=OcclusionPolicy.GENEROUS)
    rect = occlusion_rect(coord, RIGHT_LIMIT)
    assert rect.x == 493
    assert rect.x + rect.width == RIGHT_LIMIT


def test_block_rect_hangs_below_first_baseline() -> None:
    coord = FieldCoordinate(x=100, y=586, width=470, height=24, font_size=8, max_width=470)
    assert block_rect(coord, RIGHT_LIMIT) == Rect(x=99, y=569, width=472, height=26)


def test_occlude_paints_white_rect() -> None:
    page = RenderedPage(1, 595, 842)
    wrapped = FieldCoordinate(x=100, y=586, width=470, height=24, font_size=8, max_width=470)

    occlude(page, FieldCoordinate(x=100, y=500, width=50, height=12), LAYOUT)
    occlude(page, wrapped, LAYOUT)

    assert page.ops == [
        RectOp(99, 497, 52, 16, fill=WHITE),
        RectOp(99, 569, 472, 26, fill=WHITE),
    ]


def test_clear_band() -> None:
    page = RenderedPage(4, 595, 842)
    clear_band(page, Band(x0=318, y0=310, x1=575, y1=634))
    assert page.ops == [RectOp(318, 310, 257, 324, fill=WHITE)]
