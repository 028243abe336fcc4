# This project was developed with assistance from AI tools.
"""
Hazard-map document.

A separate fresh A4 document: title, property address, then one section per
hazard (flood, landslide, tsunami) with the map image or a placeholder, the
risk narrative and a colour legend. Content flows onto a new page when the
current one runs out of space.
"""
import base64
import binascii
import logging
from dataclasses import dataclass
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from models import HazardReport

from .assets import AssetSources, load_font
from .canvas import BLACK, Color, RenderedPage, render_pages
from .layout import line_height, wrap

logger = logging.getLogger(__name__)

PAGE_WIDTH = 595.28
PAGE_HEIGHT = 841.89
MARGIN = 50.0
# Tallest map that still fits on a fresh page with its trailing gap
MAX_IMAGE_HEIGHT = PAGE_HEIGHT - MARGIN * 2 - 10

TITLE = "ハザードマップ"
IMAGE_MISSING = "（画像を取得できませんでした）"
LEGEND_HEADING = "【凡例】"
FOOTER = "※ 国土地理院・重ねるハザードマップのデータを元に作成"

GREY: Color = (0.3, 0.3, 0.3)
LIGHT_GREY: Color = (0.5, 0.5, 0.5)
SECTION_FILL: Color = (0.93, 0.93, 0.97)
SECTION_INK: Color = (0.1, 0.1, 0.3)


def _rgb(r: int, g: int, b: int) -> Color:
    return (r / 255, g / 255, b / 255)


DEPTH_COLORS = [_rgb(255, 255, 179), _rgb(253, 174, 97), _rgb(215, 25, 28), _rgb(145, 0, 63), _rgb(117, 0, 130)]

FLOOD_LEGEND = list(zip(DEPTH_COLORS, ["0.5m未満", "0.5〜3.0m", "3.0〜5.0m", "5.0〜10.0m", "10.0m以上"]))
LANDSLIDE_LEGEND = [(_rgb(255, 255, 0), "土砂災害警戒区域"), (_rgb(255, 0, 0), "土砂災害特別警戒区域")]
TSUNAMI_LEGEND = list(zip(DEPTH_COLORS, ["0.3m未満", "0.3〜1.0m", "1.0〜2.0m", "2.0〜5.0m", "5.0m以上"]))


@dataclass
class MapSection:
    title: str
    image: str
    narrative: str
    legend: list[tuple[Color, str]]


def sections_for(report: HazardReport) -> list[MapSection]:
    return [
        MapSection("洪水浸水想定区域図", report.flood_map_image, report.flood_risk, FLOOD_LEGEND),
        MapSection("土砂災害警戒区域図", report.landslide_map_image, report.landslide_risk, LANDSLIDE_LEGEND),
        MapSection("津波浸水想定区域図", report.tsunami_map_image, report.tsunami_risk, TSUNAMI_LEGEND),
    ]


def decode_image(encoded: str) -> tuple[bytes, int, int] | None:
    """
    Decode a base64 raster into PNG bytes with its pixel size.

    Returns None for empty or undecodable data; the section then shows the
    placeholder text instead of an image.
    """
    if not encoded:
        return None
    if encoded.startswith("data:") and "," in encoded:
        encoded = encoded.split(",", 1)[1]
    try:
        raw = base64.b64decode(encoded, validate=True)
        with Image.open(BytesIO(raw)) as img:
            img.load()
            rgb = img.convert("RGB")
    except (binascii.Error, ValueError, UnidentifiedImageError, OSError) as e:
        logger.warning(f"Hazard map image could not be decoded: {e}")
        return None

    out = BytesIO()
    rgb.save(out, format="PNG")
    return out.getvalue(), rgb.width, rgb.height


def fit_image(width_px: int, height_px: int, max_width: float, max_height: float) -> tuple[float, float]:
    """Scale to the column width, then shrink both sides if the result is too tall."""
    scale = max_width / width_px
    if height_px * scale > max_height:
        scale = max_height / height_px
    return width_px * scale, height_px * scale


class HazardDocument:
    """Flowing layout over a list of RenderedPages."""

    def __init__(self, font_name: str):
        self.font_name = font_name
        self.pages: list[RenderedPage] = []
        self.y = 0.0
        self.content_width = PAGE_WIDTH - MARGIN * 2
        self._new_page()

    @property
    def page(self) -> RenderedPage:
        return self.pages[-1]

    def _new_page(self) -> None:
        self.pages.append(RenderedPage(len(self.pages) + 1, PAGE_WIDTH, PAGE_HEIGHT))
        self.y = PAGE_HEIGHT - MARGIN

    def ensure_space(self, needed: float) -> None:
        if self.y - needed < MARGIN:
            self._new_page()

    def text(self, x: float, text: str, size: float, color: Color = BLACK) -> None:
        self.page.text(x, self.y, text, self.font_name, size, color)

    def header(self, address: str) -> None:
        self.text(MARGIN, TITLE, 18)
        self.y -= 25
        self.page.line(MARGIN, self.y + 5, PAGE_WIDTH - MARGIN, self.y + 5, width=1.0)
        self.y -= 10
        if address:
            self.text(MARGIN, f"対象物件: {address}", 9, GREY)
            self.y -= 20

    def section(self, section: MapSection) -> None:
        image_width = self.content_width - 20
        # Keep the heading with a square map where possible
        self.ensure_space(image_width + 100)

        self.page.rect(MARGIN, self.y - 4, self.content_width, 22, fill=SECTION_FILL)
        self.text(MARGIN + 8, section.title, 11, SECTION_INK)
        self.y -= 25

        decoded = decode_image(section.image)
        if decoded is not None:
            data, width_px, height_px = decoded
            width, height = fit_image(width_px, height_px, image_width, MAX_IMAGE_HEIGHT)
            self.ensure_space(height + 10)
            self.page.image(MARGIN + 10, self.y - height, width, height, data)
            self.y -= height + 10
        else:
            self.text(MARGIN + 10, IMAGE_MISSING, 9, LIGHT_GREY)
            self.y -= 15

        if section.narrative:
            for line in wrap(section.narrative, self.font_name, 8, image_width):
                self.ensure_space(line_height(8) + 5)
                if line:
                    self.text(MARGIN + 10, line, 8, GREY)
                self.y -= line_height(8)
            self.y -= 5

        self.ensure_space(20 + len(section.legend) * 16)
        self.text(MARGIN + 10, LEGEND_HEADING, 8)
        self.y -= 14
        for color, label in section.legend:
            self.ensure_space(16)
            self.page.rect(MARGIN + 15, self.y - 2, 14, 10, fill=color, stroke=LIGHT_GREY, stroke_width=0.5)
            self.text(MARGIN + 35, label, 8)
            self.y -= 14
        self.y -= 15

    def footer(self) -> None:
        self.ensure_space(30)
        self.text(MARGIN, FOOTER, 7, LIGHT_GREY)


def compose_hazard_pages(report: HazardReport, font_name: str) -> list[RenderedPage]:
    doc = HazardDocument(font_name)
    doc.header(report.address)
    for section in sections_for(report):
        doc.section(section)
    doc.footer()
    return doc.pages


def render_hazard_document(report: HazardReport, sources: AssetSources) -> bytes:
    """Render the hazard document as a fresh PDF; font failures raise FontLoadError."""
    font_name = load_font(sources)
    pages = compose_hazard_pages(report, font_name)
    logger.info(f"Hazard document: {len(pages)} page(s)")
    return render_pages(pages)
