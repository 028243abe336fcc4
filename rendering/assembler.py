# This project was developed with assistance from AI tools.
"""
Document assembler.

Composes one RenderedPage per template page, replays them into a single
reportlab overlay document and stamps each non-blank overlay page onto the
matching template page with pikepdf. Without a template the overlay itself is
the output (fresh-document mode).
"""
import logging
from io import BytesIO

import pikepdf

from models import DisclosureRecord

from .assets import AssetSources, LoadedTemplate, load_font, load_template
from .canvas import RenderedPage, render_pages
from .composer import PageComposer
from .errors import ConfigurationError, TemplateLoadError
from .marks import MarkRenderer, MarkStyle, mark_renderer
from .pages import PAGE_WALKS
from .registry import FieldRegistry, get_registry

logger = logging.getLogger(__name__)

# Template pages may differ from the registry's nominal size by rounding
SIZE_TOLERANCE = 1.0

# Overlay forms are registered under fixed names so saved bytes stay stable
OVERLAY_PREFIX = "DisclosureOverlay"


class DocumentAssembler:
    """Renders DisclosureRecords against one registry, font and (optional) template."""

    def __init__(
        self,
        registry: FieldRegistry,
        font_name: str,
        marks: MarkRenderer,
        template: LoadedTemplate | None = None,
    ):
        self.registry = registry
        self.font_name = font_name
        self.marks = marks
        self.template = template

    def new_page(self, number: int) -> RenderedPage:
        layout = self.registry.page(number)
        if layout is not None:
            return RenderedPage(number, layout.width, layout.height)
        if self.template is not None:
            width, height = self.template.page_sizes[number - 1]
        else:
            width, height = self.registry.default_size
        return RenderedPage(number, width, height)

    def compose(self, record: DisclosureRecord) -> list[RenderedPage]:
        """One RenderedPage per template page, in page order."""
        pages = []
        for number in range(1, self.registry.page_count + 1):
            page = self.new_page(number)
            walk = PAGE_WALKS.get(number)
            if walk is not None:
                walk(PageComposer(self.registry, number, page, self.font_name, self.marks), record)
            logger.debug(f"Composed page {number}: {len(page.ops)} operations")
            pages.append(page)
        return pages

    def assemble(self, pages: list[RenderedPage]) -> bytes:
        overlay = render_pages(pages)
        if self.template is None:
            return overlay
        return stamp(self.template, pages, overlay)

    def render(self, record: DisclosureRecord) -> bytes:
        return self.assemble(self.compose(record))


def stamp(template: LoadedTemplate, pages: list[RenderedPage], overlay: bytes) -> bytes:
    """Overlay each non-blank page onto the template and save deterministically."""
    if len(pages) != template.page_count:
        raise TemplateLoadError(f"Composed {len(pages)} pages for a {template.page_count}-page template")

    with pikepdf.open(BytesIO(overlay)) as overlay_pdf, pikepdf.open(BytesIO(template.data)) as pdf:
        for rendered, target, source in zip(pages, pdf.pages, overlay_pdf.pages):
            if rendered.is_blank:
                continue
            width, height = template.page_sizes[rendered.number - 1]
            if abs(width - rendered.width) > SIZE_TOLERANCE or abs(height - rendered.height) > SIZE_TOLERANCE:
                logger.warning(
                    f"Template page {rendered.number} is {width:.1f}x{height:.1f}pt; "
                    f"coordinates assume {rendered.width:.1f}x{rendered.height:.1f}pt"
                )
            _stamp_page(pdf, target, source, rendered.number)

        buffer = BytesIO()
        pdf.save(buffer, deterministic_id=True)
    return buffer.getvalue()


def _overlay_name(target: pikepdf.Page, number: int) -> pikepdf.Name:
    """First /DisclosureOverlay{n}[_k] name not already used by the template page."""
    existing = set()
    if pikepdf.Name.Resources in target.obj and pikepdf.Name.XObject in target.obj.Resources:
        existing = set(target.obj.Resources.XObject.keys())
    name = f"/{OVERLAY_PREFIX}{number}"
    suffix = 1
    while name in existing:
        name = f"/{OVERLAY_PREFIX}{number}_{suffix}"
        suffix += 1
    return pikepdf.Name(name)


def _stamp_page(pdf: pikepdf.Pdf, target: pikepdf.Page, source: pikepdf.Page, number: int) -> None:
    """
    Draw ``source`` over ``target`` as a form XObject.

    The template's own content is wrapped in q/Q so its graphics state cannot
    leak into the overlay.
    """
    form = pdf.copy_foreign(source.as_form_xobject())
    name = _overlay_name(target, number)
    target.add_resource(form, pikepdf.Name.XObject, name=name)

    x0, y0 = float(target.mediabox[0]), float(target.mediabox[1])
    target.contents_add(pikepdf.Stream(pdf, b"q\n"), prepend=True)
    target.contents_add(pikepdf.Stream(pdf, f"\nQ\nq 1 0 0 1 {x0:g} {y0:g} cm {name} Do Q\n".encode("ascii")))


def build_assembler(
    sources: AssetSources,
    version: str,
    mark_style: MarkStyle | str = MarkStyle.LINE,
) -> DocumentAssembler:
    """
    Acquire the font and template for one render.

    Raises ConfigurationError for an unknown version or mark style, and
    FontLoadError / TemplateLoadError, before anything is composed.
    """
    try:
        registry = get_registry(version)
    except KeyError as e:
        raise ConfigurationError(e.args[0]) from None
    try:
        style = MarkStyle(mark_style)
    except ValueError:
        known = ", ".join(s.value for s in MarkStyle)
        raise ConfigurationError(f"Unknown mark style '{mark_style}' (known: {known})") from None

    font_name = load_font(sources)
    template = load_template(sources, registry.page_count) if sources.has_template else None
    if template is None:
        logger.info("No template configured; rendering a fresh document")
    return DocumentAssembler(registry, font_name, mark_renderer(style, font_name), template)


def render_disclosure(
    record: DisclosureRecord,
    sources: AssetSources,
    version: str = "51-1",
    mark_style: MarkStyle | str = MarkStyle.LINE,
) -> bytes:
    """Render ``record`` into the template of ``version`` and return the PDF bytes."""
    return build_assembler(sources, version, mark_style).render(record)
