# This project was developed with assistance from AI tools.
"""
Font and template acquisition.

Each render acquires its assets once, before any page is composed. A local
path is preferred; configured URLs are tried in order after it. Any failure
raises, so no partial document is ever produced.
"""
import logging
from dataclasses import dataclass, field
from io import BytesIO
from pathlib import Path

import httpx
import pikepdf
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from .errors import FontLoadError, RenderError, TemplateLoadError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class AssetSources:
    """Where to obtain the embedding font and the template PDF."""
    font_name: str = "NotoSansJP"
    font_path: str | None = None
    font_urls: tuple[str, ...] = ()
    template_path: str | None = None
    template_urls: tuple[str, ...] = ()
    timeout: float = DEFAULT_TIMEOUT

    @property
    def has_template(self) -> bool:
        return bool(self.template_path or self.template_urls)


@dataclass
class LoadedTemplate:
    data: bytes
    page_count: int
    page_sizes: list[tuple[float, float]] = field(default_factory=list)


def _fetch(url: str, timeout: float) -> bytes:
    response = httpx.get(url, timeout=timeout, follow_redirects=True)
    response.raise_for_status()
    return response.content


def read_asset(
    path: str | None,
    urls: tuple[str, ...],
    timeout: float,
    label: str,
    error: type[RenderError],
) -> bytes:
    """Bytes of an asset from ``path`` or, failing that, the first URL that answers."""
    failures = []

    if path:
        asset_path = Path(path)
        if asset_path.is_file():
            logger.debug(f"Reading {label} from {asset_path}")
            try:
                return asset_path.read_bytes()
            except OSError as e:
                failures.append(f"{asset_path}: {e}")
        else:
            failures.append(f"{asset_path}: not found")

    for url in urls:
        try:
            logger.info(f"Fetching {label} from {url}")
            return _fetch(url, timeout)
        except httpx.HTTPError as e:
            logger.warning(f"Could not fetch {label} from {url}: {e}")
            failures.append(f"{url}: {e}")

    if not failures:
        raise error(f"No source configured for {label}")
    raise error(f"Could not load {label} ({'; '.join(failures)})")


def load_font(sources: AssetSources) -> str:
    """Register the TrueType font with reportlab and return its registered name."""
    data = read_asset(sources.font_path, sources.font_urls, sources.timeout, "font", FontLoadError)
    try:
        font = TTFont(sources.font_name, BytesIO(data))
    except (TTFError, ValueError, OSError) as e:
        raise FontLoadError(f"Font '{sources.font_name}' could not be parsed: {e}") from e
    pdfmetrics.registerFont(font)
    logger.debug(f"Registered font {sources.font_name} ({len(data)} bytes)")
    return sources.font_name


def load_template(sources: AssetSources, expected_pages: int) -> LoadedTemplate:
    """Read and validate the template PDF for a registry with ``expected_pages`` pages."""
    data = read_asset(
        sources.template_path, sources.template_urls, sources.timeout, "template", TemplateLoadError
    )
    try:
        with pikepdf.open(BytesIO(data)) as pdf:
            sizes = [(float(p.mediabox[2]) - float(p.mediabox[0]),
                      float(p.mediabox[3]) - float(p.mediabox[1])) for p in pdf.pages]
    except pikepdf.PdfError as e:
        raise TemplateLoadError(f"Template is not a readable PDF: {e}") from e

    if len(sizes) != expected_pages:
        raise TemplateLoadError(
            f"Template has {len(sizes)} pages; this template version expects {expected_pages}"
        )
    return LoadedTemplate(data=data, page_count=len(sizes), page_sizes=sizes)
