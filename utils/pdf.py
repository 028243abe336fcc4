# This project was developed with assistance from AI tools.
"""
Text reader for the uploaded source documents (lease contracts and registry
extracts).

The text layer is read with pdfplumber. Pages with little or no text are
treated as scans and filled in by OCR when it is enabled.
"""
import logging
from dataclasses import dataclass, field
from pathlib import Path

import pdfplumber

from config import config as app_config
from utils.ocr import needs_ocr, ocr_pdf

logger = logging.getLogger(__name__)

PAGE_MARKER = "--- Page {number} ---"


class NoTextError(RuntimeError):
    """The PDF has no text layer and OCR recovered nothing either."""


@dataclass
class PDFExtractionResult:
    """Per-page text of one source PDF."""
    pages: list[str]
    include_page_markers: bool = True
    ocr_pages: list[int] = field(default_factory=list)
    ocr_confidence: float | None = None
    pdf_metadata: dict = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def ocr_used(self) -> bool:
        return bool(self.ocr_pages)

    @property
    def blank_pages(self) -> list[int]:
        """1-based numbers of pages with no text."""
        return [i + 1 for i, page in enumerate(self.pages) if not page.strip()]

    @property
    def text(self) -> str:
        parts = []
        for i, page in enumerate(self.pages):
            if not page.strip():
                continue
            if self.include_page_markers:
                parts.append(f"{PAGE_MARKER.format(number=i + 1)}\n{page}")
            else:
                parts.append(page)
        return "\n\n".join(parts)

    @property
    def is_empty(self) -> bool:
        """Check if extraction yielded no text."""
        return not self.text.strip()


def _fill_with_ocr(pdf_path: Path, result: PDFExtractionResult, min_chars: int) -> None:
    scanned = [i for i, page in enumerate(result.pages) if needs_ocr(page, min_chars)]
    if not scanned:
        return

    logger.info(f"{pdf_path.name}: running OCR on pages {[i + 1 for i in scanned]}")
    try:
        ocr = ocr_pdf(pdf_path)
    except Exception as e:
        logger.warning(f"OCR failed for {pdf_path.name}, keeping the text layer: {e}")
        return

    for i in scanned:
        if i < len(ocr.pages) and len(ocr.pages[i].strip()) > len(result.pages[i].strip()):
            result.pages[i] = ocr.pages[i]
            result.ocr_pages.append(i + 1)
    if result.ocr_pages:
        result.ocr_confidence = ocr.avg_confidence


def extract_text_from_pdf(
    pdf_path: Path | str,
    include_page_markers: bool = True,
    use_ocr: bool | None = None,
) -> PDFExtractionResult:
    """
    Read the text of a PDF, page by page.

    Args:
        pdf_path: Path to the PDF file
        include_page_markers: If True, add "--- Page X ---" markers between pages
        use_ocr: Override OCR setting (None = use config.OCR_ENABLED)

    Raises:
        FileNotFoundError: If PDF file doesn't exist
        RuntimeError: If the file cannot be parsed as a PDF
    """
    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    try:
        with pdfplumber.open(pdf_path) as pdf:
            metadata = {k: str(v) for k, v in (pdf.metadata or {}).items() if v is not None}
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        raise RuntimeError(f"Failed to extract text from {pdf_path}: {e}") from e

    result = PDFExtractionResult(pages=pages, include_page_markers=include_page_markers, pdf_metadata=metadata)

    ocr_enabled = app_config.OCR_ENABLED if use_ocr is None else use_ocr
    if ocr_enabled:
        _fill_with_ocr(pdf_path, result, app_config.OCR_MIN_CHARS_PER_PAGE)

    if result.blank_pages:
        logger.debug(f"{pdf_path.name}: no text on pages {result.blank_pages}")
    return result
