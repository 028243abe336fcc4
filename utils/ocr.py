# This project was developed with assistance from AI tools.
"""
OCR for scanned source documents using docTR.

Registry extracts in particular are often uploaded as scans with no text
layer. The model is loaded on first use and runs on the GPU only when enough
free memory is available.
"""
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_ocr_model = None
_ocr_device = None


@dataclass
class OCRResult:
    """Recognised text per page, in page order."""
    pages: list[str]
    device: str
    avg_confidence: float
    word_count: int


def _get_device() -> str:
    """Use the GPU when it has at least OCR_MIN_FREE_VRAM_GB free."""
    import torch

    from config import config as app_config

    if not torch.cuda.is_available():
        logger.info("OCR using CPU (no GPU available)")
        return "cpu"

    free_mem_gb = torch.cuda.mem_get_info()[0] / (1024 ** 3)
    if free_mem_gb >= app_config.OCR_MIN_FREE_VRAM_GB:
        logger.info(f"OCR using GPU (free VRAM: {free_mem_gb:.1f}GB)")
        return "cuda"
    logger.info(f"OCR using CPU (only {free_mem_gb:.1f}GB VRAM free, need {app_config.OCR_MIN_FREE_VRAM_GB}GB)")
    return "cpu"


def _get_ocr_model():
    global _ocr_model, _ocr_device

    if _ocr_model is None:
        from doctr.models import ocr_predictor

        _ocr_device = _get_device()
        _ocr_model = ocr_predictor(det_arch="db_resnet50", reco_arch="crnn_vgg16_bn", pretrained=True)
        if _ocr_device == "cuda":
            _ocr_model = _ocr_model.cuda()

    return _ocr_model


def ocr_pdf(pdf_path: Path | str) -> OCRResult:
    """Run OCR over every page of a PDF."""
    from doctr.io import DocumentFile

    model = _get_ocr_model()
    result = model(DocumentFile.from_pdf(str(pdf_path)))

    pages = []
    total_confidence = 0.0
    word_count = 0
    for page in result.pages:
        lines = []
        for block in page.blocks:
            for line in block.lines:
                lines.append(" ".join(word.value for word in line.words))
                total_confidence += sum(word.confidence for word in line.words)
                word_count += len(line.words)
        pages.append("\n".join(lines))

    return OCRResult(
        pages=pages,
        device=_ocr_device or "cpu",
        avg_confidence=total_confidence / word_count if word_count else 0.0,
        word_count=word_count,
    )


def needs_ocr(page_text: str, min_chars: int) -> bool:
    """A page with fewer than ``min_chars`` characters of text is treated as scanned."""
    return len(page_text.strip()) < min_chars
