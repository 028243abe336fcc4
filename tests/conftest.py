# This project was developed with assistance from AI tools.
from io import BytesIO
from pathlib import Path

import pytest
import reportlab
from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

import config
from rendering import AssetSources

# Vera ships with reportlab, so rendering tests need no network or system fonts
VERA_PATH = Path(reportlab.__file__).parent / "fonts" / "Vera.ttf"
FONT_NAME = "TestVera"


def make_pdf(page_count: int, lines: list[str] | None = None, pagesize=A4) -> bytes:
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=pagesize, invariant=1)
    for number in range(1, page_count + 1):
        c.setFont("Helvetica", 10)
        c.drawString(40, 800, f"template page {number}")
        for i, line in enumerate(lines or []):
            c.drawString(40, 760 - i * 14, line)
        c.showPage()
    c.save()
    return buffer.getvalue()


@pytest.fixture(scope="session")
def font_name() -> str:
    pdfmetrics.registerFont(TTFont(FONT_NAME, str(VERA_PATH)))
    return FONT_NAME


@pytest.fixture
def sources() -> AssetSources:
    return AssetSources(font_name=FONT_NAME, font_path=str(VERA_PATH))


@pytest.fixture
def pdf_factory():
    return make_pdf


@pytest.fixture
def template_path(tmp_path: Path) -> Path:
    path = tmp_path / "template-51-1.pdf"
    path.write_bytes(make_pdf(8))
    return path


@pytest.fixture
def text_pdf(tmp_path: Path) -> Path:
    """Small lease-contract-like PDF with a text layer."""
    path = tmp_path / "contract.pdf"
    path.write_bytes(make_pdf(1, ["Lease contract", "Rent 85000 yen per month", "Deposit 170000 yen"]))
    return path


@pytest.fixture
def scanned_pdf(tmp_path: Path) -> Path:
    """Two pages without a text layer, as a scan without OCR text looks to pdfplumber."""
    path = tmp_path / "scanned.pdf"
    c = canvas.Canvas(str(path))
    c.showPage()
    c.showPage()
    c.save()
    return path


@pytest.fixture(autouse=True)
def ocr_disabled(monkeypatch) -> None:
    """docTR downloads its models on first use; tests opt in with a fake OCR."""
    monkeypatch.setattr(config.Config, "OCR_ENABLED", False)
