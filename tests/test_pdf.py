# This project was developed with assistance from AI tools.
from pathlib import Path

import pytest

from utils.ocr import OCRResult
from utils.pdf import extract_text_from_pdf


def test_extracts_text_with_page_markers(text_pdf: Path) -> None:
    result = extract_text_from_pdf(text_pdf)

    assert result.page_count == 1
    assert result.text.startswith("--- Page 1 ---")
    assert "Rent 85000 yen per month" in result.text
    assert not result.is_empty


def test_page_markers_can_be_omitted(text_pdf: Path) -> None:
    assert "--- Page" not in extract_text_from_pdf(text_pdf, include_page_markers=False).text


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        extract_text_from_pdf(tmp_path / "missing.pdf")


def test_unreadable_file(tmp_path: Path) -> None:
    junk = tmp_path / "junk.pdf"
    junk.write_bytes(b"not a pdf at all")

    with pytest.raises(RuntimeError):
        extract_text_from_pdf(junk)


def _fake_ocr(pages: list[str]):
    def ocr(pdf_path):
        return OCRResult(pages=pages, device="cpu", avg_confidence=0.9, word_count=len(pages))
    return ocr


def test_blank_pages_are_reported(scanned_pdf: Path) -> None:
    result = extract_text_from_pdf(scanned_pdf)

    assert result.page_count == 2
    assert result.blank_pages == [1, 2]
    assert result.is_empty
    assert not result.ocr_used


def test_ocr_fills_scanned_pages(scanned_pdf: Path, monkeypatch) -> None:
    monkeypatch.setattr("utils.pdf.ocr_pdf", _fake_ocr(["", "所有者 京都太郎 京都府京都市南区西九条池ノ内町93番地"]))

    result = extract_text_from_pdf(scanned_pdf, use_ocr=True)

    assert result.ocr_pages == [2]
    assert result.blank_pages == [1]
    assert result.ocr_confidence == 0.9
    assert result.text.startswith("--- Page 2 ---\n所有者 京都太郎")


def test_ocr_leaves_pages_with_a_text_layer_alone(text_pdf: Path, monkeypatch) -> None:
    monkeypatch.setattr("utils.pdf.ocr_pdf", _fake_ocr(["garbled OCR output that is much longer than the text layer"]))

    result = extract_text_from_pdf(text_pdf, use_ocr=True)

    assert result.ocr_pages == []
    assert "Rent 85000 yen per month" in result.text


def test_ocr_failure_keeps_text_layer(scanned_pdf: Path, monkeypatch) -> None:
    def broken(pdf_path):
        raise OSError("model download failed")

    monkeypatch.setattr("utils.pdf.ocr_pdf", broken)

    result = extract_text_from_pdf(scanned_pdf, use_ocr=True)

    assert result.is_empty
    assert not result.ocr_used
