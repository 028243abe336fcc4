# This project was developed with assistance from AI tools.
from dataclasses import replace
from io import BytesIO
from pathlib import Path

import pikepdf
import pytest

from models import DisclosureRecord
from rendering import (
    AssetSources,
    ConfigurationError,
    FontLoadError,
    TemplateLoadError,
    build_assembler,
    render_calibration,
    render_disclosure,
)
from rendering.assets import load_template, read_asset


def _record() -> DisclosureRecord:
    record = DisclosureRecord(borrower_name="Taro Yamada", lender_name="Sample Estate")
    record.financials.rent = 85000
    record.building.name = "Sample Mansion 101"
    return record


def _page_count(pdf: bytes) -> int:
    with pikepdf.open(BytesIO(pdf)) as doc:
        return len(doc.pages)


def test_fresh_document_has_one_page_per_template_page(sources: AssetSources) -> None:
    pdf = render_disclosure(_record(), sources)

    assert pdf.startswith(b"%PDF")
    assert _page_count(pdf) == 8


def test_rendering_is_deterministic(sources: AssetSources, template_path: Path) -> None:
    assert render_disclosure(_record(), sources) == render_disclosure(_record(), sources)

    stamped = replace(sources, template_path=str(template_path))
    assert render_disclosure(_record(), stamped) == render_disclosure(_record(), stamped)


def test_overlay_is_stamped_onto_template(sources: AssetSources, template_path: Path) -> None:
    pdf = render_disclosure(_record(), replace(sources, template_path=str(template_path)))

    assert _page_count(pdf) == 8
    with pikepdf.open(BytesIO(pdf)) as doc:
        sizes = {(float(p.mediabox[2]), float(p.mediabox[3])) for p in doc.pages}
    assert len(sizes) == 1


def test_overlay_forms_use_fixed_names(sources: AssetSources, template_path: Path) -> None:
    pdf = render_disclosure(_record(), replace(sources, template_path=str(template_path)))

    with pikepdf.open(BytesIO(pdf)) as doc:
        first = doc.pages[0]
        assert "/DisclosureOverlay1" in first.obj.Resources.XObject
        # Template fonts survive alongside the overlay form
        assert "/Font" in first.obj.Resources
        assert "/DisclosureOverlay3" in doc.pages[2].obj.Resources.XObject


def test_template_with_wrong_page_count(sources: AssetSources, tmp_path: Path, pdf_factory) -> None:
    short = tmp_path / "short.pdf"
    short.write_bytes(pdf_factory(3))

    with pytest.raises(TemplateLoadError, match="3 pages"):
        render_disclosure(_record(), replace(sources, template_path=str(short)))


def test_configured_template_missing(sources: AssetSources, tmp_path: Path) -> None:
    with pytest.raises(TemplateLoadError):
        render_disclosure(_record(), replace(sources, template_path=str(tmp_path / "missing.pdf")))


def test_template_that_is_not_a_pdf(tmp_path: Path) -> None:
    junk = tmp_path / "junk.pdf"
    junk.write_bytes(b"this is not a pdf" * 50)

    with pytest.raises(TemplateLoadError):
        load_template(AssetSources(template_path=str(junk)), expected_pages=8)


def test_missing_font(tmp_path: Path) -> None:
    sources = AssetSources(font_name="Missing", font_path=str(tmp_path / "missing.ttf"))
    with pytest.raises(FontLoadError, match="not found"):
        render_disclosure(_record(), sources)


def test_unparseable_font(tmp_path: Path) -> None:
    bad = tmp_path / "bad.ttf"
    bad.write_bytes(b"not a font" * 100)

    with pytest.raises(FontLoadError):
        render_disclosure(_record(), AssetSources(font_name="Bad", font_path=str(bad)))


def test_no_font_source_configured() -> None:
    with pytest.raises(FontLoadError, match="No source"):
        read_asset(None, (), 1.0, "font", FontLoadError)


def test_unknown_template_version(sources: AssetSources) -> None:
    with pytest.raises(ConfigurationError, match="99-9"):
        render_disclosure(_record(), sources, version="99-9")


def test_unknown_mark_style(sources: AssetSources) -> None:
    with pytest.raises(ConfigurationError, match="stamp"):
        build_assembler(sources, "51-1", mark_style="stamp")


def test_calibration_sheet(sources: AssetSources, template_path: Path) -> None:
    assembler = build_assembler(sources, "51-1")
    assert assembler.template is None
    assert _page_count(render_calibration(assembler)) == 8

    stamped = build_assembler(replace(sources, template_path=str(template_path)), "51-1")
    assert stamped.template.page_count == 8
    assert _page_count(render_calibration(stamped)) == 8


def test_compose_skips_pages_without_slots(sources: AssetSources) -> None:
    pages = build_assembler(sources, "51-1").compose(_record())

    assert [p.number for p in pages] == list(range(1, 9))
    assert pages[1].is_blank
    assert (pages[1].width, pages[1].height) == (595.0, 842.0)
