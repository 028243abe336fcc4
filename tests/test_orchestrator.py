# This project was developed with assistance from AI tools.
from dataclasses import replace
from io import BytesIO
from pathlib import Path

import pikepdf
import pytest
from langchain_core.language_models import FakeListChatModel

import orchestrator
from models import HazardReport
from orchestrator import DISCLOSURE_FILENAME, HAZARD_FILENAME, WorkflowOrchestrator
from presets import AgencyPreset
from rendering import AssetSources

CONTRACT_REPLY = """```json
{
  "borrowerName": "Taro Yamada",
  "building": {"name": "Sample Mansion 101", "addressDisplay": "京都府京都市南区西九条池ノ内町93"},
  "financials": {"rent": "85,000円", "deposit": "170000"},
  "broker1": {"companyName": "Extracted Realty"}
}
```"""


@pytest.fixture
def workflow(sources: AssetSources) -> WorkflowOrchestrator:
    preset = AgencyPreset.model_validate({"broker1": {"companyName": "Preset Realty"}})
    return WorkflowOrchestrator(preset=preset, llm=FakeListChatModel(responses=[CONTRACT_REPLY]), sources=sources)


@pytest.fixture
def fake_hazards(monkeypatch):
    looked_up = []

    def lookup(address: str) -> HazardReport:
        looked_up.append(address)
        return HazardReport(address=address, latitude=34.98, longitude=135.75, flood_risk="要確認")

    monkeypatch.setattr(orchestrator, "lookup_hazards", lookup)
    return looked_up


def _run(workflow: WorkflowOrchestrator, contract: Path, output_dir: Path, **kwargs):
    return workflow.run(str(contract), "", output_dir=str(output_dir), use_cache=False, **kwargs)


def test_pipeline_renders_disclosure(workflow, text_pdf: Path, tmp_path: Path, fake_hazards) -> None:
    out = tmp_path / "out"
    state = _run(workflow, text_pdf, out, render_hazard=False)

    assert state["render_succeeded"]
    assert fake_hazards == []
    record = state["record"]
    assert record.financials.rent == 85000
    assert record.financials.deposit == 170000
    assert record.broker1.company_name == "Preset Realty"
    assert state["registry_data"] == {}

    with pikepdf.open(out / DISCLOSURE_FILENAME) as pdf:
        assert len(pdf.pages) == 8
    assert not (out / HAZARD_FILENAME).exists()


def test_pipeline_with_hazard_document(workflow, text_pdf: Path, tmp_path: Path, fake_hazards) -> None:
    state = _run(workflow, text_pdf, tmp_path)

    assert fake_hazards == ["京都府京都市南区西九条池ノ内町93"]
    assert state["record"].hazard_report.latitude == 34.98
    assert Path(state["hazard_path"]) == tmp_path / HAZARD_FILENAME
    assert (tmp_path / HAZARD_FILENAME).read_bytes().startswith(b"%PDF")


def test_manual_edits_are_applied_last(workflow, text_pdf: Path, tmp_path: Path) -> None:
    state = _run(
        workflow, text_pdf, tmp_path, render_hazard=False,
        edits={"broker1.companyName": "Edited Realty", "financials.rent": "90000", "building.colour": "blue"},
    )

    record = state["record"]
    assert record.broker1.company_name == "Edited Realty"
    assert record.financials.rent == 90000
    [error] = state["workflow_errors"]
    assert error.code == "INVALID_EDIT"
    assert error.severity == "error"
    assert state["render_succeeded"]


def test_failed_extraction_still_renders_defaults(workflow, tmp_path: Path) -> None:
    state = _run(workflow, tmp_path / "missing.pdf", tmp_path, render_hazard=False)

    assert [e.code for e in state["workflow_errors"]] == ["PDF_EXTRACTION_FAILED"]
    assert state["record"].contract.type == "普通賃貸借"
    assert state["render_succeeded"]


def test_render_failure_writes_nothing(text_pdf: Path, tmp_path: Path, sources: AssetSources) -> None:
    broken = replace(sources, font_path=str(tmp_path / "missing.ttf"))
    workflow = WorkflowOrchestrator(llm=FakeListChatModel(responses=[CONTRACT_REPLY]), sources=broken)
    out = tmp_path / "out"

    state = _run(workflow, text_pdf, out, render_hazard=False)

    assert not state["render_succeeded"]
    [error] = state["workflow_errors"]
    assert error.code == "RENDER_FAILED"
    assert error.severity == "critical"
    assert not out.exists()


def test_rendered_disclosure_is_reproducible(workflow, text_pdf: Path, tmp_path: Path) -> None:
    first = _run(workflow, text_pdf, tmp_path / "a", render_hazard=False)
    second = _run(workflow, text_pdf, tmp_path / "b", render_hazard=False)

    assert Path(first["disclosure_path"]).read_bytes() == Path(second["disclosure_path"]).read_bytes()
    with pikepdf.open(BytesIO(Path(first["disclosure_path"]).read_bytes())) as pdf:
        assert len(pdf.pages) == 8


def test_unknown_mark_style_is_a_render_failure(workflow, text_pdf: Path, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(type(orchestrator.app_config), "MARK_STYLE", "stamp")

    state = _run(workflow, text_pdf, tmp_path / "out", render_hazard=False)

    assert not state["render_succeeded"]
    [error] = state["workflow_errors"]
    assert error.code == "RENDER_FAILED"
    assert error.details == {"error_type": "ConfigurationError"}
    assert not (tmp_path / "out").exists()
