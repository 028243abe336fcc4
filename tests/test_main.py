# This project was developed with assistance from AI tools.
import json
from pathlib import Path

import pikepdf
import pytest

import main
from models import HazardReport
from rendering import AssetSources
from utils.extraction_cache import ExtractionCache


@pytest.fixture(autouse=True)
def rendering_assets(monkeypatch, sources: AssetSources) -> None:
    monkeypatch.setattr(main, "asset_sources", lambda: sources)


@pytest.fixture
def record_json(tmp_path: Path) -> Path:
    path = tmp_path / "record.json"
    path.write_text(json.dumps({
        "borrowerName": "Taro Yamada",
        "building": {"name": "Sample Mansion 101", "addressDisplay": "京都府京都市南区西九条池ノ内町93"},
        "financials": {"rent": 85000},
        "hazardReport": {"floodMapImage": ""},
    }, ensure_ascii=False), encoding="utf-8")
    return path


def test_parse_edits_normalises_paths() -> None:
    assert main.parse_edits(["building.name=A", "financials.rent=90000", "building.name=B"]) == {
        "building.name": "B",
        "financials.rent": "90000",
    }


def test_render_command(record_json: Path, tmp_path: Path, capsys) -> None:
    out = tmp_path / "disclosure.pdf"

    assert main.main(["render", str(record_json), "-o", str(out), "--set", "building.name=Edited 202"]) == 0

    with pikepdf.open(out) as pdf:
        assert len(pdf.pages) == 8
    assert "Disclosure written" in capsys.readouterr().out


def test_render_command_rejects_bad_edit(record_json: Path, tmp_path: Path, capsys) -> None:
    out = tmp_path / "disclosure.pdf"

    assert main.main(["render", str(record_json), "-o", str(out), "--set", "building.colour=blue"]) == 1

    assert not out.exists()
    assert "[ERROR]" in capsys.readouterr().out


def test_render_command_with_missing_font(record_json: Path, tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(main, "asset_sources", lambda: AssetSources(font_path=str(tmp_path / "none.ttf")))
    out = tmp_path / "disclosure.pdf"

    assert main.main(["render", str(record_json), "-o", str(out)]) == 1

    assert not out.exists()
    assert "Rendering failed" in capsys.readouterr().out


def test_hazard_command(record_json: Path, tmp_path: Path, monkeypatch) -> None:
    looked_up = []
    monkeypatch.setattr(main, "lookup_hazards", lambda address: looked_up.append(address) or HazardReport(
        address=address, flood_risk="要確認", landslide_risk="要確認", tsunami_risk="要確認"
    ))
    out = tmp_path / "hazard.pdf"

    assert main.main(["hazard", "--record", str(record_json), "-o", str(out)]) == 0

    assert looked_up == ["京都府京都市南区西九条池ノ内町93"]
    assert out.read_bytes().startswith(b"%PDF")


def test_hazard_command_needs_an_address(tmp_path: Path) -> None:
    empty = tmp_path / "empty.json"
    empty.write_text("{}", encoding="utf-8")
    assert main.main(["hazard", "--record", str(empty), "-o", str(tmp_path / "h.pdf")]) == 1


def test_calibrate_command(tmp_path: Path) -> None:
    out = tmp_path / "calibration.pdf"
    assert main.main(["calibrate", "-o", str(out)]) == 0
    with pikepdf.open(out) as pdf:
        assert len(pdf.pages) == 8


def test_cache_command(tmp_path: Path, monkeypatch, capsys) -> None:
    cache = ExtractionCache(tmp_path / "cache.db")
    cache.store("abc", "contract", "contract.pdf", {"borrowerName": "Taro"})
    monkeypatch.setattr(main, "get_extraction_cache", lambda: cache)

    assert main.main(["cache", "--stats"]) == 0
    assert "Total documents cached: 1" in capsys.readouterr().out

    assert main.main(["cache", "--clear"]) == 0
    assert "Cleared 1 entries" in capsys.readouterr().out
    assert cache.get_stats()["total_documents"] == 0


def test_run_requires_api_key(monkeypatch, tmp_path: Path, capsys) -> None:
    monkeypatch.setattr(type(main.config), "OPENAI_API_KEY", "")

    assert main.main(["run", str(tmp_path / "c.pdf"), str(tmp_path / "r.pdf")]) == 1
    assert "OPENAI_API_KEY" in capsys.readouterr().out


def test_calibrate_with_unknown_template_version(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(type(main.config), "TEMPLATE_VERSION", "99-9")
    out = tmp_path / "calibration.pdf"

    assert main.main(["calibrate", "-o", str(out)]) == 1

    assert not out.exists()
    assert "[ERROR] Rendering failed: Unknown template version '99-9'" in capsys.readouterr().out
