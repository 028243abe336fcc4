# This project was developed with assistance from AI tools.
import pytest

from rendering.registry import (
    Column,
    FieldCoordinate,
    FieldRegistry,
    PageLayout,
    RowGroup,
    available_versions,
    get_registry,
)


def _checklist(**overrides) -> RowGroup:
    params = {
        "start_y": 620,
        "row_height": 18,
        "columns": {"yes": Column(x=225, width=12), "detail": Column(x=320, width=250, font_size=7)},
        "keys": ("electricity", "gas", "stove"),
    }
    params.update(overrides)
    return RowGroup(**params)


def test_row_y_steps_down_from_start() -> None:
    group = _checklist()
    assert group.row_y(0) == 620
    assert group.row_y(11) == 422


def test_cell_carries_column_geometry() -> None:
    cell = _checklist().cell("detail", 2)
    assert cell == FieldCoordinate(x=320, y=584, width=250, height=12, font_size=7)
    assert _checklist().cell("missing", 0) is None


def test_capacity_prefers_max_rows() -> None:
    assert _checklist().capacity == 3
    assert _checklist(keys=(), max_rows=5).capacity == 5


def test_rows_must_not_overlap() -> None:
    with pytest.raises(ValueError):
        _checklist(row_height=10)
    with pytest.raises(ValueError):
        _checklist(row_height=0)


def test_pages_outside_template_are_rejected() -> None:
    with pytest.raises(ValueError):
        FieldRegistry("test", [PageLayout(number=9, width=595, height=842)], page_count=8)


def test_layout_mappings_are_read_only() -> None:
    layout = PageLayout(number=1, width=595, height=842, fields={"a": FieldCoordinate(1, 2, 3, 4)})
    with pytest.raises(TypeError):
        layout.fields["b"] = FieldCoordinate(5, 6, 7, 8)


def test_default_font_size() -> None:
    assert FieldCoordinate(0, 0, 10, 10).size == 8.0
    assert FieldCoordinate(0, 0, 10, 10, font_size=11).size == 11


def test_registry_51_1() -> None:
    registry = get_registry("51-1")

    assert registry.page_count == 8
    assert registry.page(2) is None
    assert registry.default_size == (595.0, 842.0)
    assert registry.lookup(1, "borrower_name").x == 70
    assert registry.lookup(1, "no_such_field") is None
    assert registry.lookup(2, "borrower_name") is None
    assert registry.lookup(7, "deposit_settlement_amount").printed_suffix == "円"

    equipment = registry.row_group(4, "equipment")
    assert equipment.keys[11] == "aircon"
    assert equipment.cell("detail", 11).y == 422
    assert registry.row_group(6, "other_fees").max_rows == 3


def test_registry_fields_stay_inside_pages() -> None:
    registry = get_registry("51-1")
    for number, name, coord in registry.iter_fields():
        layout = registry.page(number)
        assert 0 <= coord.x < layout.width, name
        assert 0 <= coord.y < layout.height, name


def test_unknown_version() -> None:
    assert "51-1" in available_versions()
    with pytest.raises(KeyError):
        get_registry("99-9")
