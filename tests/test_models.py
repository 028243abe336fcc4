# This project was developed with assistance from AI tools.
import pytest
from pydantic import ValidationError

from models import DisclosureRecord, Financials, OtherFee


@pytest.mark.parametrize("raw, expected", [
    (85000, 85000),
    ("85000", 85000),
    ("85,000円", 85000),
    ("８５,０００円", 85000),
    ("月額 65,000円（税込）", 65000),
    ("8.5万円", 85000),
    ("12万", 120000),
    (99999.6, 100000),
    ("", 0),
    (None, 0),
    ("なし", 0),
    ("税込 22,000円", 22000),
    ("60,000円/月", 60000),
    ("賃料の1ヶ月分", 0),
    ("月額賃料の50%", 0),
    ("2ヶ月", 0),
    ("85,000円 + 管理費5,000円", 0),
])
def test_yen_coercion(raw, expected) -> None:
    assert Financials(rent=raw).rent == expected


def test_yen_rejects_non_numeric_types() -> None:
    with pytest.raises(ValidationError):
        OtherFee(amount=[100])


def test_record_round_trips_through_camel_case_json() -> None:
    record = DisclosureRecord(borrower_name="Taro")
    record.equipment.digital_tv.exists = True

    data = record.model_dump(by_alias=True)

    assert data["borrowerName"] == "Taro"
    assert data["equipment"]["digitalTV"]["exists"] is True
    assert DisclosureRecord.model_validate(data) == record


def test_property_address_prefers_display_address() -> None:
    record = DisclosureRecord()
    assert record.property_address == ""

    record.building.address_registry = "登記上の所在地"
    assert record.property_address == "登記上の所在地"

    record.building.address_display = "住居表示"
    assert record.property_address == "住居表示"


def test_assignment_is_validated() -> None:
    record = DisclosureRecord()
    with pytest.raises(ValidationError):
        record.landlord.same_as_owner = "sometimes"


def test_rent_multiples_leave_amounts_blank() -> None:
    fee = OtherFee(name="保証料", amount="月額賃料の50%")
    financials = Financials(deposit="賃料の1ヶ月分", other_fees=[fee])

    assert financials.deposit == 0
    assert financials.other_fees[0].amount == 0
