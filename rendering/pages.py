# This project was developed with assistance from AI tools.
"""
Record walks for each fillable page of the 51-1 template.

Each function reads one part of the DisclosureRecord and issues composer
operations in top-to-bottom order. Page 2 (table of contents) has none.
"""
from collections.abc import Callable

from models import BrokerInfo, DisclosureRecord, EquipmentItem, ManagerInfo, OtherFee, TradingOfficerInfo

from .composer import PageComposer, Row
from .formatting import format_years

BUILDING_TYPES = {
    "マンション": "type_mansion",
    "アパート": "type_apartment",
    "戸建": "type_detached",
    "テラスハウス": "type_terrace",
}

TRANSACTION_LEFT = {
    "媒介": "transaction_left_mediation",
    "代理": "transaction_left_agent",
}

TRANSACTION_RIGHT = {
    "媒介": "transaction_right_mediation",
    "代理": "transaction_right_agent",
}

ATTACHMENT_SEPARATOR = "、"


# =============================================================================
# Page 1
# =============================================================================

def _broker(c: PageComposer, prefix: str, broker: BrokerInfo) -> None:
    c.text(f"{prefix}_license", broker.license_number)
    c.text(f"{prefix}_address", broker.office_address)
    c.text(f"{prefix}_phone", broker.phone)
    c.text(f"{prefix}_name", broker.company_name)
    c.text(f"{prefix}_representative", broker.representative)


def _officer(c: PageComposer, prefix: str, officer: TradingOfficerInfo) -> None:
    c.text(f"{prefix}_registration", officer.registration_number)
    c.text(f"{prefix}_name", officer.name)
    c.text(f"{prefix}_office_name", officer.office_name)
    c.text(f"{prefix}_office_address", officer.office_address)
    c.text(f"{prefix}_phone", officer.phone)


def compose_page1(c: PageComposer, record: DisclosureRecord) -> None:
    c.text("borrower_name", record.borrower_name)
    c.text("lender_name", record.lender_name)

    c.select(record.transaction_type, TRANSACTION_LEFT)

    _broker(c, "broker1", record.broker1)
    # Second broker block only when a second company is involved
    if record.broker2.company_name:
        c.select(record.transaction_type, TRANSACTION_RIGHT)
        _broker(c, "broker2", record.broker2)

    _officer(c, "officer1", record.trading_officer1)
    if record.trading_officer2.name:
        _officer(c, "officer2", record.trading_officer2)

    guarantee = record.guarantee_association
    if guarantee.name:
        c.mark("guarantee_check_left")
        c.text("guarantee_name", guarantee.name)
        c.text("guarantee_address", guarantee.address)
        c.text("local_branch_name", guarantee.local_branch)
        c.text("local_branch_address", guarantee.local_branch_address)
        c.text("deposit_office", guarantee.deposit_office)
        c.text("deposit_office_address", guarantee.deposit_office_address)


# =============================================================================
# Page 3
# =============================================================================

def compose_page3(c: PageComposer, record: DisclosureRecord) -> None:
    building = record.building
    c.text("building_name", building.name)
    c.text("address_display", building.address_display)
    c.text("address_registry", building.address_registry)
    c.select(building.type, BUILDING_TYPES)
    c.text("structure", building.structure)
    c.text("floor_area", building.floor_area)
    c.text("layout", building.layout)
    c.text("built_date", building.built_date)

    landlord = record.landlord
    c.choice(landlord.same_as_owner, "landlord_same_check", "landlord_diff_check")
    c.text("landlord_address", landlord.address)
    c.text("landlord_name", landlord.name)
    c.text("landlord_remarks", landlord.remarks)

    registry = record.registry
    c.text("owner_address", registry.owner_address)
    c.text("owner_name", registry.owner_name)
    c.choice(registry.ownership_rights, "ownership_yes", "ownership_no")
    if registry.ownership_rights:
        c.text("ownership_detail", registry.ownership_rights_detail)
    c.choice(registry.other_rights, "other_rights_yes", "other_rights_no")
    if registry.other_rights:
        c.text("other_rights_detail", registry.other_rights_detail)

    c.text("legal_restrictions", record.legal_restrictions)

    water = record.infrastructure.water
    c.choice(water.available, "water_available_yes", "water_available_no")
    if water.available:
        c.text("water_provider", water.provider)

    electricity = record.infrastructure.electricity
    c.choice(electricity.available, "electricity_available_yes", "electricity_available_no")
    if electricity.available:
        c.text("electricity_provider", electricity.provider)


# =============================================================================
# Page 4
# =============================================================================

def _checklist_row(row: Row, item: EquipmentItem) -> None:
    row.choice(item.exists)
    row.text("detail", item.detail)


def compose_page4(c: PageComposer, record: DisclosureRecord) -> None:
    c.clear_bands()

    gas = record.infrastructure.gas
    c.choice(gas.available, "gas_available_yes", "gas_available_no")
    if gas.available:
        c.text("gas_type", gas.type)

    drainage = record.infrastructure.drainage
    c.choice(drainage.available, "drainage_available_yes", "drainage_available_no")
    if drainage.available:
        c.text("drainage_type", drainage.type)

    c.rows("equipment", record.equipment, _checklist_row)


# =============================================================================
# Page 5
# =============================================================================

def hazard_map_detail(record: DisclosureRecord) -> str:
    """Details of the hazard maps the property appears on, one per line."""
    hazard_map = record.hazard_map
    parts = []
    for label, exists, detail in (
        ("洪水", hazard_map.flood_exists, hazard_map.flood_detail),
        ("雨水出水", hazard_map.storm_water_exists, hazard_map.storm_water_detail),
        ("高潮", hazard_map.storm_surge_exists, hazard_map.storm_surge_detail),
    ):
        if exists and detail:
            parts.append(f"{label}：{detail}")
    return "\n".join(parts)


def compose_page5(c: PageComposer, record: DisclosureRecord) -> None:
    c.rows("common_facilities", record.common_facilities, _checklist_row)

    # Zone marks read "outside" unless the property is inside the zone
    zones = record.hazard_zones
    c.choice(zones.developed_land_disaster_zone, "developed_land_inside", "developed_land_outside")
    c.choice(zones.landslide_warning_zone, "landslide_warning_inside", "landslide_warning_outside")
    c.choice(zones.landslide_special_zone, "landslide_special_inside", "landslide_special_outside")
    c.choice(zones.tsunami_warning_zone, "tsunami_warning_inside", "tsunami_warning_outside")
    c.choice(zones.tsunami_special_zone, "tsunami_special_inside", "tsunami_special_outside")

    hazard_map = record.hazard_map
    c.choice(hazard_map.flood_exists, "flood_yes", "flood_no")
    c.choice(hazard_map.storm_water_exists, "storm_water_yes", "storm_water_no")
    c.choice(hazard_map.storm_surge_exists, "storm_surge_yes", "storm_surge_no")
    c.text("hazard_map_detail", hazard_map_detail(record))

    c.choice(record.asbestos.record_exists, "asbestos_record_yes", "asbestos_record_no")

    earthquake = record.earthquake
    c.choice(earthquake.applicable, "earthquake_applicable", "earthquake_not_applicable")
    if earthquake.applicable:
        c.choice(earthquake.diagnosis_exists, "earthquake_diagnosis_yes", "earthquake_diagnosis_no")


# =============================================================================
# Page 6
# =============================================================================

def _fee_row(row: Row, fee: OtherFee) -> None:
    if not fee.name:
        return
    row.text("name", fee.name)
    row.amount("amount", fee.amount)


def compose_page6(c: PageComposer, record: DisclosureRecord) -> None:
    c.clear_bands()

    financials = record.financials
    c.amount("rent", financials.rent)
    c.amount("management_fee", financials.management_fee)
    c.amount("deposit", financials.deposit)
    c.amount("key_money", financials.key_money)

    c.rows("other_fees", financials.other_fees, _fee_row)

    c.text("payment_deadline", financials.payment_deadline)
    c.text("payment_method", financials.payment_method)
    c.text("bank_info", financials.bank_info)

    penalty = record.penalty
    c.choice(penalty.exists, "penalty_yes", "penalty_no")
    if penalty.exists:
        c.text("penalty_detail", penalty.detail)

    c.choice(record.security_measure.provided, "security_yes", "security_no")


# =============================================================================
# Page 7
# =============================================================================

def compose_page7(c: PageComposer, record: DisclosureRecord) -> None:
    contract = record.contract
    c.text("contract_type", contract.type)
    c.text("contract_start", contract.start_date)
    c.text("contract_end", contract.end_date)
    c.text("contract_period", format_years(contract.period_years))

    c.choice(bool(contract.renewal_fee), "renewal_fee_yes", "renewal_fee_no")
    c.text("renewal_fee_amount", contract.renewal_fee)
    c.text("renewal_admin_fee", contract.renewal_admin_fee)

    usage = record.usage_restrictions
    c.text("usage_purpose", usage.purpose)
    c.text("pet_policy", usage.pet_policy)
    c.text("instrument_policy", usage.instrument_policy)
    c.text("renovation_policy", usage.renovation_policy)

    c.amount("deposit_settlement_amount", record.financials.deposit)


# =============================================================================
# Page 8
# =============================================================================

def _manager(c: PageComposer, prefix: str, manager: ManagerInfo) -> None:
    if not manager.name:
        return
    c.text(f"{prefix}_name", manager.name)
    c.text(f"{prefix}_address", manager.address)
    c.text(f"{prefix}_phone", manager.phone)


def compose_page8(c: PageComposer, record: DisclosureRecord) -> None:
    _manager(c, "building_manager", record.management.building_manager)
    _manager(c, "property_manager", record.management.property_manager)

    c.text("other_matters", record.other_important_matters)
    c.text("attachments", ATTACHMENT_SEPARATOR.join(a for a in record.attachments if a))
    c.text("remarks", record.remarks)


PageWalk = Callable[[PageComposer, DisclosureRecord], None]

PAGE_WALKS: dict[int, PageWalk] = {
    1: compose_page1,
    3: compose_page3,
    4: compose_page4,
    5: compose_page5,
    6: compose_page6,
    7: compose_page7,
    8: compose_page8,
}
