# This project was developed with assistance from AI tools.
import re
from datetime import datetime
from operator import add
from typing import Annotated, Any, Literal, TypedDict

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

_MAN = 10_000

_TAX_NOTE = r"(?:[（(]?(?:税込|税別|税抜|込|別)[）)]?)?"

# Whole-string match only: "賃料の1ヶ月分" or "月額賃料の50%" are not amounts
_PLAIN_AMOUNT = re.compile(
    rf"^(?:月額|金|[¥￥])?{_TAX_NOTE}"
    r"(?P<number>\d+(?:\.\d+)?)(?P<man>万)?円?"
    rf"(?:[/／]月)?{_TAX_NOTE}$"
)


def _coerce_yen(value: Any) -> Any:
    """
    Accept extraction-style amounts ("85,000円", "8.5万円", 85000.0) as integer yen.

    Text that is not a plain amount, such as a multiple of rent or a
    percentage, becomes 0 and so stays blank on the document.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return int(round(value))
    if isinstance(value, str):
        text = re.sub(r"[\s,，]", "", value)
        match = _PLAIN_AMOUNT.match(text)
        if not match:
            return 0
        number = float(match.group("number"))
        if match.group("man"):
            number *= _MAN
        return int(round(number))
    return value


# Integer count of yen; display formatting happens only at render time
Yen = Annotated[int, BeforeValidator(_coerce_yen)]


class RecordModel(BaseModel):
    """Base for every record node: snake_case attributes, camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )


# =============================================================================
# Parties
# =============================================================================

class BrokerInfo(RecordModel):
    """宅地建物取引業者"""
    license_number: str = ""
    office_address: str = ""
    phone: str = ""
    company_name: str = ""
    representative: str = ""


class TradingOfficerInfo(RecordModel):
    """説明をする宅地建物取引士"""
    registration_number: str = ""
    name: str = ""
    office_name: str = ""
    office_address: str = ""
    phone: str = ""


class GuaranteeAssociation(RecordModel):
    name: str = ""
    address: str = ""
    local_branch: str = ""
    local_branch_address: str = ""
    deposit_office: str = ""
    deposit_office_address: str = ""


class ManagerInfo(RecordModel):
    name: str = ""
    address: str = ""
    phone: str = ""
    person: str = ""
    registration_number: str = ""


# =============================================================================
# Property
# =============================================================================

class Building(RecordModel):
    name: str = ""
    address_display: str = ""
    address_registry: str = ""
    type: str = "マンション"
    structure: str = ""
    floor_area: str = ""
    layout: str = ""
    built_date: str = ""


class Landlord(RecordModel):
    same_as_owner: bool = True
    address: str = ""
    name: str = ""
    remarks: str = ""


class RegistryRecord(RecordModel):
    """登記記録 (甲区 / 乙区)"""
    owner_address: str = ""
    owner_name: str = ""
    ownership_rights: bool = False
    ownership_rights_detail: str = ""
    other_rights: bool = False
    other_rights_detail: str = ""


class InfraItem(RecordModel):
    available: bool = False
    provider: str = ""
    remarks: str = ""


class TypedInfraItem(InfraItem):
    type: str = ""


class Infrastructure(RecordModel):
    water: InfraItem = Field(default_factory=InfraItem)
    electricity: InfraItem = Field(default_factory=InfraItem)
    gas: TypedInfraItem = Field(default_factory=TypedInfraItem)
    drainage: TypedInfraItem = Field(default_factory=TypedInfraItem)


class BuildingInspection(RecordModel):
    applicable: bool = False
    conducted: bool = False
    summary: str = ""


class EquipmentItem(RecordModel):
    exists: bool = False
    detail: str = ""


def _item() -> Any:
    return Field(default_factory=EquipmentItem)


class Equipment(RecordModel):
    """設備の整備状況 (order matches the printed checklist)"""
    electricity: EquipmentItem = _item()
    gas: EquipmentItem = _item()
    stove: EquipmentItem = _item()
    water_supply: EquipmentItem = _item()
    sewage: EquipmentItem = _item()
    kitchen: EquipmentItem = _item()
    toilet: EquipmentItem = _item()
    bathroom: EquipmentItem = _item()
    washstand: EquipmentItem = _item()
    laundry: EquipmentItem = _item()
    hot_water: EquipmentItem = _item()
    aircon: EquipmentItem = _item()
    lighting: EquipmentItem = _item()
    furniture: EquipmentItem = _item()
    digital_tv: EquipmentItem = Field(default_factory=EquipmentItem, alias="digitalTV")
    catv: EquipmentItem = _item()
    internet: EquipmentItem = _item()
    trunk_room: EquipmentItem = _item()
    garden: EquipmentItem = _item()
    roof_balcony: EquipmentItem = _item()
    keys: EquipmentItem = _item()


class CommonFacilities(RecordModel):
    elevator: EquipmentItem = _item()
    auto_lock: EquipmentItem = _item()
    mailbox: EquipmentItem = _item()
    delivery_box: EquipmentItem = _item()
    trunk_room: EquipmentItem = _item()
    parking: EquipmentItem = _item()
    bicycle: EquipmentItem = _item()
    bike_parking: EquipmentItem = _item()


# =============================================================================
# Hazards
# =============================================================================

class HazardZones(RecordModel):
    developed_land_disaster_zone: bool = False
    landslide_warning_zone: bool = False
    landslide_special_zone: bool = False
    tsunami_warning_zone: bool = False
    tsunami_special_zone: bool = False


class HazardMap(RecordModel):
    flood_exists: bool = False
    flood_detail: str = ""
    storm_water_exists: bool = False
    storm_water_detail: str = ""
    storm_surge_exists: bool = False
    storm_surge_detail: str = ""


class HazardReport(RecordModel):
    """Geocoding result, narratives and map images for the separate hazard document."""
    address: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    flood_risk: str = ""
    landslide_risk: str = ""
    tsunami_risk: str = ""
    # base64-encoded PNG
    flood_map_image: str = ""
    landslide_map_image: str = ""
    tsunami_map_image: str = ""


class Asbestos(RecordModel):
    inquiry_target: str = ""
    record_exists: bool = False
    detail: str = ""


class Earthquake(RecordModel):
    applicable: bool = False
    diagnosis_exists: bool = False
    detail: str = ""


# =============================================================================
# Terms
# =============================================================================

class OtherFee(RecordModel):
    name: str = ""
    amount: Yen = 0


class Financials(RecordModel):
    rent: Yen = 0
    management_fee: Yen = 0
    deposit: Yen = 0
    key_money: Yen = 0
    other_fees: list[OtherFee] = Field(default_factory=list)
    payment_deadline: str = ""
    payment_method: str = ""
    bank_info: str = ""


class Penalty(RecordModel):
    exists: bool = False
    detail: str = ""


class SecurityMeasure(RecordModel):
    provided: bool = False
    detail: str = ""


class Contract(RecordModel):
    type: str = "普通賃貸借"
    start_date: str = ""
    end_date: str = ""
    period_years: int = 2
    renewal_terms: str = ""
    renewal_fee: str = ""
    renewal_admin_fee: str = ""


class UsageRestrictions(RecordModel):
    purpose: str = "居住用"
    pet_policy: str = ""
    instrument_policy: str = ""
    renovation_policy: str = ""
    other: str = ""


class Management(RecordModel):
    building_manager: ManagerInfo = Field(default_factory=ManagerInfo)
    property_manager: ManagerInfo = Field(default_factory=ManagerInfo)


# =============================================================================
# Record
# =============================================================================

class DisclosureRecord(RecordModel):
    """
    Full 重要事項説明書 record.

    Every sub-object carries a populated default so rendering code only ever
    checks values for emptiness.
    """
    document_type: str = "51-1. 居住用建物／普通賃貸借契約〔連帯保証人型〕"
    borrower_name: str = ""
    lender_name: str = ""
    transaction_type: str = "媒介"

    broker1: BrokerInfo = Field(default_factory=BrokerInfo)
    broker2: BrokerInfo = Field(default_factory=BrokerInfo)
    trading_officer1: TradingOfficerInfo = Field(default_factory=TradingOfficerInfo)
    trading_officer2: TradingOfficerInfo = Field(default_factory=TradingOfficerInfo)
    guarantee_association: GuaranteeAssociation = Field(default_factory=GuaranteeAssociation)

    building: Building = Field(default_factory=Building)
    landlord: Landlord = Field(default_factory=Landlord)
    registry: RegistryRecord = Field(default_factory=RegistryRecord)
    legal_restrictions: str = ""
    infrastructure: Infrastructure = Field(default_factory=Infrastructure)
    building_inspection: BuildingInspection = Field(default_factory=BuildingInspection)
    equipment: Equipment = Field(default_factory=Equipment)
    common_facilities: CommonFacilities = Field(default_factory=CommonFacilities)

    hazard_zones: HazardZones = Field(default_factory=HazardZones)
    hazard_map: HazardMap = Field(default_factory=HazardMap)
    asbestos: Asbestos = Field(default_factory=Asbestos)
    earthquake: Earthquake = Field(default_factory=Earthquake)

    financials: Financials = Field(default_factory=Financials)
    cancellation: str = ""
    penalty: Penalty = Field(default_factory=Penalty)
    security_measure: SecurityMeasure = Field(default_factory=SecurityMeasure)
    contract: Contract = Field(default_factory=Contract)
    usage_restrictions: UsageRestrictions = Field(default_factory=UsageRestrictions)
    deposit_settlement: str = ""
    management: Management = Field(default_factory=Management)

    other_important_matters: str = ""
    attachments: list[str] = Field(default_factory=list)
    remarks: str = ""

    hazard_report: HazardReport = Field(default_factory=HazardReport)

    @property
    def property_address(self) -> str:
        """Best available address for geocoding."""
        return self.building.address_display or self.building.address_registry


# =============================================================================
# Workflow
# =============================================================================

class WorkflowError(BaseModel):
    """Structured error for workflow operations."""

    code: str = Field(description="Error code, e.g., 'EXTRACTION_FAILED', 'RENDER_FAILED'")
    message: str = Field(description="Human-readable error message")
    severity: Literal["warning", "error", "critical"] = Field(
        description="warning: logged but continues, error: node fails but workflow continues, critical: workflow halts"
    )
    recoverable: bool = Field(default=True, description="Whether the operation can be retried")
    node: str = Field(description="Name of the node that produced this error")
    document: str | None = Field(default=None, description="Document name if error is document-specific")
    details: dict = Field(default_factory=dict, description="Additional error context")
    timestamp: datetime = Field(default_factory=datetime.now)


class PipelineState(TypedDict, total=False):
    """State that flows through the LangGraph workflow."""

    # Input
    contract_path: str
    registry_path: str
    output_dir: str
    edits: dict[str, Any]
    use_cache: bool
    render_hazard: bool

    # Extraction phase
    contract_data: dict
    registry_data: dict

    # Record building
    record: DisclosureRecord

    # Rendering phase
    disclosure_path: str
    hazard_path: str
    render_succeeded: bool

    # Workflow metadata
    workflow_errors: Annotated[list[WorkflowError], add]
    messages: Annotated[list[str], add]
