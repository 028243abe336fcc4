# This project was developed with assistance from AI tools.
"""
Agency preset: the issuing agency's own identity on page 1.

Loaded once from JSON and applied while the record is built, after
extraction and before manual edits. Blank preset values leave the record
untouched, so a preset without an officer name keeps the extracted one.
"""
import json
import logging
from pathlib import Path

from pydantic import ConfigDict, Field, ValidationError

from models import BrokerInfo, DisclosureRecord, GuaranteeAssociation, RecordModel, TradingOfficerInfo
from utils.record_merge import deep_merge

logger = logging.getLogger(__name__)


class AgencyPreset(RecordModel):
    """Broker, trading officer and guarantee association of the issuing agency."""

    model_config = ConfigDict(frozen=True, validate_assignment=False)

    broker1: BrokerInfo = Field(default_factory=BrokerInfo)
    trading_officer1: TradingOfficerInfo = Field(default_factory=TradingOfficerInfo)
    guarantee_association: GuaranteeAssociation = Field(default_factory=GuaranteeAssociation)


def load_agency_preset(path: str | Path | None) -> AgencyPreset | None:
    """Read a preset file; returns None when no path is configured."""
    if not path:
        return None
    preset_path = Path(path)
    try:
        data = json.loads(preset_path.read_text(encoding="utf-8"))
        preset = AgencyPreset.model_validate(data)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        raise ValueError(f"Invalid agency preset {preset_path}: {e}") from e
    logger.info(f"Loaded agency preset for {preset.broker1.company_name or preset_path.name}")
    return preset


def apply_preset(record: DisclosureRecord, preset: AgencyPreset | None) -> DisclosureRecord:
    if preset is None:
        return record
    return deep_merge(record, preset.model_dump(by_alias=True))
