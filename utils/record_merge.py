# This project was developed with assistance from AI tools.
"""
Record building helpers.

deep_merge walks the pydantic field tree of a record and assigns every
present, non-blank value from a partial JSON mapping. Assignments are
validated per field; a value that fails validation is dropped and the
field keeps what it had, so one bad value never rejects the whole reply.

FieldPath enumerates every editable leaf of DisclosureRecord by its
dotted camelCase path, for manual edits from the command line.
"""
import json
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from models import DisclosureRecord

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_MISSING = object()


def _is_blank(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


def _lookup(data: Mapping[str, Any], name: str, alias: str | None) -> Any:
    if alias and alias in data:
        return data[alias]
    if name in data:
        return data[name]
    return _MISSING


def _merge_into(target: BaseModel, data: Mapping[str, Any], path: str) -> None:
    for name, field in type(target).model_fields.items():
        value = _lookup(data, name, field.alias)
        if value is _MISSING or _is_blank(value):
            continue

        field_path = f"{path}.{name}" if path else name
        current = getattr(target, name)
        if isinstance(current, BaseModel):
            if isinstance(value, BaseModel):
                value = value.model_dump(by_alias=True)
            if isinstance(value, Mapping):
                _merge_into(current, value, field_path)
            else:
                logger.debug(f"Ignored non-object value for {field_path}: {value!r}")
            continue

        try:
            setattr(target, name, value)
        except ValidationError as e:
            logger.debug(f"Kept existing {field_path}; rejected {value!r}: {e.errors()[0]['msg']}")


def deep_merge(model: M, data: Mapping[str, Any] | None) -> M:
    """
    Copy of ``model`` with ``data`` merged in.

    Keys may be camelCase aliases or snake_case names. Absent keys, ``None``
    and empty strings/lists leave the existing value in place.
    """
    merged = model.model_copy(deep=True)
    if data:
        _merge_into(merged, data, "")
    return merged


def build_record(*layers: Mapping[str, Any] | None) -> DisclosureRecord:
    """Defaults with each layer merged over the previous one, in order."""
    record = DisclosureRecord()
    for layer in layers:
        record = deep_merge(record, layer)
    return record


# =============================================================================
# Field paths
# =============================================================================

def _model_type(annotation: Any) -> type[BaseModel] | None:
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    return None


def _leaf_paths(model: type[BaseModel], alias_prefix: str = "", name_prefix: str = ""):
    for name, field in model.model_fields.items():
        alias = field.alias or name
        alias_path = f"{alias_prefix}{alias}"
        name_path = f"{name_prefix}{name}"
        nested = _model_type(field.annotation)
        if nested is not None:
            yield from _leaf_paths(nested, f"{alias_path}.", f"{name_path}_")
        else:
            yield name_path.upper(), alias_path


FieldPath = Enum("FieldPath", list(_leaf_paths(DisclosureRecord)), type=str)
FieldPath.__doc__ = "Every editable leaf of DisclosureRecord, valued by its dotted camelCase path."


def resolve_path(path: str) -> FieldPath:
    """FieldPath for a dotted path written with aliases or snake_case names."""
    try:
        return FieldPath(path)
    except ValueError:
        pass
    candidate = path.replace(".", "_").upper()
    try:
        return FieldPath[candidate]
    except KeyError:
        raise ValueError(f"Unknown record field '{path}'") from None


def _walk(record: BaseModel, path: FieldPath) -> tuple[BaseModel, str]:
    """Parent model and attribute name of a leaf path."""
    target = record
    *parents, leaf = path.value.split(".")
    for part in parents:
        target = getattr(target, _attribute(type(target), part))
    return target, _attribute(type(target), leaf)


def _attribute(model: type[BaseModel], alias: str) -> str:
    for name, field in model.model_fields.items():
        if (field.alias or name) == alias:
            return name
    raise ValueError(f"{model.__name__} has no field '{alias}'")


def get_field(record: BaseModel, path: FieldPath) -> Any:
    parent, name = _walk(record, path)
    return getattr(parent, name)


def set_field(record: M, path: FieldPath, value: Any) -> M:
    """Copy of ``record`` with one leaf replaced; raises ValidationError for invalid values."""
    updated = record.model_copy(deep=True)
    parent, name = _walk(updated, path)
    setattr(parent, name, value)
    return updated


def parse_edit(edit: str) -> tuple[FieldPath, Any]:
    """
    Parse a ``path=value`` edit.

    Values that look like JSON arrays or objects are decoded; everything else
    is passed as a string and validated by the record model.
    """
    path, sep, raw = edit.partition("=")
    if not sep:
        raise ValueError(f"Edit must look like path=value, got '{edit}'")
    value: Any = raw
    if raw[:1] in ("[", "{"):
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON value for {path}: {e}") from e
    return resolve_path(path.strip()), value


def apply_edits(record: DisclosureRecord, edits: Mapping[str, Any] | None) -> DisclosureRecord:
    """Apply path -> value edits in order; edits may set fields to empty values."""
    for path, value in (edits or {}).items():
        record = set_field(record, resolve_path(path), value)
    return record
