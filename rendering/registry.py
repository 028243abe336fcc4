# This project was developed with assistance from AI tools.
"""
Field registry: placement geometry for every fillable slot of a template.

Coordinates are page-local points with the origin at the bottom-left corner
of the page. They are measured by hand against a specific template asset and
are never computed while rendering; repeating checklists are described by a
single RowGroup descriptor instead of one entry per row.
"""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

DEFAULT_FONT_SIZE = 8.0


class OcclusionPolicy(str, Enum):
    """How much of the canvas around a slot is blanked before writing."""
    TIGHT = "tight"
    GENEROUS = "generous"


@dataclass(frozen=True)
class FieldCoordinate:
    """One placement slot on a template page."""
    x: float
    y: float
    width: float
    height: float
    font_size: float | None = None
    max_width: float | None = None
    occlusion: OcclusionPolicy = OcclusionPolicy.TIGHT
    # Unit printed by the template right after the slot (e.g. "円")
    printed_suffix: str | None = None

    @property
    def size(self) -> float:
        return self.font_size if self.font_size is not None else DEFAULT_FONT_SIZE

    @property
    def wraps(self) -> bool:
        return self.max_width is not None


@dataclass(frozen=True)
class Column:
    """One column of a row group."""
    x: float
    width: float
    height: float = 12.0
    font_size: float | None = None
    max_width: float | None = None


@dataclass(frozen=True)
class RowGroup:
    """
    Descriptor for a repeating vertical list of same-shaped rows.

    Row ``i`` sits at ``start_y - i * row_height``. ``keys`` fixes the order of
    checklist items for this template version; ``max_rows`` caps line-item
    groups whose entries come from a list.
    """
    start_y: float
    row_height: float
    columns: Mapping[str, Column]
    keys: tuple[str, ...] = ()
    max_rows: int | None = None

    def __post_init__(self):
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))
        if self.row_height <= 0:
            raise ValueError(f"row_height must be positive, got {self.row_height}")
        for name, column in self.columns.items():
            if column.height >= self.row_height:
                raise ValueError(
                    f"Column '{name}' height {column.height} does not fit row height {self.row_height}"
                )

    @property
    def capacity(self) -> int:
        if self.max_rows is not None:
            return self.max_rows
        return len(self.keys)

    def row_y(self, index: int) -> float:
        return self.start_y - index * self.row_height

    def cell(self, column: str, index: int) -> FieldCoordinate | None:
        """Coordinate of one cell, or None when the group has no such column."""
        col = self.columns.get(column)
        if col is None:
            return None
        return FieldCoordinate(
            x=col.x,
            y=self.row_y(index),
            width=col.width,
            height=col.height,
            font_size=col.font_size,
            max_width=col.max_width,
        )


@dataclass(frozen=True)
class Band:
    """A horizontal strip of a page cleared before any field inside it is written."""
    x0: float
    y0: float
    x1: float
    y1: float

    @property
    def width(self) -> float:
        return self.x1 - self.x0

    @property
    def height(self) -> float:
        return self.y1 - self.y0


@dataclass(frozen=True)
class PageLayout:
    """All registered geometry of one template page."""
    number: int
    width: float
    height: float
    fields: Mapping[str, FieldCoordinate] = field(default_factory=dict)
    row_groups: Mapping[str, RowGroup] = field(default_factory=dict)
    bands: tuple[Band, ...] = ()
    right_margin: float = 20.0

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "row_groups", MappingProxyType(dict(self.row_groups)))

    @property
    def right_limit(self) -> float:
        return self.width - self.right_margin


class FieldRegistry:
    """Read-only mapping of page number -> field name -> geometry for one template version."""

    def __init__(self, version: str, pages: list[PageLayout], page_count: int):
        self.version = version
        self.page_count = page_count
        self._pages = MappingProxyType({page.number: page for page in pages})
        for number in self._pages:
            if not 1 <= number <= page_count:
                raise ValueError(f"Page {number} outside template page range 1..{page_count}")

    def __repr__(self) -> str:
        return f"FieldRegistry(version={self.version!r}, pages={self.page_count})"

    def page(self, number: int) -> PageLayout | None:
        return self._pages.get(number)

    @property
    def default_size(self) -> tuple[float, float]:
        """Size used for pages that have no registered slots."""
        first = self._pages[min(self._pages)]
        return first.width, first.height

    def lookup(self, page: int, name: str) -> FieldCoordinate | None:
        """Geometry of a field, or None when the template has no slot for it."""
        layout = self._pages.get(page)
        if layout is None:
            return None
        return layout.fields.get(name)

    def row_group(self, page: int, name: str) -> RowGroup | None:
        layout = self._pages.get(page)
        if layout is None:
            return None
        return layout.row_groups.get(name)

    def iter_fields(self):
        """Yield (page number, field name, coordinate) for every registered slot."""
        for number in sorted(self._pages):
            for name, coord in self._pages[number].fields.items():
                yield number, name, coord


_REGISTRIES: dict[str, FieldRegistry] = {}


def register(registry: FieldRegistry) -> FieldRegistry:
    _REGISTRIES[registry.version] = registry
    return registry


def get_registry(version: str) -> FieldRegistry:
    """Return the registry for a template version; raises KeyError for unknown versions."""
    # Coordinate tables register themselves on import
    from . import coordinates  # noqa: F401

    try:
        return _REGISTRIES[version]
    except KeyError:
        known = ", ".join(sorted(_REGISTRIES)) or "none"
        raise KeyError(f"Unknown template version '{version}' (known: {known})") from None


def available_versions() -> list[str]:
    from . import coordinates  # noqa: F401

    return sorted(_REGISTRIES)
