# This project was developed with assistance from AI tools.
"""
Page composer: the per-page write operations used by the record walks.

Every text write occludes the slot first and then draws; empty values and
slots the registry does not know about produce no operations at all.
"""
import logging
from collections.abc import Callable, Mapping
from typing import Any

from .canvas import RenderedPage
from .formatting import format_numeral, format_yen
from .layout import fit_lines, line_height, shrink_to_fit
from .marks import MarkRenderer
from .occlusion import clear_band, occlude
from .registry import FieldCoordinate, FieldRegistry, RowGroup

logger = logging.getLogger(__name__)


class PageComposer:
    """Writes values into the registered slots of one template page."""

    def __init__(
        self,
        registry: FieldRegistry,
        page_number: int,
        page: RenderedPage,
        font_name: str,
        marks: MarkRenderer,
    ):
        self.registry = registry
        self.page_number = page_number
        self.page = page
        self.font_name = font_name
        self.marks = marks
        self.layout = registry.page(page_number)

    def __repr__(self) -> str:
        return f"PageComposer(page={self.page_number}, ops={len(self.page.ops)})"

    def _coord(self, name: str) -> FieldCoordinate | None:
        coord = self.registry.lookup(self.page_number, name)
        if coord is None:
            logger.debug(f"No slot '{name}' on page {self.page_number} of {self.registry.version}; skipped")
        return coord

    # ------------------------------------------------------------------
    # Drawing primitives on a resolved coordinate
    # ------------------------------------------------------------------

    def write(self, coord: FieldCoordinate | None, value: str | None) -> bool:
        """Occlude ``coord`` and draw ``value`` there. Returns True if anything was drawn."""
        if coord is None or not value:
            return False

        occlude(self.page, coord, self.layout)

        if coord.wraps:
            step = line_height(coord.size)
            lines = fit_lines(value, self.font_name, coord.size, coord.max_width, coord.height)
            for i, line in enumerate(lines):
                if line:
                    self.page.text(coord.x, coord.y - i * step, line, self.font_name, coord.size)
        else:
            size = shrink_to_fit(value, self.font_name, coord.size, coord.width)
            self.page.text(coord.x, coord.y, value, self.font_name, size)
        return True

    def write_amount(self, coord: FieldCoordinate | None, yen: int) -> bool:
        if coord is None:
            return False
        # Slots with a printed unit take the bare numeral
        shown = format_numeral(yen) if coord.printed_suffix else format_yen(yen)
        return self.write(coord, shown)

    def write_mark(self, coord: FieldCoordinate | None) -> bool:
        if coord is None:
            return False
        self.marks.draw(self.page, coord)
        return True

    # ------------------------------------------------------------------
    # Named-slot operations
    # ------------------------------------------------------------------

    def clear_bands(self) -> None:
        """Blank every band on this page. Call before writing any field inside a band."""
        if self.layout is None:
            return
        for band in self.layout.bands:
            clear_band(self.page, band)

    def text(self, name: str, value: str | None) -> bool:
        if not value:
            return False
        return self.write(self._coord(name), value)

    def amount(self, name: str, yen: int) -> bool:
        if not yen:
            return False
        return self.write_amount(self._coord(name), yen)

    def mark(self, name: str) -> bool:
        return self.write_mark(self._coord(name))

    def choice(self, flag: bool, yes: str, no: str) -> bool:
        """Mark exactly one of a yes/no pair."""
        return self.mark(yes if flag else no)

    def select(self, value: str | None, options: Mapping[str, str]) -> bool:
        """
        Mark the slot mapped to ``value``.

        Values outside ``options`` mark nothing; the printed form keeps its
        own boxes unchecked.
        """
        name = options.get(value or "")
        if name is None:
            if value:
                logger.debug(f"No mark for value {value!r} on page {self.page_number}")
            return False
        return self.mark(name)

    def rows(self, group: str, entries: Any, fill: Callable[["Row", Any], None]) -> int:
        """
        Fill a row group.

        Keyed groups (checklists) take a mapping or model and read one entry per
        registered key, in the template's order. Line-item groups take a
        sequence and write at most ``max_rows`` entries; the rest are dropped.
        ``fill`` is called with the row cursor and the entry for each row whose
        entry is present. Returns the number of rows handed to ``fill``.
        """
        row_group = self.registry.row_group(self.page_number, group)
        if row_group is None:
            logger.debug(f"No row group '{group}' on page {self.page_number}; skipped")
            return 0

        if row_group.keys:
            items = [_entry(entries, key) for key in row_group.keys]
        else:
            items = list(entries or [])
            if row_group.max_rows is not None and len(items) > row_group.max_rows:
                logger.debug(
                    f"Row group '{group}' holds {row_group.max_rows} rows; "
                    f"dropped {len(items) - row_group.max_rows}"
                )
                items = items[:row_group.max_rows]

        filled = 0
        for index, item in enumerate(items):
            if item is None:
                continue
            fill(Row(self, row_group, index), item)
            filled += 1
        return filled


def _entry(entries: Any, key: str) -> Any:
    if entries is None:
        return None
    if isinstance(entries, Mapping):
        return entries.get(key)
    return getattr(entries, key, None)


class Row:
    """Cursor over one row of a row group."""

    def __init__(self, composer: PageComposer, group: RowGroup, index: int):
        self.composer = composer
        self.group = group
        self.index = index

    @property
    def y(self) -> float:
        return self.group.row_y(self.index)

    def cell(self, column: str) -> FieldCoordinate | None:
        return self.group.cell(column, self.index)

    def text(self, column: str, value: str | None) -> bool:
        return self.composer.write(self.cell(column), value)

    def amount(self, column: str, yen: int) -> bool:
        if not yen:
            return False
        return self.composer.write_amount(self.cell(column), yen)

    def mark(self, column: str) -> bool:
        return self.composer.write_mark(self.cell(column))

    def choice(self, flag: bool, yes: str = "yes", no: str = "no") -> bool:
        return self.mark(yes if flag else no)
