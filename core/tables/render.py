"""Generic rendering for TableConfig-driven tables.

Rendering resolves every (record, column) pair into a display value once.
Values are read through the column accessor on every render; nothing is
cached, so derived values always reflect the record's current state.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Literal

from .collection import RecordCollection
from .formatting import default_display, format_value
from .schema import Align, Cell, ColumnConfig, Custom, Formatted, Plain, TableConfig
from .validator import ordered_columns

logger = logging.getLogger(__name__)

CellKind = Literal["formatted", "custom", "plain"]


class CellFormatError(ValueError):
    """Raised when a single cell cannot be rendered with its column rule."""

    def __init__(self, *, column: str, spec: str | None, reason: str) -> None:
        """Initialize the error.

        Args:
            column: Property name of the failing column.
            spec: Format specifier in effect, if any.
            reason: Underlying failure description.
        """

        detail = f" with format {spec!r}" if spec is not None else ""
        super().__init__(f"Column {column!r} could not render{detail}: {reason}")
        self.column = column
        self.spec = spec
        self.reason = reason


@dataclass(frozen=True, slots=True)
class RenderedHeader:
    """A header cell for a rendered table."""

    property_name: str
    text: str
    align: Align


@dataclass(frozen=True, slots=True)
class RenderedCell:
    """A rendered body cell.

    Args:
        property_name: Column the cell belongs to.
        align: Column alignment.
        kind: Which column rule produced the display value.
        display: Display string, or the opaque fragment returned by a template.
        error: Failure captured while rendering; `display` then holds the
            default string conversion of the raw value.
    """

    property_name: str
    align: Align
    kind: CellKind
    display: Any
    error: CellFormatError | None = None


@dataclass(frozen=True, slots=True)
class RenderedRow:
    """A rendered row and the record it came from."""

    key: int | None
    record: Any
    cells: tuple[RenderedCell, ...]


@dataclass(frozen=True, slots=True)
class RenderedTable:
    """A fully rendered table produced from a TableConfig."""

    headers: tuple[RenderedHeader, ...]
    rows: tuple[RenderedRow, ...]

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def errors(self) -> tuple[CellFormatError, ...]:
        """Return every cell error captured during rendering."""

        return tuple(cell.error for row in self.rows for cell in row.cells if cell.error is not None)


def resolve_cell(column: ColumnConfig, record: Any) -> Cell:
    """Resolve the rendering rule for one (record, column) pair.

    Template beats format; format beats default string conversion.
    """

    if column.template is not None:
        return Custom(render=column.template, record=record)
    value = _read(column, record)
    if column.format is not None:
        return Formatted(value=value, spec=column.format)
    return Plain(value=value)


def cell_display(cell: Cell) -> Any:
    """Produce the display value for a resolved cell."""

    if isinstance(cell, Custom):
        return cell.render(cell.record)
    if isinstance(cell, Formatted):
        return format_value(cell.value, cell.spec)
    return default_display(cell.value)


def render_cell(column: ColumnConfig, record: Any) -> RenderedCell:
    """Render one cell, capturing failures instead of raising.

    Args:
        column: Column being rendered.
        record: Record supplying the value.

    Returns:
        RenderedCell; on failure `error` is set and `display` falls back to
        the default string conversion of the raw value.
    """

    kind: CellKind = "plain"
    if column.template is not None:
        kind = "custom"
    elif column.format is not None:
        kind = "formatted"

    try:
        display = cell_display(resolve_cell(column, record))
    except Exception as exc:  # noqa: BLE001 - cell-level error capture
        error = CellFormatError(
            column=column.property_name,
            spec=None if column.template is not None else column.format,
            reason=str(exc) or exc.__class__.__name__,
        )
        logger.warning("%s", error)
        return RenderedCell(
            property_name=column.property_name,
            align=column.align,
            kind=kind,
            display=_fallback_display(column, record),
            error=error,
        )
    return RenderedCell(property_name=column.property_name, align=column.align, kind=kind, display=display)


def render_table(config: TableConfig, records: Iterable[Any] | RecordCollection[Any]) -> RenderedTable:
    """Render every record of a collection against a TableConfig.

    Args:
        config: Table definition.
        records: Current record collection. A RecordCollection contributes
            row keys; other iterables render with `key=None`.

    Returns:
        RenderedTable with headers and rows in column order.
    """

    columns = ordered_columns(config.columns)
    headers = tuple(
        RenderedHeader(property_name=column.property_name, text=column.header, align=column.align)
        for column in columns
    )

    if isinstance(records, RecordCollection):
        entries: Iterable[tuple[int | None, Any]] = records.entries()
    else:
        entries = ((None, record) for record in records)

    rows = tuple(
        RenderedRow(key=key, record=record, cells=tuple(render_cell(column, record) for column in columns))
        for key, record in entries
    )
    return RenderedTable(headers=headers, rows=rows)


def _read(column: ColumnConfig, record: Any) -> Any:
    """Read the raw value for a column through its accessor."""

    if column.accessor is None:
        raise LookupError(f"Column {column.property_name!r} has no accessor; build it with build_table_config().")
    return column.accessor(record)


def _fallback_display(column: ColumnConfig, record: Any) -> str:
    """Default string conversion of a cell's raw value, or empty when unreadable."""

    try:
        return default_display(_read(column, record))
    except Exception:  # noqa: BLE001
        return ""
