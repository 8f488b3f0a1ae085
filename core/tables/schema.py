"""Schema types for declarative table configuration.

The employee table is driven by configuration objects (ColumnConfig) instead
of hard-coded template logic. This keeps the rendering layer generic and makes
it possible to add or reorder columns without touching view or template code.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Final, Literal

Align = Literal["left", "center", "right"]

ALIGNMENTS: Final[frozenset[str]] = frozenset({"left", "center", "right"})

Accessor = Callable[[Any], Any]
Template = Callable[[Any], Any]
RecordCallback = Callable[[Any], None]


def ignore_record(record: Any) -> None:
    """Default row action callback: accept the record and do nothing."""

    return None


@dataclass(frozen=True, slots=True)
class ColumnConfig:
    """Declarative definition of a single table column.

    Args:
        property_name: Record member the column reads. Unique within a table.
        header: Display label (free text, may include emoji).
        align: Horizontal alignment used for both header and cells.
        order: Render position; lower values render first, ties keep
            declaration order.
        format: Optional format specifier (e.g. `C2`, `N0`, `dd-MMM-yyyy`)
            applied to the raw value when no template is set.
        template: Optional custom renderer `record -> fragment`. When present
            it overrides `format` entirely.
        accessor: Optional explicit value accessor `record -> value`. When
            omitted, the table builder resolves `property_name` once.
    """

    property_name: str
    header: str
    align: Align = "left"
    order: int = 0
    format: str | None = None
    template: Template | None = None
    accessor: Accessor | None = None


@dataclass(frozen=True, slots=True)
class TableActions:
    """Row action callbacks registered by the host page.

    Args:
        on_edit: Invoked with the record whose edit action was triggered.
        on_delete: Invoked with the record whose delete action was triggered.
    """

    on_edit: RecordCallback = ignore_record
    on_delete: RecordCallback = ignore_record


@dataclass(frozen=True, slots=True)
class TableConfig:
    """A validated, read-only table definition.

    Instances are produced by `core.tables.validator.build_table_config`,
    which sorts columns by `order` and guarantees every column has an
    accessor.

    Args:
        record_type: Class of the records the table renders.
        columns: Columns in render order.
        actions: Row action callbacks.
    """

    record_type: type
    columns: tuple[ColumnConfig, ...]
    actions: TableActions = TableActions()

    def column(self, property_name: str) -> ColumnConfig | None:
        """Return the column for `property_name`, or None when absent."""

        for column in self.columns:
            if column.property_name == property_name:
                return column
        return None


@dataclass(frozen=True, slots=True)
class Formatted:
    """A cell whose raw value is converted with a format specifier."""

    value: Any
    spec: str


@dataclass(frozen=True, slots=True)
class Custom:
    """A cell produced by a column template."""

    render: Template
    record: Any


@dataclass(frozen=True, slots=True)
class Plain:
    """A cell displayed with the value's default string conversion."""

    value: Any


Cell = Formatted | Custom | Plain
