"""Unit tests for building and validating table configurations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

import pytest

from core.tables.schema import ColumnConfig, TableActions
from core.tables.validator import (
    TableConfigError,
    build_table_config,
    humanize,
    record_properties,
    validate_columns,
)

pytestmark = pytest.mark.unit


@dataclass
class Invoice:
    number: str
    total: Decimal
    issued_on: date

    @property
    def is_large(self) -> bool:
        return self.total > 1000

    def overdue_days(self, today: date) -> int:
        return (today - self.issued_on).days


def test_record_properties_lists_fields_then_properties() -> None:
    """Dataclass fields come first in declaration order, then properties."""

    assert record_properties(Invoice) == ("number", "total", "issued_on", "is_large")


def test_build_rejects_unknown_property_name_at_build_time() -> None:
    """Unknown property names fail fast with an error naming the column."""

    with pytest.raises(TableConfigError) as excinfo:
        build_table_config(
            [
                ColumnConfig(property_name="number", header="No."),
                ColumnConfig(property_name="customer", header="Customer"),
            ],
            record_type=Invoice,
        )
    assert excinfo.value.column_names == ("customer",)
    assert "ColumnConfig[customer]" in str(excinfo.value)


def test_methods_need_an_explicit_accessor() -> None:
    """Derived values computed by methods are not resolved by name."""

    result = validate_columns([ColumnConfig(property_name="overdue_days", header="Overdue")], record_type=Invoice)
    assert result.is_valid is False
    assert result.invalid_columns == ("overdue_days",)

    accessor_result = validate_columns(
        [
            ColumnConfig(
                property_name="overdue_days",
                header="Overdue",
                accessor=lambda invoice: invoice.overdue_days(date(2024, 1, 31)),
            )
        ],
        record_type=Invoice,
    )
    assert accessor_result.is_valid is True


def test_validation_collects_every_error() -> None:
    """Duplicate names, bad alignment, and malformed formats are all reported."""

    result = validate_columns(
        [
            ColumnConfig(property_name="number", header="No.", align="justify"),  # type: ignore[arg-type]
            ColumnConfig(property_name="number", header="No. again"),
            ColumnConfig(property_name="issued_on", header="Issued", format="dd-QQQ-yyyy"),
        ],
        record_type=Invoice,
    )
    assert result.is_valid is False
    assert any("align is not a supported value" in error for error in result.errors)
    assert any("Duplicate ColumnConfig.property_name" in error for error in result.errors)
    assert any("ColumnConfig[issued_on].format" in error for error in result.errors)
    assert result.invalid_columns == ("number", "issued_on")


def test_format_and_template_together_is_a_warning_not_an_error() -> None:
    """Template precedence means a simultaneous format is ignored, not rejected."""

    result = validate_columns(
        [ColumnConfig(property_name="total", header="Total", format="C2", template=lambda invoice: "custom")],
        record_type=Invoice,
    )
    assert result.is_valid is True
    assert any("ignored because a template is set" in warning for warning in result.warnings)


def test_column_format_map_fills_missing_formats() -> None:
    """Format map entries apply only to columns without their own format."""

    config = build_table_config(
        [
            ColumnConfig(property_name="total", header="Total"),
            ColumnConfig(property_name="issued_on", header="Issued", format="yyyy-MM-dd"),
        ],
        record_type=Invoice,
        column_formats={"total": "C0", "issued_on": "dd-MMM-yyyy"},
    )
    assert config.column("total").format == "C0"
    assert config.column("issued_on").format == "yyyy-MM-dd"


def test_column_format_map_rejects_unknown_keys() -> None:
    """Format map keys must resolve to a record member."""

    with pytest.raises(TableConfigError) as excinfo:
        build_table_config(
            [ColumnConfig(property_name="number", header="No.")],
            record_type=Invoice,
            column_formats={"amount_due": "C2"},
        )
    assert excinfo.value.column_names == ("amount_due",)


def test_build_sorts_columns_by_order_with_stable_ties() -> None:
    """Columns sort ascending by order; equal orders keep declaration order."""

    config = build_table_config(
        [
            ColumnConfig(property_name="issued_on", header="Issued", order=3),
            ColumnConfig(property_name="number", header="No.", order=1),
            ColumnConfig(property_name="total", header="Total", order=2),
            ColumnConfig(property_name="is_large", header="Large?", order=1),
        ],
        record_type=Invoice,
    )
    assert [column.property_name for column in config.columns] == ["number", "is_large", "total", "issued_on"]
    assert all(column.accessor is not None for column in config.columns)


def test_include_unlisted_appends_default_columns() -> None:
    """Unconfigured record members get humanized, trailing default columns."""

    config = build_table_config(
        [ColumnConfig(property_name="total", header="Total", order=10)],
        record_type=Invoice,
        column_formats={"issued_on": "dd-MMM-yyyy"},
        include_unlisted=True,
    )
    assert [column.property_name for column in config.columns] == ["total", "number", "issued_on", "is_large"]
    issued = config.column("issued_on")
    assert issued.header == "Issued on"
    assert issued.align == "left"
    assert issued.order == 12
    assert issued.format == "dd-MMM-yyyy"


def test_build_defaults_to_no_op_actions() -> None:
    """Without host callbacks, edit and delete do nothing."""

    config = build_table_config([ColumnConfig(property_name="number", header="No.")], record_type=Invoice)
    invoice = Invoice(number="INV-1", total=Decimal("10"), issued_on=date(2024, 1, 1))
    assert config.actions == TableActions()
    assert config.actions.on_edit(invoice) is None
    assert config.actions.on_delete(invoice) is None


def test_humanize_property_names() -> None:
    """Snake case names become sentence-case headers."""

    assert humanize("joining_date") == "Joining date"
    assert humanize("name") == "Name"
