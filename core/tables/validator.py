"""Validation and construction of TableConfig definitions.

Column configs are validated once when a table is built, so a misconfigured
column fails fast with an error naming it instead of failing on every render.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from operator import attrgetter

from .formatting import FormatSpecifierError, parse_format
from .schema import ALIGNMENTS, Accessor, ColumnConfig, TableActions, TableConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a set of column configs."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    invalid_columns: tuple[str, ...] = ()


class TableConfigError(ValueError):
    """Raised when a table configuration is invalid."""

    def __init__(self, *, errors: tuple[str, ...], column_names: tuple[str, ...]) -> None:
        """Initialize the error.

        Args:
            errors: Every validation error found.
            column_names: Property names of the offending columns.
        """

        joined = "\n".join(f"- {error}" for error in errors)
        super().__init__(f"Invalid table configuration:\n{joined}")
        self.errors = errors
        self.column_names = column_names


def record_properties(record_type: type) -> tuple[str, ...]:
    """Return the readable data members of `record_type` in declaration order.

    Dataclass fields and annotated attributes come first, followed by
    properties. Methods are not included: derived values that need arguments
    require an explicit column accessor.
    """

    names: list[str] = []
    if dataclasses.is_dataclass(record_type):
        names.extend(field.name for field in dataclasses.fields(record_type))
    for klass in reversed(record_type.__mro__):
        for name in getattr(klass, "__annotations__", {}):
            if not name.startswith("_") and name not in names:
                names.append(name)
    for name, member in inspect.getmembers(record_type):
        if isinstance(member, property) and not name.startswith("_") and name not in names:
            names.append(name)
    return tuple(names)


def resolve_accessor(record_type: type, property_name: str) -> Accessor | None:
    """Resolve a property name into an accessor, or None when it is unknown."""

    if property_name not in record_properties(record_type):
        return None
    return attrgetter(property_name)


def humanize(property_name: str) -> str:
    """Return a default header for a property name (`joining_date` -> `Joining date`)."""

    text = property_name.replace("_", " ").strip()
    return text[:1].upper() + text[1:]


def validate_columns(
    columns: Iterable[ColumnConfig],
    *,
    record_type: type,
    column_formats: Mapping[str, str] | None = None,
) -> ValidationResult:
    """Validate column configs against a record type.

    Args:
        columns: ColumnConfig entries to validate.
        record_type: Class of the records the table will render.
        column_formats: Optional property-name to specifier map.

    Returns:
        ValidationResult containing errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []
    invalid: list[str] = []
    known = set(record_properties(record_type))
    formats = dict(column_formats or {})

    def _fail(name: str, message: str) -> None:
        errors.append(message)
        if name not in invalid:
            invalid.append(name)

    seen: set[str] = set()
    for column in columns:
        name = column.property_name
        if not isinstance(name, str) or not name.strip():
            _fail(str(name), "ColumnConfig.property_name must be a non-empty string.")
            continue
        if name in seen:
            _fail(name, f"Duplicate ColumnConfig.property_name: {name!r}.")
        seen.add(name)

        if column.accessor is None and name not in known:
            _fail(name, f"ColumnConfig[{name}] does not resolve to a readable member of {record_type.__name__}.")
        if column.accessor is not None and not callable(column.accessor):
            _fail(name, f"ColumnConfig[{name}].accessor must be callable.")
        if column.template is not None and not callable(column.template):
            _fail(name, f"ColumnConfig[{name}].template must be callable.")
        if column.align not in ALIGNMENTS:
            _fail(name, f"ColumnConfig[{name}].align is not a supported value: {column.align!r}.")
        if isinstance(column.order, bool) or not isinstance(column.order, int):
            _fail(name, f"ColumnConfig[{name}].order must be an integer.")

        spec = column.format if column.format is not None else formats.get(name)
        if spec is not None:
            try:
                parse_format(spec)
            except FormatSpecifierError as exc:
                _fail(name, f"ColumnConfig[{name}].format {spec!r} is malformed: {exc.reason}.")
            if column.template is not None:
                warnings.append(f"ColumnConfig[{name}].format {spec!r} is ignored because a template is set.")

    for name, spec in formats.items():
        if name in seen:
            continue
        if name not in known:
            _fail(
                name,
                f"ColumnConfig[{name}] format map entry does not resolve to a readable member of "
                f"{record_type.__name__}.",
            )
            continue
        try:
            parse_format(spec)
        except FormatSpecifierError as exc:
            _fail(name, f"ColumnConfig[{name}].format {spec!r} is malformed: {exc.reason}.")

    return ValidationResult(
        is_valid=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
        invalid_columns=tuple(invalid),
    )


def ordered_columns(columns: Iterable[ColumnConfig]) -> tuple[ColumnConfig, ...]:
    """Return columns in ascending `order`, keeping declaration order for ties."""

    return tuple(sorted(columns, key=lambda column: column.order))


def build_table_config(
    columns: Iterable[ColumnConfig],
    *,
    record_type: type,
    column_formats: Mapping[str, str] | None = None,
    include_unlisted: bool = False,
    actions: TableActions | None = None,
) -> TableConfig:
    """Validate columns and build a read-only TableConfig.

    Args:
        columns: Configured columns, in declaration order.
        record_type: Class of the records the table will render.
        column_formats: Optional property-name to specifier map. Entries fill
            `format` for columns that do not set one.
        include_unlisted: When True, every record property without an
            explicit column gets a default column ordered after the
            configured ones.
        actions: Optional row action callbacks.

    Returns:
        TableConfig with sorted columns and resolved accessors.

    Raises:
        TableConfigError: When any column is invalid.
    """

    declared = tuple(columns)
    formats = dict(column_formats or {})
    result = validate_columns(declared, record_type=record_type, column_formats=formats)
    if not result.is_valid:
        raise TableConfigError(errors=result.errors, column_names=result.invalid_columns)
    for warning in result.warnings:
        logger.debug(warning)

    resolved: list[ColumnConfig] = []
    for column in declared:
        accessor = column.accessor or resolve_accessor(record_type, column.property_name)
        spec = column.format if column.format is not None else formats.get(column.property_name)
        resolved.append(dataclasses.replace(column, accessor=accessor, format=spec))

    if include_unlisted:
        configured = {column.property_name for column in declared}
        next_order = max((column.order for column in declared), default=0) + 1
        for name in record_properties(record_type):
            if name in configured:
                continue
            resolved.append(
                ColumnConfig(
                    property_name=name,
                    header=humanize(name),
                    order=next_order,
                    format=formats.get(name),
                    accessor=attrgetter(name),
                )
            )
            next_order += 1

    return TableConfig(
        record_type=record_type,
        columns=ordered_columns(resolved),
        actions=actions or TableActions(),
    )
