"""Declarative data-table configuration and rendering helpers.

Tables in the UI are driven by `ColumnConfig` objects rather than bespoke
template logic. This package contains the schema, format specifiers,
validation, and cell resolution used by the employee table page.
"""

