"""Demo employee dataset and table configuration.

The employee table page renders a shared, in-memory list of sample employees.
Nothing is persisted: deletions last until the process restarts (or until
`reset_demo_employees` is called).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Final

from django.utils.html import format_html
from django.utils.safestring import SafeString

from core.tables.collection import RecordCollection, delete_from
from core.tables.formatting import format_value
from core.tables.schema import ColumnConfig, TableActions, TableConfig
from core.tables.validator import build_table_config

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Employee:
    """A sample employee row.

    Args:
        name: Full name.
        salary: Annual salary in dollars.
        joining_date: Date the employee joined the company.
        position: Job title.
    """

    name: str
    salary: Decimal
    joining_date: date
    position: str

    def years_at_company(self, today: date) -> int:
        """Return calendar years between joining and `today` (year difference only)."""

        return today.year - self.joining_date.year


SAMPLE_EMPLOYEES: Final[tuple[tuple[str, str, date, str], ...]] = (
    ("John Doe", "50000", date(2015, 5, 1), "Software Developer"),
    ("Jane Smith", "75000", date(2018, 9, 10), "Project Manager"),
    ("Emma Brown", "60000", date(2020, 1, 20), "Data Analyst"),
    ("James White", "55000", date(2017, 3, 15), "HR Specialist"),
    ("Emily Green", "67000", date(2019, 7, 30), "UX Designer"),
    ("Michael Johnson", "85000", date(2014, 10, 12), "Lead Developer"),
    ("Sophia Davis", "72000", date(2016, 3, 5), "Product Manager"),
    ("Benjamin Clark", "40000", date(2021, 8, 19), "Marketing Associate"),
    ("Isabella Lewis", "67000", date(2019, 11, 25), "Sales Executive"),
    ("Oliver Walker", "95000", date(2013, 1, 14), "CTO"),
    ("Ava Martinez", "72000", date(2017, 6, 1), "Business Analyst"),
    ("Ethan Robinson", "85000", date(2016, 9, 17), "Backend Developer"),
    ("Mia Gonzalez", "60000", date(2019, 3, 23), "Content Writer"),
    ("Alexander Lee", "105000", date(2011, 12, 5), "Senior Software Engineer"),
    ("Charlotte Harris", "68000", date(2020, 7, 8), "Graphic Designer"),
    ("Samuel King", "57000", date(2018, 5, 30), "QA Engineer"),
    ("Zoe Scott", "63000", date(2019, 2, 22), "Customer Support"),
    ("Jack Adams", "54000", date(2020, 6, 11), "Financial Analyst"),
    ("Amelia Baker", "78000", date(2015, 4, 20), "Marketing Manager"),
    ("Henry Harris", "92000", date(2012, 8, 9), "CFO"),
)

EMPLOYEE_COLUMN_FORMATS: Final[dict[str, str]] = {
    "salary": "C2",
    "joining_date": "dd-MMM-yyyy",
    "years_at_company": "N0",
}


def build_sample_employees() -> list[Employee]:
    """Return fresh Employee objects for the sample dataset."""

    return [
        Employee(name=name, salary=Decimal(salary), joining_date=joined, position=position)
        for name, salary, joined, position in SAMPLE_EMPLOYEES
    ]


_DEMO_EMPLOYEES: RecordCollection[Employee] | None = None


def get_demo_employees() -> RecordCollection[Employee]:
    """Return the shared demo collection, seeding it on first use."""

    global _DEMO_EMPLOYEES
    if _DEMO_EMPLOYEES is None:
        _DEMO_EMPLOYEES = RecordCollection(build_sample_employees())
    return _DEMO_EMPLOYEES


def reset_demo_employees() -> RecordCollection[Employee]:
    """Discard any deletions and reseed the shared demo collection."""

    global _DEMO_EMPLOYEES
    _DEMO_EMPLOYEES = RecordCollection(build_sample_employees())
    return _DEMO_EMPLOYEES


def salary_template(employee: Employee) -> SafeString:
    """Render the salary as bold, whole-dollar currency."""

    return format_html('<span class="text-success fw-bold">{}</span>', format_value(employee.salary, "C0"))


def employee_columns(*, today: date) -> tuple[ColumnConfig, ...]:
    """Return the configured employee columns.

    Args:
        today: Reference date for the derived years-at-company column.
    """

    def years_at_company(employee: Employee) -> int:
        return employee.years_at_company(today)

    def years_template(employee: Employee) -> SafeString:
        return format_html('<span class="badge bg-info">{}</span>', employee.years_at_company(today))

    return (
        ColumnConfig(property_name="name", header="👤 Name", align="left", order=1),
        ColumnConfig(property_name="position", header="🎯 Position", align="center", order=2),
        ColumnConfig(property_name="salary", header="💰 Salary", align="right", order=3, template=salary_template),
        ColumnConfig(
            property_name="years_at_company",
            header="⏳ Yrs @ Co.",
            align="center",
            order=4,
            template=years_template,
            accessor=years_at_company,
        ),
    )


def employee_actions(employees: RecordCollection[Employee]) -> TableActions:
    """Return the row actions for the employee table.

    Edit only records the click; the host decides what editing means. Delete
    removes the employee from `employees`.
    """

    remove = delete_from(employees)

    def on_edit(employee: Employee) -> None:
        logger.info("Edit clicked for: %s", employee.name)

    def on_delete(employee: Employee) -> None:
        logger.info("Delete clicked for: %s", employee.name)
        remove(employee)

    return TableActions(on_edit=on_edit, on_delete=on_delete)


def employee_table_config(*, today: date, actions: TableActions | None = None) -> TableConfig:
    """Build the employee TableConfig for one page view.

    Args:
        today: Reference date for derived columns.
        actions: Optional row actions (see `employee_actions`).

    Returns:
        TableConfig including the unlisted joining-date column.
    """

    return build_table_config(
        employee_columns(today=today),
        record_type=Employee,
        column_formats=EMPLOYEE_COLUMN_FORMATS,
        include_unlisted=True,
        actions=actions,
    )
