"""Views for the employee data table demo page."""

from __future__ import annotations

import logging

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.views.decorators.http import require_GET, require_POST

from core.demo import Employee, employee_actions, employee_table_config, get_demo_employees
from core.tables.render import render_table
from core.tables.schema import TableConfig

logger = logging.getLogger(__name__)


def _employee_table_config() -> TableConfig:
    """Build the per-request TableConfig bound to the shared demo collection."""

    return employee_table_config(
        today=timezone.localdate(),
        actions=employee_actions(get_demo_employees()),
    )


def _lookup_employee(request: HttpRequest, key: int) -> Employee | None:
    """Resolve a row key to an employee, flashing a warning when it is gone."""

    employee = get_demo_employees().find(key)
    if employee is None:
        logger.warning("Row action for unknown employee key=%s ignored.", key)
        messages.warning(request, "That employee is no longer in the table.")
    return employee


@require_GET
def employee_table(request: HttpRequest) -> HttpResponse:
    """Render the employee table from the current state of the collection."""

    config = _employee_table_config()
    employees = get_demo_employees()
    table = render_table(config, employees)
    return render(
        request,
        "core/employee_table.html",
        {
            "table": table,
            "employee_count": len(employees),
        },
    )


@require_POST
def edit_employee(request: HttpRequest, key: int) -> HttpResponse:
    """Invoke the edit action for a row and return to the table."""

    employee = _lookup_employee(request, key)
    if employee is not None:
        _employee_table_config().actions.on_edit(employee)
        messages.info(request, f"Edit requested for {employee.name}.")
    return redirect("core:employee_table")


@require_POST
def delete_employee(request: HttpRequest, key: int) -> HttpResponse:
    """Invoke the delete action for a row and return to the table."""

    employee = _lookup_employee(request, key)
    if employee is not None:
        _employee_table_config().actions.on_delete(employee)
        messages.success(request, f"Deleted {employee.name}.")
    return redirect("core:employee_table")
