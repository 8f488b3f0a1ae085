"""App configuration for the employee data table app."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` app (employee table page and table model)."""

    name = "core"
    verbose_name = "Employee data table"
