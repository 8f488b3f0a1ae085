"""Print the employee table as aligned text."""

from __future__ import annotations

from datetime import date

from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from core.demo import build_sample_employees, employee_actions, employee_table_config
from core.tables.collection import RecordCollection
from core.tables.render import render_table
from core.tables.text import render_text_table


class Command(BaseCommand):
    """Render the sample employee table to stdout."""

    help = "Print the sample employee table using the same column configuration as the web page."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "--today",
            default=None,
            help="Reference date (YYYY-MM-DD) for derived columns (default: current local date).",
        )
        parser.add_argument(
            "--delete",
            action="append",
            default=[],
            metavar="NAME",
            help="Delete the first employee with this name before printing (repeatable).",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        raw_today: str | None = options["today"]
        names: list[str] = options["delete"]

        if raw_today is None:
            today = timezone.localdate()
        else:
            try:
                today = date.fromisoformat(raw_today)
            except ValueError as exc:
                raise CommandError(f"Invalid --today value: {raw_today!r} (expected YYYY-MM-DD).") from exc

        employees = RecordCollection(build_sample_employees())
        config = employee_table_config(today=today, actions=employee_actions(employees))

        for name in names:
            employee = next((candidate for candidate in employees if candidate.name == name), None)
            if employee is None:
                raise CommandError(f"Unknown employee: {name!r}")
            config.actions.on_delete(employee)

        table = render_table(config, employees)
        self.stdout.write(render_text_table(table))
        self.stdout.write(f"{len(employees)} employees")
        return None
