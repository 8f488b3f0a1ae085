"""Template context processors for the data table demo."""

from __future__ import annotations

from django.conf import settings
from django.http import HttpRequest


def site_title(request: HttpRequest) -> dict[str, str]:
    """Expose the configured site title to all templates.

    Args:
        request: Current request object.

    Returns:
        Context dict with `site_title` string.
    """

    return {"site_title": settings.DATATABLE_SITE_TITLE}
