"""WSGI entry point for the data table demo.

Production servers (e.g. gunicorn) load `datatable_demo.wsgi:application`.
"""

from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "datatable_demo.settings")

application = get_wsgi_application()
