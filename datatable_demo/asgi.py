"""ASGI entry point for the data table demo.

ASGI servers (e.g. uvicorn) load `datatable_demo.asgi:application`.
"""

from __future__ import annotations

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "datatable_demo.settings")

application = get_asgi_application()
