"""
ASGI config for the employee records project.

Exposes the ASGI callable as a module‑level variable named ``application``
for servers such as uvicorn or daphne.
"""

import os
from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "organization_management.config.settings.production")

application = get_asgi_application()
