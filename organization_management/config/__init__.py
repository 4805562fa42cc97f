"""
Configuration package for the organization_management Django project.

Settings live in ``settings/`` (base plus per-environment modules);
URL routing, WSGI and ASGI entry points sit next to this file.
"""
