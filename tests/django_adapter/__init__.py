"""Tests for the Django Electron installer adapter.

This module sets up Django configuration before any test modules are imported.
"""

import os

# Set Django settings module before any Django imports
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "django.conf.global_settings")

import django  # noqa: E402
from django.conf import settings  # noqa: E402

if not settings.configured:
    settings.configure(
        DEBUG=True,
        INSTALLED_APPS=[],
        USE_TZ=True,
        SECRET_KEY="test-secret-key-for-unit-tests",
    )
    django.setup()
