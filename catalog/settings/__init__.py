"""
Django settings for the catalog project.

This package contains environment-specific settings:
- base.py: Common settings for all environments
- dev.py: Development environment settings
- prod.py: Production environment settings
- test.py: Test settings (in-memory SQLite)

Usage:
    Set DJANGO_ENV (or DJANGO_SETTINGS_MODULE directly):
    - Development: dev (catalog.settings.dev)
    - Production: prod (catalog.settings.prod)
    - Tests: test (catalog.settings.test)
"""

import os

# Default to development settings if not specified
environment = os.getenv('DJANGO_ENV', 'dev')

if environment == 'prod':
    from .prod import *
elif environment == 'test':
    from .test import *
else:
    from .dev import *
