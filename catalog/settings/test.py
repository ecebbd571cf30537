"""
Test settings for the catalog project.

Uses an in-memory SQLite store so the suite runs without a database server.
"""

import copy

from .base import *

DEBUG = False

ALLOWED_HOSTS = ['localhost', '127.0.0.1', 'testserver']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

CORS_ALLOW_ALL_ORIGINS = True

# Keep test output quiet
LOGGING = copy.deepcopy(LOGGING)
LOGGING['root']['level'] = 'CRITICAL'
for _logger in LOGGING['loggers'].values():
    _logger['level'] = 'CRITICAL'
