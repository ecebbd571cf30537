"""
Development settings for the catalog project.
"""

import copy

from .base import *

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '*']

# Development-specific CORS settings (more permissive)
CORS_ALLOW_ALL_ORIGINS = True

# Development logging: more detail from the local apps
LOGGING = copy.deepcopy(LOGGING)
LOGGING['loggers']['products']['level'] = 'DEBUG'
LOGGING['loggers']['catalog_client']['level'] = 'INFO'
