"""
Production settings for the catalog project.
"""

import copy

from .base import *

DEBUG = os.getenv('DEBUG', 'False').lower() in ('true', '1', 'yes')

DATABASES = copy.deepcopy(DATABASES)
DATABASES['default']['CONN_MAX_AGE'] = int(os.getenv('DB_CONN_MAX_AGE', '600'))

# JSON only in production, no browsable API
REST_FRAMEWORK = copy.deepcopy(REST_FRAMEWORK)
REST_FRAMEWORK['DEFAULT_RENDERER_CLASSES'] = (
    'rest_framework.renderers.JSONRenderer',
)

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'
