"""
Test settings. SQLite keeps the suite independent of a running PostgreSQL.
"""
from .base import *

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

# The test runner swaps this for an in-memory database
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

DEFAULT_USER_ID = '00000000-0000-0000-0000-000000000001'

LOG_LEVEL = 'WARNING'
LOGGING['root']['level'] = LOG_LEVEL
