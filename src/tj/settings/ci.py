# -*- coding: utf-8 -*-
"""
CI/Testing settings - inherits from development with SQLite database.

Use this for fast test runs: DJANGO_SETTINGS_MODULE=tj.settings.ci
"""
from .development import *

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join( ENV.DATABASES_NAME_PATH, 'tj.sqlite3' ),
    }
}

# Fixed zone so "today" in tests does not depend on the host.
TIME_ZONE = 'UTC'
TJ_DISPLAY_DATE_FORMAT = '%d/%m/%Y'

# Minimal logging for cleaner test output
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
    },
}
