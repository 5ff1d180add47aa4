# -*- coding: utf-8 -*-
"""
Settings shared by all environments.  Deployment-specific values come
from TJ_-prefixed environment variables, gathered in ENV.
"""
import os
from pathlib import Path

from tj.environment.server import EnvironmentSettings

BASE_DIR = Path(__file__).resolve().parent.parent.parent

ENV = EnvironmentSettings.get()

SECRET_KEY = ENV.SECRET_KEY

DEBUG = False

ALLOWED_HOSTS = ENV.ALLOWED_HOSTS

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'tj.apps.travel',
    'tj.apps.journal',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.middleware.common.CommonMiddleware',
]

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
            ],
        },
    },
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.path.join( ENV.DATABASES_NAME_PATH, 'tj.sqlite3' ),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

LANGUAGE_CODE = 'en-us'
TIME_ZONE = ENV.TIME_ZONE
USE_I18N = True
USE_TZ = True

# strftime() format for days shown to users, e.g., journal helper text.
TJ_DISPLAY_DATE_FORMAT = ENV.DISPLAY_DATE_FORMAT

REST_FRAMEWORK = {
    'DATE_FORMAT': '%Y-%m-%d',
    'DATE_INPUT_FORMATS': [ '%Y-%m-%d' ],
}
