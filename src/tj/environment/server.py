import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

SRC_DIR = Path(__file__).resolve().parent.parent.parent


@dataclass
class EnvironmentSettings:
    """
    Encapsulates the parsing of the TJ_-prefixed environment variables.
    Every value has a default suitable for local development.
    """

    SECRET_KEY              : str        = 'django-insecure-tj-development-only'
    DATABASES_NAME_PATH     : str        = str( SRC_DIR )
    TIME_ZONE               : str        = 'UTC'
    DISPLAY_DATE_FORMAT     : str        = '%d/%m/%Y'
    ALLOWED_HOSTS           : List[str]  = field( default_factory = lambda: [ 'localhost', '127.0.0.1' ] )

    @classmethod
    def get(cls) -> 'EnvironmentSettings':
        env_settings = cls()
        env_settings.SECRET_KEY = os.environ.get( 'TJ_SECRET_KEY', env_settings.SECRET_KEY )
        env_settings.DATABASES_NAME_PATH = os.environ.get( 'TJ_DB_PATH', env_settings.DATABASES_NAME_PATH )
        env_settings.TIME_ZONE = os.environ.get( 'TJ_TIME_ZONE', env_settings.TIME_ZONE )
        env_settings.DISPLAY_DATE_FORMAT = os.environ.get( 'TJ_DISPLAY_DATE_FORMAT',
                                                           env_settings.DISPLAY_DATE_FORMAT )
        extra_hosts = os.environ.get( 'TJ_ALLOWED_HOSTS', '' )
        env_settings.ALLOWED_HOSTS.extend([ x.strip() for x in extra_hosts.split(',') if x.strip() ])
        return env_settings
