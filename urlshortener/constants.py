from enum import StrEnum
from http import HTTPStatus


# Length of the uuid4 prefix used as a short URL identifier
SHORTCODE_LENGTH = 5

# Status signalled by the redirector to the HTTP layer
REDIRECT_STATUS = HTTPStatus.PERMANENT_REDIRECT  # 308

# Shorten attempts per request; a single collision is surfaced to the caller
DEFAULT_MAX_ATTEMPTS = 1


class Backend(StrEnum):
    """Supported record store backends (`active_backend` in AppConfig)."""

    REDIS = 'redis'
    DYNAMODB = 'dynamodb'
    MEMORY = 'memory'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
