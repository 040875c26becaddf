from urlshortener.utils.config import app_env, app_name, app_prefix, load_config, ServiceConfig
from urlshortener.utils.helpers import base_url, get_short_url, require_environment, guarantee_500_response
from urlshortener.utils.shortener import generate_shortcode
from urlshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'ServiceConfig',
    'base_url',
    'get_short_url',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
