"""Utility functions for application configuration management.

This module provides a standardized interface for Lambda functions to access
configuration data stored in **AWS AppConfig**. Each environment (`APP_ENV`) has
a dedicated AppConfig *Environment* within the shared AppConfig *Application*
identified by `APP_NAME`. Configuration data is stored as a JSON document under
a configuration profile (typically `backend-config`) and deployed to the
corresponding environment.

The configuration JSON follows this structure:

    {
        "build": 7,
        "active_backend": "dynamodb",
        "base_url": "https://sho.rt",
        "max_attempts": 1,
        "configs": {
            "shorten_url": {
                "dynamodb": {"table_name": "UrlShortenerTable", "region": "us-east-1"}
            },
            "redirect_url": {
                "dynamodb": {"table_name": "UrlShortenerTable", "region": "us-east-1"}
            }
        }
    }

Each Lambda turns its own section (e.g., `"shorten_url"`) of this document
into an immutable ServiceConfig, which is then passed to the services.

Typical usage inside a Lambda handler:

    >>> from urlshortener.utils.config import load_config
    >>> config = load_config('shorten_url')
    >>> config.backend
    <Backend.DYNAMODB: 'dynamodb'>
    >>> config.store['table_name']
    'UrlShortenerTable'
"""

import os
import json
import functools
import urllib.parse
import urllib.request
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from collections.abc import Callable, Mapping
from typing import Any

import boto3

from urlshortener.types import AppConfig
from urlshortener.constants import ENV, Backend, DEFAULT_MAX_ATTEMPTS
from urlshortener.exceptions import BadConfigurationError
from urlshortener.utils.helpers import require_environment
from urlshortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for DAOs as <app name>:<app env> (None if APP_NAME is not set)."""
    return None if app_name() is None else f'{app_name()}:{app_env()}'


@dataclass(frozen=True)
class ServiceConfig:
    """Explicit configuration passed to URLShortener and URLRedirector.

    Attributes:
        backend (Backend):
            Record store implementation to use.
        store (Mapping[str, Any]):
            Backend-specific settings (e.g. Redis host, DynamoDB table name).
        base_url (str | None):
            Public base URL for short links. None derives it from the request.
        max_attempts (int):
            Shorten attempts per request on identifier collision (1 = no internal retry).
        prefix (str | None):
            Key namespace for key-value backends.
    """

    backend: Backend
    store: Mapping[str, Any] = field(default_factory=dict)
    base_url: str | None = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    prefix: str | None = None

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise BadConfigurationError(f'max_attempts must be at least 1 (given value: {self.max_attempts}).')
        object.__setattr__(self, 'store', MappingProxyType(dict(self.store)))

    @classmethod
    def from_appconfig(cls, document: AppConfig, lambda_name: str, prefix: str | None = None) -> 'ServiceConfig':
        """Build the configuration of one Lambda from a full AppConfig document.

        Raises:
            BadConfigurationError:
                If the active backend is unknown or the Lambda's section is missing.
        """
        try:
            backend = Backend(document['active_backend'])
            store = document['configs'][lambda_name].get(backend, {})
            if not isinstance(store, Mapping):
                raise TypeError(f'{backend} settings must be an object (given type: {type(store).__name__}).')
            max_attempts = int(document.get('max_attempts', DEFAULT_MAX_ATTEMPTS))
        except KeyError as e:
            raise BadConfigurationError(f'AppConfig document is missing {e} (lambda: {lambda_name}).') from e
        except (AttributeError, TypeError, ValueError) as e:
            raise BadConfigurationError(f'Malformed AppConfig document for lambda {lambda_name}: {e}') from e

        return cls(
            backend=backend,
            store=store,
            base_url=document.get('base_url') or None,
            max_attempts=max_attempts,
            prefix=prefix,
        )


def _sam_load_local_appconfig(func: Callable[[], AppConfig]) -> Callable[[], AppConfig]:  # pragma: no cover
    """Decorator: load AppConfig from a local AppConfig Agent when running under SAM.

    Behavior:
        - If the application is running locally and `APPCONFIG_AGENT_URL` is set
          to a safe local URL, fetch the app configuration JSON from the local
          AppConfig agent.
        - Else, call the wrapped function (which pulls from AWS AppConfig via boto3).

    Environment variables used:
        APPCONFIG_AGENT_URL     : Base URL of the local AppConfig Agent (e.g., http://appconfig-agent:2772).
        APPCONFIG_PROFILE_NAME  : Optional profile name (default: "backend-config").
    """

    def __validate_appconfig_url(url: str | None) -> str:
        if not url:
            return ''
        components = urllib.parse.urlparse(url)
        if components.scheme not in {'http', 'https'}:
            raise BadConfigurationError(f'Bad scheme {url}')
        if components.hostname not in {'localhost', '127.0.0.1', 'host.docker.internal', 'appconfig-agent'}:
            raise BadConfigurationError(f'Bad host {url}')
        if components.port not in {2772, None}:
            raise BadConfigurationError(f'Bad port {url}')
        return url

    @functools.wraps(func)
    def wrapper() -> AppConfig:
        agent_url = __validate_appconfig_url(os.getenv(ENV.AppConfig.AGENT_URL))
        if not running_locally() or not agent_url:
            return func()

        profile_name = os.getenv(ENV.AppConfig.PROFILE_NAME, 'backend-config')
        url = f'{agent_url}/applications/{app_name()}/environments/{app_env()}/configurations/{profile_name}'

        logger.debug('Trying to load AppConfig from local agent.', extra={'agentUrl': url})
        with urllib.request.urlopen(url, timeout=5) as r:  # noqa: S310
            document = json.load(r)
        logger.debug('Loaded AppConfig from local agent.', extra={'build': document.get('build')})
        return document

    return wrapper


@_sam_load_local_appconfig
@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def fetch_appconfig_document() -> AppConfig:
    """Fetch the latest AppConfig JSON document via the AppConfig Data API."""
    logger.debug('Trying to load AppConfig from AWS AppConfig.')

    appconfig = boto3.client('appconfigdata')

    # Start an AppConfig data session
    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']

    # Fetch the configuration
    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    content = response['Configuration'].read()
    document = json.loads(content.decode('utf-8'))

    logger.debug('Loaded AppConfig from AWS AppConfig.', extra={'build': document.get('build')})
    return document


def load_config(lambda_name: str) -> ServiceConfig:
    """Load the ServiceConfig for a given Lambda (e.g., 'shorten_url', 'redirect_url').

    Raises:
        MissingEnvironmentVariableError:
            If the AppConfig identifiers are not set.
        BadConfigurationError:
            If the AppConfig document has no usable section for this Lambda.
    """
    return ServiceConfig.from_appconfig(fetch_appconfig_document(), lambda_name, prefix=app_prefix())
