from urlshortener.constants import Backend
from urlshortener.exceptions import BadConfigurationError
from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.redis import ShortURLRedisDAO
from urlshortener.dao.dynamodb import ShortURLDynamoDBDAO
from urlshortener.dao.memory import ShortURLMemoryDAO
from urlshortener.utils.config import ServiceConfig


def build_short_url_dao(config: ServiceConfig) -> ShortURLBaseDAO:
    """Build the record store selected by `active_backend`.

    Backend settings are passed as `<backend>_<setting>` keyword arguments,
    e.g. {"host": "redis.local"} -> redis_host="redis.local".

    Raises:
        BadConfigurationError:
            If the backend is unknown or a setting is not understood.
        DataStoreError:
            If the backend healthcheck fails (Redis).
    """
    settings = {f'{config.backend}_{k}': v for k, v in config.store.items()}

    try:
        if config.backend == Backend.REDIS:
            return ShortURLRedisDAO(**settings, prefix=config.prefix)
        elif config.backend == Backend.DYNAMODB:
            return ShortURLDynamoDBDAO(**settings)
        elif config.backend == Backend.MEMORY:
            if settings:
                raise BadConfigurationError(f'Invalid memory settings: {sorted(config.store)} (memory backend takes none)')
            return ShortURLMemoryDAO()
    except TypeError as e:
        raise BadConfigurationError(f'Invalid {config.backend} settings: {sorted(config.store)}') from e

    raise BadConfigurationError(f'Unsupported backend {config.backend!r}')
