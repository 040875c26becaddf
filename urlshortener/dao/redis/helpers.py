import functools
import redis
from typing import TypeVar, Any
from collections.abc import Callable

from urlshortener.dao.exceptions import DataStoreError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_redis_connection_error(method: F) -> F:
    """Wrap Redis-interacting DAO methods to handle connection and server errors

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise
            any redis.exceptions.RedisError (connection loss, timeouts, READONLY
            replicas during failover, OOM).

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError whenever Redis fails the request.

    Example:
        >>> @handle_redis_connection_error
        ... def get(self, shortcode):
        ...     return self.redis.hgetall(self.keys.link_key(shortcode))
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            info = self.redis.connection_pool.connection_kwargs
            redis_host = info.get('host')
            redis_port = info.get('port')
            redis_db = info.get('db')
            raise DataStoreError(f"Can't connect to Redis at {redis_host}:{redis_port}/{redis_db}.") from e
        except redis.exceptions.RedisError as e:
            # e.g. READONLY replica during failover or OOM
            raise DataStoreError(f'Redis request failed ({type(e).__name__}: {e}).') from e

    return wrapper
