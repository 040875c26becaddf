"""Data Access Object (DAO) implementation for managing shortened URLs in Redis

This module provides a Redis-based implementation of ShortURLBaseDAO for CRUD-like
operations with ShortURLModel instances.

Each short URL record is stored as a single Redis hash:

    <prefix>:links:<shortcode>  ->  {"target": <original url>, "hits": <hit counter>}

Responsibilities:
    - Insert short URLs without ever overwriting an existing record;
    - Retrieve short URLs from Redis;
    - Atomically increment per-link hit counters;
    - Raise appropriate DAO exceptions on missing records and connectivity issues.

Classes:
    ShortURLRedisDAO:
        DAO for storing and retrieving ShortURLModel in a Redis datastore.

Example:
    >>> from urlshortener.models import ShortURLModel
    >>> from urlshortener.dao.redis import ShortURLRedisDAO

    >>> dao = ShortURLRedisDAO(prefix="app:dev")

    >>> short_url = ShortURLModel(
    ...     target="https://example.com/page",
    ...     shortcode="abcde"
    ... )
    >>> dao.insert(short_url)
    <ShortURLRedisDAO>

    >>> retrieved = dao.get("abcde")
    >>> retrieved.target
    'https://example.com/page'
    >>> retrieved.hits
    0

    >>> dao.hit("abcde")
    1
"""

from beartype import beartype

from urlshortener.models import ShortURLModel
from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.base.short_url_base_dao import HITS_FIELD
from urlshortener.dao.redis.mixins import RedisClientMixin
from urlshortener.dao.redis.helpers import handle_redis_connection_error
from urlshortener.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


TARGET_FIELD = 'target'


class ShortURLRedisDAO(RedisClientMixin, ShortURLBaseDAO):
    """Redis-based Data Access Object (DAO) for managing short URL mappings

    This class implements the ShortURLBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLRedisDAO:
            Insert a short URL mapping and initialize its hit counter.
            Raises ShortURLAlreadyExistsError when a URL with the same shortcode exists.
            Raises DataStoreError on connectivity issues with Redis.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a short URL mapping and its hit counter by shortcode.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.

        increment(shortcode: str, field: str = 'hits', delta: int = 1, **kwargs) -> int:
            Atomically increment the hit counter via HINCRBY.
            Raises ShortURLNotFoundError when the shortcode doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLRedisDAO':
        """Insert a short URL mapping into Redis

        Both hash fields are written with HSETNX inside a single MULTI/EXEC
        transaction. The first reply tells whether the record was created; an
        existing record keeps both its target and its hit counter.

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLRedisDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same shortcode already exists.
            DataStoreError:
                If a Redis connection issue occurs during the transaction.
        """
        link_key = self.keys.link_key(short_url.shortcode)

        # NOTE: A separate EXISTS check before the write would leave a window
        #       where two concurrent inserts of the same shortcode both pass:
        #
        #       (lambda 1): EXISTS <app>:links:<shortcode>  => 0
        #       (lambda 2): EXISTS <app>:links:<shortcode>  => 0
        #       (lambda 1): HSET <app>:links:<shortcode> target <url 1>
        #       (lambda 2): HSET <app>:links:<shortcode> target <url 2>  => url 1 is lost
        #
        #       HSETNX decides the winner inside Redis, so exactly one insert succeeds.
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.hsetnx(link_key, TARGET_FIELD, short_url.target)
            pipe.hsetnx(link_key, HITS_FIELD, short_url.hits)
            created, _ = pipe.execute()

        if not created:
            raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")
        return self

    @handle_redis_connection_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Args:
            shortcode (str):
                The shortcode identifier for the shortened URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortURLModel:
                The retrieved ShortURLModel instance if found.

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.get('abcde')
            ShortURLModel(target='https://example.com', shortcode='abcde', hits=0)
        """
        record = self.redis.hgetall(self.keys.link_key(shortcode))
        if not record or record.get(TARGET_FIELD) is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        return ShortURLModel(
            target=record[TARGET_FIELD],
            shortcode=shortcode,
            hits=int(record.get(HITS_FIELD) or 0),
        )

    @handle_redis_connection_error
    @beartype
    def increment(self, shortcode: str, field: str = HITS_FIELD, delta: int = 1, **kwargs) -> int:
        """Atomically increment a short URL's hit counter

        NOTE: records are never deleted, so a record that passes the EXISTS check
              is still present when HINCRBY runs. The check only keeps HINCRBY from
              creating a hash for a shortcode that was never shortened.

        Args:
            shortcode (str):
                The short code of the record to update.
            field (str):
                Field to increment. Only 'hits' is accepted.
            delta (int):
                Non-negative increment. Defaults to 1.
            **kwargs:
                Additional keyword arguments, used by data store.

        Return:
            int:
                Hit counter value after the increment.

        Raises:
            ValueError:
                If the field is not 'hits' or delta is negative.
            ShortURLNotFoundError:
                If no short URL with the given short code exists.
            DataStoreError:
                If Redis connectivity issues occur.

        Example:
            >>> dao.increment('abcde')
            1
        """
        self._validate_increment(field, delta)
        link_key = self.keys.link_key(shortcode)

        if not self.redis.exists(link_key):
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        return int(self.redis.hincrby(link_key, field, delta))
