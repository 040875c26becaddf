from unittest.mock import MagicMock

import pytest
import redis
from pytest import MonkeyPatch

from urlshortener.dao.exceptions import DataStoreError
from urlshortener.dao.redis import RedisClientMixin, RedisKeySchema
from urlshortener.dao.redis import mixins


class TestRedisClientMixin:
    def test_uses_given_client(self, redis_client: MagicMock, app_prefix: str) -> None:
        inst = RedisClientMixin(redis_client=redis_client, prefix=app_prefix)

        assert inst.redis is redis_client
        assert isinstance(inst.keys, RedisKeySchema)
        assert inst.keys.prefix == app_prefix

    def test_creates_client_from_parameters(self, monkeypatch: MonkeyPatch, redis_client: MagicMock) -> None:
        redis_cls = MagicMock(return_value=redis_client)
        monkeypatch.setattr(mixins.redis, 'Redis', redis_cls)

        RedisClientMixin(redis_host='redis.local', redis_port='6380', redis_db='2', redis_password='secret', redis_ssl=True)

        redis_cls.assert_called_once_with(
            host='redis.local',
            port=6380,
            db=2,
            decode_responses=True,
            username=None,
            password='secret',
            ssl=True,
            socket_timeout=None,
        )

    def test_healthcheck_without_raising(self, redis_client: MagicMock) -> None:
        inst = RedisClientMixin(redis_client=redis_client)
        redis_client.ping.side_effect = redis.exceptions.ConnectionError('down')

        assert inst._healthcheck(raise_error=False) is False

    def test_healthcheck_raises_data_store_error(self, redis_client: MagicMock) -> None:
        redis_client.ping.side_effect = redis.exceptions.TimeoutError('slow')

        with pytest.raises(DataStoreError, match='Check the provided configuration parameters'):
            RedisClientMixin(redis_client=redis_client)

    def test_healthcheck_server_error_raises_data_store_error(self, redis_client: MagicMock) -> None:
        redis_client.ping.side_effect = redis.exceptions.OutOfMemoryError('OOM')

        with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0"):
            RedisClientMixin(redis_client=redis_client)
