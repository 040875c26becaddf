import re
from unittest.mock import MagicMock, call

import pytest
import redis
from beartype.roar import BeartypeCallHintParamViolation

from urlshortener.models import ShortURLModel
from urlshortener.dao.exceptions import DataStoreError, ShortURLAlreadyExistsError, ShortURLNotFoundError
from urlshortener.dao.redis import ShortURLRedisDAO


LINK_KEY = 'testapp:test:links:abcde'


class TestShortURLRedisDAO:
    dao: ShortURLRedisDAO
    redis_client: MagicMock

    @pytest.fixture(autouse=True)
    def setup(self, redis_client: MagicMock, app_prefix: str) -> None:
        self.redis_client = redis_client
        self.dao = ShortURLRedisDAO(redis_client=redis_client, prefix=app_prefix)

    def test_initialization_pings_redis(self) -> None:
        self.redis_client.ping.assert_called_once()

    def test_initialization_with_unreachable_redis(self, redis_client: MagicMock) -> None:
        redis_client.ping.side_effect = redis.exceptions.ConnectionError('refused')

        with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0"):
            ShortURLRedisDAO(redis_client=redis_client)

    def test_insert_short_url(self) -> None:
        self.redis_client.execute.return_value = [1, 1]
        short_url = ShortURLModel(target='https://example.com/page', shortcode='abcde')

        assert self.dao.insert(short_url) is self.dao

        self.redis_client.pipeline.assert_called_once_with(transaction=True)
        self.redis_client.hsetnx.assert_has_calls(
            [
                call(LINK_KEY, 'target', 'https://example.com/page'),
                call(LINK_KEY, 'hits', 0),
            ]
        )
        self.redis_client.hset.assert_not_called()

    def test_insert_short_url_which_already_exists(self) -> None:
        self.redis_client.execute.return_value = [0, 0]
        short_url = ShortURLModel(target='https://example.com/duplicate', shortcode='abcde')

        with pytest.raises(ShortURLAlreadyExistsError, match=re.escape("Short URL with code 'abcde' already exists.")):
            self.dao.insert(short_url)

    def test_insert_short_url_with_invalid_type(self) -> None:
        with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
            self.dao.insert('https://example.com/notamodel')

    def test_insert_short_url_with_redis_connection_error(self) -> None:
        self.redis_client.execute.side_effect = redis.exceptions.ConnectionError('Connection error')
        short_url = ShortURLModel(target='https://example.com/failure', shortcode='abcde')

        with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0."):
            self.dao.insert(short_url)

    def test_get_short_url(self) -> None:
        self.redis_client.hgetall.return_value = {'target': 'https://example.com/page', 'hits': '7'}

        short_url = self.dao.get('abcde')

        assert short_url == ShortURLModel(target='https://example.com/page', shortcode='abcde', hits=7)
        self.redis_client.hgetall.assert_called_once_with(LINK_KEY)

    def test_get_short_url_which_does_not_exist(self) -> None:
        self.redis_client.hgetall.return_value = {}

        with pytest.raises(ShortURLNotFoundError, match=re.escape("Short URL with code 'abcde' not found.")):
            self.dao.get('abcde')

    def test_get_short_url_with_redis_timeout(self) -> None:
        self.redis_client.hgetall.side_effect = redis.exceptions.TimeoutError('Timeout reading from socket')

        with pytest.raises(DataStoreError):
            self.dao.get('abcde')

    def test_get_short_url_with_invalid_type(self) -> None:
        with pytest.raises((TypeError, BeartypeCallHintParamViolation)):
            self.dao.get(12345)

    def test_hit_increments_counter_in_redis(self) -> None:
        self.redis_client.exists.return_value = True
        self.redis_client.hincrby.return_value = 1

        assert self.dao.hit('abcde') == 1

        self.redis_client.hincrby.assert_called_once_with(LINK_KEY, 'hits', 1)
        # never a client-side read-modify-write
        self.redis_client.hset.assert_not_called()
        self.redis_client.hgetall.assert_not_called()

    def test_increment_with_delta(self) -> None:
        self.redis_client.exists.return_value = True
        self.redis_client.hincrby.return_value = 12

        assert self.dao.increment('abcde', field='hits', delta=5) == 12
        self.redis_client.hincrby.assert_called_once_with(LINK_KEY, 'hits', 5)

    def test_hit_short_url_which_does_not_exist(self) -> None:
        self.redis_client.exists.return_value = False

        with pytest.raises(ShortURLNotFoundError):
            self.dao.hit('zzzzz')
        self.redis_client.hincrby.assert_not_called()

    @pytest.mark.parametrize('field, delta', [('target', 1), ('shortcode', 1), ('hits', -1)])
    def test_increment_rejects_immutable_fields_and_negative_delta(self, field: str, delta: int) -> None:
        self.redis_client.exists.return_value = True

        with pytest.raises(ValueError):
            self.dao.increment('abcde', field=field, delta=delta)
        self.redis_client.hincrby.assert_not_called()

    def test_hit_with_redis_connection_error(self) -> None:
        self.redis_client.exists.side_effect = redis.exceptions.ConnectionError('Connection error')

        with pytest.raises(DataStoreError, match="Can't connect to Redis at redis.test:6379/0."):
            self.dao.hit('abcde')

    def test_hit_on_read_only_replica(self) -> None:
        self.redis_client.exists.return_value = True
        self.redis_client.hincrby.side_effect = redis.exceptions.ReadOnlyError(
            "You can't write against a read only replica."
        )

        with pytest.raises(DataStoreError, match=r'Redis request failed \(ReadOnlyError'):
            self.dao.hit('abcde')

    def test_insert_short_url_when_redis_is_out_of_memory(self) -> None:
        self.redis_client.execute.side_effect = redis.exceptions.OutOfMemoryError(
            "command not allowed when used memory > 'maxmemory'."
        )
        short_url = ShortURLModel(target='https://example.com/page', shortcode='abcde')

        with pytest.raises(DataStoreError, match=r'Redis request failed \(OutOfMemoryError'):
            self.dao.insert(short_url)
