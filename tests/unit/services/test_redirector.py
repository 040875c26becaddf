from http import HTTPStatus
from unittest.mock import MagicMock

import pytest

from urlshortener.models import ShortURLModel
from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.memory import ShortURLMemoryDAO
from urlshortener.dao.exceptions import DataStoreError, ShortURLNotFoundError
from urlshortener.exceptions import InvalidInputError
from urlshortener.services import URLRedirector, Redirect
from urlshortener.utils.config import ServiceConfig


class TestURLRedirector:
    def test_redirect(self, service_config: ServiceConfig, memory_dao: ShortURLMemoryDAO) -> None:
        memory_dao.insert(ShortURLModel(target='https://example.com/page', shortcode='abcde'))

        redirect = URLRedirector(service_config, memory_dao).redirect('abcde')

        assert redirect == Redirect(location='https://example.com/page', hits=1, status=HTTPStatus.PERMANENT_REDIRECT)
        assert redirect.status == 308
        assert memory_dao.get('abcde').hits == 1

    def test_redirect_missing_shortcode(self, service_config: ServiceConfig, memory_dao: ShortURLMemoryDAO) -> None:
        with pytest.raises(ShortURLNotFoundError):
            URLRedirector(service_config, memory_dao).redirect('zzzzz')
        assert memory_dao.records == {}

    @pytest.mark.parametrize('shortcode', [None, '', 12345])
    def test_redirect_invalid_shortcode(self, shortcode, service_config: ServiceConfig) -> None:
        dao = MagicMock(spec=ShortURLBaseDAO)

        with pytest.raises(InvalidInputError):
            URLRedirector(service_config, dao).redirect(shortcode)

        dao.get.assert_not_called()
        dao.hit.assert_not_called()

    def test_redirect_uses_store_side_increment(self, service_config: ServiceConfig) -> None:
        dao = MagicMock(spec=ShortURLBaseDAO)
        dao.get.return_value = ShortURLModel(target='https://example.com/page', shortcode='abcde', hits=41)
        dao.hit.return_value = 42

        redirect = URLRedirector(service_config, dao).redirect('abcde')

        assert redirect.hits == 42
        dao.hit.assert_called_once_with('abcde')
        dao.insert.assert_not_called()

    def test_redirect_store_unavailable(self, service_config: ServiceConfig) -> None:
        dao = MagicMock(spec=ShortURLBaseDAO)
        dao.get.side_effect = DataStoreError('down')

        with pytest.raises(DataStoreError):
            URLRedirector(service_config, dao).redirect('abcde')
        dao.hit.assert_not_called()
