import pytest

from urlshortener.constants import Backend
from urlshortener.dao.memory import ShortURLMemoryDAO
from urlshortener.utils.config import ServiceConfig


@pytest.fixture
def memory_dao() -> ShortURLMemoryDAO:
    return ShortURLMemoryDAO(memory_records={})


@pytest.fixture
def service_config() -> ServiceConfig:
    return ServiceConfig(backend=Backend.MEMORY, base_url='https://sho.rt')
