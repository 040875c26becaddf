import pytest
from pytest import MonkeyPatch

from urlshortener.constants import Backend
from urlshortener.dao.memory import ShortURLMemoryDAO
from urlshortener.utils.config import ServiceConfig


@pytest.fixture(autouse=True)
def deployed_environment(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv('APP_ENV', 'prod')
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)


@pytest.fixture
def service_config() -> ServiceConfig:
    return ServiceConfig(backend=Backend.MEMORY, base_url='https://sho.rt')


@pytest.fixture
def memory_dao() -> ShortURLMemoryDAO:
    return ShortURLMemoryDAO(memory_records={})
