import pytest
from pytest import MonkeyPatch

from urlshortener.utils.runtime import running_locally


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.delenv('APP_ENV', raising=False)
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)


@pytest.mark.parametrize('app_env', ['local', 'LOCAL'])
def test_running_locally_app_env(monkeypatch: MonkeyPatch, app_env: str) -> None:
    monkeypatch.setenv('APP_ENV', app_env)
    assert running_locally()


def test_running_locally_sam(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv('APP_ENV', 'dev')
    monkeypatch.setenv('AWS_SAM_LOCAL', 'true')
    assert running_locally()


@pytest.mark.parametrize('app_env', ['dev', 'prod'])
def test_not_running_locally(monkeypatch: MonkeyPatch, app_env: str) -> None:
    monkeypatch.setenv('APP_ENV', app_env)
    assert not running_locally()


def test_not_running_locally_without_environment() -> None:
    assert not running_locally()
