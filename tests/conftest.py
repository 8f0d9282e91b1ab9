from collections.abc import AsyncGenerator, Generator
from importlib import import_module, reload
from os import environ
from pathlib import Path
from types import ModuleType

import pytest
from asgi_lifespan import LifespanManager
from faker import Faker
from fastapi import FastAPI
from pytest_httpserver import HTTPServer

from crypto_portfolio_tracker.config.configuration_properties import ConfigurationProperties
from crypto_portfolio_tracker.config.dependencies import get_application_container

main_module: ModuleType | None = None


@pytest.fixture(scope="session", autouse=True)
def faker() -> Faker:
    return Faker()


@pytest.fixture(scope="session", autouse=True)
def defaults_env() -> Generator[None]:
    # Background jobs are started on demand by the polling task manager
    environ["BACKGROUND_TASKS_ENABLED"] = "false"
    environ["POLLING_INTERVAL_SECONDS"] = "1"
    environ["HTTP_TIMEOUT_SECONDS"] = "5"
    yield


@pytest.fixture(scope="session")
def httpserver_test_env() -> Generator[HTTPServer]:
    with HTTPServer() as httpserver:
        environ["API_BASE_URL"] = httpserver.url_for(suffix="/api")
        yield httpserver


@pytest.fixture(autouse=True)
def session_storage_path_env(tmp_path: Path) -> Generator[Path]:
    session_storage_path = tmp_path / "session.json"
    environ["SESSION_STORAGE_PATH"] = str(session_storage_path)
    yield session_storage_path
    get_application_container().reset_singletons()


@pytest.fixture
def configuration_properties(httpserver_test_env: HTTPServer) -> ConfigurationProperties:
    return ConfigurationProperties()


@pytest.fixture
async def integration_test_env(httpserver_test_env: HTTPServer) -> AsyncGenerator[tuple[FastAPI, HTTPServer]]:
    global main_module
    if main_module:
        main_module = reload(main_module)
    else:
        main_module = import_module("crypto_portfolio_tracker.main")
    async with LifespanManager(main_module.app) as manager:
        yield (manager.app, httpserver_test_env)
    # Cleanup
    _cleanup(httpserver_test_env)


def _cleanup(httpserver: HTTPServer) -> None:
    get_application_container().reset_singletons()
    httpserver.clear()
