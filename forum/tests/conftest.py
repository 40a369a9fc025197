from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator

os.environ.setdefault("ENABLE_RATE_LIMIT", "0")
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "forum-tests.log"))

import pytest
from flask import Flask
from flask.testing import FlaskClient

from forum.app import create_app
from forum.infrastructure.container import Container
from forum.shared.config import AppConfig, DatabaseConfig, SessionConfig, load_config
from forum.tests.support import FakeClock

load_config.cache_clear()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def container(clock: FakeClock) -> Iterator[Container]:
    config = AppConfig(
        database=DatabaseConfig(url="sqlite://"),
        session=SessionConfig(cookie_name="session_id", lifetime=7200, sweep_interval=0),
    )
    built = Container(config, clock=clock)
    yield built
    built.engine.dispose()


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client
