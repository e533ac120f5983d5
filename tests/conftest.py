"""Shared test fixtures for Dungeon."""

import pytest

from dungeon.app import create_app
from dungeon.config import Config
from dungeon.engine.content import build_world
from dungeon.engine.world import World


@pytest.fixture
def world() -> World:
    return build_world()


@pytest.fixture
def test_config() -> Config:
    return Config(log_level="DEBUG")


@pytest.fixture
def app(test_config: Config):
    return create_app(test_config)


@pytest.fixture
def client(app):
    from xitzin.testing import test_app

    with test_app(app) as client:
        yield client


@pytest.fixture
def auth_client(client):
    return client.with_certificate("test-fingerprint-abc123")
