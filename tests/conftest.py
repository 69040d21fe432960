# tests/conftest.py

import pytest

from lingotouch.app import create_app
from lingotouch.config import TestingConfig


@pytest.fixture
def app(tmp_path):
    class Config(TestingConfig):
        AUDIO_DIR = str(tmp_path / 'audio')

    return create_app(Config)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def devices(app):
    return app.extensions['lingotouch']
