"""Shared pytest fixtures."""

from __future__ import annotations

import time

import pytest

from app import create_app
from config import PROJECT_ROOT, load_watch_config

FIXTURE_DIR = PROJECT_ROOT / 'data' / 'visualpasses'
TEMPLATE_PATH = PROJECT_ROOT / 'templates' / 'satellite-passes.html'


@pytest.fixture
def utc_timezone(monkeypatch):
    """Run the test with the process timezone set to UTC."""
    if not hasattr(time, 'tzset'):
        pytest.skip('time.tzset() not available on this platform')
    monkeypatch.setenv('TZ', 'UTC')
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def watch_config():
    """Offline configuration backed by the bundled fixtures."""
    return load_watch_config(
        offline=True,
        fixture_dir=FIXTURE_DIR,
        template_path=TEMPLATE_PATH,
        satellite_ids=[25544, 48274, 20580],
    )


@pytest.fixture
def app(watch_config):
    """Create application for testing."""
    flask_app = create_app(watch_config)
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()
