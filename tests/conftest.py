"""
Pytest configuration and shared fixtures for the calculator tests.
"""

import os
from unittest.mock import patch

import pytest

from fincalc import create_app
from fincalc.config import reset_global_settings


@pytest.fixture(scope="function")
def app():
    """Create an application configured for testing."""
    reset_global_settings()
    with patch.dict(
        os.environ,
        {"SECRET_KEY": "test-secret-key-123", "APP_ENV": "testing"},
        clear=True,
    ):
        yield create_app()
    reset_global_settings()


@pytest.fixture(scope="function")
def client(app):
    """Create a test client for the application."""
    return app.test_client()
