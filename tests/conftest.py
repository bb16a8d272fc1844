"""
Pytest configuration and shared fixtures for the converter service tests.
"""

import os
import sys
import tempfile
import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app
os.environ.setdefault("FLASK_SECRET_KEY", "test-secret-key")
os.environ.setdefault("SITE_BASE_URL", "https://example.test")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "engcalc-test-logs"))
os.environ.pop("SENTRY_DSN", None)


@pytest.fixture
def pressure():
    from unit_tables import CONVERTER_REGISTRY
    return CONVERTER_REGISTRY.get_category("pressure")


@pytest.fixture
def temperature():
    from unit_tables import CONVERTER_REGISTRY
    return CONVERTER_REGISTRY.get_category("temperature")


@pytest.fixture
def calculator_flow():
    from unit_tables import CALCULATOR_REGISTRY
    return CALCULATOR_REGISTRY.get_category("flow")


@pytest.fixture
def app_client():
    """Flask test client for the converter API."""
    from app import app as _app
    _app.config['TESTING'] = True
    _app.config['SITE_BASE_URL'] = 'https://example.test'
    with _app.test_client() as client:
        yield client
