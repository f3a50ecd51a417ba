# tests/conftest.py
import os
import tempfile

# Logging and config are built on import of the app, so the environment
# must be settled first.
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="health-server-logs-")
os.environ.pop("SERVICE_REGION", None)

import pytest
from fastapi.testclient import TestClient

from app.config import reset_app_config
from app.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fresh_config():
    """Rebuild the app config from the (monkeypatched) environment."""
    reset_app_config()
    yield
    reset_app_config()
