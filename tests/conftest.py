import pytest
from fastapi.testclient import TestClient

from hookguide.main import app


@pytest.fixture
def client():
    """Create test client."""
    with TestClient(app) as test_client:
        yield test_client
