import pytest
from fastapi.testclient import TestClient
from app.main import app
from app.tests.fixtures.search import *


@pytest.fixture(scope="function")
def client():
    """Fixture providing a TestClient for the CafeMap API."""
    with TestClient(app) as c:
        yield c
