import pytest
from fastapi.testclient import TestClient

import main as app_main


@pytest.fixture()
def client():
    with TestClient(app_main.app) as test_client:
        yield test_client
