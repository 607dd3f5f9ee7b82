import os

# Settings are read once at import time of earshop.main
os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGO_DB", "earshop_test")
os.environ.setdefault("TOKEN_SECRET", "test-secret")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from earshop.api.deps import mongo_db
from earshop.core.security import create_access_token
from earshop.main import app


@pytest.fixture
def db():
    return AsyncMongoMockClient()["earshop_test"]


@pytest.fixture
def client(db):
    app.dependency_overrides[mongo_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    token = create_access_token({"sub": "tester", "username": "tester"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def earphone_payload():
    return {
        "brandModel": "Sony WF 1000XM4",
        "type": "in-ear",
        "earbuds": "silicone",
        "bluetooth": "5.2",
        "price": 279.0,
        "stock": [{"store": "orchard", "qty": 4}, {"store": "jurong", "qty": 0}],
        "color": ["black", "silver"],
        "hours": {"music": 8, "cableCharging": 2, "boxCharging": 24},
        "dustWaterproof": True,
        "connectors": "usb-c",
        "image": "https://cdn.shop.io/img/wf-1000xm4.png",
    }


@pytest.fixture
def create_earphone(client, auth_headers, earphone_payload):
    def _create(**overrides):
        body = {**earphone_payload, **overrides}
        response = client.post("/add", json=body, headers=auth_headers)
        assert response.status_code == 201, response.text
        return response.json()["result"]
    return _create
