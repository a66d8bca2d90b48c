import pytest

from jurnal_ramadhan.app import create_app
from jurnal_ramadhan.config import TestingConfig


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def guru_client(client):
    resp = client.post("/login/guru", json={"username": "guru", "password": "admin123"})
    assert resp.status_code == 200
    return client
