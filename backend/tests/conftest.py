import pytest
from fastapi.testclient import TestClient

from main import create_app
from pcm.config import Settings
from pcm.database import JsonStore


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path, cors_origins=["*"])


@pytest.fixture
def store(settings):
    return JsonStore.open(settings)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def login(client, email, senha):
    response = client.post("/api/auth/login", json={"email": email, "senha": senha})
    assert response.status_code == 200, response.text
    return response.json()["token"]


@pytest.fixture
def admin_headers(client):
    return {"Authorization": login(client, "admin@goinn.com", "admin123")}


@pytest.fixture
def user_headers(client):
    return {"Authorization": login(client, "user@goinn.com", "user123")}
