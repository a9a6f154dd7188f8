import os

# settings are read at import time
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["MAIL_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient

from amaru_api.database import Base, SessionLocal, engine
from amaru_api.main import app
from amaru_api.services.auth_service import seed_roles


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        seed_roles(session)
    finally:
        session.close()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_headers(client):
    resp = client.post(
        "/api/auth/register",
        json={"email": "admin@amaru.pe", "password": "adminpass123", "nombre": "Admin", "apellido": "Amaru"},
    )
    assert resp.status_code == 201, resp.text
    login = client.post("/api/auth/login", json={"email": "admin@amaru.pe", "password": "adminpass123"})
    assert login.status_code == 200, login.text
    token = login.json()["data"]["access_token"]
    return {"Authorization": f"Bearer {token}"}
