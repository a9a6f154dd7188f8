def test_first_admin_registers_then_registration_is_closed(client, admin_headers):
    payload = {"email": "otro@amaru.pe", "password": "password123", "nombre": "Otro"}
    assert client.post("/api/auth/register", json=payload).status_code == 401

    resp = client.post("/api/auth/register", json=payload, headers=admin_headers)
    assert resp.status_code == 201
    assert resp.json()["data"]["rol"]["nombre"] == "admin"


def test_admin_login_wrong_password(client, admin_headers):
    resp = client.post("/api/auth/login", json={"email": "admin@amaru.pe", "password": "incorrecta"})
    assert resp.status_code == 401
    assert resp.json()["success"] is False


def test_me_returns_admin_profile(client, admin_headers):
    resp = client.get("/api/auth/me", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["email"] == "admin@amaru.pe"


def test_invalid_token_rejected(client):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401


def test_sin_password_register_and_login(client):
    payload = {"nombre": "Ana", "apellido": "Quispe", "dni": "12345678", "email": "ana@example.com"}
    resp = client.post("/api/auth/register-sin-password", json=payload)
    assert resp.status_code == 201
    assert resp.json()["data"]["rol"]["nombre"] == "user"

    dup_email = dict(payload, dni="00000000")
    assert client.post("/api/auth/register-sin-password", json=dup_email).status_code == 409
    dup_dni = dict(payload, email="otra@example.com")
    assert client.post("/api/auth/register-sin-password", json=dup_dni).status_code == 409

    login = client.post("/api/auth/login-sin-password", json={"email": "ana@example.com"})
    assert login.status_code == 200
    body = login.json()["data"]
    assert body["tipo"] == "sin_password"
    assert body["user"]["dni"] == "12345678"

    assert client.post("/api/auth/login-sin-password", json={"email": "nadie@example.com"}).status_code == 401


def test_sin_password_token_cannot_mutate_catalog(client):
    client.post(
        "/api/auth/register-sin-password",
        json={"nombre": "Ana", "apellido": "Quispe", "dni": "12345678", "email": "ana@example.com"},
    )
    token = client.post("/api/auth/login-sin-password", json={"email": "ana@example.com"}).json()["data"]["access_token"]
    headers = {"Authorization": f"Bearer {token}"}

    assert client.get("/api/auth/me", headers=headers).json()["data"]["email"] == "ana@example.com"
    resp = client.post("/api/categorias", json={"nombre": "Danza", "tipo": "taller"}, headers=headers)
    assert resp.status_code == 403


def test_listar_usuarios_sin_password(client, admin_headers):
    client.post(
        "/api/auth/register-sin-password",
        json={"nombre": "Ana", "apellido": "Quispe", "dni": "12345678", "email": "ana@example.com"},
    )
    resp = client.get("/api/auth/usuarios-sin-password", headers=admin_headers)
    assert [u["email"] for u in resp.json()["data"]] == ["ana@example.com"]
    assert len(client.get("/api/auth/usuarios-sin-password/activos", headers=admin_headers).json()["data"]) == 1
