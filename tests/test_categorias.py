from amaru_api.database import SessionLocal
from amaru_api.models.subcategoria import Subcategoria


def _crear_categoria(client, headers, nombre="Danza", tipo="taller"):
    resp = client.post("/api/categorias", json={"nombre": nombre, "tipo": tipo}, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def _crear_subcategoria(client, headers, id_categoria, nombre):
    resp = client.post(
        "/api/subcategorias",
        json={"nombre": nombre, "id_categoria": id_categoria},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_create_categoria_wraps_response(client, admin_headers):
    resp = client.post("/api/categorias", json={"nombre": "Música", "tipo": "taller"}, headers=admin_headers)
    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Creado exitosamente"
    assert body["timestamp"]
    assert body["data"]["nombre"] == "Música"
    assert body["data"]["estado"] == "activo"


def test_duplicate_name_conflicts(client, admin_headers):
    _crear_categoria(client, admin_headers, "Teatro")
    resp = client.post("/api/categorias", json={"nombre": "Teatro", "tipo": "servicio"}, headers=admin_headers)
    assert resp.status_code == 409
    body = resp.json()
    assert body["success"] is False
    assert body["status_code"] == 409
    assert body["error"] == "Conflict"
    assert "Teatro" in body["message"]


def test_invalid_tipo_is_bad_request(client, admin_headers):
    resp = client.post("/api/categorias", json={"nombre": "X", "tipo": "concierto"}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["error"] == "BadRequest"


def test_mutations_require_admin(client):
    resp = client.post("/api/categorias", json={"nombre": "Danza", "tipo": "taller"})
    assert resp.status_code in (401, 403)


def test_desactivar_cascades_to_subcategorias(client, admin_headers):
    categoria = _crear_categoria(client, admin_headers)
    for nombre in ("Salsa", "Tango", "Marinera"):
        _crear_subcategoria(client, admin_headers, categoria["id"], nombre)

    resp = client.patch(f"/api/categorias/{categoria['id']}/desactivar", headers=admin_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Desactivado exitosamente"
    assert body["data"]["categoria"]["estado"] == "inactivo"
    assert body["data"]["subcategorias_actualizadas"] == 3

    session = SessionLocal()
    try:
        estados = {s.estado for s in session.query(Subcategoria).filter(Subcategoria.id_categoria == categoria["id"])}
    finally:
        session.close()
    assert estados == {"inactivo"}

    resp = client.patch(f"/api/categorias/{categoria['id']}/activar", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Activado exitosamente"
    subs = client.get(f"/api/subcategorias/categoria/{categoria['id']}").json()["data"]
    assert [s["estado"] for s in subs] == ["activo"] * 3


def test_listar_por_tipo_only_active(client, admin_headers):
    activa = _crear_categoria(client, admin_headers, "Pintura", "taller")
    inactiva = _crear_categoria(client, admin_headers, "Escultura", "taller")
    _crear_categoria(client, admin_headers, "Sonido", "servicio")
    client.patch(f"/api/categorias/{inactiva['id']}/desactivar", headers=admin_headers)

    resp = client.get("/api/categorias/tipo/taller")
    assert resp.status_code == 200
    assert [c["id"] for c in resp.json()["data"]] == [activa["id"]]

    assert client.get("/api/categorias/tipo/otro").status_code == 400


def test_listar_por_estado(client, admin_headers):
    cat = _crear_categoria(client, admin_headers)
    client.patch(f"/api/categorias/{cat['id']}/desactivar", headers=admin_headers)
    assert [c["id"] for c in client.get("/api/categorias/estado/inactivo").json()["data"]] == [cat["id"]]
    assert client.get("/api/categorias/activos").json()["data"] == []
    assert client.get("/api/categorias/estado/borrado").status_code == 400


def test_get_malformed_and_missing_ids(client):
    resp = client.get("/api/categorias/abc")
    assert resp.status_code == 400
    assert resp.json()["message"] == "ID abc no es válido"

    resp = client.get("/api/categorias/999")
    assert resp.status_code == 404
    assert resp.json()["message"] == "Categoría con ID 999 no encontrada"


def test_update_rechecks_uniqueness(client, admin_headers):
    _crear_categoria(client, admin_headers, "Danza")
    otra = _crear_categoria(client, admin_headers, "Canto")
    resp = client.patch(f"/api/categorias/{otra['id']}", json={"nombre": "Danza"}, headers=admin_headers)
    assert resp.status_code == 409

    resp = client.patch(f"/api/categorias/{otra['id']}", json={"descripcion": "Coro"}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Actualizado exitosamente"
    assert resp.json()["data"]["descripcion"] == "Coro"
    assert resp.json()["data"]["nombre"] == "Canto"


def test_delete_blocked_by_subcategorias(client, admin_headers):
    cat = _crear_categoria(client, admin_headers)
    sub = _crear_subcategoria(client, admin_headers, cat["id"], "Salsa")

    resp = client.delete(f"/api/categorias/{cat['id']}", headers=admin_headers)
    assert resp.status_code == 400

    assert client.delete(f"/api/subcategorias/{sub['id']}", headers=admin_headers).status_code == 200
    resp = client.delete(f"/api/categorias/{cat['id']}", headers=admin_headers)
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get(f"/api/categorias/{cat['id']}").status_code == 404


def test_rango_fechas(client, admin_headers):
    cat = _crear_categoria(client, admin_headers)
    resp = client.get("/api/categorias/rango-fechas", params={"desde": "2000-01-01T00:00:00", "hasta": "2100-01-01T00:00:00"})
    assert resp.status_code == 200
    assert [c["id"] for c in resp.json()["data"]] == [cat["id"]]

    resp = client.get("/api/categorias/rango-fechas", params={"desde": "2100-01-01T00:00:00", "hasta": "2000-01-01T00:00:00"})
    assert resp.status_code == 400

    # one bound with an offset and one without
    resp = client.get("/api/categorias/rango-fechas", params={"desde": "2000-01-01T00:00:00Z", "hasta": "2100-01-01T00:00:00"})
    assert resp.status_code == 200
    assert [c["id"] for c in resp.json()["data"]] == [cat["id"]]

    resp = client.get("/api/categorias/rango-fechas", params={"desde": "2100-01-01T00:00:00", "hasta": "2000-01-01T00:00:00-05:00"})
    assert resp.status_code == 400


def test_out_of_range_id_is_bad_request(client):
    resp = client.get("/api/categorias/99999999999999999999")
    assert resp.status_code == 400
    assert resp.json()["success"] is False
