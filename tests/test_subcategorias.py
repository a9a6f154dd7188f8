def _categoria(client, headers, nombre="Danza"):
    resp = client.post("/api/categorias", json={"nombre": nombre, "tipo": "taller"}, headers=headers)
    return resp.json()["data"]["id"]


def _post_sub(client, headers, id_categoria, nombre="Salsa"):
    return client.post("/api/subcategorias", json={"nombre": nombre, "id_categoria": id_categoria}, headers=headers)


def test_create_requires_existing_active_parent(client, admin_headers):
    assert _post_sub(client, admin_headers, 999).status_code == 400

    cat_id = _categoria(client, admin_headers)
    client.patch(f"/api/categorias/{cat_id}/desactivar", headers=admin_headers)
    resp = _post_sub(client, admin_headers, cat_id)
    assert resp.status_code == 400
    assert "inactiva" in resp.json()["message"]


def test_name_unique_within_parent(client, admin_headers):
    danza = _categoria(client, admin_headers, "Danza")
    musica = _categoria(client, admin_headers, "Música")
    assert _post_sub(client, admin_headers, danza, "Básico").status_code == 201
    assert _post_sub(client, admin_headers, danza, "Básico").status_code == 409
    assert _post_sub(client, admin_headers, musica, "Básico").status_code == 201


def test_listar_por_categoria_missing_category(client):
    assert client.get("/api/subcategorias/categoria/42").status_code == 404
    assert client.get("/api/subcategorias/categoria/x1").status_code == 400


def test_bulk_estado_por_categoria(client, admin_headers):
    cat_id = _categoria(client, admin_headers)
    for nombre in ("A", "B"):
        _post_sub(client, admin_headers, cat_id, nombre)

    resp = client.patch(f"/api/subcategorias/categoria/{cat_id}/desactivar", headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["count"] == 2
    assert client.get("/api/subcategorias/activos").json()["data"] == []

    resp = client.patch(f"/api/subcategorias/categoria/{cat_id}/activar", headers=admin_headers)
    assert resp.json()["data"] == {"message": "2 subcategorías activadas", "count": 2}


def test_cambiar_estado(client, admin_headers):
    cat_id = _categoria(client, admin_headers)
    sub_id = _post_sub(client, admin_headers, cat_id).json()["data"]["id"]

    resp = client.patch(f"/api/subcategorias/{sub_id}/estado", json={"estado": "inactivo"}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["message"] == "Estado cambiado exitosamente"
    assert resp.json()["data"]["estado"] == "inactivo"

    resp = client.patch(f"/api/subcategorias/{sub_id}/estado", json={"estado": "archivado"}, headers=admin_headers)
    assert resp.status_code == 400


def test_response_includes_parent(client, admin_headers):
    cat_id = _categoria(client, admin_headers, "Teatro")
    sub_id = _post_sub(client, admin_headers, cat_id, "Clown").json()["data"]["id"]
    data = client.get(f"/api/subcategorias/{sub_id}").json()["data"]
    assert data["categoria"]["nombre"] == "Teatro"
