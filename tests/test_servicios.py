def test_create_applies_defaults(client, admin_headers):
    resp = client.post("/api/servicios", json={}, headers=admin_headers)
    assert resp.status_code == 201
    data = resp.json()["data"]
    assert data["titulo"] == "Servicio sin título"
    assert data["descripcion"] == ""
    assert data["imagen_url"] == ""
    assert data["estado"] == "activo"
    assert data["categoria"] is None


def test_create_with_unknown_categoria(client, admin_headers):
    resp = client.post("/api/servicios", json={"titulo": "Sonido", "id_categoria": 77}, headers=admin_headers)
    assert resp.status_code == 400


def test_filtrar_and_lookups(client, admin_headers):
    cat = client.post("/api/categorias", json={"nombre": "Audio", "tipo": "servicio"}, headers=admin_headers).json()["data"]
    sub = client.post(
        "/api/subcategorias", json={"nombre": "Sonido en vivo", "id_categoria": cat["id"]}, headers=admin_headers
    ).json()["data"]
    con_cat = client.post(
        "/api/servicios",
        json={"titulo": "Sonido", "id_categoria": cat["id"], "id_subcategoria": sub["id"]},
        headers=admin_headers,
    ).json()["data"]
    sin_cat = client.post("/api/servicios", json={"titulo": "Catering"}, headers=admin_headers).json()["data"]
    client.patch(f"/api/servicios/{sin_cat['id']}/estado", json={"estado": "inactivo"}, headers=admin_headers)

    resp = client.get("/api/servicios/filtrar", params={"id_categoria": cat["id"]})
    assert [s["id"] for s in resp.json()["data"]] == [con_cat["id"]]
    assert resp.json()["data"][0]["subcategoria"]["nombre"] == "Sonido en vivo"

    resp = client.get("/api/servicios/filtrar", params={"id_categoria": "no-es-id", "estado": "INACTIVO"})
    assert [s["id"] for s in resp.json()["data"]] == [sin_cat["id"]]

    assert [s["id"] for s in client.get("/api/servicios/activos").json()["data"]] == [con_cat["id"]]
    assert len(client.get(f"/api/servicios/subcategoria/{sub['id']}").json()["data"]) == 1
    assert len(client.get(f"/api/servicios/categoria/{cat['id']}").json()["data"]) == 1


def test_update_keeps_required_fields(client, admin_headers):
    servicio = client.post("/api/servicios", json={"titulo": "Luces"}, headers=admin_headers).json()["data"]
    resp = client.patch(
        f"/api/servicios/{servicio['id']}", json={"titulo": None, "descripcion": "Iluminación"}, headers=admin_headers
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["titulo"] == "Luces"
    assert resp.json()["data"]["descripcion"] == "Iluminación"


def test_delete_then_not_found(client, admin_headers):
    servicio = client.post("/api/servicios", json={"titulo": "Escenario"}, headers=admin_headers).json()["data"]
    assert client.delete(f"/api/servicios/{servicio['id']}", headers=admin_headers).status_code == 204
    resp = client.get(f"/api/servicios/{servicio['id']}")
    assert resp.status_code == 404
    assert resp.json()["message"] == f"Servicio con ID {servicio['id']} no encontrado"
