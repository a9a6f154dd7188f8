from datetime import datetime, timedelta


def _refs(client, headers):
    cat = client.post("/api/categorias", json={"nombre": "Danza", "tipo": "taller"}, headers=headers).json()["data"]
    sub = client.post(
        "/api/subcategorias", json={"nombre": "Salsa", "id_categoria": cat["id"]}, headers=headers
    ).json()["data"]
    prof = client.post(
        "/api/profesores", json={"nombre": "Rosa Pérez", "especialidad": "Salsa"}, headers=headers
    ).json()["data"]
    return cat["id"], sub["id"], prof["id"]


def _payload(refs, inicio=None, dias=2, cupo=10, **extra):
    cat_id, sub_id, prof_id = refs
    inicio = inicio or datetime(2030, 5, 1, 10, 0)
    data = {
        "nombre": "Salsa inicial",
        "id_categoria": cat_id,
        "id_subcategoria": sub_id,
        "id_profesor": prof_id,
        "fecha_inicio": inicio.isoformat(),
        "fecha_fin": (inicio + timedelta(days=dias)).isoformat(),
        "cupo_total": cupo,
    }
    data.update(extra)
    return data


def _crear(client, headers, payload):
    resp = client.post("/api/talleres", json=payload, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def test_create_starts_with_full_capacity(client, admin_headers):
    refs = _refs(client, admin_headers)
    taller = _crear(client, admin_headers, _payload(refs, cupo=15))
    assert taller["cupo_total"] == 15
    assert taller["cupo_disponible"] == 15
    assert taller["profesor"]["nombre"] == "Rosa Pérez"
    assert taller["subcategoria"]["nombre"] == "Salsa"


def test_end_before_start_rejected(client, admin_headers):
    refs = _refs(client, admin_headers)
    resp = client.post("/api/talleres", json=_payload(refs, dias=0), headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "La fecha de fin debe ser posterior a la fecha de inicio"

    resp = client.post("/api/talleres", json=_payload(refs, dias=-1), headers=admin_headers)
    assert resp.status_code == 400


def test_missing_reference_rejected(client, admin_headers):
    refs = _refs(client, admin_headers)
    resp = client.post("/api/talleres", json=_payload(refs, id_profesor=999), headers=admin_headers)
    assert resp.status_code == 400
    assert "profesor" in resp.json()["message"]


def test_actualizar_cupo_bounds(client, admin_headers):
    refs = _refs(client, admin_headers)
    taller = _crear(client, admin_headers, _payload(refs, cupo=5))
    url = f"/api/talleres/{taller['id']}/cupo"

    resp = client.patch(url, json={"cupos_reservados": 3}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json()["data"]["cupo_disponible"] == 2

    resp = client.patch(url, json={"cupos_reservados": 3}, headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["message"] == "No hay cupos disponibles suficientes"

    resp = client.patch(url, json={"cupos_reservados": -4}, headers=admin_headers)
    assert resp.status_code == 400

    resp = client.patch(url, json={"cupos_reservados": -3}, headers=admin_headers)
    assert resp.json()["data"]["cupo_disponible"] == 5

    assert client.get(f"/api/talleres/{taller['id']}").json()["data"]["cupo_disponible"] == 5


def test_update_cupo_total_shifts_available(client, admin_headers):
    refs = _refs(client, admin_headers)
    taller = _crear(client, admin_headers, _payload(refs, cupo=10))
    client.patch(f"/api/talleres/{taller['id']}/cupo", json={"cupos_reservados": 4}, headers=admin_headers)

    resp = client.patch(f"/api/talleres/{taller['id']}", json={"cupo_total": 12}, headers=admin_headers)
    assert resp.json()["data"]["cupo_disponible"] == 8

    resp = client.patch(f"/api/talleres/{taller['id']}", json={"cupo_total": 2}, headers=admin_headers)
    assert resp.json()["data"]["cupo_total"] == 2
    assert resp.json()["data"]["cupo_disponible"] == 0


def test_update_rechecks_dates_against_stored_values(client, admin_headers):
    refs = _refs(client, admin_headers)
    taller = _crear(client, admin_headers, _payload(refs, inicio=datetime(2030, 5, 1, 10, 0)))
    resp = client.patch(
        f"/api/talleres/{taller['id']}",
        json={"fecha_fin": "2030-04-30T10:00:00"},
        headers=admin_headers,
    )
    assert resp.status_code == 400


def test_proximos_only_active_soon_with_capacity(client, admin_headers):
    refs = _refs(client, admin_headers)
    pronto = datetime.utcnow() + timedelta(days=2)
    visible = _crear(client, admin_headers, _payload(refs, inicio=pronto, nombre="Pronto"))
    lleno = _crear(client, admin_headers, _payload(refs, inicio=pronto, nombre="Lleno", cupo=1))
    client.patch(f"/api/talleres/{lleno['id']}/cupo", json={"cupos_reservados": 1}, headers=admin_headers)
    _crear(client, admin_headers, _payload(refs, inicio=pronto + timedelta(days=30), nombre="Lejano"))
    inactivo = _crear(client, admin_headers, _payload(refs, inicio=pronto, nombre="Inactivo"))
    client.patch(f"/api/talleres/{inactivo['id']}/estado", json={"estado": "inactivo"}, headers=admin_headers)

    ids = [t["id"] for t in client.get("/api/talleres/proximos").json()["data"]]
    assert ids == [visible["id"]]


def test_filtrar_ignores_malformed_values(client, admin_headers):
    refs = _refs(client, admin_headers)
    taller = _crear(client, admin_headers, _payload(refs))

    resp = client.get("/api/talleres/filtrar", params={"id_categoria": "xyz", "estado": "raro"})
    assert [t["id"] for t in resp.json()["data"]] == [taller["id"]]

    resp = client.get("/api/talleres/filtrar", params={"fecha_inicio": "2031-01-01"})
    assert resp.json()["data"] == []

    resp = client.get("/api/talleres/filtrar", params={"id_subcategoria": refs[1], "estado": "ACTIVO"})
    assert len(resp.json()["data"]) == 1


def test_por_profesor_ordered_by_start(client, admin_headers):
    refs = _refs(client, admin_headers)
    tarde = _crear(client, admin_headers, _payload(refs, inicio=datetime(2030, 9, 1), nombre="Tarde"))
    temprano = _crear(client, admin_headers, _payload(refs, inicio=datetime(2030, 1, 1), nombre="Temprano"))
    ids = [t["id"] for t in client.get(f"/api/talleres/profesor/{refs[2]}").json()["data"]]
    assert ids == [temprano["id"], tarde["id"]]
    assert client.get("/api/talleres/profesor/abc").status_code == 400


def test_profesor_delete_blocked_by_talleres(client, admin_headers):
    refs = _refs(client, admin_headers)
    taller = _crear(client, admin_headers, _payload(refs))
    assert client.delete(f"/api/profesores/{refs[2]}", headers=admin_headers).status_code == 400
    assert client.delete(f"/api/subcategorias/{refs[1]}", headers=admin_headers).status_code == 400
    resp = client.delete(f"/api/talleres/{taller['id']}", headers=admin_headers)
    assert resp.status_code == 200
    eliminado = resp.json()["data"]
    assert eliminado["id"] == taller["id"]
    assert eliminado["profesor"]["id"] == refs[2]
    assert eliminado["subcategoria"]["id"] == refs[1]
    assert client.delete(f"/api/profesores/{refs[2]}", headers=admin_headers).status_code == 200
