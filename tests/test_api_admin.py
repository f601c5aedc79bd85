from encuesta_mercado.services.normalizer import local_now


def _seed(client):
    for seguridad, problemas, calificacion in [
        ("sí", "robo, iluminacion", "5"),
        ("no", "", "3"),
        ("sí", "robo", "4"),
        ("regular", "", ""),
    ]:
        r = client.post("/api/respuestas", json={
            "nombre": "Comerciante",
            "puesto": "A-1",
            "seguridad": seguridad,
            "problemas": problemas,
            "calificacion": calificacion,
        })
        assert r.status_code == 201


def test_admin_routes_require_token(client):
    assert client.get("/api/admin/estadisticas").status_code == 401
    assert client.get("/api/admin/exportar.csv").status_code == 401
    assert client.delete("/api/admin/respuestas").status_code == 401


def test_invalid_token_rejected(client):
    r = client.get("/api/admin/estadisticas", headers={"Authorization": "Bearer basura"})
    assert r.status_code == 401


def test_statistics(client, auth_headers):
    _seed(client)
    r = client.get("/api/admin/estadisticas", headers=auth_headers)
    assert r.status_code == 200
    data = r.json()

    assert data["total"] == 4
    # (5 + 3 + 4 + 0) / 4
    assert data["promedio_calificacion"] == 3.0
    assert data["seguridad"] == {"sí": 2, "no": 1, "regular": 1}
    assert data["seguridad_porcentajes"] == {"sí": 50.0, "no": 25.0, "regular": 25.0}
    assert data["problemas"] == {"robo": 2, "iluminacion": 1}
    assert data["problemas_reportados"] == 2
    assert data["top_problemas"][0] == {"problema": "robo", "etiqueta": "🔓 Robos/hurtos", "reportes": 2}


def test_statistics_empty(client, auth_headers):
    data = client.get("/api/admin/estadisticas", headers=auth_headers).json()
    assert data["total"] == 0
    assert data["promedio_calificacion"] == 0
    assert data["top_problemas"] == []


def test_export_empty_is_warning(client, auth_headers):
    r = client.get("/api/admin/exportar.csv", headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["tipo"] == "warning"
    assert "content-disposition" not in r.headers


def test_export_csv(client, auth_headers):
    _seed(client)
    r = client.get("/api/admin/exportar.csv", headers=auth_headers)
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    expected = f"encuestas-seguridad-mercado-{local_now().date().isoformat()}.csv"
    assert expected in r.headers["content-disposition"]

    lines = r.content.decode("utf-8").splitlines()
    assert lines[0].startswith("ID,Fecha,Hora")
    assert len(lines) == 5
    rows = lines[1:]
    assert sum('"robo; iluminacion"' in row for row in rows) == 1
    assert sum(row.endswith('"Ninguno","Ninguna"') for row in rows) == 2


def test_export_xlsx(client, auth_headers):
    _seed(client)
    r = client.get("/api/admin/exportar.xlsx", headers=auth_headers)
    assert r.status_code == 200
    assert "spreadsheetml" in r.headers["content-type"]
    assert r.content[:2] == b"PK"


def test_clear_on_server_is_not_implemented(client, auth_headers):
    _seed(client)
    r = client.delete("/api/admin/respuestas", headers=auth_headers)
    assert r.status_code == 501
    assert r.json()["error"] == "Eliminación no disponible"

    assert len(client.get("/api/respuestas").json()) == 4
