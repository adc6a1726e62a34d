from datetime import datetime


def test_error_body_shape(client, auth_headers):
    r = client.get("/api/works/424242", headers=auth_headers)
    assert r.status_code == 404
    body = r.json()
    assert set(body) == {"timestamp", "status", "error", "message", "path"}
    assert body["status"] == 404
    assert body["error"] == "Not Found"
    assert body["message"] == "Work not found"
    assert body["path"] == "/api/works/424242"
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


def test_validation_body_has_field_map(client):
    r = client.post("/api/auth/register", json={"username": "al", "email": "not-an-email", "password": "x"})
    assert r.status_code == 400
    body = r.json()
    assert body["error"] == "Bad Request"
    assert body["message"] == "Validation failed"
    assert {"username", "email", "password"} <= set(body["errors"])


def test_malformed_json_is_400(client):
    r = client.post(
        "/api/auth/login",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400


def test_unauthenticated_sets_www_authenticate(client):
    r = client.get("/api/works")
    assert r.status_code == 401
    assert r.headers.get("www-authenticate") == "Bearer"
    assert r.json()["error"] == "Unauthorized"


def test_non_integer_path_id_is_400(client, auth_headers):
    assert client.get("/api/works/abc", headers=auth_headers).status_code == 400


def test_unknown_route_uses_error_shape(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert r.json()["path"] == "/api/nope"


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_id_beyond_integer_range_is_404(client, auth_headers):
    huge = "99999999999999999999"
    r = client.get(f"/api/works/{huge}", headers=auth_headers)
    assert r.status_code == 404
    assert r.json()["message"] == "Work not found"
    r = client.get(f"/api/sessions?workId={huge}", headers=auth_headers)
    assert r.status_code == 404
    assert client.get(f"/api/reviews/{huge}", headers=auth_headers).status_code == 404
    r = client.post("/api/sessions", json={"workId": int(huge), "minutes": 5}, headers=auth_headers)
    assert r.status_code == 404
