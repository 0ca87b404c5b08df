from fastapi.testclient import TestClient

from main import app


def test_directory_lists_routes(client):
    r = client.get("/")

    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "<title>API Directory</title>" in r.text
    for path in ("/allUsers", "/users/:id", "/addUser", "/updateUser/:id", "/allTeams", "/deleteTeam/:id"):
        assert f"<strong>{path}</strong>" in r.text


def test_health_ok(client):
    r = client.get("/health")

    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "healthy"
    assert body["checks"]["database"]["status"] == "healthy"


def test_health_degraded_when_db_down(client, db):
    db.unavailable = True

    r = client.get("/health")

    assert r.status_code == 200
    assert r.json()["status"] == "degraded"


def test_readiness(client, db):
    assert client.get("/health/ready").json()["status"] == "ready"

    db.unavailable = True
    r = client.get("/health/ready")

    assert r.status_code == 503
    body = r.json()
    assert body["error"]["code"] == "HTTP_EXCEPTION"
    assert body["error"]["details"]["status"] == "not_ready"


def test_liveness(client):
    r = client.get("/health/live")
    assert r.status_code == 200
    assert r.json()["status"] == "alive"


def test_startup_creates_unique_indexes(client, db):
    assert db["Users"].unique_indexes == {"email": "email_unique", "id": "id_unique"}
    assert db["Teams"].unique_indexes == {"name": "name_unique"}


def test_unknown_route_uses_error_shape(client):
    r = client.get("/users/abc/extra")

    assert r.status_code == 404
    assert r.json() == {
        "success": False,
        "statusCode": 404,
        "error": {"code": "HTTP_EXCEPTION", "message": "Not Found"},
    }


def test_starts_while_store_is_down(db):
    db.unavailable = True
    app.state.db = db

    with TestClient(app) as c:
        r = c.get("/allUsers")
        ready = c.get("/health/ready")

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "STORE_ERROR"
    assert ready.status_code == 503
    assert db["Users"].unique_indexes == {}
