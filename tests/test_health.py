from fastapi.testclient import TestClient

from chirpy.main import app


def test_healthz():
    client = TestClient(app)
    resp = client.get("/api/healthz")
    assert resp.status_code == 200
    assert resp.text == "OK"
    assert resp.headers["content-type"] == "text/plain; charset=utf-8"


def test_healthz_get_only(client):
    resp = client.post("/api/healthz")
    assert resp.status_code == 405
    assert resp.json() == {"error": "Method Not Allowed"}


def test_unknown_path(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}
