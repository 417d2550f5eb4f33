import logging

from fastapi.testclient import TestClient

from findmeme.services.api.app import create_app
from findmeme.services.api.deps import get_catalog_service


def test_malformed_register_is_400_without_echoing_password(api_client):
    r = api_client.post("/api/auth/register", json={"username": "x", "password": "hunter22-plain"})
    assert r.status_code == 400
    body = r.json()
    assert set(body) == {"error"}
    assert "email" in body["error"]
    assert "hunter22-plain" not in r.text


def test_empty_login_is_400(api_client):
    r = api_client.post("/api/auth/login", json={})
    assert r.status_code == 400
    assert set(r.json()) == {"error"}


def test_bad_path_param_is_400(api_client):
    r = api_client.get("/api/memes/abc")
    assert r.status_code == 400
    assert "meme_id" in r.json()["error"]


class _BrokenCatalog:
    def list(self, search=None, media_type=None):
        raise RuntimeError("connection to db-internal:5432 refused for user admin")


def test_unexpected_error_is_generic_500_and_logged(database, settings, caplog):
    app = create_app(database=database, cfg=settings)
    app.dependency_overrides[get_catalog_service] = lambda: _BrokenCatalog()

    with caplog.at_level(logging.ERROR):
        with TestClient(app, raise_server_exceptions=False) as client:
            r = client.get("/api/memes")

    assert r.status_code == 500
    assert r.json() == {"error": "Server error"}
    assert "db-internal" not in r.text
    assert "GET /api/memes crashed" in caplog.text
    assert any(rec.exc_info for rec in caplog.records)
