import sys, pathlib
repo = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(repo))

import pytest
from fastapi.testclient import TestClient

from pdi_site.main import app

SECRET = "s3cret-value"
ERROR = {"error": "Webhook incorrectly configured."}

@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("WEBHOOK_SECRET", SECRET)
    return TestClient(app)

def test_get_is_always_ok(client):
    r = client.get("/api/deploy", headers={"webhook-secret": "wrong"})
    assert r.status_code == 200
    assert r.text == "Endpoint for deploy webhook"

def test_post_accepted(client):
    r = client.post(
        "/api/deploy",
        json={"_id": "event-1", "_type": "event"},
        headers={"webhook-secret": SECRET, "sanity-webhook-id": "wh-1"},
    )
    assert r.status_code == 202
    assert r.text == "Accepted"

def test_post_wrong_secret(client):
    r = client.post("/api/deploy", json={}, headers={"webhook-secret": "nope"})
    assert r.status_code == 400
    assert r.json() == ERROR

def test_post_missing_secret_header(client):
    r = client.post("/api/deploy", json={})
    assert r.status_code == 400
    assert r.json() == ERROR

def test_post_wrong_content_type(client):
    r = client.post(
        "/api/deploy",
        content=b"{}",
        headers={"webhook-secret": SECRET, "content-type": "text/plain"},
    )
    assert r.status_code == 400
    assert r.json() == ERROR

def test_post_rejected_when_secret_unset(monkeypatch):
    monkeypatch.delenv("WEBHOOK_SECRET", raising=False)
    r = TestClient(app).post("/api/deploy", json={}, headers={"webhook-secret": ""})
    assert r.status_code == 400
    assert r.json() == ERROR

def test_healthz(client):
    assert client.get("/healthz").json() == {"ok": True}
