from __future__ import annotations

from api.core import config as core_config

UPLOAD_BASE = "https://files.test/uploads"


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "OK"
    assert body["message"] == "Server is running"
    assert body["environment"] == "test"
    assert body["timestamp"].endswith("Z")


def test_upload_without_file_is_400(client):
    resp = client.post("/api/upload/aadhaar", data={"note": "nothing attached"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "No file uploaded"}


def test_upload_is_simulated(client, data_dir):
    before = sorted(p.name for p in data_dir.iterdir())
    resp = client.post(
        "/api/upload/aadhaar",
        files={"file": ("card.pdf", b"%PDF-1.4 tiny", "application/pdf")},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "aadhaar uploaded successfully (simulated)"
    assert body["filename"] == "card.pdf"
    assert body["size"] == len(b"%PDF-1.4 tiny")
    assert body["path"].startswith(UPLOAD_BASE + "/")
    assert body["path"].endswith("-card.pdf")
    assert sorted(p.name for p in data_dir.iterdir()) == before


def test_upload_over_limit_is_a_server_error(client, data_dir):
    before = sorted(p.name for p in data_dir.iterdir())
    resp = client.post("/api/upload/photo", files={"file": ("big.jpg", b"x" * 65, "image/jpeg")})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
    assert sorted(p.name for p in data_dir.iterdir()) == before


def test_upload_exactly_at_limit_is_accepted(client):
    resp = client.post("/api/upload/photo", files={"file": ("ok.jpg", b"x" * 64, "image/jpeg")})
    assert resp.status_code == 200
    assert resp.json()["size"] == 64


def test_settings_from_environment(monkeypatch, tmp_path):
    monkeypatch.delenv("VERCEL", raising=False)
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("APP_ENV", "Production")
    monkeypatch.setenv("PORT", "not-a-number")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.test, https://b.test")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
        assert settings.data_dir == tmp_path
        assert settings.app_env == "production"
        assert settings.port == 5000
        assert settings.cors_origins == ("https://a.test", "https://b.test")
        assert settings.upload_max_bytes == 10 * 1024 * 1024
    finally:
        core_config.get_settings.cache_clear()


def test_vercel_stores_data_in_tmp(monkeypatch):
    monkeypatch.setenv("VERCEL", "1")
    monkeypatch.setenv("DATA_DIR", "/somewhere/else")
    core_config.get_settings.cache_clear()
    try:
        assert str(core_config.get_settings().data_dir) == "/tmp"
    finally:
        core_config.get_settings.cache_clear()
