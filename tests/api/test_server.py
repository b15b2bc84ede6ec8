from fastapi.testclient import TestClient
import pytest

from textcheck import server


def test_app_startup_and_root():
    """Lifespan läuft durch (Logging + Validierung), Root-Route antwortet."""
    with TestClient(server.app) as client:
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {"message": "Text check API running"}

        assert client.get("/health").json() == {"status": "ok"}


def test_validate_startup_config_ok():
    server.validate_startup_config()


def test_validate_startup_config_fails_fast(monkeypatch):
    monkeypatch.setattr(server.settings, "max_text_chars", 0)
    monkeypatch.setattr(server.settings, "log_level", "LAUT")

    with pytest.raises(ValueError) as exc_info:
        server.validate_startup_config()

    msg = str(exc_info.value)
    assert "Startup validation failed" in msg
    assert "MAX_TEXT_CHARS" in msg
    assert "LOG_LEVEL" in msg
