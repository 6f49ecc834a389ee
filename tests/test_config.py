from cpuapi.core.config import Settings


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.delenv("SERVER_URL", raising=False)

    settings = Settings()

    assert settings.PORT == 8080
    assert settings.SERVER_URL == "http://localhost:8080"


def test_explicit_server_url_wins(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("SERVER_URL", "https://cpu.example.com")

    assert Settings().SERVER_URL == "https://cpu.example.com"


def test_defaults(monkeypatch):
    for name in ("PORT", "SERVER_URL", "WORKERS", "HOST"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(PORT=3000, SERVER_URL="", WORKERS=0, HOST="0.0.0.0")

    assert settings.PORT == 3000
    assert settings.SERVER_URL == "http://localhost:3000"
    assert settings.WORKERS == 0
    assert settings.DOCS_URL == "/api-docs"
