from hello_addon.config import settings


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "LOG_LEVEL", "LOG_TO_FILE", "RELOAD", "ADDON_CATALOG_FILE"):
        monkeypatch.delenv(name, raising=False)

    assert settings.get_host() == "127.0.0.1"
    assert settings.get_port() == 7860
    assert settings.get_log_level() == "info"
    assert settings.log_to_file() is False
    assert settings.reload_enabled() is False
    assert settings.get_catalog_file() is None


def test_overrides(monkeypatch):
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("PORT", "7000")
    monkeypatch.setenv("LOG_LEVEL", " DEBUG ")
    monkeypatch.setenv("LOG_TO_FILE", "Yes")
    monkeypatch.setenv("RELOAD", "1")
    monkeypatch.setenv("ADDON_CATALOG_FILE", "/tmp/catalog.json")

    assert settings.get_host() == "0.0.0.0"
    assert settings.get_port() == 7000
    assert settings.get_log_level() == "debug"
    assert settings.log_to_file() is True
    assert settings.reload_enabled() is True
    assert settings.get_catalog_file() == "/tmp/catalog.json"


def test_blank_catalog_file_means_bundled(monkeypatch):
    monkeypatch.setenv("ADDON_CATALOG_FILE", "   ")
    assert settings.get_catalog_file() is None
