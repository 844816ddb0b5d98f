from httpreply.config import _parse_allowed_origins, get_settings


def test_settings_defaults():
    settings = get_settings()

    assert settings.protocol_version == "HTTP/1.0"
    assert settings.allowed_origins == ["*"]
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("HTTPREPLY_DEFAULT_PROTOCOL", "HTTP/1.1")
    monkeypatch.setenv("HTTPREPLY_LOG_LEVEL", "debug")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")

    settings = get_settings()

    assert settings.protocol_version == "HTTP/1.1"
    assert settings.log_level == "DEBUG"
    assert settings.allowed_origins == ["https://a.example", "https://b.example"]


def test_server_protocol_overrides_default(monkeypatch):
    monkeypatch.setenv("SERVER_PROTOCOL", "HTTP/2")
    monkeypatch.setenv("HTTPREPLY_DEFAULT_PROTOCOL", "HTTP/1.1")

    assert get_settings().protocol_version == "HTTP/2"


def test_parse_allowed_origins():
    assert _parse_allowed_origins(None) == ["*"]
    assert _parse_allowed_origins(" * ") == ["*"]
    assert _parse_allowed_origins("a, ,b") == ["a", "b"]
