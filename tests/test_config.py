from app.core.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.DATABASE_URL.startswith("sqlite+aiosqlite")
    assert s.ATTACHMENT_LOOKUP_SCOPED is True
    assert s.CREATE_TABLES_ON_STARTUP is True


def test_cors_origins_from_comma_separated_string():
    s = Settings(_env_file=None, CORS_ORIGINS="http://a.example, http://b.example")
    assert s.CORS_ORIGINS == ["http://a.example", "http://b.example"]


def test_scoping_can_be_disabled_from_environment(monkeypatch):
    monkeypatch.setenv("ATTACHMENT_LOOKUP_SCOPED", "false")
    s = Settings(_env_file=None)
    assert s.ATTACHMENT_LOOKUP_SCOPED is False
