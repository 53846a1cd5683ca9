from hookguide.config import Settings, get_logger, setup_logging


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("HOOKGUIDE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("HOOKGUIDE_PORT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.host == "127.0.0.1"
    assert settings.port == 8000


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("HOOKGUIDE_PORT", "9001")
    monkeypatch.setenv("HOOKGUIDE_APP_TITLE", "Hooks")
    settings = Settings(_env_file=None)
    assert settings.port == 9001
    assert settings.app_title == "Hooks"


def test_setup_logging_tolerates_unknown_level():
    setup_logging("not-a-level")
    assert get_logger("hookguide.test").name == "hookguide.test"
