import logging

from oauth_token_exchange.config import Settings, get_settings
from oauth_token_exchange.logging_config import setup_logging


def test_settings_defaults():
    settings = Settings()

    assert settings.HTTP_TIMEOUT == 30.0
    assert settings.ENABLE_DEBUG_LOGGING is False


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT", "5")
    monkeypatch.setenv("ENABLE_DEBUG_LOGGING", "true")

    settings = Settings()

    assert settings.HTTP_TIMEOUT == 5.0
    assert settings.ENABLE_DEBUG_LOGGING is True


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_setup_logging_level():
    root = logging.getLogger()
    previous = root.level
    try:
        # pytest already installed handlers on the root logger
        assert setup_logging(Settings(ENABLE_DEBUG_LOGGING=True)) == logging.DEBUG
        assert root.level == logging.DEBUG

        assert setup_logging(Settings(ENABLE_DEBUG_LOGGING=False)) == logging.INFO
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)


def test_settings_read_env_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("HTTP_TIMEOUT=7\nENABLE_DEBUG_LOGGING=1\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HTTP_TIMEOUT", raising=False)
    monkeypatch.delenv("ENABLE_DEBUG_LOGGING", raising=False)

    settings = Settings()

    assert settings.HTTP_TIMEOUT == 7.0
    assert settings.ENABLE_DEBUG_LOGGING is True
