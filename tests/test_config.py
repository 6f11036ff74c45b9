"""
Tests for settings loading
"""

from signup_form import config


class TestSettings:
    """Tests for Settings"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SIGNUP_FORM_NOTICE_DISMISS_SECONDS", raising=False)
        monkeypatch.delenv("SIGNUP_FORM_LOG_LEVEL", raising=False)
        settings = config.Settings(_env_file=None)
        assert settings.notice_dismiss_seconds == 3.0
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SIGNUP_FORM_NOTICE_DISMISS_SECONDS", "0.5")
        monkeypatch.setenv("SIGNUP_FORM_LOG_LEVEL", "debug")
        settings = config.Settings(_env_file=None)
        assert settings.notice_dismiss_seconds == 0.5
        assert settings.log_level == "debug"

    def test_get_settings_is_cached(self, monkeypatch):
        monkeypatch.setattr(config, "_settings", None)
        assert config.get_settings() is config.get_settings()
