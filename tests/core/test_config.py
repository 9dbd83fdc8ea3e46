"""Tests for application settings."""

import logging

from pydantic import ValidationError
import pytest

from predictstore.core.config import Settings, get_settings


@pytest.fixture
def clean_environment(monkeypatch):
    for name in (
        "ENVIRONMENT",
        "DEBUG",
        "LOG_LEVEL",
        "HOST",
        "PORT",
        "SERVICE_ACCOUNT_KEY",
        "FIRESTORE_DATABASE",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self, clean_environment):
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.host == "127.0.0.1"
        assert settings.port == 8080
        assert settings.service_account_key is None
        assert settings.firestore_database == "(default)"

    def test_reads_environment(self, clean_environment, monkeypatch, service_account_json):
        monkeypatch.setenv("SERVICE_ACCOUNT_KEY", service_account_json)
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.service_account_key == service_account_json
        assert settings.environment == "production"
        assert settings.port == 9000
        assert settings.log_level == "DEBUG"

    def test_reads_env_file(self, clean_environment, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text('SERVICE_ACCOUNT_KEY={"project_id": "from-file"}\n')

        settings = Settings(_env_file=env_file)

        assert settings.service_account_key == '{"project_id": "from-file"}'

    def test_rejects_unknown_log_level(self, clean_environment):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="LOUD")

    def test_configuration_summary_hides_key(self, clean_environment, caplog):
        settings = Settings(_env_file=None, SERVICE_ACCOUNT_KEY="super-secret")

        with caplog.at_level(logging.INFO, logger="predictstore"):
            settings.log_configuration_summary()

        assert "super-secret" not in caplog.text
        assert "Service account key: set" in caplog.text


def test_get_settings_is_cached(clean_environment):
    assert get_settings() is get_settings()
