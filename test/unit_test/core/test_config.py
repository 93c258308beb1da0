"""Unit tests for the settings model."""

from __future__ import annotations

from kennel.core.config import DatabaseConfig, LoggingConfig, Settings, get_settings


class TestSettingsDefaults:
    def test_defaults(self, monkeypatch):
        for name in (
            "KENNEL_DATABASE_URL",
            "KENNEL_DATABASE_ECHO",
            "KENNEL_CREATE_SCHEMA",
            "KENNEL_LOG_LEVEL",
            "KENNEL_ENABLE_FILE_LOGGING",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///kennel.db"
        assert settings.database_echo is False
        assert settings.create_schema is True
        assert settings.log_level == "INFO"
        assert settings.enable_file_logging is False


class TestSettingsFromEnvironment:
    def test_reads_prefixed_variables(self, monkeypatch):
        monkeypatch.setenv("KENNEL_DATABASE_URL", "sqlite://")
        monkeypatch.setenv("KENNEL_DATABASE_ECHO", "true")
        monkeypatch.setenv("KENNEL_LOG_FORMAT", "json")

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite://"
        assert settings.database_echo is True
        assert settings.log_format == "json"

    def test_reads_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("KENNEL_DATABASE_URL", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("KENNEL_DATABASE_URL=sqlite:///from-env-file.db\n")

        settings = Settings(_env_file=str(env_file))

        assert settings.database_url == "sqlite:///from-env-file.db"

    def test_get_settings_is_cached(self, fresh_settings_cache, monkeypatch):
        monkeypatch.setenv("KENNEL_LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert settings is get_settings()
        assert settings.log_level == "DEBUG"


class TestGroupedConfig:
    def test_database_group(self):
        settings = Settings(_env_file=None, database_url="sqlite://", database_echo=True, create_schema=False)

        database = settings.database

        assert isinstance(database, DatabaseConfig)
        assert database.url == "sqlite://"
        assert database.echo is True
        assert database.create_schema is False

    def test_logging_group(self):
        settings = Settings(_env_file=None, log_level="debug", log_file_dir="/tmp/kennel-logs")

        logging_config = settings.logging

        assert isinstance(logging_config, LoggingConfig)
        assert logging_config.level == "debug"
        assert logging_config.file_dir == "/tmp/kennel-logs"
