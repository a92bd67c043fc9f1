"""Tests for settings loading."""

import pytest

from salary_bench.config import DEFAULT_DATABASE_URL, Settings, get_settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear benchmark variables and keep .env lookups out of the repo."""
    for name in (
        "SALARY_BENCH_DATABASE_URL",
        "SALARY_BENCH_DEPARTMENT",
        "SALARY_BENCH_SQL_ECHO",
        "SALARY_BENCH_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("salary_bench.config.load_dotenv", lambda: False)
    return monkeypatch


class TestSettings:
    """Test environment-driven settings."""

    def test_defaults(self, clean_env):
        """Test defaults target the local Demodb and Finance."""
        settings = Settings.from_env()

        assert settings.database_url == DEFAULT_DATABASE_URL
        assert settings.department == "Finance"
        assert settings.sql_echo is False
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, clean_env):
        """Test each variable overrides its default."""
        clean_env.setenv("SALARY_BENCH_DATABASE_URL", "sqlite:///bench.db")
        clean_env.setenv("SALARY_BENCH_DEPARTMENT", "IT")
        clean_env.setenv("SALARY_BENCH_SQL_ECHO", "TRUE")
        clean_env.setenv("SALARY_BENCH_LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.database_url == "sqlite:///bench.db"
        assert settings.department == "IT"
        assert settings.sql_echo is True
        assert settings.log_level == "DEBUG"

    def test_settings_are_frozen(self, clean_env):
        """Test settings cannot be reassigned."""
        settings = Settings.from_env()

        with pytest.raises(AttributeError):
            settings.department = "HR"

    def test_get_settings_is_cached(self, clean_env):
        """Test get_settings returns one shared instance."""
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
