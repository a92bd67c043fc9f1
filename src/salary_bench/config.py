"""Configuration management for the salary benchmark."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = (
    "mssql+pyodbc://@localhost/Demodb"
    "?driver=ODBC+Driver+18+for+SQL+Server"
    "&trusted_connection=yes"
    "&TrustServerCertificate=yes"
)


@dataclass(frozen=True)
class Settings:
    """Benchmark settings loaded from environment."""

    database_url: str
    department: str
    sql_echo: bool
    log_level: str

    @classmethod
    def from_env(cls) -> Settings:
        """Load settings from environment variables."""
        load_dotenv()

        return cls(
            database_url=os.getenv("SALARY_BENCH_DATABASE_URL", DEFAULT_DATABASE_URL),
            department=os.getenv("SALARY_BENCH_DEPARTMENT", "Finance"),
            sql_echo=os.getenv("SALARY_BENCH_SQL_ECHO", "false").lower() == "true",
            log_level=os.getenv("SALARY_BENCH_LOG_LEVEL", "WARNING").upper(),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings.from_env()
