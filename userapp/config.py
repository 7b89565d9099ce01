"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings are built once by the app factory and passed explicitly;
      nothing reads configuration from module-level state
    - Credentials come from the environment / .env (never hardcoded beyond dev defaults)
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
SUPPORTED_ROUTE_PREFIXES = ("", "/api")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "postgresql+asyncpg://users:users@db:5432/users"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Plain postgresql:// URLs need the asyncpg driver spelled out."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    ensure_schema_on_startup: bool = True

    # HTTP
    # "" mounts /users, "/api" mounts /api/users
    route_prefixes: list[str] = ["", "/api"]

    @field_validator("route_prefixes")
    @classmethod
    def check_route_prefixes(cls, v: list[str]) -> list[str]:
        """Only the two shapes the path resolver understands can be mounted."""
        unknown = [p for p in v if p not in SUPPORTED_ROUTE_PREFIXES]
        if unknown:
            raise ValueError(
                f"unsupported route prefixes {unknown}; "
                f"choose from {list(SUPPORTED_ROUTE_PREFIXES)}"
            )
        return v

    template_dir: Path = PACKAGE_TEMPLATE_DIR
    cors_origins: list[str] = ["http://localhost:8080"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def uses_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def engine_options(self) -> dict:
        """Engine keyword arguments; SQLite's pools take no size limits."""
        if self.uses_sqlite:
            return {}
        return {
            "pool_size": self.database_pool_size,
            "max_overflow": self.database_max_overflow,
        }
