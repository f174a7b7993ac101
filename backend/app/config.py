from pathlib import Path
from functools import lru_cache
from typing import Literal, Optional
from fastapi import Request
from pydantic import Field
from pydantic_settings import BaseSettings

# .env lives at the project root (two levels above this file: app/config.py → backend/ → root/)
_ENV_FILE = str(Path(__file__).parent.parent.parent / ".env")


class Settings(BaseSettings):
    # Database: prefer DATABASE_URL if set; otherwise build from STORAGE_BACKEND
    database_url: str = Field(default="", alias="DATABASE_URL")
    storage_backend: Literal["postgres", "sqlite"] = "postgres"
    sqlite_path: str = "./data.db"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "inventory_api"
    postgres_user: str = "inventory_user"
    postgres_password: str = ""
    db_ssl: bool = False

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 3000
    api_prefix: str = ""
    cors_origins: str = "*"          # comma-separated
    log_level: str = "INFO"

    # Tenancy
    duplicate_client_policy: Literal["reject", "ignore"] = "reject"
    admin_token: Optional[str] = None    # unset → /admin/add-client is open

    # Queries
    default_sales_days: int = 90
    strict_days_param: bool = False

    def get_db_url(self) -> str:
        if self.database_url:
            return self.database_url
        if self.storage_backend == "sqlite":
            return f"sqlite:///{self.sqlite_path}"
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    def get_cors_origins(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    model_config = {
        "env_file": _ENV_FILE,
        "case_sensitive": False,
        "extra": "ignore",
        "populate_by_name": True,
    }


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with (see main.create_app)."""
    return request.app.state.settings
