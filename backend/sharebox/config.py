"""ShareBox configuration: Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "ShareBox"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Network
    host: str = "127.0.0.1"
    port: int = 3000
    api_prefix: str = "/api"
    uploads_prefix: str = "/uploads"
    # comma list or JSON array, also from the environment
    cors_origins: Annotated[list[str], NoDecode] = [
        "http://localhost:3000",
    ]

    # Storage paths (relative resolved from backend/ at runtime)
    data_dir: str = "./data"
    upload_dir: str = "./data/uploads"
    users_file: str = "./data/users.json"
    static_dir: str = "./public"

    # Access
    admin_email: str = "Admin@FontsFun.com"
    max_upload_bytes: int = 0  # 0 = unlimited

    uvicorn_workers: int = 1

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        env_prefix="SHAREBOX_",
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, str) and not value.startswith("["):
            return [o.strip() for o in value.split(",") if o.strip()]
        if isinstance(value, str):
            return json.loads(value)
        if isinstance(value, list):
            return value
        return ["http://localhost:3000"]

    @field_validator("admin_email")
    @classmethod
    def _admin_email_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("admin_email must not be empty")
        return value

    @model_validator(mode="after")
    def _resolve_paths(self) -> "Settings":
        """Ensure storage paths are absolute."""
        base = Path(__file__).resolve().parent.parent  # backend/
        for field in ("data_dir", "upload_dir", "users_file", "static_dir"):
            val = getattr(self, field)
            if not Path(val).is_absolute():
                setattr(self, field, str(base / val))
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
