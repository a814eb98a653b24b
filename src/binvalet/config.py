"""Application configuration and settings management."""

from datetime import date, datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="BINVALET_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Bin Valet Operations API"
    api_prefix: str = "/api"
    data_root: Path = Field(default=Path("data"), description="Root directory for exported route files.")
    seed_sample_data: bool = Field(
        default=True,
        description="Load the demo customers, routes, messages and appointments at startup.",
    )
    default_route_name: str = Field(
        default="Route A",
        description="Route assigned to customers who sign up through the portal.",
    )
    log_level: str = Field(default="INFO", description="Root logging level.")
    timezone_name: str = Field(
        default="UTC",
        description="IANA timezone used to decide which routes and cleanings are 'today'.",
    )
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:3000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("data_root", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Path:
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()


def local_today() -> date:
    """Current date in the configured business timezone."""
    return datetime.now(ZoneInfo(settings.timezone_name)).date()
