"""Application configuration."""

import os
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from food_tracker.domain.foods import DEFAULT_CALORIE_REQ, DEFAULT_PROTEIN_REQ
from food_tracker.services.persistence import DEFAULT_STORAGE_KEY

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: Literal["memory", "file", "sqlite"] = "file"
    storage_path: Path = Path("food_tracker_data.json")
    storage_key: str = DEFAULT_STORAGE_KEY
    default_calorie_req: float = DEFAULT_CALORIE_REQ
    default_protein_req: float = DEFAULT_PROTEIN_REQ
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
