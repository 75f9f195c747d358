"""Application configuration utilities."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    TZ: str = "UTC"
    API_PREFIX: str = "/api"
    SEED_DEMO_DATA: bool = True
    CORS_ORIGINS: List[str] = ["*"]
    STATIC_DIR: str = ""
    HOST: str = "0.0.0.0"
    PORT: int = 3000


@lru_cache
def get_settings() -> Settings:
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        TZ=os.getenv("TZ", "UTC"),
        API_PREFIX=os.getenv("API_PREFIX", "/api"),
        SEED_DEMO_DATA=_env_flag("SEED_DEMO_DATA", "true"),
        CORS_ORIGINS=[o.strip() for o in origins.split(",") if o.strip()],
        STATIC_DIR=os.getenv("STATIC_DIR", ""),
        HOST=os.getenv("HOST", "0.0.0.0"),
        PORT=int(os.getenv("PORT", "3000")),
    )
