"""Paramètres du service de temps partagé (pydantic-settings).

Les valeurs viennent de l'environnement puis d'un fichier `.env`, choisi dans cet ordre:
`ENV_FILE` explicite, puis `.env.{APP_ENV}` s'il existe, puis `.env`.
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _resolve_env_file(cwd: Path | None = None) -> Path:
    explicit = os.getenv("ENV_FILE")
    if explicit:
        return Path(explicit)
    base = cwd or Path.cwd()
    per_env = base / f".env.{os.getenv('APP_ENV', 'dev')}"
    return per_env if per_env.exists() else base / ".env"


class Settings(BaseSettings):
    """Configuration de l'application (insensible à la casse, valeurs vides ignorées)."""

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file(),
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=False,
    )

    APP_NAME: str = "sharedtime-backend"
    APP_ENV: str = "dev"
    APP_DEBUG: bool = True
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000

    # Stockage des membres: Redis si configuré, sinon mémoire
    REDIS_URL: str | None = None
    REQUIRE_REDIS: bool = False

    # Espérance de vie
    LIFE_EXPECTANCY_PROVIDER: Literal["static", "http"] = "static"
    LIFE_EXPECTANCY_URL: str | None = None
    LIFE_EXPECTANCY_API_KEY: str | None = None
    LIFE_EXPECTANCY_TIMEOUT_S: float = Field(default=5.0, gt=0)
    # Table de repli alternative (JSON {pays: {male, female}}), sinon table embarquée
    LIFE_EXPECTANCY_TABLE_PATH: str | None = None

    DEFAULT_CUSTOM_YEARS: float = Field(default=5, gt=0)


def get_settings() -> Settings:
    """Lit la configuration courante."""
    return Settings()
