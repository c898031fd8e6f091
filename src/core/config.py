"""Configuración de la aplicación.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y la CLI lean config de forma consistente.

El loader y el mapper no leen configuración: reciben URL y transporte por
constructor.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "feed-loader"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "feed-loader"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "feed-loader"
    return Path.home() / ".config" / "feed-loader"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="FEED_LOADER_",
        extra="ignore",
        case_sensitive=False,
        # pydantic-settings carga los .env en orden y el último gana: el .env
        # de usuario pisa al del cwd. Las variables FEED_LOADER_* del entorno
        # pisan a ambos.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    feed_url: str | None = Field(
        default=None,
        description="URL del feed por defecto para la CLI.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="feed-loader/0.1 (+https://local)",
        min_length=1,
        description="User-Agent de las peticiones HTTP.",
    )
    max_workers: int = Field(
        default=4,
        ge=1,
        le=64,
        description="Hilos del pool que ejecuta las peticiones del transporte.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Nivel de logging cuando no se pasa --verbose.",
    )
    log_json: bool = Field(
        default=False,
        description="Emitir logs como JSON lines en stderr.",
    )
