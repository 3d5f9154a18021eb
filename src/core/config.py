"""Configuración del Core.

Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
Los adaptadores (HTTP, caché) leen la misma instancia de `AppSettings`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "license-cli"

SPDX_LICENSES_URL = "https://spdx.org/licenses/licenses.json"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_cache_dir() -> Path:
    """Directorio de caché por usuario para las respuestas HTTP."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("LOCALAPPDATA", str(Path.home())))
        return base / APP_NAME / "cache"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Caches" / APP_NAME

    xdg = os.environ.get("XDG_CACHE_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".cache" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Todas las claves aceptan override por entorno con prefijo `SPDX_LICENSE_`
    (p.ej. `SPDX_LICENSE_CACHE_ENABLED=false`).
    """

    model_config = SettingsConfigDict(
        env_prefix="SPDX_LICENSE_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    registry_url: str = Field(
        default=SPDX_LICENSES_URL,
        min_length=8,
        description="URL del JSON con la lista de licencias SPDX.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=f"{APP_NAME}/0.3",
        min_length=1,
        description="User-Agent para las peticiones al registro.",
    )

    cache_enabled: bool = Field(
        default=True,
        description="Reutilizar respuestas HTTP desde la caché en disco.",
    )
    cache_dir: Path | None = Field(
        default=None,
        description="Directorio de la caché HTTP (por defecto, el de la plataforma).",
    )

    preview_chars: int = Field(
        default=200,
        ge=1,
        description="Caracteres del texto mostrados en modo preview.",
    )
    picker_queue_size: int = Field(
        default=256,
        ge=1,
        description="Capacidad de la cola entre el productor y el selector interactivo.",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING...).",
    )

    def resolved_cache_dir(self) -> Path:
        return self.cache_dir or get_user_cache_dir()
