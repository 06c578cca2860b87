"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/exportadores) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.policy import ValidationPolicy


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "liveliest-year"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "liveliest-year"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "liveliest-year"
    return Path.home() / ".config" / "liveliest-year"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="LIVELIEST_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    validation_policy: ValidationPolicy = Field(
        default_factory=ValidationPolicy.default,
        description="Política ante registros inválidos (fail_fast/collect_all).",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request al leer fuentes remotas (segundos).",
    )
    user_agent: str = Field(
        default="liveliest-year/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para descargar datasets remotos.",
    )

    reports_dir: Path = Field(
        default=Path("reports"),
        description="Directorio por defecto para reportes exportados.",
    )
    log_level: str = Field(
        default="WARNING",
        pattern=r"(?i)^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Nivel de logging en stderr.",
    )
