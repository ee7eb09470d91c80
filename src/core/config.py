"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que las demostraciones y la CLI lean la config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.principle import Variant


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "solid-demos"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "solid-demos"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "solid-demos"
    return Path.home() / ".config" / "solid-demos"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar las demostraciones.
    - Un único contrato de configuración para CLI y runner.
    """

    model_config = SettingsConfigDict(
        env_prefix="SOLID_DEMOS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner antes de `run`.",
    )
    color: bool = Field(
        default=True,
        description="Permitir color en la consola Rich.",
    )
    default_variant: Variant | None = Field(
        default=None,
        description="Variante por defecto cuando no se pasa `--variant` (None = ambas).",
    )

    demo_user_name: str = Field(
        default="John Doe",
        min_length=1,
        description="Nombre del usuario de la demostración SRP.",
    )
    demo_user_email: str = Field(
        default="john.doe@example.com",
        pattern=r"^[^@\s]+@[^@\s]+$",
        description="Email del usuario de la demostración SRP.",
    )

    reports_dir: Path = Field(
        default=Path("reports"),
        description="Directorio base para `--json` cuando se pasa solo un nombre de archivo.",
    )
