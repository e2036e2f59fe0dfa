"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/GitHub) lean config de forma consistente.

Nota: la configuración solo se lee (env vars y `.env`); nunca se persiste.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "gde"
APP_VERSION = "1.2.0"


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


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="GDE_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero, luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GDE_GITHUB_TOKEN", "GITHUB_TOKEN"),
        description="Token de GitHub (sube el rate limit de 60 a 5000 req/h).",
    )
    github_api_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Base URL de la API REST de GitHub.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default=f"{APP_NAME}/{APP_VERSION}",
        min_length=1,
        description="User-Agent enviado a GitHub (obligatorio en su API).",
    )
    max_concurrency: int = Field(
        default=8,
        ge=1,
        le=64,
        description="Descargas simultáneas máximas.",
    )
    doc_extensions: tuple[str, ...] = Field(
        default=(".md", ".mdx"),
        description="Extensiones de fichero que se consideran documentación.",
    )
    default_docs_path: str = Field(
        default="docs",
        min_length=1,
        description="Ruta de documentación usada cuando no se pasa --paths.",
    )
    default_output_dir: str = Field(
        default="./output",
        min_length=1,
        description="Directorio de salida usado cuando no se pasa --out.",
    )
