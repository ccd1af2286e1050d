"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/Telegram) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fact_cli.core.errors import ConfigurationError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "fact-cli"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "fact-cli"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "fact-cli"
    return Path.home() / ".config" / "fact-cli"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# fact-cli user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


# Orden: proyecto primero (dev), luego config global de usuario.
_ENV_FILES = (".env", str(get_user_env_file()))


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="FACT_CLI_",
        extra="ignore",
        case_sensitive=False,
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="fact-cli/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para las APIs de hechos.",
    )
    log_level: LogLevel = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


class TelegramSettings(BaseSettings):
    """Credenciales del modo bot.

    Solo se cargan con `--telegram`; ambas son obligatorias.
    """

    model_config = SettingsConfigDict(
        env_prefix="TELEGRAM_",
        extra="ignore",
        case_sensitive=False,
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
    )

    # Sin espacios ni caracteres de control: el token va dentro de la URL.
    bot_token: str = Field(
        ...,
        min_length=1,
        pattern=r"^[\x21-\x7e]+$",
        description="Token del bot (Bot API).",
    )
    chat_id: int = Field(
        ...,
        ge=INT64_MIN,
        le=INT64_MAX,
        description="Chat destino (entero con signo de 64 bits).",
    )


def _configuration_error(exc: ValidationError, prefix: str) -> ConfigurationError:
    problems: list[str] = []
    for error in exc.errors():
        field = str(error["loc"][0]) if error.get("loc") else "?"
        env_name = f"{prefix}{field.upper()}"
        if error.get("type") in ("missing", "string_too_short") or error.get("input") == "":
            problems.append(f"{env_name} environment variable not set")
        else:
            problems.append(f"{env_name} is invalid: {error.get('msg')}")
    return ConfigurationError("; ".join(problems))


def load_app_settings(**overrides: object) -> AppSettings:
    """Load `FACT_CLI_*` settings or raise `ConfigurationError`."""

    try:
        return AppSettings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        raise _configuration_error(exc, "FACT_CLI_") from exc


def load_telegram_settings(**overrides: object) -> TelegramSettings:
    """Load bot credentials or raise `ConfigurationError` naming the variable.

    `overrides` is forwarded to the settings constructor (e.g. `_env_file=None`).
    """

    try:
        return TelegramSettings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        raise _configuration_error(exc, "TELEGRAM_") from exc
