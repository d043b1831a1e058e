from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

ID_STRATEGIES = {"counter", "timestamp"}
DEFAULT_PORT = 5000


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - HOST: bind address for the HTTP server. Default '0.0.0.0'
    - PORT: listening port. Default 5000
    - LOG_LEVEL: root log level name (DEBUG, INFO, ...). Default 'INFO'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - TASK_ID_STRATEGY: 'counter' (default) or 'timestamp'
    """

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    log_level: str = "INFO"
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])
    id_strategy: str = "counter"


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_port(value: str, default: int = DEFAULT_PORT) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return default
    if not (0 < port < 65536):
        return default
    return port


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    strategy = _get_env("TASK_ID_STRATEGY", "counter").strip().lower()
    if strategy not in ID_STRATEGIES:
        # Fallback to counter if unsupported
        strategy = "counter"

    return Settings(
        host=_get_env("HOST", "0.0.0.0").strip(),
        port=_parse_port(_get_env("PORT", str(DEFAULT_PORT))),
        log_level=_get_env("LOG_LEVEL", "INFO").strip().upper(),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
        id_strategy=strategy,
    )
