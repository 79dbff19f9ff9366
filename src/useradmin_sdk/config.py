from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_USERS_PATH = "/users"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    env_name: str
    api_base_url: str
    users_path: str = DEFAULT_USERS_PATH
    connect_timeout_seconds: float = 5.0
    read_timeout_seconds: float = 15.0
    max_connections: int = 10
    verify_ssl: bool = True


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _read_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected an integer, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def _normalize_path(value: str) -> str:
    path = value.strip() or DEFAULT_USERS_PATH
    path = path if path.startswith("/") else f"/{path}"
    return path.rstrip("/") or DEFAULT_USERS_PATH


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override."""
    load_dotenv(env_file)

    env_name = (os.getenv("USERADMIN_ENV") or "dev").strip()
    env_key = env_name.upper()

    api_base_url = (
        (os.getenv(f"USERADMIN_API_BASE_URL_{env_key}") or "").strip()
        or (os.getenv("USERADMIN_API_BASE_URL") or "").strip()
        or DEFAULT_API_BASE_URL
    )

    timeout_seconds = _read_float("USERADMIN_TIMEOUT_SECONDS", "10")
    _validate(
        timeout_seconds > 0,
        f"Invalid USERADMIN_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}",
    )

    connect_timeout_seconds = _read_float(
        "USERADMIN_CONNECT_TIMEOUT_SECONDS", str(min(timeout_seconds, 5.0))
    )
    _validate(
        connect_timeout_seconds > 0,
        (
            "Invalid USERADMIN_CONNECT_TIMEOUT_SECONDS: "
            f"expected > 0, got {connect_timeout_seconds}"
        ),
    )

    read_timeout_seconds = _read_float(
        "USERADMIN_READ_TIMEOUT_SECONDS",
        str(max(timeout_seconds, connect_timeout_seconds)),
    )
    _validate(
        read_timeout_seconds > 0,
        f"Invalid USERADMIN_READ_TIMEOUT_SECONDS: expected > 0, got {read_timeout_seconds}",
    )

    max_connections = _read_int("USERADMIN_MAX_CONNECTIONS", "10")
    _validate(
        max_connections >= 1,
        f"Invalid USERADMIN_MAX_CONNECTIONS: expected >= 1, got {max_connections}",
    )

    return ClientConfig(
        env_name=env_name,
        api_base_url=api_base_url.rstrip("/"),
        users_path=_normalize_path(os.getenv("USERADMIN_USERS_PATH", DEFAULT_USERS_PATH)),
        connect_timeout_seconds=connect_timeout_seconds,
        read_timeout_seconds=read_timeout_seconds,
        max_connections=max_connections,
        verify_ssl=_coerce_bool(os.getenv("USERADMIN_VERIFY_SSL"), True),
    )
