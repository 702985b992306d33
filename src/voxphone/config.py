"""Configuration loading utilities for voxphone."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

_BACKEND_NAMES = {"espeak", "passthrough"}
_INT_KEYS = {"api_port", "workers"}
_ALLOWED_KEYS = {
    "log_level",
    "api_host",
    "api_port",
    "workers",
    "default_language",
    "default_backend",
}
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    api_host: str
    api_port: int
    workers: int
    default_language: str
    default_backend: str


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides."""
    env = env_name or os.getenv("VOXPHONE_ENV", "dev")
    resolved_dir = config_dir or _default_config_dir()
    profile_path = resolved_dir / f"{env}.toml"

    defaults: dict[str, str | int] = {
        "log_level": "INFO",
        "api_host": "127.0.0.1",
        "api_port": 8000,
        "workers": 1,
        "default_language": "a",
        "default_backend": "espeak",
    }
    file_values = _load_profile(profile_path)
    defaults.update(file_values)

    log_level = os.getenv("VOXPHONE_LOG_LEVEL", str(defaults["log_level"]))
    api_host = os.getenv("VOXPHONE_API_HOST", str(defaults["api_host"]))
    api_port = _parse_int("VOXPHONE_API_PORT", os.getenv("VOXPHONE_API_PORT"), defaults["api_port"])
    workers = _parse_int("VOXPHONE_WORKERS", os.getenv("VOXPHONE_WORKERS"), defaults["workers"])
    default_language = os.getenv("VOXPHONE_DEFAULT_LANGUAGE", str(defaults["default_language"]))
    default_backend = _parse_backend(
        "VOXPHONE_DEFAULT_BACKEND",
        os.getenv("VOXPHONE_DEFAULT_BACKEND", str(defaults["default_backend"])),
    )

    return AppConfig(
        env=env,
        log_level=log_level,
        api_host=api_host,
        api_port=api_port,
        workers=workers,
        default_language=default_language,
        default_backend=default_backend,
    )


def configure_logging(level: str) -> None:
    """Install the root log format at the given level."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"log_level must be a logging level name, got {level!r}")
    logging.basicConfig(level=numeric, format=_LOG_FORMAT)
    logging.getLogger().setLevel(numeric)


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, str | int]:
    if not path.exists():
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)

    resolved: dict[str, str | int] = {}
    for key, raw in payload.items():
        if key not in _ALLOWED_KEYS:
            continue
        if key in _INT_KEYS:
            resolved[key] = _coerce_int(key, raw)
        elif key == "default_backend":
            resolved[key] = _parse_backend(key, _coerce_str(key, raw))
        else:
            resolved[key] = _coerce_str(key, raw)
    return resolved


def _parse_backend(name: str, value: str) -> str:
    if value not in _BACKEND_NAMES:
        raise ValueError(f"{name} must be one of {sorted(_BACKEND_NAMES)}, got {value!r}")
    return value


def _parse_int(name: str, raw: str | None, default: str | int) -> int:
    if raw is None:
        return _coerce_int(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _coerce_int(name: str, value: object) -> int:
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")


def _coerce_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")
