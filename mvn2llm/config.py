"""Configuration loading for mvn2llm (.mvn2llm.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .maven.client import DEFAULT_REPOSITORY, DEFAULT_TIMEOUT
from .stores import DEFAULT_CACHE_DIR

CONFIG_FILENAME = ".mvn2llm.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ProxySettings:
    """Proxy URLs from .mvn2llm.yml; unset values fall back to the environment."""

    http: Optional[str] = None
    https: Optional[str] = None


@dataclass
class CacheSettings:
    """Where downloaded source jars are kept between runs."""

    enabled: bool = True
    dir: Path = DEFAULT_CACHE_DIR


@dataclass
class Mvn2LlmConfig:
    """Represents the settings defined in .mvn2llm.yml."""

    repository: str = DEFAULT_REPOSITORY
    timeout: float = DEFAULT_TIMEOUT
    workers: int = 1
    log_level: Optional[str] = None
    format: str = "text"
    proxy: ProxySettings = field(default_factory=ProxySettings)
    cache: CacheSettings = field(default_factory=CacheSettings)
    source: Optional[Path] = None


def find_config(start: Path | None = None) -> Optional[Path]:
    """Return the config file in `start` (default: cwd) if there is one."""
    directory = (start or Path.cwd()).expanduser()
    candidate = directory / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def load_config(config_path: Path | None = None) -> Mvn2LlmConfig:
    """Load configuration from disk, returning defaults when no file exists."""
    if config_path is None:
        config_path = find_config()
        if config_path is None:
            return Mvn2LlmConfig()

    config_file = config_path.expanduser()
    if config_file.is_dir():
        config_file = config_file / CONFIG_FILENAME
    if not config_file.exists():
        return Mvn2LlmConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    config = Mvn2LlmConfig(source=config_file.resolve())

    repository = _as_str(data.get("repository"))
    if repository:
        config.repository = repository
    timeout = _as_float(data.get("timeout"))
    if timeout is not None and timeout > 0:
        config.timeout = timeout
    workers = _as_int(data.get("workers"))
    if workers is not None and workers > 0:
        config.workers = workers
    config.log_level = _as_str(data.get("log_level"))
    fmt = _as_str(data.get("format"))
    if fmt:
        config.format = fmt

    proxy_data = _as_dict(data.get("proxy"))
    if proxy_data:
        config.proxy = ProxySettings(
            http=_as_str(proxy_data.get("http")),
            https=_as_str(proxy_data.get("https")),
        )

    cache_data = _as_dict(data.get("cache"))
    if cache_data:
        enabled = _as_bool(cache_data.get("enabled"))
        cache_dir = _as_str(cache_data.get("dir"))
        config.cache = CacheSettings(
            enabled=True if enabled is None else enabled,
            dir=Path(cache_dir).expanduser() if cache_dir else DEFAULT_CACHE_DIR,
        )

    return config


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "CacheSettings",
    "ConfigError",
    "Mvn2LlmConfig",
    "ProxySettings",
    "find_config",
    "load_config",
]
