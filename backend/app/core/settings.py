from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from dotenv import load_dotenv

DEFAULT_CONFIG_FILE = "config.yaml"
DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."
RECENT_QAS_FILENAME = "recent_qas.json"
KNOWLEDGE_FILENAME = "knowledge.json"


class ConfigError(RuntimeError):
    """Raised when the configuration file exists but cannot be used."""


@dataclass
class Settings:
    api_base_url: Optional[str] = None
    api_key: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 8080
    default_model: str = "gpt-3.5-turbo"
    available_models: List[str] = field(default_factory=list)
    data_dir: Path = Path("data")
    recent_capacity: int = 5
    request_timeout: float = 60.0
    system_prompt: str = DEFAULT_SYSTEM_PROMPT

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir)
        models = [name for name in self.available_models if name]
        if self.default_model not in models:
            models.insert(0, self.default_model)
        self.available_models = models

    @property
    def recent_qas_file(self) -> Path:
        return self.data_dir / RECENT_QAS_FILENAME

    @property
    def knowledge_file(self) -> Path:
        return self.data_dir / KNOWLEDGE_FILENAME


def _section(raw: Mapping[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Configuration section '{name}' must be a mapping")
    return value


def _parse_port(value: Any) -> int:
    # ports may be written as ":8080"
    text = str(value).strip().lstrip(":")
    try:
        return int(text)
    except ValueError as exc:
        raise ConfigError(f"Invalid server port: {value!r}") from exc


def _parse_int(value: Any, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid value for {name}: {value!r}") from exc


def _parse_float(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid value for {name}: {value!r}") from exc


def _read_config_file(path: Path) -> Dict[str, Any]:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return {}
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file '{path}': {exc}") from exc

    try:
        decoded = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Unable to parse configuration file '{path}': {exc}") from exc

    if decoded is None:
        return {}
    if not isinstance(decoded, dict):
        raise ConfigError(f"Expected configuration file '{path}' to contain a mapping")
    return decoded


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """Build settings from the YAML config file with environment overrides."""
    load_dotenv()

    config_path = Path(path or os.getenv("APP_CONFIG_FILE", DEFAULT_CONFIG_FILE)).expanduser()
    raw = _read_config_file(config_path)
    api = _section(raw, "api")
    server = _section(raw, "server")
    models = _section(raw, "models")
    storage = _section(raw, "storage")

    available = models.get("available") or []
    if not isinstance(available, list):
        raise ConfigError("'models.available' must be a list of model names")

    values: Dict[str, Any] = {
        "api_base_url": api.get("base_url"),
        "api_key": api.get("api_key"),
        "host": server.get("host") or Settings.host,
        "port": _parse_port(server.get("port", Settings.port)),
        "default_model": models.get("default") or Settings.default_model,
        "available_models": [str(name) for name in available],
        "data_dir": storage.get("data_dir") or Settings.data_dir,
        "recent_capacity": _parse_int(storage.get("recent_capacity", Settings.recent_capacity), "storage.recent_capacity"),
        "request_timeout": _parse_float(api.get("timeout", Settings.request_timeout), "api.timeout"),
        "system_prompt": api.get("system_prompt") or DEFAULT_SYSTEM_PROMPT,
    }

    if os.getenv("OPENAI_BASE_URL"):
        values["api_base_url"] = os.environ["OPENAI_BASE_URL"]
    if os.getenv("OPENAI_API_KEY"):
        values["api_key"] = os.environ["OPENAI_API_KEY"]
    if os.getenv("OPENAI_MODEL"):
        values["default_model"] = os.environ["OPENAI_MODEL"]
    models_env = os.getenv("OPENAI_MODELS", "")
    if models_env:
        values["available_models"] = [name.strip() for name in models_env.split(",") if name.strip()]
    if os.getenv("HOST"):
        values["host"] = os.environ["HOST"]
    if os.getenv("PORT"):
        values["port"] = _parse_port(os.environ["PORT"])
    if os.getenv("DATA_DIR"):
        values["data_dir"] = os.environ["DATA_DIR"]
    if os.getenv("UPSTREAM_TIMEOUT"):
        values["request_timeout"] = _parse_float(os.environ["UPSTREAM_TIMEOUT"], "UPSTREAM_TIMEOUT")

    return Settings(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


__all__ = [
    "ConfigError",
    "DEFAULT_SYSTEM_PROMPT",
    "Settings",
    "get_settings",
    "load_settings",
]
