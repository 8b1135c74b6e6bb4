"""Configuration loader for the trace annotator."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from trace_annotator.domain.errors import ConfigError


class AppConfig(BaseModel):
    name: str = Field(default="trace-annotator")
    environment: str = Field(default="development")
    logs_dir: str = Field(default="./logs")


class ExamplesConfig(BaseModel):
    directory: str = Field(default="./data/examples")
    default: str = Field(default="")
    base_url: str = Field(default="")
    timeout_s: int = Field(default=20)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")


class Settings(BaseModel):
    app: AppConfig = Field(default_factory=AppConfig)
    examples: ExamplesConfig = Field(default_factory=ExamplesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG_PATH = Path("config/default.yaml")

_INT_KEYS = {"timeout_s"}


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")
    return data


def _apply_env_overrides(data: dict) -> dict:
    overrides = {
        ("app", "environment"): os.getenv("APP_ENV"),
        ("app", "logs_dir"): os.getenv("LOGS_DIR"),
        ("logging", "level"): os.getenv("LOG_LEVEL"),
        ("examples", "directory"): os.getenv("EXAMPLES_DIR"),
        ("examples", "default"): os.getenv("EXAMPLES_DEFAULT"),
        ("examples", "base_url"): os.getenv("EXAMPLES_BASE_URL"),
        ("examples", "timeout_s"): os.getenv("EXAMPLES_TIMEOUT_S"),
    }
    for (section, key), value in overrides.items():
        if value is None:
            continue
        if section not in data or data[section] is None:
            data[section] = {}
        if key in _INT_KEYS:
            try:
                data[section][key] = int(value)
            except ValueError as exc:
                raise ConfigError(f"{section}.{key} must be an integer, got {value!r}") from exc
            continue
        data[section][key] = value
    return data


def load_config(path: Optional[Path] = None) -> Settings:
    """Load configuration from YAML and environment variables."""
    load_dotenv()
    config_path = path or DEFAULT_CONFIG_PATH
    raw = _load_yaml(config_path)
    merged = _apply_env_overrides(raw)
    settings = Settings(**merged)

    Path(settings.app.logs_dir).mkdir(parents=True, exist_ok=True)
    return settings


__all__ = [
    "Settings",
    "AppConfig",
    "ExamplesConfig",
    "LoggingConfig",
    "load_config",
]
