from .models import AppConfig, ConverterConfig, LoggingConfig
from pathlib import Path
from typing import Optional, Union
import logging
import tomllib

from pydantic import ValidationError

from errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "casekit.toml"


def _deep_update(base: dict, updates: dict) -> dict:
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            base[key] = _deep_update(base[key], value)
        else:
            base[key] = value
    return base


def _find_config(path: Optional[Union[str, Path]]) -> Optional[Path]:
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        return config_path

    candidate = Path.cwd() / DEFAULT_CONFIG_NAME
    return candidate if candidate.exists() else None


def load_settings(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """
    Build settings from defaults, environment and an optional TOML file.

    Without ``path`` a ``casekit.toml`` in the working directory is used when
    present. An explicit path that does not exist is an error.
    """
    config_path = _find_config(path)

    raw: dict = {}
    if config_path is not None:
        try:
            with open(config_path, "rb") as f:
                raw = tomllib.load(f)
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to read config {config_path}", source=e) from e

    source = config_path or "environment"
    try:
        base = AppConfig().model_dump()
        config = AppConfig.model_validate(_deep_update(base, raw))
    except ValidationError as e:
        raise ConfigError(f"Invalid config from {source}", source=e) from e

    logger.debug(f"Loaded config from {source}")
    return config


# Loaded lazily by get_settings(); importing never reads casekit.toml.
settings: Optional[AppConfig] = None

def get_settings() -> AppConfig:
    global settings
    if settings is None:
        settings = load_settings()
    return settings

def update_settings(new_settings: AppConfig):
    global settings
    settings = new_settings
