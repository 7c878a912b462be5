"""
JSON configuration storage for the Superset SDK.

This module loads and saves ``SdkConfig`` as a JSON document so that
deployments can keep connection settings in a file instead of the
environment.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

from .config import LoggingConfig, SdkConfig, SerializerConfig, SupersetConfig
from .errors import ConfigError


CONFIG_FILE = os.getenv("SUPERSET_SDK_CONFIG_FILE", "superset_sdk.json")


def _config_to_dict(config: SdkConfig) -> Dict[str, Any]:
    """Convert SdkConfig to a dictionary."""
    result: Dict[str, Any] = {
        "logging": {
            "log_file": config.logging.log_file,
            "log_level": config.logging.log_level,
        },
        "serializer": {
            "require_timezone": config.serializer.require_timezone,
        },
    }

    if config.superset:
        result["superset"] = {
            "base_url": config.superset.base_url,
            "username": config.superset.username,
            "password": config.superset.password,
            "provider": config.superset.provider,
            "api_version": config.superset.api_version,
            "timeout_seconds": config.superset.timeout_seconds,
            "verify_ssl": config.superset.verify_ssl,
        }

    return result


def _dict_to_config(data: Dict[str, Any]) -> SdkConfig:
    """Convert a dictionary to SdkConfig."""
    if not isinstance(data, dict):
        raise ConfigError("Config file must contain a JSON object")

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        log_file=logging_data.get("log_file"),
        log_level=logging_data.get("log_level", "INFO"),
    )

    serializer_data = data.get("serializer") or {}
    serializer_cfg = SerializerConfig(
        require_timezone=bool(serializer_data.get("require_timezone", True)),
    )

    superset_cfg = None
    superset_data = data.get("superset")
    if superset_data:
        if not superset_data.get("base_url"):
            raise ConfigError("'superset.base_url' is required in config file")
        try:
            timeout_seconds = int(superset_data.get("timeout_seconds", 30))
        except (TypeError, ValueError) as exc:
            raise ConfigError("'superset.timeout_seconds' must be an integer") from exc
        superset_cfg = SupersetConfig(
            base_url=superset_data["base_url"],
            username=superset_data.get("username"),
            password=superset_data.get("password"),
            provider=superset_data.get("provider", "db"),
            api_version=superset_data.get("api_version", "v1"),
            timeout_seconds=timeout_seconds,
            verify_ssl=bool(superset_data.get("verify_ssl", True)),
        )

    return SdkConfig(
        superset=superset_cfg,
        logging=logging_cfg,
        serializer=serializer_cfg,
    )


def load_config_from_file(config_path: str = CONFIG_FILE) -> SdkConfig:
    """
    Load configuration from a JSON file.

    Returns the default configuration when the file does not exist.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    config_file = Path(config_path)

    if not config_file.exists():
        return SdkConfig()

    try:
        with open(config_file, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to load config file: {e}") from e

    return _dict_to_config(data)


def save_config_to_file(config: SdkConfig, config_path: str = CONFIG_FILE) -> None:
    """
    Save configuration to a JSON file.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_file = Path(config_path)

    try:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w") as f:
            json.dump(_config_to_dict(config), f, indent=2)
    except OSError as e:
        raise ConfigError(f"Failed to save config file: {e}") from e
