"""
Configuration models and loading logic for the Superset SDK.

The goal of this module is to provide a single place where runtime
configuration (Superset URL, credentials, timeouts, logging and serializer
settings) is defined and loaded from the environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Optional

from .errors import ConfigError


@dataclass
class SupersetConfig:
    """
    Connection settings for a Superset instance.
    """

    base_url: str
    username: Optional[str] = None
    password: Optional[str] = None
    provider: str = "db"  # "db" or "ldap"
    api_version: str = "v1"
    timeout_seconds: int = 30
    verify_ssl: bool = True


@dataclass
class LoggingConfig:
    """
    Logging-related configuration.
    """

    log_file: Optional[str] = None
    log_level: str = "INFO"


@dataclass
class SerializerConfig:
    """
    Serializer behaviour.

    ``require_timezone``: reject timestamps without an explicit UTC offset.
    When disabled, naive timestamps are read as UTC.
    """

    require_timezone: bool = True


@dataclass
class SdkConfig:
    """
    Top-level configuration for the SDK.
    """

    superset: Optional[SupersetConfig] = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    serializer: SerializerConfig = field(default_factory=SerializerConfig)


def _require_env(name: str) -> str:
    """
    Read a required environment variable or raise ConfigError if missing.
    """

    value = os.getenv(name)
    if not value:
        raise ConfigError(f"Required environment variable {name!r} is not set")
    return value


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{name} must be a boolean (got {raw!r})")


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer") from exc


def load_config() -> SdkConfig:
    """
    Load SDK configuration from environment variables.

    Environment variables:
        SUPERSET_SDK_BASE_URL: Base URL of the Superset instance.
        SUPERSET_SDK_USERNAME / SUPERSET_SDK_PASSWORD: Login credentials.
        SUPERSET_SDK_PROVIDER: Auth provider (default: "db").
        SUPERSET_SDK_API_VERSION: REST API version (default: "v1").
        SUPERSET_SDK_TIMEOUT_SECONDS: Request timeout (default: 30).
        SUPERSET_SDK_VERIFY_SSL: Verify TLS certificates (default: true).

        SUPERSET_SDK_LOG_FILE: Optional log file path.
        SUPERSET_SDK_LOG_LEVEL: Log level (default: "INFO").

        SUPERSET_SDK_REQUIRE_TIMEZONE: Reject naive timestamps (default: true).

    If no Superset variable is set, ``superset`` is left as None. If the
    credentials are given, the base URL is required, and a username without a
    password (or the reverse) is rejected.
    """

    logging_cfg = LoggingConfig(
        log_file=os.getenv("SUPERSET_SDK_LOG_FILE") or None,
        log_level=os.getenv("SUPERSET_SDK_LOG_LEVEL", "INFO"),
    )

    serializer_cfg = SerializerConfig(
        require_timezone=_parse_bool(
            "SUPERSET_SDK_REQUIRE_TIMEZONE",
            os.getenv("SUPERSET_SDK_REQUIRE_TIMEZONE", "true"),
        ),
    )

    base_url = os.getenv("SUPERSET_SDK_BASE_URL")
    username = os.getenv("SUPERSET_SDK_USERNAME")
    password = os.getenv("SUPERSET_SDK_PASSWORD")

    superset_cfg: Optional[SupersetConfig]
    if base_url or username or password:
        base_url = _require_env("SUPERSET_SDK_BASE_URL")
        if bool(username) != bool(password):
            raise ConfigError(
                "SUPERSET_SDK_USERNAME and SUPERSET_SDK_PASSWORD must be set together"
            )
        superset_cfg = SupersetConfig(
            base_url=base_url,
            username=username,
            password=password,
            provider=os.getenv("SUPERSET_SDK_PROVIDER", "db"),
            api_version=os.getenv("SUPERSET_SDK_API_VERSION", "v1"),
            timeout_seconds=_parse_int(
                "SUPERSET_SDK_TIMEOUT_SECONDS",
                os.getenv("SUPERSET_SDK_TIMEOUT_SECONDS", "30"),
            ),
            verify_ssl=_parse_bool(
                "SUPERSET_SDK_VERIFY_SSL",
                os.getenv("SUPERSET_SDK_VERIFY_SSL", "true"),
            ),
        )
    else:
        superset_cfg = None

    return SdkConfig(
        superset=superset_cfg,
        logging=logging_cfg,
        serializer=serializer_cfg,
    )
