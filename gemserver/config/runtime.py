"""
Runtime Configuration

Central configuration for the gemserver admin client: target host,
HTTP behavior, host resolution and logging.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Optional
from pathlib import Path

import yaml
from dotenv import load_dotenv

from gemserver.schemas.errors import ConfigError

load_dotenv()


# Environment variable prefix
ENV_PREFIX = "GEMSERVER_"

_DEFAULT_HTTP_USER_AGENT = "gemserver-admin/0.1.0"


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in _TRUE_VALUES


def _as_bool(name: str, value: Any) -> bool:
    """Coerce a config flag; YAML may hand over quoted strings."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    if isinstance(value, str):
        if value.strip().lower() in _TRUE_VALUES:
            return True
        if value.strip().lower() in _FALSE_VALUES:
            return False
    raise ConfigError(f"{name} must be true or false, got {value!r}")


def _as_timeout(value: Any) -> Optional[float]:
    """Coerce a timeout in seconds; None and "" mean no timeout."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ConfigError(f"http.timeout must be a number of seconds, got {value!r}")
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"http.timeout must be a number of seconds, got {value!r}") from e
    if timeout <= 0:
        raise ConfigError(f"http.timeout must be positive, got {value!r}")
    return timeout


@dataclass
class HttpConfig:
    """Configuration for the HTTP transport."""
    timeout: Optional[float] = None
    raise_for_status: bool = False
    user_agent: str = _DEFAULT_HTTP_USER_AGENT

    def __post_init__(self):
        self.timeout = _as_timeout(self.timeout)
        self.raise_for_status = _as_bool("http.raise_for_status", self.raise_for_status)
        if not isinstance(self.user_agent, str) or not self.user_agent:
            self.user_agent = _DEFAULT_HTTP_USER_AGENT


@dataclass
class ResolverConfig:
    """Configuration for resolving the host through gcloud."""
    command: str = "gcloud"
    project: Optional[str] = None


@dataclass
class GemserverConfig:
    """
    Complete configuration for the gemserver admin client.

    Can be loaded from:
    - Environment variables (and a .env file)
    - YAML file
    - Programmatic construction
    """
    host: Optional[str] = None
    http: HttpConfig = field(default_factory=HttpConfig)
    resolver: ResolverConfig = field(default_factory=ResolverConfig)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - GEMSERVER_HOST: gemserver host (skips gcloud lookup)
        - GEMSERVER_HTTP_TIMEOUT: request timeout in seconds
        - GEMSERVER_RAISE_FOR_STATUS: raise on non-2xx responses (true/false)
        - GEMSERVER_GCLOUD_COMMAND: gcloud executable
        - GEMSERVER_GCLOUD_PROJECT: project passed to gcloud
        - GEMSERVER_LOG_LEVEL: log level
        - GEMSERVER_LOG_FILE: log file path
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}HOST"):
            overrides["host"] = os.getenv(f"{ENV_PREFIX}HOST")

        # HTTP settings
        if os.getenv(f"{ENV_PREFIX}HTTP_TIMEOUT"):
            overrides.setdefault("http", {})["timeout"] = _as_timeout(
                os.getenv(f"{ENV_PREFIX}HTTP_TIMEOUT")
            )
        if os.getenv(f"{ENV_PREFIX}RAISE_FOR_STATUS"):
            overrides.setdefault("http", {})["raise_for_status"] = _env_flag(
                f"{ENV_PREFIX}RAISE_FOR_STATUS"
            )

        # Resolver settings
        if os.getenv(f"{ENV_PREFIX}GCLOUD_COMMAND"):
            overrides.setdefault("resolver", {})["command"] = os.getenv(
                f"{ENV_PREFIX}GCLOUD_COMMAND"
            )
        if os.getenv(f"{ENV_PREFIX}GCLOUD_PROJECT"):
            overrides.setdefault("resolver", {})["project"] = os.getenv(
                f"{ENV_PREFIX}GCLOUD_PROJECT"
            )

        # Logging
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if os.getenv(f"{ENV_PREFIX}LOG_FILE"):
            overrides["log_file"] = os.getenv(f"{ENV_PREFIX}LOG_FILE")

        return overrides

    @classmethod
    def from_env(cls) -> "GemserverConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "GemserverConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", path=str(path))

        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid YAML in {path}: {e}", path=str(path)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}", path=str(path))

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GemserverConfig":
        """Load configuration from a dictionary (supports partial data)."""
        http_data = data.get("http") or {}
        resolver_data = data.get("resolver") or {}

        try:
            http = HttpConfig(**http_data)
            resolver = ResolverConfig(**resolver_data)
        except TypeError as e:
            raise ConfigError(f"Unknown configuration key: {e}") from e

        host = data.get("host")
        return cls(
            host=str(host) if host is not None else None,
            http=http,
            resolver=resolver,
            log_level=str(data.get("log_level") or "INFO"),
            log_file=data.get("log_file"),
        )

    def with_env_overrides(self) -> "GemserverConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        import copy
        new_config = copy.deepcopy(self)

        for section in ("http", "resolver"):
            if section in overrides:
                for key, value in overrides[section].items():
                    setattr(getattr(new_config, section), key, value)

        for key in ("host", "log_level", "log_file"):
            if key in overrides:
                setattr(new_config, key, overrides[key])

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "host": self.host,
            "http": {
                "timeout": self.http.timeout,
                "raise_for_status": self.http.raise_for_status,
                "user_agent": self.http.user_agent,
            },
            "resolver": {
                "command": self.resolver.command,
                "project": self.resolver.project,
            },
            "log_level": self.log_level,
            "log_file": self.log_file,
        }


# Global default configuration
_default_config: Optional[GemserverConfig] = None


def get_default_config() -> GemserverConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = GemserverConfig.from_env()
    return _default_config


def set_default_config(config: Optional[GemserverConfig]) -> None:
    """Set (or with None, reset) the default runtime configuration."""
    global _default_config
    _default_config = config
