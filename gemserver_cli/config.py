"""
CLI Configuration

Locates the configuration file for the CLI and layers environment
variables on top of it.
"""

from __future__ import annotations

from pathlib import Path

from gemserver.config import GemserverConfig


def default_config_paths() -> list[Path]:
    """Config files checked, in order, when no --config is given."""
    return [
        Path.cwd() / "gemserver.yaml",
        Path.cwd() / ".gemserver.yaml",
        Path.home() / ".config" / "gemserver" / "config.yaml",
    ]


def load_config(config_path: Path | None = None) -> GemserverConfig:
    """
    Load configuration from file and/or environment.

    Environment variables override file settings. An explicit config path
    must exist; the default locations are optional.

    Args:
        config_path: Optional path to config file

    Returns:
        Merged configuration
    """
    config = GemserverConfig()

    if config_path is not None:
        config = GemserverConfig.from_yaml(config_path)
    else:
        for default_path in default_config_paths():
            if default_path.exists():
                config = GemserverConfig.from_yaml(default_path)
                break

    return config.with_env_overrides()


def get_default_config_template() -> str:
    """Get a template configuration file."""
    return """\
# Host of the gemserver. Leave empty to look it up with `gcloud app describe`.
host:

http:
  # Request timeout in seconds (empty waits indefinitely)
  timeout:
  # Fail on non-2xx responses instead of printing the body
  raise_for_status: false

resolver:
  command: gcloud
  project:

log_level: INFO
log_file:
"""
