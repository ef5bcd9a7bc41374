"""Load plugin configuration from YAML files."""

from pathlib import Path

import yaml

from boostsec.surefire_plugin.models.config import SurefireConfig


def load_config(config_path: Path) -> SurefireConfig:
    """Load the plugin configuration.

    Args:
        config_path: Path to the surefire configuration file

    Returns:
        Validated configuration

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If YAML is invalid or doesn't match schema

    """
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty configuration file: {config_path}")

    try:
        return SurefireConfig.model_validate(data)
    except Exception as e:
        raise ValueError(f"Invalid configuration in {config_path}: {e}") from e
