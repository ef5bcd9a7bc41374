"""Expose the run's system properties to test code.

In process runs register a ``SystemPropertiesPlugin`` instance; forked runs
load this module with ``-p`` and read the JSON snapshot named by
``SUREFIRE_PROPERTIES_FILE``. Either way tests request the
``system_properties`` fixture.
"""

import json
import os
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

import pytest

PROPERTIES_FILE_ENV = "SUREFIRE_PROPERTIES_FILE"


def write_properties_file(path: Path, properties: Mapping[str, str]) -> Path:
    """Write a property snapshot for a child process."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(dict(properties), indent=2, sort_keys=True))
    return path


def load_properties(path: Path | None = None) -> dict[str, str]:
    """Load the property snapshot named by the environment.

    Raises:
        ValueError: If the snapshot is not a JSON object

    """
    if path is None:
        env_path = os.environ.get(PROPERTIES_FILE_ENV)
        if not env_path:
            return {}
        path = Path(env_path)

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid system properties file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"System properties file {path} must hold an object")
    return {str(k): str(v) for k, v in data.items()}


def export_system_properties(properties: Mapping[str, str]) -> None:
    """Publish system properties into ``os.environ``.

    Compatibility shim for test code that reads properties from the global
    environment. Writes are not atomic: concurrent builds in one process
    race on them.
    """
    for key, value in properties.items():
        os.environ[key] = value


class SystemPropertiesPlugin:
    """pytest plugin serving a fixed property mapping."""

    def __init__(self, properties: Mapping[str, str]) -> None:
        """Initialize plugin with the run's system properties."""
        self.properties = MappingProxyType(dict(properties))

    @pytest.fixture(scope="session")
    def system_properties(self) -> Mapping[str, str]:
        """System properties of the current run."""
        return self.properties


@pytest.fixture(scope="session")
def system_properties() -> Mapping[str, str]:
    """System properties of the current forked run."""
    return MappingProxyType(load_properties())
