"""Load and parse suite descriptors from YAML files."""

from pathlib import Path

import yaml

from boostsec.surefire_plugin.models.suite import SuiteDescriptor


def load_suite_descriptor(path: Path) -> SuiteDescriptor:
    """Load a suite descriptor.

    Args:
        path: Path to the suite descriptor file

    Returns:
        Parsed suite descriptor

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If YAML is invalid or doesn't match schema

    """
    if not path.exists():
        raise FileNotFoundError(f"Suite file not found: {path}")

    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty suite file: {path}")

    try:
        return SuiteDescriptor.model_validate(data)
    except Exception as e:
        raise ValueError(f"Invalid suite descriptor schema in {path}: {e}") from e


def suite_test_paths(path: Path) -> list[Path]:
    """Resolve the tests of a suite descriptor relative to its location."""
    descriptor = load_suite_descriptor(path)
    return [path.parent / test for test in descriptor.tests]
