"""Shared fixtures for unit tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from boostsec.surefire_plugin.models.config import SurefireConfig

ConfigFactory = Callable[..., SurefireConfig]


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project layout with main and test output directories."""
    (tmp_path / "src").mkdir()
    (tmp_path / "tests").mkdir()
    return tmp_path


@pytest.fixture
def config_factory(project_dir: Path) -> ConfigFactory:
    """Build configurations for the project, with field overrides."""

    def factory(**overrides: object) -> SurefireConfig:
        values: dict[str, object] = {
            "basedir": project_dir,
            "classes_directory": project_dir / "src",
            "test_classes_directory": project_dir / "tests",
            "classpath_elements": [],
            "test_source_directory": project_dir / "tests",
            "local_repository_path": project_dir / "repository",
        }
        values.update(overrides)
        return SurefireConfig.model_validate(values)

    return factory
