"""Assemble the ordered test path handed to the test engine."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Literal

from boostsec.surefire_plugin.models.config import ArtifactRef

logger = logging.getLogger(__name__)

# Plugin artifacts allowed onto the test path: the test framework, its plugin
# organisation, the engine's own group and the plugin utility library.
CLASSPATH_ALLOW_LIST: frozenset[tuple[Literal["group_id", "artifact_id"], str]] = (
    frozenset(
        {
            ("artifact_id", "pytest"),
            ("group_id", "pytest-dev"),
            ("group_id", "boostsec"),
            ("artifact_id", "pluggy"),
        }
    )
)


def is_allowed(artifact: ArtifactRef) -> bool:
    """Check whether a plugin artifact belongs on the test path."""
    return ("artifact_id", artifact.artifact_id) in CLASSPATH_ALLOW_LIST or (
        "group_id",
        artifact.group_id,
    ) in CLASSPATH_ALLOW_LIST


def assemble_classpath(
    test_classes_directory: Path,
    classes_directory: Path,
    classpath_elements: Sequence[str],
    plugin_artifacts: Iterable[ArtifactRef],
) -> list[str]:
    """Build the test path in load order.

    Order is test output, main output, declared dependencies, then the allowed
    plugin artifacts. Duplicates are kept: the first occurrence wins when the
    engine resolves imports.

    Args:
        test_classes_directory: Test output directory
        classes_directory: Main output directory
        classpath_elements: Declared test dependency paths
        plugin_artifacts: Runtime artifacts of the plugin

    Returns:
        Ordered list of paths

    """
    logger.debug("Test Classpath :")

    classpath: list[str] = []

    for element in (str(test_classes_directory), str(classes_directory)):
        logger.debug(element)
        classpath.append(element)

    for element in classpath_elements:
        logger.debug(element)
        classpath.append(element)

    for artifact in plugin_artifacts:
        if not is_allowed(artifact):
            continue
        path = str(artifact.file.absolute())
        logger.debug(f"Adding to surefire test classpath: {path}")
        classpath.append(path)

    return classpath
