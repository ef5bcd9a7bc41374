"""Resolve which tests are in scope for a run."""

import logging
from collections.abc import Sequence
from pathlib import Path

from boostsec.surefire_plugin.models.battery import (
    Battery,
    DirectoryBattery,
    SuiteBattery,
)
from boostsec.surefire_plugin.tokenizer import split

logger = logging.getLogger(__name__)


def default_includes(extension: str = "*") -> list[str]:
    """Include patterns used when none are configured."""
    return [
        f"**/Test*.{extension}",
        f"**/*Test.{extension}",
        f"**/*TestCase.{extension}",
    ]


def default_excludes(extension: str = "*") -> list[str]:
    """Exclude patterns used when none are configured."""
    return [
        f"**/Abstract*Test.{extension}",
        f"**/Abstract*TestCase.{extension}",
        "**/*$*",
    ]


def resolve_batteries(
    test_classes_directory: Path,
    test: str | None = None,
    includes: Sequence[str] | None = None,
    excludes: Sequence[str] | None = None,
    suite_xml_files: Sequence[str] | None = None,
    extension: str = "*",
) -> list[Battery]:
    """Build the batteries for a run.

    A test filter wins over suite descriptors, which win over include and
    exclude patterns. Suite descriptors that do not exist are skipped, so
    the result may be empty.

    Args:
        test_classes_directory: Directory scanned by directory batteries
        test: Comma separated test names (e.g. "FooTest,BarTest")
        includes: Include patterns; defaults apply when empty
        excludes: Exclude patterns; defaults apply when empty
        suite_xml_files: Suite descriptor file paths
        extension: Test source extension used in generated patterns

    Returns:
        List of batteries to run

    """
    if test is not None:
        # FooTest -> **/FooTest.<extension>
        test_includes = [f"**/{name}.{extension}" for name in split(test, ",", -1)]
        logger.info(f"Running tests matching filter: {test}")
        return [
            DirectoryBattery(
                directory=test_classes_directory, includes=test_includes, excludes=[]
            )
        ]

    if suite_xml_files:
        batteries: list[Battery] = []
        for file_path in suite_xml_files:
            path = Path(file_path)
            if path.exists():
                batteries.append(SuiteBattery(path=path))
            else:
                logger.debug(f"Suite file {file_path} does not exist, skipping")
        return batteries

    return [
        DirectoryBattery(
            directory=test_classes_directory,
            includes=list(includes) if includes else default_includes(extension),
            excludes=list(excludes) if excludes else default_excludes(extension),
        )
    ]
