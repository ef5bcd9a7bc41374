"""Tests for the pattern resolver."""

from pathlib import Path

from boostsec.surefire_plugin.models.battery import DirectoryBattery, SuiteBattery
from boostsec.surefire_plugin.pattern_resolver import (
    default_excludes,
    default_includes,
    resolve_batteries,
)


def test_resolve_test_filter_builds_includes(tmp_path: Path) -> None:
    """A test filter becomes one include per name and no excludes."""
    suite = tmp_path / "suite.yaml"
    suite.write_text("name: suite\n")

    batteries = resolve_batteries(
        tmp_path,
        test="FooTest,BarTest",
        includes=["**/*.py"],
        excludes=["**/skip.py"],
        suite_xml_files=[str(suite)],
    )

    assert batteries == [
        DirectoryBattery(
            directory=tmp_path,
            includes=["**/FooTest.*", "**/BarTest.*"],
            excludes=[],
        )
    ]


def test_resolve_test_filter_uses_extension(tmp_path: Path) -> None:
    """The source extension is used in generated includes."""
    batteries = resolve_batteries(tmp_path, test="test_math", extension="py")

    assert isinstance(batteries[0], DirectoryBattery)
    assert batteries[0].includes == ["**/test_math.py"]


def test_resolve_suite_files(tmp_path: Path) -> None:
    """Each existing suite file becomes a suite battery, in order."""
    first = tmp_path / "first.yaml"
    second = tmp_path / "second.yaml"
    first.write_text("name: first\n")
    second.write_text("name: second\n")

    batteries = resolve_batteries(
        tmp_path,
        includes=["**/*.py"],
        suite_xml_files=[str(second), str(first)],
    )

    assert batteries == [SuiteBattery(path=second), SuiteBattery(path=first)]


def test_resolve_suite_files_skips_missing(tmp_path: Path) -> None:
    """Missing suite files are skipped without error."""
    existing = tmp_path / "suite.yaml"
    existing.write_text("name: suite\n")

    batteries = resolve_batteries(
        tmp_path,
        suite_xml_files=[str(tmp_path / "missing.yaml"), str(existing)],
    )

    assert batteries == [SuiteBattery(path=existing)]


def test_resolve_all_suite_files_missing(tmp_path: Path) -> None:
    """No battery is produced when every suite file is missing."""
    batteries = resolve_batteries(
        tmp_path, suite_xml_files=[str(tmp_path / "missing.yaml")]
    )

    assert batteries == []


def test_resolve_defaults(tmp_path: Path) -> None:
    """Default patterns apply when nothing is configured."""
    batteries = resolve_batteries(tmp_path)

    assert batteries == [
        DirectoryBattery(
            directory=tmp_path,
            includes=["**/Test*.*", "**/*Test.*", "**/*TestCase.*"],
            excludes=["**/Abstract*Test.*", "**/Abstract*TestCase.*", "**/*$*"],
        )
    ]


def test_resolve_empty_lists_use_defaults(tmp_path: Path) -> None:
    """Empty include and exclude lists fall back to the defaults."""
    batteries = resolve_batteries(
        tmp_path, includes=[], excludes=[], suite_xml_files=[]
    )

    assert batteries == [
        DirectoryBattery(
            directory=tmp_path,
            includes=default_includes(),
            excludes=default_excludes(),
        )
    ]


def test_resolve_custom_includes_keep_default_excludes(tmp_path: Path) -> None:
    """Configured includes do not replace the default excludes."""
    batteries = resolve_batteries(tmp_path, includes=["**/test_*.py"])

    assert batteries == [
        DirectoryBattery(
            directory=tmp_path,
            includes=["**/test_*.py"],
            excludes=default_excludes(),
        )
    ]


def test_default_patterns_with_extension() -> None:
    """Default patterns use the given extension, except the nested marker."""
    assert default_includes("py") == ["**/Test*.py", "**/*Test.py", "**/*TestCase.py"]
    assert default_excludes("py")[-1] == "**/*$*"
