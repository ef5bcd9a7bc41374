"""Tests for the suite descriptor loader."""

from pathlib import Path

import pytest

from boostsec.surefire_plugin.suite_loader import (
    load_suite_descriptor,
    suite_test_paths,
)


def test_load_suite_descriptor_valid(tmp_path: Path) -> None:
    """load_suite_descriptor loads and parses valid YAML."""
    suite_file = tmp_path / "smoke.yaml"
    suite_file.write_text(
        """
name: "smoke"
tests:
  - "tests/test_login.py"
  - "tests/test_checkout.py"
"""
    )

    descriptor = load_suite_descriptor(suite_file)

    assert descriptor.name == "smoke"
    assert descriptor.tests == ["tests/test_login.py", "tests/test_checkout.py"]


def test_load_suite_descriptor_without_tests(tmp_path: Path) -> None:
    """A suite without tests is valid."""
    suite_file = tmp_path / "empty.yaml"
    suite_file.write_text('name: "empty"\n')

    assert load_suite_descriptor(suite_file).tests == []


def test_load_suite_descriptor_file_not_found(tmp_path: Path) -> None:
    """load_suite_descriptor raises FileNotFoundError for missing file."""
    with pytest.raises(FileNotFoundError, match="Suite file not found"):
        load_suite_descriptor(tmp_path / "missing.yaml")


def test_load_suite_descriptor_invalid_yaml(tmp_path: Path) -> None:
    """load_suite_descriptor raises ValueError for invalid YAML."""
    suite_file = tmp_path / "broken.yaml"
    suite_file.write_text("name: [unclosed\n")

    with pytest.raises(ValueError, match="Invalid YAML"):
        load_suite_descriptor(suite_file)


def test_load_suite_descriptor_empty_file(tmp_path: Path) -> None:
    """load_suite_descriptor raises ValueError for an empty file."""
    suite_file = tmp_path / "blank.yaml"
    suite_file.write_text("")

    with pytest.raises(ValueError, match="Empty suite file"):
        load_suite_descriptor(suite_file)


def test_load_suite_descriptor_invalid_schema(tmp_path: Path) -> None:
    """load_suite_descriptor raises ValueError when the schema doesn't match."""
    suite_file = tmp_path / "nameless.yaml"
    suite_file.write_text("tests:\n  - test_a.py\n")

    with pytest.raises(ValueError, match="Invalid suite descriptor schema"):
        load_suite_descriptor(suite_file)


def test_suite_test_paths_are_relative_to_descriptor(tmp_path: Path) -> None:
    """suite_test_paths resolves tests against the descriptor's directory."""
    suites = tmp_path / "suites"
    suites.mkdir()
    suite_file = suites / "smoke.yaml"
    suite_file.write_text('name: "smoke"\ntests:\n  - "../tests/test_login.py"\n')

    assert suite_test_paths(suite_file) == [suites / "../tests/test_login.py"]
