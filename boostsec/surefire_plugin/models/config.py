"""Configuration models for the surefire plugin."""

import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ForkMode(str, Enum):
    """Where the tests are executed."""

    NONE = "none"
    ONCE = "once"
    PERTEST = "pertest"


class ReportFormat(str, Enum):
    """Formatting of the text test report."""

    BRIEF = "brief"
    PLAIN = "plain"
    XML = "xml"


def _scalar_to_str(value: Any) -> Any:
    # YAML scalars: 8080 -> "8080", true -> "true", empty -> ""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int | float):
        return str(value)
    return value


PropertyValue = Annotated[str, BeforeValidator(_scalar_to_str)]


class ArtifactRef(BaseModel):
    """A plugin runtime artifact that may be added to the test path."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    group_id: str = Field(..., description="Artifact group (organisation)")
    artifact_id: str = Field(..., description="Artifact name")
    file: Path = Field(..., description="Location of the artifact on disk")


class SurefireConfig(BaseModel):
    """Plugin parameters, as written in the surefire configuration file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    skip: bool = Field(default=False, description="Bypass tests entirely")
    test_failure_ignore: bool = Field(
        default=False, description="Log test failures instead of failing the build"
    )
    basedir: Path = Field(..., description="Base directory of the project")
    classes_directory: Path = Field(..., description="Main output directory")
    test_classes_directory: Path = Field(..., description="Test output directory")
    classpath_elements: list[str] = Field(
        ..., description="Declared test dependency paths, in load order"
    )
    reports_directory: Path | None = Field(
        default=None,
        description="Directory reports are written to "
        "(default: <basedir>/target/surefire-reports)",
    )
    test_source_directory: Path = Field(..., description="Test source directory")
    test: str | None = Field(
        default=None, description="Comma separated test names to run"
    )
    includes: list[str] | None = Field(
        default=None, description="Glob patterns of tests to include"
    )
    excludes: list[str] | None = Field(
        default=None, description="Glob patterns of tests to exclude"
    )
    test_source_extension: str = Field(
        default="*", description="Extension used when building test globs"
    )
    local_repository_path: Path = Field(
        ..., description="Local artifact repository directory"
    )
    system_properties: dict[str, PropertyValue] = Field(
        default_factory=dict, description="System properties passed to the tests"
    )
    export_system_properties: bool = Field(
        default=False,
        description="Also publish system properties into the process environment",
    )
    plugin_artifacts: list[ArtifactRef] = Field(
        default_factory=list, description="Runtime artifacts of the plugin"
    )
    print_summary: bool = Field(
        default=True, description="Print the summary of every test suite"
    )
    report_format: ReportFormat = Field(
        default=ReportFormat.BRIEF, description="Formatting of the test report"
    )
    use_file: bool = Field(
        default=True, description="Write the test report to a file"
    )
    fork_mode: ForkMode = Field(default=ForkMode.NONE, description="Forking mode")
    jvm: str = Field(
        default_factory=lambda: sys.executable,
        description="Interpreter used for forked test runs",
    )
    arg_line: str | None = Field(
        default=None, description="Extra interpreter arguments for forked runs"
    )
    environment_variables: dict[str, PropertyValue] = Field(
        default_factory=dict, description="Environment of forked runs"
    )
    working_directory: Path | None = Field(
        default=None, description="Working directory of forked runs"
    )
    child_delegation: bool = Field(
        default=True, description="Plugin path entries take precedence when forked"
    )
    groups: str | None = Field(
        default=None, description="Comma separated marker groups to run"
    )
    excluded_groups: str | None = Field(
        default=None, description="Comma separated marker groups to skip"
    )
    suite_xml_files: list[str] | None = Field(
        default=None, description="Suite descriptor files; other selections ignored"
    )
    thread_count: int = Field(
        default=0, ge=0, description="Worker count for parallel runs (0: auto)"
    )
    parallel: bool = Field(default=False, description="Run tests in parallel")

    @model_validator(mode="after")
    def _default_reports_directory(self) -> "SurefireConfig":
        if self.reports_directory is None:
            self.reports_directory = self.basedir / "target" / "surefire-reports"
        return self

    @property
    def forking(self) -> bool:
        """Whether tests run outside of the plugin process."""
        return self.fork_mode is not ForkMode.NONE
