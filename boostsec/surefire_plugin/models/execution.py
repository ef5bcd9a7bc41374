"""Models describing a fully configured test run."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from boostsec.surefire_plugin.models.battery import Battery
from boostsec.surefire_plugin.models.config import ForkMode


class ForkSettings(BaseModel):
    """Settings only meaningful when tests run in a child process."""

    model_config = ConfigDict(frozen=True)

    mode: ForkMode = Field(..., description="Once or per test")
    system_properties: dict[str, str] = Field(
        default_factory=dict, description="Property snapshot handed to the child"
    )
    jvm: str = Field(..., description="Interpreter executable")
    basedir: Path = Field(..., description="Absolute project base directory")
    arg_line: str | None = Field(default=None, description="Interpreter arguments")
    environment_variables: dict[str, str] = Field(
        default_factory=dict, description="Extra child environment"
    )
    working_directory: Path | None = Field(
        default=None, description="Child working directory"
    )
    child_delegation: bool = Field(
        default=True, description="Plugin path entries before inherited ones"
    )
    debug: bool = Field(default=False, description="Enable engine debug output")


class ExecutionPlan(BaseModel):
    """Immutable description of a test run, handed to a test engine."""

    model_config = ConfigDict(frozen=True)

    groups: str | None = Field(default=None, description="Groups to run")
    excluded_groups: str | None = Field(default=None, description="Groups to skip")
    thread_count: int = Field(default=0, description="Worker count (0: auto)")
    parallel: bool = Field(default=False, description="Run tests in parallel")
    test_source_directory: Path = Field(..., description="Test source directory")
    reports_directory: Path = Field(..., description="Report output directory")
    batteries: list[Battery] = Field(
        default_factory=list, description="Test discovery strategies"
    )
    reporters: list[str] = Field(
        default_factory=list, description="Reporter identities, in order"
    )
    classpath: list[str] = Field(
        default_factory=list, description="Import path entries, in load order"
    )
    system_properties: dict[str, str] = Field(
        default_factory=dict, description="System properties visible to tests"
    )
    fork: ForkSettings | None = Field(
        default=None, description="Child process settings; None runs in process"
    )
