"""Tests for the execution environment builder."""

from collections.abc import Callable
from pathlib import Path

import pytest

from boostsec.surefire_plugin.environment import (
    build_execution_plan,
    merge_system_properties,
)
from boostsec.surefire_plugin.models.battery import DirectoryBattery
from boostsec.surefire_plugin.models.config import ForkMode, SurefireConfig
from boostsec.surefire_plugin.models.reporter import Reporter

ConfigFactory = Callable[..., SurefireConfig]


def test_merge_system_properties_implicit_keys(tmp_path: Path) -> None:
    """basedir and localRepository are always present."""
    properties = merge_system_properties(tmp_path, tmp_path / "repo")

    assert properties == {
        "basedir": str(tmp_path),
        "localRepository": str(tmp_path / "repo"),
    }


def test_merge_system_properties_user_entries_follow(tmp_path: Path) -> None:
    """Configured entries are applied after the implicit ones, in order."""
    properties = merge_system_properties(
        tmp_path, tmp_path / "repo", {"db.url": "sqlite://", "env": "ci"}
    )

    assert list(properties) == ["basedir", "localRepository", "db.url", "env"]
    assert properties["db.url"] == "sqlite://"


def test_merge_system_properties_last_write_wins(tmp_path: Path) -> None:
    """A configured key named like an implicit one replaces it."""
    properties = merge_system_properties(
        tmp_path, tmp_path / "repo", {"basedir": "/elsewhere"}
    )

    assert properties["basedir"] == "/elsewhere"


def test_build_execution_plan_in_process(config_factory: ConfigFactory) -> None:
    """Without forking the plan carries no fork settings."""
    config = config_factory(
        groups="fast",
        excluded_groups="slow",
        thread_count=4,
        parallel=True,
        system_properties={"key": "value"},
        jvm="/opt/python",
    )
    battery = DirectoryBattery(directory=config.test_classes_directory)

    plan = build_execution_plan(
        config, [battery], ["/a", "/b"], [Reporter.CONSOLE, Reporter.XML]
    )

    assert plan.fork is None
    assert plan.groups == "fast"
    assert plan.excluded_groups == "slow"
    assert plan.thread_count == 4
    assert plan.parallel is True
    assert plan.test_source_directory == config.test_source_directory
    assert plan.reports_directory == config.reports_directory
    assert plan.batteries == [battery]
    assert plan.classpath == ["/a", "/b"]
    assert plan.reporters == ["ConsoleReporter", "XMLReporter"]
    assert plan.system_properties["key"] == "value"
    assert plan.system_properties["basedir"] == str(config.basedir.absolute())


def test_build_execution_plan_forked(config_factory: ConfigFactory) -> None:
    """Forking fills in the child process settings."""
    config = config_factory(
        fork_mode=ForkMode.ONCE,
        jvm="/opt/python",
        arg_line="-X dev",
        environment_variables={"LANG": "C"},
        working_directory=Path("/work"),
        child_delegation=False,
        system_properties={"key": "value"},
    )

    plan = build_execution_plan(config, [], [], [Reporter.XML], debug=True)

    assert plan.fork is not None
    assert plan.fork.mode is ForkMode.ONCE
    assert plan.fork.jvm == "/opt/python"
    assert plan.fork.basedir == config.basedir.absolute()
    assert plan.fork.arg_line == "-X dev"
    assert plan.fork.environment_variables == {"LANG": "C"}
    assert plan.fork.working_directory == Path("/work")
    assert plan.fork.child_delegation is False
    assert plan.fork.debug is True
    assert plan.fork.system_properties == plan.system_properties


def test_build_execution_plan_debug_off_by_default(
    config_factory: ConfigFactory,
) -> None:
    """The debug flag is only set on request."""
    config = config_factory(fork_mode=ForkMode.PERTEST)

    plan = build_execution_plan(config, [], [], [])

    assert plan.fork is not None
    assert plan.fork.debug is False


def test_build_execution_plan_requires_reports_directory(
    config_factory: ConfigFactory,
) -> None:
    """A configuration without reports directory cannot be planned."""
    config = config_factory().model_copy(update={"reports_directory": None})

    with pytest.raises(ValueError, match="Reports directory is not set"):
        build_execution_plan(config, [], [], [])
