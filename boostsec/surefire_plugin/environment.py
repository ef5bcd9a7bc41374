"""Build the execution plan handed to the test engine."""

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from boostsec.surefire_plugin.models.battery import Battery
from boostsec.surefire_plugin.models.config import ForkMode, SurefireConfig
from boostsec.surefire_plugin.models.execution import ExecutionPlan, ForkSettings
from boostsec.surefire_plugin.models.reporter import Reporter

logger = logging.getLogger(__name__)


def merge_system_properties(
    basedir: Path,
    local_repository: Path,
    user_properties: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Merge the implicit system properties with the configured ones.

    ``basedir`` and ``localRepository`` are set first and configured entries
    are applied after them, so a configured key with one of those names
    replaces the implicit value.
    """
    properties = {
        "basedir": str(basedir.absolute()),
        "localRepository": str(local_repository),
    }

    for key, value in (user_properties or {}).items():
        logger.debug(f"Setting system property [{key}]=[{value}]")
        properties[key] = value

    return properties


def build_execution_plan(
    config: SurefireConfig,
    batteries: Sequence[Battery],
    classpath: Sequence[str],
    reporters: Sequence[str | Reporter],
    debug: bool = False,
) -> ExecutionPlan:
    """Assemble the immutable execution plan for a run.

    Fork settings are only filled in when the fork mode is not ``none``.

    Args:
        config: Plugin configuration
        batteries: Resolved test batteries
        classpath: Ordered test path
        reporters: Selected reporter identities
        debug: Enable engine debug output for forked runs

    Returns:
        Execution plan

    """
    system_properties = merge_system_properties(
        config.basedir, config.local_repository_path, config.system_properties
    )

    fork: ForkSettings | None = None
    if config.fork_mode is not ForkMode.NONE:
        fork = ForkSettings(
            mode=config.fork_mode,
            system_properties=system_properties,
            jvm=config.jvm,
            basedir=config.basedir.absolute(),
            arg_line=config.arg_line,
            environment_variables=config.environment_variables,
            working_directory=config.working_directory,
            child_delegation=config.child_delegation,
            debug=debug,
        )

    if config.reports_directory is None:
        raise ValueError("Reports directory is not set")

    return ExecutionPlan(
        groups=config.groups,
        excluded_groups=config.excluded_groups,
        thread_count=config.thread_count,
        parallel=config.parallel,
        test_source_directory=config.test_source_directory,
        reports_directory=config.reports_directory,
        batteries=list(batteries),
        reporters=[
            r.value if isinstance(r, Reporter) else r for r in reporters
        ],
        classpath=list(classpath),
        system_properties=system_properties,
        fork=fork,
    )
