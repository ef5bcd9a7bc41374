"""Run orchestrator sequencing test selection, configuration and execution."""

import logging
from enum import Enum

from boostsec.surefire_plugin.classpath import assemble_classpath
from boostsec.surefire_plugin.engines.base import TestEngine
from boostsec.surefire_plugin.environment import build_execution_plan
from boostsec.surefire_plugin.errors import SurefireExecutionError
from boostsec.surefire_plugin.models.config import SurefireConfig
from boostsec.surefire_plugin.models.execution import ExecutionPlan
from boostsec.surefire_plugin.pattern_resolver import resolve_batteries
from boostsec.surefire_plugin.properties_plugin import export_system_properties
from boostsec.surefire_plugin.reporters import select_reporters

logger = logging.getLogger(__name__)

TEST_FAILURES_MESSAGE = "There are test failures."


class RunState(str, Enum):
    """Lifecycle of a single plugin invocation."""

    IDLE = "idle"
    SKIPPED = "skipped"
    NO_TESTS = "no_tests"
    CONFIGURING = "configuring"
    INVOKING = "invoking"
    SUCCEEDED = "succeeded"
    FAILED_TOLERATED = "failed_tolerated"
    FAILED_FATAL = "failed_fatal"


class SurefireOrchestrator:
    """Orchestrates one test run against a test engine."""

    def __init__(self, engine: TestEngine) -> None:
        """Initialize orchestrator with the engine that runs the tests."""
        self.engine = engine
        self.state = RunState.IDLE

    async def execute(self, config: SurefireConfig) -> RunState:
        """Run the configured tests and apply the failure policy.

        Args:
            config: Plugin configuration

        Returns:
            Final state; SKIPPED, NO_TESTS, SUCCEEDED or FAILED_TOLERATED

        Raises:
            SurefireExecutionError: If tests fail and failures are not ignored,
                or if the engine raises

        """
        if config.skip:
            logger.info("Tests are skipped.")
            self.state = RunState.SKIPPED
            return self.state

        if not config.test_classes_directory.exists():
            logger.info("No tests to run.")
            self.state = RunState.NO_TESTS
            return self.state

        self.state = RunState.CONFIGURING
        plan = self.configure(config)

        if config.export_system_properties:
            export_system_properties(plan.system_properties)

        self.state = RunState.INVOKING
        try:
            result = await self.engine.run(plan)
        except Exception as e:
            self.state = RunState.FAILED_FATAL
            logger.exception("Test engine failed")
            raise SurefireExecutionError("Error executing surefire") from e

        logger.info(f"Test engine finished: {result.tests_run} test files run")

        if result.success:
            self.state = RunState.SUCCEEDED
            return self.state

        if config.test_failure_ignore:
            logger.error(TEST_FAILURES_MESSAGE)
            self.state = RunState.FAILED_TOLERATED
            return self.state

        self.state = RunState.FAILED_FATAL
        raise SurefireExecutionError(TEST_FAILURES_MESSAGE)

    def configure(self, config: SurefireConfig) -> ExecutionPlan:
        """Resolve batteries, test path and reporters into an execution plan."""
        logger.info(f"Setting reports dir: {config.reports_directory}")

        batteries = resolve_batteries(
            config.test_classes_directory,
            test=config.test,
            includes=config.includes,
            excludes=config.excludes,
            suite_xml_files=config.suite_xml_files,
            extension=config.test_source_extension,
        )
        logger.info(f"Resolved {len(batteries)} test batteries")

        classpath = assemble_classpath(
            config.test_classes_directory,
            config.classes_directory,
            config.classpath_elements,
            config.plugin_artifacts,
        )

        reporters = select_reporters(
            config.use_file,
            config.print_summary,
            config.report_format,
            config.forking,
        )
        logger.debug(f"Reporters: {[r.value for r in reporters]}")

        return build_execution_plan(
            config,
            batteries,
            classpath,
            reporters,
            debug=logger.isEnabledFor(logging.DEBUG),
        )
