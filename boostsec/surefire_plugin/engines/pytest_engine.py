"""pytest engine implementation."""

import asyncio
import contextlib
import io
import logging
import os
import shlex
import sys
from collections.abc import Sequence
from pathlib import Path

import pytest

from boostsec.surefire_plugin.engines.base import TestEngine
from boostsec.surefire_plugin.models.config import ForkMode
from boostsec.surefire_plugin.models.execution import ExecutionPlan
from boostsec.surefire_plugin.models.run_result import RunResult
from boostsec.surefire_plugin.properties_plugin import (
    PROPERTIES_FILE_ENV,
    SystemPropertiesPlugin,
    write_properties_file,
)
from boostsec.surefire_plugin.reporters import get_reporter
from boostsec.surefire_plugin.tokenizer import split

logger = logging.getLogger(__name__)

PROPERTIES_PLUGIN = "boostsec.surefire_plugin.properties_plugin"
SUCCESS_EXIT_CODES = frozenset(
    {int(pytest.ExitCode.OK), int(pytest.ExitCode.NO_TESTS_COLLECTED)}
)
DEFAULT_REPORT_NAME = "surefire"


def marker_expression(groups: str | None, excluded_groups: str | None) -> str | None:
    """Build a pytest ``-m`` expression from group lists.

    Args:
        groups: Comma separated groups to run (e.g. "fast, db")
        excluded_groups: Comma separated groups to skip

    Returns:
        Marker expression, or None when no group is configured

    """
    included = split(groups or "", ", ")
    excluded = split(excluded_groups or "", ", ")

    include_expr = " or ".join(included)
    exclude_expr = f"not ({' or '.join(excluded)})" if excluded else ""

    if included and excluded:
        return f"({include_expr}) and {exclude_expr}"
    return include_expr or exclude_expr or None


def per_test_report_name(test_file: Path, test_source_directory: Path) -> str:
    """Name the reports of a single test file after its dotted module path.

    ``tests/unit/test_a.py`` under ``tests`` becomes ``unit.test_a``. Files
    outside the test source directory use their full path.
    """
    try:
        relative = test_file.relative_to(test_source_directory)
    except ValueError:
        relative = test_file.relative_to(test_file.anchor)
    return ".".join(relative.with_suffix("").parts)


class PytestEngine(TestEngine):
    """Runs the planned tests with pytest, in process or in child processes."""

    def __init__(self, extra_args: Sequence[str] = ()) -> None:
        """Initialize engine with additional pytest arguments."""
        self.extra_args = list(extra_args)

    async def run(self, plan: ExecutionPlan) -> RunResult:
        """Run the planned tests and report the verdict."""
        test_files = self.collect_tests(plan)
        if not test_files:
            logger.info("No test files selected")
            return RunResult(success=True)

        plan.reports_directory.mkdir(parents=True, exist_ok=True)

        if plan.fork is None:
            return await asyncio.to_thread(self._run_in_process, plan, test_files)

        if plan.fork.mode is ForkMode.PERTEST:
            results = [
                await self._run_forked(
                    plan,
                    [test_file],
                    per_test_report_name(test_file, plan.test_source_directory),
                )
                for test_file in test_files
            ]
            return RunResult(
                success=all(r.success for r in results),
                tests_run=sum(r.tests_run for r in results),
                diagnostics="\n".join(r.diagnostics for r in results),
            )

        return await self._run_forked(plan, test_files, DEFAULT_REPORT_NAME)

    def build_args(
        self, plan: ExecutionPlan, test_files: Sequence[Path], report_name: str
    ) -> list[str]:
        """Translate the plan into pytest command line arguments."""
        args = [str(test_file) for test_file in test_files]

        marker = marker_expression(plan.groups, plan.excluded_groups)
        if marker:
            args.extend(["-m", marker])

        if plan.parallel:
            workers = str(plan.thread_count) if plan.thread_count > 0 else "auto"
            args.extend(["-n", workers])

        specs = [get_reporter(name) for name in plan.reporters]
        verbosities = {spec.verbosity for spec in specs}
        if "detailed" in verbosities:
            args.append("-v")
        elif "brief" in verbosities:
            args.append("-q")

        if any(spec.channel == "xml" for spec in specs):
            xml_report = plan.reports_directory / f"TEST-{report_name}.xml"
            args.append(f"--junitxml={xml_report}")

        # pytest-xdist workers see neither sys.path nor plugin objects.
        if plan.fork is None and plan.classpath:
            args.extend(["-o", f"pythonpath={shlex.join(plan.classpath)}"])

        if plan.fork is not None or plan.parallel:
            args.extend(["-p", PROPERTIES_PLUGIN])

        if plan.fork is not None and plan.fork.debug:
            args.append(f"--debug={plan.reports_directory / 'pytestdebug.log'}")

        args.extend(self.extra_args)
        return args

    def child_environment(
        self, plan: ExecutionPlan, properties_file: Path
    ) -> dict[str, str]:
        """Build the environment of a forked test process.

        Raises:
            ValueError: If the plan runs in process

        """
        if plan.fork is None:
            raise ValueError("Plan has no fork settings")

        env = dict(os.environ)
        env.update(plan.fork.environment_variables)

        entries = list(plan.classpath)
        inherited = env.get("PYTHONPATH")
        if inherited:
            if plan.fork.child_delegation:
                entries.append(inherited)
            else:
                entries.insert(0, inherited)

        env["PYTHONPATH"] = os.pathsep.join(entries)
        env[PROPERTIES_FILE_ENV] = str(properties_file)
        return env

    def _run_in_process(
        self, plan: ExecutionPlan, test_files: Sequence[Path]
    ) -> RunResult:
        args = self.build_args(plan, test_files, DEFAULT_REPORT_NAME)
        logger.debug(f"Running pytest in process: {' '.join(args)}")

        plugins: list[object] = []
        original_properties_file = os.environ.get(PROPERTIES_FILE_ENV)
        if plan.parallel:
            properties_file = write_properties_file(
                plan.reports_directory / "surefire-properties.json",
                plan.system_properties,
            )
            os.environ[PROPERTIES_FILE_ENV] = str(properties_file)
        else:
            plugins.append(SystemPropertiesPlugin(plan.system_properties))

        buffer = io.StringIO()
        try:
            with contextlib.redirect_stdout(buffer):
                exit_code = pytest.main(args, plugins=plugins)
        finally:
            if original_properties_file is None:
                os.environ.pop(PROPERTIES_FILE_ENV, None)
            else:
                os.environ[PROPERTIES_FILE_ENV] = original_properties_file

        output = buffer.getvalue()
        self._publish_output(plan, output, DEFAULT_REPORT_NAME)
        return RunResult(
            success=exit_code in SUCCESS_EXIT_CODES,
            tests_run=len(test_files),
            diagnostics=output,
        )

    async def _run_forked(
        self, plan: ExecutionPlan, test_files: Sequence[Path], report_name: str
    ) -> RunResult:
        if plan.fork is None:
            raise ValueError("Plan has no fork settings")

        properties_file = write_properties_file(
            plan.reports_directory / "surefire-properties.json",
            plan.fork.system_properties,
        )
        command = [
            plan.fork.jvm,
            *shlex.split(plan.fork.arg_line or ""),
            "-m",
            "pytest",
            *self.build_args(plan, test_files, report_name),
        ]
        cwd = plan.fork.working_directory or plan.fork.basedir
        logger.debug(f"Forking test process in {cwd}: {' '.join(command)}")

        process = await asyncio.create_subprocess_exec(
            *command,
            cwd=cwd,
            env=self.child_environment(plan, properties_file),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.STDOUT,
        )
        stdout, _ = await process.communicate()
        output = stdout.decode(errors="replace")

        logger.debug(f"Test process exited with code {process.returncode}")
        self._publish_output(plan, output, report_name)
        return RunResult(
            success=process.returncode in SUCCESS_EXIT_CODES,
            tests_run=len(test_files),
            diagnostics=output,
        )

    def _publish_output(
        self, plan: ExecutionPlan, output: str, report_name: str
    ) -> None:
        """Send engine output to the console and file reporters."""
        channels = {get_reporter(name).channel for name in plan.reporters}
        if "console" in channels:
            sys.stdout.write(output)
        if "file" in channels:
            report_file = plan.reports_directory / f"{report_name}-output.txt"
            report_file.write_text(output)
