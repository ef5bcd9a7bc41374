"""Abstract base class for test engines."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from boostsec.surefire_plugin.models.battery import (
    Battery,
    DirectoryBattery,
    SuiteBattery,
)
from boostsec.surefire_plugin.models.execution import ExecutionPlan
from boostsec.surefire_plugin.models.run_result import RunResult
from boostsec.surefire_plugin.suite_loader import suite_test_paths
from boostsec.surefire_plugin.test_scanner import scan_directory

logger = logging.getLogger(__name__)


def _collect_directory(battery: Battery) -> list[Path]:
    if not isinstance(battery, DirectoryBattery):
        raise ValueError(f"Expected a directory battery, got {battery.kind}")
    return scan_directory(battery.directory, battery.includes, battery.excludes)


def _collect_suite(battery: Battery) -> list[Path]:
    if not isinstance(battery, SuiteBattery):
        raise ValueError(f"Expected a suite battery, got {battery.kind}")
    return suite_test_paths(battery.path)


BATTERY_COLLECTORS: dict[str, Callable[[Battery], list[Path]]] = {
    "directory": _collect_directory,
    "suite": _collect_suite,
}


class TestEngine(ABC):
    """Abstract base for engines that execute a planned test run."""

    __test__ = False

    @abstractmethod
    async def run(self, plan: ExecutionPlan) -> RunResult:
        """Execute the tests described by a plan.

        Args:
            plan: Fully configured execution plan

        Returns:
            Verdict of the run

        """

    def collect_tests(self, plan: ExecutionPlan) -> list[Path]:
        """List the test files selected by the plan's batteries.

        Files selected by several batteries are kept once, in first-seen order.

        Raises:
            ValueError: If a battery kind has no collector

        """
        selected: list[Path] = []
        seen: set[Path] = set()
        for battery in plan.batteries:
            collector = BATTERY_COLLECTORS.get(battery.kind)
            if collector is None:
                raise ValueError(f"Unknown battery kind: {battery.kind}")
            for path in collector(battery):
                if path not in seen:
                    seen.add(path)
                    selected.append(path)

        logger.info(
            f"Collected {len(selected)} test files from {len(plan.batteries)} batteries"
        )
        return selected
