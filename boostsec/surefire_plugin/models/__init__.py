"""Data models for plugin configuration, batteries, run plans and results."""

from boostsec.surefire_plugin.models.battery import (
    Battery,
    DirectoryBattery,
    SuiteBattery,
)
from boostsec.surefire_plugin.models.config import (
    ArtifactRef,
    ForkMode,
    ReportFormat,
    SurefireConfig,
)
from boostsec.surefire_plugin.models.execution import ExecutionPlan, ForkSettings
from boostsec.surefire_plugin.models.reporter import Reporter
from boostsec.surefire_plugin.models.run_result import RunResult
from boostsec.surefire_plugin.models.suite import SuiteDescriptor

__all__ = [
    "ArtifactRef",
    "Battery",
    "DirectoryBattery",
    "ExecutionPlan",
    "ForkMode",
    "ForkSettings",
    "ReportFormat",
    "Reporter",
    "RunResult",
    "SuiteBattery",
    "SuiteDescriptor",
    "SurefireConfig",
]
