"""Select the reporters attached to a run."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from boostsec.surefire_plugin.models.config import ReportFormat
from boostsec.surefire_plugin.models.reporter import Reporter


class ReporterSpec(BaseModel):
    """How an engine renders a reporter."""

    model_config = ConfigDict(frozen=True)

    channel: Literal["console", "file", "xml"] = Field(
        ..., description="Output channel of the reporter"
    )
    verbosity: Literal["summary", "brief", "detailed"] = Field(
        default="summary", description="Amount of per-test output"
    )


REPORTER_REGISTRY: dict[str, ReporterSpec] = {
    Reporter.FORKING_CONSOLE.value: ReporterSpec(channel="console"),
    Reporter.CONSOLE.value: ReporterSpec(channel="console"),
    Reporter.BRIEF_FILE.value: ReporterSpec(channel="file", verbosity="brief"),
    Reporter.FILE.value: ReporterSpec(channel="file", verbosity="detailed"),
    Reporter.BRIEF_CONSOLE.value: ReporterSpec(
        channel="console", verbosity="brief"
    ),
    Reporter.DETAILED_CONSOLE.value: ReporterSpec(
        channel="console", verbosity="detailed"
    ),
    Reporter.XML.value: ReporterSpec(channel="xml"),
}


def register_reporter(name: str, spec: ReporterSpec) -> None:
    """Register an additional reporter identity.

    Raises:
        ValueError: If the name is already registered

    """
    if name in REPORTER_REGISTRY:
        raise ValueError(f"Reporter already registered: {name}")
    REPORTER_REGISTRY[name] = spec


def get_reporter(name: str | Reporter) -> ReporterSpec:
    """Look up a reporter by identity.

    Raises:
        ValueError: If the reporter is unknown

    """
    key = name.value if isinstance(name, Reporter) else name
    try:
        return REPORTER_REGISTRY[key]
    except KeyError:
        raise ValueError(f"Unknown reporter: {name}") from None


def select_reporters(
    use_file: bool,
    print_summary: bool,
    report_format: ReportFormat,
    forking: bool,
) -> list[Reporter]:
    """Pick reporters from the report options.

    The XML reporter is always attached, last.
    """
    reporters: list[Reporter] = []

    if use_file:
        if print_summary:
            reporters.append(Reporter.FORKING_CONSOLE if forking else Reporter.CONSOLE)

        if report_format is ReportFormat.BRIEF:
            reporters.append(Reporter.BRIEF_FILE)
        elif report_format is ReportFormat.PLAIN:
            reporters.append(Reporter.FILE)
    elif report_format is ReportFormat.BRIEF:
        reporters.append(Reporter.BRIEF_CONSOLE)
    elif report_format is ReportFormat.PLAIN:
        reporters.append(Reporter.DETAILED_CONSOLE)

    reporters.append(Reporter.XML)
    return reporters
