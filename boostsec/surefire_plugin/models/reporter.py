"""Reporter identities."""

from enum import Enum


class Reporter(str, Enum):
    """Built-in reporters an engine can attach to a run."""

    FORKING_CONSOLE = "ForkingConsoleReporter"
    CONSOLE = "ConsoleReporter"
    BRIEF_FILE = "BriefFileReporter"
    FILE = "FileReporter"
    BRIEF_CONSOLE = "BriefConsoleReporter"
    DETAILED_CONSOLE = "DetailedConsoleReporter"
    XML = "XMLReporter"
