"""Errors raised by the surefire plugin."""


class SurefireExecutionError(Exception):
    """Build-halting failure of a test run."""
