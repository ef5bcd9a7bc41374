"""Models for test run results."""

from pydantic import BaseModel, Field


class RunResult(BaseModel):
    """Verdict of a single engine invocation."""

    success: bool = Field(..., description="Whether every test passed")
    tests_run: int = Field(default=0, description="Number of test files executed")
    diagnostics: str = Field(
        default="", description="Accumulated engine output and failure details"
    )
