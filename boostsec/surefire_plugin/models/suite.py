"""Models for suite descriptors loaded from YAML files."""

from pydantic import BaseModel, Field


class SuiteDescriptor(BaseModel):
    """Explicit list of tests making up a suite."""

    name: str = Field(..., description="Human-readable suite name")
    tests: list[str] = Field(
        default_factory=list,
        description="Test files, relative to the descriptor file",
    )
