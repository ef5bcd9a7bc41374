"""Models for test batteries (test discovery strategies)."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class DirectoryBattery(BaseModel):
    """Tests found by scanning a directory with include/exclude globs."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["directory"] = "directory"
    directory: Path = Field(..., description="Directory scanned for tests")
    includes: list[str] = Field(
        default_factory=list, description="Ant style include patterns"
    )
    excludes: list[str] = Field(
        default_factory=list, description="Ant style exclude patterns"
    )


class SuiteBattery(BaseModel):
    """Tests listed by a suite descriptor file."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["suite"] = "suite"
    path: Path = Field(..., description="Suite descriptor file")


Battery = Annotated[DirectoryBattery | SuiteBattery, Field(discriminator="kind")]
