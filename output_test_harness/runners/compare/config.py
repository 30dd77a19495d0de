"""Configuration for the output comparison runner."""

from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import BaseModel, Field


class CompareRunnerConfig(BaseModel):
    """Configuration for the output comparison runner."""

    command: Sequence[str] = Field(..., min_length=1)
    expected_dir: Path
    suffix: str = ".out"
    working_directory: Path | None = None
    timeout: float | None = Field(default=None, gt=0)
    env: Mapping[str, str] = Field(default_factory=dict)
    # Rewrite expected files from actual output instead of comparing
    update_expected: bool = False
    mismatch_status: int = Field(default=1, ge=1)
