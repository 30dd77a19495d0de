"""Configuration for the shell helper runner."""

from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, Field


class ShellRunnerConfig(BaseModel):
    """Configuration for the shell helper runner."""

    definitions: Path
    function: str = "run_output_test"
    shell: str = "bash"
    # Flag placed before the output label; the label is omitted with it
    output_label_flag: str = "-n"
    working_directory: Path | None = None
    timeout: float | None = Field(default=None, gt=0)
    env: Mapping[str, str] = Field(default_factory=dict)
