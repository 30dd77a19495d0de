"""Load test plans from YAML files."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from output_test_harness.models.plan import TestPlan

log = logging.getLogger(__name__)


async def load_test_plan(path: Path) -> TestPlan:
    """Load and validate a test plan.

    Args:
        path: Path to the plan YAML file

    Returns:
        Validated test plan

    Raises:
        FileNotFoundError: If the plan file does not exist
        ValueError: If the file is empty, not valid YAML, or fails validation

    """
    if not path.is_file():
        raise FileNotFoundError(f"Test plan not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ValueError(f"Empty test plan: {path}")

    try:
        plan = TestPlan.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid test plan schema in {path}: {e}") from e

    log.debug("Loaded test plan from %s", path)
    return plan
