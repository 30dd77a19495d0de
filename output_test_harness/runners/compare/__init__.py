"""Output comparison runner module."""

from output_test_harness.runners.compare.config import CompareRunnerConfig
from output_test_harness.runners.compare.manifest import compare_manifest
from output_test_harness.runners.compare.runner import CompareRunner

__all__ = ["CompareRunner", "CompareRunnerConfig", "compare_manifest"]
