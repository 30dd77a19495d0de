"""Output comparison runner manifest."""

from output_test_harness.runners.compare.config import CompareRunnerConfig
from output_test_harness.runners.compare.runner import CompareRunner
from output_test_harness.runners.manifest import RunnerManifest

compare_manifest = RunnerManifest(
    config_cls=CompareRunnerConfig,
    runner_factory=CompareRunner.from_config,
)
