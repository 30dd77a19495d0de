"""Shell helper runner manifest."""

from output_test_harness.runners.manifest import RunnerManifest
from output_test_harness.runners.shell.config import ShellRunnerConfig
from output_test_harness.runners.shell.runner import ShellRunner

shell_manifest = RunnerManifest(
    config_cls=ShellRunnerConfig,
    runner_factory=ShellRunner.from_config,
)
