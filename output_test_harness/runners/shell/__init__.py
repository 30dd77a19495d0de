"""Shell helper runner module."""

from output_test_harness.runners.shell.config import ShellRunnerConfig
from output_test_harness.runners.shell.manifest import shell_manifest
from output_test_harness.runners.shell.runner import ShellRunner

__all__ = ["ShellRunner", "ShellRunnerConfig", "shell_manifest"]
