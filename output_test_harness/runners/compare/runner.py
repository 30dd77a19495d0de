"""Runner comparing a program's output against expected output files."""

import difflib
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path

from output_test_harness.runners.base import InvocationTimeoutError, OutputTestRunner
from output_test_harness.runners.compare.config import CompareRunnerConfig
from output_test_harness.runners.process import run_process

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class CompareRunner(OutputTestRunner):
    """Runs a program per test and diffs its stdout against a fixture.

    The program is invoked as ``command + [test_name, *args]``. The expected
    output lives in ``expected_dir/<output_label or test_name><suffix>``.
    """

    config: CompareRunnerConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: CompareRunnerConfig
    ) -> AsyncGenerator["CompareRunner", None]:
        """Create runner for the configured command."""
        if not config.update_expected and not config.expected_dir.is_dir():
            log.warning("Expected output directory missing: %s", config.expected_dir)
        yield cls(config=config)

    def expected_path(self, test_name: str, output_label: str | None) -> Path:
        """Return the expected output file for a test."""
        name = output_label or test_name
        return self.config.expected_dir / f"{name}{self.config.suffix}"

    async def run_output_test(
        self,
        test_name: str,
        *args: str,
        output_label: str | None = None,
    ) -> int:
        """Run the program and compare its stdout with the expected file."""
        outcome = await run_process(
            [*self.config.command, test_name, *args],
            cwd=self.config.working_directory,
            env=self.config.env,
            timeout=self.config.timeout,
        )

        if outcome.timed_out:
            assert self.config.timeout is not None
            raise InvocationTimeoutError(
                test_name, self.config.timeout, outcome.exit_status
            )

        if outcome.exit_status != 0:
            log.warning("%s exited with status %d", test_name, outcome.exit_status)
            for line in outcome.stderr_text.splitlines():
                log.warning("[%s stderr] %s", test_name, line)
            return outcome.exit_status

        expected_path = self.expected_path(test_name, output_label)

        if self.config.update_expected:
            expected_path.parent.mkdir(parents=True, exist_ok=True)
            expected_path.write_bytes(outcome.stdout)
            log.info("Updated %s", expected_path)
            return 0

        if not expected_path.is_file():
            log.error("Expected output not found: %s", expected_path)
            return self.config.mismatch_status

        # Byte comparison; decoding is only for the diff
        expected = expected_path.read_bytes()
        if outcome.stdout == expected:
            return 0

        diff = difflib.unified_diff(
            expected.decode(errors="replace").splitlines(keepends=True),
            outcome.stdout_text.splitlines(keepends=True),
            fromfile=str(expected_path),
            tofile=f"{output_label or test_name} (actual)",
        )
        log.error("Output mismatch for %s:\n%s", test_name, "".join(diff))
        return self.config.mismatch_status
