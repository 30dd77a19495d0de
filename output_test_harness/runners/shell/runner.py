"""Runner delegating to a function defined in a shell definitions file."""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass

from output_test_harness.runners.base import InvocationTimeoutError, OutputTestRunner
from output_test_harness.runners.process import ProcessOutcome, run_process
from output_test_harness.runners.shell.config import ShellRunnerConfig

log = logging.getLogger(__name__)

# $1 is the definitions file, the remaining arguments are the helper call
SOURCE_AND_CALL = '. "$1" || exit; shift; "$@"'


@dataclass(frozen=True, kw_only=True)
class ShellRunner(OutputTestRunner):
    """Runs output tests through a shell helper such as run_output_test."""

    config: ShellRunnerConfig

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: ShellRunnerConfig
    ) -> AsyncGenerator["ShellRunner", None]:
        """Create runner after checking the definitions file is available."""
        definitions = config.definitions
        if config.working_directory and not definitions.is_absolute():
            definitions = config.working_directory / definitions
        definitions = definitions.resolve()
        if not definitions.is_file():
            raise FileNotFoundError(f"Definitions file not found: {definitions}")

        log.info("Using %s from %s", config.function, definitions)
        yield cls(config=config.model_copy(update={"definitions": definitions}))

    def build_argv(
        self,
        test_name: str,
        args: Sequence[str],
        output_label: str | None,
    ) -> Sequence[str]:
        """Build the shell command line for one helper call."""
        helper_args: list[str] = []
        if output_label is not None:
            helper_args.extend([self.config.output_label_flag, output_label])
        helper_args.append(test_name)
        helper_args.extend(args)

        return [
            self.config.shell,
            "-c",
            SOURCE_AND_CALL,
            self.config.shell,
            str(self.config.definitions),
            self.config.function,
            *helper_args,
        ]

    async def run_output_test(
        self,
        test_name: str,
        *args: str,
        output_label: str | None = None,
    ) -> int:
        """Call the helper function and return its exit status verbatim."""
        outcome = await run_process(
            self.build_argv(test_name, args, output_label),
            cwd=self.config.working_directory,
            env=self.config.env,
            timeout=self.config.timeout,
        )
        if outcome.timed_out:
            assert self.config.timeout is not None
            raise InvocationTimeoutError(
                test_name, self.config.timeout, outcome.exit_status
            )
        self._log_output(test_name, outcome)
        return outcome.exit_status

    def _log_output(self, test_name: str, outcome: ProcessOutcome) -> None:
        level = logging.DEBUG if outcome.exit_status == 0 else logging.WARNING
        for stream, text in (
            ("stdout", outcome.stdout_text),
            ("stderr", outcome.stderr_text),
        ):
            for line in text.splitlines():
                log.log(level, "[%s %s] %s", test_name, stream, line)
