"""Abstract base class for output test runners."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class InvocationTimeoutError(Exception):
    """Raised when a test is killed for exceeding its time limit."""

    def __init__(self, test_name: str, timeout: float, exit_status: int) -> None:
        super().__init__(f"{test_name} did not finish within {timeout} seconds")
        self.test_name = test_name
        self.timeout = timeout
        self.exit_status = exit_status


@dataclass(frozen=True, kw_only=True)
class OutputTestRunner(ABC):
    """Abstract base for output test runners.

    A runner executes one named test, compares what it produced against the
    expected output, and reports the outcome as a process-style exit status.
    """

    @abstractmethod
    async def run_output_test(
        self,
        test_name: str,
        *args: str,
        output_label: str | None = None,
    ) -> int:
        """Run a single output test.

        Args:
            test_name: Test identifier (e.g., "test2Formatted")
            *args: Extra arguments passed to the test, in order
            output_label: Label naming the expected output, when it differs
                from the test name (e.g., "test2Formatted_plain")

        Returns:
            Exit status, 0 on success

        Raises:
            InvocationTimeoutError: If the test was killed for running too long

        """
