"""Models for invocation results."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from output_test_harness.models.plan import TestInvocation

InvocationStatus = Literal["success", "failure", "timeout", "error"]


def merge_exit_status(aggregated: int, exit_status: int) -> int:
    """Fold one exit status into the aggregated one.

    The aggregated status follows the first failure: it takes the new
    status only while it is still 0.
    """
    return exit_status if aggregated == 0 else aggregated


@dataclass(frozen=True, kw_only=True)
class InvocationResult:
    """Result of a single invocation."""

    invocation: TestInvocation
    exit_status: int
    status: InvocationStatus
    duration: float
    message: str | None = None


@dataclass(frozen=True, kw_only=True)
class OrchestrationReport:
    """Ordered results of a plan run and their aggregated exit status."""

    results: Sequence[InvocationResult]
    exit_status: int
