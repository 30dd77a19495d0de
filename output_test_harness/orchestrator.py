"""Test orchestrator running a test plan against a single runner."""

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass

from output_test_harness.models.plan import TestInvocation, TestPlan
from output_test_harness.models.result import (
    InvocationResult,
    InvocationStatus,
    OrchestrationReport,
    merge_exit_status,
)
from output_test_harness.runners.base import InvocationTimeoutError, OutputTestRunner

log = logging.getLogger(__name__)

INVOCATION_ERROR_STATUS = 1


def classify_exit_status(exit_status: int) -> InvocationStatus:
    """Map a runner exit status to a result status.

    Timeouts are reported by the runner raising InvocationTimeoutError, so a
    test that exits with the timeout status on its own is a plain failure.
    """
    return "success" if exit_status == 0 else "failure"


@dataclass(frozen=True, kw_only=True)
class TestOrchestrator:
    """Runs the baseline test, then each variant, one at a time.

    Every invocation runs even after a failure. The reported exit status is
    the first non-zero status seen, or 0 when all invocations pass.
    """

    __test__ = False

    runner: OutputTestRunner

    async def run_tests(self, plan: TestPlan) -> OrchestrationReport:
        """Run every invocation of the plan in order.

        Args:
            plan: Test plan with a baseline test and its variants

        Returns:
            Report with one result per invocation and the aggregated status

        """
        baseline = await self.run_baseline(plan)
        variants, exit_status = await self.run_variants(plan, baseline.exit_status)

        log.info("Test execution completed with exit status %d", exit_status)
        return OrchestrationReport(
            results=[baseline, *variants], exit_status=exit_status
        )

    async def run_baseline(self, plan: TestPlan) -> InvocationResult:
        """Run the baseline test; its status seeds the aggregated status."""
        return await self._invoke(plan.baseline.to_invocation())

    async def run_variants(
        self, plan: TestPlan, aggregated: int
    ) -> tuple[Sequence[InvocationResult], int]:
        """Run each variant in label order.

        Args:
            plan: Test plan whose variants to run
            aggregated: Aggregated exit status so far

        Returns:
            Variant results and the updated aggregated exit status

        """
        results: list[InvocationResult] = []
        for invocation in plan.variants.to_invocations():
            result = await self._invoke(invocation)
            results.append(result)
            aggregated = merge_exit_status(aggregated, result.exit_status)
        return results, aggregated

    async def _invoke(self, invocation: TestInvocation) -> InvocationResult:
        """Run one invocation, turning runner exceptions into error results."""
        log.info("Running %s", invocation.describe())
        start = time.monotonic()

        try:
            exit_status = await self.runner.run_output_test(
                invocation.test_name,
                *invocation.args,
                output_label=invocation.output_label,
            )
        except InvocationTimeoutError as e:
            log.error("Invocation %s timed out: %s", invocation.describe(), e)
            return InvocationResult(
                invocation=invocation,
                exit_status=e.exit_status,
                status="timeout",
                duration=time.monotonic() - start,
                message=str(e),
            )
        except Exception as e:
            log.error(
                "Invocation %s failed: %s", invocation.describe(), e, exc_info=e
            )
            return InvocationResult(
                invocation=invocation,
                exit_status=INVOCATION_ERROR_STATUS,
                status="error",
                duration=time.monotonic() - start,
                message=str(e),
            )

        result = InvocationResult(
            invocation=invocation,
            exit_status=exit_status,
            status=classify_exit_status(exit_status),
            duration=time.monotonic() - start,
        )
        log.info(
            "Test completed: test=%s status=%s exit_status=%d duration=%.1fs",
            invocation.describe(),
            result.status,
            result.exit_status,
            result.duration,
        )
        return result
