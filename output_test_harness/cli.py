"""CLI entry point for the output test harness."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

from output_test_harness.models.plan import DEFAULT_PLAN
from output_test_harness.models.result import OrchestrationReport
from output_test_harness.orchestrator import TestOrchestrator
from output_test_harness.plan_loader import load_test_plan
from output_test_harness.runners.loading import (
    RunnerNotFoundError,
    load_runner_manifest,
)

CONFIG_ERROR_STATUS = 2

STATUS_SYMBOLS = {
    "success": "✓",
    "failure": "✗",
    "error": "!",
    "timeout": "⏱",
}


def log_results_summary(log: logging.Logger, report: OrchestrationReport) -> None:
    """Log a formatted summary of invocation results."""
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)

    for result in report.results:
        symbol = STATUS_SYMBOLS.get(result.status, "?")
        log.info(
            "%s %s: %s, exit status %d (%.2fs)",
            symbol,
            result.invocation.describe(),
            result.status,
            result.exit_status,
            result.duration,
        )
        if result.message:
            log.info("  Message: %s", result.message)

    log.info("Aggregated exit status: %d", report.exit_status)


def format_output(report: OrchestrationReport) -> dict[str, Any]:
    """Format the report for JSON output."""
    all_results = [
        {
            "test": result.invocation.test_name,
            "output_label": result.invocation.output_label,
            "args": list(result.invocation.args),
            "status": result.status,
            "exit_status": result.exit_status,
            "duration": result.duration,
            "message": result.message,
        }
        for result in report.results
    ]

    return {
        "total": len(all_results),
        "passed": sum(1 for r in all_results if r["status"] == "success"),
        "failed": sum(1 for r in all_results if r["status"] == "failure"),
        "errors": sum(1 for r in all_results if r["status"] == "error"),
        "timeouts": sum(1 for r in all_results if r["status"] == "timeout"),
        "exit_status": report.exit_status,
        "results": all_results,
    }


async def run(
    runner_key: str,
    runner_config_json: str,
    plan_path: Path | None = None,
) -> OrchestrationReport:
    """Run the test plan and return the report."""
    log = logging.getLogger("output_test_harness")

    log.info("Loading runner: %s", runner_key)
    manifest = load_runner_manifest(runner_key)
    config = manifest.config_cls.model_validate(json.loads(runner_config_json))

    if plan_path is not None:
        log.info("Loading test plan: %s", plan_path)
        plan = await load_test_plan(plan_path)
    else:
        plan = DEFAULT_PLAN

    log.info("Running %d invocation(s)...", len(plan.to_invocations()))
    async with manifest.runner_factory(config) as runner:
        orchestrator = TestOrchestrator(runner=runner)
        report = await orchestrator.run_tests(plan)

    log_results_summary(log, report)
    print(json.dumps(format_output(report), indent=2))

    return report


def finish(report: OrchestrationReport) -> NoReturn:
    """Terminate the process with the aggregated exit status."""
    sys.exit(report.exit_status)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run output comparison tests and their formatting variants"
    )
    parser.add_argument(
        "--runner",
        required=True,
        help="Runner key (shell, compare)",
    )
    parser.add_argument(
        "--runner-config",
        required=True,
        help="JSON configuration for the runner",
    )
    parser.add_argument(
        "--plan",
        type=Path,
        default=None,
        help="Path to a YAML test plan (default: built-in test2 plan)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        report = asyncio.run(
            run(
                runner_key=args.runner,
                runner_config_json=args.runner_config,
                plan_path=args.plan,
            )
        )
    except (RunnerNotFoundError, FileNotFoundError, ValueError) as e:
        logging.getLogger("output_test_harness").error("Configuration error: %s", e)
        sys.exit(CONFIG_ERROR_STATUS)

    finish(report)


if __name__ == "__main__":  # pragma: no cover
    main()
