"""Runner plugin discovery.

Runners are installed as entry points in the ``output_test_harness.runners``
group, each pointing at a RunnerManifest. The built-in ones are ``shell``
(delegates to a sourced helper function) and ``compare`` (diffs program
output against expected files).
"""

from collections.abc import Sequence
from importlib.metadata import EntryPoint, entry_points
from typing import Any

from output_test_harness.runners.manifest import RunnerManifest

ENTRY_POINT_GROUP = "output_test_harness.runners"


class RunnerNotFoundError(Exception):
    """Raised when no installed runner matches the requested key."""


def installed_runners() -> Sequence[str]:
    """Return the keys of all installed runners, sorted."""
    return sorted({entry.name for entry in entry_points(group=ENTRY_POINT_GROUP)})


def load_runner_manifest(key: str) -> RunnerManifest[Any]:
    """Import the manifest registered under ``key``.

    Raises:
        RunnerNotFoundError: If no installed runner uses the key

    """
    entry: EntryPoint | None = next(
        iter(entry_points(group=ENTRY_POINT_GROUP, name=key)), None
    )
    if entry is None:
        installed = ", ".join(installed_runners()) or "none"
        raise RunnerNotFoundError(
            f"Unknown runner '{key}' (installed runners: {installed})"
        )

    manifest: RunnerManifest[Any] = entry.load()
    return manifest
