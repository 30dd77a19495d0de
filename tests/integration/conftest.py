"""Fixtures for integration tests."""

import stat
from pathlib import Path
from typing import Protocol

import pytest

# Helper used by the shell runner tests. It records every call and fails
# when a status file named after the output label (or test name) exists.
TEST_DEFS = """\
run_output_test() {
    label=""
    if [ "$1" = "-n" ]; then
        label="$2"
        shift 2
    fi
    name="$1"
    shift
    echo "${label:-$name} $name $*" >> "$CALLS_FILE"
    echo "running ${label:-$name}"
    status_file="$STATUS_DIR/${label:-$name}"
    if [ -f "$status_file" ]; then
        return "$(cat "$status_file")"
    fi
    return 0
}
"""


class WriteScriptFn(Protocol):
    """Protocol for executable script creation function."""

    def __call__(self, name: str, body: str) -> Path:
        """Write an executable script and return its path."""


@pytest.fixture
def write_script(tmp_path: Path) -> WriteScriptFn:
    """Return a function creating executable shell scripts."""

    def _write(name: str, body: str) -> Path:
        script = tmp_path / name
        script.write_text(f"#!/bin/sh\n{body}")
        script.chmod(script.stat().st_mode | stat.S_IEXEC)
        return script

    return _write


@pytest.fixture
def test_defs(tmp_path: Path) -> Path:
    """Create a definitions file with a recording run_output_test helper."""
    defs = tmp_path / "test-defs.sh"
    defs.write_text(TEST_DEFS)
    (tmp_path / "status").mkdir()
    return defs


@pytest.fixture
def helper_env(tmp_path: Path) -> dict[str, str]:
    """Environment variables read by the recording helper."""
    return {
        "CALLS_FILE": str(tmp_path / "calls.txt"),
        "STATUS_DIR": str(tmp_path / "status"),
    }


def read_calls(tmp_path: Path) -> list[str]:
    """Return the helper calls recorded so far."""
    calls_file = tmp_path / "calls.txt"
    if not calls_file.exists():
        return []
    return calls_file.read_text().splitlines()


def set_status(tmp_path: Path, label: str, status: int) -> None:
    """Make the helper return a status for a label."""
    (tmp_path / "status" / label).write_text(str(status))
