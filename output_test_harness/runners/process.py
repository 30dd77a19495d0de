"""Subprocess execution shared by the runners."""

import asyncio
import logging
import os
import signal
from collections.abc import Mapping, Sequence
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path

log = logging.getLogger(__name__)

TIMEOUT_EXIT_STATUS = 124


@dataclass(frozen=True, kw_only=True)
class ProcessOutcome:
    """Exit status and raw captured output of a finished process."""

    exit_status: int
    stdout: bytes
    stderr: bytes
    timed_out: bool = False

    @property
    def stdout_text(self) -> str:
        """Stdout decoded for display; undecodable bytes are replaced."""
        return self.stdout.decode(errors="replace")

    @property
    def stderr_text(self) -> str:
        """Stderr decoded for display; undecodable bytes are replaced."""
        return self.stderr.decode(errors="replace")


def normalize_returncode(returncode: int) -> int:
    """Map a signal termination (negative returncode) to 128 + signal."""
    if returncode < 0:
        return 128 - returncode
    return returncode


async def kill_process_group(process: asyncio.subprocess.Process) -> None:
    """Kill the process and everything it started, then reap it."""
    with suppress(ProcessLookupError):
        os.killpg(process.pid, signal.SIGKILL)
    await process.wait()


async def run_process(
    argv: Sequence[str],
    *,
    cwd: Path | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> ProcessOutcome:
    """Run a process to completion and capture its output.

    The process runs in its own session. If waiting for it is interrupted
    (timeout, cancellation, KeyboardInterrupt) the whole group is killed.

    Args:
        argv: Program and arguments
        cwd: Working directory (default: current directory)
        env: Extra environment variables layered over the current environment
        timeout: Seconds before the process group is killed (default: none)

    Returns:
        Process outcome; a killed process reports TIMEOUT_EXIT_STATUS

    """
    log.debug("Running: %s", " ".join(argv))
    process = await asyncio.create_subprocess_exec(
        *argv,
        cwd=cwd,
        env={**os.environ, **env} if env else None,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        start_new_session=True,
    )

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout)
    except TimeoutError:
        log.warning("Process %d exceeded %s seconds, killing", process.pid, timeout)
        await kill_process_group(process)
        return ProcessOutcome(
            exit_status=TIMEOUT_EXIT_STATUS,
            stdout=b"",
            stderr=b"",
            timed_out=True,
        )
    except BaseException:
        if process.returncode is None:
            log.warning("Interrupted, killing process %d", process.pid)
            await kill_process_group(process)
        raise

    assert process.returncode is not None
    return ProcessOutcome(
        exit_status=normalize_returncode(process.returncode),
        stdout=stdout,
        stderr=stderr,
    )
