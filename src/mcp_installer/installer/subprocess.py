"""Async subprocess execution for runners, launchers, and npm."""

from __future__ import annotations

import asyncio
import os
import signal
from pathlib import Path

_OUTPUT_LIMIT = 2000


async def run_command(
    cmd: list[str],
    *,
    cwd: Path | str | None = None,
    timeout: float | None = None,
) -> tuple[int, str, str]:
    """Run a subprocess and return (returncode, stdout, stderr).

    Uses asyncio.create_subprocess_exec -- never shell=True.
    Output is truncated to prevent context bloat.
    With ``timeout=None`` the call waits for the process however long it takes.
    A missing executable surfaces as ``OSError`` (usually FileNotFoundError).
    """
    proc = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd is not None else None,
        start_new_session=True,
    )
    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except TimeoutError:
        try:
            os.killpg(os.getpgid(proc.pid), signal.SIGKILL)
        except (ProcessLookupError, OSError):
            proc.kill()
        await proc.wait()
        return (-1, "", f"Command timed out after {timeout}s")

    return (
        proc.returncode or 0,
        stdout_bytes.decode(errors="replace")[:_OUTPUT_LIMIT],
        stderr_bytes.decode(errors="replace")[:_OUTPUT_LIMIT],
    )


async def command_succeeds(cmd: list[str], timeout: float | None = 15.0) -> bool:
    """Return True when *cmd* can be spawned and exits 0."""
    try:
        returncode, _stdout, _stderr = await run_command(cmd, timeout=timeout)
    except (OSError, ValueError):
        return False
    return returncode == 0
