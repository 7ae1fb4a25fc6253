"""Register servers live through the ``claude mcp`` CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from mcp_installer.errors import RegistrationError
from mcp_installer.installer.subprocess import run_command

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ClaudeCliStrategy:
    """Remove-then-add through the Claude CLI; changes take effect immediately."""

    executable: str = "claude"

    @property
    def method_name(self) -> str:
        return "Claude Code CLI"

    @property
    def success_message(self) -> str:
        return "The server is registered with Claude Code and available immediately."

    async def install(
        self,
        server_name: str,
        command: str,
        args: list[str],
        env: list[str],
    ) -> None:
        await self._remove(server_name)

        cmd = self.build_add_command(server_name, command, args, env)
        logger.info("Registering %s via %s", server_name, self.executable)
        try:
            returncode, stdout, stderr = await run_command(cmd)
        except OSError as exc:
            raise RegistrationError(
                f"Could not run '{self.executable}' to register {server_name}: {exc}"
            ) from exc

        if returncode != 0:
            raise RegistrationError(
                f"'{self.executable} mcp add' failed for {server_name} "
                f"(exit {returncode}): {stderr or stdout}"
            )

    def build_add_command(
        self,
        server_name: str,
        command: str,
        args: list[str],
        env: list[str],
    ) -> list[str]:
        """Return the argv for ``claude mcp add``."""
        cmd = [self.executable, "mcp", "add", server_name, command]
        if args:
            cmd.append("--args")
            cmd.extend(args)
        for assignment in env:
            cmd.extend(["--env", assignment])
        return cmd

    async def _remove(self, server_name: str) -> None:
        """Drop any previous registration; a missing entry is not an error."""
        try:
            returncode, _stdout, stderr = await run_command(
                [self.executable, "mcp", "remove", server_name]
            )
        except OSError as exc:
            logger.debug("Ignoring failed removal of %s: %s", server_name, exc)
            return
        if returncode != 0:
            logger.debug("Ignoring failed removal of %s: %s", server_name, stderr)
