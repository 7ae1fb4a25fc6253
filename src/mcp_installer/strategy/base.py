"""Installation strategy protocol -- how a server becomes known to its host."""

from __future__ import annotations

from typing import Protocol


class InstallationStrategy(Protocol):
    """Register a server with a host, either live (CLI) or via its config file.

    Exactly two implementations exist: ClaudeCliStrategy and
    DesktopConfigStrategy. One is picked at startup and kept for the
    process lifetime.
    """

    @property
    def method_name(self) -> str:
        """Human-readable name of the install method."""
        ...

    @property
    def success_message(self) -> str:
        """What the user should know or do after a successful install."""
        ...

    async def install(
        self,
        server_name: str,
        command: str,
        args: list[str],
        env: list[str],
    ) -> None:
        """Register the server. Raises McpInstallerError on failure."""
        ...
