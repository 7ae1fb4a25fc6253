"""Persist servers into the Claude Desktop config file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from mcp_installer.config.detection import claude_desktop_config_path
from mcp_installer.config.writer import awrite_server_config
from mcp_installer.models import ServerConfig, parse_env_assignments

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DesktopConfigStrategy:
    """Merge an entry into ``mcpServers``; Claude Desktop picks it up on restart."""

    config_path: Path = field(default_factory=claude_desktop_config_path)

    @property
    def method_name(self) -> str:
        return "Claude Desktop config"

    @property
    def success_message(self) -> str:
        return "Tell the user to restart Claude Desktop for the new server to appear."

    async def install(
        self,
        server_name: str,
        command: str,
        args: list[str],
        env: list[str],
    ) -> None:
        server_config = ServerConfig(
            command=command,
            args=list(args),
            env=parse_env_assignments(env),
        )
        await awrite_server_config(self.config_path, server_name, server_config)
        logger.info("Wrote %s to %s", server_name, self.config_path)
