"""Pick the installation strategy once, at startup."""

from __future__ import annotations

import logging
import os

from mcp_installer.installer.subprocess import command_succeeds
from mcp_installer.strategy.base import InstallationStrategy
from mcp_installer.strategy.cli import ClaudeCliStrategy
from mcp_installer.strategy.desktop import DesktopConfigStrategy

logger = logging.getLogger(__name__)

_FORCED = {"cli", "desktop"}


async def detect_strategy() -> InstallationStrategy:
    """Use the Claude CLI when ``claude --version`` works, else the Desktop config file.

    ``MCP_INSTALLER_STRATEGY`` ("cli" or "desktop") skips the probe.
    ``MCP_INSTALLER_CLAUDE_BIN`` names the CLI executable. Never raises.
    """
    executable = os.environ.get("MCP_INSTALLER_CLAUDE_BIN") or "claude"
    forced = os.environ.get("MCP_INSTALLER_STRATEGY", "").strip().lower()

    if forced and forced not in _FORCED:
        logger.warning("Ignoring unknown MCP_INSTALLER_STRATEGY=%r", forced)
        forced = ""

    if forced == "cli":
        return ClaudeCliStrategy(executable=executable)
    if forced == "desktop":
        return DesktopConfigStrategy()

    if await command_succeeds([executable, "--version"]):
        logger.info("Found %s; servers will be registered via the CLI", executable)
        return ClaudeCliStrategy(executable=executable)

    logger.info("No %s CLI found; servers will be written to the Desktop config", executable)
    return DesktopConfigStrategy()
