"""Locate the Claude Desktop config file."""

from __future__ import annotations

import os
import sys
from pathlib import Path

CONFIG_FILENAME = "claude_desktop_config.json"


def claude_desktop_config_path() -> Path:
    """Return the Claude Desktop config path for this platform.

    ``MCP_INSTALLER_DESKTOP_CONFIG`` overrides the platform default.
    The file does not need to exist yet.
    """
    override = os.environ.get("MCP_INSTALLER_DESKTOP_CONFIG")
    if override:
        return Path(override).expanduser()

    home = Path.home()
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA", str(home / "AppData" / "Roaming"))
        return Path(appdata) / "Claude" / CONFIG_FILENAME
    return home / "Library" / "Application Support" / "Claude" / CONFIG_FILENAME
