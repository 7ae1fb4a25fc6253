"""Read the Claude Desktop config file, tolerating damage.

The file follows { "mcpServers": { "<name>": { ... } }, ... }.
A missing, unreadable, or corrupt file reads as {} so an install is never
blocked by a bad config; the next write replaces it.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_config(config_path: Path | str) -> dict[str, object]:
    """Read a full config file as a dict, or {} when it cannot be used."""
    path = Path(config_path)
    if not path.exists():
        return {}

    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}

    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top-level value is not an object", path)
        return {}
    return data


async def aread_config(config_path: Path | str) -> dict[str, object]:
    """Async version of read_config. Use from async code to avoid blocking the event loop."""
    return await asyncio.to_thread(read_config, config_path)
