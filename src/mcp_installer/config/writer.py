"""Config file writes with merge semantics.

Invariants:
  1. Unrelated top-level keys and other server entries are preserved.
  2. Writing a server name that already exists replaces that entry only.
  3. Writes are atomic per call: write to unique temp file, then os.replace().
     There is no cross-writer locking; concurrent editors can still race.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import os
import tempfile
from pathlib import Path

from mcp_installer.config.reader import read_config
from mcp_installer.errors import ConfigWriteError
from mcp_installer.models import ServerConfig


def write_server_config(
    config_path: Path | str,
    server_name: str,
    server_config: ServerConfig,
) -> dict[str, object]:
    """Set ``mcpServers[server_name]`` and write the file back. Returns the written document."""
    path = Path(config_path)
    raw = read_config(path)

    servers = raw.get("mcpServers")
    if not isinstance(servers, dict):
        servers = {}

    servers[server_name] = server_config.to_dict()
    raw["mcpServers"] = servers
    _atomic_write(path, raw)
    return raw


async def awrite_server_config(
    config_path: Path | str,
    server_name: str,
    server_config: ServerConfig,
) -> dict[str, object]:
    """Async version of write_server_config."""
    return await asyncio.to_thread(write_server_config, config_path, server_name, server_config)


def _atomic_write(path: Path, data: dict[str, object]) -> None:
    """Write JSON atomically: write to unique temp file then rename."""
    fd = None
    tmp_path: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=str(path.parent),
            suffix=".tmp",
            prefix=f".{path.stem}_",
        )
        content = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
        os.write(fd, content.encode("utf-8"))
        os.close(fd)
        fd = None
        os.replace(tmp_path, str(path))
        tmp_path = None
    except PermissionError as exc:
        raise ConfigWriteError(f"Permission denied writing to {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigWriteError(f"Failed to write {path}: {exc}") from exc
    finally:
        if fd is not None:
            os.close(fd)
        if tmp_path is not None:
            with contextlib.suppress(OSError):
                os.unlink(tmp_path)
