"""install_local_mcp_server tool -- install a locally-cloned MCP server."""

from __future__ import annotations

import logging
from pathlib import Path

from mcp.server.fastmcp import Context
from mcp.types import CallToolResult

from mcp_installer.errors import McpInstallerError, PathNotFoundError
from mcp_installer.installer.local import resolve_entry_points
from mcp_installer.models import ServerInstallSpec, error_result, success_result
from mcp_installer.tools._helpers import get_strategy

logger = logging.getLogger(__name__)

_INTERPRETER = "node"


async def install_local_mcp_server(
    path: str,
    ctx: Context,
    args: list[str] | None = None,
    env: list[str] | None = None,
) -> CallToolResult:
    """Install an MCP server from a Node.js project cloned on this machine.

    Runs ``npm install`` in the directory, then registers every binary the
    package.json declares (or its main module) to be launched with node.

    Args:
        path: Directory containing the server's package.json.
        args: Extra command-line arguments passed to each server.
        env: Environment variables for the server as "KEY=VALUE" strings.

    Returns:
        A text result listing the installed servers, marked as an error on failure.
    """
    try:
        strategy = get_strategy(ctx)
        directory = Path(path).expanduser()
        if not directory.exists():
            raise PathNotFoundError(f"Path {path} does not exist locally!")

        entry_points = await resolve_entry_points(directory, notify=ctx.info)
        if not entry_points:
            return success_result(
                f"Nothing to install: {directory}/package.json declares neither 'bin' "
                "nor 'main', so no servers were registered."
            )

        for spec in local_install_specs(entry_points, args or [], env or []):
            await strategy.install(spec.name, spec.command, spec.args, spec.env)
            logger.info("Installed local server %s from %s", spec.name, spec.args[0])

        return success_result(
            f"Installed the following servers via {strategy.method_name} successfully! "
            f"{'; '.join(entry_points)}. {strategy.success_message}"
        )
    except McpInstallerError as exc:
        return error_result(str(exc))
    except Exception as exc:
        await ctx.error(f"Unexpected error in install_local_mcp_server: {exc}")
        return error_result(f"Internal error: {type(exc).__name__}")


def local_install_specs(
    entry_points: dict[str, str],
    args: list[str],
    env: list[str],
) -> list[ServerInstallSpec]:
    """One node launch per entry point, keeping the discovered names as-is."""
    return [
        ServerInstallSpec(
            name=name,
            command=_INTERPRETER,
            args=[script, *args],
            env=list(env),
        )
        for name, script in entry_points.items()
    ]
