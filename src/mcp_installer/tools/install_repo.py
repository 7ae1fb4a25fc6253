"""install_repo_mcp_server tool -- install a published package as an MCP server."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import Context
from mcp.types import CallToolResult

from mcp_installer.errors import InstallerNotFoundError, McpInstallerError, RuntimeNotFoundError
from mcp_installer.installer.runtime import (
    NODE_INSTALL_URL,
    UV_INSTALL_URL,
    NpmRegistry,
    has_node,
    has_uvx,
)
from mcp_installer.models import ServerInstallSpec, error_result, success_result
from mcp_installer.naming import normalize_server_name
from mcp_installer.tools._helpers import get_npm_registry, get_strategy

logger = logging.getLogger(__name__)


async def install_repo_mcp_server(
    name: str,
    ctx: Context,
    args: list[str] | None = None,
    env: list[str] | None = None,
) -> CallToolResult:
    """Install an MCP server published on npm or PyPI.

    npm packages are launched with npx. Names npm does not know are treated
    as Python packages and launched with uvx, which must be installed.

    Args:
        name: Package name, e.g. "@modelcontextprotocol/server-github" or
            "mcp-server-fetch". A scope prefix is dropped from the server name.
        args: Extra command-line arguments passed to the server.
        env: Environment variables for the server as "KEY=VALUE" strings.

    Returns:
        A text result describing the install, marked as an error on failure.
    """
    try:
        strategy = get_strategy(ctx)
        spec = await build_repo_install_spec(get_npm_registry(ctx), name, args or [], env or [])

        await ctx.info(f"Installing {name} as '{spec.name}' via {strategy.method_name}...")
        await strategy.install(spec.name, spec.command, spec.args, spec.env)
        logger.info("Installed %s as %s with %s", name, spec.name, spec.command)

        return success_result(
            f"Installed MCP server {spec.name} via {strategy.method_name} successfully! "
            f"{strategy.success_message}"
        )
    except McpInstallerError as exc:
        return error_result(str(exc))
    except Exception as exc:
        await ctx.error(f"Unexpected error in install_repo_mcp_server: {exc}")
        return error_result(f"Internal error: {type(exc).__name__}")


async def build_repo_install_spec(
    npm_registry: NpmRegistry,
    name: str,
    args: list[str],
    env: list[str],
) -> ServerInstallSpec:
    """Choose npx or uvx for *name*. Checks Node.js first, uvx only when npm misses.

    Raises:
        RuntimeNotFoundError: Node.js is missing.
        InstallerNotFoundError: The package is not on npm and uvx is missing.
        RegistryError: npm could not say whether the package exists.
    """
    if not await has_node():
        raise RuntimeNotFoundError(
            f"Node.js is not installed, please install it from {NODE_INSTALL_URL}"
        )

    if await npm_registry.has_package(name):
        command = "npx"
    else:
        if not await has_uvx():
            raise InstallerNotFoundError(
                f"{name} was not found on npm, so it must be installed as a Python package, "
                f"but uv is not installed. Tell the user to install it from {UV_INSTALL_URL}"
            )
        command = "uvx"

    return ServerInstallSpec(
        name=normalize_server_name(name),
        command=command,
        args=[name, *args],
        env=list(env),
    )
