"""MCP server that installs other MCP servers for Claude."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from mcp_installer.installer.runtime import NpmRegistry, npm_registry_url
from mcp_installer.strategy.base import InstallationStrategy
from mcp_installer.strategy.detection import detect_strategy
from mcp_installer.tools.install_local import install_local_mcp_server
from mcp_installer.tools.install_repo import install_repo_mcp_server


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations.

    The strategy is chosen once here and never replaced.
    """

    http_client: httpx.AsyncClient
    npm_registry: NpmRegistry
    strategy: InstallationStrategy


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Probe for the Claude CLI and build shared adapters -- the composition root."""
    strategy = await detect_strategy()
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(30.0, connect=10.0),
        follow_redirects=True,
        limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
        transport=httpx.AsyncHTTPTransport(retries=3),
    ) as http_client:
        yield AppContext(
            http_client=http_client,
            npm_registry=NpmRegistry(http_client, base_url=npm_registry_url()),
            strategy=strategy,
        )


mcp = FastMCP(
    "mcp-installer",
    instructions=(
        "mcp-installer installs other MCP servers for the user.\n\n"
        "- **install_repo_mcp_server** -- install a published package by name. "
        "npm packages run through npx; anything not on npm is tried as a Python "
        "package through uvx.\n"
        "- **install_local_mcp_server** -- install a Node.js MCP server the user "
        "has cloned locally, given the path to its directory.\n\n"
        "Both tools accept optional `args` (extra command-line arguments) and "
        "`env` (a list of KEY=VALUE strings). Ask the user for any API keys a "
        "server needs and pass them through `env`.\n\n"
        "After installing, relay the tool's message: depending on the host, the "
        "server is either available immediately or needs the app to be restarted."
    ),
    lifespan=app_lifespan,
)

# ─── Destructive tools ────────────────────────────────────────
mcp.tool(annotations=ToolAnnotations(destructiveHint=True))(install_repo_mcp_server)
mcp.tool(annotations=ToolAnnotations(destructiveHint=True))(install_local_mcp_server)
