"""Pull the process-wide install state out of a tool call's Context."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcp.server.fastmcp import Context

if TYPE_CHECKING:
    from mcp_installer.installer.runtime import NpmRegistry
    from mcp_installer.server import AppContext
    from mcp_installer.strategy.base import InstallationStrategy


def _app_state(ctx: Context) -> AppContext:
    from mcp_installer.server import AppContext

    state = ctx.request_context.lifespan_context
    if not isinstance(state, AppContext):
        raise TypeError(
            f"Tool called without the installer lifespan (got {type(state).__name__}); "
            "build the server with app_lifespan so a strategy is selected at startup."
        )
    return state


def get_strategy(ctx: Context) -> InstallationStrategy:
    """The installation strategy picked once at startup."""
    return _app_state(ctx).strategy


def get_npm_registry(ctx: Context) -> NpmRegistry:
    """The npm registry client sharing the lifespan's HTTP connection pool."""
    return _app_state(ctx).npm_registry
