"""Runtime and package-runner availability checks, plus npm registry lookups."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from urllib.parse import quote as urlquote

import httpx

from mcp_installer.errors import RegistryError
from mcp_installer.installer.subprocess import command_succeeds

logger = logging.getLogger(__name__)

_DEFAULT_NPM_REGISTRY = "https://registry.npmjs.org"

# Abbreviated packument: enough to prove the package exists, much smaller payload.
_ABBREVIATED_METADATA = "application/vnd.npm.install-v1+json"

NODE_INSTALL_URL = "https://nodejs.org/"
UV_INSTALL_URL = "https://docs.astral.sh/uv/getting-started/installation/"


async def has_node() -> bool:
    """Check that Node.js is installed by running ``node --version``."""
    return await command_succeeds(["node", "--version"])


async def has_uvx() -> bool:
    """Check that uv's package runner is installed by running ``uvx --version``."""
    return await command_succeeds(["uvx", "--version"])


def npm_registry_url() -> str:
    """Base URL of the npm registry, honouring ``NPM_CONFIG_REGISTRY``."""
    return os.environ.get("NPM_CONFIG_REGISTRY", "").rstrip("/") or _DEFAULT_NPM_REGISTRY


@dataclass
class NpmRegistry:
    """Answers whether a package name can be fetched by npx."""

    http: httpx.AsyncClient
    base_url: str = _DEFAULT_NPM_REGISTRY

    async def has_package(self, name: str) -> bool:
        """Return True when the registry serves metadata for *name*, False on 404.

        Raises:
            RegistryError: The registry was unreachable or answered with
                anything else (rate limiting, outage), so existence is unknown.
        """
        encoded = urlquote(name, safe="@")
        try:
            response = await self.http.get(
                f"{self.base_url}/{encoded}",
                headers={"Accept": _ABBREVIATED_METADATA},
            )
        except httpx.HTTPError as exc:
            raise RegistryError(
                f"Could not reach the npm registry at {self.base_url} to look up {name}: {exc}"
            ) from exc

        logger.debug("npm registry lookup for %s returned %s", name, response.status_code)
        if response.status_code == 404:
            return False
        if response.is_success:
            return True

        logger.warning("npm registry lookup for %s returned %s", name, response.status_code)
        raise RegistryError(
            f"The npm registry answered {response.status_code} for {name}, so it is unknown "
            "whether the package is published there. Try again later."
        )
