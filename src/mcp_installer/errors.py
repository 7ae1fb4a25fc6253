"""Exception hierarchy for mcp-installer.

All exceptions inherit from McpInstallerError (single catch point).
Messages are written for LLM consumption -- clear, actionable, no stack traces.
"""

from __future__ import annotations


class McpInstallerError(Exception):
    """Base exception for all mcp-installer errors."""


class RuntimeNotFoundError(McpInstallerError):
    """The runtime needed to launch servers (Node.js) is not installed."""


class InstallerNotFoundError(McpInstallerError):
    """Required package runner is not installed."""


class PathNotFoundError(McpInstallerError):
    """A local server path does not exist."""


class ManifestNotFoundError(McpInstallerError):
    """A local directory has no supported package manifest."""


class InvalidManifestError(McpInstallerError):
    """A package manifest exists but cannot be parsed."""


class DependencyInstallError(McpInstallerError):
    """Installing a local project's dependencies failed."""


class RegistrationError(McpInstallerError):
    """The Claude CLI refused to register a server."""


class ConfigWriteError(McpInstallerError):
    """Error writing to the Claude Desktop config file."""


class RegistryError(McpInstallerError):
    """The npm registry could not answer whether a package exists."""
