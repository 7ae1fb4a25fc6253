"""Domain models for mcp-installer. All frozen dataclasses -- no mutation after creation."""

from __future__ import annotations

from dataclasses import dataclass, field

from mcp.types import CallToolResult, TextContent


@dataclass(frozen=True, slots=True)
class ServerInstallSpec:
    """What to launch for one server: built per install call, never stored."""

    name: str
    command: str
    args: list[str] = field(default_factory=list)
    env: list[str] = field(default_factory=list)  # "KEY=VALUE" entries


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """A single MCP server entry in a client config file."""

    command: str
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        result: dict[str, object] = {"command": self.command, "args": list(self.args)}
        if self.env:
            result["env"] = dict(self.env)
        return result


def parse_env_assignments(env: list[str]) -> dict[str, str]:
    """Turn ``KEY=VALUE`` strings into a mapping, splitting on the first ``=``.

    An entry without ``=`` maps the whole string to an empty value.
    """
    parsed: dict[str, str] = {}
    for assignment in env:
        key, _, value = assignment.partition("=")
        parsed[key] = value
    return parsed


# ─── Tool Return Models ───────────────────────────────────────


def success_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)])


def error_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=True)
